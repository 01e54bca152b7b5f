"""
Groups app models.

Defines:
- Group: A meetup group owned by a single organizer
- Membership: A user's standing in a group (pending, member, co-host)
- Image: Polymorphic image attachment (groups use it today)
"""

from django.conf import settings
from django.contrib.contenttypes.fields import GenericForeignKey, GenericRelation
from django.contrib.contenttypes.models import ContentType
from django.db import models


class Image(models.Model):
    """
    Image attached to any model through the contenttypes framework.

    `imageable_id` is the parent's primary key; there is no typed foreign key.
    """
    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    imageable_id = models.PositiveBigIntegerField()
    imageable = GenericForeignKey('content_type', 'imageable_id')

    url = models.URLField(max_length=500)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'groups_image'
        ordering = ['id']
        indexes = [
            models.Index(fields=['content_type', 'imageable_id'], name='groups_image_parent_idx'),
        ]

    def __str__(self):
        return self.url


class Group(models.Model):
    """
    Meetup group.

    The organizer is whoever `organizer` points at. Organizer rights are never
    derived from Membership rows.
    """

    class GroupType(models.TextChoices):
        ONLINE = 'Online', 'Online'
        IN_PERSON = 'In person', 'In person'

    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='organized_groups'
    )

    name = models.CharField(max_length=60)
    about = models.TextField()
    type = models.CharField(max_length=20, choices=GroupType.choices)
    private = models.BooleanField(default=False)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)

    # Deleting a group deletes its images with it
    images = GenericRelation(
        Image,
        object_id_field='imageable_id',
        related_query_name='group'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'groups_group'
        ordering = ['id']
        indexes = [
            models.Index(fields=['organizer'], name='groups_group_organizer_idx'),
        ]

    def __str__(self):
        return self.name

    # ==================== Helper Methods ====================

    def is_organizer(self, user) -> bool:
        return user is not None and user.pk is not None and self.organizer_id == user.pk

    def get_membership(self, user):
        """
        Get the Membership row for a user, if any.

        Args:
            user: User instance

        Returns:
            Membership or None
        """
        if user is None or user.pk is None:
            return None
        return self.memberships.filter(user_id=user.pk).first()

    def member_count(self) -> int:
        """Organizer plus every approved (non-pending) membership."""
        return 1 + self.memberships.exclude(status=Membership.Status.PENDING).count()


class Membership(models.Model):
    """
    A user's membership in a group.

    Status transitions:
        (none) -> pending     self request
        pending -> member     organizer or co-host
        member -> co-host     organizer only

    Constraints:
    - Unique (user, group) pair, enforced by the database
    - "organizer" is never a stored status
    """

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        MEMBER = 'member', 'Member'
        CO_HOST = 'co-host', 'Co-host'

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='memberships'
    )

    group = models.ForeignKey(
        Group,
        on_delete=models.CASCADE,
        related_name='memberships'
    )

    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.PENDING
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'groups_membership'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'group'],
                name='uniq_membership_user_group',
            )
        ]
        indexes = [
            models.Index(fields=['group', 'status'], name='groups_membership_status_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.get_status_display()} in {self.group}"

    @property
    def is_pending(self) -> bool:
        return self.status == self.Status.PENDING
