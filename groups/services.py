"""
Group and membership services.

Handles all business logic for:
- Creating, updating and deleting groups
- Attaching images to groups
- Requesting memberships
- Changing membership status
- Deleting memberships

All operations enforce permission checks and maintain data integrity.
"""

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from .exceptions import (
    DuplicateRequest,
    GroupNotFound,
    MembershipNotFound,
    UserNotFound,
    ValidationFailed,
)
from .models import Group, Image, Membership
from .permissions import GroupAction, PermissionChecker, Role

User = get_user_model()

logger = logging.getLogger(__name__)


class GroupService:
    """Service for group-level operations."""

    @staticmethod
    def get_group(group_id) -> Group:
        """
        Load a group or raise GroupNotFound.

        Args:
            group_id: Primary key

        Returns:
            Group
        """
        try:
            return Group.objects.select_related('organizer').get(pk=group_id)
        except (Group.DoesNotExist, ValueError, TypeError):
            raise GroupNotFound()

    @staticmethod
    def organized_by(user):
        """Groups whose organizer is `user`."""
        return Group.objects.filter(organizer=user)

    @staticmethod
    @transaction.atomic
    def create_group(organizer: User, **fields) -> Group:
        """
        Create a new group with the creator as organizer.

        Args:
            organizer: User creating the group
            **fields: name, about, type, private, city, state (already validated)

        Returns:
            Group: Created group instance
        """
        group = Group.objects.create(organizer=organizer, **fields)
        logger.info("Group %s created by user %s", group.pk, organizer.pk)
        return group

    @staticmethod
    @transaction.atomic
    def update_group(group: Group, updated_by: User, **fields) -> Group:
        """
        Update group fields.

        Args:
            group: Group to update
            updated_by: User performing update
            **fields: Validated subset of name, about, type, private, city, state

        Returns:
            Group: Updated group instance

        Raises:
            Forbidden: If updated_by is not the organizer
        """
        PermissionChecker(group, updated_by).require(GroupAction.UPDATE_GROUP)

        changes = {
            name: value for name, value in fields.items()
            if getattr(group, name) != value
        }
        if changes:
            for name, value in changes.items():
                setattr(group, name, value)
            group.save()
            logger.info("Group %s updated: %s", group.pk, sorted(changes))

        return group

    @staticmethod
    @transaction.atomic
    def delete_group(group: Group, deleted_by: User):
        """
        Delete a group.

        Venues, events, memberships and images go with it.

        Raises:
            Forbidden: If deleted_by is not the organizer
        """
        PermissionChecker(group, deleted_by).require(GroupAction.DELETE_GROUP)

        group_id = group.pk
        group.delete()
        logger.info("Group %s deleted by user %s", group_id, deleted_by.pk)


class GroupImageService:
    """Service for group images."""

    @staticmethod
    @transaction.atomic
    def add_image(group: Group, url: str, added_by: User) -> Image:
        """
        Attach an image to a group (organizer only).

        Raises:
            Forbidden: If added_by is not the organizer
        """
        PermissionChecker(group, added_by).require(GroupAction.ADD_GROUP_IMAGE)

        image = Image.objects.create(imageable=group, url=url)
        logger.info("Image %s added to group %s", image.pk, group.pk)
        return image


class MembershipService:
    """Service for managing group memberships."""

    @staticmethod
    def list_members(group: Group, viewer: Optional[User]):
        """
        Memberships visible to `viewer`.

        Organizer and co-hosts see every row including pending requests;
        everyone else sees approved members only.

        Returns:
            tuple: (QuerySet of Membership, bool full_view)
        """
        checker = PermissionChecker(group, viewer)
        checker.require(GroupAction.VIEW_MEMBERS)

        memberships = group.memberships.select_related('user')
        full_view = checker.can(GroupAction.VIEW_ALL_MEMBERS)
        if not full_view:
            memberships = memberships.exclude(status=Membership.Status.PENDING)
        return memberships, full_view

    @staticmethod
    @transaction.atomic
    def request_membership(group: Group, user: User) -> Membership:
        """
        Create a pending membership for the requesting user.

        The (user, group) unique constraint settles races: the losing insert
        fails inside its savepoint and is reported like any other duplicate.

        Raises:
            DuplicateRequest: If the user already has a row, or organizes the group
        """
        checker = PermissionChecker(group, user)
        if checker.role == Role.PENDING:
            raise DuplicateRequest(DuplicateRequest.PENDING)
        if checker.role != Role.NONE:
            raise DuplicateRequest(DuplicateRequest.MEMBER)
        checker.require(GroupAction.REQUEST_MEMBERSHIP)

        try:
            with transaction.atomic():
                membership = Membership.objects.create(
                    group=group,
                    user=user,
                    status=Membership.Status.PENDING
                )
        except IntegrityError:
            existing = Membership.objects.get(group=group, user=user)
            logger.info(
                "Concurrent membership request for user %s in group %s",
                user.pk, group.pk
            )
            raise DuplicateRequest.for_membership(existing)

        logger.info("User %s requested membership in group %s", user.pk, group.pk)
        return membership

    @staticmethod
    @transaction.atomic
    def change_status(
        group: Group,
        member_id,
        status: str,
        changed_by: User
    ) -> Membership:
        """
        Move a membership along pending -> member -> co-host.

        Only the organizer may move a co-host back to member.

        Args:
            group: Group
            member_id: ID of the user whose membership changes
            status: Target status ("member" or "co-host")
            changed_by: User performing the action

        Returns:
            Membership: Updated membership

        Raises:
            ValidationFailed: Target is "pending" or not a known status
            UserNotFound: No such user
            MembershipNotFound: User exists but has no row in this group
            Forbidden: Caller's role does not allow the transition
                (co-hosts may approve requests but not promote or demote co-hosts)
        """
        if status == Membership.Status.PENDING:
            raise ValidationFailed(
                {'status': "Cannot change a membership status to 'pending'"}
            )
        if status not in (Membership.Status.MEMBER, Membership.Status.CO_HOST):
            raise ValidationFailed({'status': "Status must be 'member' or 'co-host'"})

        if not User.objects.filter(pk=member_id).exists():
            raise UserNotFound()

        membership = (
            Membership.objects
            .select_for_update()
            .filter(group=group, user_id=member_id)
            .first()
        )
        if membership is None:
            raise MembershipNotFound()

        checker = PermissionChecker(group, changed_by)
        if status == Membership.Status.CO_HOST:
            checker.require(GroupAction.PROMOTE_TO_COHOST)
        elif membership.status == Membership.Status.CO_HOST:
            checker.require(GroupAction.DEMOTE_COHOST)
        else:
            checker.require(GroupAction.PROMOTE_TO_MEMBER)

        if membership.status != status:
            old_status = membership.status
            membership.status = status
            membership.save(update_fields=['status', 'updated_at'])
            logger.info(
                "Membership %s in group %s: %s -> %s (by user %s)",
                membership.pk, group.pk, old_status, status, changed_by.pk
            )

        return membership

    @staticmethod
    @transaction.atomic
    def delete_membership(group: Group, member_id, deleted_by: User):
        """
        Remove a membership.

        Allowed for the organizer (any membership) and for the membership's
        own user.

        Raises:
            UserNotFound: No such user
            MembershipNotFound: User has no row in this group
            Forbidden: Caller is neither organizer nor owner
        """
        if not User.objects.filter(pk=member_id).exists():
            raise UserNotFound()

        membership = Membership.objects.filter(group=group, user_id=member_id).first()
        if membership is None:
            raise MembershipNotFound()

        is_owner = membership.user_id == deleted_by.pk
        if not is_owner:
            PermissionChecker(group, deleted_by).require(GroupAction.DELETE_ANY_MEMBERSHIP)

        membership_id = membership.pk
        membership.delete()
        logger.info(
            "Membership %s removed from group %s by user %s",
            membership_id, group.pk, deleted_by.pk
        )
