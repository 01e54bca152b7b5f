"""
Events app models.

An Event belongs to one group and is optionally held at one of the group's
venues.
"""

from django.core.exceptions import ValidationError
from django.db import models


class Event(models.Model):

    class EventType(models.TextChoices):
        ONLINE = 'Online', 'Online'
        IN_PERSON = 'In person', 'In person'

    group = models.ForeignKey(
        'groups.Group',
        on_delete=models.CASCADE,
        related_name='events'
    )

    venue = models.ForeignKey(
        'venues.Venue',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='events'
    )

    name = models.CharField(max_length=255)
    type = models.CharField(max_length=20, choices=EventType.choices)
    capacity = models.PositiveIntegerField()
    price = models.DecimalField(max_digits=8, decimal_places=2)
    description = models.TextField()
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'events_event'
        ordering = ['start_date', 'id']
        indexes = [
            models.Index(fields=['group', 'start_date'], name='events_event_group_start_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gt=models.F('start_date')),
                name='event_end_after_start',
            ),
        ]

    def __str__(self):
        return self.name

    def clean(self):
        super().clean()
        if self.venue_id is not None and self.venue.group_id != self.group_id:
            raise ValidationError({'venue': "Venue belongs to a different group"})
