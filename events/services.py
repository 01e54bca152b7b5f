"""
Event services.

Handles listing, creating, updating and deleting events. Writes are limited
to the group's organizer and co-hosts.
"""

import logging

from django.db import transaction

from groups.exceptions import EventNotFound
from groups.permissions import GroupAction, PermissionChecker
from .models import Event

logger = logging.getLogger(__name__)


class EventService:
    """Service for group events."""

    @staticmethod
    def list_events(group=None):
        """
        Events, optionally limited to one group.

        Args:
            group: Group to filter by (optional)

        Returns:
            QuerySet of Event with group and venue loaded
        """
        events = Event.objects.select_related('group', 'venue')
        if group is not None:
            events = events.filter(group=group)
        return events

    @staticmethod
    def get_event(event_id) -> Event:
        try:
            return Event.objects.select_related('group', 'venue').get(pk=event_id)
        except (Event.DoesNotExist, ValueError, TypeError):
            raise EventNotFound()

    @staticmethod
    @transaction.atomic
    def create_event(group, created_by, **fields) -> Event:
        """
        Schedule an event for a group.

        Args:
            group: Owning group
            created_by: User performing the action
            **fields: Validated event fields (venue_id, name, type, capacity,
                price, description, start_date, end_date)

        Raises:
            Forbidden: If created_by is not organizer or co-host
        """
        PermissionChecker(group, created_by).require(GroupAction.CREATE_EVENT)

        event = Event.objects.create(group=group, **fields)
        logger.info("Event %s created in group %s by user %s", event.pk, group.pk, created_by.pk)
        return event

    @staticmethod
    @transaction.atomic
    def update_event(event: Event, updated_by, **fields) -> Event:
        """
        Update an event.

        Raises:
            Forbidden: If updated_by is not organizer or co-host of the event's group
        """
        PermissionChecker(event.group, updated_by).require(GroupAction.UPDATE_EVENT)

        for name, value in fields.items():
            setattr(event, name, value)
        event.save()
        logger.info("Event %s updated by user %s", event.pk, updated_by.pk)
        return event

    @staticmethod
    @transaction.atomic
    def delete_event(event: Event, deleted_by):
        """
        Delete an event.

        Raises:
            Forbidden: If deleted_by is not organizer or co-host of the event's group
        """
        PermissionChecker(event.group, deleted_by).require(GroupAction.DELETE_EVENT)

        event_id = event.pk
        event.delete()
        logger.info("Event %s deleted by user %s", event_id, deleted_by.pk)
