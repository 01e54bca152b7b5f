"""
Venue services.

Venues belong to a group; the organizer and co-hosts manage them.
"""

import logging

from django.db import transaction

from groups.exceptions import VenueNotFound
from groups.permissions import GroupAction, PermissionChecker
from .models import Venue

logger = logging.getLogger(__name__)


class VenueService:

    @staticmethod
    def get_venue(venue_id) -> Venue:
        try:
            return Venue.objects.select_related('group').get(pk=venue_id)
        except (Venue.DoesNotExist, ValueError, TypeError):
            raise VenueNotFound()

    @staticmethod
    def list_venues(group, viewer):
        """
        All venues of a group (organizer and co-hosts only).

        Raises:
            Forbidden: If viewer is not organizer or co-host
        """
        PermissionChecker(group, viewer).require(GroupAction.VIEW_VENUES)
        return group.venues.all()

    @staticmethod
    @transaction.atomic
    def create_venue(group, created_by, **fields) -> Venue:
        """
        Add a venue to a group.

        Args:
            group: Owning group
            created_by: User performing the action
            **fields: address, city, state, lat, lng (already validated)

        Raises:
            Forbidden: If created_by is not organizer or co-host
        """
        PermissionChecker(group, created_by).require(GroupAction.WRITE_VENUE)

        venue = Venue.objects.create(group=group, **fields)
        logger.info("Venue %s created in group %s by user %s", venue.pk, group.pk, created_by.pk)
        return venue

    @staticmethod
    @transaction.atomic
    def update_venue(venue: Venue, updated_by, **fields) -> Venue:
        """
        Update a venue.

        Raises:
            Forbidden: If updated_by is not organizer or co-host of the venue's group
        """
        PermissionChecker(venue.group, updated_by).require(GroupAction.WRITE_VENUE)

        for name, value in fields.items():
            setattr(venue, name, value)
        venue.save()
        logger.info("Venue %s updated by user %s", venue.pk, updated_by.pk)
        return venue
