from rest_framework import permissions, viewsets
from rest_framework.response import Response

from groups.exceptions import GroupError, error_response
from groups.permissions import GroupAction, PermissionChecker
from .models import Venue
from .serializers import VenueSerializer, VenueWriteSerializer
from .services import VenueService


class VenueViewSet(viewsets.GenericViewSet):
    """
    ViewSet for venues addressed directly by id.

    Endpoints:
    - PUT /api/venues/{id} - Update a venue (organizer/co-host of its group)

    Listing and creation live under /api/groups/{id}/venues.
    """
    queryset = Venue.objects.all()
    serializer_class = VenueSerializer
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = r'\d+'

    def update(self, request, pk=None, partial=False):
        try:
            venue = VenueService.get_venue(pk)
            PermissionChecker(venue.group, request.user).require(GroupAction.WRITE_VENUE)

            serializer = VenueWriteSerializer(data=request.data, partial=partial)
            serializer.is_valid(raise_exception=True)

            venue = VenueService.update_venue(venue, request.user, **serializer.validated_data)
        except GroupError as e:
            return error_response(e)

        return Response(VenueSerializer(venue).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk, partial=True)
