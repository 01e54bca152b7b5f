"""
Group API views.

Thin viewset that delegates all business logic to services.
Responsibilities:
1. Parse HTTP requests
2. Validate input format
3. Call service methods
4. Turn domain errors into HTTP responses
5. Format HTTP responses
"""

from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from events.serializers import EventListSerializer, EventSerializer, EventWriteSerializer
from events.services import EventService
from venues.serializers import VenueSerializer, VenueWriteSerializer
from venues.services import VenueService
from .exceptions import GroupError, error_response
from .models import Group
from .permissions import GroupAction, PermissionChecker
from .serializers import (
    GroupSerializer,
    GroupDetailSerializer,
    GroupWriteSerializer,
    ImageCreateSerializer,
    ImageSerializer,
    MemberSerializer,
    MembershipSerializer,
    MembershipStatusSerializer,
    MemberReferenceSerializer,
)
from .services import GroupService, GroupImageService, MembershipService


class GroupViewSet(viewsets.GenericViewSet):
    """
    ViewSet for groups and the resources they own.

    Endpoints:
    - GET    /api/groups                      - List all groups
    - GET    /api/groups/current              - Groups organized by the caller
    - POST   /api/groups                      - Create a group
    - GET    /api/groups/{id}                 - Group details
    - PUT    /api/groups/{id}                 - Update group (organizer)
    - DELETE /api/groups/{id}                 - Delete group (organizer)
    - POST   /api/groups/{id}/images          - Add image (organizer)
    - GET    /api/groups/{id}/venues          - List venues (organizer/co-host)
    - POST   /api/groups/{id}/venues          - Create venue (organizer/co-host)
    - GET    /api/groups/{id}/events          - List events
    - POST   /api/groups/{id}/events          - Create event (organizer/co-host)
    - GET    /api/groups/{id}/members         - List members
    - POST   /api/groups/{id}/members         - Request membership
    - PUT    /api/groups/{id}/members         - Change membership status
    - DELETE /api/groups/{id}/members         - Delete membership
    """

    queryset = Group.objects.all()
    serializer_class = GroupSerializer
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = r'\d+'

    public_actions = ('list', 'retrieve', 'events')

    def get_permissions(self):
        if self.action in self.public_actions:
            return [permissions.AllowAny()]
        return super().get_permissions()

    def get_group(self) -> Group:
        return GroupService.get_group(self.kwargs['pk'])

    # ==================== CRUD Operations ====================

    def list(self, request):
        """
        GET /api/groups
        """
        groups = Group.objects.all()
        return Response(GroupSerializer(groups, many=True).data)

    @action(detail=False, methods=['get'])
    def current(self, request):
        """
        GET /api/groups/current
        """
        groups = GroupService.organized_by(request.user)
        return Response({'Groups': GroupSerializer(groups, many=True).data})

    def retrieve(self, request, pk=None):
        """
        GET /api/groups/{id}
        """
        try:
            group = self.get_group()
        except GroupError as e:
            return error_response(e)

        return Response(GroupDetailSerializer(group).data)

    def create(self, request):
        """
        Create a new group with the caller as organizer.

        POST /api/groups
        Body: {
            "name": "Evening Tennis on the Water",
            "about": "Enjoy rounds of tennis with a tight-nit group of people...",
            "type": "In person",
            "private": true,
            "city": "New York",
            "state": "NY"
        }
        """
        serializer = GroupWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = GroupService.create_group(request.user, **serializer.validated_data)

        return Response(GroupSerializer(group).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None, partial=False):
        """
        PUT /api/groups/{id}
        """
        try:
            group = self.get_group()
            PermissionChecker(group, request.user).require(GroupAction.UPDATE_GROUP)

            serializer = GroupWriteSerializer(data=request.data, partial=partial)
            serializer.is_valid(raise_exception=True)

            group = GroupService.update_group(group, request.user, **serializer.validated_data)
        except GroupError as e:
            return error_response(e)

        return Response(GroupSerializer(group).data)

    def partial_update(self, request, pk=None):
        """PATCH - same as update but allows partial data."""
        return self.update(request, pk, partial=True)

    def destroy(self, request, pk=None):
        """
        DELETE /api/groups/{id}
        """
        try:
            group = self.get_group()
            GroupService.delete_group(group, request.user)
        except GroupError as e:
            return error_response(e)

        return Response(
            {'message': "Successfully deleted", 'statusCode': status.HTTP_200_OK},
            status=status.HTTP_200_OK
        )

    # ==================== Images ====================

    @action(detail=True, methods=['post'])
    def images(self, request, pk=None):
        """
        POST /api/groups/{id}/images
        Body: {"url": "https://..."}
        """
        try:
            group = self.get_group()
            PermissionChecker(group, request.user).require(GroupAction.ADD_GROUP_IMAGE)

            serializer = ImageCreateSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            image = GroupImageService.add_image(group, serializer.validated_data['url'], request.user)
        except GroupError as e:
            return error_response(e)

        return Response(ImageSerializer(image).data, status=status.HTTP_201_CREATED)

    # ==================== Venues ====================

    @action(detail=True, methods=['get'])
    def venues(self, request, pk=None):
        """
        GET /api/groups/{id}/venues
        """
        try:
            group = self.get_group()
            venues = VenueService.list_venues(group, request.user)
        except GroupError as e:
            return error_response(e)

        return Response({'Venues': VenueSerializer(venues, many=True).data})

    @venues.mapping.post
    def create_venue(self, request, pk=None):
        """
        POST /api/groups/{id}/venues
        Body: {"address": "123 Disney Lane", "city": "New York", "state": "NY",
               "lat": 37.7645358, "lng": -122.4730327}
        """
        try:
            group = self.get_group()
            PermissionChecker(group, request.user).require(GroupAction.WRITE_VENUE)

            serializer = VenueWriteSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            venue = VenueService.create_venue(group, request.user, **serializer.validated_data)
        except GroupError as e:
            return error_response(e)

        return Response(VenueSerializer(venue).data, status=status.HTTP_201_CREATED)

    # ==================== Events ====================

    @action(detail=True, methods=['get'])
    def events(self, request, pk=None):
        """
        GET /api/groups/{id}/events
        """
        try:
            group = self.get_group()
        except GroupError as e:
            return error_response(e)

        events = EventService.list_events(group=group)
        return Response({'Events': EventListSerializer(events, many=True).data})

    @events.mapping.post
    def create_event(self, request, pk=None):
        """
        POST /api/groups/{id}/events
        Body: {"venueId": 1, "name": "Tennis Group First Meet and Greet",
               "type": "Online", "capacity": 10, "price": 18.50,
               "description": "The first meet and greet for our group!",
               "startDate": "2030-11-19T20:00:00Z", "endDate": "2030-11-19T22:00:00Z"}
        """
        try:
            group = self.get_group()
            PermissionChecker(group, request.user).require(GroupAction.CREATE_EVENT)

            serializer = EventWriteSerializer(data=request.data, context={'group': group})
            serializer.is_valid(raise_exception=True)

            event = EventService.create_event(group, request.user, **serializer.validated_data)
        except GroupError as e:
            return error_response(e)

        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)

    # ==================== Members ====================

    @action(detail=True, methods=['get'])
    def members(self, request, pk=None):
        """
        GET /api/groups/{id}/members

        Pending requests and emails are only shown to the organizer and co-hosts.
        """
        try:
            group = self.get_group()
            memberships, full_view = MembershipService.list_members(group, request.user)
        except GroupError as e:
            return error_response(e)

        data = MemberSerializer(memberships, many=True, context={'full_view': full_view}).data
        return Response({'Members': data})

    @members.mapping.post
    def request_membership(self, request, pk=None):
        """
        POST /api/groups/{id}/members
        """
        try:
            group = self.get_group()
            membership = MembershipService.request_membership(group, request.user)
        except GroupError as e:
            return error_response(e)

        return Response(MembershipSerializer(membership).data, status=status.HTTP_201_CREATED)

    @members.mapping.put
    def change_membership_status(self, request, pk=None):
        """
        PUT /api/groups/{id}/members
        Body: {"memberId": 2, "status": "member"}
        """
        try:
            group = self.get_group()

            serializer = MembershipStatusSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            membership = MembershipService.change_status(
                group,
                member_id=serializer.validated_data['memberId'],
                status=serializer.validated_data['status'],
                changed_by=request.user
            )
        except GroupError as e:
            return error_response(e)

        return Response(MembershipSerializer(membership).data)

    @members.mapping.delete
    def delete_membership(self, request, pk=None):
        """
        DELETE /api/groups/{id}/members
        Body: {"memberId": 2}   (omit to leave the group yourself)
        """
        try:
            group = self.get_group()

            serializer = MemberReferenceSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            MembershipService.delete_membership(
                group,
                member_id=serializer.validated_data.get('memberId', request.user.pk),
                deleted_by=request.user
            )
        except GroupError as e:
            return error_response(e)

        return Response(
            {'message': "Successfully deleted membership from group", 'statusCode': status.HTTP_200_OK},
            status=status.HTTP_200_OK
        )
