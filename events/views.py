from rest_framework import permissions, status, viewsets
from rest_framework.response import Response

from groups.exceptions import GroupError, error_response
from groups.permissions import GroupAction, PermissionChecker
from .models import Event
from .serializers import (
    EventDetailSerializer,
    EventListSerializer,
    EventSerializer,
    EventWriteSerializer,
)
from .services import EventService


class EventViewSet(viewsets.GenericViewSet):
    """
    ViewSet for events addressed directly by id.

    Endpoints:
    - GET    /api/events         - List all events
    - GET    /api/events/{id}    - Event details
    - PUT    /api/events/{id}    - Update event (organizer/co-host)
    - DELETE /api/events/{id}    - Delete event (organizer/co-host)
    """
    queryset = Event.objects.all()
    serializer_class = EventSerializer
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = r'\d+'

    public_actions = ('list', 'retrieve')

    def get_permissions(self):
        if self.action in self.public_actions:
            return [permissions.AllowAny()]
        return super().get_permissions()

    def list(self, request):
        events = EventService.list_events()
        return Response({'Events': EventListSerializer(events, many=True).data})

    def retrieve(self, request, pk=None):
        try:
            event = EventService.get_event(pk)
        except GroupError as e:
            return error_response(e)

        return Response(EventDetailSerializer(event).data)

    def update(self, request, pk=None):
        try:
            event = EventService.get_event(pk)
            PermissionChecker(event.group, request.user).require(GroupAction.UPDATE_EVENT)

            serializer = EventWriteSerializer(data=request.data, context={'group': event.group})
            serializer.is_valid(raise_exception=True)

            event = EventService.update_event(event, request.user, **serializer.validated_data)
        except GroupError as e:
            return error_response(e)

        return Response(EventSerializer(event).data)

    def destroy(self, request, pk=None):
        try:
            event = EventService.get_event(pk)
            EventService.delete_event(event, request.user)
        except GroupError as e:
            return error_response(e)

        return Response(
            {'message': "Successfully deleted", 'statusCode': status.HTTP_200_OK},
            status=status.HTTP_200_OK
        )
