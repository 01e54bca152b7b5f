"""
Event API serializers.

1. Read serializers: full event, list summary, detail with nested group/venue
2. Write serializer: field validation for create/update
"""

from django.utils import timezone
from rest_framework import serializers

from groups.serializers import GroupSummarySerializer
from meetup_backend.utils.messages import uniform_errors
from venues.models import Venue
from venues.serializers import VenueSummarySerializer
from .models import Event


# ==================== Read Serializers ====================

class EventSerializer(serializers.ModelSerializer):
    """Every stored field of an event."""
    groupId = serializers.IntegerField(source='group_id', read_only=True)
    venueId = serializers.IntegerField(source='venue_id', read_only=True, allow_null=True)
    price = serializers.DecimalField(
        max_digits=8, decimal_places=2, coerce_to_string=False, read_only=True
    )
    startDate = serializers.DateTimeField(source='start_date', read_only=True)
    endDate = serializers.DateTimeField(source='end_date', read_only=True)

    class Meta:
        model = Event
        fields = [
            'id',
            'groupId',
            'venueId',
            'name',
            'type',
            'capacity',
            'price',
            'description',
            'startDate',
            'endDate',
        ]
        read_only_fields = fields


class EventListSerializer(serializers.ModelSerializer):
    """
    Event summary for listings.

    Leaves out description, capacity and price.
    """
    groupId = serializers.IntegerField(source='group_id', read_only=True)
    venueId = serializers.IntegerField(source='venue_id', read_only=True, allow_null=True)
    startDate = serializers.DateTimeField(source='start_date', read_only=True)
    endDate = serializers.DateTimeField(source='end_date', read_only=True)
    Group = GroupSummarySerializer(source='group', read_only=True)
    Venue = VenueSummarySerializer(source='venue', read_only=True, allow_null=True)

    class Meta:
        model = Event
        fields = [
            'id',
            'groupId',
            'venueId',
            'name',
            'type',
            'startDate',
            'endDate',
            'Group',
            'Venue',
        ]
        read_only_fields = fields


class EventDetailSerializer(EventSerializer):
    Group = GroupSummarySerializer(source='group', read_only=True)
    Venue = VenueSummarySerializer(source='venue', read_only=True, allow_null=True)

    class Meta(EventSerializer.Meta):
        fields = EventSerializer.Meta.fields + ['Group', 'Venue']
        read_only_fields = fields


# ==================== Write Serializer ====================

class EventWriteSerializer(serializers.Serializer):
    """
    Validates event fields.

    Context:
        group: Group the event belongs to (venue must be one of its venues)

    Date rules are checked per field so they are reported together with any
    other failing field.
    """
    venueId = serializers.IntegerField(
        source='venue_id',
        required=False,
        allow_null=True,
        error_messages=uniform_errors("Venue does not exist")
    )
    name = serializers.CharField(
        min_length=5,
        max_length=255,
        error_messages=uniform_errors("Name must be at least 5 characters")
    )
    type = serializers.ChoiceField(
        choices=Event.EventType.choices,
        error_messages=uniform_errors("Type must be Online or In person")
    )
    capacity = serializers.IntegerField(
        min_value=0,
        error_messages=uniform_errors("Capacity must be an integer")
    )
    price = serializers.DecimalField(
        max_digits=8,
        decimal_places=2,
        min_value=0,
        error_messages=uniform_errors("Price is invalid")
    )
    description = serializers.CharField(
        error_messages=uniform_errors("Description is required")
    )
    startDate = serializers.DateTimeField(
        source='start_date',
        error_messages=uniform_errors("Start date must be in the future")
    )
    endDate = serializers.DateTimeField(
        source='end_date',
        error_messages=uniform_errors("End date is less than start date")
    )

    def validate_venueId(self, value):
        if value is None:
            return value
        group = self.context['group']
        if not Venue.objects.filter(pk=value, group=group).exists():
            raise serializers.ValidationError("Venue does not exist")
        return value

    def validate_startDate(self, value):
        if value <= timezone.now():
            raise serializers.ValidationError("Start date must be in the future")
        return value

    def validate_endDate(self, value):
        start = self._submitted_start_date()
        if start is not None and value <= start:
            raise serializers.ValidationError("End date is less than start date")
        return value

    def _submitted_start_date(self):
        """Parse startDate from the raw input; None if missing or malformed."""
        raw = self.initial_data.get('startDate')
        if raw in (None, ''):
            return None
        try:
            return self.fields['startDate'].to_internal_value(raw)
        except serializers.ValidationError:
            return None
