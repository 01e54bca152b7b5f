from rest_framework import serializers

from meetup_backend.utils.messages import uniform_errors
from .models import Venue


class VenueSerializer(serializers.ModelSerializer):
    groupId = serializers.IntegerField(source='group_id', read_only=True)

    class Meta:
        model = Venue
        fields = ['id', 'groupId', 'address', 'city', 'state', 'lat', 'lng']
        read_only_fields = fields


class VenueSummarySerializer(serializers.ModelSerializer):
    """Venue info embedded in event payloads."""

    class Meta:
        model = Venue
        fields = ['id', 'city', 'state']
        read_only_fields = fields


class VenueWriteSerializer(serializers.Serializer):
    """
    Validates venue fields for create and update.

    Every failing field is reported, each with a single message.
    """
    address = serializers.CharField(
        max_length=255,
        error_messages=uniform_errors("Street address is required")
    )
    city = serializers.CharField(
        max_length=100,
        error_messages=uniform_errors("City is required")
    )
    state = serializers.CharField(
        max_length=100,
        error_messages=uniform_errors("State is required")
    )
    lat = serializers.FloatField(
        min_value=-90,
        max_value=90,
        error_messages=uniform_errors("Latitude is not valid")
    )
    lng = serializers.FloatField(
        min_value=-180,
        max_value=180,
        error_messages=uniform_errors("Longitude is not valid")
    )
