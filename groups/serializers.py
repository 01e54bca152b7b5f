"""
Group API serializers.

Organized by purpose:
1. Read serializers (display data)
2. Write serializers (create/update operations)
3. Membership serializers (member list, request, status change)

Field names on the wire are camelCase.
"""

from rest_framework import serializers

from accounts.serializers import UserSummarySerializer
from meetup_backend.utils.messages import uniform_errors
from venues.serializers import VenueSerializer
from .models import Group, Image, Membership


# ==================== Read Serializers (Display) ====================

class ImageSerializer(serializers.ModelSerializer):
    imageableId = serializers.IntegerField(source='imageable_id', read_only=True)

    class Meta:
        model = Image
        fields = ['id', 'imageableId', 'url']
        read_only_fields = fields


class GroupSerializer(serializers.ModelSerializer):
    """
    Basic serializer for groups.

    Used in: list view, current user's groups, create/update responses
    """
    organizerId = serializers.IntegerField(source='organizer_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Group
        fields = [
            'id',
            'organizerId',
            'name',
            'about',
            'type',
            'private',
            'city',
            'state',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class GroupDetailSerializer(GroupSerializer):
    """
    Detailed serializer for a single group.

    Adds images, the organizer summary, venues and the member count.
    """
    numMembers = serializers.SerializerMethodField()
    Images = ImageSerializer(source='images', many=True, read_only=True)
    Organizer = UserSummarySerializer(source='organizer', read_only=True)
    Venues = VenueSerializer(source='venues', many=True, read_only=True)

    class Meta(GroupSerializer.Meta):
        fields = GroupSerializer.Meta.fields + [
            'numMembers',
            'Images',
            'Organizer',
            'Venues',
        ]
        read_only_fields = fields

    def get_numMembers(self, obj):
        return obj.member_count()


class GroupSummarySerializer(serializers.ModelSerializer):
    """
    Minimal group info for embedding in event payloads.
    """
    class Meta:
        model = Group
        fields = ['id', 'name', 'city', 'state']
        read_only_fields = fields


# ==================== Write Serializers (Create/Update) ====================

class GroupWriteSerializer(serializers.Serializer):
    """
    Validates group fields for POST /groups and PUT /groups/{id}.

    Every failing field is reported, each with a single message.
    """
    name = serializers.CharField(
        max_length=60,
        error_messages={
            **uniform_errors("Name must be 60 characters or less"),
            'required': "Name is required",
            'blank': "Name is required",
        }
    )

    about = serializers.CharField(
        min_length=50,
        error_messages=uniform_errors("About must be 50 characters or more")
    )

    type = serializers.ChoiceField(
        choices=Group.GroupType.choices,
        error_messages=uniform_errors("Type must be 'Online' or 'In person'")
    )

    private = serializers.BooleanField(
        error_messages=uniform_errors("Private must be a boolean")
    )

    city = serializers.CharField(
        max_length=100,
        error_messages=uniform_errors("City is required")
    )

    state = serializers.CharField(
        max_length=100,
        error_messages=uniform_errors("State is required")
    )

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name is required")
        return value.strip()


class ImageCreateSerializer(serializers.Serializer):
    """
    POST /groups/{id}/images
    """
    url = serializers.URLField(
        max_length=500,
        error_messages=uniform_errors("Url must be a valid URL")
    )


# ==================== Membership Serializers ====================

class MemberSerializer(serializers.ModelSerializer):
    """
    One entry of a group's member list.

    Contact fields are only included when the serializer context carries
    `full_view=True` (organizer and co-hosts).
    """
    id = serializers.IntegerField(source='user.id', read_only=True)
    firstName = serializers.CharField(source='user.first_name', read_only=True)
    lastName = serializers.CharField(source='user.last_name', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    Membership = serializers.SerializerMethodField()

    class Meta:
        model = Membership
        fields = ['id', 'firstName', 'lastName', 'email', 'Membership']
        read_only_fields = fields

    def get_Membership(self, obj):
        return {'status': obj.status}

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not self.context.get('full_view', False):
            data.pop('email', None)
        return data


class MembershipSerializer(serializers.ModelSerializer):
    """
    Membership row as returned by request/status-change endpoints.
    """
    groupId = serializers.IntegerField(source='group_id', read_only=True)
    memberId = serializers.IntegerField(source='user_id', read_only=True)

    class Meta:
        model = Membership
        fields = ['id', 'groupId', 'memberId', 'status']
        read_only_fields = fields


class MemberReferenceSerializer(serializers.Serializer):
    """
    DELETE /groups/{id}/members

    `memberId` defaults to the caller (leaving the group).
    """
    memberId = serializers.IntegerField(
        required=False,
        error_messages=uniform_errors("Member id must be an integer")
    )


class MembershipStatusSerializer(serializers.Serializer):
    """
    PUT /groups/{id}/members

    `status` is checked by the service so that a "pending" target gets its
    own message.
    """
    memberId = serializers.IntegerField(
        error_messages=uniform_errors("Member id must be an integer")
    )

    status = serializers.CharField(
        error_messages=uniform_errors("Status is required")
    )
