"""
Shared builders for group, venue and event tests.
"""

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from groups.models import Group, Membership
from groups.services import GroupService

User = get_user_model()

ABOUT = "Enjoy rounds of tennis with a tight-knit group of people on the water facing the Brooklyn Bridge."


def create_user(username, **extra):
    return User.objects.create_user(
        username=username,
        email=f'{username}@example.com',
        password='testpass123',
        first_name=extra.pop('first_name', username.capitalize()),
        last_name=extra.pop('last_name', 'Tester'),
        **extra
    )


def group_fields(**overrides):
    fields = {
        'name': "Evening Tennis on the Water",
        'about': ABOUT,
        'type': Group.GroupType.IN_PERSON,
        'private': True,
        'city': "New York",
        'state': "NY",
    }
    fields.update(overrides)
    return fields


def create_group(organizer, **overrides) -> Group:
    return GroupService.create_group(organizer, **group_fields(**overrides))


def add_membership(group, user, status=Membership.Status.MEMBER) -> Membership:
    """Insert a membership row directly, bypassing the request flow."""
    return Membership.objects.create(group=group, user=user, status=status)


def event_payload(**overrides):
    start = timezone.now() + timedelta(days=30)
    payload = {
        'name': "Tennis Group First Meet and Greet",
        'type': "Online",
        'capacity': 10,
        'price': "18.50",
        'description': "The first meet and greet for our group! Come say hello!",
        'startDate': start.isoformat(),
        'endDate': (start + timedelta(hours=2)).isoformat(),
    }
    payload.update(overrides)
    return payload


def venue_payload(**overrides):
    payload = {
        'address': "123 Disney Lane",
        'city': "New York",
        'state': "NY",
        'lat': 37.7645358,
        'lng': -122.4730327,
    }
    payload.update(overrides)
    return payload


def client_for(user) -> APIClient:
    client = APIClient()
    token, _ = Token.objects.get_or_create(user=user)
    client.credentials(HTTP_AUTHORIZATION=f'Token {token.key}')
    return client
