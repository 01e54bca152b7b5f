"""
Tests for event endpoints.
"""

from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from events.models import Event
from events.services import EventService
from groups.exceptions import EventNotFound, Forbidden
from groups.models import Membership
from groups.tests.helpers import (
    add_membership,
    client_for,
    create_group,
    create_user,
    event_payload,
    venue_payload,
)
from venues.models import Venue


class EventAPITestCase(TestCase):
    """Group with an organizer, a co-host, a member and one scheduled event."""

    def setUp(self):
        self.organizer = create_user('olive')
        self.cohost = create_user('carol')
        self.member = create_user('mike')
        self.group = create_group(self.organizer)
        add_membership(self.group, self.cohost, Membership.Status.CO_HOST)
        add_membership(self.group, self.member, Membership.Status.MEMBER)
        self.venue = Venue.objects.create(group=self.group, **venue_payload())

        response = client_for(self.organizer).post(
            f'/api/groups/{self.group.pk}/events',
            event_payload(venueId=self.venue.pk)
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.event = Event.objects.get(pk=response.data['id'])


class EventReadAPITests(EventAPITestCase):

    def test_list_all_events(self):
        response = APIClient().get('/api/events')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        entry = response.data['Events'][0]
        self.assertEqual(entry['id'], self.event.pk)
        self.assertEqual(entry['Group']['id'], self.group.pk)
        self.assertEqual(entry['Venue']['id'], self.venue.pk)
        for hidden in ('description', 'capacity', 'price'):
            self.assertNotIn(hidden, entry)

    def test_list_group_events(self):
        other = create_group(self.organizer, name="Morning Runs")

        response = APIClient().get(f'/api/groups/{other.pk}/events')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['Events'], [])

    def test_event_detail(self):
        response = APIClient().get(f'/api/events/{self.event.pk}')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['price'], 18.5)
        self.assertEqual(response.data['capacity'], 10)
        self.assertEqual(response.data['Group']['name'], self.group.name)

    def test_event_detail_not_found(self):
        response = APIClient().get('/api/events/999999')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': "Event couldn't be found", 'statusCode': 404})

    def test_events_of_missing_group(self):
        response = APIClient().get('/api/groups/999999/events')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class EventWriteAPITests(EventAPITestCase):

    def test_create_event_validation_envelope(self):
        response = client_for(self.cohost).post(
            f'/api/groups/{self.group.pk}/events',
            {'name': "abc"}
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], "Validation error")
        self.assertEqual(response.data['errors']['name'], "Name must be at least 5 characters")
        self.assertIn('startDate', response.data['errors'])
        self.assertIn('endDate', response.data['errors'])

    def test_member_cannot_create_event(self):
        response = client_for(self.member).post(
            f'/api/groups/{self.group.pk}/events',
            event_payload()
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(Event.objects.count(), 1)

    def test_cohost_updates_event(self):
        response = client_for(self.cohost).put(
            f'/api/events/{self.event.pk}',
            event_payload(name="Second Meet and Greet", capacity=25)
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], "Second Meet and Greet")
        self.assertEqual(response.data['capacity'], 25)
        self.assertEqual(response.data['venueId'], self.venue.pk)

    def test_member_cannot_update_event(self):
        response = client_for(self.member).put(
            f'/api/events/{self.event.pk}',
            event_payload(name="Hijacked event")
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_cohost_deletes_event(self):
        response = client_for(self.cohost).delete(f'/api/events/{self.event.pk}')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'message': "Successfully deleted", 'statusCode': 200})
        self.assertFalse(Event.objects.exists())

    def test_member_cannot_delete_event(self):
        response = client_for(self.member).delete(f'/api/events/{self.event.pk}')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Event.objects.exists())

    def test_delete_requires_login(self):
        response = APIClient().delete(f'/api/events/{self.event.pk}')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class EventServiceTests(EventAPITestCase):

    def test_list_events_by_group(self):
        self.assertEqual(list(EventService.list_events(group=self.group)), [self.event])

    def test_get_event_not_found(self):
        with self.assertRaises(EventNotFound):
            EventService.get_event('abc')

    def test_outsider_cannot_delete(self):
        with self.assertRaises(Forbidden):
            EventService.delete_event(self.event, create_user('oscar'))

    def test_deleting_venue_keeps_event(self):
        self.venue.delete()

        self.event.refresh_from_db()
        self.assertIsNone(self.event.venue_id)
