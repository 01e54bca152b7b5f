"""
Tests for event input validation.
"""

from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from events.serializers import EventWriteSerializer
from groups.tests.helpers import create_group, create_user, event_payload, venue_payload
from venues.models import Venue


class EventWriteSerializerTests(TestCase):

    def setUp(self):
        self.organizer = create_user('olive')
        self.group = create_group(self.organizer)
        self.venue = Venue.objects.create(group=self.group, **venue_payload())

    def validate(self, **overrides):
        serializer = EventWriteSerializer(
            data=event_payload(**overrides),
            context={'group': self.group}
        )
        serializer.is_valid()
        return serializer

    def test_valid_payload(self):
        serializer = self.validate(venueId=self.venue.pk)

        self.assertEqual(serializer.errors, {})
        self.assertEqual(serializer.validated_data['venue_id'], self.venue.pk)
        self.assertLess(
            serializer.validated_data['start_date'],
            serializer.validated_data['end_date']
        )

    def test_venue_is_optional(self):
        serializer = self.validate()

        self.assertEqual(serializer.errors, {})

    def test_start_date_in_past(self):
        past = timezone.now() - timedelta(days=1)
        serializer = self.validate(
            startDate=past.isoformat(),
            endDate=(past + timedelta(hours=2)).isoformat()
        )

        self.assertEqual(set(serializer.errors), {'startDate'})
        self.assertEqual(serializer.errors['startDate'][0], "Start date must be in the future")

    def test_end_date_before_start(self):
        start = timezone.now() + timedelta(days=10)
        serializer = self.validate(
            startDate=start.isoformat(),
            endDate=(start - timedelta(hours=1)).isoformat()
        )

        self.assertEqual(set(serializer.errors), {'endDate'})
        self.assertEqual(serializer.errors['endDate'][0], "End date is less than start date")

    def test_end_date_equal_to_start(self):
        start = (timezone.now() + timedelta(days=10)).isoformat()
        serializer = self.validate(startDate=start, endDate=start)

        self.assertEqual(set(serializer.errors), {'endDate'})

    def test_date_errors_are_reported_together(self):
        past = timezone.now() - timedelta(days=1)
        serializer = self.validate(
            name="abc",
            startDate=past.isoformat(),
            endDate=(past - timedelta(days=1)).isoformat()
        )

        self.assertEqual(set(serializer.errors), {'name', 'startDate', 'endDate'})

    def test_malformed_start_date_skips_end_date_check(self):
        serializer = self.validate(startDate="next tuesday")

        self.assertEqual(set(serializer.errors), {'startDate'})

    def test_venue_of_another_group(self):
        other = create_group(self.organizer, name="Morning Runs")
        foreign = Venue.objects.create(group=other, **venue_payload())

        serializer = self.validate(venueId=foreign.pk)

        self.assertEqual(serializer.errors['venueId'][0], "Venue does not exist")

    def test_field_messages(self):
        serializer = self.validate(type="Hybrid", capacity="ten", price="free", description="")

        errors = {field: messages[0] for field, messages in serializer.errors.items()}
        self.assertEqual(errors, {
            'type': "Type must be Online or In person",
            'capacity': "Capacity must be an integer",
            'price': "Price is invalid",
            'description': "Description is required",
        })
