"""
Integration tests for complete group workflows.

Tests end-to-end scenarios combining multiple operations.
"""

from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from groups.models import Membership
from .helpers import client_for, create_user, event_payload, group_fields, venue_payload


class GroupWorkflowTests(TestCase):
    """Test complete group workflows."""

    def setUp(self):
        self.olive = create_user('olive')
        self.bob = create_user('bob')
        self.carol = create_user('carol')
        self.dave = create_user('dave')

    def test_request_approve_promote_workflow(self):
        """
        1. Olive creates a group
        2. Bob requests membership; a second request is rejected
        3. Olive approves Bob; Bob cannot promote himself; Olive promotes him to co-host
        4. Carol requests; Bob (co-host) approves her
        5. Bob cannot promote Carol to co-host
        6. Bob schedules an event at a new venue
        7. Carol cannot schedule events
        """
        olive = client_for(self.olive)
        bob = client_for(self.bob)
        carol = client_for(self.carol)

        # 1. Create group
        response = olive.post('/api/groups', group_fields())
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        group_id = response.data['id']
        members_url = f'/api/groups/{group_id}/members'

        # 2. Bob requests twice
        response = bob.post(members_url)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        response = bob.post(members_url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], "Membership has already been requested")

        # 3. Approve and promote
        response = olive.put(members_url, {'memberId': self.bob.pk, 'status': 'member'})
        self.assertEqual(response.data['status'], 'member')
        response = bob.put(members_url, {'memberId': self.bob.pk, 'status': 'co-host'})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(
            Membership.objects.get(user=self.bob).status, Membership.Status.MEMBER
        )
        response = olive.put(members_url, {'memberId': self.bob.pk, 'status': 'co-host'})
        self.assertEqual(response.data['status'], 'co-host')

        # 4. Carol requests, Bob approves
        carol.post(members_url)
        response = bob.put(members_url, {'memberId': self.carol.pk, 'status': 'member'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        # 5. Co-host cannot mint co-hosts
        response = bob.put(members_url, {'memberId': self.carol.pk, 'status': 'co-host'})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        # 6. Venue and event
        response = bob.post(f'/api/groups/{group_id}/venues', venue_payload())
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        venue_id = response.data['id']

        response = bob.post(f'/api/groups/{group_id}/events', event_payload(venueId=venue_id))
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['venueId'], venue_id)

        # 7. Member cannot create events
        response = carol.post(f'/api/groups/{group_id}/events', event_payload())
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        # Public listing shows the event; numMembers counts Olive, Bob and Carol
        response = APIClient().get(f'/api/groups/{group_id}/events')
        self.assertEqual(len(response.data['Events']), 1)
        response = APIClient().get(f'/api/groups/{group_id}')
        self.assertEqual(response.data['numMembers'], 3)

    def test_leave_and_request_again(self):
        olive = client_for(self.olive)
        dave = client_for(self.dave)

        group_id = olive.post('/api/groups', group_fields()).data['id']
        members_url = f'/api/groups/{group_id}/members'

        dave.post(members_url)
        olive.put(members_url, {'memberId': self.dave.pk, 'status': 'member'})

        response = dave.delete(members_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Membership.objects.filter(user=self.dave).exists())

        response = dave.post(members_url)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'pending')

    def test_deleting_group_removes_everything(self):
        olive = client_for(self.olive)
        group_id = olive.post('/api/groups', group_fields()).data['id']
        client_for(self.bob).post(f'/api/groups/{group_id}/members')
        venue_id = olive.post(f'/api/groups/{group_id}/venues', venue_payload()).data['id']
        event_id = olive.post(
            f'/api/groups/{group_id}/events', event_payload(venueId=venue_id)
        ).data['id']

        response = olive.delete(f'/api/groups/{group_id}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        self.assertEqual(APIClient().get(f'/api/groups/{group_id}').status_code, 404)
        self.assertEqual(APIClient().get(f'/api/events/{event_id}').status_code, 404)
        self.assertFalse(Membership.objects.exists())
