"""
Permission matrix:
                              ORGANIZER  CO-HOST  MEMBER  PENDING/NONE
View group/venue/event fields     ✓         ✓        ✓         ✓
View members incl. pending        ✓         ✓        ✗         ✗
View members excl. pending        ✓         ✓        ✓         ✓
Update / delete group             ✓         ✗        ✗         ✗
Add group image                   ✓         ✗        ✗         ✗
List group venues                 ✓         ✓        ✗         ✗
Create / update venue             ✓         ✓        ✗         ✗
Create / update / delete event    ✓         ✓        ✗         ✗
Request membership                ✗         ✗        ✗         NONE only
Promote to member                 ✓         ✓        ✗         ✗
Promote to co-host                ✓         ✗        ✗         ✗
Demote co-host to member          ✓         ✗        ✗         ✗
Delete any membership             ✓         ✗        ✗         ✗   (owners may delete their own)

Nothing may set a membership back to pending.
"""

"""
Group permission system.

Defines:
- Roles a user can hold in a group
- Actions that can be performed on group resources
- Role-action mapping (who can do what)
- Role resolution and a runtime checker
"""

import logging
from enum import Enum

from .exceptions import Forbidden

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """
    A user's effective role in one group.

    ORGANIZER comes from `Group.organizer`; the rest mirror Membership.status.
    """
    ORGANIZER = "organizer"
    CO_HOST = "co-host"
    MEMBER = "member"
    PENDING = "pending"
    NONE = "none"


class GroupAction(str, Enum):
    """All actions that are authorized per group."""

    # ==================== Read ====================
    VIEW_GROUP = "view_group"
    VIEW_MEMBERS = "view_members"
    VIEW_ALL_MEMBERS = "view_all_members"
    VIEW_VENUES = "view_venues"

    # ==================== Group ====================
    UPDATE_GROUP = "update_group"
    DELETE_GROUP = "delete_group"
    ADD_GROUP_IMAGE = "add_group_image"

    # ==================== Venues & Events ====================
    WRITE_VENUE = "write_venue"
    CREATE_EVENT = "create_event"
    UPDATE_EVENT = "update_event"
    DELETE_EVENT = "delete_event"

    # ==================== Membership ====================
    REQUEST_MEMBERSHIP = "request_membership"
    PROMOTE_TO_MEMBER = "promote_to_member"
    PROMOTE_TO_COHOST = "promote_to_cohost"
    DEMOTE_COHOST = "demote_cohost"
    DELETE_ANY_MEMBERSHIP = "delete_any_membership"


# ==================== Permission Matrix ====================

_PUBLIC = {
    GroupAction.VIEW_GROUP,
    GroupAction.VIEW_MEMBERS,
}

_HOSTING = {
    GroupAction.VIEW_ALL_MEMBERS,
    GroupAction.VIEW_VENUES,
    GroupAction.WRITE_VENUE,
    GroupAction.CREATE_EVENT,
    GroupAction.UPDATE_EVENT,
    GroupAction.DELETE_EVENT,
    GroupAction.PROMOTE_TO_MEMBER,
}

ROLE_PERMISSIONS = {
    Role.ORGANIZER: frozenset(_PUBLIC | _HOSTING | {
        GroupAction.UPDATE_GROUP,
        GroupAction.DELETE_GROUP,
        GroupAction.ADD_GROUP_IMAGE,
        GroupAction.PROMOTE_TO_COHOST,
        GroupAction.DEMOTE_COHOST,
        GroupAction.DELETE_ANY_MEMBERSHIP,
    }),
    Role.CO_HOST: frozenset(_PUBLIC | _HOSTING),
    Role.MEMBER: frozenset(_PUBLIC),
    Role.PENDING: frozenset(_PUBLIC),
    Role.NONE: frozenset(_PUBLIC | {GroupAction.REQUEST_MEMBERSHIP}),
}

DENIAL_MESSAGES = {
    GroupAction.ADD_GROUP_IMAGE: "Only the group organizer can add photos",
    GroupAction.UPDATE_GROUP: "Only the group organizer can edit the group",
    GroupAction.DELETE_GROUP: "Only the group organizer can delete the group",
    GroupAction.PROMOTE_TO_MEMBER: "You are not authorized to make this change",
    GroupAction.PROMOTE_TO_COHOST: "You are not authorized to make this change",
    GroupAction.DEMOTE_COHOST: "Only the group organizer can demote a co-host",
    GroupAction.DELETE_ANY_MEMBERSHIP: "Only the organizer or membership owner can perform this action",
}


def can_perform(role: Role, action: GroupAction) -> bool:
    """
    Decide whether a role may perform an action.

    Pure and total: every (role, action) pair has an answer and the same
    inputs always give the same output.

    Args:
        role: Role (or its string value)
        action: GroupAction (or its string value)

    Returns:
        bool: True if allowed
    """
    return GroupAction(action) in ROLE_PERMISSIONS[Role(role)]


def resolve_role(group, user) -> Role:
    """
    Work out a user's effective role in a group.

    The organizer check wins over any stored Membership row. Otherwise a single
    lookup on the unique (user, group) pair decides.

    Args:
        group: Group instance
        user: User instance (anonymous users resolve to NONE)

    Returns:
        Role
    """
    if user is None or not getattr(user, 'is_authenticated', False):
        return Role.NONE

    if group.is_organizer(user):
        return Role.ORGANIZER

    membership = group.get_membership(user)
    if membership is None:
        return Role.NONE
    return Role(membership.status)


class PermissionChecker:
    """
    Runtime permission checker for group operations.

    Usage:
        checker = PermissionChecker(group, user)

        if checker.can(GroupAction.VIEW_ALL_MEMBERS):
            ...

        # Raises Forbidden
        checker.require(GroupAction.CREATE_EVENT)
    """

    def __init__(self, group, user):
        self.group = group
        self.user = user
        self._role = None

    @property
    def role(self) -> Role:
        """Resolved once per checker."""
        if self._role is None:
            self._role = resolve_role(self.group, self.user)
        return self._role

    def is_organizer(self) -> bool:
        return self.role == Role.ORGANIZER

    def can(self, action: GroupAction) -> bool:
        return can_perform(self.role, action)

    def require(self, action: GroupAction, message=None):
        """
        Require an action or raise Forbidden.

        Args:
            action: Required action
            message: Optional custom error message

        Raises:
            Forbidden: If the caller's role does not allow it
        """
        if self.can(action):
            return

        logger.warning(
            "Denied %s for user %s (role %s) in group %s",
            GroupAction(action).value,
            getattr(self.user, 'pk', None),
            self.role.value,
            self.group.pk,
        )
        raise Forbidden(
            action=action,
            message=message or DENIAL_MESSAGES.get(action, "Forbidden"),
        )
