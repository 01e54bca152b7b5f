"""
Domain errors raised by the group, venue and event services.

Every error knows its HTTP status and renders to the shared envelope:

    {"message": str, "statusCode": int, "errors": {field: message}}
"""

from rest_framework import status


class GroupError(Exception):
    """Base exception for group resource operations."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"

    def __init__(self, message=None, errors=None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def as_response_data(self) -> dict:
        data = {
            'message': self.message,
            'statusCode': self.status_code,
        }
        if self.errors:
            data['errors'] = self.errors
        return data


# ==================== Not Found ====================

class NotFoundError(GroupError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class GroupNotFound(NotFoundError):
    default_message = "Group couldn't be found"


class MembershipNotFound(NotFoundError):
    default_message = "Membership between the user and the group does not exist"


class VenueNotFound(NotFoundError):
    default_message = "Venue couldn't be found"


class EventNotFound(NotFoundError):
    default_message = "Event couldn't be found"


# ==================== Rejections ====================

class Forbidden(GroupError):
    """Caller's role does not allow the action."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"

    def __init__(self, action=None, message=None):
        self.action = action
        super().__init__(message)


class ValidationFailed(GroupError):
    """Request is well formed but violates a rule; carries a field -> message map."""
    default_message = "Validation Error"

    def __init__(self, errors, message=None):
        super().__init__(message, errors=errors)


class UserNotFound(ValidationFailed):
    """Referenced member does not exist at all (not merely outside the group)."""

    def __init__(self, field='memberId'):
        super().__init__({field: "User couldn't be found"})


class DuplicateRequest(GroupError):
    """User already has a membership row for the group."""
    PENDING = 'pending'
    MEMBER = 'member'

    MESSAGES = {
        PENDING: "Membership has already been requested",
        MEMBER: "User is already a member of the group",
    }

    def __init__(self, kind):
        self.kind = kind
        super().__init__(self.MESSAGES[kind])

    @classmethod
    def for_membership(cls, membership):
        if membership.is_pending:
            return cls(cls.PENDING)
        return cls(cls.MEMBER)


def error_response(error: GroupError):
    """Render a domain error as a DRF response."""
    from rest_framework.response import Response
    return Response(error.as_response_data(), status=error.status_code)
