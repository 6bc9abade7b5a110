"""
Custom exceptions for service layer.

Provides specific exception types for business rule violations that are
translated to HTTP responses in one place (hackhub.api.errors).

Families:
- NotFoundError: a referenced resource does not exist (404)
- ConflictError: the write would duplicate existing state (409)
- NotAssignedError: a removal targeted a link that does not exist (404)
- ValidationError: input is structurally valid but breaks a rule (400)
- PermissionDeniedError: caller may not act on the resource (403)
"""

from typing import Any, Optional


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# ============================================================================
# Not found
# ============================================================================


class NotFoundError(ServiceError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any, message: Optional[str] = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} {identifier} not found")


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id: Any):
        super().__init__("Event", event_id)


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: Any):
        super().__init__("User", user_id)


class TeamNotFoundError(NotFoundError):
    def __init__(self, team_id: Any):
        super().__init__("Team", team_id)


class ParticipantNotFoundError(NotFoundError):
    """Raised when a user is not registered for an event."""

    def __init__(self, event_id: Any, user_id: Any):
        self.event_id = event_id
        self.user_id = user_id
        super().__init__(
            "Participant",
            user_id,
            f"User {user_id} is not a participant of event {event_id}",
        )


class SponsorNotFoundError(NotFoundError):
    def __init__(self, sponsor_id: Any):
        super().__init__("Sponsor", sponsor_id)


class ProposalNotFoundError(NotFoundError):
    def __init__(self, team_id: Any):
        super().__init__("Team proposal", team_id)


class MemberNotFoundError(NotFoundError):
    def __init__(self, member_id: Any):
        super().__init__("Team member", member_id)


class PhotoNotFoundError(NotFoundError):
    def __init__(self, photo_id: Any):
        super().__init__("Photo", photo_id)


# ============================================================================
# Conflicts
# ============================================================================


class ConflictError(ServiceError):
    """Raised when an operation conflicts with existing state."""
    pass


class ParticipantAlreadyExistsError(ConflictError):
    def __init__(self, event_id: Any, user_id: Any):
        self.event_id = event_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is already registered for event {event_id}")


class TeamAlreadyExistsError(ConflictError):
    def __init__(self, event_id: Any, name: str):
        self.event_id = event_id
        self.name = name
        super().__init__(f"A team named '{name}' already exists in event {event_id}")


class JudgeAlreadyAssignedError(ConflictError):
    def __init__(self, event_id: Any, user_id: Any):
        self.event_id = event_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is already a judge of event {event_id}")


class OrganiserAlreadyAssignedError(ConflictError):
    def __init__(self, event_id: Any, user_id: Any):
        self.event_id = event_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is already an organiser of event {event_id}")


class SponsorAlreadyAssignedError(ConflictError):
    def __init__(self, event_id: Any, sponsor_id: Any):
        self.event_id = event_id
        self.sponsor_id = sponsor_id
        super().__init__(f"Sponsor {sponsor_id} already sponsors event {event_id}")


class UserAlreadyExistsError(ConflictError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"A user with email {email} already exists")


# ============================================================================
# Missing links
# ============================================================================


class NotAssignedError(ServiceError):
    """Raised when removing a link that does not exist."""
    pass


class JudgeNotAssignedError(NotAssignedError):
    def __init__(self, event_id: Any, user_id: Any):
        self.event_id = event_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is not a judge of event {event_id}")


class OrganiserNotAssignedError(NotAssignedError):
    def __init__(self, event_id: Any, user_id: Any):
        self.event_id = event_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is not an organiser of event {event_id}")


class SponsorNotAssignedError(NotAssignedError):
    def __init__(self, event_id: Any, sponsor_id: Any):
        self.event_id = event_id
        self.sponsor_id = sponsor_id
        super().__init__(f"Sponsor {sponsor_id} does not sponsor event {event_id}")


# ============================================================================
# Validation and permissions
# ============================================================================


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class PermissionDeniedError(ServiceError):
    """Raised when an authenticated caller may not act on a resource."""

    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(message)
