"""
Event service for managing events and everything attached to them.

Provides business logic for:
- Event CRUD and listing
- Participant registration and team membership
- Event-scoped teams (case-insensitive unique names)
- Judge, organiser and sponsor assignment
- Event photos

Design:
- Existence checks (event, user, team, sponsor) run before any write
- Each operation is one transaction (see services.transaction)
- Unique constraints back every "already" check against races
- Every operation writes attempt, failure and success entries to the
  application log under the "EventService:<operation>" context
"""

from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from hackhub.models import (
    Event,
    EventJudge,
    EventOrganiser,
    EventParticipant,
    EventPhoto,
    EventSponsor,
    EventTeam,
    Sponsor,
    User,
)
from hackhub.repositories import (
    EventRepository,
    EventPhotoRepository,
    EventTeamRepository,
    EventParticipantRepository,
    EventJudgeRepository,
    EventOrganiserRepository,
    SponsorRepository,
    EventSponsorRepository,
    UserRepository,
)
from hackhub.services.app_log_service import AppLogger, LogContext
from hackhub.services.exceptions import (
    EventNotFoundError,
    UserNotFoundError,
    TeamNotFoundError,
    ParticipantNotFoundError,
    SponsorNotFoundError,
    PhotoNotFoundError,
    ParticipantAlreadyExistsError,
    TeamAlreadyExistsError,
    JudgeAlreadyAssignedError,
    OrganiserAlreadyAssignedError,
    SponsorAlreadyAssignedError,
    JudgeNotAssignedError,
    OrganiserNotAssignedError,
    SponsorNotAssignedError,
    ValidationError,
)
from hackhub.services.transaction import unit_of_work


# Columns that update_event may change
UPDATABLE_FIELDS = (
    "name",
    "description",
    "start_date",
    "end_date",
    "location",
    "poster",
    "is_active",
)


class EventService:
    """
    Service for events, their teams and their user links.

    Usage:
        >>> service = EventService(db_session, app_logger)
        >>> event = service.create_event(
        ...     ctx,
        ...     name="Spring Hack",
        ...     description="48 hour hackathon",
        ...     start_date=datetime(2025, 4, 1, 9),
        ...     end_date=datetime(2025, 4, 3, 9),
        ...     location="Main Hall",
        ... )
        >>> service.register_participant_for_event(ctx, event.id, user.id)
    """

    def __init__(self, db: Session, app_logger: AppLogger):
        """
        Initialize event service.

        Args:
            db: SQLAlchemy database session
            app_logger: Application log facade
        """
        self.db = db
        self.app_logger = app_logger
        self.events = EventRepository(db)
        self.photos = EventPhotoRepository(db)
        self.teams = EventTeamRepository(db)
        self.participants = EventParticipantRepository(db)
        self.judges = EventJudgeRepository(db)
        self.organisers = EventOrganiserRepository(db)
        self.sponsors = SponsorRepository(db)
        self.event_sponsors = EventSponsorRepository(db)
        self.users = UserRepository(db)

    # ========================================================================
    # Events
    # ========================================================================

    def create_event(
        self,
        ctx: LogContext,
        name: str,
        description: str,
        start_date: datetime,
        end_date: datetime,
        location: str,
        poster: Optional[str] = None,
        is_active: bool = True,
    ) -> Event:
        """
        Create a new event.

        Raises:
            ValidationError: If end_date is before start_date
        """
        log_ctx = ctx.with_context("EventService:create_event")
        meta = {"name": name}
        self.app_logger.info("Attempting to create event", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._validate_dates(start_date, end_date)
            event = self.events.create(
                name=name,
                description=description,
                start_date=start_date,
                end_date=end_date,
                location=location,
                poster=poster,
                is_active=is_active,
            )

        self.app_logger.info(
            "Event created successfully", log_ctx, meta={**meta, "eventId": event.id}
        )
        return event

    def update_event(self, ctx: LogContext, event_id: str, **fields) -> Event:
        """
        Update event fields. Only the given fields change.

        Raises:
            EventNotFoundError: If the event does not exist
            ValidationError: If the resulting date range is inverted
        """
        log_ctx = ctx.with_context("EventService:update_event")
        changes = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
        meta = {"eventId": event_id, "fields": sorted(changes)}
        self.app_logger.info("Attempting to update event", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            event = self._require_event(event_id)
            self._validate_dates(
                changes.get("start_date", event.start_date),
                changes.get("end_date", event.end_date),
            )
            event = self.events.update(event_id, **changes)

        self.app_logger.info("Event updated successfully", log_ctx, meta=meta)
        return event

    def delete_event(self, ctx: LogContext, event_id: str) -> str:
        """
        Delete an event with its teams, photos and all user links.

        Returns:
            The deleted event id

        Raises:
            EventNotFoundError: If the event does not exist
        """
        log_ctx = ctx.with_context("EventService:delete_event")
        meta = {"eventId": event_id}
        self.app_logger.info("Attempting to delete event", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            deleted_id = self.events.delete(event_id)
            if deleted_id is None:
                raise EventNotFoundError(event_id)

        self.app_logger.info("Event deleted successfully", log_ctx, meta=meta)
        return deleted_id

    def get_event_details(self, ctx: LogContext, event_id: str) -> Event:
        """
        Get an event with photos, teams, sponsors, participants, judges
        and organisers loaded.

        Raises:
            EventNotFoundError: If the event does not exist
        """
        log_ctx = ctx.with_context("EventService:get_event_details")
        event = self.events.find_with_details(event_id)
        if event is None:
            self.app_logger.warn("Event not found", log_ctx, meta={"eventId": event_id})
            raise EventNotFoundError(event_id)

        self.app_logger.debug("Fetched event details", log_ctx, meta={"eventId": event_id})
        return event

    def get_event_list(
        self,
        ctx: LogContext,
        limit: int = 10,
        offset: int = 0,
        is_active: Optional[bool] = None,
    ) -> List[Event]:
        """List events, most recent start date first."""
        log_ctx = ctx.with_context("EventService:get_event_list")
        events = self.events.find_many(limit=limit, offset=offset, is_active=is_active)
        self.app_logger.debug(
            "Fetched event list",
            log_ctx,
            meta={"limit": limit, "offset": offset, "count": len(events)},
        )
        return events

    # ========================================================================
    # Participants
    # ========================================================================

    def register_participant_for_event(
        self, ctx: LogContext, event_id: str, user_id: str
    ) -> EventParticipant:
        """
        Register a user for an event, without a team.

        Raises:
            EventNotFoundError: If the event does not exist
            UserNotFoundError: If the user does not exist
            ParticipantAlreadyExistsError: If the user is already registered
        """
        log_ctx = ctx.with_context("EventService:register_participant_for_event")
        meta = {"eventId": event_id, "userId": user_id}
        self.app_logger.info("Attempting to register participant", log_ctx, meta=meta)

        with unit_of_work(
            self.db, self.app_logger, log_ctx, meta,
            on_conflict=lambda: ParticipantAlreadyExistsError(event_id, user_id),
        ):
            self._require_event(event_id)
            self._require_user(user_id)
            if self.participants.find_participant(event_id, user_id):
                raise ParticipantAlreadyExistsError(event_id, user_id)
            participant = self.participants.add_participant_to_event(event_id, user_id)

        self.app_logger.info("Participant registered successfully", log_ctx, meta=meta)
        return participant

    def unregister_participant_from_event(
        self, ctx: LogContext, event_id: str, user_id: str
    ) -> None:
        """
        Remove a user's registration from an event.

        Raises:
            EventNotFoundError: If the event does not exist
            ParticipantNotFoundError: If the user is not registered
        """
        log_ctx = ctx.with_context("EventService:unregister_participant_from_event")
        meta = {"eventId": event_id, "userId": user_id}
        self.app_logger.info("Attempting to unregister participant", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._require_event(event_id)
            if self.participants.remove_participant_from_event(event_id, user_id) is None:
                raise ParticipantNotFoundError(event_id, user_id)

        self.app_logger.info("Participant unregistered successfully", log_ctx, meta=meta)

    # ========================================================================
    # Teams
    # ========================================================================

    def create_team_for_event(self, ctx: LogContext, event_id: str, name: str) -> EventTeam:
        """
        Create a team in an event.

        Raises:
            EventNotFoundError: If the event does not exist
            TeamAlreadyExistsError: If the event has a team with the same
                name, compared case-insensitively
        """
        log_ctx = ctx.with_context("EventService:create_team_for_event")
        name = name.strip()
        meta = {"eventId": event_id, "teamName": name}
        self.app_logger.info("Attempting to create team", log_ctx, meta=meta)

        with unit_of_work(
            self.db, self.app_logger, log_ctx, meta,
            on_conflict=lambda: TeamAlreadyExistsError(event_id, name),
        ):
            self._require_event(event_id)
            if self.teams.find_by_name(event_id, name):
                raise TeamAlreadyExistsError(event_id, name)
            team = self.teams.create(event_id=event_id, name=name)

        self.app_logger.info(
            "Team created successfully", log_ctx, meta={**meta, "teamId": team.id}
        )
        return team

    def list_teams_for_event(self, ctx: LogContext, event_id: str) -> List[EventTeam]:
        """
        List an event's teams with their members.

        Raises:
            EventNotFoundError: If the event does not exist
        """
        log_ctx = ctx.with_context("EventService:list_teams_for_event")
        if self.events.find_by_id(event_id) is None:
            self.app_logger.warn("Event not found", log_ctx, meta={"eventId": event_id})
            raise EventNotFoundError(event_id)
        return self.teams.find_by_event_id(event_id)

    def delete_team(self, ctx: LogContext, event_id: str, team_id: str) -> None:
        """
        Delete a team. Its members stay registered with no team.

        Raises:
            TeamNotFoundError: If the team does not exist in this event
        """
        log_ctx = ctx.with_context("EventService:delete_team")
        meta = {"eventId": event_id, "teamId": team_id}
        self.app_logger.info("Attempting to delete team", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._require_team(event_id, team_id)
            self.teams.delete(team_id)

        self.app_logger.info("Team deleted successfully", log_ctx, meta=meta)

    def assign_participant_to_team(
        self, ctx: LogContext, event_id: str, user_id: str, team_id: str
    ) -> EventParticipant:
        """
        Put a registered participant in one of the event's teams.

        Raises:
            TeamNotFoundError: If the team does not exist or belongs to
                another event
            ParticipantNotFoundError: If the user is not registered
        """
        log_ctx = ctx.with_context("EventService:assign_participant_to_team")
        meta = {"eventId": event_id, "userId": user_id, "teamId": team_id}
        self.app_logger.info("Attempting to assign participant to team", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._require_team(event_id, team_id)
            participant = self.participants.assign_participant_to_team(
                event_id, user_id, team_id
            )
            if participant is None:
                raise ParticipantNotFoundError(event_id, user_id)

        self.app_logger.info("Participant assigned to team successfully", log_ctx, meta=meta)
        return participant

    def remove_participant_from_team(
        self,
        ctx: LogContext,
        event_id: str,
        user_id: str,
        team_id: Optional[str] = None,
    ) -> EventParticipant:
        """
        Take a participant out of their team. The registration is kept.

        Args:
            team_id: When given, the participant must currently be in this team

        Raises:
            EventNotFoundError: If the event does not exist
            ParticipantNotFoundError: If the user is not registered, or not
                in team_id
        """
        log_ctx = ctx.with_context("EventService:remove_participant_from_team")
        meta = {"eventId": event_id, "userId": user_id, "teamId": team_id}
        self.app_logger.info("Attempting to remove participant from team", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._require_event(event_id)
            if team_id is not None:
                current = self.participants.find_participant(event_id, user_id)
                if current is None or current.team_id != team_id:
                    raise ParticipantNotFoundError(event_id, user_id)
            participant = self.participants.remove_participant_from_team(event_id, user_id)
            if participant is None:
                raise ParticipantNotFoundError(event_id, user_id)

        self.app_logger.info("Participant removed from team successfully", log_ctx, meta=meta)
        return participant

    # ========================================================================
    # Judges
    # ========================================================================

    def add_judge_to_event(self, ctx: LogContext, event_id: str, user_id: str) -> EventJudge:
        """
        Raises:
            EventNotFoundError, UserNotFoundError, JudgeAlreadyAssignedError
        """
        log_ctx = ctx.with_context("EventService:add_judge_to_event")
        meta = {"eventId": event_id, "userId": user_id}
        self.app_logger.info("Attempting to add judge", log_ctx, meta=meta)

        with unit_of_work(
            self.db, self.app_logger, log_ctx, meta,
            on_conflict=lambda: JudgeAlreadyAssignedError(event_id, user_id),
        ):
            self._require_event(event_id)
            self._require_user(user_id)
            if self.judges.find_judge(event_id, user_id):
                raise JudgeAlreadyAssignedError(event_id, user_id)
            judge = self.judges.add_judge_to_event(event_id, user_id)

        self.app_logger.info("Judge added successfully", log_ctx, meta=meta)
        return judge

    def remove_judge_from_event(self, ctx: LogContext, event_id: str, user_id: str) -> None:
        """
        Raises:
            EventNotFoundError, UserNotFoundError, JudgeNotAssignedError
        """
        log_ctx = ctx.with_context("EventService:remove_judge_from_event")
        meta = {"eventId": event_id, "userId": user_id}
        self.app_logger.info("Attempting to remove judge", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._require_event(event_id)
            self._require_user(user_id)
            if self.judges.remove_judge_from_event(event_id, user_id) is None:
                raise JudgeNotAssignedError(event_id, user_id)

        self.app_logger.info("Judge removed successfully", log_ctx, meta=meta)

    # ========================================================================
    # Organisers
    # ========================================================================

    def add_organiser_to_event(
        self, ctx: LogContext, event_id: str, user_id: str
    ) -> EventOrganiser:
        """
        Raises:
            EventNotFoundError, UserNotFoundError, OrganiserAlreadyAssignedError
        """
        log_ctx = ctx.with_context("EventService:add_organiser_to_event")
        meta = {"eventId": event_id, "userId": user_id}
        self.app_logger.info("Attempting to add organiser", log_ctx, meta=meta)

        with unit_of_work(
            self.db, self.app_logger, log_ctx, meta,
            on_conflict=lambda: OrganiserAlreadyAssignedError(event_id, user_id),
        ):
            self._require_event(event_id)
            self._require_user(user_id)
            if self.organisers.find_organiser(event_id, user_id):
                raise OrganiserAlreadyAssignedError(event_id, user_id)
            organiser = self.organisers.add_organiser_to_event(event_id, user_id)

        self.app_logger.info("Organiser added successfully", log_ctx, meta=meta)
        return organiser

    def remove_organiser_from_event(
        self, ctx: LogContext, event_id: str, user_id: str
    ) -> None:
        """
        Raises:
            EventNotFoundError, UserNotFoundError, OrganiserNotAssignedError
        """
        log_ctx = ctx.with_context("EventService:remove_organiser_from_event")
        meta = {"eventId": event_id, "userId": user_id}
        self.app_logger.info("Attempting to remove organiser", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._require_event(event_id)
            self._require_user(user_id)
            if self.organisers.remove_organiser_from_event(event_id, user_id) is None:
                raise OrganiserNotAssignedError(event_id, user_id)

        self.app_logger.info("Organiser removed successfully", log_ctx, meta=meta)

    # ========================================================================
    # Sponsors
    # ========================================================================

    def add_sponsor_to_event(
        self, ctx: LogContext, event_id: str, sponsor_id: str
    ) -> EventSponsor:
        """
        Raises:
            EventNotFoundError, SponsorNotFoundError, SponsorAlreadyAssignedError
        """
        log_ctx = ctx.with_context("EventService:add_sponsor_to_event")
        meta = {"eventId": event_id, "sponsorId": sponsor_id}
        self.app_logger.info("Attempting to add sponsor", log_ctx, meta=meta)

        with unit_of_work(
            self.db, self.app_logger, log_ctx, meta,
            on_conflict=lambda: SponsorAlreadyAssignedError(event_id, sponsor_id),
        ):
            self._require_event(event_id)
            self._require_sponsor(sponsor_id)
            if self.event_sponsors.find_event_sponsor(event_id, sponsor_id):
                raise SponsorAlreadyAssignedError(event_id, sponsor_id)
            link = self.event_sponsors.add_sponsor_to_event(event_id, sponsor_id)

        self.app_logger.info("Sponsor added successfully", log_ctx, meta=meta)
        return link

    def remove_sponsor_from_event(
        self, ctx: LogContext, event_id: str, sponsor_id: str
    ) -> None:
        """
        Raises:
            EventNotFoundError, SponsorNotFoundError, SponsorNotAssignedError
        """
        log_ctx = ctx.with_context("EventService:remove_sponsor_from_event")
        meta = {"eventId": event_id, "sponsorId": sponsor_id}
        self.app_logger.info("Attempting to remove sponsor", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._require_event(event_id)
            self._require_sponsor(sponsor_id)
            if self.event_sponsors.remove_sponsor_from_event(event_id, sponsor_id) is None:
                raise SponsorNotAssignedError(event_id, sponsor_id)

        self.app_logger.info("Sponsor removed successfully", log_ctx, meta=meta)

    # ========================================================================
    # Photos
    # ========================================================================

    def add_event_photos(
        self, ctx: LogContext, event_id: str, photos: Iterable[dict]
    ) -> List[EventPhoto]:
        """
        Attach photos to an event.

        Args:
            photos: Dicts with "url" and optional "caption"

        Raises:
            EventNotFoundError: If the event does not exist
        """
        log_ctx = ctx.with_context("EventService:add_event_photos")
        photos = list(photos)
        meta = {"eventId": event_id, "count": len(photos)}
        self.app_logger.info("Attempting to add event photos", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            self._require_event(event_id)
            rows = self.photos.create_many(event_id, photos)

        self.app_logger.info("Event photos added successfully", log_ctx, meta=meta)
        return rows

    def remove_event_photo(self, ctx: LogContext, event_id: str, photo_id: str) -> None:
        """
        Raises:
            PhotoNotFoundError: If the photo does not exist in this event
        """
        log_ctx = ctx.with_context("EventService:remove_event_photo")
        meta = {"eventId": event_id, "photoId": photo_id}
        self.app_logger.info("Attempting to remove event photo", log_ctx, meta=meta)

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            photo = self.photos.find_by_id(photo_id)
            if photo is None or photo.event_id != event_id:
                raise PhotoNotFoundError(photo_id)
            self.photos.delete(photo_id)

        self.app_logger.info("Event photo removed successfully", log_ctx, meta=meta)

    # ========================================================================
    # Helpers
    # ========================================================================

    def _require_event(self, event_id: str) -> Event:
        event = self.events.find_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _require_user(self, user_id: str) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def _require_sponsor(self, sponsor_id: str) -> Sponsor:
        sponsor = self.sponsors.find_by_id(sponsor_id)
        if sponsor is None:
            raise SponsorNotFoundError(sponsor_id)
        return sponsor

    def _require_team(self, event_id: str, team_id: str) -> EventTeam:
        team = self.teams.find_by_id(team_id)
        if team is None or team.event_id != event_id:
            raise TeamNotFoundError(team_id)
        return team

    @staticmethod
    def _validate_dates(start_date: datetime, end_date: datetime) -> None:
        if start_date is not None and end_date is not None and end_date < start_date:
            raise ValidationError(
                "End date must be on or after start date",
                field="end_date",
            )
