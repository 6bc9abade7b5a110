"""
Sponsor service for the shared sponsor catalogue.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hackhub.models import Sponsor
from hackhub.repositories import SponsorRepository
from hackhub.services.app_log_service import AppLogger, LogContext
from hackhub.services.exceptions import SponsorNotFoundError
from hackhub.services.transaction import unit_of_work


class SponsorService:
    """
    Service for creating, listing and deleting sponsors.

    Attaching sponsors to events is handled by EventService.
    """

    def __init__(self, db: Session, app_logger: AppLogger):
        self.db = db
        self.app_logger = app_logger
        self.sponsors = SponsorRepository(db)

    def create_sponsor(
        self,
        ctx: LogContext,
        name: str,
        description: Optional[str] = None,
        logo: Optional[str] = None,
    ) -> Sponsor:
        log_ctx = ctx.with_context("SponsorService:create_sponsor")
        meta = {"name": name}

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            sponsor = self.sponsors.create(name=name, description=description, logo=logo)

        self.app_logger.info(
            "Sponsor created successfully", log_ctx, meta={**meta, "sponsorId": sponsor.id}
        )
        return sponsor

    def get_all_sponsors(self) -> List[Sponsor]:
        return self.sponsors.find_all()

    def get_sponsor(self, sponsor_id: str) -> Sponsor:
        """
        Raises:
            SponsorNotFoundError: If the sponsor does not exist
        """
        sponsor = self.sponsors.find_by_id(sponsor_id)
        if sponsor is None:
            raise SponsorNotFoundError(sponsor_id)
        return sponsor

    def delete_sponsor(self, ctx: LogContext, sponsor_id: str) -> None:
        """
        Delete a sponsor and its event links.

        Raises:
            SponsorNotFoundError: If the sponsor does not exist
        """
        log_ctx = ctx.with_context("SponsorService:delete_sponsor")
        meta = {"sponsorId": sponsor_id}

        with unit_of_work(self.db, self.app_logger, log_ctx, meta):
            if self.sponsors.delete(sponsor_id) is None:
                raise SponsorNotFoundError(sponsor_id)

        self.app_logger.info("Sponsor deleted successfully", log_ctx, meta=meta)
