"""Loads the candidate snapshot for guest matching from the database."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from wedding.db.models import Guest, Invite
from wedding.matching.matcher import Candidate

logger = logging.getLogger(__name__)


class CandidateRepository:
    """
    Read access to invites and guests for the matcher.

    The candidate list is flattened from every invite and ordered by
    invite id then guest id, so identical data always yields the same
    snapshot order.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize the repository.

        Args:
            session: SQLAlchemy session
        """
        self._session = session

    def list_invites(self) -> list[Invite]:
        """
        Get all invites with their guests loaded.

        Returns:
            Invites ordered by id
        """
        query = select(Invite).options(selectinload(Invite.guests)).order_by(Invite.id)
        return list(self._session.scalars(query))

    def list_candidates(self) -> list[Candidate]:
        """
        Flatten every guest of every invite into a matching candidate.

        Returns:
            One Candidate per guest, bound to its Guest and Invite records
        """
        candidates = [
            Candidate(guest_name=guest.name or "", guest_ref=guest, invite_ref=invite)
            for invite in self.list_invites()
            for guest in invite.guests
        ]
        logger.debug(f"Loaded {len(candidates)} candidates")
        return candidates

    def get_invite(self, invite_id: int) -> Invite | None:
        """
        Get one invite with its guests.

        Args:
            invite_id: Invite primary key

        Returns:
            Invite or None if not found
        """
        query = (
            select(Invite)
            .options(selectinload(Invite.guests))
            .where(Invite.id == invite_id)
        )
        return self._session.scalars(query).first()

    def add_invite(
        self,
        name: str,
        guest_names: list[str],
        **fields: str,
    ) -> Invite:
        """
        Add an invite together with its guests.

        Args:
            name: Invite label (e.g. "Family Silva")
            guest_names: Names of the guests on the invite
            **fields: Extra invite columns (phone, group_name, ...)

        Returns:
            Created Invite instance, flushed so it has an id
        """
        invite = Invite(name=name, **fields)
        invite.guests = [Guest(name=guest_name) for guest_name in guest_names]
        self._session.add(invite)
        self._session.flush()
        return invite
