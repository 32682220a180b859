"""API routes for the attendance confirmation flow."""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from wedding.config import settings
from wedding.db import DatabaseManager, Guest, Invite
from wedding.matching import GuestMatcher
from wedding.matching.repository import CandidateRepository

logger = logging.getLogger(__name__)
router = APIRouter()


@lru_cache
def get_db_manager() -> DatabaseManager:
    """Get the process-wide database manager."""
    return DatabaseManager(database_url=settings.database_url)


def get_matcher() -> GuestMatcher:
    """Get a guest matcher using the configured threshold."""
    return GuestMatcher(min_score=settings.match_min_score)


# --- Response Models ---

class GuestOut(BaseModel):
    """Guest as shown to the person confirming attendance."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    gender: str = ""
    age_group: str = ""
    status: str = ""
    table_number: str = ""


class InviteOut(BaseModel):
    """Invite with all of its guests."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    country_code: str = ""
    phone: str = ""
    group_name: str = ""
    notes: str | None = None
    guests: list[GuestOut] = Field(default_factory=list)


class InviteSearchResponse(BaseModel):
    """Result of a search by guest name."""
    success: bool
    message: str | None = None
    invite: InviteOut | None = None
    matched_guest: GuestOut | None = None


# --- Routes ---

@router.get("/invites/search", response_model=InviteSearchResponse, response_model_exclude_none=True)
def search_invites_by_guest_name(
    name: str | None = Query(default=None, description="Guest name as typed by the guest"),
    db_manager: DatabaseManager = Depends(get_db_manager),
    matcher: GuestMatcher = Depends(get_matcher),
) -> InviteSearchResponse:
    """Find the invite of the guest whose name best matches the query."""
    if name is None or not name.strip():
        raise HTTPException(status_code=400, detail="Guest name is required")

    search_term = name.strip()

    try:
        with db_manager.get_session() as session:
            candidates = CandidateRepository(session).list_candidates()
            match = matcher.find_best_match(search_term, candidates)

            if match is None:
                logger.info(f"No invite found for {search_term!r} among {len(candidates)} guests")
                return InviteSearchResponse(success=False, message="No invite found")

            logger.info(
                f"Best match for {search_term!r}: {match.guest_name!r} "
                f"(score={match.score:.2f}, tier={match.tier.value}, "
                f"total_matches={match.total_matches})"
            )

            invite: Invite = match.invite
            guest: Guest = match.guest
            return InviteSearchResponse(
                success=True,
                invite=InviteOut.model_validate(invite),
                matched_guest=GuestOut.model_validate(guest),
            )
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error searching invites")
        raise HTTPException(status_code=500, detail="Failed to search invites")
