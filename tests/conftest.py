"""Pytest configuration and fixtures."""

import os
import tempfile
from collections.abc import Generator

import pytest

from wedding.db.manager import DatabaseManager
from wedding.matching.matcher import Candidate
from wedding.matching.repository import CandidateRepository


@pytest.fixture
def temp_db_path() -> Generator[str, None, None]:
    """Create a temporary database file."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name
    yield db_path
    # Cleanup, including WAL side files
    for path in (db_path, f"{db_path}-wal", f"{db_path}-shm"):
        try:
            os.unlink(path)
        except OSError:
            pass


@pytest.fixture
def db_manager(temp_db_path: str) -> Generator[DatabaseManager, None, None]:
    """Create a DatabaseManager with a temporary database."""
    manager = DatabaseManager(database_url=f"sqlite:///{temp_db_path}")
    manager.init_db()
    yield manager
    manager.close()


@pytest.fixture
def seeded_db(db_manager: DatabaseManager) -> DatabaseManager:
    """Database with a few invites, including a duplicate guest name."""
    with db_manager.get_session() as session:
        repo = CandidateRepository(session)
        repo.add_invite(
            "Família Ferreira",
            ["Ana Paula Ferreira", "Carlos Ferreira"],
            phone="11999990000",
            group_name="noiva",
        )
        repo.add_invite("Família Souza", ["Ana Beatriz Souza", ""])
        repo.add_invite("João e Maria", ["João Pereira", "Maria Silva"], group_name="noivo")
        repo.add_invite("Tia Maria", ["Maria Silva"])
    return db_manager


@pytest.fixture
def realistic_candidates() -> list[Candidate]:
    """Plain candidates with string handles, no database involved."""
    rows = [
        ("Ana Paula Ferreira", "g1", "invite-a"),
        ("Ana Beatriz Souza", "g2", "invite-b"),
        ("João Pereira", "g3", "invite-c"),
        ("Maria Silva Santos", "g4", "invite-c"),
        ("Mariana Costa", "g5", "invite-d"),
    ]
    return [
        Candidate(guest_name=name, guest_ref=guest, invite_ref=invite)
        for name, guest, invite in rows
    ]
