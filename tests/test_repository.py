"""Tests for the database layer and candidate repository."""

import pytest

from wedding.db.manager import DatabaseManager
from wedding.db.models import Guest, Invite
from wedding.matching.matcher import GuestMatcher
from wedding.matching.repository import CandidateRepository


class TestDatabaseManager:
    """Tests for DatabaseManager."""

    def test_init_db(self, temp_db_path: str) -> None:
        """Test database initialization."""
        manager = DatabaseManager(database_url=f"sqlite:///{temp_db_path}")
        manager.init_db()

        assert manager.health_check()
        manager.close()

    def test_session_commits(self, db_manager: DatabaseManager) -> None:
        """Test session context manager commits on success."""
        with db_manager.get_session() as session:
            session.add(Invite(name="Família Lima"))

        with db_manager.get_session() as session:
            result = session.query(Invite).filter_by(name="Família Lima").first()
            assert result is not None
            assert result.created_at is not None

    def test_session_rollback_on_exception(self, db_manager: DatabaseManager) -> None:
        """Test that sessions rollback on exception."""
        with pytest.raises(ValueError):
            with db_manager.get_session() as session:
                session.add(Invite(name="Rolled back"))
                raise ValueError("Simulated error")

        with db_manager.get_session() as session:
            assert session.query(Invite).filter_by(name="Rolled back").first() is None

    def test_guests_cascade_with_invite(self, db_manager: DatabaseManager) -> None:
        """Test deleting an invite deletes its guests."""
        with db_manager.get_session() as session:
            invite = CandidateRepository(session).add_invite("Família Lima", ["Pedro Lima", "Rita Lima"])
            invite_id = invite.id

        with db_manager.get_session() as session:
            session.delete(session.get(Invite, invite_id))

        with db_manager.get_session() as session:
            assert session.query(Guest).count() == 0

    def test_health_check_failure(self, temp_db_path: str) -> None:
        """Test health check reports an unusable database location."""
        # temp_db_path is a file, so no directory can be created beneath it
        manager = DatabaseManager(database_url=f"sqlite:///{temp_db_path}/nested/wedding.db")

        assert manager.health_check() is False


class TestCandidateRepository:
    """Tests for CandidateRepository."""

    def test_add_invite(self, db_manager: DatabaseManager) -> None:
        """Test an invite is stored with its guests."""
        with db_manager.get_session() as session:
            invite = CandidateRepository(session).add_invite(
                "Família Lima", ["Pedro Lima", "Rita Lima"], phone="2199990000"
            )
            assert invite.id is not None

        with db_manager.get_session() as session:
            stored = CandidateRepository(session).get_invite(invite.id)
            assert stored is not None
            assert stored.phone == "2199990000"
            assert [g.name for g in stored.guests] == ["Pedro Lima", "Rita Lima"]

    def test_get_missing_invite(self, db_manager: DatabaseManager) -> None:
        """Test unknown ids return None."""
        with db_manager.get_session() as session:
            assert CandidateRepository(session).get_invite(999) is None

    def test_list_candidates_flattened_in_order(self, seeded_db: DatabaseManager) -> None:
        """Test one candidate per guest, ordered by invite then guest."""
        with seeded_db.get_session() as session:
            candidates = CandidateRepository(session).list_candidates()

            assert [c.guest_name for c in candidates] == [
                "Ana Paula Ferreira",
                "Carlos Ferreira",
                "Ana Beatriz Souza",
                "",
                "João Pereira",
                "Maria Silva",
                "Maria Silva",
            ]
            assert candidates[0].invite_ref.name == "Família Ferreira"
            assert candidates[0].guest_ref.invite_id == candidates[0].invite_ref.id

    def test_matcher_over_snapshot(self, seeded_db: DatabaseManager) -> None:
        """Test matching against the stored snapshot."""
        with seeded_db.get_session() as session:
            candidates = CandidateRepository(session).list_candidates()
            match = GuestMatcher().find_best_match("joao pereira", candidates)

            assert match is not None
            assert match.invite.name == "João e Maria"
            assert match.guest.name == "João Pereira"
            assert match.score == 100.0

    def test_duplicate_name_resolves_to_first_invite(self, seeded_db: DatabaseManager) -> None:
        """Test two guests named Maria Silva resolve to the earlier invite."""
        with seeded_db.get_session() as session:
            candidates = CandidateRepository(session).list_candidates()
            match = GuestMatcher().find_best_match("Maria Silva", candidates)

            assert match is not None
            assert match.invite.name == "João e Maria"
            assert match.total_matches >= 2
