"""
Service-level tests, calling the service functions with a session directly
"""
import logging

import pytest
from sqlalchemy.exc import OperationalError

from app.errors import Conflict, InternalError, Unauthorized, ValidationError
from app.models import Account, AccountView, PlayerStats, to_public_account
from app.services.auth import authenticate, register_account
from app.services.feedback import submit_feedback
from app.services.stats import list_player_stats

ROUNDS = 4


def test_register_then_authenticate(session):
    account_id = register_account(session, "alice", "pw1", ROUNDS)

    view = authenticate(session, "alice", "pw1")

    assert isinstance(account_id, int) and account_id > 0
    assert view == AccountView(id=account_id, username="alice")


def test_register_duplicate_raises_conflict(session):
    register_account(session, "alice", "pw1", ROUNDS)

    with pytest.raises(Conflict):
        register_account(session, "alice", "pw2", ROUNDS)


def test_register_rejects_non_string_credentials(session):
    with pytest.raises(ValidationError):
        register_account(session, 123, "pw1", ROUNDS)


def test_account_insert_failure_raises_internal_error(session, monkeypatch):
    def failing_commit():
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(session, "commit", failing_commit)

    with pytest.raises(InternalError):
        register_account(session, "alice", "pw1", ROUNDS)


def test_stats_insert_failure_is_swallowed(session, monkeypatch):
    def failing_init(session, player_id):
        raise OperationalError("INSERT", {}, Exception("stats table locked"))

    monkeypatch.setattr("app.services.auth.initialize_player_stats", failing_init)

    account_id = register_account(session, "alice", "pw1", ROUNDS)

    assert session.get(Account, account_id) is not None
    assert session.get(PlayerStats, account_id) is None


def test_authenticate_unknown_and_wrong_password_look_alike(session):
    register_account(session, "alice", "pw1", ROUNDS)

    with pytest.raises(Unauthorized) as wrong:
        authenticate(session, "alice", "nope")
    with pytest.raises(Unauthorized) as unknown:
        authenticate(session, "nobody", "nope")

    assert wrong.value.message == unknown.value.message == "Invalid credentials"


def test_to_public_account_drops_hash():
    account = Account(id=7, username="alice", password_hash="$2b$10$secret")

    view = to_public_account(account)

    assert view.to_dict() == {"id": 7, "username": "alice"}


def test_list_player_stats_orders_by_score(session):
    for name, score in [("a", 10), ("b", 50), ("c", 30)]:
        account_id = register_account(session, name, "pw", ROUNDS)
        session.get(PlayerStats, account_id).score = score
    session.commit()

    assert [row["score"] for row in list_player_stats(session)] == [50, 30, 10]


def test_submit_feedback_returns_id(session):
    feedback_id = submit_feedback(session, 3, "nice")

    assert feedback_id > 0


def test_submit_feedback_rejects_empty_comment(session):
    with pytest.raises(ValidationError):
        submit_feedback(session, 3, "")


def test_swallowed_stats_failure_is_logged_with_traceback(session, monkeypatch, caplog):
    def failing_init(session, player_id):
        raise OperationalError("INSERT", {}, Exception("stats table locked"))

    monkeypatch.setattr("app.services.auth.initialize_player_stats", failing_init)

    with caplog.at_level(logging.ERROR, logger="app.services.auth"):
        register_account(session, "alice", "pw1", ROUNDS)

    records = [r for r in caplog.records if "initializing player stats" in r.getMessage()]
    assert len(records) == 1
    assert records[0].exc_info is not None
