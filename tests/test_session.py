"""
Testing the session state machine
- Play guesses against a known secret and check status/attempts/history.
- Trick: pin_secret replaces the generator for sessions built with new_session().
"""

import pytest

from ciphermind.config import Rules
from ciphermind.errors import ContractViolation, LengthMismatch, UnknownSymbol
from ciphermind.session import Session, abandon, new_session, submit


def test_winning_guess(session):
    result = session.submit("RGBY")
    assert (result.feedback.exact, result.feedback.color) == (4, 0)
    assert result.status == "won"
    assert result.secret == ["R", "G", "B", "Y"]
    assert result.rating == "hole_in_one"
    # no advice once the game is over
    assert result.hint is None
    assert result.note is not None and "No more guesses" in result.note


def test_miss_keeps_game_running(session):
    result = session.submit("MMCC")
    assert (result.feedback.exact, result.feedback.color) == (0, 0)
    assert result.status == "in_progress"
    assert result.attempts_used == 1
    assert result.attempts_left == 9
    assert result.hint == "no_match"
    assert result.hint_message
    # secret stays hidden while the game runs
    assert result.secret is None
    assert result.rating is None


def test_mixed_feedback_and_history(session):
    session.submit("YBGR")
    result = session.submit("rbym")
    assert [(h.exact, h.color) for h in result.history] == [(0, 4), (1, 2)]
    assert result.history[1].guess == ["R", "B", "Y", "M"]
    assert result.hint == "one_placed"


def test_invalid_guesses_do_not_count(session):
    with pytest.raises(LengthMismatch):
        session.submit("RGB")
    with pytest.raises(UnknownSymbol):
        session.submit("RGBX")
    assert session.attempts == 0
    assert session.history == []
    assert session.status == "in_progress"


def test_loss_after_exactly_the_attempt_limit():
    session = Session(secret=["R", "G", "B", "Y"], rules=Rules(max_attempts=3))
    assert session.submit("MMMM").status == "in_progress"
    assert session.submit("MMMM").status == "in_progress"
    final = session.submit("MMMM")
    assert final.status == "lost"
    assert final.attempts_left == 0
    assert final.secret == ["R", "G", "B", "Y"]
    assert final.running_low is False


def test_win_on_last_attempt_is_a_win():
    session = Session(secret=["R", "G", "B", "Y"], rules=Rules(max_attempts=2))
    session.submit("MMMM")
    result = session.submit("RGBY")
    assert result.status == "won"
    assert result.rating == "master"


def test_running_low_warning(session):
    flags = [session.submit("MMMM").running_low for _ in range(9)]
    # attempts 8 and 9 of 10
    assert flags == [False] * 7 + [True, True]


def test_submit_after_game_over_is_a_contract_violation(session):
    session.submit("RGBY")
    with pytest.raises(ContractViolation):
        session.submit("RGBY")
    # not even a bad guess is looked at
    with pytest.raises(ContractViolation):
        session.submit("?")
    assert session.attempts == 1


def test_abandon_reveals_secret_without_outcome(session):
    session.submit("MMCC")
    secret = abandon(session)
    assert secret == ["R", "G", "B", "Y"]
    assert session.status == "abandoned"
    assert session.attempts == 1
    with pytest.raises(ContractViolation):
        session.abandon()
    with pytest.raises(ContractViolation):
        session.submit("RGBY")


def test_abandon_after_win_is_rejected(session):
    session.submit("RGBY")
    with pytest.raises(ContractViolation):
        session.abandon()


def test_snapshot(session):
    session.submit("YBGR")
    snap = session.snapshot()
    assert snap.session_id == session.id
    assert snap.status == "in_progress"
    assert snap.attempts_used == 1
    assert snap.code_length == 4
    assert snap.alphabet == ["R", "G", "B", "Y", "M", "C"]
    assert snap.secret is None
    session.abandon()
    assert session.snapshot().secret == ["R", "G", "B", "Y"]


def test_new_session_with_pinned_secret(pin_secret):
    pin_secret(["C", "C", "M", "R"])
    session = new_session(4, "RGBYMC", 5)
    assert session.rules.max_attempts == 5
    result = submit(session, "ccmr")
    assert result.status == "won"


def test_new_session_seed_is_reproducible():
    a = new_session(seed=11)
    b = new_session(seed=11)
    assert a.secret == b.secret
    assert a.id != b.id


def test_sessions_do_not_share_state():
    a = new_session(seed=1)
    b = new_session(seed=1)
    a.submit("RRRR")
    assert b.attempts == 0
    assert b.history == []


def test_secret_must_fit_the_rules(rules):
    with pytest.raises(ValueError):
        Session(secret=["R", "G", "B"], rules=rules)
    with pytest.raises(ValueError):
        Session(secret=["R", "G", "B", "X"], rules=rules)


def test_play_rejects_wrong_length_without_counting(session):
    with pytest.raises(ContractViolation):
        session.play(["R", "G"])
    assert session.attempts == 0


def test_new_session_defaults_come_from_env(monkeypatch):
    monkeypatch.setenv("CIPHERMIND_CODE_LENGTH", "6")
    monkeypatch.setenv("CIPHERMIND_MAX_ATTEMPTS", "4")
    monkeypatch.setenv("CIPHERMIND_SEED", "8")
    session = new_session()
    assert session.rules.code_length == 6
    assert session.rules.max_attempts == 4
    # same env seed, same secret
    assert new_session().secret == session.secret


def test_play_rejects_symbols_outside_the_alphabet(session):
    with pytest.raises(ContractViolation):
        session.play(["X", "X", "X", "X"])
    # play does no case folding; that is submit's job
    with pytest.raises(ContractViolation):
        session.play(["r", "g", "b", "y"])
    assert session.attempts == 0
    assert session.history == []


def test_win_comes_with_a_rating_message(session):
    session.submit("MMMM")
    result = session.submit("RGBY")
    assert result.rating == "master"
    assert result.rating_message == "AMAZING! You're a master codebreaker!"


def test_no_rating_message_on_loss():
    session = Session(secret=["R", "G", "B", "Y"], rules=Rules(max_attempts=1))
    result = session.submit("MMMM")
    assert result.rating is None
    assert result.rating_message is None


def test_history_entries_cannot_be_changed(session):
    session.submit("rbym")
    entry = session.history[0]
    assert entry.guess == ("R", "B", "Y", "M")
    assert isinstance(entry.guess, tuple)
    # the transcript still renders as plain lists
    assert session.snapshot().history[0].guess == ["R", "B", "Y", "M"]
