import io

import pytest
from mastermind.engine import Feedback, GameOverError, InvalidParameter, LengthMismatch, make_rng
from mastermind.harness import GameConfig, Session, run_game, iter_guesses, format_outcome


def test_win_on_last_allowed_attempt():
    session = Session("AB", max_attempts=3)
    seen = []
    r = run_game(session, ["BA", "AC", "AB"], on_feedback=lambda s, g, fb: seen.append(fb))
    assert seen == [Feedback(0, 2, 0), Feedback(1, 0, 1), Feedback(2, 0, 0)]
    assert r["outcome"] == "won" and r["success"] is True
    assert r["attempts_used"] == 3
    assert r["history"] == [("BA", "OO"), ("AC", "X-"), ("AB", "XX")]


def test_loss_when_budget_exhausted():
    session = Session("AB", max_attempts=1)
    r = run_game(session, ["AA"])
    assert r["outcome"] == "lost" and r["success"] is False
    assert session.attempts_used == session.max_attempts == 1
    assert r["history"] == [("AA", "X-")]
    assert r["secret"] == "AB"


@pytest.mark.parametrize("moves,outcome", [
    (["ABCD"], "won"),
    (["AAAA", "BBBB"], "lost"),
])
def test_submit_after_terminal_state_is_an_error(moves, outcome):
    session = Session("ABCD", max_attempts=2)
    for m in moves:
        session.submit(m)
    assert session.outcome == outcome
    with pytest.raises(GameOverError) as ei:
        session.submit("ABCD")
    assert ei.value.outcome == outcome
    assert session.attempts_used == len(moves)


def test_secret_is_normalized_like_guesses():
    session = Session(" ab cd\n", max_attempts=3)
    assert session.reveal() == "ABCD"
    assert session.submit("abcd").is_win
    assert session.outcome == "won"


def test_secret_outside_alphabet_is_rejected():
    with pytest.raises(InvalidParameter) as ei:
        Session("ABCZ", max_attempts=3, symbols="ABCD")
    assert ei.value.rule == "secret_symbols"


def test_length_mismatch_does_not_consume_an_attempt():
    session = Session("ABCD", max_attempts=2)
    with pytest.raises(LengthMismatch):
        session.submit("ABC")
    assert session.attempts_used == 0
    assert session.outcome == "in_progress"


def test_run_game_skips_rejected_guesses():
    session = Session("ABCD", max_attempts=2, symbols="ABCD")
    rejected = []
    r = run_game(session, ["AB", "ABCZ", "DCBA", "ABCD", "AAAA"],
                 on_rejected=lambda raw, e: rejected.append(raw))
    assert rejected == ["AB", "ABCZ"]
    assert r["rejected"] == 2
    assert r["outcome"] == "won" and r["attempts_used"] == 2


def test_run_game_abandoned_when_source_runs_dry():
    session = Session("ABCD", max_attempts=5)
    r = run_game(session, ["AAAA"])
    assert r["outcome"] == "in_progress"
    assert r["attempts_used"] == 1
    assert "abandoned" in format_outcome(r)


def test_run_game_consumes_guess_source_lazily():
    session = Session("ABCD", max_attempts=3)
    source = iter(["ABCD", "DCBA"])
    run_game(session, source)
    assert next(source) == "DCBA"


def test_session_new_from_config():
    session = Session.new(GameConfig(max_attempts=5, length=6, n_symbols=3), rng=make_rng(3))
    assert session.length == 6
    assert set(session.reveal()) <= set("ABC")
    assert session.remaining_attempts() == 5


@pytest.mark.parametrize("config,rule", [
    (GameConfig(max_attempts=0), "attempts_zero"),
    (GameConfig(max_attempts=21), "attempts_max"),
    (GameConfig(length=3), "length_range"),
    (GameConfig(n_symbols=21), "symbol_count_range"),
    (GameConfig(length=6, n_symbols=4, unique=True), "unique_infeasible"),
])
def test_session_new_rejects_bad_config(config, rule):
    with pytest.raises(InvalidParameter) as ei:
        Session.new(config)
    assert ei.value.rule == rule


def test_iter_guesses_trims_and_stops_on_quit():
    stream = io.StringIO("abcd\r\n\n  bbaa  \nquit\nCCCC\n")
    assert list(iter_guesses(stream)) == ["abcd", "bbaa"]
