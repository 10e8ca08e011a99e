from core.selector import NO_TEXT, pick_best, run_all, select
from strategies import AttemptResult, StrategyId

W = StrategyId.WIDE_DECODE
P = StrategyId.PRINTABLE_RUN
M = StrategyId.MARKED_TEXT_RUN


def test_longest_text_wins():
    out = pick_best([AttemptResult(W, "abc"), AttemptResult(P, "abcd"), AttemptResult(M, "ab")])
    assert out.winning_strategy_id is P
    assert out.text == "abcd"


def test_tie_goes_to_declaration_order():
    out = pick_best([AttemptResult(W, "abc"), AttemptResult(P, "xyz"), AttemptResult(M, "123")])
    assert out.winning_strategy_id is W


def test_failed_and_empty_attempts_are_ignored():
    out = pick_best([AttemptResult.failed(W), AttemptResult(P, ""), AttemptResult(M, "x")])
    assert out.winning_strategy_id is M
    assert pick_best([AttemptResult.failed(W), AttemptResult(P, "")]) == NO_TEXT
    assert pick_best([]) == NO_TEXT
    assert not NO_TEXT.found


def test_prefix_extension_wins():
    short = "quarter results"
    out = pick_best([AttemptResult(W, short), AttemptResult(M, short + " and outlook")])
    assert out.winning_strategy_id is M


def test_run_all_waits_for_every_strategy():
    attempts = run_all(b"plain text that is long enough to matter")
    assert [a.strategy_id for a in attempts] == [W, P, M]


def test_null_bytes_give_no_text():
    assert select(b"\x00" * 1000) == NO_TEXT


def test_parallel_matches_sequential(text_pdf_bytes):
    assert select(text_pdf_bytes, parallel=True) == select(text_pdf_bytes)
