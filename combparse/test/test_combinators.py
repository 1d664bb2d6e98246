import logging

from ..chars import char, digit, integer, one_of, to_int
from ..combinators import ap, either, map_with, pure, run, sequence, then_discard
from ..config import reset_settings
from ..functional import curry


def test_pure_consumes_nothing():
    assert pure(5).apply("ab") == (5, "ab")
    assert pure(None).apply("") == (None, "")


def test_map_with_puts_function_first():
    assert map_with(int, digit).apply("8") == (8, "")


def test_ap_with_curried_function():
    def triple(a, b, c):
        return a + b + c

    parser = ap(ap(map_with(curry(triple), digit), digit), digit)
    assert parser.apply("1234") == ("123", "4")


def test_then_discard_function():
    assert then_discard(digit, char(";")).apply("4;5") == ("4", "5")


def test_either():
    choice = either(char("a"), char("b"), char("c"))
    assert choice.apply("cat") == ("c", "at")
    assert choice.apply("dog") is None
    assert either(char("a")).apply("a") == ("a", "")


def test_sequence():
    assert sequence(digit, char("*"), digit).apply("2*3x") == (("2", "*", "3"), "x")
    assert sequence(digit, char("*"), digit).apply("2*x") is None
    assert sequence().apply("abc") == ((), "abc")


def test_one_of_and_to_int():
    assert one_of("+-").apply("-1") == ("-", "1")
    assert to_int([]) == 0
    assert to_int(["4", "2"]) == 42
    assert integer.apply("abc") == (0, "abc")


def test_run_logs_outcome(caplog, monkeypatch):
    monkeypatch.delenv("COMBPARSE_TRACE", raising=False)
    reset_settings()
    caplog.set_level(logging.DEBUG, logger="combparse")

    assert run(digit, "7x") == ("7", "x")
    assert run(digit, "x") is None

    records = [record for record in caplog.records if record.name == "combparse"]
    messages = [record.getMessage() for record in records]
    assert any("Parsed '7x'" in m for m in messages)
    assert any("No parse for 'x'" in m for m in messages)
    assert all(record.levelno == logging.DEBUG for record in records)
    reset_settings()


def test_run_trace_logs_at_info(caplog, monkeypatch):
    monkeypatch.setenv("COMBPARSE_TRACE", "yes")
    reset_settings()
    caplog.set_level(logging.INFO, logger="combparse")
    try:
        assert digit.run("1") == ("1", "")
    finally:
        reset_settings()

    assert [r.levelno for r in caplog.records if r.name == "combparse"] == [logging.INFO]


def test_run_ignores_bad_log_level(monkeypatch):
    monkeypatch.setenv("COMBPARSE_LOG_LEVEL", "loud")
    reset_settings()
    try:
        assert run(digit, "7") == ("7", "")
        assert run(digit, "x") is None
    finally:
        reset_settings()
