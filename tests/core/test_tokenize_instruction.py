"""Instruction Tokenizer — normalization and aligned token views."""

from payments.core.tokenize_instruction import normalize_whitespace, tokenize


def test_normalize_collapses_and_trims():
    assert normalize_whitespace("  DEBIT \t 5\n\nUSD  ") == "DEBIT 5 USD"


def test_tokenize_builds_aligned_upper_view():
    stream = tokenize("debit 5 usd from account Ab-1")
    assert stream.tokens == ("debit", "5", "usd", "from", "account", "Ab-1")
    assert stream.upper == ("DEBIT", "5", "USD", "FROM", "ACCOUNT", "AB-1")


def test_get_out_of_range_is_none():
    stream = tokenize("DEBIT 5")
    assert stream.get(1) == "5"
    assert stream.get(2) is None
    assert stream.get(-1) is None


def test_blank_text_yields_single_empty_token():
    stream = tokenize("   ")
    assert stream.tokens == ("",)
    assert stream.get(0) is None
