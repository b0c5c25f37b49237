"""Instruction Parser — tests for both grammar shapes and every syntax code.

Tests cover:
    - DEBIT and CREDIT shapes produce the same Instruction
    - Case-insensitive keywords, case-preserved ids, upper-cased currency
    - SY01 missing keyword / SY02 wrong order / SY03 missing field
    - AM01 amounts, AC04 account charset, DT01 dates
    - Parser never raises
"""

from datetime import date

import pytest

from payments.core.domain_types import InstructionType, StatusCode
from payments.core.parse_instruction import (
    is_valid_account_id,
    parse_instruction,
    parse_iso_date,
)


DEBIT_TEXT = "DEBIT 500 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1"
CREDIT_TEXT = "CREDIT 500 USD TO ACCOUNT B1 FOR DEBIT FROM ACCOUNT A1"


def _code(text):
    result = parse_instruction(text)
    assert not result.ok
    return result.error_code


# ─── Happy paths ─────────────────────────────────────────────────

def test_parses_debit_shape():
    result = parse_instruction(DEBIT_TEXT)
    assert result.ok
    instruction = result.instruction
    assert instruction.type == InstructionType.DEBIT
    assert instruction.amount == 500
    assert instruction.currency == "USD"
    assert instruction.debit_account == "A1"
    assert instruction.credit_account == "B1"
    assert instruction.execute_by is None


def test_parses_credit_shape_with_same_meaning():
    debit = parse_instruction(DEBIT_TEXT).instruction
    credit = parse_instruction(CREDIT_TEXT).instruction
    assert credit.type == InstructionType.CREDIT
    assert credit.debit_account == debit.debit_account == "A1"
    assert credit.credit_account == debit.credit_account == "B1"
    assert credit.amount == debit.amount


def test_keywords_are_case_insensitive_and_ids_keep_case():
    result = parse_instruction(
        "debit 10 usd from account acc-One for credit to account Acc.Two",
    )
    assert result.ok
    assert result.instruction.type == InstructionType.DEBIT
    assert result.instruction.currency == "USD"
    assert result.instruction.debit_account == "acc-One"
    assert result.instruction.credit_account == "Acc.Two"


def test_whitespace_runs_are_collapsed():
    result = parse_instruction(
        "  DEBIT   500\tUSD FROM  ACCOUNT A1\nFOR CREDIT TO ACCOUNT   B1  ",
    )
    assert result.ok
    assert result.instruction.credit_account == "B1"


def test_parses_optional_date_clause():
    result = parse_instruction(
        "CREDIT 100 GBP TO ACCOUNT X FOR DEBIT FROM ACCOUNT Y ON 2099-01-01",
    )
    assert result.ok
    assert result.instruction.execute_by == date(2099, 1, 1)
    assert result.instruction.debit_account == "Y"
    assert result.instruction.credit_account == "X"


def test_account_ids_accept_at_and_period():
    result = parse_instruction(
        "DEBIT 1 NGN FROM ACCOUNT user@bank.ng FOR CREDIT TO ACCOUNT a-b.c",
    )
    assert result.ok
    assert result.instruction.debit_account == "user@bank.ng"


# ─── Syntax codes ────────────────────────────────────────────────

def test_unknown_leading_keyword_is_sy01():
    assert _code("TRANSFER 500 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1") == (
        StatusCode.MISSING_KEYWORD
    )


def test_missing_for_is_sy01():
    assert _code("DEBIT 10 USD FROM ACCOUNT A1 CREDIT TO ACCOUNT B1") == (
        StatusCode.MISSING_KEYWORD
    )


def test_single_account_keyword_is_sy01():
    assert _code("DEBIT 10 USD FROM ACCOUNT A1 FOR CREDIT TO B1") == (
        StatusCode.MISSING_KEYWORD
    )


def test_credit_shape_missing_debit_keyword_is_sy01():
    assert _code("CREDIT 10 USD TO ACCOUNT B1 FOR FROM ACCOUNT A1") == (
        StatusCode.MISSING_KEYWORD
    )


def test_whitespace_only_is_sy01():
    assert _code("    ") == StatusCode.MISSING_KEYWORD


def test_keywords_out_of_order_is_sy02():
    assert _code("DEBIT 10 USD FOR ACCOUNT A1 FROM CREDIT TO ACCOUNT B1") == (
        StatusCode.WRONG_KEYWORD_ORDER
    )


def test_credit_shape_out_of_order_is_sy02():
    assert _code("CREDIT 10 USD TO ACCOUNT B1 FOR FROM DEBIT ACCOUNT A1") == (
        StatusCode.WRONG_KEYWORD_ORDER
    )


def test_missing_trailing_account_id_is_sy03():
    assert _code("DEBIT 10 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT") == (
        StatusCode.MALFORMED_INSTRUCTION
    )


@pytest.mark.parametrize("text", [None, "", 42])
def test_empty_or_non_string_is_sy03(text):
    assert _code(text) == StatusCode.MALFORMED_INSTRUCTION


def test_missing_amount_is_sy03():
    assert _code("DEBIT") == StatusCode.MALFORMED_INSTRUCTION


def test_missing_currency_is_sy03():
    assert _code("DEBIT 10") == StatusCode.MALFORMED_INSTRUCTION


@pytest.mark.parametrize("amount", ["0", "-5", "1.5", "abc", "1e3", "²"])
def test_invalid_amount_is_am01(amount):
    text = f"DEBIT {amount} USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1"
    assert _code(text) == StatusCode.INVALID_AMOUNT


def test_disallowed_account_character_is_ac04():
    assert _code("DEBIT 10 USD FROM ACCOUNT A#1 FOR CREDIT TO ACCOUNT B1") == (
        StatusCode.INVALID_ACCOUNT_ID
    )


def test_disallowed_credit_account_character_is_ac04():
    assert _code("DEBIT 10 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B$1") == (
        StatusCode.INVALID_ACCOUNT_ID
    )


@pytest.mark.parametrize(
    "token", ["2024-13-01", "2024-02-30", "24-01-01", "2024/01/01", "0999-01-01"],
)
def test_invalid_date_is_dt01(token):
    text = f"DEBIT 10 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1 ON {token}"
    assert _code(text) == StatusCode.INVALID_DATE


def test_on_without_date_is_dt01():
    assert _code("DEBIT 10 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1 ON") == (
        StatusCode.INVALID_DATE
    )


def test_amount_checked_before_shape():
    assert _code("DEBIT 0 USD FROM ACCOUNT A1 CREDIT TO ACCOUNT B1") == (
        StatusCode.INVALID_AMOUNT
    )


# ─── Helpers ─────────────────────────────────────────────────────

def test_is_valid_account_id():
    assert is_valid_account_id("A-1.b@c")
    assert not is_valid_account_id("")
    assert not is_valid_account_id("A 1")
    assert not is_valid_account_id("Ä1")


def test_parse_iso_date_accepts_leap_day():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)
    assert parse_iso_date("2023-02-29") is None


def test_amount_beyond_int_conversion_limit_is_am01():
    text = f"DEBIT {'9' * 5000} USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1"
    assert _code(text) == StatusCode.INVALID_AMOUNT


def test_unexpected_fault_is_reported_as_sy03(monkeypatch):
    def explode(text):
        raise RuntimeError("tokenizer failure")

    monkeypatch.setattr("payments.core.parse_instruction.tokenize", explode)
    assert _code(DEBIT_TEXT) == StatusCode.MALFORMED_INSTRUCTION
