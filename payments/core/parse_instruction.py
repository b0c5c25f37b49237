"""Instruction Parser — recognizes the two fixed instruction shapes.

Grammar (keywords case-insensitive, ids and dates case-preserved):

    DEBIT  <amount> <ccy> FROM ACCOUNT <debit>  FOR CREDIT TO   ACCOUNT <credit> [ON <date>]
    CREDIT <amount> <ccy> TO   ACCOUNT <credit> FOR DEBIT  FROM ACCOUNT <debit>  [ON <date>]

Invariants:
    - parse_instruction never raises: unexpected faults become SY03
    - Missing keyword (SY01) and misordered keyword (SY02) are distinct violations
    - Check order is fixed: type, amount, currency, shape, account ids, date
    - Both shapes produce the same Instruction for the same transfer

Design Decisions:
    - Each shape is a GrammarRule row in _RULES: the ordered keyword sequence
      is data, one generic matcher checks presence then ordering
    - DEBIT is located by its LAST occurrence, the other keywords by their first,
      so the leading DEBIT of a debit-first instruction never shadows the clause
    - _SyntaxViolation is internal control flow only; callers see ParseResult
"""

from dataclasses import dataclass
from datetime import date

from payments.core.domain_types import Instruction, InstructionType, StatusCode
from payments.core.tokenize_instruction import TokenStream, tokenize


ACCOUNT = "ACCOUNT"
ON = "ON"

_ACCOUNT_ID_SPECIALS = frozenset("-.@")
_MIN_YEAR, _MAX_YEAR = 1000, 9999


@dataclass(frozen=True)
class ParseResult:
    """Tagged parser output: exactly one of instruction / error_code is set."""
    instruction: Instruction | None = None
    error_code: StatusCode | None = None

    @property
    def ok(self) -> bool:
        return self.instruction is not None


@dataclass(frozen=True)
class GrammarRule:
    """One production: ordered keyword anchors and which ACCOUNT names the debit side."""
    sequence: tuple[str, ...]
    debit_account_slot: int


_RULES: dict[InstructionType, GrammarRule] = {
    InstructionType.DEBIT: GrammarRule(
        sequence=("FROM", ACCOUNT, "FOR", "CREDIT", "TO", ACCOUNT),
        debit_account_slot=0,
    ),
    InstructionType.CREDIT: GrammarRule(
        sequence=("TO", ACCOUNT, "FOR", "DEBIT", "FROM", ACCOUNT),
        debit_account_slot=1,
    ),
}


class _SyntaxViolation(Exception):
    def __init__(self, code: StatusCode):
        super().__init__(code.value)
        self.code = code


# ─── Public entry point ──────────────────────────────────────────

def parse_instruction(text: object) -> ParseResult:
    """Parse raw instruction text. Never raises."""
    if not isinstance(text, str) or not text:
        return ParseResult(error_code=StatusCode.MALFORMED_INSTRUCTION)
    try:
        return ParseResult(instruction=_parse(tokenize(text)))
    except _SyntaxViolation as violation:
        return ParseResult(error_code=violation.code)
    except Exception:
        return ParseResult(error_code=StatusCode.MALFORMED_INSTRUCTION)


def _parse(stream: TokenStream) -> Instruction:
    instruction_type = _parse_type(stream)
    amount = _parse_amount(stream.get(1))
    currency = stream.get(2)
    if currency is None:
        raise _SyntaxViolation(StatusCode.MALFORMED_INSTRUCTION)

    positions = locate_keywords(stream)
    debit_account, credit_account = match_rule(
        _RULES[instruction_type], stream, positions,
    )
    for account_id in (debit_account, credit_account):
        if not is_valid_account_id(account_id):
            raise _SyntaxViolation(StatusCode.INVALID_ACCOUNT_ID)

    return Instruction(
        type=instruction_type,
        amount=amount,
        currency=currency.upper(),
        debit_account=debit_account,
        credit_account=credit_account,
        execute_by=_parse_execute_by(stream, positions[ON]),
    )


# ─── Leading fields ──────────────────────────────────────────────

def _parse_type(stream: TokenStream) -> InstructionType:
    try:
        return InstructionType(stream.upper[0])
    except ValueError:
        raise _SyntaxViolation(StatusCode.MISSING_KEYWORD) from None


def _parse_amount(token: str | None) -> int:
    if token is None:
        raise _SyntaxViolation(StatusCode.MALFORMED_INSTRUCTION)
    # isascii: str.isdigit alone accepts superscripts and other scripts' digits
    if not (token.isascii() and token.isdigit()):
        raise _SyntaxViolation(StatusCode.INVALID_AMOUNT)
    try:
        amount = int(token)
    except ValueError:
        # digit strings beyond the interpreter's int conversion limit
        raise _SyntaxViolation(StatusCode.INVALID_AMOUNT) from None
    if amount <= 0:
        raise _SyntaxViolation(StatusCode.INVALID_AMOUNT)
    return amount


# ─── Keyword table and shape matching ────────────────────────────

def locate_keywords(stream: TokenStream) -> dict[str, list[int]]:
    """Index table: keyword -> positions used by the grammar (empty when absent)."""
    upper = stream.upper

    def first(keyword: str) -> list[int]:
        return [upper.index(keyword)] if keyword in upper else []

    debit_positions = [i for i, token in enumerate(upper) if token == "DEBIT"]
    return {
        "FROM": first("FROM"),
        "TO": first("TO"),
        "FOR": first("FOR"),
        "CREDIT": first("CREDIT"),
        "DEBIT": debit_positions[-1:],
        ON: first(ON),
        ACCOUNT: [i for i, token in enumerate(upper) if token == ACCOUNT],
    }


def match_rule(
    rule: GrammarRule, stream: TokenStream, positions: dict[str, list[int]],
) -> tuple[str, str]:
    """Check keyword presence then ordering; return (debit_id, credit_id)."""
    anchors: list[int] = []
    account_slot = 0
    for keyword in rule.sequence:
        found = positions[keyword]
        if keyword == ACCOUNT:
            if len(found) <= account_slot:
                raise _SyntaxViolation(StatusCode.MISSING_KEYWORD)
            anchors.append(found[account_slot])
            account_slot += 1
        elif not found:
            raise _SyntaxViolation(StatusCode.MISSING_KEYWORD)
        else:
            anchors.append(found[0])

    if anchors[0] <= 0 or any(a >= b for a, b in zip(anchors, anchors[1:])):
        raise _SyntaxViolation(StatusCode.WRONG_KEYWORD_ORDER)

    first_account_at, second_account_at = positions[ACCOUNT][:2]
    first_id = stream.get(first_account_at + 1)
    second_id = stream.get(second_account_at + 1)
    if first_id is None or second_id is None:
        raise _SyntaxViolation(StatusCode.MALFORMED_INSTRUCTION)

    if rule.debit_account_slot == 0:
        return first_id, second_id
    return second_id, first_id


def is_valid_account_id(account_id: str) -> bool:
    """ASCII letters, digits, '-', '.', '@' only."""
    return bool(account_id) and all(
        (char.isascii() and char.isalnum()) or char in _ACCOUNT_ID_SPECIALS
        for char in account_id
    )


# ─── Optional date clause ────────────────────────────────────────

def _parse_execute_by(stream: TokenStream, on_positions: list[int]) -> date | None:
    if not on_positions:
        return None
    execute_by = parse_iso_date(stream.get(on_positions[0] + 1))
    if execute_by is None:
        raise _SyntaxViolation(StatusCode.INVALID_DATE)
    return execute_by


def parse_iso_date(token: str | None) -> date | None:
    """Strict YYYY-MM-DD to a real calendar date, None when invalid."""
    if token is None or len(token) != 10 or token[4] != "-" or token[7] != "-":
        return None
    parts = (token[:4], token[5:7], token[8:])
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None
    year, month, day = (int(part) for part in parts)
    if not (_MIN_YEAR <= year <= _MAX_YEAR and 1 <= month <= 12 and 1 <= day <= 31):
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None
