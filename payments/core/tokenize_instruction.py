"""Instruction Tokenizer — whitespace normalization and dual-case token views.

Invariants:
    - Pure: depends only on the input string
    - tokens and upper always have the same length, index-aligned
    - Normalized text has no leading/trailing space and no runs of whitespace
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenStream:
    """Original-case tokens (ids, dates) + upper-cased view (keywords)."""
    tokens: tuple[str, ...]
    upper: tuple[str, ...]

    def get(self, index: int) -> str | None:
        """Original-case token at index, None when out of range or empty."""
        if 0 <= index < len(self.tokens) and self.tokens[index]:
            return self.tokens[index]
        return None


def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


def tokenize(text: str) -> TokenStream:
    tokens = tuple(normalize_whitespace(text).split(" "))
    return TokenStream(
        tokens=tokens, upper=tuple(token.upper() for token in tokens),
    )
