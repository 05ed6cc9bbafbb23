"""
Structured errors raised while parsing and expanding hostlist expressions.

Every parse failure carries the offset it happened at, the kind of token
found there and the kinds that would have been accepted, so callers can build
their own diagnostics without looking at the message.
"""
from typing import FrozenSet, Iterable, Optional

from hostlist_expr.model.tokens import Token, TokenKind


class HostlistError(ValueError):
    """Base class for every error raised by hostlist_expr."""


class ParseError(HostlistError):
    reason = "parse error"

    def __init__(
            self,
            token: Token,
            expected: Iterable[TokenKind] = (),
            detail: Optional[str] = None,
            position: Optional[int] = None,
    ):
        self.token = token
        self.found: TokenKind = token.kind
        self.expected: FrozenSet[TokenKind] = frozenset(expected)
        self.position: int = token.position if position is None else position
        self.detail = detail
        super().__init__(self._build_message())

    def __reduce__(self):
        # args only holds the message; rebuild from the structured fields
        return self.__class__, (self.token, self.expected, self.detail, self.position)

    def _build_message(self) -> str:
        msg = f"{self.reason} at position {self.position}: found {self.token.describe()}"
        if self.expected:
            kinds = ", ".join(sorted(str(k) for k in self.expected))
            msg += f", expected one of: {kinds}"
        if self.detail:
            msg += f" ({self.detail})"
        return msg


class EmptyInputError(ParseError):
    reason = "empty hostlist"


class UnexpectedTokenError(ParseError):
    reason = "unexpected token"


class UnterminatedBracketError(ParseError):
    reason = "unterminated bracket"


class InvalidRangeError(ParseError):
    reason = "invalid range"


class TrailingSeparatorError(ParseError):
    reason = "trailing separator"


class ExpansionLimitError(HostlistError):
    """The expression would expand to more hosts than the configured cap."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Hostlist expands to {count} hosts, more than the limit of {limit}"
        )

    def __reduce__(self):
        return self.__class__, (self.count, self.limit)
