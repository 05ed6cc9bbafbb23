from hostlist_expr.model.ast import (
    Bracket,
    Element,
    Hostlist,
    Literal,
    Range,
    RangeItem,
    Segment,
    Single,
)
from hostlist_expr.model.tokens import Token, TokenKind

__all__ = [
    "Bracket",
    "Element",
    "Hostlist",
    "Literal",
    "Range",
    "RangeItem",
    "Segment",
    "Single",
    "Token",
    "TokenKind",
]
