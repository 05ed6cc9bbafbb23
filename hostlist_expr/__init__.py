"""Expand compact hostlist expressions such as ``web[01-03,05],db1``."""

from hostlist_expr.config.configuration import HostlistConfiguration
from hostlist_expr.engine.expander import count, expand
from hostlist_expr.engine.runner import parse
from hostlist_expr.errors import (
    EmptyInputError,
    ExpansionLimitError,
    HostlistError,
    InvalidRangeError,
    ParseError,
    TrailingSeparatorError,
    UnexpectedTokenError,
    UnterminatedBracketError,
)
from hostlist_expr.model.tokens import Token, TokenKind
from hostlist_expr.parsing.parser import parse_hostlist
from hostlist_expr.parsing.tokenizer import tokenize
from hostlist_expr.utils.diagnostics import format_error
from hostlist_expr.utils.logger import setup_logging

__version__ = "1.0.0"

__all__ = [
    "EmptyInputError",
    "ExpansionLimitError",
    "HostlistConfiguration",
    "HostlistError",
    "InvalidRangeError",
    "ParseError",
    "Token",
    "TokenKind",
    "TrailingSeparatorError",
    "UnexpectedTokenError",
    "UnterminatedBracketError",
    "count",
    "expand",
    "format_error",
    "parse",
    "parse_hostlist",
    "setup_logging",
    "tokenize",
]
