"""Split a hostlist expression into positioned tokens."""

import logging
from typing import List

from hostlist_expr.model.tokens import Token, TokenKind

logger = logging.getLogger("hostlist_expr")

_PUNCTUATION = {
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ",": TokenKind.COMMA,
    "-": TokenKind.DASH,
}

_DIGITS = frozenset("0123456789")


def _is_literal_char(ch: str) -> bool:
    return ch not in _PUNCTUATION and ch not in _DIGITS and not ch.isspace()


def tokenize(text: str) -> List[Token]:
    """Turn ``text`` into a token list terminated by an END token.

    Never raises: characters with no special meaning end up in LITERAL runs
    and structural problems are left for the parser to report.
    """
    tokens: List[Token] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch in _PUNCTUATION:
            tokens.append(Token(_PUNCTUATION[ch], ch, i))
            i += 1
            continue

        start = i
        if ch in _DIGITS:
            while i < n and text[i] in _DIGITS:
                i += 1
            digits = text[start:i]
            # "0" alone is not padded, "007" is
            width = len(digits) if len(digits) > 1 and digits[0] == "0" else None
            tokens.append(Token(TokenKind.NUMBER, digits, start, width))
        elif ch.isspace():
            while i < n and text[i].isspace():
                i += 1
            tokens.append(Token(TokenKind.SPACE, text[start:i], start))
        else:
            while i < n and _is_literal_char(text[i]):
                i += 1
            tokens.append(Token(TokenKind.LITERAL, text[start:i], start))

    tokens.append(Token(TokenKind.END, "", n))
    logger.debug("Tokenized %d chars into %d tokens", n, len(tokens))
    return tokens
