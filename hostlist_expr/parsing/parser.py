"""
Recursive-descent parser for hostlist expressions.

    hostlist  := element (',' element)* EOF
    element   := segment+
    segment   := LITERAL | bracket
    bracket   := '[' rangeitem (',' rangeitem)* ']'
    rangeitem := NUMBER ('-' NUMBER)?

Outside brackets NUMBER and DASH tokens are plain host text, so
``rack[1-2]-node7`` is a bracket followed by the literal ``-node7``.
"""
import logging
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Type

from hostlist_expr.config.configuration import HostlistConfiguration
from hostlist_expr.errors import (
    EmptyInputError,
    InvalidRangeError,
    ParseError,
    TrailingSeparatorError,
    UnexpectedTokenError,
    UnterminatedBracketError,
)
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
from hostlist_expr.parsing.tokenizer import tokenize

logger = logging.getLogger("hostlist_expr")


class ParserState(Enum):
    START = "start"
    IN_ELEMENT = "in_element"
    IN_BRACKET = "in_bracket"
    IN_RANGE_ITEM = "in_range_item"
    DONE = "done"
    ERROR = "error"


_TEXT_KINDS = frozenset({TokenKind.LITERAL, TokenKind.NUMBER, TokenKind.DASH})
_ELEMENT_START = _TEXT_KINDS | {TokenKind.LBRACKET}
_ELEMENT_END = frozenset({TokenKind.COMMA, TokenKind.END})
_BOUND = frozenset({TokenKind.NUMBER})
_AFTER_ITEM = frozenset({TokenKind.COMMA, TokenKind.RBRACKET})
_AFTER_BOUND = _AFTER_ITEM | {TokenKind.DASH}


class HostlistParser:
    """Single-use parser over a token list from :func:`tokenize`."""

    def __init__(self, tokens: Sequence[Token], allow_whitespace: bool = True):
        if not tokens or tokens[-1].kind != TokenKind.END:
            raise ValueError("token stream must end with an END token")
        self.tokens = tokens
        self.allow_whitespace = allow_whitespace
        self.state = ParserState.START
        self.expected: FrozenSet[TokenKind] = frozenset()
        self._pos = 0

    # ---------- token helpers ----------

    def _peek(self) -> Token:
        return self.tokens[self._pos]

    def _advance(self) -> Token:
        tok = self.tokens[self._pos]
        if tok.kind != TokenKind.END:
            self._pos += 1
        return tok

    def _skip_spaces(self) -> bool:
        skipped = False
        if self.allow_whitespace:
            while self._peek().kind == TokenKind.SPACE:
                self._advance()
                skipped = True
        return skipped

    def _expect(self, kinds: FrozenSet[TokenKind]):
        self.expected = kinds

    def _fail(
            self,
            error_cls: Type[ParseError],
            token: Token,
            detail: Optional[str] = None,
            position: Optional[int] = None,
    ):
        previous = self.state
        self.state = ParserState.ERROR
        error = error_cls(token, self.expected, detail=detail, position=position)
        logger.debug("Parser failed in state %s: %s", previous.value, error)
        raise error

    # ---------- grammar rules ----------

    def parse(self) -> Hostlist:
        if self.state != ParserState.START or self._pos != 0:
            raise RuntimeError("HostlistParser instances are single-use")

        self._skip_spaces()
        self._expect(_ELEMENT_START)
        if self._peek().kind == TokenKind.END:
            self._fail(EmptyInputError, self._peek())

        elements = [self._element()]

        while True:
            skipped = self._skip_spaces()
            self._expect(_ELEMENT_END if skipped else _ELEMENT_START | _ELEMENT_END)
            tok = self._peek()

            if tok.kind == TokenKind.END:
                break

            if tok.kind != TokenKind.COMMA:
                self._fail(UnexpectedTokenError, tok)

            self._advance()
            self.state = ParserState.START
            self._skip_spaces()
            self._expect(_ELEMENT_START)
            if self._peek().kind == TokenKind.END:
                self._fail(
                    TrailingSeparatorError,
                    self._peek(),
                    detail=f"',' at position {tok.position} is not followed by a host",
                )
            elements.append(self._element())

        self.state = ParserState.DONE
        logger.debug("Parsed %d hostlist elements", len(elements))
        return Hostlist(tuple(elements))

    def _element(self) -> Element:
        tok = self._peek()
        if tok.kind not in _ELEMENT_START:
            self._fail(UnexpectedTokenError, tok)

        self.state = ParserState.IN_ELEMENT
        segments: List[Segment] = []
        text: List[str] = []

        while True:
            tok = self._peek()
            if tok.kind in _TEXT_KINDS:
                text.append(self._advance().text)
            elif tok.kind == TokenKind.LBRACKET:
                if text:
                    segments.append(Literal("".join(text)))
                    text = []
                segments.append(self._bracket())
            else:
                break

        if text:
            segments.append(Literal("".join(text)))
        return Element(tuple(segments))

    def _bracket(self) -> Bracket:
        opening = self._advance()
        self.state = ParserState.IN_BRACKET
        items = [self._range_item(opening)]

        while True:
            self._skip_spaces()
            # a single number may still be followed by '-'
            self._expect(_AFTER_BOUND if isinstance(items[-1], Single) else _AFTER_ITEM)
            tok = self._peek()

            if tok.kind == TokenKind.COMMA:
                self._advance()
                self.state = ParserState.IN_BRACKET
                items.append(self._range_item(opening))
            elif tok.kind == TokenKind.RBRACKET:
                self._advance()
                self.state = ParserState.IN_ELEMENT
                return Bracket(tuple(items))
            elif tok.kind == TokenKind.END:
                self._fail(
                    UnterminatedBracketError,
                    tok,
                    detail="missing ']'",
                    position=opening.position,
                )
            else:
                self._fail(UnexpectedTokenError, tok)

    def _range_item(self, opening: Token) -> RangeItem:
        self._skip_spaces()
        start = self._bound(opening)
        self.state = ParserState.IN_RANGE_ITEM

        self._skip_spaces()
        self._expect(_AFTER_BOUND)
        if self._peek().kind != TokenKind.DASH:
            return Single(start.value, start.width)

        self._advance()
        self._skip_spaces()
        end = self._bound(opening)

        if start.value > end.value:
            self._expect(frozenset())
            self._fail(
                InvalidRangeError,
                end,
                detail=f"range start {start.text} is greater than end {end.text}",
                position=start.position,
            )

        return Range(start.value, end.value, start.width)

    def _bound(self, opening: Token) -> Token:
        self._expect(_BOUND)
        tok = self._peek()

        if tok.kind == TokenKind.NUMBER:
            return self._advance()
        if tok.kind == TokenKind.END:
            self._fail(
                UnterminatedBracketError,
                tok,
                detail="missing ']'",
                position=opening.position,
            )
        if tok.kind == TokenKind.LBRACKET:
            self._fail(UnexpectedTokenError, tok, detail="brackets cannot be nested")
        if tok.kind == TokenKind.SPACE:
            self._fail(UnexpectedTokenError, tok)
        self._fail(InvalidRangeError, tok, detail="range bounds must be numbers")


def parse_hostlist(text: str, cfg: Optional[HostlistConfiguration] = None) -> Hostlist:
    """Tokenize and parse ``text`` into a :class:`Hostlist` tree."""
    cfg = cfg or HostlistConfiguration()
    parser = HostlistParser(tokenize(text), allow_whitespace=cfg.syntax.allow_whitespace)
    return parser.parse()
