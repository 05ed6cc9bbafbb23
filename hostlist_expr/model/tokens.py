from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenKind(Enum):
    LITERAL = "literal"
    NUMBER = "number"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    DASH = "-"
    SPACE = "whitespace"
    END = "end of input"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int
    # NUMBER only: digit count when the digits start with a zero
    width: Optional[int] = None

    @property
    def value(self) -> int:
        return int(self.text)

    @property
    def zero_padded(self) -> bool:
        return self.width is not None

    def describe(self) -> str:
        if self.kind in (TokenKind.END, TokenKind.SPACE):
            return str(self.kind)
        return repr(self.text)
