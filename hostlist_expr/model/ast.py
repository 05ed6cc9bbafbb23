"""
Syntax tree produced by the parser and consumed by the expander.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Single:
    value: int
    width: Optional[int] = None

    def size(self) -> int:
        return 1


@dataclass(frozen=True)
class Range:
    start: int
    end: int
    width: Optional[int] = None

    def size(self) -> int:
        return self.end - self.start + 1


RangeItem = Union[Single, Range]


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Bracket:
    items: Tuple[RangeItem, ...]

    def size(self) -> int:
        return sum(item.size() for item in self.items)


Segment = Union[Literal, Bracket]


@dataclass(frozen=True)
class Element:
    segments: Tuple[Segment, ...]

    @property
    def brackets(self) -> Tuple[Bracket, ...]:
        return tuple(s for s in self.segments if isinstance(s, Bracket))


@dataclass(frozen=True)
class Hostlist:
    elements: Tuple[Element, ...]
