"""Expand a parsed hostlist into concrete hostnames."""

import logging
from itertools import product
from typing import Iterator, List, Optional, Set

from hostlist_expr.model.ast import Bracket, Element, Hostlist, Literal, RangeItem, Single

logger = logging.getLogger("hostlist_expr")


def format_number(value: int, width: Optional[int]) -> str:
    if width is None:
        return str(value)
    return f"{value:0{width}d}"


def expand_item(item: RangeItem) -> List[str]:
    if isinstance(item, Single):
        return [format_number(item.value, item.width)]
    return [format_number(v, item.width) for v in range(item.start, item.end + 1)]


def expand_bracket(bracket: Bracket) -> List[str]:
    values: List[str] = []
    for item in bracket.items:
        values.extend(expand_item(item))
    return values


def expand_element(element: Element) -> Iterator[str]:
    """Yield every hostname one element denotes, in positional product order.

    Brackets vary right-most fastest, like nested loops written left to
    right; literals stay at their original positions.
    """
    choices = [
        [seg.text] if isinstance(seg, Literal) else expand_bracket(seg)
        for seg in element.segments
    ]
    for combo in product(*choices):
        yield "".join(combo)


def count(hostlist: Hostlist) -> int:
    """Number of hostnames the expansion generates, duplicates included."""
    total = 0
    for element in hostlist.elements:
        n = 1
        for bracket in element.brackets:
            n *= bracket.size()
        total += n
    return total


def expand(hostlist: Hostlist) -> List[str]:
    """Expand every element and return the sorted, deduplicated union."""
    hosts: Set[str] = set()
    for element in hostlist.elements:
        hosts.update(expand_element(element))

    logger.debug(
        "Expanded %d elements into %d unique hosts",
        len(hostlist.elements),
        len(hosts),
    )
    return sorted(hosts)
