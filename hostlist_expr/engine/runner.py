"""
Entry point: text -> tokens -> tree -> hostnames.
"""
import logging
from typing import List, Optional

from hostlist_expr.config.configuration import HostlistConfiguration
from hostlist_expr.engine.expander import count, expand
from hostlist_expr.errors import ExpansionLimitError
from hostlist_expr.parsing.parser import parse_hostlist

logger = logging.getLogger("hostlist_expr")


def parse(text: str, cfg: Optional[HostlistConfiguration] = None) -> List[str]:
    """Expand a hostlist expression into a sorted list of unique hostnames.

    >>> parse("web[01-03,05],db1")
    ['db1', 'web01', 'web02', 'web03', 'web05']

    Raises a :class:`~hostlist_expr.errors.ParseError` subclass describing the
    first problem found, or :class:`~hostlist_expr.errors.ExpansionLimitError`
    when ``cfg.limits.max_hosts`` is set and would be exceeded. Nothing is
    returned alongside an error.
    """
    cfg = cfg or HostlistConfiguration()
    cfg.validate()

    hostlist = parse_hostlist(text, cfg)

    limit = cfg.limits.max_hosts
    if limit is not None:
        total = count(hostlist)
        if total > limit:
            logger.debug("Refusing to expand %r: %d hosts > limit %d", text, total, limit)
            raise ExpansionLimitError(total, limit)

    return expand(hostlist)
