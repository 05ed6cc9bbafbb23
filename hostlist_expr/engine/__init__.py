from hostlist_expr.engine.expander import count, expand, expand_element
from hostlist_expr.engine.runner import parse

__all__ = ["count", "expand", "expand_element", "parse"]
