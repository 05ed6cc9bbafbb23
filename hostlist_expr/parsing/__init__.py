from hostlist_expr.parsing.parser import HostlistParser, ParserState, parse_hostlist
from hostlist_expr.parsing.tokenizer import tokenize

__all__ = ["HostlistParser", "ParserState", "parse_hostlist", "tokenize"]
