from hostlist_expr.config.configuration import (
    HostlistConfiguration,
    LimitsConfig,
    SyntaxConfig,
)

__all__ = ["HostlistConfiguration", "LimitsConfig", "SyntaxConfig"]
