from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LimitsConfig:
    # Cap on generated hostnames, checked before expansion; None = unbounded
    max_hosts: Optional[int] = None


@dataclass
class SyntaxConfig:
    # Skip spaces around elements and inside brackets ("a[1, 2], b")
    allow_whitespace: bool = True


@dataclass
class HostlistConfiguration:
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    syntax: SyntaxConfig = field(default_factory=SyntaxConfig)

    def validate(self):
        if self.limits.max_hosts is not None and self.limits.max_hosts < 0:
            raise ValueError("limits.max_hosts must be a non-negative integer or None")
