"""
Decision types for Gatekeeper.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Outcome(Enum):
    """Result of a gating decision."""
    GRANTED = "granted"
    UNLISTED = "unlisted"
    DENIED = "denied"


@dataclass
class RouteDecision:
    """
    Gating decision with the evidence behind it.

    roles holds the session roles that justified a grant. skipped lists
    whitelist entries that were ignored because they are not canonical. A
    DENIED decision with error set came from an internal fault or from a
    whitelist holding such entries, rather than a plain role mismatch.
    """
    outcome: Outcome
    route: Optional[str] = None
    roles: List[str] = field(default_factory=list)
    reason: str = ""
    error: Optional[str] = None
    skipped: List[Any] = field(default_factory=list)

    @property
    def allowed(self) -> bool:
        return self.outcome != Outcome.DENIED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'outcome': self.outcome.value,
            'route': self.route,
            'roles': self.roles,
            'reason': self.reason,
            'error': self.error,
            'skipped': self.skipped
        }
