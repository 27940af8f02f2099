"""
Route rule registry for Gatekeeper.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..errors import WhitelistError
from .types import WhitelistEntry


logger = logging.getLogger(__name__)

# Never parses, so a route holding it is listed but matches nobody
DENY_ONLY_ENTRY = ""


def normalize_whitelist(whitelist: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    """
    Normalize whitelist items into canonical strings.

    Items with no recognizable shape are kept as an empty string so the
    route stays listed and every later match attempt on it fails closed.
    A whitelist that is not iterable becomes a single such item.
    """
    if whitelist is None:
        return ()
    try:
        items = iter(whitelist)
    except TypeError:
        logger.warning(f"Whitelist is not iterable, keeping it as deny-only: {whitelist!r}")
        return (DENY_ONLY_ENTRY,)

    normalized = []
    for item in items:
        try:
            normalized.append(WhitelistEntry.normalize(item))
        except WhitelistError as e:
            logger.warning(f"Keeping unusable whitelist item as deny-only: {e.message}")
            normalized.append(DENY_ONLY_ENTRY)
    return tuple(normalized)


class RuleRegistry:
    """
    Mapping of route keys to whitelists.

    A route with no rule is unrestricted. A route with an empty whitelist
    is restricted to nobody.
    """

    def __init__(self):
        self._rules: Dict[str, Tuple[str, ...]] = {}

    def add_rule(self, route: str, whitelist: Optional[Iterable[Any]] = None) -> Tuple[str, ...]:
        """
        Register a whitelist for a route, replacing any existing one.

        Returns:
            The normalized whitelist as stored
        """
        normalized = normalize_whitelist(whitelist)
        # Whole-value replacement; readers never see a half-built mapping
        self._rules = {**self._rules, route: normalized}
        logger.debug(f"Rule set for route {route!r}: {list(normalized)}")
        return normalized

    def lookup(self, route: str) -> Optional[Tuple[str, ...]]:
        """Get the whitelist for a route, or None if the route has no rule."""
        return self._rules.get(route)

    def remove_rule(self, route: str) -> bool:
        """Remove a route's rule. Returns True if a rule existed."""
        if route not in self._rules:
            return False
        rules = dict(self._rules)
        del rules[route]
        self._rules = rules
        return True

    def routes(self) -> List[str]:
        """List registered route keys in registration order."""
        return list(self._rules)

    def snapshot(self) -> Dict[str, List[str]]:
        """Copy of all rules."""
        return {route: list(whitelist) for route, whitelist in self._rules.items()}

    def __contains__(self, route: object) -> bool:
        return route in self._rules

    def __len__(self) -> int:
        return len(self._rules)
