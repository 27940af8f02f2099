# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package authz implements role matching and route rules for Gatekeeper.

Roles and whitelist entries share the canonical "orgType:orgRole" form.
The org-type wildcard is honoured only on the whitelist side; the org-role
wildcard on either side.
"""

from .types import (
    WILDCARD,
    SEPARATOR,
    RoleIdentifier,
    WhitelistEntry,
)

from .matcher import (
    match,
    match_entries,
    parse_whitelist,
    role_matches,
)

from .registry import (
    RuleRegistry,
    normalize_whitelist,
)

__all__ = [
    # Types
    'WILDCARD',
    'SEPARATOR',
    'RoleIdentifier',
    'WhitelistEntry',

    # Matching
    'match',
    'match_entries',
    'parse_whitelist',
    'role_matches',

    # Rules
    'RuleRegistry',
    'normalize_whitelist',
]
