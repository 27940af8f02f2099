"""
Role and whitelist types for Gatekeeper.
Defines the canonical orgType:orgRole pairing shared by session roles and route whitelists.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from ..errors import MalformedRoleError, WhitelistError


WILDCARD = "*"
SEPARATOR = ":"

# Keys read from structured whitelist items, independent of the claim config
ENTRY_ORG_TYPE_KEY = "organizationType"
ENTRY_ORG_ROLE_KEY = "role"


def _split(text: Any):
    if not isinstance(text, str):
        raise MalformedRoleError(text)
    parts = text.split(SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedRoleError(text)
    return parts[0], parts[1]


@dataclass(frozen=True)
class RoleIdentifier:
    """
    An organizational affiliation of the authenticated principal.

    Built from token claims only, so org_type is always concrete. org_role
    is the wildcard when the claim carried no role.
    """
    org_type: str
    org_role: str = WILDCARD

    def __str__(self) -> str:
        return f"{self.org_type}{SEPARATOR}{self.org_role}"

    @classmethod
    def parse(cls, text: str) -> 'RoleIdentifier':
        """Parse a canonical orgType:orgRole string."""
        org_type, org_role = _split(text)
        return cls(org_type=org_type, org_role=org_role)


@dataclass(frozen=True)
class WhitelistEntry:
    """
    An allowed affiliation for a route or component.

    Either side may be the wildcard.
    """
    org_type: str
    org_role: str

    def __str__(self) -> str:
        return f"{self.org_type}{SEPARATOR}{self.org_role}"

    @classmethod
    def parse(cls, text: str) -> 'WhitelistEntry':
        """Parse a canonical orgType:orgRole string."""
        org_type, org_role = _split(text)
        return cls(org_type=org_type, org_role=org_role)

    @staticmethod
    def normalize(item: Union[str, Mapping[str, Any], tuple, list,
                              'WhitelistEntry', RoleIdentifier]) -> str:
        """
        Convert a whitelist item into its canonical string form.

        Strings pass through untouched. Structured items are joined with
        the separator; a missing component yields an empty side, which is
        rejected later when the entry is matched.

        Raises:
            WhitelistError: If the item has no recognizable shape
        """
        if isinstance(item, str):
            return item
        if isinstance(item, (WhitelistEntry, RoleIdentifier)):
            return str(item)
        if isinstance(item, Mapping):
            org_type = item.get(ENTRY_ORG_TYPE_KEY)
            org_role = item.get(ENTRY_ORG_ROLE_KEY)
        elif isinstance(item, (tuple, list)) and len(item) == 2:
            org_type, org_role = item
        else:
            raise WhitelistError(
                f"Unsupported whitelist item: {item!r}",
                details={"type": type(item).__name__}
            )
        org_type = "" if org_type is None else str(org_type)
        org_role = "" if org_role is None else str(org_role)
        return f"{org_type}{SEPARATOR}{org_role}"
