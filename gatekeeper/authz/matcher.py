"""
Wildcard-aware role matching for Gatekeeper.
Shared by route-level and component-level gating.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
from typing import Any, Iterable, List, Sequence, Tuple

from ..errors import MalformedRoleError
from .types import WILDCARD, RoleIdentifier, WhitelistEntry


logger = logging.getLogger(__name__)


def role_matches(user_role: RoleIdentifier, entry: WhitelistEntry) -> bool:
    """
    Check a single user role against a single whitelist entry.

    The org-type wildcard is only honoured on the whitelist side. The
    org-role wildcard is honoured on either side.
    """
    org_type_ok = entry.org_type == WILDCARD or entry.org_type == user_role.org_type
    org_role_ok = (
        user_role.org_role == WILDCARD
        or entry.org_role == WILDCARD
        or user_role.org_role == entry.org_role
    )
    return org_type_ok and org_role_ok


def parse_whitelist(whitelist: Iterable[Any]) -> Tuple[List[WhitelistEntry], List[Any]]:
    """
    Parse whitelist entries one by one.

    Returns:
        Tuple of (parsed entries, entries that are not canonical)
    """
    entries = []
    rejected = []
    for item in whitelist:
        try:
            entries.append(WhitelistEntry.parse(item))
        except MalformedRoleError:
            rejected.append(item)
    return entries, rejected


def match_entries(user_roles: Sequence[str], entries: Sequence[WhitelistEntry]) -> List[str]:
    """
    Return the user roles that satisfy at least one parsed entry.

    Raises:
        MalformedRoleError: If any user role is not canonical
    """
    authorized = []
    for text in user_roles:
        role = RoleIdentifier.parse(text)
        if any(role_matches(role, entry) for entry in entries):
            authorized.append(text)
    return authorized


def match(user_roles: Sequence[str], whitelist: Iterable[Any]) -> List[str]:
    """
    Return the user roles that satisfy at least one whitelist entry.

    Order of user_roles is preserved and no deduplication is performed.
    Malformed whitelist entries never match; the remaining entries are
    still honoured.

    Args:
        user_roles: Canonical role identifiers of the principal
        whitelist: Canonical whitelist entries

    Returns:
        List of authorized role strings, possibly empty

    Raises:
        MalformedRoleError: If any user role is not canonical
    """
    entries, rejected = parse_whitelist(whitelist)
    if rejected:
        logger.warning(f"Ignoring malformed whitelist entries: {rejected!r}")
    return match_entries(user_roles, entries)
