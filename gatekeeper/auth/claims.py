"""
Claims extraction for Gatekeeper.

Turns a decoded token payload into canonical orgType:orgRole identifiers.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
from typing import Any, List, Mapping, Sequence, Tuple

from ..authz.types import WILDCARD, RoleIdentifier
from ..errors import ClaimsError, GatekeeperError, MissingClaimsError, MissingOrgTypeError
from .types import ExtractionResult

logger = logging.getLogger(__name__)


def claims_path(root_claims_property) -> Tuple[str, ...]:
    """Turn a root claims property setting into a tuple of keys."""
    if not root_claims_property:
        return ()
    if isinstance(root_claims_property, str):
        return (root_claims_property,)
    return tuple(root_claims_property)


def claim_text(value: Any) -> str:
    """
    Render a scalar claim value as text.

    Booleans render in their JSON spelling, as they appear in the token.

    Raises:
        ClaimsError: If the value is a nested structure
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple, set)):
        raise ClaimsError(f"Claim value must be a scalar, got {type(value).__name__}")
    return str(value)


class ClaimsExtractor:
    """
    Projects claims from a decoded payload into role identifiers.

    Each claim becomes "<orgType>:<orgRole>". A claim without a role
    yields the wildcard role rather than being dropped.
    """

    def __init__(self, root_claims_property=None,
                 org_type_prop: str = "organizationType",
                 org_role_prop: str = "role"):
        self.path = claims_path(root_claims_property)
        self.org_type_prop = org_type_prop
        self.org_role_prop = org_role_prop

    @classmethod
    def from_config(cls, config) -> 'ClaimsExtractor':
        return cls(
            root_claims_property=config.root_claims_property,
            org_type_prop=config.claim_org_type_prop,
            org_role_prop=config.claim_org_role_prop
        )

    def extract(self, payload: Any) -> ExtractionResult:
        """
        Extract role identifiers, collapsing any failure to an empty result.
        """
        try:
            return ExtractionResult.ok(self.extract_or_raise(payload))
        except GatekeeperError as e:
            logger.warning(f"Claims extraction failed: {e.message}")
            return ExtractionResult.empty(e.message, e.error_code)

    def extract_or_raise(self, payload: Any) -> List[str]:
        """
        Extract role identifiers.

        Raises:
            MissingClaimsError: If the root claims property is absent
            MissingOrgTypeError: If a claim has no org-type
            ClaimsError: If the claims structure has an unsupported shape
            MalformedRoleError: If a claim value contains the separator
        """
        claims = self._select(payload)
        if isinstance(claims, Mapping):
            claims = [claims]
        elif not isinstance(claims, Sequence) or isinstance(claims, (str, bytes)):
            raise ClaimsError(f"Unsupported claims structure: {type(claims).__name__}")

        return [self._to_role(claim) for claim in claims]

    def _select(self, payload: Any) -> Any:
        current = payload
        for key in self.path:
            if not isinstance(current, Mapping) or current.get(key) is None:
                raise MissingClaimsError(".".join(self.path))
            current = current[key]
        if current is None:
            raise ClaimsError("Decoded payload is empty")
        return current

    def _to_role(self, claim: Any) -> str:
        if not isinstance(claim, Mapping):
            raise ClaimsError(f"Claim must be a mapping, got {type(claim).__name__}")

        org_type = claim.get(self.org_type_prop)
        if org_type is None or org_type == "":
            raise MissingOrgTypeError(self.org_type_prop)

        org_role = claim.get(self.org_role_prop)
        if not org_role:
            org_role = WILDCARD

        text = str(RoleIdentifier(claim_text(org_type), claim_text(org_role)))
        # Values containing the separator would not survive a round trip
        RoleIdentifier.parse(text)
        return text
