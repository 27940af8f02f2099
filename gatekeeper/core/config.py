"""
Configuration module for Gatekeeper.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Union

from ..util.config import ENV_PREFIX, get_config_value, get_section, load_config_file


DEFAULT_ORG_TYPE_PROP = "organizationType"
DEFAULT_ORG_ROLE_PROP = "role"

_CAMEL_KEYS = {
    "rootClaimsProperty": "root_claims_property",
    "claimOrgTypeProp": "claim_org_type_prop",
    "claimOrgRoleProp": "claim_org_role_prop",
}


@dataclass(frozen=True)
class GatekeeperConfig:
    """
    Claim extraction settings. Immutable once built.

    root_claims_property selects the claims structure inside the decoded
    payload: a single key, a sequence of keys for a nested path, or None
    to use the whole payload.
    """
    root_claims_property: Optional[Union[str, Sequence[str]]] = None
    claim_org_type_prop: str = DEFAULT_ORG_TYPE_PROP
    claim_org_role_prop: str = DEFAULT_ORG_ROLE_PROP

    def __post_init__(self):
        root = self.root_claims_property
        if root is not None and not isinstance(root, str):
            object.__setattr__(self, "root_claims_property", tuple(root))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GatekeeperConfig":
        """Create configuration from a mapping with snake_case or camelCase keys"""
        values = {}
        for key, value in data.items():
            key = _CAMEL_KEYS.get(key, key)
            if key in ("root_claims_property", "claim_org_type_prop", "claim_org_role_prop"):
                values[key] = value
        return cls(**values)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "GatekeeperConfig":
        """Create configuration from environment variables"""
        root = get_config_value("root_claims_property", None, prefix)
        if root and "." in root:
            root = tuple(part for part in root.split(".") if part)
        return cls(
            root_claims_property=root or None,
            claim_org_type_prop=get_config_value(
                "claim_org_type_prop", DEFAULT_ORG_TYPE_PROP, prefix),
            claim_org_role_prop=get_config_value(
                "claim_org_role_prop", DEFAULT_ORG_ROLE_PROP, prefix),
        )

    @classmethod
    def from_file(cls, file_path: str) -> "GatekeeperConfig":
        """Create configuration from a JSON or YAML file"""
        data = load_config_file(file_path)
        return cls.from_dict(get_section(data, "gatekeeper", default=data))

    def validate(self) -> bool:
        """Validate the configuration"""
        if not isinstance(self.claim_org_type_prop, str) or not self.claim_org_type_prop:
            raise ValueError("claim_org_type_prop is required")
        if not isinstance(self.claim_org_role_prop, str) or not self.claim_org_role_prop:
            raise ValueError("claim_org_role_prop is required")
        root = self.root_claims_property
        if isinstance(root, tuple) and not all(isinstance(k, str) and k for k in root):
            raise ValueError("root_claims_property path must contain non-empty keys")
        return True
