"""
Gatekeeper Python Package

Role-based route and component gating from organizational token claims.
"""

__version__ = "0.1.0"

from .core.gatekeeper import Gatekeeper
from .core.config import GatekeeperConfig
from .core.types import Outcome, RouteDecision
from .auth.types import ExtractionResult
from .authz.types import RoleIdentifier, WhitelistEntry, WILDCARD
from .errors import (
    GatekeeperError,
    TokenDecodeError,
    ClaimsError,
    MissingClaimsError,
    MissingOrgTypeError,
    WhitelistError,
    MalformedRoleError,
)

__all__ = [
    "Gatekeeper",
    "GatekeeperConfig",
    "Outcome",
    "RouteDecision",
    "ExtractionResult",
    "RoleIdentifier",
    "WhitelistEntry",
    "WILDCARD",
    "GatekeeperError",
    "TokenDecodeError",
    "ClaimsError",
    "MissingClaimsError",
    "MissingOrgTypeError",
    "WhitelistError",
    "MalformedRoleError",
]
