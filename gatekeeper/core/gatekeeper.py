"""
Main Gatekeeper implementation.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from .config import GatekeeperConfig
from .types import Outcome, RouteDecision
from ..audit.logger import (
    AuditEvent,
    AuditLogger,
    MemoryAuditLogger,
    COMPONENT_GATE,
    ROUTE_GATE,
    RULE_ADDED,
    RULE_REMOVED,
    TOKEN_SET,
)
from ..auth.claims import ClaimsExtractor
from ..auth.jwt import decode_jwt_payload
from ..auth.types import ExtractionResult, TokenDecoder
from ..authz.matcher import match_entries, parse_whitelist
from ..authz.registry import DENY_ONLY_ENTRY, RuleRegistry, normalize_whitelist
from ..util.config import get_section, load_config_file


class Gatekeeper:
    """
    Role-based gate for routes and UI components.

    Holds the role identifiers of the current principal and the route rules.
    Use Gatekeeper.new() to construct a validated instance. One instance
    belongs to one logical session; it does no locking of its own, so an
    instance shared across concurrent handlers needs external synchronization.

    Failures never escape the gating methods. A token that cannot be decoded
    leaves the session with no roles, and any fault while deciding a route
    denies it. A misconfigured rule is therefore indistinguishable from a
    legitimate deny at the route_gate level; evaluate_route() exposes the
    difference through RouteDecision.error.
    """

    def __init__(
        self,
        config: Optional[GatekeeperConfig] = None,
        decoder: Optional[TokenDecoder] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        """
        Initialize Gatekeeper instance.

        Args:
            config: Claim extraction settings (defaults to GatekeeperConfig())
            decoder: decode(token) -> payload callable (defaults to unverified JWT decoding)
            audit_logger: Audit logging implementation (defaults to in-memory)
        """
        self.config = config or GatekeeperConfig()
        self.decoder = decoder or decode_jwt_payload
        self.audit_logger = audit_logger or MemoryAuditLogger(max_entries=1000)
        self.extractor = ClaimsExtractor.from_config(self.config)
        self._registry = RuleRegistry()
        self._user_roles: Tuple[str, ...] = ()
        self.logger = logging.getLogger(__name__)

    @classmethod
    def new(
        cls,
        config: Optional[GatekeeperConfig] = None,
        decoder: Optional[TokenDecoder] = None,
        audit_logger: Optional[AuditLogger] = None,
    ) -> "Gatekeeper":
        """
        Create a new Gatekeeper with a validated configuration.

        Raises:
            ValueError: If configuration is invalid

        Example:
            gatekeeper = Gatekeeper.new(GatekeeperConfig(root_claims_property="claims"))
            gatekeeper.add_rule("/admin", ["acme:admin"])
        """
        config = config or GatekeeperConfig()
        config.validate()
        return cls(config, decoder, audit_logger)

    @property
    def user_roles(self) -> Tuple[str, ...]:
        """Role identifiers of the current principal."""
        return self._user_roles

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    # Rules

    def add_rule(self, route: str, whitelist: Optional[Iterable[Any]] = None) -> None:
        """
        Restrict a route to a whitelist, replacing any previous rule for it.

        Whitelist items may be "orgType:orgRole" strings, mappings with
        organizationType/role keys, or (orgType, orgRole) pairs. An empty
        whitelist lists the route while allowing nobody.
        """
        try:
            stored = self._registry.add_rule(route, whitelist)
        except Exception as e:
            self.logger.error(f"Failed to add rule for route {route!r}, denying it: {e}")
            try:
                stored = self._registry.add_rule(route, (DENY_ONLY_ENTRY,))
            except Exception as e:
                self.logger.error(f"Failed to add deny-only rule for route {route!r}: {e}")
                return
        self._audit(AuditEvent(event_type=RULE_ADDED, route=route, roles=list(stored)))

    def add_rules(self, rules: Mapping[str, Iterable[Any]]) -> None:
        """Register several route rules at once."""
        for route, whitelist in rules.items():
            self.add_rule(route, whitelist)

    def load_rules(self, file_path: str) -> int:
        """
        Register route rules from a JSON or YAML file.

        The file holds a mapping of route to whitelist, either at the top
        level or under a "rules" key.

        Returns:
            Number of routes registered

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a supported mapping
        """
        data = load_config_file(file_path)
        rules = get_section(data, "rules", default=data)
        self.add_rules(rules)
        self.logger.info(f"Loaded {len(rules)} route rules from {file_path}")
        return len(rules)

    def remove_rule(self, route: str) -> bool:
        """Make a route public again. Returns True if a rule was removed."""
        removed = self._registry.remove_rule(route)
        if removed:
            self._audit(AuditEvent(event_type=RULE_REMOVED, route=route))
        return removed

    # Session

    def set_user_token(self, token: Any) -> ExtractionResult:
        """
        Replace the session roles with those carried by a token.

        Any decoding or extraction failure leaves the session with no roles.
        The token is never validated here; signature and expiry checks
        belong upstream.
        """
        try:
            payload = self.decoder(token)
            if isinstance(payload, BaseException):
                raise payload
            result = self.extractor.extract(payload)
        except Exception as e:
            self.logger.warning(f"Token could not be decoded: {e}")
            result = ExtractionResult.empty(str(e), getattr(e, "error_code", "TOKEN_DECODE_ERROR"))

        self._user_roles = tuple(result.roles)
        self._audit(AuditEvent(
            event_type=TOKEN_SET,
            outcome="ok" if result.success else "empty",
            roles=list(result.roles),
            reason=result.error_message,
        ))
        return result

    def clear_user(self) -> None:
        """Forget the current principal's roles."""
        self._user_roles = ()
        self._audit(AuditEvent(event_type=TOKEN_SET, outcome="cleared"))

    # Decisions

    def evaluate_route(self, route: str) -> RouteDecision:
        """
        Decide access to a route and keep the evidence.

        Routes without a rule are public. Otherwise the grant carries the
        session roles that matched the route's whitelist.
        """
        try:
            whitelist = self._registry.lookup(route)
            if whitelist is None:
                decision = RouteDecision(Outcome.UNLISTED, route=route, reason="No rule for route")
            else:
                decision = self._decide(route, whitelist)
        except Exception as e:
            self.logger.error(f"Error evaluating route {route!r}: {e}")
            decision = RouteDecision(
                Outcome.DENIED, route=route, reason="Evaluation error", error=str(e)
            )

        self._audit(AuditEvent(
            event_type=ROUTE_GATE,
            route=route,
            outcome=decision.outcome.value,
            roles=list(decision.roles),
            reason=decision.error or decision.reason,
        ))
        return decision

    def route_gate(self, route: str) -> Union[bool, List[str]]:
        """
        Gate a route.

        Returns:
            True if the route has no rule, the list of authorizing session
            roles if any match, otherwise False (also on any internal error)
        """
        decision = self.evaluate_route(route)
        if decision.outcome == Outcome.UNLISTED:
            return True
        if decision.outcome == Outcome.GRANTED:
            return list(decision.roles)
        return False

    def evaluate_component(self, whitelist: Optional[Iterable[Any]]) -> RouteDecision:
        """Decide access against an ad-hoc whitelist, bypassing the registry."""
        try:
            decision = self._decide(None, normalize_whitelist(whitelist))
        except Exception as e:
            self.logger.error(f"Error evaluating component whitelist: {e}")
            decision = RouteDecision(Outcome.DENIED, reason="Evaluation error", error=str(e))

        self._audit(AuditEvent(
            event_type=COMPONENT_GATE,
            outcome=decision.outcome.value,
            roles=list(decision.roles),
            reason=decision.error or decision.reason,
        ))
        return decision

    def component_gate(self, whitelist: Optional[Iterable[Any]], component: Any,
                       default: Any = None) -> Any:
        """
        Gate a UI component.

        Returns:
            component unchanged if any session role matches the whitelist,
            otherwise default (None unless the caller supplies another
            falsy value such as "")
        """
        if self.evaluate_component(whitelist).outcome == Outcome.GRANTED:
            return component
        return default

    def _decide(self, route: Optional[str], whitelist: Iterable[str]) -> RouteDecision:
        entries, skipped = parse_whitelist(whitelist)
        if skipped:
            self.logger.warning(f"Ignoring malformed whitelist entries for {route!r}: {skipped!r}")

        roles = match_entries(self._user_roles, entries)
        if roles:
            self.logger.debug(f"Access granted to {route!r} by roles {roles}")
            return RouteDecision(Outcome.GRANTED, route=route, roles=roles,
                                 reason="Session role matches whitelist", skipped=skipped)

        self.logger.debug(f"Access denied to {route!r}: no matching role")
        # A deny next to unusable entries may stem from misconfiguration
        error = f"Malformed whitelist entries: {skipped!r}" if skipped else None
        return RouteDecision(Outcome.DENIED, route=route,
                             reason="No session role matches whitelist",
                             error=error, skipped=skipped)

    def _audit(self, event: AuditEvent) -> None:
        try:
            self.audit_logger.log(event)
        except Exception as e:
            self.logger.error(f"Failed to record audit event {event.event_type}: {e}")
