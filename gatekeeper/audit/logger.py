"""
Audit logging module for Gatekeeper decisions.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
import threading


TOKEN_SET = "token_set"
RULE_ADDED = "rule_added"
RULE_REMOVED = "rule_removed"
ROUTE_GATE = "route_gate"
COMPONENT_GATE = "component_gate"


@dataclass
class AuditEvent:
    """A recorded state change or access decision"""
    event_type: str
    route: Optional[str] = None
    outcome: Optional[str] = None
    roles: List[str] = field(default_factory=list)
    reason: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'event_type': self.event_type,
            'route': self.route,
            'outcome': self.outcome,
            'roles': self.roles,
            'reason': self.reason,
            'timestamp': self.timestamp.isoformat()
        }


class AuditLogger(ABC):
    """Abstract base class for audit logging"""

    @abstractmethod
    def log(self, event: AuditEvent) -> None:
        """Log an audit event"""
        pass

    @abstractmethod
    def get_events(
        self,
        event_type: Optional[str] = None,
        route: Optional[str] = None,
    ) -> List[AuditEvent]:
        """Retrieve audit events with optional filtering"""
        pass


class MemoryAuditLogger(AuditLogger):
    """In-memory audit logger for development and testing"""

    def __init__(self, max_entries: int = 1000):
        self.max_entries = max_entries
        self.events: deque = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def log(self, event: AuditEvent) -> None:
        """Log an audit event to memory"""
        with self._lock:
            self.events.append(event)

    def get_events(
        self,
        event_type: Optional[str] = None,
        route: Optional[str] = None,
    ) -> List[AuditEvent]:
        """Retrieve audit events with optional filtering"""
        with self._lock:
            return [
                event for event in self.events
                if (event_type is None or event.event_type == event_type)
                and (route is None or event.route == route)
            ]

    def clear(self) -> None:
        """Drop all stored events"""
        with self._lock:
            self.events.clear()
