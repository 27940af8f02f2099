"""
Authentication result types for Gatekeeper.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional


# decode(token) -> payload; raises on structurally invalid input
TokenDecoder = Callable[[Any], Any]


@dataclass
class ExtractionResult:
    """Outcome of projecting token claims into role identifiers."""
    success: bool
    roles: List[str] = field(default_factory=list)
    error_message: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, roles: List[str]) -> 'ExtractionResult':
        return cls(success=True, roles=list(roles))

    @classmethod
    def empty(cls, error_message: str, error_code: str = None) -> 'ExtractionResult':
        return cls(success=False, roles=[], error_message=error_message, error_code=error_code)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'success': self.success,
            'roles': self.roles,
            'error_message': self.error_message,
            'error_code': self.error_code
        }
