# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package auth turns bearer tokens into role identifiers for Gatekeeper.

This package includes:
- Unverified JWT payload decoding
- Claims extraction into "orgType:orgRole" identifiers
"""

from .types import (
    ExtractionResult,
    TokenDecoder,
)

from .claims import (
    ClaimsExtractor,
    claim_text,
    claims_path,
)

from .jwt import decode_jwt_payload

__all__ = [
    'ExtractionResult',
    'TokenDecoder',
    'ClaimsExtractor',
    'claim_text',
    'claims_path',
    'decode_jwt_payload',
]
