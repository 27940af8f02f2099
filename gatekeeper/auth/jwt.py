"""
Default token decoder for Gatekeeper.

Reads the payload of a JWT without verifying its signature or expiry.
Tokens are assumed to have been verified upstream.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
from typing import Any, Dict, Union

import jwt

from ..errors import TokenDecodeError

logger = logging.getLogger(__name__)


def decode_jwt_payload(token: Union[str, bytes]) -> Dict[str, Any]:
    """
    Decode the payload of a JWT.

    Args:
        token: Encoded JWT

    Returns:
        Decoded payload dictionary

    Raises:
        TokenDecodeError: If the token is not a structurally valid JWT
    """
    if not isinstance(token, (str, bytes)) or not token:
        raise TokenDecodeError(f"Token must be a non-empty string, got {type(token).__name__}")

    try:
        return jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": False}
        )
    except jwt.PyJWTError as e:
        logger.debug(f"JWT payload decode failed: {type(e).__name__}")
        raise TokenDecodeError(f"Invalid token: {str(e)}") from e
