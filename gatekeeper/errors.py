"""
Error classes for Gatekeeper.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""


class GatekeeperError(Exception):
    """Base Gatekeeper error."""

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "GATEKEEPER_ERROR"
        self.details = details or {}


class TokenDecodeError(GatekeeperError):
    """The token could not be decoded into a payload."""

    def __init__(self, message: str = "Token could not be decoded", details: dict = None):
        super().__init__(message, "TOKEN_DECODE_ERROR", details)


class ClaimsError(GatekeeperError):
    """Claims could not be projected from a decoded payload."""

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        super().__init__(message, error_code or "CLAIMS_ERROR", details)


class MissingClaimsError(ClaimsError):
    """The configured root claims property is absent from the payload."""

    def __init__(self, path, details: dict = None):
        message = f"Claims not found at root property: {path}"
        super().__init__(message, "MISSING_CLAIMS", details)


class MissingOrgTypeError(ClaimsError):
    """A claim carries no organization type."""

    def __init__(self, prop: str, details: dict = None):
        message = f"Claim has no value for org-type property: {prop}"
        super().__init__(message, "MISSING_ORG_TYPE", details)


class WhitelistError(GatekeeperError):
    """Whitelist entry error."""

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        super().__init__(message, error_code or "WHITELIST_ERROR", details)


class MalformedRoleError(WhitelistError):
    """A role or whitelist string is not in canonical orgType:orgRole form."""

    def __init__(self, value, details: dict = None):
        message = f"Malformed role identifier: {value!r}"
        super().__init__(message, "MALFORMED_ROLE", details)
