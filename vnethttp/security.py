"""Flags, protocol selectors and errors for secure connections."""

from __future__ import annotations

import enum
from typing import Optional


class AcceptFlags(enum.IntFlag):
    """Options for accepting a secure connection on the server side."""

    NONE = 0
    MUTUAL_AUTHENTICATION = 1


class ConnectFlags(enum.IntFlag):
    """Options for initiating a secure connection on the client side."""

    NONE = 0


class ApplicationType(enum.Enum):
    """Which side of a connection a security context is for."""

    CLIENT = 0
    SERVER = 1


class SecurityProtocol(enum.IntFlag):
    """SSL/TLS protocol versions; UNSPECIFIED selects the defaults."""

    UNSPECIFIED = 0
    SSL_2_0 = 1
    SSL_3_0 = 2
    TLS_1_0 = 4
    TLS_1_1 = 8
    TLS_1_2 = 16
    TLS_1_3 = 32


class SecurityError(RuntimeError):
    """Raised when a cryptographic or security operation fails."""

    def __init__(self, error_code: int, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Security error {error_code:#x}."
        super().__init__(message)
        self.error_code = int(error_code)
        self.message = message