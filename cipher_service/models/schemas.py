from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    POLYALPHABETIC = "polyalphabetic"
    TRANSPOSITION = "transposition"


class CipherType(str, Enum):
    """Specific cipher types."""

    TABLE_ROUTE = "table_route"
    MOD_ALPHA = "mod_alpha"


# ============================================================================
# Request Schemas
# ============================================================================


class CipherRequest(BaseModel):
    """Request schema for /encrypt and /decrypt endpoints."""

    cipher_type: CipherType
    key: int | str
    text: str


class EncryptRequest(CipherRequest):
    """Request schema for /encrypt endpoint."""


class DecryptRequest(CipherRequest):
    """Request schema for /decrypt endpoint."""


# ============================================================================
# Response Schemas
# ============================================================================


class CipherResponse(BaseModel):
    """Response schema for /encrypt and /decrypt endpoints."""

    result: str
    cipher_type: CipherType
    key_used: int | str
    explanation: str


class CipherInfo(BaseModel):
    """Metadata about a registered cipher."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    name: str
    description: str


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    items: list[CipherInfo]
    total: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
