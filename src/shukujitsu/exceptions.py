"""
Shukujitsu Exception Hierarchy

Errors raised by the outer surfaces (date parsing, CLI, HTTP API, settings).
The holiday engine itself never raises: every query resolves to a name,
``None`` or an empty list.

Exception codes follow the pattern: SJ_<CATEGORY>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ShukujitsuError(Exception):
    """
    Base exception for all shukujitsu errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (SJ_*)
        details: Additional context about the error
        value: The offending input, if any
    """
    message: str
    code: str = "SJ_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    value: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.value is not None:
            parts.append(f"(value: {self.value!r})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.value is not None:
            result["value"] = self.value
        return result


# =============================================================================
# Input Errors
# =============================================================================

@dataclass
class InvalidDateError(ShukujitsuError):
    """Input could not be interpreted as a calendar date."""
    code: str = "SJ_INVALID_DATE"


@dataclass
class InvalidRangeError(ShukujitsuError):
    """Requested range (month, interval) is malformed or too large."""
    code: str = "SJ_INVALID_RANGE"


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass
class ConfigError(ShukujitsuError):
    """Settings file or environment value is invalid."""
    code: str = "SJ_CONFIG_ERROR"
