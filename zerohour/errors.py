"""Module errors: structured error taxonomy for the ZeroHour backend."""
#
# PURPOSE:
# Gives every failure that can reach an HTTP client a stable error code, a
# human-readable message and an HTTP status, so the API layer can render all
# of them the same way.
#
# SCOPE:
# The state engine itself never raises these for bad scenario/state names;
# it reports them as a TransitionResult. ZeroHourError is raised at the
# boundary (auth, request validation, missing scenario data, bad config).
#
# ERROR CODE FORMAT:
# - SCENARIO_XXX: Scenario/state selection errors
# - REQUEST_XXX: Malformed or incomplete request bodies
# - AUTH_XXX: Admin token errors
# - ROUTE_XXX: Unknown endpoints
# - CONFIG_XXX: Configuration and catalog integrity errors
# - SYSTEM_XXX: Anything unexpected
#
# USAGE:
#   from zerohour.errors import ZeroHourError, ErrorCode
#
#   raise ZeroHourError(
#       ErrorCode.SCENARIO_DATA_NOT_FOUND,
#       "Scenario data not found",
#       details={"scenario": "cyber_breach_pre_disclosure"}
#   )
#
from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(Enum):
    # Scenario Errors
    SCENARIO_INVALID = "SCENARIO_001"
    STATE_INVALID = "SCENARIO_002"
    SCENARIO_DATA_NOT_FOUND = "SCENARIO_003"

    # Request Errors
    REQUEST_INVALID = "REQUEST_001"

    # Auth Errors
    AUTH_TOKEN_MISSING = "AUTH_001"
    AUTH_TOKEN_MALFORMED = "AUTH_002"
    AUTH_TOKEN_INVALID = "AUTH_003"

    # Routing Errors
    ROUTE_NOT_FOUND = "ROUTE_001"

    # Config Errors
    CONFIG_INVALID = "CONFIG_001"

    # System Errors
    SYSTEM_INTERNAL_ERROR = "SYSTEM_001"


class ZeroHourError(Exception):
    """
    Base exception class for the backend with structured error information.

    Attributes:
        code: ErrorCode enum value (e.g., "SCENARIO_001")
        message: Human-readable error message
        details: Optional dictionary with additional context
        http_status: Suggested HTTP status code for API responses
    """

    HTTP_STATUS_MAP: Dict[ErrorCode, int] = {
        ErrorCode.SCENARIO_INVALID: 400,
        ErrorCode.STATE_INVALID: 400,
        ErrorCode.SCENARIO_DATA_NOT_FOUND: 404,

        ErrorCode.REQUEST_INVALID: 400,

        ErrorCode.AUTH_TOKEN_MISSING: 401,
        ErrorCode.AUTH_TOKEN_MALFORMED: 401,
        ErrorCode.AUTH_TOKEN_INVALID: 401,

        ErrorCode.ROUTE_NOT_FOUND: 404,

        ErrorCode.CONFIG_INVALID: 500,

        ErrorCode.SYSTEM_INTERNAL_ERROR: 500,
    }

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        http_status: Optional[int] = None
    ):
        """
        Initialize a ZeroHourError.

        Args:
            code: ErrorCode enum value
            message: Human-readable error message
            details: Optional dictionary with additional context
            http_status: Optional HTTP status code (defaults to mapped value)
        """
        self.code = code
        self.message = message
        self.details = details or {}
        self.http_status = http_status or self.HTTP_STATUS_MAP.get(code, 500)

        super().__init__(f"[{code.value}] {message}")

    @property
    def error_type(self) -> str:
        """Coarse category clients can switch on."""
        if self.http_status == 400:
            return "validation_error"
        if self.http_status == 401:
            return "auth_error"
        if self.http_status == 404:
            return "not_found"
        return "server_error"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to the JSON body returned by the API.

        `success` and `error` mirror the shape of a failed TransitionResult
        so clients handle both the same way.
        """
        return {
            "success": False,
            "error": self.message,
            "code": self.code.value,
            "type": self.error_type,
            "details": self.details,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ZeroHourError":
        """
        Deserialize error from a dictionary produced by to_dict().

        Args:
            data: Dictionary with code, error, details

        Returns:
            ZeroHourError instance
        """
        code = ErrorCode(data["code"])
        return cls(code, data["error"], data.get("details", {}))


# ============================================================================
# Convenience Functions
# ============================================================================

def handle_error(error: Exception, context: Optional[str] = None) -> ZeroHourError:
    """
    Convert a generic exception to a ZeroHourError.

    Args:
        error: The original exception
        context: Optional context string (e.g., "while handling GET /exposure/summary")

    Returns:
        ZeroHourError with SYSTEM_INTERNAL_ERROR unless it already was one
    """
    if isinstance(error, ZeroHourError):
        return error

    message = str(error) or "Internal server error"
    if context:
        message = f"{context}: {message}"

    return ZeroHourError(
        code=ErrorCode.SYSTEM_INTERNAL_ERROR,
        message=message,
        details={
            "original_type": type(error).__name__,
            "original_message": str(error)
        }
    )


__all__ = ["ErrorCode", "ZeroHourError", "handle_error"]
