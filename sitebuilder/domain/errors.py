"""
Error definitions for the site builder.

Only three outcomes reach the browser:
- invalid input → 400
- request body too large → 413
- anything else during generation → 500 (generic message, detail in logs)
"""

from typing import Any


class SiteBuilderError(Exception):
    """
    Builder failure carrying an error code and a short user-facing message.

    The message is the only thing exposed to clients; context is for logs.

    Usage:
        raise SiteBuilderError(ErrorCodes.INVALID_INPUT, "Invalid data", field="blocks")
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        base = f"[{self.code}] {self.message}"
        return f"{base} ({ctx_str})" if ctx_str else base

    def to_dict(self) -> dict[str, Any]:
        """Log serialization."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class ConfigError(Exception):
    """Invalid startup configuration (bad port, unreadable config file)."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Input ===
    INVALID_INPUT = "INVALID_INPUT"
    UPLOAD_MISSING = "UPLOAD_MISSING"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # === Generation ===
    GENERATION_FAILED = "GENERATION_FAILED"


HTTP_STATUS_BY_CODE = {
    ErrorCodes.INVALID_INPUT: 400,
    ErrorCodes.UPLOAD_MISSING: 400,
    ErrorCodes.PAYLOAD_TOO_LARGE: 413,
    ErrorCodes.GENERATION_FAILED: 500,
}


def http_status_for(code: str) -> int:
    """Map an error code to its HTTP status (unknown codes → 500)."""
    return HTTP_STATUS_BY_CODE.get(code, 500)
