"""Uniform result record returned by every store operation."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class OperationResult:
    """
    Outcome of one show/store/update/destroy call.

    Attributes:
        code: HTTP status code from the remote store, 0 for local failures.
        success: Whether the operation succeeded.
        error: Human-readable error text, empty on success.
        value: The (decrypted) value for show, empty string otherwise.
    """

    code: int
    success: bool
    error: str = ""
    value: Any = ""

    @classmethod
    def ok(cls, code: int = 200, value: Any = "") -> "OperationResult":
        return cls(code=code, success=True, error="", value=value)

    @classmethod
    def failure(cls, error: str, code: int = 0) -> "OperationResult":
        return cls(code=code, success=False, error=error, value="")

    def to_dict(self) -> dict:
        return asdict(self)
