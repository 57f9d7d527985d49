"""Exception classes for controller_helper.

Lookups that find nothing are not errors: they simply yield ``None`` or
``False``. The exceptions below cover the cases where a caller asked for
exactly one thing and got zero or several.
"""

from typing import Any, Dict, List, Optional


class ControllerHelperError(Exception):
    """Base exception for all controller_helper errors.

    Attributes:
        message: Human-readable error message
        details: Optional structured details about the error
    """

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error into a JSON-serializable dictionary."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class AmbiguousMatchError(ControllerHelperError):
    """More than one method matches a name on a controller class.

    Attributes:
        controller_type: Class that was searched
        name: Requested method name
        candidates: Qualified names of every matching method
    """

    def __init__(self, controller_type: type, name: str, candidates: List[str]):
        self.controller_type = controller_type
        self.name = name
        self.candidates = candidates
        super().__init__(
            f"Ambiguous match for '{name}' on {controller_type.__name__}: "
            f"{len(candidates)} candidates",
            details={"candidates": candidates},
        )


class ControllerNotFoundError(ControllerHelperError):
    """No registered controller matches a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Controller '{name}' is not registered")


__all__ = [
    "ControllerHelperError",
    "AmbiguousMatchError",
    "ControllerNotFoundError",
]
