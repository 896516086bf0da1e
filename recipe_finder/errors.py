from __future__ import annotations


class RecipeFinderError(Exception):
    """Base for errors that are reported to the caller as ``{"error": ...}``."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(RecipeFinderError):
    """Malformed or missing request data."""

    status_code = 400


class NotFound(RecipeFinderError):
    """Unknown recipe id."""

    status_code = 404


class UnsupportedMethod(RecipeFinderError):
    """Wrong HTTP verb for the endpoint."""

    status_code = 405

    def __init__(self, message: str = "Method not allowed") -> None:
        super().__init__(message)
