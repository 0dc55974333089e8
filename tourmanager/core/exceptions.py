"""Exceptions raised by the Tour Manager API client.

Only 404 and 422 responses are translated. Every other failure status is
raised as :class:`httpx.HTTPStatusError` and network failures as httpx's own
transport errors, unchanged.
"""

from typing import Any, Dict, List, Optional


class TourManagerError(Exception):
    """Base exception for errors produced by this client."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(TourManagerError):
    """
    The API rejected the request data (HTTP 422).

    Carries the field name to messages map returned by the server. Correct
    the input and try again; the client never retries these.
    """

    def __init__(
        self,
        message: str = "The given data was invalid.",
        errors: Optional[Dict[str, List[str]]] = None,
    ):
        super().__init__(message, status_code=422)
        self.errors: Dict[str, List[str]] = errors or {}

    @classmethod
    def from_body(cls, body: Any) -> "ValidationError":
        """Build from a decoded 422 response body."""
        if not isinstance(body, dict):
            return cls()
        errors = body.get("errors") or {}
        return cls(
            message=body.get("message") or "The given data was invalid.",
            errors={
                field: list(messages) if isinstance(messages, (list, tuple)) else [str(messages)]
                for field, messages in errors.items()
            },
        )

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        fields = ", ".join(sorted(self.errors))
        return f"{self.message} (fields: {fields})"


class NotFoundError(TourManagerError):
    """
    The requested resource does not exist (HTTP 404).

    Raised for unknown ids and for ids that have been permanently deleted.
    """

    def __init__(self, message: Optional[str] = None, uri: str = ""):
        if not message:
            message = f"The requested resource '{uri}' could not be found"
        super().__init__(message, status_code=404)
        self.uri = uri


class MalformedResponseError(TourManagerError):
    """A response body did not have the structure the client expects."""

    def __init__(self, message: str, uri: str = "", body: Any = None):
        super().__init__(message)
        self.uri = uri
        self.body = body


class OrphanedNodeError(TourManagerError):
    """Strict tree reconstruction found a node whose parent is not in the list."""

    def __init__(self, node_id: str, parent_id: str):
        super().__init__(
            f"Node '{node_id}' references parent '{parent_id}' which is not in the node list"
        )
        self.node_id = node_id
        self.parent_id = parent_id
