"""Custom exception hierarchy.

Architecture:
    Every error raised by the library derives from DrukarniaError. Caller
    mistakes (ValidationError) are kept apart from failures of an API
    operation (ApiError), which come in three kinds: the server answered
    with a non-success status (HttpError), the body did not match the
    declared schema (DeserializationError), or the transport itself failed
    (TransportError).

Design Decisions:
    - No retries anywhere: every error reaches the immediate caller
    - Schema drift is an error, never a partial value
    - Decode issues form a closed set of frozen records so they can be
      compared directly in tests and pattern-matched by callers
"""

from __future__ import annotations

from dataclasses import dataclass, field


class DrukarniaError(Exception):
    """Base exception for all library errors."""

    pass


class ValidationError(DrukarniaError):
    """A caller-supplied value violates a precondition.

    Raised at construction time, before any network call is made.
    """

    pass


class ApiError(DrukarniaError):
    """Failure of an API operation (HTTP status, decoding or transport)."""

    pass


class HttpError(ApiError):
    """Server responded with a non-success status."""

    def __init__(self, status: int, path: str | None = None) -> None:
        message = f"HTTP {status}"
        if path:
            message = f"{message} for {path}"
        super().__init__(message)
        self.status = status
        self.path = path


class NotFoundError(HttpError):
    """Queried object (user, article, tag, comment) does not exist."""

    pass


class TransportError(ApiError):
    """Opaque failure of the HTTP transport (unreachable host, timeout).

    The underlying exception is kept as ``__cause__``.
    """

    pass


@dataclass(frozen=True)
class MissingField:
    """A declared field is absent from the response."""

    name: str
    location: tuple[str | int, ...] = field(default=(), compare=False)

    def describe(self) -> str:
        return f"missing field {self.name!r}"


@dataclass(frozen=True)
class UnknownField:
    """The response contains a field the schema does not declare."""

    name: str
    location: tuple[str | int, ...] = field(default=(), compare=False)

    def describe(self) -> str:
        return f"unknown field {self.name!r}"


@dataclass(frozen=True)
class TypeMismatch:
    """A field is present but holds a value of the wrong type or shape."""

    name: str
    expected: str
    actual: str
    location: tuple[str | int, ...] = field(default=(), compare=False)

    def describe(self) -> str:
        return f"field {self.name!r}: expected {self.expected}, got {self.actual}"


FieldIssue = MissingField | UnknownField | TypeMismatch


class DeserializationError(ApiError):
    """Response body did not exactly match the expected schema.

    This is most likely caused by a change of the upstream API (schema drift).

    Attributes:
        issues: Every problem found, in the order the validator reported them
        shape: Name of the schema the body was decoded against
    """

    def __init__(self, issues: list[FieldIssue], shape: str | None = None) -> None:
        if not issues:
            raise ValueError("DeserializationError requires at least one issue")
        self.issues = list(issues)
        self.shape = shape
        summary = self.issues[0].describe()
        if len(self.issues) > 1:
            summary = f"{summary} (+{len(self.issues) - 1} more)"
        prefix = f"cannot decode {shape}" if shape else "cannot decode response"
        super().__init__(f"{prefix}: {summary}")

    @property
    def issue(self) -> FieldIssue:
        """First reported issue."""
        return self.issues[0]
