"""Custom exception hierarchy for groupieTracker.

All application exceptions inherit from :class:`GroupieTrackerError`, which
carries an optional ``resource`` naming the upstream collection (``artists``,
``locations``, ``dates``, ``relations``) or the query parameter (``id``,
``year``) involved in the failure.

    GroupieTrackerError  (base -- catch-all for any groupieTracker error)
    +-- FetchError            (upstream transport failure or non-200 status)
    +-- DecodeError           (upstream body is not JSON of the expected shape)
    +-- InvalidArgumentError  (malformed or out-of-range query parameter)
    +-- NotFoundError         (no artist / record with the requested id)
    +-- ConfigurationError    (startup / missing config)

``FetchError`` and ``DecodeError`` only occur while the snapshot is being
loaded; the other two are raised by the read-side queries and mapped to
HTTP 400 / 404 by the API layer.
"""


class GroupieTrackerError(Exception):
    """Base exception for all groupieTracker errors.

    The ``__str__`` method prefixes the resource name in brackets for
    structured log output, e.g. ``[locations] unexpected status 502``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        resource: str | None = None,
    ) -> None:
        self._message = message
        self._resource = resource
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def resource(self) -> str | None:
        return self._resource

    def __str__(self) -> str:
        if self._resource:
            return f"[{self._resource}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Upstream errors (snapshot loading)
# ---------------------------------------------------------------------------

class FetchError(GroupieTrackerError):
    """Raised when the upstream request fails or returns a non-200 status."""

    def __init__(
        self,
        message: str = "Upstream request failed",
        resource: str | None = None,
    ) -> None:
        super().__init__(message=message, resource=resource)


# Transport-level failures and fetch failures are the same condition.
TransportError = FetchError


class DecodeError(GroupieTrackerError):
    """Raised when an upstream body is not valid JSON of the expected shape."""

    def __init__(
        self,
        message: str = "Upstream response could not be decoded",
        resource: str | None = None,
    ) -> None:
        super().__init__(message=message, resource=resource)


# ---------------------------------------------------------------------------
# Query errors
# ---------------------------------------------------------------------------

class InvalidArgumentError(GroupieTrackerError):
    """Raised when a client-supplied query parameter is malformed or out of policy."""

    def __init__(
        self,
        message: str = "Invalid argument",
        resource: str | None = None,
    ) -> None:
        super().__init__(message=message, resource=resource)


class NotFoundError(GroupieTrackerError):
    """Raised when no artist or record matches the requested identifier."""

    def __init__(
        self,
        message: str = "Not found",
        resource: str | None = None,
    ) -> None:
        super().__init__(message=message, resource=resource)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(GroupieTrackerError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        resource: str | None = None,
    ) -> None:
        super().__init__(message=message, resource=resource)
