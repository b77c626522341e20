"""Error hierarchy for historian.

Error layers:
- HistorianError: Base class for all historian errors
- DomainError: Payload rule violations (malformed elements in a batch)
- InfrastructureError: System-level failures like network or configuration issues

Decoders and clients catch these at their boundaries and report a
FailureKind instead of letting them escape to UI callers.
"""


class HistorianError(Exception):
    """Base class for all historian errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (payload rule violations)
# =============================================================================


class DomainError(HistorianError):
    """Base class for domain errors."""


class MalformedElementError(DomainError):
    """A batch element is missing a required key or carries the wrong type."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message, code="MALFORMED_ELEMENT")
        self.field = field
        self.index = index


# =============================================================================
# Infrastructure Errors (system-level failures)
# =============================================================================


class InfrastructureError(HistorianError):
    """Base class for infrastructure/system errors."""


class TransportError(InfrastructureError):
    """The backend could not be reached or returned no usable JSON."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
