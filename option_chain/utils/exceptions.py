"""
Custom exceptions for the option chain engine.

Every error raised by the engine is deterministic and input-driven, so
none of them is retried. All derive from ValueError so callers that
already guard pricing calls with ``except ValueError`` keep working.
"""


class OptionChainError(ValueError):
    """Base exception for all option chain errors."""

    pass


class ValidationError(OptionChainError):
    """Exception raised when a value span is malformed."""

    def __init__(self, name: str, details: str) -> None:
        self.name = name
        self.details = details
        super().__init__(f"{name}: {details}")


class ConfigurationError(OptionChainError):
    """Exception raised when the engine is configured with an unknown option type."""

    def __init__(self, option_type: object) -> None:
        self.option_type = option_type
        super().__init__(f"unrecognized option type {option_type!r} - use Call or Put")


class DegenerateInputError(OptionChainError):
    """Exception raised when σ√T is zero and d1/d2 cannot be formed."""

    pass


class NumericDomainError(OptionChainError):
    """Exception raised when d1 or d2 leaves the real numbers."""

    pass
