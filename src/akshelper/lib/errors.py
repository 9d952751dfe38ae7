"""Custom exception hierarchy for akshelper configuration and provisioning."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class AksHelperError(Exception):
    """Base exception for all akshelper errors.

    All akshelper-specific exceptions inherit from this class, enabling
    centralized exception handling in the CLI.
    """

    pass


class ConfigError(AksHelperError):
    """Exception raised for configuration errors.

    Raised when a cluster definition file cannot be read or parsed into
    a mapping.

    Attributes:
        field: The configuration field or file that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(AksHelperError):
    """Exception raised when a cluster definition file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class ClusterValidationError(AksHelperError):
    """A cluster definition failed validation.

    The string form is exactly the translated message so that it can be
    shown to users verbatim.

    Attributes:
        namespace: Dotted field path of the failing field
        message: Human-readable error message
    """

    def __init__(self, namespace: str, message: str) -> None:
        """Create a validation error for a field path."""
        self.namespace = namespace
        self.message = message
        super().__init__(message)


class UnrecognizedFieldPathError(ClusterValidationError):
    """No translation exists for the failing field path.

    Attributes:
        namespace: Dotted field path that was not recognized
        failures: The raw failure batch, kept for diagnosis
    """

    def __init__(self, namespace: str, failures: Sequence[Any]) -> None:
        """Create an error embedding the path and the raw failures."""
        self.failures = list(failures)
        super().__init__(
            namespace, f"Namespace {namespace} is not caught, {self.failures!r}"
        )


class TranslationError(AksHelperError):
    """The offending value does not fit the message template for its path.

    Provides detailed information about what was expected versus what was
    received, instead of coercing the value.

    Attributes:
        namespace: Dotted field path being translated
        expected: Human description of the expected value type
        actual: The actual value that reached the template
    """

    def __init__(self, namespace: str, expected: str, actual: Any) -> None:
        """Initialize TranslationError with detailed information.

        Args:
            namespace: Field path being translated
            expected: Human-readable description of expected value type
            actual: The offending value
        """
        self.namespace = namespace
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Cannot translate failure for '{namespace}'\n"
            f"  Expected: {expected}\n"
            f"  Got: {actual!r}"
        )
