"""
Custom exceptions for the dealer data generator.

Every failure raised by the generation core is a precondition violation:
bad parameters, missing dependency collections, or empty role pools.
"""

from pathlib import Path


class DealerDataGenException(Exception):
    """Base exception for all dealer data generator errors."""

    pass


class GenerationParameterError(DealerDataGenException, ValueError):
    """Exception raised when a generator is called with invalid parameters."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: object | None = None,
    ):
        self.parameter = parameter
        self.value = value

        error_parts = [message]

        if parameter:
            error_parts.append(f"Parameter: {parameter}")

        if value is not None:
            error_parts.append(f"Value: {value!r}")

        super().__init__(" | ".join(error_parts))


class EmptyCollectionError(GenerationParameterError):
    """Exception raised when a random pick is requested from an empty collection."""

    def __init__(self, message: str = "Cannot pick from an empty collection"):
        super().__init__(message)


class MissingDependencyError(DealerDataGenException, ValueError):
    """Exception raised when a factory runs before the collections it references exist."""

    def __init__(self, dependent: str, dependency: str, message: str | None = None):
        self.dependent = dependent
        self.dependency = dependency

        if message is None:
            message = (
                f"{dependency} must be generated before {dependent} "
                f"(got an empty or missing collection)"
            )

        super().__init__(message)


class EmptyRolePoolError(MissingDependencyError):
    """Exception raised when no employee holds the role a factory needs to assign."""

    def __init__(self, dependent: str, role: str):
        self.role = role
        super().__init__(
            dependent,
            "employees",
            message=(
                f"Cannot generate {dependent}: no employees with role '{role}' "
                f"in the employee collection"
            ),
        )


class ConfigurationError(DealerDataGenException):
    """Exception raised when a configuration file cannot be read."""

    def __init__(
        self,
        message: str,
        file_path: Path | None = None,
        original_error: Exception | None = None,
    ):
        self.file_path = file_path
        self.original_error = original_error

        if file_path:
            message = f"Error loading configuration '{file_path}': {message}"

        if original_error:
            message = f"{message} (Original error: {original_error})"

        super().__init__(message)
