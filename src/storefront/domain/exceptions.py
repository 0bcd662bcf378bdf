"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class MissingFieldsError(ValidationError):
    """One or more required order-form fields were left empty."""

    def __init__(self, missing_fields: frozenset[str]) -> None:
        self.missing_fields = frozenset(missing_fields)
        super().__init__(
            "Please fill in all required fields: "
            + ", ".join(sorted(self.missing_fields))
        )


class InvalidEmailError(ValidationError):
    """An email address was given but is not well-formed."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Invalid email address {email!r}; enter a valid address or leave it empty"
        )


class InvalidSizeError(ValidationError):
    """The chosen size is not one the deployment stocks."""

    def __init__(self, size: str, sizes: tuple[str, ...]) -> None:
        self.size = size
        self.sizes = tuple(sizes)
        super().__init__(
            f"Unknown size {size!r}; choose one of: {', '.join(self.sizes)}"
        )


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
