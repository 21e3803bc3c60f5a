"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


def invalid_category(category: str, kind: str, allowed: list[str]) -> str:
    """Return message for a category that does not belong to a kind."""
    return (
        f"Category '{category}' is not a valid {kind} category. "
        f"Choose one of: {', '.join(allowed)}"
    )


def invalid_currency(code: str, allowed: list[str]) -> str:
    """Return message for an unsupported currency code."""
    return f"Unsupported currency '{code}'. Choose one of: {', '.join(allowed)}"


def invalid_kind(kind: str) -> str:
    """Return message for an unknown transaction kind."""
    return f"Unknown transaction type '{kind}'. Use 'expense' or 'investment'"


def negative_amount(amount) -> str:
    """Return message for an amount below zero."""
    return f"Amount must not be negative, got {amount}"
