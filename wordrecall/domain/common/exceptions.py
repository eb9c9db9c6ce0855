"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when business
rules are violated or domain invariants are broken. The infrastructure
layer translates them into HTTP responses.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class so they can be caught
    and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when input fails domain validation.

    Example: pasted list text that contains no words, an empty list name.
    Recoverable: the user edits the form and resubmits.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class ConfigurationError(DomainError):
    """
    Raised when a domain object is set up with unusable inputs.

    Example: starting a study session over a list with no words.
    Fatal to the object being built; the caller has to go elsewhere.
    """


class EntityNotFoundError(DomainError):
    """Raised when an entity cannot be found."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: submitting a word to a study session that already finished.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class AuthorizationError(DomainError):
    """
    Raised when an operation is not authorized.

    Example: a user editing a word list that belongs to someone else.
    """

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)
