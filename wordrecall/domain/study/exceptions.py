"""Study domain exceptions."""

from wordrecall.domain.common.exceptions import BusinessRuleViolationError, ConfigurationError


class EmptyTargetSetError(ConfigurationError):
    """Raised when a study session is built over a list with no words."""

    def __init__(self, list_name: str | None = None) -> None:
        super().__init__(
            "Nothing to study: the word list has no words",
            {"list_name": list_name} if list_name else None,
        )


class SessionCompletedError(BusinessRuleViolationError):
    """Raised when a finished study session receives another submission."""

    def __init__(self) -> None:
        super().__init__("session_active", "Study session is already completed")
