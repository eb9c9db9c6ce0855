"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime

from wordrecall.domain.common.entity import Entity
from wordrecall.domain.common.exceptions import ValidationError
from wordrecall.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 100
MAX_NAME_LENGTH = 100


@dataclass
class User(Entity[UserId]):
    """
    User entity representing an authenticated user in the system.

    Business Rules:
    - Email must be unique (enforced at repository level)
    - Email must be non-empty and at most MAX_EMAIL_LENGTH chars
    - Name is optional; blank names are stored as None
    - Password hashing is an infrastructure concern
    """

    id: UserId
    email: str
    name: str | None = None
    hashed_password: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.email:
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )
        if self.name is not None:
            self.name = self.name.strip() or None
        if self.name and len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=self.name
            )

    @property
    def display_name(self) -> str:
        """Name shown next to the lists this user owns."""
        return self.name or self.email.split("@")[0]

    def has_password(self) -> bool:
        return self.hashed_password is not None

    @classmethod
    def create(
        cls, email: str, hashed_password: str | None = None, name: str | None = None
    ) -> "User":
        """
        Create a new user (ID will be 0 until persisted).

        Raises:
            ValidationError: If email or name is invalid
        """
        return cls(
            id=UserId.generate(),
            email=email.strip().lower(),
            name=name,
            hashed_password=hashed_password,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        name: str | None,
        hashed_password: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            name=name,
            hashed_password=hashed_password,
            created_at=created_at,
            updated_at=updated_at,
        )
