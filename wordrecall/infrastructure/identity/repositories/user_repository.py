"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from wordrecall.domain.common.value_objects.ids import UserId
from wordrecall.domain.identity.entities.user import User
from wordrecall.domain.identity.exceptions import EmailAlreadyExistsError
from wordrecall.infrastructure.identity.mappers.user_mapper import UserMapper
from wordrecall.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID."""
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, user_ids: list[UserId]) -> dict[int, User]:
        """
        Find several users at once.

        Returns:
            Mapping of user id to User for the ids that exist
        """
        if not user_ids:
            return {}
        stmt = select(UserORM).where(UserORM.id.in_({uid.value for uid in user_ids}))
        return {orm.id: self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars()}

    def find_by_email(self, email: str) -> User | None:
        """Find a user by email."""
        stmt = select(UserORM).where(UserORM.email == email)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, user: User) -> User:
        """
        Save a user entity.

        Raises:
            EmailAlreadyExistsError: If email is already registered (for new users)
        """
        if not user.id.is_persisted:
            try:
                orm_model = self.mapper.to_orm(user)
                self.db.add(orm_model)
                self.db.commit()
                self.db.refresh(orm_model)
                logger.info(f"Created user id={orm_model.id}")
                return self.mapper.to_domain(orm_model)
            except IntegrityError as e:
                self.db.rollback()
                if "email" in str(e.orig):
                    raise EmailAlreadyExistsError(user.email) from e
                raise

        stmt = select(UserORM).where(UserORM.id == user.id.value)
        existing = self.db.execute(stmt).scalar_one_or_none()
        if not existing:
            raise ValueError(f"User with id {user.id.value} not found")

        orm_model = self.mapper.to_orm(user, existing)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Updated user {user.id.value}")
        return self.mapper.to_domain(orm_model)
