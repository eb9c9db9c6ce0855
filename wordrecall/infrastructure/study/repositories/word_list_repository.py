"""Repository for WordList aggregates."""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from wordrecall.application.study.dtos import WordListOverview
from wordrecall.domain.common.value_objects.ids import WordListId
from wordrecall.domain.study.entities.word_list import WordList
from wordrecall.infrastructure.study.mappers.word_list_mapper import WordListMapper
from wordrecall.models import Word as WordORM
from wordrecall.models import WordList as WordListORM

logger = logging.getLogger(__name__)


class WordListRepository:
    """Repository for WordList aggregates."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WordListMapper()

    def find_by_id(self, word_list_id: WordListId) -> WordList | None:
        """Find a word list with all of its entries."""
        stmt = (
            select(WordListORM)
            .options(selectinload(WordListORM.words))
            .where(WordListORM.id == word_list_id.value)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def list_overviews(self) -> list[WordListOverview]:
        """Get every word list with its word count, newest first."""
        stmt = (
            select(
                WordListORM.id,
                WordListORM.name,
                WordListORM.user_id,
                WordListORM.created_at,
                func.count(WordORM.id).label("word_count"),
            )
            .outerjoin(WordORM, WordORM.word_list_id == WordListORM.id)
            .group_by(WordListORM.id)
            .order_by(WordListORM.created_at.desc(), WordListORM.id.desc())
        )
        return [
            WordListOverview(
                id=row.id,
                name=row.name,
                owner_id=row.user_id,
                word_count=row.word_count,
                created_at=row.created_at,
            )
            for row in self.db.execute(stmt)
        ]

    def save(self, word_list: WordList) -> WordList:
        """
        Save a word list (create or update).

        Both paths commit once, so an edit's delete of the old entries and
        insert of the new ones land together or not at all.
        """
        if not word_list.id.is_persisted:
            orm_model = self.mapper.to_orm(word_list)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Created word list {orm_model.id} with {len(orm_model.words)} words")
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(WordListORM, word_list.id.value)
        if not orm_model:
            raise ValueError(f"Word list {word_list.id.value} not found")
        try:
            self.mapper.to_orm(word_list, orm_model)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, word_list_id: WordListId) -> bool:
        """Delete a word list; its words go with it."""
        orm_model = self.db.get(WordListORM, word_list_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        return True
