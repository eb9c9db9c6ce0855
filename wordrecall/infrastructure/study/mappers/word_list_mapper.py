"""Mapper for WordList ORM <-> Domain conversion."""

from wordrecall.domain.common.value_objects.ids import UserId, WordListId
from wordrecall.domain.study.entities.word_entry import WordEntry
from wordrecall.domain.study.entities.word_list import WordList
from wordrecall.models import Word as WordORM
from wordrecall.models import WordList as WordListORM


class WordListMapper:
    """Mapper for WordList ORM <-> Domain conversion."""

    def to_domain(self, orm_model: WordListORM) -> WordList:
        """Convert ORM model (with its words) to domain entity."""
        return WordList.create_with_id(
            id=WordListId(orm_model.id),
            owner_id=UserId(orm_model.user_id),
            name=orm_model.name,
            entries=[WordEntry(word=w.word, definition=w.definition) for w in orm_model.words],
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def entries_to_orm(self, entries: tuple[WordEntry, ...]) -> list[WordORM]:
        return [
            WordORM(word=entry.word, definition=entry.definition, position=position)
            for position, entry in enumerate(entries)
        ]

    def to_orm(
        self, domain_entity: WordList, orm_model: WordListORM | None = None
    ) -> WordListORM:
        """
        Convert domain entity to ORM model.

        On update the word collection is swapped wholesale; the delete-orphan
        cascade removes the previous rows in the same flush.
        """
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.words = self.entries_to_orm(domain_entity.entries)
            return orm_model

        return WordListORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            user_id=domain_entity.owner_id.value,
            name=domain_entity.name,
            words=self.entries_to_orm(domain_entity.entries),
        )
