"""
Base class for Value Objects.

Value Objects are immutable and compared by their attributes. A word entry
("AA", "rough, cindery lava") is equal to any other entry with the same word
and definition, wherever it came from.

Example:
    @dataclass(frozen=True)
    class WordEntry(ValueObject):
        word: str
        definition: str | None = None
"""


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Subclasses should be decorated with @dataclass(frozen=True)
    and validate themselves in __post_init__.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(self.__dict__.items()))

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{self.__class__.__name__}({attrs})"

    def to_primitive(self) -> object:
        """
        Convert to a primitive Python value for serialization.

        Single-attribute value objects collapse to that attribute,
        everything else becomes a dict.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
