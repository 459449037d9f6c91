"""
Identifier generation.

IdGenerator is the interface the domain consumes; UUIDGenerator is the
default implementation injected at composition time.
"""
from abc import ABC, abstractmethod
from uuid import UUID, uuid4


class IdGenerator(ABC):
    """
    Produces universally-unique string identifiers for new entities.

    The domain never implements uniqueness itself.
    """

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a new identifier.

        Returns:
            Unique identifier string
        """
        pass


class UUIDGenerator(IdGenerator):
    """Generates random (version 4) UUID strings."""

    def generate(self) -> str:
        return str(uuid4())

    @staticmethod
    def validate(value: str) -> bool:
        """Check that value is a well-formed UUID string."""
        try:
            UUID(str(value))
        except (ValueError, TypeError):
            return False
        return True

    @classmethod
    def is_equal(cls, first: str, second: str) -> bool:
        """Compare two UUID strings case-insensitively (False if either is malformed)."""
        if not cls.validate(first) or not cls.validate(second):
            return False
        return first.lower() == second.lower()


_default_generator = UUIDGenerator()


def default_id_generator() -> IdGenerator:
    """Return the process-wide default generator."""
    return _default_generator
