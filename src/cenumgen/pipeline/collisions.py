"""Uniqueness check for generated identifiers within one run."""

from ..exceptions import IdentifierCollisionError


class CollisionDetector:
    """Tracks which C name produced each identifier."""

    def __init__(self):
        self._owners: dict[str, str] = {}

    def claim(self, identifier: str, source_name: str) -> None:
        """
        Record that source_name produced identifier.

        Raises:
            IdentifierCollisionError: If another C name already produced it
        """
        existing = self._owners.get(identifier)
        if existing is not None and existing != source_name:
            raise IdentifierCollisionError(identifier, source_name, existing)
        self._owners[identifier] = source_name

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._owners

    def __len__(self) -> int:
        return len(self._owners)
