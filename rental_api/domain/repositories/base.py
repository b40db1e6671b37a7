"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import Any, List, Mapping, Optional, Protocol, Sequence, Tuple, TypeVar

from bson import ObjectId

T = TypeVar("T")

SortSpec = Sequence[Tuple[str, int]]


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: ObjectId) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def list(self, skip: int = 0, limit: int = 100, sort: Optional[SortSpec] = None) -> List[T]:
        """List entities with pagination."""
        ...

    def create(self, obj_in: T) -> T:
        """Insert a new entity."""
        ...

    def update(self, id: ObjectId, changes: Mapping[str, Any]) -> Optional[T]:
        """Set the given fields on an entity and return it as stored."""
        ...

    def delete(self, id: ObjectId) -> Optional[T]:
        """Delete an entity by ID."""
        ...
