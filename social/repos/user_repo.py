"""Repository helpers for user lookups."""

from typing import List, Optional, Sequence

from social.db_accessor import DB_Accessor
from social.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def list_all(self) -> List[User]:
        """Return every user ordered by id."""
        return list(self.list(order_by=("id",)))

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return a user by id, or None when it does not exist."""
        return self.first(id=user_id)

    def create_user(self, name: str) -> User:
        """Create a user with the given display name."""
        return self.create(name=name)

    def create_many(self, names: Sequence[str]) -> List[User]:
        """Create users in the given order and return them with ids populated."""
        return [self.create_user(name) for name in names]
