from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pcos_tracker.models.records import SymptomEntry, User
from pcos_tracker.utils.errors import NotFoundError

USER_FIELDS = ("name", "email", "age", "weight", "height")


def normalize_email(email: Any) -> str:
    return str(email).strip().lower()


class RecordStore(ABC):
    """
    Storage contract for users and symptom entries.

    Implementations assign ids as ``max(existing) + 1`` and must keep the
    duplicate-email check, id assignment and insert as one step.
    """

    backend = "abstract"

    @abstractmethod
    def create_user(self, fields: Dict[str, Any]) -> User:
        """Insert a user. Raises ``ConflictError`` on a duplicate email."""

    @abstractmethod
    def update_user(self, user_id: int, fields: Dict[str, Any]) -> User:
        """Overwrite the given fields only. Raises ``NotFoundError`` or ``ConflictError``."""

    @abstractmethod
    def find_user(self, user_id: int) -> Optional[User]:
        ...

    def get_user(self, user_id: int) -> User:
        user = self.find_user(user_id)
        if user is None:
            raise NotFoundError("User not found", extra={"userId": user_id})
        return user

    @abstractmethod
    def list_users(self) -> List[User]:
        ...

    @abstractmethod
    def create_symptom_entry(self, fields: Dict[str, Any]) -> SymptomEntry:
        """Insert an entry. Raises ``ValidationError`` for an unknown user or symptom name."""

    @abstractmethod
    def list_symptom_entries_for_user(self, user_id: int) -> List[SymptomEntry]:
        ...

    @abstractmethod
    def list_symptom_entries(self) -> List[SymptomEntry]:
        ...

    def ping(self) -> bool:
        return True
