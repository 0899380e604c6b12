import logging
import threading
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pcos_tracker.models.records import SymptomEntry, User
from pcos_tracker.services.validation_service import validate_symptom_names
from pcos_tracker.store.base import USER_FIELDS, RecordStore, normalize_email
from pcos_tracker.utils.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _next_id(records) -> int:
    return max(r.id for r in records) + 1 if records else 1


class MemoryStore(RecordStore):
    """Records kept in process memory. A single lock serializes all writes."""

    backend = "memory"

    def __init__(self):
        self._lock = threading.RLock()
        self._users: List[User] = []
        self._entries: List[SymptomEntry] = []

    def _email_owner(self, email: str) -> Optional[User]:
        for u in self._users:
            if u.email == email:
                return u
        return None

    def create_user(self, fields: Dict[str, Any]) -> User:
        if not fields.get("name") or not fields.get("email"):
            raise ValidationError("Name and email are required")

        email = normalize_email(fields["email"])
        with self._lock:
            if self._email_owner(email):
                logger.warning("Rejected duplicate email %s", email)
                raise ConflictError("User with this email already exists", extra={"email": email})

            user = User(
                id=_next_id(self._users),
                name=fields["name"],
                email=email,
                age=fields.get("age"),
                weight=fields.get("weight"),
                height=fields.get("height"),
                registered_date=fields.get("registered_date") or date.today(),
            )
            self._users.append(user)

        logger.info("Created user %s", user.id)
        return user

    def update_user(self, user_id: int, fields: Dict[str, Any]) -> User:
        changes = {k: v for k, v in fields.items() if k in USER_FIELDS}
        for key in ("name", "email"):
            if key in changes and not changes[key]:
                raise ValidationError(f"'{key}' cannot be empty")

        with self._lock:
            index = next((i for i, u in enumerate(self._users) if u.id == user_id), None)
            if index is None:
                raise NotFoundError("User not found", extra={"userId": user_id})

            if "email" in changes:
                changes["email"] = normalize_email(changes["email"])
                owner = self._email_owner(changes["email"])
                if owner and owner.id != user_id:
                    raise ConflictError("Email already in use by another user", extra={"email": changes["email"]})

            updated = replace(self._users[index], **changes)
            self._users[index] = updated

        logger.info("Updated user %s fields=%s", user_id, sorted(changes))
        return updated

    def find_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return next((u for u in self._users if u.id == user_id), None)

    def list_users(self) -> List[User]:
        with self._lock:
            return sorted(self._users, key=lambda u: u.id)

    def create_symptom_entry(self, fields: Dict[str, Any]) -> SymptomEntry:
        readings = tuple(fields["symptoms"])
        validate_symptom_names([r.name for r in readings])

        with self._lock:
            user_id = fields["user_id"]
            if self.find_user(user_id) is None:
                raise ValidationError("Unknown userId", extra={"userId": user_id})

            entry = SymptomEntry(
                id=_next_id(self._entries),
                user_id=user_id,
                date=fields["date"],
                symptoms=readings,
                notes=fields.get("notes"),
                created_at=fields.get("created_at") or datetime.utcnow(),
            )
            self._entries.append(entry)

        logger.info("Recorded symptom entry %s for user %s (%d symptoms)", entry.id, entry.user_id, len(readings))
        return entry

    def list_symptom_entries_for_user(self, user_id: int) -> List[SymptomEntry]:
        with self._lock:
            return [e for e in self._entries if e.user_id == user_id]

    def list_symptom_entries(self) -> List[SymptomEntry]:
        with self._lock:
            return list(self._entries)
