import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from pcos_tracker.extensions import db
from pcos_tracker.models.records import SymptomEntry, User
from pcos_tracker.models.symptom_entry import SymptomEntryModel
from pcos_tracker.models.user import UserModel
from pcos_tracker.services.validation_service import validate_symptom_names
from pcos_tracker.store.base import USER_FIELDS, RecordStore, normalize_email
from pcos_tracker.utils.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class SqlStore(RecordStore):
    """
    Records stored through Flask-SQLAlchemy.

    Must be used inside an application context. Ids come from the database
    and email uniqueness is backed by a unique constraint.
    """

    backend = "sql"

    def create_user(self, fields: Dict[str, Any]) -> User:
        if not fields.get("name") or not fields.get("email"):
            raise ValidationError("Name and email are required")

        email = normalize_email(fields["email"])
        if UserModel.query.filter_by(email=email).first():
            logger.warning("Rejected duplicate email %s", email)
            raise ConflictError("User with this email already exists", extra={"email": email})

        row = UserModel(
            name=fields["name"],
            email=email,
            age=fields.get("age"),
            weight=fields.get("weight"),
            height=fields.get("height"),
            registered_date=fields.get("registered_date") or date.today(),
        )
        db.session.add(row)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise ConflictError("User with this email already exists", extra={"email": email})

        logger.info("Created user %s", row.id)
        return row.to_record()

    def update_user(self, user_id: int, fields: Dict[str, Any]) -> User:
        changes = {k: v for k, v in fields.items() if k in USER_FIELDS}
        for key in ("name", "email"):
            if key in changes and not changes[key]:
                raise ValidationError(f"'{key}' cannot be empty")

        row = db.session.get(UserModel, user_id)
        if row is None:
            raise NotFoundError("User not found", extra={"userId": user_id})

        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])
            owner = UserModel.query.filter_by(email=changes["email"]).first()
            if owner and owner.id != user_id:
                raise ConflictError("Email already in use by another user", extra={"email": changes["email"]})

        for key, value in changes.items():
            setattr(row, key, value)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise ConflictError("Email already in use by another user", extra={"email": changes.get("email")})

        logger.info("Updated user %s fields=%s", user_id, sorted(changes))
        return row.to_record()

    def find_user(self, user_id: int) -> Optional[User]:
        row = db.session.get(UserModel, user_id)
        return row.to_record() if row else None

    def list_users(self) -> List[User]:
        return [row.to_record() for row in UserModel.query.order_by(UserModel.id).all()]

    def create_symptom_entry(self, fields: Dict[str, Any]) -> SymptomEntry:
        readings = list(fields["symptoms"])
        validate_symptom_names([r.name for r in readings])

        user_id = fields["user_id"]
        if db.session.get(UserModel, user_id) is None:
            raise ValidationError("Unknown userId", extra={"userId": user_id})

        row = SymptomEntryModel(
            user_id=user_id,
            date=fields["date"],
            symptoms=[r.to_dict() for r in readings],
            notes=fields.get("notes"),
            created_at=fields.get("created_at") or datetime.utcnow(),
        )
        db.session.add(row)
        db.session.commit()

        logger.info("Recorded symptom entry %s for user %s (%d symptoms)", row.id, user_id, len(readings))
        return row.to_record()

    def list_symptom_entries_for_user(self, user_id: int) -> List[SymptomEntry]:
        rows = SymptomEntryModel.query.filter_by(user_id=user_id).order_by(SymptomEntryModel.id).all()
        return [row.to_record() for row in rows]

    def list_symptom_entries(self) -> List[SymptomEntry]:
        return [row.to_record() for row in SymptomEntryModel.query.order_by(SymptomEntryModel.id).all()]

    def ping(self) -> bool:
        try:
            db.session.execute(db.text("SELECT 1"))
            return True
        except Exception as e:
            logger.error("Database ping failed: %s", e)
            return False
