from flask import current_app
from pcos_tracker.schemas.symptom_schema import CreateSymptomEntrySchema
from pcos_tracker.services.symptom_constants import SYMPTOM_TYPES
from pcos_tracker.services.symptom_service import record_symptom_entry, get_user_symptom_entries
from pcos_tracker.store import get_store
from pcos_tracker.utils.errors import ServiceError
from pcos_tracker.utils.http import ok, error, json_body, validate_schema, service_error

REQUIRED_FIELDS = ("userId", "date", "symptoms")


def list_symptom_entries_handler():
    return ok([e.to_dict() for e in get_store().list_symptom_entries()])


def list_user_symptom_entries_handler(user_id):
    try:
        entries = get_user_symptom_entries(get_store(), user_id)
    except ServiceError as e:
        return service_error(e)
    return ok([e.to_dict() for e in entries])


def create_symptom_entry_handler():
    body = json_body()
    data, errors = validate_schema(CreateSymptomEntrySchema, body)
    if errors:
        if any(body.get(f) is None for f in REQUIRED_FIELDS):
            message = "userId, date, and symptoms are required"
        else:
            message = "Invalid symptom entry"
        return error("VALIDATION_ERROR", message, 400, details=errors)

    try:
        entry = record_symptom_entry(
            get_store(),
            data["user_id"],
            data["date"],
            data["symptoms"],
            symptom_details=data.get("symptom_details"),
            notes=data.get("notes"),
        )
    except ServiceError as e:
        current_app.logger.warning(f"Symptom entry rejected for user {data['user_id']}: {e.message}")
        return service_error(e)

    return ok(entry.to_dict(), 201)


def symptom_types_handler():
    return ok(list(SYMPTOM_TYPES))
