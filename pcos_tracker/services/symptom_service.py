"""
Symptom Service

Records symptom entries and lists them per user.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from pcos_tracker.models.records import SymptomEntry
from pcos_tracker.services.validation_service import normalize_symptoms
from pcos_tracker.store.base import RecordStore


def record_symptom_entry(
    store: RecordStore,
    user_id: int,
    entry_date: date,
    symptoms: Any,
    symptom_details: Optional[Dict[str, Any]] = None,
    notes: Optional[str] = None,
) -> SymptomEntry:
    """
    Validate and store one symptom entry.

    Raises:
        NotFoundError: If the user does not exist
        ValidationError: If any symptom is unrecognized or malformed;
            nothing is stored in that case
    """
    store.get_user(user_id)
    readings = normalize_symptoms(symptoms, symptom_details)
    return store.create_symptom_entry({
        "user_id": user_id,
        "date": entry_date,
        "symptoms": readings,
        "notes": notes,
    })


def get_user_symptom_entries(store: RecordStore, user_id: int) -> List[SymptomEntry]:
    store.get_user(user_id)
    return store.list_symptom_entries_for_user(user_id)
