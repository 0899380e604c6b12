"""
Validation Service

Checks submitted symptoms against the recognized vocabulary and turns the
loose client payload (plain names, objects, a separate details mapping) into
a single ``SymptomReading`` shape before anything reaches the store.
"""

import math
from typing import Any, Dict, Iterable, List, Optional

from pcos_tracker.models.records import SymptomReading
from pcos_tracker.services.symptom_constants import (
    DEFAULT_SEVERITY,
    MAX_SEVERITY,
    MIN_SEVERITY,
    RECOGNIZED_SYMPTOMS,
    SEVERITY_LABELS,
    SYMPTOM_TYPES,
)
from pcos_tracker.utils.errors import ValidationError


def _vocabulary_listing(vocabulary) -> List[str]:
    if vocabulary is RECOGNIZED_SYMPTOMS:
        return list(SYMPTOM_TYPES)
    return sorted(vocabulary)


def validate_symptom_names(names: Iterable[str], vocabulary=RECOGNIZED_SYMPTOMS) -> None:
    """
    Raise ``ValidationError`` listing every name outside ``vocabulary``.

    The error's ``extra`` carries ``invalidSymptoms`` (first-seen order, no
    duplicates) and ``validSymptoms``. Nothing is returned on success.
    """
    invalid: List[str] = []
    for name in names:
        if name not in vocabulary and name not in invalid:
            invalid.append(name)

    if invalid:
        raise ValidationError(
            "Some symptoms are not recognized",
            extra={
                "invalidSymptoms": invalid,
                "validSymptoms": _vocabulary_listing(vocabulary),
            },
        )


def severity_label(severity: float) -> str:
    level = int(severity)
    level = max(int(MIN_SEVERITY), min(int(MAX_SEVERITY), level))
    return SEVERITY_LABELS[level]


def parse_severity(value: Any, symptom: str) -> float:
    if value is None:
        return DEFAULT_SEVERITY
    if isinstance(value, bool):
        raise ValidationError(f"Severity for '{symptom}' must be a number", extra={"symptom": symptom})
    try:
        severity = float(value)
    except (ValueError, TypeError):
        raise ValidationError(f"Severity for '{symptom}' must be a number", extra={"symptom": symptom})

    if math.isnan(severity) or not (MIN_SEVERITY <= severity <= MAX_SEVERITY):
        raise ValidationError(
            f"Severity for '{symptom}' must be between {MIN_SEVERITY:g} and {MAX_SEVERITY:g}",
            extra={"symptom": symptom},
        )
    return severity


def _detail_severity(symptom_details: Optional[Dict[str, Any]], name: str) -> Any:
    if not isinstance(symptom_details, dict):
        return None
    detail = symptom_details.get(name)
    if isinstance(detail, dict):
        return detail.get("severity")
    return None


def normalize_symptoms(
    raw_symptoms: Any,
    symptom_details: Optional[Dict[str, Any]] = None,
    vocabulary=RECOGNIZED_SYMPTOMS,
) -> List[SymptomReading]:
    """
    Normalize a submitted symptom list into ``SymptomReading`` values.

    Each item is either a symptom name or an object ``{"name", "severity"?}``.
    Severity comes from the item, then from ``symptom_details[name]``, then
    falls back to the default of 5. The whole list is rejected if any name is
    unrecognized or any severity is out of range.
    """
    if not isinstance(raw_symptoms, list):
        raise ValidationError("Symptoms must be an array")
    if not raw_symptoms:
        raise ValidationError("At least one symptom is required")

    pairs = []
    for item in raw_symptoms:
        if isinstance(item, str):
            pairs.append((item, None))
        elif isinstance(item, dict) and isinstance(item.get("name"), str):
            pairs.append((item["name"], item.get("severity")))
        else:
            raise ValidationError("Each symptom must be a name or an object with a 'name' field")

    validate_symptom_names([name for name, _ in pairs], vocabulary)

    readings = []
    for name, severity in pairs:
        if severity is None:
            severity = _detail_severity(symptom_details, name)
        value = parse_severity(severity, name)
        readings.append(SymptomReading(name=name, severity=value, severity_label=severity_label(value)))
    return readings
