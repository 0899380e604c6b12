"""
Report Service

Builds a user's symptom report: per-symptom frequency and severity
statistics over an optional date range, plus insights, recommendations
and BMI from the user's profile.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pcos_tracker.models.records import SymptomEntry, User
from pcos_tracker.services.symptom_constants import (
    BMI_NORMAL_MAX,
    BMI_OVERWEIGHT_MAX,
    BMI_UNDERWEIGHT_MAX,
    DEFAULT_SEVERITY,
    HIGH_SEVERITY_THRESHOLD,
    INSIGHT_MOST_COMMON,
    INSIGHT_NO_SYMPTOMS,
    RECOMMEND_CONSULT_PROVIDER,
    RECOMMEND_KEEP_TRACKING,
    RECOMMEND_START_TRACKING,
)
from pcos_tracker.store.base import RecordStore
from pcos_tracker.utils.dates import parse_calendar_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymptomStat:
    symptom: str
    frequency: int
    average_severity: float
    raw_severities: Tuple[float, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symptom": self.symptom,
            "frequency": self.frequency,
            "averageSeverity": self.average_severity,
            "rawSeverities": list(self.raw_severities),
        }


@dataclass(frozen=True)
class Report:
    user_id: int
    user_name: str
    period_covered: str
    user_details: Dict[str, Any]
    symptom_summary: Tuple[SymptomStat, ...]
    filtered_symptom_count: int
    total_symptom_count: int
    insights: Tuple[str, ...]
    recommendations: Tuple[str, ...]
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def to_dict(self, generated_at: Optional[datetime] = None) -> Dict[str, Any]:
        body = {
            "userId": self.user_id,
            "userName": self.user_name,
            "periodCovered": self.period_covered,
            "userDetails": dict(self.user_details),
            "symptomSummary": [s.to_dict() for s in self.symptom_summary],
            "filteredSymptomCount": self.filtered_symptom_count,
            "totalSymptomCount": self.total_symptom_count,
            "insights": list(self.insights),
            "recommendations": list(self.recommendations),
            "dateRange": {
                "startDate": self.start_date.isoformat() if self.start_date else None,
                "endDate": self.end_date.isoformat() if self.end_date else None,
            },
        }
        body["debug"] = {
            "dateRange": dict(body["dateRange"]),
            "filteredCount": self.filtered_symptom_count,
            "totalCount": self.total_symptom_count,
        }
        if generated_at is not None:
            # millisecond timestamp of generation doubles as the report id
            body["id"] = int(generated_at.timestamp() * 1000)
            body["generatedAt"] = generated_at.isoformat()
        return body


def display_name(symptom: str) -> str:
    return symptom.replace("_", " ")


def filter_entries_by_date(
    entries: Iterable[SymptomEntry],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[SymptomEntry]:
    """
    Keep entries whose calendar date lies in ``[start_date, end_date]``.

    Both bounds are inclusive. Unless both are given, every entry is kept.
    """
    entries = list(entries)
    start = parse_calendar_date(start_date)
    end = parse_calendar_date(end_date)
    if start is None or end is None:
        return entries
    return [e for e in entries if start <= parse_calendar_date(e.date) <= end]


def aggregate_symptoms(entries: Iterable[SymptomEntry]) -> List[SymptomStat]:
    """
    Count each symptom and average its severity across ``entries``.

    Sorted by frequency, most frequent first. Ties keep the order in which
    symptoms were first encountered.
    """
    stats: Dict[str, Dict[str, Any]] = {}
    for entry in entries:
        for reading in entry.symptoms:
            severity = reading.severity if reading.severity is not None else DEFAULT_SEVERITY
            bucket = stats.setdefault(reading.name, {"count": 0, "sum": 0.0, "severities": []})
            bucket["count"] += 1
            bucket["sum"] += severity
            bucket["severities"].append(severity)

    # dicts keep insertion order and sorted() is stable
    ordered = sorted(stats.items(), key=lambda item: item[1]["count"], reverse=True)
    return [
        SymptomStat(
            symptom=display_name(name),
            frequency=bucket["count"],
            average_severity=bucket["sum"] / bucket["count"],
            raw_severities=tuple(bucket["severities"]),
        )
        for name, bucket in ordered
    ]


def derive_insights(summary: List[SymptomStat]) -> List[str]:
    if not summary:
        return [INSIGHT_NO_SYMPTOMS]
    return [INSIGHT_MOST_COMMON.format(symptom=summary[0].symptom)]


def derive_recommendations(summary: List[SymptomStat]) -> List[str]:
    if not summary:
        return [RECOMMEND_START_TRACKING]

    recommendations = [RECOMMEND_KEEP_TRACKING]
    if any(s.average_severity >= HIGH_SEVERITY_THRESHOLD for s in summary):
        recommendations.append(RECOMMEND_CONSULT_PROVIDER)
    return recommendations


def calculate_bmi(weight: Optional[float], height: Optional[float]) -> Optional[float]:
    """BMI from weight in kg and height in cm, rounded to one decimal."""
    if not weight or not height or height <= 0:
        return None
    height_m = float(height) / 100.0
    bmi = float(weight) / (height_m * height_m)
    # half-up, so 20.25 reports as 20.3
    return float(Decimal(str(bmi)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def bmi_category(bmi: Optional[float]) -> Optional[str]:
    if bmi is None or bmi <= 0:
        return None
    if bmi < BMI_UNDERWEIGHT_MAX:
        return "Underweight"
    if bmi < BMI_NORMAL_MAX:
        return "Normal"
    if bmi < BMI_OVERWEIGHT_MAX:
        return "Overweight"
    return "Obese"


def _user_details(user: User) -> Dict[str, Any]:
    bmi = calculate_bmi(user.weight, user.height)
    return {
        "age": user.age,
        "weight": user.weight,
        "height": user.height,
        "bmi": bmi,
        "bmiCategory": bmi_category(bmi),
    }


def generate_report(
    store: RecordStore,
    user_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> Report:
    """
    Build the symptom report for ``user_id``.

    Raises ``NotFoundError`` for an unknown user. The result depends only on
    the stored records and the arguments, so repeated calls without writes
    in between return equal reports.
    """
    user = store.get_user(user_id)
    start = parse_calendar_date(start_date)
    end = parse_calendar_date(end_date)

    all_entries = store.list_symptom_entries_for_user(user_id)
    entries = filter_entries_by_date(all_entries, start, end)
    summary = aggregate_symptoms(entries)

    period = "{} to {}".format(
        start.isoformat() if start else "All time",
        end.isoformat() if end else "present",
    )

    logger.info(
        "Generated report for user %s: %d of %d entries in %s",
        user_id, len(entries), len(all_entries), period,
    )
    return Report(
        user_id=user.id,
        user_name=user.name,
        period_covered=period,
        user_details=_user_details(user),
        symptom_summary=tuple(summary),
        filtered_symptom_count=len(entries),
        total_symptom_count=len(all_entries),
        insights=tuple(derive_insights(summary)),
        recommendations=tuple(derive_recommendations(summary)),
        start_date=start,
        end_date=end,
    )
