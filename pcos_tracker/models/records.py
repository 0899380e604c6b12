"""
Record types handed across the store interface.

Both store backends return these frozen values, so callers never hold a
reference into store state.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    age: Optional[int] = None
    weight: Optional[float] = None  # kg
    height: Optional[float] = None  # cm
    registered_date: date = field(default_factory=date.today)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "weight": self.weight,
            "height": self.height,
            "registeredDate": self.registered_date.isoformat(),
        }


@dataclass(frozen=True)
class SymptomReading:
    name: str
    severity: float
    severity_label: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "severity": self.severity,
            "severityLabel": self.severity_label,
        }


@dataclass(frozen=True)
class SymptomEntry:
    id: int
    user_id: int
    date: date
    symptoms: Tuple[SymptomReading, ...]
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "date": self.date.isoformat(),
            "symptoms": [s.to_dict() for s in self.symptoms],
            "notes": self.notes,
            "createdAt": self.created_at.isoformat(),
        }
