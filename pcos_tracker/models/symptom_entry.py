from datetime import datetime
from pcos_tracker.extensions import db
from pcos_tracker.models.records import SymptomEntry, SymptomReading


class SymptomEntryModel(db.Model):
    __tablename__ = "symptom_entries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False)
    # [{"name", "severity", "severityLabel"}, ...] in submission order
    symptoms = db.Column(db.JSON, nullable=False)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_record(self) -> SymptomEntry:
        return SymptomEntry(
            id=self.id,
            user_id=self.user_id,
            date=self.date,
            symptoms=tuple(
                SymptomReading(
                    name=s["name"],
                    severity=float(s["severity"]),
                    severity_label=s.get("severityLabel"),
                )
                for s in (self.symptoms or [])
            ),
            notes=self.notes,
            created_at=self.created_at,
        )
