from datetime import date
from pcos_tracker.extensions import db
from pcos_tracker.models.records import User


class UserModel(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    age = db.Column(db.Integer, nullable=True)
    weight = db.Column(db.Float, nullable=True)
    height = db.Column(db.Float, nullable=True)
    registered_date = db.Column(db.Date, nullable=False, default=date.today)

    def to_record(self) -> User:
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            age=self.age,
            weight=self.weight,
            height=self.height,
            registered_date=self.registered_date,
        )
