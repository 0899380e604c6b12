from dotenv import load_dotenv
import os

load_dotenv()


def _env_flag(name, default="0"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    # "memory" keeps records in process memory, "sql" stores them via Flask-SQLAlchemy
    STORE_BACKEND = os.getenv("STORE_BACKEND", "memory").strip().lower()
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///pcos_tracker.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    CORS_ORIGINS = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()
    ]

    # Seed the three demo users into an empty store on startup
    SEED_DEMO_DATA = _env_flag("SEED_DEMO_DATA", "1")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    PORT = int(os.getenv("PORT", "3000"))


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    STORE_BACKEND = "memory"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SEED_DEMO_DATA = False
    LOG_LEVEL = "WARNING"
