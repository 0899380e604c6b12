from typing import Optional

from flask import Flask, current_app

from pcos_tracker.store.base import RecordStore
from pcos_tracker.store.memory import MemoryStore
from pcos_tracker.utils.enums import StoreBackend

STORE_KEY = "record_store"


def init_store(app: Flask, store: Optional[RecordStore] = None) -> RecordStore:
    """
    Attach a record store to ``app``.

    An injected ``store`` wins over ``STORE_BACKEND``. The SQL backend gets
    Flask-SQLAlchemy bound to the app and its tables created.
    """
    backend = store.backend if store is not None else app.config.get("STORE_BACKEND", StoreBackend.MEMORY.value)

    if backend == StoreBackend.SQL.value:
        from pcos_tracker.extensions import db
        from pcos_tracker.store.sql import SqlStore

        db.init_app(app)
        with app.app_context():
            db.create_all()
        store = store or SqlStore()
    elif backend == StoreBackend.MEMORY.value:
        store = store or MemoryStore()
    else:
        raise ValueError(f"Unknown STORE_BACKEND '{backend}'")

    app.extensions[STORE_KEY] = store
    return store


def get_store() -> RecordStore:
    return current_app.extensions[STORE_KEY]


__all__ = ["RecordStore", "MemoryStore", "init_store", "get_store", "STORE_KEY"]
