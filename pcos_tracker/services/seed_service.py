import logging
from datetime import date

from pcos_tracker.store.base import RecordStore

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {
        "name": "Sarah Johnson",
        "email": "sarah.j@example.com",
        "age": 28,
        "weight": 50.0,
        "height": 165.0,
        "registered_date": date(2025, 1, 15),
    },
    {
        "name": "Emily Wilson",
        "email": "emily.w@example.com",
        "age": 32,
        "weight": 70.0,
        "height": 170.0,
        "registered_date": date(2025, 2, 10),
    },
    {
        "name": "Jessica Brown",
        "email": "jessica.b@example.com",
        "age": 26,
        "weight": 70.0,
        "height": 160.0,
        "registered_date": date(2025, 3, 5),
    },
]


def seed_demo_users(store: RecordStore) -> int:
    """Insert the demo users into an empty store. Returns how many were added."""
    if store.list_users():
        return 0
    for fields in DEMO_USERS:
        store.create_user(dict(fields))
    logger.info("Seeded %d demo users", len(DEMO_USERS))
    return len(DEMO_USERS)
