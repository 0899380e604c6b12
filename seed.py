import os

# Seeding only persists with the SQL backend
os.environ.setdefault("STORE_BACKEND", "sql")
os.environ["SEED_DEMO_DATA"] = "0"

from pcos_tracker import create_app
from pcos_tracker.services.seed_service import seed_demo_users
from pcos_tracker.store import get_store

app = create_app()

with app.app_context():
    store = get_store()
    added = seed_demo_users(store)
    if added:
        print(f"Seeded {added} demo users into {store.backend} store")
    else:
        print("Store already has users, nothing seeded")
