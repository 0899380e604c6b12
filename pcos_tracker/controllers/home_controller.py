from flask import jsonify
from pcos_tracker.store import get_store


def home_index():
    return jsonify({
        "message": "Welcome to PCOS Health Tracker API",
        "endpoints": {
            "users": "/api/users",
            "symptoms": "/api/symptoms",
            "reports": "/api/reports",
        },
    })


def health_check():
    store = get_store()
    healthy = store.ping()
    return jsonify({
        "status": "online",
        "store": store.backend,
        "storeStatus": "healthy" if healthy else "unhealthy",
    }), 200 if healthy else 503
