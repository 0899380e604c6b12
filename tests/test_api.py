import pytest

from pcos_tracker import create_app
from pcos_tracker.store import MemoryStore
from pcos_tracker.services.symptom_constants import SYMPTOM_TYPES


@pytest.fixture()
def store():
    store = MemoryStore()
    store.create_user({"name": "Sarah Johnson", "email": "sarah.j@example.com", "age": 28, "weight": 50, "height": 165})
    store.create_user({"name": "Emily Wilson", "email": "emily.w@example.com", "age": 32, "weight": 70, "height": 170})
    return store


@pytest.fixture()
def app(store):
    app = create_app("config.TestingConfig", store=store)
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


def post_entry(client, user_id, date, symptoms, details=None, notes=None):
    body = {"userId": user_id, "date": date, "symptoms": symptoms}
    if details is not None:
        body["symptomDetails"] = details
    if notes is not None:
        body["notes"] = notes
    return client.post("/api/symptoms", json=body)


def test_home_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.get_json()["endpoints"]["reports"] == "/api/reports"

    r2 = client.get("/health")
    assert r2.status_code == 200
    assert r2.get_json()["store"] == "memory"


def test_list_and_get_users(client):
    r = client.get("/api/users")
    assert r.status_code == 200
    users = r.get_json()
    assert [u["id"] for u in users] == [1, 2]
    assert users[0]["registeredDate"]

    r2 = client.get("/api/users/2")
    assert r2.status_code == 200
    assert r2.get_json()["email"] == "emily.w@example.com"


def test_get_unknown_user_returns_404(client):
    r = client.get("/api/users/99")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"


def test_create_user_and_duplicate_email(client, store):
    r = client.post("/api/users", json={"name": "Jessica Brown", "email": "jessica.b@example.com", "age": 26})
    assert r.status_code == 201, r.data
    created = r.get_json()
    assert created["id"] == 3
    assert created["weight"] is None

    r2 = client.post("/api/users", json={"name": "Someone Else", "email": "Jessica.B@example.com"})
    assert r2.status_code == 409
    assert r2.get_json()["error"]["code"] == "CONFLICT"
    assert len(store.list_users()) == 3


def test_create_user_requires_name_and_email(client, store):
    r = client.post("/api/users", json={"name": "No Email"})
    assert r.status_code == 400
    err = r.get_json()["error"]
    assert err["message"] == "Name and email are required"
    assert "email" in err["details"]
    assert len(store.list_users()) == 2


def test_update_user_partial(client):
    r = client.put("/api/users/1", json={"age": 29, "weight": None})
    assert r.status_code == 200, r.data
    user = r.get_json()
    assert user["age"] == 29
    assert user["weight"] is None
    assert user["name"] == "Sarah Johnson"
    assert user["height"] == 165


def test_update_user_conflict_and_not_found(client):
    r = client.put("/api/users/1", json={"email": "emily.w@example.com"})
    assert r.status_code == 409

    # keeping your own email is not a collision
    r2 = client.put("/api/users/1", json={"email": "sarah.j@example.com", "name": "Sarah J."})
    assert r2.status_code == 200
    assert r2.get_json()["name"] == "Sarah J."

    r3 = client.put("/api/users/42", json={"age": 30})
    assert r3.status_code == 404


def test_symptom_types(client):
    r = client.get("/api/symptoms/types")
    assert r.status_code == 200
    assert r.get_json() == list(SYMPTOM_TYPES)


def test_create_symptom_entry_with_details(client):
    r = post_entry(
        client, 1, "2025-03-02", ["acne", "fatigue"],
        details={"acne": {"severity": 8}}, notes="rough week",
    )
    assert r.status_code == 201, r.data
    entry = r.get_json()
    assert entry["id"] == 1
    assert entry["userId"] == 1
    assert entry["date"] == "2025-03-02"
    assert entry["notes"] == "rough week"
    assert entry["symptoms"] == [
        {"name": "acne", "severity": 8.0, "severityLabel": "severe"},
        {"name": "fatigue", "severity": 5.0, "severityLabel": "moderate"},
    ]
    assert entry["createdAt"]


def test_create_symptom_entry_accepts_objects(client):
    r = post_entry(client, 1, "2025-03-02", [{"name": "bloating", "severity": 2}, "headaches"])
    assert r.status_code == 201, r.data
    symptoms = r.get_json()["symptoms"]
    assert symptoms[0]["severityLabel"] == "very mild"
    assert symptoms[1]["severity"] == 5.0


def test_create_symptom_entry_rejects_unrecognized(client):
    r = post_entry(client, 1, "2025-03-02", ["acne", "sneezing"])
    assert r.status_code == 400
    err = r.get_json()["error"]
    assert err["invalidSymptoms"] == ["sneezing"]
    assert err["validSymptoms"] == list(SYMPTOM_TYPES)

    r2 = client.get("/api/symptoms/user/1")
    assert r2.get_json() == []


def test_create_symptom_entry_validation(client):
    r = client.post("/api/symptoms", json={"userId": 1, "symptoms": ["acne"]})
    assert r.status_code == 400
    assert r.get_json()["error"]["message"] == "userId, date, and symptoms are required"

    r2 = post_entry(client, 1, "2025-03-02", "acne")
    assert r2.status_code == 400
    assert r2.get_json()["error"]["message"] == "Symptoms must be an array"

    r3 = post_entry(client, 1, "not-a-date", ["acne"])
    assert r3.status_code == 400

    r4 = post_entry(client, 1, "2025-03-02", ["acne"], details={"acne": {"severity": 11}})
    assert r4.status_code == 400

    r5 = post_entry(client, 1, "2025-03-02", [])
    assert r5.status_code == 400


def test_create_symptom_entry_unknown_user(client):
    r = post_entry(client, 77, "2025-03-02", ["acne"])
    assert r.status_code == 404


def test_list_symptom_entries(client):
    post_entry(client, 1, "2025-03-01", ["acne"])
    post_entry(client, 2, "2025-03-01", ["fatigue"])
    post_entry(client, 1, "2025-03-05", ["bloating"])

    r = client.get("/api/symptoms/user/1")
    assert r.status_code == 200
    assert [e["date"] for e in r.get_json()] == ["2025-03-01", "2025-03-05"]

    r2 = client.get("/api/symptoms")
    assert [e["id"] for e in r2.get_json()] == [1, 2, 3]

    r3 = client.get("/api/symptoms/user/9")
    assert r3.status_code == 404


def test_report_full_range(client):
    post_entry(client, 2, "2025-03-01", ["acne"], details={"acne": {"severity": 8}})
    post_entry(client, 2, "2025-03-02", ["acne"], details={"acne": {"severity": 4}})
    post_entry(client, 2, "2025-03-03", ["fatigue"], details={"fatigue": {"severity": 6}})

    r = client.get("/api/reports/user/2/range")
    assert r.status_code == 200, r.data
    report = r.get_json()
    assert report["userName"] == "Emily Wilson"
    assert report["periodCovered"] == "All time to present"
    assert report["generatedAt"]
    assert [(s["symptom"], s["frequency"], s["averageSeverity"]) for s in report["symptomSummary"]] == [
        ("acne", 2, 6.0),
        ("fatigue", 1, 6.0),
    ]
    assert report["symptomSummary"][0]["rawSeverities"] == [8.0, 4.0]
    assert "acne" in report["insights"][0]
    assert report["recommendations"] == ["Continue tracking your symptoms to identify patterns over time."]
    assert report["userDetails"]["bmi"] == 24.2
    assert report["userDetails"]["bmiCategory"] == "Normal"
    assert report["filteredSymptomCount"] == 3
    assert report["totalSymptomCount"] == 3
    assert isinstance(report["id"], int)
    assert report["debug"] == {
        "dateRange": {"startDate": None, "endDate": None},
        "filteredCount": 3,
        "totalCount": 3,
    }


def test_report_date_range_is_inclusive(client):
    post_entry(client, 1, "2025-02-28", ["acne"])
    post_entry(client, 1, "2025-03-01", ["weight_gain"], details={"weight_gain": {"severity": 9}})
    post_entry(client, 1, "2025-03-10", ["weight_gain"], details={"weight_gain": {"severity": 7}})
    post_entry(client, 1, "2025-03-11", ["acne"])

    r = client.get("/api/reports/user/1/range?startDate=2025-03-01&endDate=2025-03-10")
    assert r.status_code == 200
    report = r.get_json()
    assert report["filteredSymptomCount"] == 2
    assert report["totalSymptomCount"] == 4
    assert report["periodCovered"] == "2025-03-01 to 2025-03-10"
    assert report["symptomSummary"][0]["symptom"] == "weight gain"
    assert report["symptomSummary"][0]["averageSeverity"] == 8.0
    assert any("healthcare provider" in rec for rec in report["recommendations"])


def test_report_empty_range(client):
    r = client.get("/api/reports/user/1/range?startDate=2025-01-01&endDate=2025-01-31")
    report = r.get_json()
    assert report["symptomSummary"] == []
    assert report["insights"] == ["No symptoms recorded in the selected time period."]
    assert report["recommendations"] == ["Start recording your symptoms regularly for better insights."]


def test_report_errors(client):
    assert client.get("/api/reports/user/99/range").status_code == 404

    r = client.get("/api/reports/user/1/range?startDate=yesterday&endDate=2025-03-10")
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_unknown_route_returns_json(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"


def test_demo_users_seeded_on_startup():
    from config import TestingConfig

    class SeededConfig(TestingConfig):
        SEED_DEMO_DATA = True

    app = create_app(SeededConfig, store=MemoryStore())
    users = app.test_client().get("/api/users").get_json()
    assert [u["name"] for u in users] == ["Sarah Johnson", "Emily Wilson", "Jessica Brown"]
    assert users[0]["registeredDate"] == "2025-01-15"
