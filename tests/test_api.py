from sqlmodel import select

from profbook.auth import create_access_token
from profbook.config import ADMIN_EMAIL, ADMIN_PASSWORD
from profbook.models import Professor

from conftest import PASSWORD


def user_headers(client):
    response = client.post("/api/user/login", json={"email": "student@uni.edu", "password": PASSWORD})
    assert response.status_code == 200
    return {"token": response.json()["token"]}


def professor_headers(client, email="ada@uni.edu"):
    response = client.post("/api/professor/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200
    return {"dToken": response.json()["token"]}


def admin_headers(client):
    response = client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"aToken": response.json()["token"]}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_register_then_login(client):
    response = client.post(
        "/api/user/register",
        json={"name": "New", "email": "new@uni.edu", "password": "longenough"},
    )
    assert response.status_code == 201
    assert response.json()["success"] is True
    assert response.json()["token"]

    duplicate = client.post(
        "/api/user/register",
        json={"name": "New", "email": "new@uni.edu", "password": "longenough"},
    )
    assert duplicate.status_code == 409
    assert duplicate.json() == {"success": False, "message": "Email already registered"}

    login = client.post("/api/user/login", json={"email": "new@uni.edu", "password": "longenough"})
    assert login.json()["success"] is True


def test_short_password_uses_error_envelope(client):
    response = client.post("/api/user/register", json={"name": "X", "email": "x@uni.edu", "password": "short"})
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["message"].startswith("password")


def test_bad_login(client, user):
    response = client.post("/api/user/login", json={"email": "student@uni.edu", "password": "wrong-password"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}


def test_list_hides_passwords(client, professors):
    body = client.get("/api/professor/list").json()
    assert body["success"] is True
    assert [p["id"] for p in body["professors"]] == ["p-math-1", "p-eng-1", "p-math-2", "p-off"]
    for prof in body["professors"]:
        assert "password" not in prof
        assert prof["slots_booked"] == {}


def test_book_appointment_appends_slot(client, session, professors, user):
    headers = user_headers(client)
    payload = {"profId": "p-math-1", "slotDate": "3_6_2025", "slotTime": "09:00 AM"}

    response = client.post("/api/user/book-appointment", json=payload, headers=headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Appointment Booked"}

    payload["slotTime"] = "09:30 AM"
    client.post("/api/user/book-appointment", json=payload, headers=headers)

    session.expire_all()
    prof = session.get(Professor, "p-math-1")
    assert prof.slots_booked == {"3_6_2025": ["09:00 AM", "09:30 AM"]}


def test_booking_same_slot_twice_is_rejected(client, professors, user):
    headers = user_headers(client)
    payload = {"profId": "p-eng-1", "slotDate": "4_6_2025", "slotTime": "10:00 AM"}
    assert client.post("/api/user/book-appointment", json=payload, headers=headers).status_code == 200

    again = client.post("/api/user/book-appointment", json=payload, headers=headers)
    assert again.status_code == 409
    assert again.json() == {"success": False, "message": "Slot not available"}


def test_booking_unavailable_or_unknown_professor(client, professors, user):
    headers = user_headers(client)
    off = client.post(
        "/api/user/book-appointment",
        json={"profId": "p-off", "slotDate": "4_6_2025", "slotTime": "10:00 AM"},
        headers=headers,
    )
    assert off.status_code == 409
    assert off.json()["message"] == "Professor not available"

    missing = client.post(
        "/api/user/book-appointment",
        json={"profId": "nobody", "slotDate": "4_6_2025", "slotTime": "10:00 AM"},
        headers=headers,
    )
    assert missing.status_code == 404


def test_booking_requires_user_token(client, professors):
    payload = {"profId": "p-math-1", "slotDate": "3_6_2025", "slotTime": "09:00 AM"}
    response = client.post("/api/user/book-appointment", json=payload)
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Not Authorized Login Again"}

    # a professor token is not a user token
    wrong = client.post("/api/user/book-appointment", json=payload, headers={"token": professor_headers(client)["dToken"]})
    assert wrong.status_code == 401

    forged = client.post(
        "/api/user/book-appointment",
        json=payload,
        headers={"token": create_access_token({"sub": "not-a-number", "role": "user"})},
    )
    assert forged.status_code == 401


def test_professor_profile_and_update(client, professors):
    headers = professor_headers(client)
    profile = client.get("/api/professor/profile", headers=headers).json()
    assert profile["profileData"]["name"] == "Ada Lovelace"
    assert "password" not in profile["profileData"]

    response = client.post(
        "/api/professor/update-profile",
        json={"about": "Now teaching topology", "available": False},
        headers=headers,
    )
    assert response.json() == {"success": True, "message": "Profile Updated"}

    updated = client.get("/api/professor/profile", headers=headers).json()["profileData"]
    assert updated["about"] == "Now teaching topology"
    assert updated["available"] is False


def test_update_profile_requires_dtoken(client, professors):
    response = client.post("/api/professor/update-profile", json={"about": "x", "available": True})
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_slots_endpoint(client, professors):
    body = client.get("/api/professor/p-math-1/slots").json()
    assert body["success"] is True
    # a seven-day window always holds five weekdays
    assert len(body["days"]) == 5
    for day in body["days"]:
        for slot in day:
            assert slot["time"].endswith(("AM", "PM"))

    off = client.get("/api/professor/p-off/slots").json()
    assert off["days"] == []
    assert off["message"] == "Professor not available"

    assert client.get("/api/professor/nobody/slots").status_code == 404


def test_admin_add_professor(client, session, professors):
    headers = admin_headers(client)
    payload = {
        "name": "Grace Hopper",
        "email": "grace@uni.edu",
        "password": "compilers!",
        "image": "https://img/grace.png",
        "department": "Engineering",
        "about": "COBOL",
    }
    response = client.post("/api/admin/add-professor", json=payload, headers=headers)
    assert response.status_code == 201
    assert response.json() == {"success": True, "message": "Professor Added"}

    grace = session.exec(select(Professor).where(Professor.email == "grace@uni.edu")).one()
    assert grace.available is True
    assert grace.slots_booked == {}
    assert grace.password != "compilers!"
    assert grace.date > 0

    assert client.post("/api/admin/add-professor", json=payload, headers=headers).status_code == 409

    payload.update(email="other@uni.edu", department="Astrology")
    assert client.post("/api/admin/add-professor", json=payload, headers=headers).status_code == 422


def test_admin_routes_reject_other_roles(client, professors, user):
    response = client.get("/api/admin/all-professors", headers={"aToken": user_headers(client)["token"]})
    assert response.status_code == 403

    bad_login = client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    assert bad_login.status_code == 401


def test_admin_change_availability(client, professors):
    headers = admin_headers(client)
    response = client.post("/api/admin/change-availability", json={"profId": "p-math-2"}, headers=headers)
    assert response.json()["success"] is True

    listed = client.get("/api/admin/all-professors", headers=headers).json()["professors"]
    assert {p["id"]: p["available"] for p in listed}["p-math-2"] is False
