from __future__ import annotations

import csv
import io

import pytest

from helpers import make_student


def _login_demo(client, role="admin"):
    resp = client.post("/api/auth/demo", json={"role": role})
    assert resp.status_code == 200
    return resp.get_json()["data"]


@pytest.fixture
def admin_client(client, seed_users):
    seed_users(make_student("s1"), make_student("s2"), make_student("s3", group="ECON-202", course=2))
    _login_demo(client, "admin")
    return client


def test_health(client):
    assert client.get("/api/test").get_json() == {"status": "ok"}


def test_login_required(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_unknown_email_is_not_found(client):
    resp = client.post("/api/auth/login", json={"email": "ghost@edu.test"})
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "User not found"


def test_register_and_me(client):
    resp = client.post(
        "/api/auth/register",
        json={"fullName": "Aibek", "email": "a@edu.test", "password": "secret1", "role": "student", "group": "CS-101", "course": 1},
    )
    assert resp.status_code == 201

    me = client.get("/api/auth/me").get_json()["data"]
    assert (me["email"], me["group"], me["streakCount"]) == ("a@edu.test", "CS-101", 1)
    assert "passwordHash" not in me

    client.post("/api/auth/logout")
    assert client.get("/api/auth/me").status_code == 401


def test_register_validation_message(client):
    resp = client.post("/api/auth/register", json={"fullName": "A", "email": "a@edu.test", "role": "student"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Please select a group"


def test_attendance_flow(admin_client):
    lesson = admin_client.post(
        "/api/schedule",
        json={"group": "CS-101", "subject": "Math", "teacher": "T", "room": "1", "day": 0, "time": "08:30 - 10:00"},
    ).get_json()["data"]

    session = admin_client.get("/api/attendance/session?group=CS-101&date=2025-03-09").get_json()["data"]
    # Sunday resolves to the Saturday slot, which has no lessons
    assert (session["weekday"], session["canSave"]) == (5, False)

    # the seeded Monday lesson comes first and is active by default
    session = admin_client.get("/api/attendance/session?group=CS-101&date=2025-03-10").get_json()["data"]
    assert [e["id"] for e in session["lessons"]] == ["1", lesson["id"]]
    assert session["activeLesson"]["id"] == "1"

    url = f"/api/attendance/session?group=CS-101&date=2025-03-10&lesson={lesson['id']}"
    session = admin_client.get(url).get_json()["data"]
    assert session["activeLesson"]["id"] == lesson["id"]
    assert [s["status"] for s in session["roster"]] == ["present", "present"]

    resp = admin_client.post(
        "/api/attendance/session",
        json={"group": "CS-101", "date": "2025-03-10", "lessonId": lesson["id"], "marks": {"s1": "late"}},
    )
    assert resp.status_code == 200
    saved = resp.get_json()["data"]
    assert {r["studentId"]: r["status"] for r in saved} == {"s1": "late", "s2": "present"}
    assert {r["subject"] for r in saved} == {"Math"}

    session = admin_client.get(url).get_json()["data"]
    assert [s["status"] for s in session["roster"]] == ["late", "present"]


def test_attendance_save_needs_a_lesson(admin_client):
    resp = admin_client.post("/api/attendance/session", json={"group": "CS-101", "date": "2025-03-11"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Select group and lesson"


def test_malformed_attendance_body_is_rejected(admin_client):
    resp = admin_client.post(
        "/api/attendance/session",
        json={"group": "CS-101", "date": "2025-03-10", "marks": ["s1"]},
    )
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Marks must map student ids to statuses"

    resp = admin_client.post("/api/attendance/session", json={"group": 101, "date": "2025-03-10"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Select group and lesson"


def test_bad_date_is_rejected(admin_client):
    resp = admin_client.get("/api/attendance/session?group=CS-101&date=10.03.2025")
    assert resp.status_code == 400


def test_students_cannot_mark_attendance(client):
    _login_demo(client, "student")
    resp = client.post("/api/attendance/session", json={"group": "CS-101", "date": "2025-03-10"})
    assert resp.status_code == 403


def test_ratings_and_scores(admin_client):
    resp = admin_client.put("/api/ratings/s1/score", json={"score": 150})
    assert resp.get_json()["data"] == {"current": 100, "previous": 0}

    board = admin_client.get("/api/ratings?course=1").get_json()["data"]
    assert [p["id"] for p in board] == ["s1", "s2"]
    assert board[0]["rating"] == 100

    assert admin_client.get("/api/ratings?course=2&group=CS-101").get_json()["data"] == []
    assert admin_client.get("/api/ratings?attendance=sometimes").status_code == 400
    assert admin_client.put("/api/ratings/nobody/score", json={"score": 1}).status_code == 404


def test_export_csv(admin_client):
    resp = admin_client.get("/api/ratings/export.csv?group=CS-101")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    lines = resp.get_data(as_text=True).lstrip("\ufeff").splitlines()
    assert lines[0].startswith("Rank,Full name")
    assert len(lines) == 3


def test_export_csv_uses_group_course(client, seed_users):
    seed_users(make_student("s9", group="IT-303", course=None))
    _login_demo(client, "admin")

    resp = client.get("/api/ratings/export.csv?course=3")

    rows = list(csv.reader(io.StringIO(resp.get_data(as_text=True).lstrip("\ufeff"))))
    assert len(rows) == 2
    assert (rows[1][3], rows[1][4]) == ("IT-303", "3")


def test_export_is_staff_only(client):
    _login_demo(client, "student")
    assert client.get("/api/ratings/export.csv").status_code == 403


def test_group_stats(admin_client):
    stats = admin_client.get("/api/ratings/groups").get_json()["data"]
    assert [s["name"] for s in stats] == ["CS-101", "ECON-202", "IT-303", "MGMT-404"]


def test_ai_chat(admin_client, generator):
    resp = admin_client.post("/api/ai/chat", json={"message": "Hello"})

    assert resp.get_json()["data"] == {"state": "succeeded", "text": "Keep it up!", "error": None}
    history = admin_client.get("/api/ai/chat").get_json()["data"]
    assert [t["role"] for t in history] == ["user", "model"]
    assert admin_client.post("/api/ai/chat", json={"message": ""}).status_code == 400


def test_unknown_api_path(client):
    assert client.get("/api/nothing-here").status_code == 404


def test_news_rejects_negative_limit(admin_client):
    resp = admin_client.get("/api/news?limit=-1")
    assert resp.status_code == 400
    assert admin_client.get("/api/news?limit=2").status_code == 200
