from datetime import date
from pathlib import Path

import pytest

from app.core.config import settings
from app.core.roles import ROLE_ADMIN
from app.services.uploads import store_image

FIXED_TODAY = date(2026, 10, 17)  # a Saturday


@pytest.fixture()
def frozen_today(monkeypatch):
    for mod in (
        "app.api.routes.moderator_schedule",
        "app.api.routes.prayer_teams",
        "app.api.routes.dashboard",
    ):
        monkeypatch.setattr(f"{mod}.today", lambda: FIXED_TODAY)
    return FIXED_TODAY


# --- auth ---

def test_register_normalizes_email_and_logs_in(client):
    r = client.post(
        "/api/v1/auth/register",
        json={"fullName": "Grace Hopper", "email": "Grace@StoneCreek.ORG", "password": "secret123", "birthday": "1990-12-09"},
    )
    assert r.status_code == 201, r.text
    user = r.json()["user"]
    assert user["email"] == "grace@stonecreek.org"
    assert user["role"] == "MEMBER"
    assert user["birthday"] == "1990-12-09"

    dup = client.post(
        "/api/v1/auth/register",
        json={"fullName": "Other", "email": "grace@stonecreek.org", "password": "secret123"},
    )
    assert dup.status_code == 400

    bad = client.post("/api/v1/auth/login", json={"email": "grace@stonecreek.org", "password": "nope"})
    assert bad.status_code == 401

    ok = client.post("/api/v1/auth/login", json={"email": "GRACE@stonecreek.org", "password": "secret123"})
    assert ok.status_code == 200
    token = ok.json()["access_token"]
    assert "auth-token" in ok.cookies

    me = client.get("/api/v1/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json()["user"]["fullName"] == "Grace Hopper"


def test_cookie_session_is_accepted(client, make_user):
    make_user(email="cookie@stonecreek.org")
    client.post("/api/v1/auth/login", json={"email": "cookie@stonecreek.org", "password": "secret123"})
    assert client.get("/api/v1/me").status_code == 200

    client.post("/api/v1/auth/logout")
    client.cookies.clear()
    assert client.get("/api/v1/me").status_code == 401


def test_admin_cap(client, make_user):
    for _ in range(3):
        make_user(role=ROLE_ADMIN)
    r = client.post(
        "/api/v1/auth/register",
        json={"fullName": "Fourth", "email": "fourth@stonecreek.org", "password": "secret123", "role": "ADMIN"},
    )
    assert r.status_code == 400
    assert "3" in r.json()["detail"]


def test_role_change_respects_cap(client, auth, make_user, admin):
    make_user(role=ROLE_ADMIN)
    make_user(role=ROLE_ADMIN)
    member = make_user()
    r = client.post(f"/api/v1/admin/users/{member.id}/role", json={"role": "ADMIN"}, headers=auth(admin))
    assert r.status_code == 400
    assert client.post(f"/api/v1/admin/users/{member.id}/role", json={"role": "ADMIN"}, headers=auth(member)).status_code == 403


def test_bad_token(client):
    r = client.get("/api/v1/me", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401
    assert r.json()["code"] == "unauthenticated"


# --- prayer teams ---

def test_generate_teams_endpoint(client, auth, make_user, admin, frozen_today):
    for _ in range(3):
        make_user()

    r = client.post("/api/v1/prayer-teams", json={}, headers=auth(admin))
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["count"] == 2  # 4 users incl. admin
    assert body["action"] == "created"
    assert body["weekStart"] == "2026-10-12"
    assert body["weekEnd"] == "2026-10-18"

    again = client.post("/api/v1/prayer-teams", json={"replaceExisting": False}, headers=auth(admin))
    assert again.status_code == 409
    assert again.json()["code"] == "teams_already_exist"

    replaced = client.post("/api/v1/prayer-teams", json={"replaceExisting": True}, headers=auth(admin))
    assert replaced.json()["action"] == "replaced"

    listing = client.get("/api/v1/prayer-teams").json()
    assert len(listing["teams"]) == 2
    assert {"id", "fullName", "email"} <= set(listing["teams"][0]["member1"])


def test_generate_teams_custom_week_and_clear(client, auth, make_user, admin):
    make_user()
    week = {"weekStart": "2026-11-02", "weekEnd": "2026-11-08"}
    r = client.post("/api/v1/prayer-teams", json=week, headers=auth(admin))
    assert r.json()["count"] == 1

    cleared = client.post("/api/v1/prayer-teams/clear", json=week, headers=auth(admin))
    assert cleared.json()["count"] == 1

    bad = client.post(
        "/api/v1/prayer-teams", json={"weekStart": "2026-11-08", "weekEnd": "2026-11-02"}, headers=auth(admin)
    )
    assert bad.status_code == 400


def test_generate_teams_needs_two_members(client, auth, admin):
    r = client.post("/api/v1/prayer-teams", json={"weekStart": "2026-11-02", "weekEnd": "2026-11-08"}, headers=auth(admin))
    assert r.status_code == 400
    assert r.json()["code"] == "insufficient_members"


def test_generate_teams_requires_admin(client, auth, make_user):
    member = make_user()
    assert client.post("/api/v1/prayer-teams", json={}).status_code == 401
    assert client.post("/api/v1/prayer-teams", json={}, headers=auth(member)).status_code == 403


def test_manual_team_crud(client, auth, make_user, admin):
    a, b, c = make_user(), make_user(), make_user()
    week = {"weekStart": "2026-11-02", "weekEnd": "2026-11-08"}

    same = client.post("/api/v1/prayer-teams/create", json={"member1Id": a.id, "member2Id": a.id, **week}, headers=auth(admin))
    assert same.status_code == 409

    missing = client.post("/api/v1/prayer-teams/create", json={"member1Id": a.id, "member2Id": 999, **week}, headers=auth(admin))
    assert missing.status_code == 400
    assert missing.json()["code"] == "member_not_found"

    r = client.post("/api/v1/prayer-teams/create", json={"member1Id": a.id, "member2Id": b.id, **week}, headers=auth(admin))
    assert r.status_code == 201
    team_id = r.json()["team"]["id"]

    clash = client.post("/api/v1/prayer-teams/create", json={"member1Id": c.id, "member2Id": b.id, **week}, headers=auth(admin))
    assert clash.status_code == 409

    upd = client.put(f"/api/v1/prayer-teams/{team_id}", json={"member1Id": a.id, "member2Id": c.id, **week}, headers=auth(admin))
    assert upd.status_code == 200
    assert upd.json()["team"]["member2"]["id"] == c.id

    assert client.get(f"/api/v1/prayer-teams/{team_id}").status_code == 200
    assert client.delete(f"/api/v1/prayer-teams/{team_id}", headers=auth(admin)).status_code == 200
    assert client.get(f"/api/v1/prayer-teams/{team_id}").status_code == 404


def test_team_dates_accept_iso_timestamps(client, auth, make_user, admin):
    a, b = make_user(), make_user()
    r = client.post(
        "/api/v1/prayer-teams/create",
        json={
            "member1Id": a.id,
            "member2Id": b.id,
            "weekStart": "2026-11-02T00:00:00-06:00",
            "weekEnd": "2026-11-08T23:59:59-06:00",
        },
        headers=auth(admin),
    )
    assert r.status_code == 201, r.text
    team = r.json()["team"]
    assert (team["weekStart"], team["weekEnd"]) == ("2026-11-02", "2026-11-08")


# --- moderator schedule ---

def test_schedule_generation_endpoint(client, auth, make_user, admin, frozen_today):
    make_user()
    r = client.post("/api/v1/moderator-schedule", json={"weeksToGenerate": 4}, headers=auth(admin))
    assert r.json()["count"] == 8

    again = client.post("/api/v1/moderator-schedule", json={"weeksToGenerate": 4}, headers=auth(admin))
    assert again.status_code == 200
    assert again.json()["count"] == 0

    schedules = client.get("/api/v1/moderator-schedule").json()["schedules"]
    assert [s["dayType"] for s in schedules] == ["MONDAY", "SATURDAY"] * 4
    assert schedules[0]["date"] == "2026-10-19"
    assert schedules[0]["startTime"] == "18:00"
    assert schedules[0]["isAutoGenerated"] is True


def test_schedule_generation_default_weeks(client, auth, admin, frozen_today):
    r = client.post("/api/v1/moderator-schedule", headers=auth(admin))
    assert r.json()["count"] == 8


def test_schedule_generation_validates_weeks(client, auth, admin):
    r = client.post("/api/v1/moderator-schedule", json={"weeksToGenerate": 0}, headers=auth(admin))
    assert r.status_code == 422


def test_manual_schedule_and_cleanup(client, auth, make_user, admin):
    u = make_user()
    body = {"userId": u.id, "date": "2026-10-19", "dayType": "MONDAY", "startTime": "18:00", "endTime": "19:00"}

    created = client.post("/api/v1/moderator-schedule/create", json=body, headers=auth(admin))
    assert created.status_code == 200
    sid = created.json()["schedule"]["id"]
    assert created.json()["schedule"]["isAutoGenerated"] is False

    dup = client.post("/api/v1/moderator-schedule/create", json=body, headers=auth(admin))
    assert dup.status_code == 409

    bad_time = client.post("/api/v1/moderator-schedule/create", json={**body, "startTime": "25:00"}, headers=auth(admin))
    assert bad_time.status_code == 422

    no_user = client.post("/api/v1/moderator-schedule/create", json={**body, "userId": 999}, headers=auth(admin))
    assert no_user.status_code == 404

    moved = client.put(f"/api/v1/moderator-schedule/{sid}", json={**body, "date": "2026-10-26"}, headers=auth(admin))
    assert moved.json()["schedule"]["date"] == "2026-10-26"

    cleanup = client.post("/api/v1/moderator-schedule/cleanup", headers=auth(admin))
    assert cleanup.json() == {"message": "No duplicate schedules found", "deletedCount": 0}

    assert client.delete(f"/api/v1/moderator-schedule/{sid}", headers=auth(admin)).status_code == 200
    assert client.delete(f"/api/v1/moderator-schedule/{sid}", headers=auth(admin)).status_code == 404


# --- prayer requests / news / subjects ---

def test_prayer_requests_anonymity(client, auth, make_user):
    u = make_user(full_name="Named Person")

    assert client.post("/api/v1/prayer-requests", json={"title": "A", "content": "anon"}).status_code == 201
    client.post("/api/v1/prayer-requests", json={"title": "B", "content": "x", "isAnonymous": True}, headers=auth(u))
    client.post("/api/v1/prayer-requests", json={"title": "C", "content": "y"}, headers=auth(u))

    assert client.get("/api/v1/prayer-requests").status_code == 401

    rows = {r["title"]: r for r in client.get("/api/v1/prayer-requests", headers=auth(u)).json()["requests"]}
    assert rows["A"]["user"] is None
    assert rows["B"]["user"] is None and rows["B"]["userId"] is None
    assert rows["C"]["user"] == {"fullName": "Named Person"}


def test_news_ordering_and_admin_only(client, auth, make_user, admin):
    member = make_user()
    assert client.post("/api/v1/news", json={"title": "x", "content": "y"}, headers=auth(member)).status_code == 403

    client.post("/api/v1/news", json={"title": "undated", "content": "c"}, headers=auth(admin))
    client.post("/api/v1/news", json={"title": "late", "content": "c", "eventDate": "2026-12-01", "isEvent": True}, headers=auth(admin))
    client.post("/api/v1/news", json={"title": "soon", "content": "c", "eventDate": "2026-10-20", "isEvent": True}, headers=auth(admin))

    titles = [n["title"] for n in client.get("/api/v1/news").json()["news"]]
    assert titles == ["soon", "late", "undated"]


def test_prayer_subjects_toggle(client, auth, admin):
    sid = client.post("/api/v1/prayer-subjects", json={"title": "Missions"}, headers=auth(admin)).json()["subject"]["id"]
    client.put(f"/api/v1/prayer-subjects/{sid}", json={"isActive": False}, headers=auth(admin))

    assert client.get("/api/v1/prayer-subjects", params={"active_only": True}).json()["prayerSubjects"] == []
    assert len(client.get("/api/v1/prayer-subjects").json()["prayerSubjects"]) == 1


# --- birthdays / dashboard / upload ---

def test_birthdays_listing(client, make_user):
    make_user(full_name="Zed", birthday=date(1980, 5, 1))
    make_user(full_name="Amy", birthday=date(1985, 2, 3))
    make_user(full_name="Nobody")
    users = client.get("/api/v1/birthdays").json()["users"]
    assert [u["fullName"] for u in users] == ["Amy", "Zed"]


def test_dashboard_is_department_scoped(client, auth, make_user, admin, frozen_today):
    u = make_user(full_name="Monday Mod", birthday=date(1990, 10, 20))
    body = {"userId": u.id, "date": "2026-10-19", "dayType": "MONDAY", "startTime": "18:00", "endTime": "19:00"}
    client.post("/api/v1/moderator-schedule/create", json=body, headers=auth(admin))

    data = client.get("/api/v1/dashboard", headers=auth(u)).json()
    assert data["mondayModerator"] == {"name": "Monday Mod", "date": "Oct 19, 2026", "time": "6:00 PM - 7:00 PM"}
    assert data["saturdayModerator"] is None
    assert data["upcomingBirthdays"][0] == {"name": "Monday Mod", "date": "Oct 20"}


def test_upload_stores_file_and_serves_it(client, auth, make_user):
    u = make_user()

    bad = client.post(
        "/api/v1/upload",
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=auth(u),
    )
    assert bad.status_code == 400

    ok = client.post(
        "/api/v1/upload",
        files={"image": ("my photo.png", b"\x89PNG....", "image/png")},
        headers=auth(u),
    )
    assert ok.status_code == 200
    url = ok.json()["imageUrl"]
    assert url.startswith("/uploads/") and url.endswith("_my_photo.png")
    assert (Path(settings.UPLOAD_DIR) / url.rsplit("/", 1)[1]).exists()

    served = client.get(url)
    assert served.status_code == 200
    assert served.content == b"\x89PNG...."


def test_upload_rejects_oversized_image(client, auth, make_user, monkeypatch):
    u = make_user()
    monkeypatch.setattr(settings, "UPLOAD_MAX_BYTES", 4)
    before = set(Path(settings.UPLOAD_DIR).iterdir())

    r = client.post(
        "/api/v1/upload",
        files={"image": ("big.png", b"\x89PNG" + b"0" * 64, "image/png")},
        headers=auth(u),
    )
    assert r.status_code == 400
    assert r.json()["code"] == "invalid_upload"
    assert set(Path(settings.UPLOAD_DIR).iterdir()) == before


def test_inline_upload_returns_data_url():
    stored = store_image(b"GIF89a", "x.gif", "image/gif", inline=True)
    assert stored.url == "data:image/gif;base64,R0lGODlh"
