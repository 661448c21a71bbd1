from trophy_cabinet.models.role import TenantRole
from trophy_cabinet.models.season import Season
from tests.conftest import add_member, headers_for


def test_staff_creates_season(client, club, staff_headers):
    response = client.post(
        f"/api/tenants/{club.slug}/seasons",
        headers=staff_headers,
        json={"name": "2026 Autumn", "start_date": "2026-09-01", "end_date": "2026-12-15"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "2026 Autumn"
    assert data["start_date"] == "2026-09-01"
    assert data["is_active"] is False


def test_season_end_before_start_rejected(client, club, staff_headers):
    response = client.post(
        f"/api/tenants/{club.slug}/seasons",
        headers=staff_headers,
        json={"name": "Backwards", "start_date": "2026-09-01", "end_date": "2026-08-01"},
    )
    assert response.status_code == 422


def test_player_cannot_create_season(client, club, player_headers):
    response = client.post(
        f"/api/tenants/{club.slug}/seasons", headers=player_headers, json={"name": "2027"}
    )
    assert response.status_code == 403


def test_seasons_latest_first(client, club, staff_headers, player_headers):
    for name, start in (("2025", "2025-01-01"), ("2026", "2026-01-01")):
        client.post(
            f"/api/tenants/{club.slug}/seasons",
            headers=staff_headers,
            json={"name": name, "start_date": start},
        )

    response = client.get(f"/api/tenants/{club.slug}/seasons", headers=player_headers)

    assert response.status_code == 200
    assert [s["name"] for s in response.json()] == ["2026", "2025"]


def test_teams_sorted_by_name(client, club, staff_headers):
    for name in ("Seniors", "Juniors"):
        client.post(f"/api/tenants/{club.slug}/teams", headers=staff_headers, json={"name": name})

    response = client.get(f"/api/tenants/{club.slug}/teams", headers=staff_headers)

    assert response.status_code == 200
    assert [t["name"] for t in response.json()] == ["Juniors", "Seniors"]


def test_team_season_must_belong_to_club(client, db_session, club, other_club, staff_headers):
    foreign_season = Season(tenant_id=other_club.id, name="Rival Season")
    db_session.add(foreign_season)
    db_session.commit()

    response = client.post(
        f"/api/tenants/{club.slug}/teams",
        headers=staff_headers,
        json={"name": "Borrowed", "season_id": foreign_season.id},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Season not found"


def test_seasons_isolated_between_clubs(client, db_session, club, other_club, staff_headers):
    client.post(f"/api/tenants/{club.slug}/seasons", headers=staff_headers, json={"name": "Ours"})
    add_member(db_session, other_club, "rival-owner", TenantRole.OWNER)

    response = client.get(
        f"/api/tenants/{other_club.slug}/seasons", headers=headers_for("rival-owner")
    )

    assert response.status_code == 200
    assert response.json() == []
