from trophy_cabinet.models.award import Award
from trophy_cabinet.models.role import TenantRole
from tests.conftest import add_member, headers_for


def grant(client, club, headers, template_id: int, recipient: str, **extra):
    payload = {"trophy_template_id": template_id, "recipient_user_id": recipient}
    payload.update(extra)
    return client.post(f"/api/tenants/{club.slug}/awards", headers=headers, json=payload)


class TestTrophyTemplates:
    """Tests for /api/tenants/{slug}/trophies"""

    def test_staff_creates_template(self, client, club, staff_headers):
        response = client.post(
            f"/api/tenants/{club.slug}/trophies",
            headers=staff_headers,
            json={"name": "Golden Boot", "tier": "gold", "points": 100},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Golden Boot"
        assert data["tier"] == "gold"
        assert data["points"] == 100
        assert data["tenant_id"] == club.id

    def test_points_default_to_zero(self, client, club, staff_headers):
        response = client.post(
            f"/api/tenants/{club.slug}/trophies", headers=staff_headers, json={"name": "Fair Play"}
        )
        assert response.status_code == 201
        assert response.json()["points"] == 0
        assert response.json()["tier"] is None

    def test_negative_points_rejected(self, client, club, staff_headers):
        response = client.post(
            f"/api/tenants/{club.slug}/trophies",
            headers=staff_headers,
            json={"name": "Wooden Spoon", "points": -5},
        )
        assert response.status_code == 422

    def test_player_cannot_create_template(self, client, club, player_headers):
        response = client.post(
            f"/api/tenants/{club.slug}/trophies", headers=player_headers, json={"name": "Self Award"}
        )
        assert response.status_code == 403

    def test_player_can_browse_catalog(self, client, club, gold_trophy, player_headers):
        response = client.get(f"/api/tenants/{club.slug}/trophies", headers=player_headers)

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [gold_trophy.id]

    def test_template_invisible_to_other_club(
        self, client, db_session, club, other_club, gold_trophy
    ):
        add_member(db_session, other_club, "rival-owner", TenantRole.OWNER)

        response = client.get(
            f"/api/tenants/{other_club.slug}/trophies/{gold_trophy.id}",
            headers=headers_for("rival-owner"),
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Trophy not found"

    def test_partial_update(self, client, club, gold_trophy, staff_headers):
        response = client.patch(
            f"/api/tenants/{club.slug}/trophies/{gold_trophy.id}",
            headers=staff_headers,
            json={"points": 150},
        )

        assert response.status_code == 200
        assert response.json()["points"] == 150
        assert response.json()["name"] == "Player of the Year"
        assert response.json()["tier"] == "gold"

    def test_update_can_clear_tier(self, client, club, gold_trophy, staff_headers):
        response = client.patch(
            f"/api/tenants/{club.slug}/trophies/{gold_trophy.id}",
            headers=staff_headers,
            json={"tier": None},
        )

        assert response.status_code == 200
        assert response.json()["tier"] is None

    def test_detail_reports_award_count(
        self, client, club, gold_trophy, player_membership, staff_headers
    ):
        grant(client, club, staff_headers, gold_trophy.id, "player-user")
        grant(client, club, staff_headers, gold_trophy.id, "player-user")

        response = client.get(
            f"/api/tenants/{club.slug}/trophies/{gold_trophy.id}", headers=staff_headers
        )

        assert response.status_code == 200
        assert response.json()["award_count"] == 2

    def test_delete_template_cascades_to_awards(
        self, client, db_session, club, gold_trophy, player_membership, staff_headers
    ):
        award_id = grant(client, club, staff_headers, gold_trophy.id, "player-user").json()["id"]

        response = client.delete(
            f"/api/tenants/{club.slug}/trophies/{gold_trophy.id}", headers=staff_headers
        )

        assert response.status_code == 200
        assert response.json()["deleted_awards"] == 1
        assert db_session.query(Award).count() == 0

        response = client.get(f"/api/tenants/{club.slug}/awards/{award_id}", headers=staff_headers)
        assert response.status_code == 404


class TestAwards:
    """Tests for /api/tenants/{slug}/awards"""

    def test_grant_award(self, client, club, gold_trophy, player_membership, staff_headers):
        response = grant(
            client, club, staff_headers, gold_trophy.id, "player-user", notes="Top scorer"
        )

        assert response.status_code == 201
        data = response.json()
        assert data["recipient_user_id"] == "player-user"
        assert data["awarded_by_user_id"] == "staff-user"
        assert data["trophy_template"]["name"] == "Player of the Year"
        assert data["recipient"]["display_name"] == "Player User"
        assert data["is_public"] is True
        assert data["season"] is None

    def test_recipient_must_be_member(self, client, club, gold_trophy, staff_headers):
        response = grant(client, club, staff_headers, gold_trophy.id, "stranger")

        assert response.status_code == 404
        assert response.json()["detail"] == "Recipient is not a member of this club"

    def test_cannot_award_other_clubs_trophy(
        self, client, db_session, club, other_club, player_membership, staff_headers
    ):
        from trophy_cabinet.models.trophy_template import TrophyTemplate

        foreign = TrophyTemplate(tenant_id=other_club.id, name="Rival Cup", points=10)
        db_session.add(foreign)
        db_session.commit()

        response = grant(client, club, staff_headers, foreign.id, "player-user")
        assert response.status_code == 404

    def test_player_cannot_grant(self, client, club, gold_trophy, player_headers):
        response = grant(client, club, player_headers, gold_trophy.id, "player-user")
        assert response.status_code == 403

    def test_award_with_season_and_team(
        self, client, club, gold_trophy, player_membership, staff_headers
    ):
        season = client.post(
            f"/api/tenants/{club.slug}/seasons", headers=staff_headers, json={"name": "2026 Spring"}
        ).json()
        team = client.post(
            f"/api/tenants/{club.slug}/teams",
            headers=staff_headers,
            json={"name": "Under 12s", "season_id": season["id"]},
        ).json()

        response = grant(
            client,
            club,
            staff_headers,
            gold_trophy.id,
            "player-user",
            season_id=season["id"],
            team_id=team["id"],
        )

        assert response.status_code == 201
        assert response.json()["season"]["name"] == "2026 Spring"
        assert response.json()["team"]["name"] == "Under 12s"

    def test_cabinet_totals_points_and_stays_in_club(
        self, client, db_session, club, other_club, gold_trophy, player_membership, staff_headers
    ):
        """A gold 100-point trophy shows up in one club's cabinet only"""
        grant(client, club, staff_headers, gold_trophy.id, "player-user")
        add_member(db_session, other_club, "player-user", TenantRole.PLAYER)

        response = client.get(
            f"/api/tenants/{club.slug}/awards/mine", headers=headers_for("player-user")
        )
        assert response.status_code == 200
        assert response.json()["total"] == 1
        assert response.json()["total_points"] == 100
        assert response.json()["awards"][0]["trophy_template"]["tier"] == "gold"

        response = client.get(
            f"/api/tenants/{other_club.slug}/awards/mine", headers=headers_for("player-user")
        )
        assert response.status_code == 200
        assert response.json() == {"awards": [], "total": 0, "total_points": 0}

    def test_private_award_hidden_from_other_players(
        self, client, db_session, club, gold_trophy, player_membership, staff_headers
    ):
        award_id = grant(
            client, club, staff_headers, gold_trophy.id, "player-user", is_public=False
        ).json()["id"]
        add_member(db_session, club, "teammate", TenantRole.PLAYER)
        url = f"/api/tenants/{club.slug}/awards/{award_id}"

        assert client.get(url, headers=headers_for("teammate")).status_code == 404
        assert client.get(url, headers=headers_for("player-user")).status_code == 200
        assert client.get(url, headers=staff_headers).status_code == 200

    def test_player_cannot_open_other_cabinet(
        self, client, db_session, club, staff_membership, player_headers
    ):
        response = client.get(
            f"/api/tenants/{club.slug}/awards/recipients/staff-user", headers=player_headers
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "You can only view your own trophy cabinet"

    def test_staff_lists_all_awards_newest_first(
        self, client, club, gold_trophy, player_membership, staff_headers
    ):
        first = grant(client, club, staff_headers, gold_trophy.id, "player-user").json()
        second = grant(client, club, staff_headers, gold_trophy.id, "staff-user").json()

        response = client.get(f"/api/tenants/{club.slug}/awards", headers=staff_headers)

        assert response.status_code == 200
        assert [a["id"] for a in response.json()["awards"]] == [second["id"], first["id"]]
        assert response.json()["total_points"] == 200

    def test_player_cannot_list_all_awards(self, client, club, player_headers):
        response = client.get(f"/api/tenants/{club.slug}/awards", headers=player_headers)
        assert response.status_code == 403

    def test_delete_award(self, client, club, gold_trophy, player_membership, staff_headers):
        award_id = grant(client, club, staff_headers, gold_trophy.id, "player-user").json()["id"]

        response = client.delete(f"/api/tenants/{club.slug}/awards/{award_id}", headers=staff_headers)
        assert response.status_code == 204

        response = client.get(f"/api/tenants/{club.slug}/awards/{award_id}", headers=staff_headers)
        assert response.status_code == 404
