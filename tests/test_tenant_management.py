from trophy_cabinet.models.membership import Membership
from trophy_cabinet.models.tenant import Tenant
from trophy_cabinet.models.role import TenantRole, MembershipStatus
from tests.conftest import create_test_token, add_member


class TestCreateTenant:
    """Tests for POST /api/tenants"""

    def test_create_tenant_makes_caller_owner(self, client, db_session):
        """Creator gets an ACTIVE OWNER membership in the new club"""
        headers = {"Authorization": f"Bearer {create_test_token(user_id='founder')}"}

        response = client.post(
            "/api/tenants",
            headers=headers,
            json={"name": "Lakeside Lions", "slug": "lakeside-lions"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["slug"] == "lakeside-lions"
        assert data["name"] == "Lakeside Lions"
        assert data["logo_url"] is None

        memberships = db_session.query(Membership).filter(Membership.tenant_id == data["id"]).all()
        assert len(memberships) == 1
        assert memberships[0].user_id == "founder"
        assert memberships[0].role == TenantRole.OWNER
        assert memberships[0].status == MembershipStatus.ACTIVE
        assert memberships[0].joined_at is not None

    def test_create_tenant_duplicate_slug_conflict(self, client, club):
        """Slugs are unique across all clubs"""
        headers = {"Authorization": f"Bearer {create_test_token(user_id='founder')}"}

        response = client.post(
            "/api/tenants",
            headers=headers,
            json={"name": "Another Rovers", "slug": club.slug},
        )

        assert response.status_code == 409
        assert response.json()["detail"] == f"A club with slug '{club.slug}' already exists"

    def test_create_tenant_rejects_invalid_slug(self, client):
        headers = {"Authorization": f"Bearer {create_test_token(user_id='founder')}"}

        response = client.post(
            "/api/tenants",
            headers=headers,
            json={"name": "Bad Slug FC", "slug": "Bad Slug!"},
        )

        assert response.status_code == 422

    def test_create_tenant_requires_auth(self, client):
        response = client.post("/api/tenants", json={"name": "Nobody FC", "slug": "nobody-fc"})
        assert response.status_code == 401


class TestListUserTenants:
    """Tests for GET /api/tenants (list all user's tenants)"""

    def test_list_user_tenants_single_tenant(self, client, club, owner_headers):
        """User can list all tenants they belong to (single tenant case)"""
        response = client.get("/api/tenants", headers=owner_headers)

        assert response.status_code == 200
        tenants = response.json()
        assert len(tenants) == 1
        assert tenants[0]["id"] == club.id
        assert tenants[0]["slug"] == "riverside-rovers"
        assert tenants[0]["role"] == TenantRole.OWNER
        assert "membership_id" in tenants[0]

    def test_list_user_tenants_multiple_roles(self, client, db_session, club, other_club):
        """User sees every club with the role held in each"""
        add_member(db_session, club, "busy-user", TenantRole.STAFF)
        add_member(db_session, other_club, "busy-user", TenantRole.PLAYER)

        headers = {"Authorization": f"Bearer {create_test_token(user_id='busy-user')}"}
        response = client.get("/api/tenants", headers=headers)

        assert response.status_code == 200
        tenant_map = {t["slug"]: t for t in response.json()}
        assert tenant_map["riverside-rovers"]["role"] == TenantRole.STAFF
        assert tenant_map["hilltop-united"]["role"] == TenantRole.PLAYER

    def test_list_user_tenants_skips_inactive_memberships(self, client, db_session, club):
        """Suspended and pending memberships are not listed"""
        add_member(db_session, club, "benched-user", TenantRole.PLAYER, MembershipStatus.SUSPENDED)

        headers = {"Authorization": f"Bearer {create_test_token(user_id='benched-user')}"}
        response = client.get("/api/tenants", headers=headers)

        assert response.status_code == 200
        assert response.json() == []


class TestGetTenant:
    """Tests for GET /api/tenants/{slug}"""

    def test_any_active_member_can_view(self, client, club, player_headers):
        response = client.get(f"/api/tenants/{club.slug}", headers=player_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == club.id
        assert data["name"] == "Riverside Rovers"
        assert "created_at" in data
        assert "updated_at" in data

    def test_suspended_member_cannot_view(self, client, db_session, club):
        add_member(db_session, club, "benched-user", TenantRole.ADMIN, MembershipStatus.SUSPENDED)
        headers = {"Authorization": f"Bearer {create_test_token(user_id='benched-user')}"}

        response = client.get(f"/api/tenants/{club.slug}", headers=headers)
        assert response.status_code == 403

    def test_member_of_other_club_cannot_view(self, client, db_session, club, other_club):
        add_member(db_session, other_club, "rival-user", TenantRole.OWNER)
        headers = {"Authorization": f"Bearer {create_test_token(user_id='rival-user')}"}

        response = client.get(f"/api/tenants/{club.slug}", headers=headers)
        assert response.status_code == 403


class TestUpdateTenant:
    """Tests for PATCH /api/tenants/{slug}"""

    def test_update_tenant_name_as_owner(self, client, club, owner_headers):
        """Owner can update tenant name"""
        response = client.patch(
            f"/api/tenants/{club.slug}",
            headers=owner_headers,
            json={"name": "Riverside Rovers FC"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Riverside Rovers FC"
        assert data["slug"] == club.slug

    def test_update_tenant_logo_as_owner(self, client, club, owner_headers):
        response = client.patch(
            f"/api/tenants/{club.slug}",
            headers=owner_headers,
            json={"logo_url": "https://cdn.example.com/rovers.png"},
        )

        assert response.status_code == 200
        assert response.json()["logo_url"] == "https://cdn.example.com/rovers.png"
        assert response.json()["name"] == "Riverside Rovers"

    def test_admin_cannot_update_tenant(self, client, club, admin_headers):
        """Only the owner edits club details"""
        response = client.patch(
            f"/api/tenants/{club.slug}",
            headers=admin_headers,
            json={"name": "Admin Takeover"},
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Only the owner can update club details"


class TestSingleOwner:
    """A club keeps exactly one owner through creation and member management"""

    def owners(self, db_session, tenant_id: int) -> list[Membership]:
        return (
            db_session.query(Membership)
            .filter(Membership.tenant_id == tenant_id, Membership.role == TenantRole.OWNER)
            .all()
        )

    def test_owner_survives_management_attempts(self, client, db_session):
        founder = {"Authorization": f"Bearer {create_test_token(user_id='founder')}"}
        tenant = client.post(
            "/api/tenants", headers=founder, json={"name": "Lakeside Lions", "slug": "lakeside-lions"}
        ).json()
        base = f"/api/tenants/{tenant['slug']}/members"

        club = db_session.get(Tenant, tenant["id"])
        add_member(db_session, club, "lions-admin", TenantRole.ADMIN)
        player = add_member(db_session, club, "lions-player", TenantRole.PLAYER)
        owner_id = self.owners(db_session, club.id)[0].id
        admin_headers = {"Authorization": f"Bearer {create_test_token(user_id='lions-admin')}"}

        attempts = [
            client.patch(f"{base}/{player.id}/role", headers=founder, json={"role": "owner"}),
            client.patch(f"{base}/{owner_id}/role", headers=admin_headers, json={"role": "admin"}),
            client.patch(
                f"{base}/{owner_id}/status", headers=admin_headers, json={"status": "inactive"}
            ),
            client.delete(f"{base}/{owner_id}", headers=admin_headers),
            client.patch(f"{base}/{owner_id}/role", headers=founder, json={"role": "admin"}),
        ]

        assert [r.status_code for r in attempts] == [403] * 5
        owners = self.owners(db_session, club.id)
        assert [m.user_id for m in owners] == ["founder"]
        assert owners[0].status == MembershipStatus.ACTIVE
