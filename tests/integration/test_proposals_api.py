"""
Integration tests for the team proposal API and the admin review routes.
"""

import pytest


def member(i=0, **overrides):
    data = {
        "fullName": f"Member {i}",
        "email": f"member{i}@example.com",
        "contactNumber": "0123456789",
        "foodPreference": "veg",
        "tshirtSize": "M",
    }
    data.update(overrides)
    return data


def submission(count=2, **overrides):
    data = {
        "teamName": "Byte Me",
        "members": [member(i) for i in range(count)],
        "projectFile": "https://files.example.com/p.pdf",
        "projectFileName": "p.pdf",
    }
    data.update(overrides)
    return data


@pytest.fixture
def admin(sample_user):
    return sample_user(email="admin@example.com", name="Admin", is_admin=True)


class TestTeamSubmissionEndpoints:
    """Tests for the owner side of the proposal flow."""

    def test_submit_and_read_back(self, test_client, login_as, sample_user):
        """Test submitting a team, then reading it and the registration status."""
        owner = login_as(sample_user())

        assert test_client.get("/api/registration-status").json()["data"] == {
            "isRegistered": False
        }

        created = test_client.post("/api/teams", json=submission())
        assert created.status_code == 201
        data = created.json()["data"]
        assert data["teamName"] == "Byte Me"
        assert data["approvalStatus"] == "pending"
        assert data["userId"] == owner.id
        assert [m["fullName"] for m in data["members"]] == ["Member 0", "Member 1"]

        mine = test_client.get("/api/teams/mine").json()["data"]
        assert mine["id"] == data["id"]
        assert test_client.get("/api/registration-status").json()["data"]["isRegistered"]

    def test_registration_status_anonymous(self, test_client):
        """Test anonymous callers are reported as not registered."""
        response = test_client.get("/api/registration-status")

        assert response.status_code == 200
        assert response.json()["data"]["isRegistered"] is False

    @pytest.mark.parametrize("count", [0, 6])
    def test_submit_member_bounds(self, test_client, login_as, sample_user, count):
        """Test 0 or 6 members answer 400."""
        login_as(sample_user())

        response = test_client.post("/api/teams", json=submission(count))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_submit_invalid_contact_number(self, test_client, login_as, sample_user):
        """Test a non-numeric contact number answers 400."""
        login_as(sample_user())
        body = submission(1)
        body["members"][0]["contactNumber"] = "call me"

        response = test_client.post("/api/teams", json=body)

        assert response.status_code == 400

    def test_other_user_cannot_update_file(self, test_client, login_as, sample_user,
                                           sample_proposal):
        """Test a non-owner gets 403 on the proposal file."""
        team = sample_proposal(sample_user())
        login_as(sample_user())

        response = test_client.put(
            f"/api/teams/{team.id}/proposal",
            json={"projectFile": "https://x/y.pdf", "projectFileName": "y.pdf"},
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "FORBIDDEN"

    def test_member_crud(self, test_client, login_as, sample_user, sample_proposal):
        """Test the owner adds, edits and removes a member."""
        owner = login_as(sample_user())
        team = sample_proposal(owner, members=1)

        added = test_client.post("/api/team-members", json={**member(9), "teamId": team.id})
        assert added.status_code == 201
        member_id = added.json()["data"]["id"]

        updated = test_client.put(f"/api/team-members/{member_id}", json={"tshirtSize": "XL"})
        assert updated.status_code == 200
        assert updated.json()["data"]["tshirtSize"] == "XL"

        removed = test_client.delete(f"/api/team-members/{member_id}")
        assert removed.status_code == 200


class TestProposalReviewEndpoints:
    """Tests for judge and admin review."""

    def test_list_requires_judge_or_admin(self, test_client, login_as, sample_user):
        """Test regular users get 403 on the proposal list."""
        login_as(sample_user())

        assert test_client.get("/api/proposal").status_code == 403

    def test_judge_reviews_proposal(self, test_client, login_as, sample_user,
                                    sample_proposal):
        """Test a judge lists, approves and reads the stats."""
        team = sample_proposal(sample_user())
        login_as(sample_user(is_judge=True))

        listed = test_client.get("/api/proposal", params={"status": "pending"})
        assert [t["id"] for t in listed.json()["data"]] == [team.id]

        approved = test_client.post(
            "/api/proposal", json={"teamId": team.id, "status": "approved"}
        )
        assert approved.status_code == 200
        assert approved.json()["data"]["approvalStatus"] == "approved"

        stats = test_client.get("/api/proposal/stats").json()["data"]
        assert stats == {"total": 1, "pending": 0, "approved": 1, "rejected": 0}

        file_ref = test_client.get(f"/api/proposal/{team.id}").json()["data"]
        assert file_ref["projectFile"] == "https://files.example.com/p.pdf"

    def test_invalid_status(self, test_client, login_as, sample_user, sample_proposal):
        """Test an unknown status answers 400."""
        team = sample_proposal(sample_user())
        login_as(sample_user(is_judge=True))

        response = test_client.post("/api/proposal", json={"teamId": team.id, "status": "meh"})

        assert response.status_code == 400

    def test_admin_team_routes(self, test_client, login_as, admin, sample_user,
                               sample_proposal):
        """Test admin list, detail and status change of teams."""
        team = sample_proposal(sample_user(name="Owner"))
        login_as(admin)

        listed = test_client.get("/api/admin/teams").json()["data"]
        assert [t["id"] for t in listed] == [team.id]

        detail = test_client.get(f"/api/admin/teams/{team.id}").json()["data"]
        assert detail["owner"]["name"] == "Owner"

        rejected = test_client.patch(
            f"/api/admin/teams/{team.id}/status", json={"status": "rejected"}
        )
        assert rejected.json()["data"]["approvalStatus"] == "rejected"

    def test_admin_team_not_found(self, test_client, login_as, admin):
        """Test an unknown team answers 404."""
        login_as(admin)

        assert test_client.get("/api/admin/teams/missing").status_code == 404
