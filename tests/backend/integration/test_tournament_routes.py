import uuid

import pytest

from riyadah.models import ActivityLog, Tournament, TournamentParticipant


pytestmark = pytest.mark.asyncio

NEW_TOURNAMENT = {
    "title": "Spring Cup",
    "game_name": "Valorant",
    "description": "5v5 bracket",
    "start_date": "2030-03-01T18:00:00",
    "end_date": "2030-03-03T22:00:00",
    "prize_pool": 5000,
}


@pytest.mark.parametrize("role", ["admin", "moderator"])
async def test_staff_can_create_tournament(client, create_staff, auth_header_factory, role):
    staff, password = await create_staff(role)
    headers = await auth_header_factory(staff.email, password, role)

    resp = await client.post("/api/v1/tournaments", headers=headers, json=NEW_TOURNAMENT)
    assert resp.status_code == 201
    body = resp.json()
    assert body["title"] == "Spring Cup"
    assert body["status"] == "upcoming"
    assert body["max_participants"] == 100
    assert body["prize_pool"] == "5000"
    assert body["created_by"] == str(staff.id)


async def test_create_tournament_requires_fields(client, create_staff, auth_header_factory):
    admin, password = await create_staff("admin")
    headers = await auth_header_factory(admin.email, password, "admin")

    resp = await client.post("/api/v1/tournaments", headers=headers, json={"title": "No dates", "game_name": "G"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields"}


async def test_host_cannot_create_tournament(client, create_staff, auth_header_factory):
    host, password = await create_staff("host")
    headers = await auth_header_factory(host.email, password, "host")

    resp = await client.post("/api/v1/tournaments", headers=headers, json=NEW_TOURNAMENT)
    assert resp.status_code == 403


async def test_list_and_detail(client, registered_user, create_tournament):
    headers, _ = await registered_user()
    later = await create_tournament(days_ahead=30, title="Later")
    sooner = await create_tournament(days_ahead=1, title="Sooner")

    resp = await client.get("/api/v1/tournaments", headers=headers)
    assert resp.status_code == 200
    assert [t["title"] for t in resp.json()] == ["Sooner", "Later"]

    await client.post(f"/api/v1/tournaments/{sooner.id}/join", headers=headers)
    detail = await client.get(f"/api/v1/tournaments/{sooner.id}", headers=headers)
    assert detail.status_code == 200
    assert detail.json()["id"] == str(sooner.id)
    assert len(detail.json()["participants"]) == 1

    assert (await client.get(f"/api/v1/tournaments/{later.id}", headers=headers)).json()["participants"] == []


async def test_unknown_tournament_is_not_found(client, registered_user):
    headers, _ = await registered_user()
    resp = await client.get(f"/api/v1/tournaments/{uuid.uuid4()}", headers=headers)
    assert resp.status_code == 404
    assert resp.json() == {"error": "Tournament not found"}

    join = await client.post(f"/api/v1/tournaments/{uuid.uuid4()}/join", headers=headers)
    assert join.status_code == 404


async def test_join_twice_is_already_registered(client, registered_user, create_tournament):
    headers, user = await registered_user()
    t = await create_tournament()

    first = await client.post(f"/api/v1/tournaments/{t.id}/join", headers=headers)
    assert first.status_code == 201
    assert first.json()["tournament_id"] == str(t.id)
    assert await ActivityLog.filter(user_id=user["id"], activity_type="tournament_join").count() == 1

    second = await client.post(f"/api/v1/tournaments/{t.id}/join", headers=headers)
    assert second.status_code == 400
    assert second.json() == {"error": "Already registered for this tournament"}
    assert await TournamentParticipant.filter(tournament_id=t.id).count() == 1


@pytest.mark.parametrize("status", ["ongoing", "completed", "cancelled"])
async def test_join_closed_tournament(client, registered_user, create_tournament, status):
    headers, _ = await registered_user()
    t = await create_tournament(status=status)

    resp = await client.post(f"/api/v1/tournaments/{t.id}/join", headers=headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Tournament registration is closed"}


async def test_leave_is_idempotent(client, registered_user, create_tournament):
    headers, _ = await registered_user()
    t = await create_tournament()
    await client.post(f"/api/v1/tournaments/{t.id}/join", headers=headers)

    for _ in range(2):
        resp = await client.delete(f"/api/v1/tournaments/{t.id}/leave", headers=headers)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Successfully left tournament"}
    assert await TournamentParticipant.filter(tournament_id=t.id).count() == 0

    # Rejoining after leaving is allowed
    again = await client.post(f"/api/v1/tournaments/{t.id}/join", headers=headers)
    assert again.status_code == 201


async def test_user_tournaments_lists_own_participations(client, registered_user, create_tournament):
    headers, _ = await registered_user()
    other_headers, _ = await registered_user()
    mine = await create_tournament(title="Mine")
    theirs = await create_tournament(title="Theirs")
    await client.post(f"/api/v1/tournaments/{mine.id}/join", headers=headers)
    await client.post(f"/api/v1/tournaments/{theirs.id}/join", headers=other_headers)

    resp = await client.get("/api/v1/tournaments/user", headers=headers)
    assert resp.status_code == 200
    assert [p["tournament"]["title"] for p in resp.json()] == ["Mine"]


async def test_invalid_tournament_id_is_a_bad_request(client, registered_user):
    headers, _ = await registered_user()
    resp = await client.get("/api/v1/tournaments/not-a-uuid", headers=headers)
    assert resp.status_code == 400
    assert "error" in resp.json()
    assert await Tournament.all().count() == 0
