"""Integration tests: leaderboard ranking and points summaries."""

import uuid
import pytest

from app.models import PointsEntry, PointsSourceType, Role
from app.services.leaderboard_service import LeaderboardService
from tests.conftest import auth_headers


@pytest.fixture
def award(session_factory):
    async def _award(user, points):
        async with session_factory() as session:
            session.add(PointsEntry(
                user_id=user.id,
                source_type=PointsSourceType.ASSIGNMENT,
                source_id=uuid.uuid4(),
                points=points,
                reason="seeded",
            ))
            await session.commit()
    return _award


@pytest.mark.asyncio
async def test_ranked_by_total_then_username(db_session, make_domain, make_user, award):
    domain = await make_domain("AIML")
    carol = await make_user(domain=domain, username="carol")
    alice = await make_user(domain=domain, username="alice")
    bob = await make_user(domain=domain, username="bob")
    await award(carol, 50)
    await award(alice, 30)
    await award(alice, 20)
    await award(bob, 10)

    board = await LeaderboardService.get_leaderboard(db_session)

    assert [(e.username, e.total_points, e.rank) for e in board] == [
        ("alice", 50, 1),
        ("carol", 50, 2),
        ("bob", 10, 3),
    ]
    assert all(e.domain_name == "AIML" for e in board)


@pytest.mark.asyncio
async def test_members_without_points_and_domain(db_session, make_domain, make_user, award):
    domain = await make_domain("Web Dev")
    scored = await make_user(domain=domain, username="scored")
    await make_user(domain=None, username="drifter")
    await award(scored, 5)

    board = await LeaderboardService.get_leaderboard(db_session)

    assert [(e.username, e.total_points, e.domain_name) for e in board] == [
        ("scored", 5, "Web Dev"),
        ("drifter", 0, "N/A"),
    ]


@pytest.mark.asyncio
async def test_leads_and_admins_excluded(db_session, make_domain, make_user, make_lead, award):
    domain = await make_domain()
    member = await make_user(domain=domain)
    lead = await make_lead(domain)
    admin = await make_user(role=Role.ADMIN)
    await award(lead, 500)
    await award(admin, 900)

    board = await LeaderboardService.get_leaderboard(db_session)

    assert [e.user_id for e in board] == [member.id]


@pytest.mark.asyncio
async def test_domain_filter(async_client, api_base, make_domain, make_user, award):
    web = await make_domain("Web Dev")
    cyber = await make_domain("Cyber Security")
    web_member = await make_user(domain=web, username="webber")
    cyber_member = await make_user(domain=cyber, username="hacker")
    await award(web_member, 10)
    await award(cyber_member, 99)

    resp = await async_client.get(
        f"{api_base}/leaderboard", headers=auth_headers(web_member), params={"domain_id": str(web.id)}
    )
    assert resp.status_code == 200
    rows = resp.json()["data"]
    assert len(rows) == 1
    assert rows[0]["username"] == "webber"
    assert rows[0]["rank"] == 1


@pytest.mark.asyncio
async def test_points_summary(async_client, api_base, make_domain, make_user, make_lead, award):
    domain = await make_domain()
    member = await make_user(domain=domain)
    lead = await make_lead(domain)
    await award(member, 15)
    await award(member, 25)

    mine = await async_client.get(f"{api_base}/points/me", headers=auth_headers(member))
    assert mine.status_code == 200
    data = mine.json()["data"]
    assert data["total_points"] == 40
    assert len(data["entries"]) == 2

    as_lead = await async_client.get(f"{api_base}/points/users/{member.id}", headers=auth_headers(lead))
    assert as_lead.status_code == 200
    assert as_lead.json()["data"]["total_points"] == 40

    denied = await async_client.get(f"{api_base}/points/users/{lead.id}", headers=auth_headers(member))
    assert denied.status_code == 403


@pytest.mark.asyncio
async def test_member_may_look_up_self(async_client, api_base, make_user, award):
    member = await make_user()
    await award(member, 7)

    resp = await async_client.get(f"{api_base}/points/users/{member.id}", headers=auth_headers(member))
    assert resp.status_code == 200
    assert resp.json()["data"]["total_points"] == 7
