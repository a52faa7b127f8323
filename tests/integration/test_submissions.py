"""Integration tests: submission intake, visibility and score preview."""

import pytest
from unittest.mock import AsyncMock, patch
from sqlalchemy import select, func

from app.models import Role, Submission
from tests.conftest import auth_headers


@pytest.mark.asyncio
async def test_member_submits_assignment(async_client, api_base, make_domain, make_user, make_assignment):
    domain = await make_domain()
    member = await make_user(domain=domain)
    assignment = await make_assignment(domain)

    resp = await async_client.post(
        f"{api_base}/submissions",
        headers=auth_headers(member),
        json={"assignment_id": str(assignment.id), "answer_text": "https://example.com/site", "files": ["site.zip"]},
    )
    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert data["status"] == "SUBMITTED"
    assert data["grade_points"] == 0
    assert data["user_id"] == str(member.id)
    assert data["files"] == ["site.zip"]


@pytest.mark.asyncio
async def test_duplicate_submission_conflicts(
    async_client, api_base, session_factory, make_domain, make_user, make_assignment
):
    domain = await make_domain()
    member = await make_user(domain=domain)
    assignment = await make_assignment(domain)
    body = {"assignment_id": str(assignment.id), "answer_text": "first"}

    first = await async_client.post(f"{api_base}/submissions", headers=auth_headers(member), json=body)
    assert first.status_code == 201

    second = await async_client.post(f"{api_base}/submissions", headers=auth_headers(member), json=body)
    assert second.status_code == 409
    error = second.json()["error"]
    assert error["code"] == "CONFLICT"
    assert error["message"] == "You have already submitted this."

    async with session_factory() as session:
        count = await session.scalar(
            select(func.count()).select_from(Submission).where(Submission.assignment_id == assignment.id)
        )
    assert count == 1


@pytest.mark.asyncio
async def test_quiz_and_assignment_are_independent_targets(
    async_client, api_base, make_domain, make_user, make_assignment, make_quiz
):
    domain = await make_domain()
    member = await make_user(domain=domain)
    assignment = await make_assignment(domain)
    quiz = await make_quiz(domain)
    headers = auth_headers(member)

    resp = await async_client.post(
        f"{api_base}/submissions", headers=headers, json={"assignment_id": str(assignment.id), "answer_text": "a"}
    )
    assert resp.status_code == 201
    resp = await async_client.post(
        f"{api_base}/submissions", headers=headers, json={"quiz_id": str(quiz.id), "answers": {}}
    )
    assert resp.status_code == 201


@pytest.mark.asyncio
async def test_submission_requires_exactly_one_target(
    async_client, api_base, make_domain, make_user, make_assignment, make_quiz
):
    domain = await make_domain()
    member = await make_user(domain=domain)
    assignment = await make_assignment(domain)
    quiz = await make_quiz(domain)
    headers = auth_headers(member)

    neither = await async_client.post(f"{api_base}/submissions", headers=headers, json={"answer_text": "x"})
    assert neither.status_code == 400
    assert neither.json()["error"]["code"] == "VALIDATION_ERROR"

    both = await async_client.post(
        f"{api_base}/submissions",
        headers=headers,
        json={"assignment_id": str(assignment.id), "quiz_id": str(quiz.id)},
    )
    assert both.status_code == 400


@pytest.mark.asyncio
async def test_quiz_submission_rejects_free_text(async_client, api_base, make_domain, make_user, make_quiz):
    domain = await make_domain()
    member = await make_user(domain=domain)
    quiz = await make_quiz(domain)

    resp = await async_client.post(
        f"{api_base}/submissions",
        headers=auth_headers(member),
        json={"quiz_id": str(quiz.id), "answer_text": "not allowed"},
    )
    assert resp.status_code == 400
    assert "answer_text" in resp.json()["error"]["fields"]


@pytest.mark.asyncio
async def test_unknown_target_not_found(async_client, api_base, make_domain, make_user):
    member = await make_user(domain=await make_domain())
    resp = await async_client.post(
        f"{api_base}/submissions",
        headers=auth_headers(member),
        json={"assignment_id": "00000000-0000-0000-0000-000000000001"},
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_member_sees_only_own_submissions(
    async_client, api_base, make_domain, make_user, make_assignment, make_submission
):
    domain = await make_domain()
    alice = await make_user(domain=domain, username="alice")
    bob = await make_user(domain=domain, username="bob")
    assignment = await make_assignment(domain)
    await make_submission(alice, assignment=assignment)
    bobs = await make_submission(bob, assignment=assignment)

    resp = await async_client.get(
        f"{api_base}/submissions", headers=auth_headers(alice), params={"user_id": str(bob.id)}
    )
    assert resp.status_code == 200
    rows = resp.json()["data"]
    assert len(rows) == 1
    assert rows[0]["user"]["username"] == "alice"
    assert rows[0]["target_title"] == assignment.title

    resp = await async_client.get(f"{api_base}/submissions/{bobs.id}", headers=auth_headers(alice))
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_lead_lists_only_led_domains(
    async_client, api_base, make_domain, make_user, make_lead, make_assignment, make_submission
):
    web = await make_domain("Web Dev")
    cyber = await make_domain("Cyber Security")
    lead = await make_lead(web)
    member_web = await make_user(domain=web)
    member_cyber = await make_user(domain=cyber)
    await make_submission(member_web, assignment=await make_assignment(web))
    other = await make_submission(member_cyber, assignment=await make_assignment(cyber))

    resp = await async_client.get(f"{api_base}/submissions", headers=auth_headers(lead))
    assert resp.status_code == 200
    rows = resp.json()["data"]
    assert [r["user_id"] for r in rows] == [str(member_web.id)]

    resp = await async_client.get(f"{api_base}/submissions/{other.id}", headers=auth_headers(lead))
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_score_preview_for_quiz(
    async_client, api_base, make_domain, make_user, make_lead, make_quiz, make_submission
):
    domain = await make_domain()
    lead = await make_lead(domain)
    member = await make_user(domain=domain)
    quiz = await make_quiz(domain)
    mcq, essay = quiz.questions
    submission = await make_submission(
        member, quiz=quiz, answers={str(mcq.id): "1", str(essay.id): "translation of addresses"}
    )

    resp = await async_client.get(
        f"{api_base}/submissions/{submission.id}/score-preview", headers=auth_headers(lead)
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["total"] == 10
    assert data["max_total"] == 15

    denied = await async_client.get(
        f"{api_base}/submissions/{submission.id}/score-preview", headers=auth_headers(member)
    )
    assert denied.status_code == 403


@pytest.mark.asyncio
async def test_quiz_answers_accept_numeric_option_index(
    async_client, api_base, make_domain, make_user, make_lead, make_quiz
):
    domain = await make_domain()
    lead = await make_lead(domain)
    member = await make_user(domain=domain)
    quiz = await make_quiz(domain)
    mcq = quiz.questions[0]

    resp = await async_client.post(
        f"{api_base}/submissions",
        headers=auth_headers(member),
        json={"quiz_id": str(quiz.id), "answers": {str(mcq.id): 1}},
    )
    assert resp.status_code == 201, resp.text
    assert resp.json()["data"]["answers"] == {str(mcq.id): "1"}

    preview = await async_client.get(
        f"{api_base}/submissions/{resp.json()['data']['id']}/score-preview", headers=auth_headers(lead)
    )
    assert preview.status_code == 200
    assert preview.json()["data"]["total"] == 10


@pytest.mark.asyncio
async def test_duplicate_caught_by_unique_index(
    async_client, api_base, session_factory, make_domain, make_user, make_assignment
):
    """Two requests that both pass the existence check still leave one row."""
    domain = await make_domain()
    member = await make_user(domain=domain)
    assignment = await make_assignment(domain)
    body = {"assignment_id": str(assignment.id), "answer_text": "first"}

    first = await async_client.post(f"{api_base}/submissions", headers=auth_headers(member), json=body)
    assert first.status_code == 201

    with patch(
        "app.services.submission_service.SubmissionService._find_existing",
        new_callable=AsyncMock,
        return_value=None,
    ):
        second = await async_client.post(f"{api_base}/submissions", headers=auth_headers(member), json=body)
    assert second.status_code == 409
    assert second.json()["error"]["message"] == "You have already submitted this."

    async with session_factory() as session:
        count = await session.scalar(
            select(func.count()).select_from(Submission).where(Submission.assignment_id == assignment.id)
        )
    assert count == 1
