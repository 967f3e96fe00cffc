from datetime import timedelta
from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select

from household_access.domain.entities import AuditEvent, Invitation, InvitationStatus, Membership
from tests.integration.api_helpers import auth_headers, invite_and_accept


@pytest.mark.asyncio
async def test_invitation_round_trip(client: AsyncClient, db_session, household):
    """Create, review and accept an invitation; a second accept is rejected"""
    household_id = household["id"]

    invite_response = await client.post(
        f"/households/{household_id}/invitations",
        json={"email": "guest@example.com", "role": "admin", "message": "Welcome!"},
        headers=auth_headers("owner"),
    )
    assert invite_response.status_code == 201
    invitation = invite_response.json()
    assert invitation["status"] == "pending"
    assert invitation["role"] == "admin"
    token = invitation["invite_token"]

    # Public lookup by token
    lookup_response = await client.get(f"/invitations/{token}")
    assert lookup_response.status_code == 200
    assert lookup_response.json()["household_name"] == "Home"
    assert "invite_token" not in lookup_response.json()

    accept_response = await client.post(
        f"/invitations/{token}/accept",
        headers=auth_headers("guest", "guest@example.com"),
    )
    assert accept_response.status_code == 200
    data = accept_response.json()
    assert data["status"] == "accepted"
    assert data["household"] == {"id": household_id, "name": "Home", "role": "admin"}
    assert data["membership"]["permissions"]["can_invite_members"] is True

    second_response = await client.post(
        f"/invitations/{token}/accept",
        headers=auth_headers("guest", "guest@example.com"),
    )
    assert second_response.status_code == 409
    assert second_response.json()["error"]["code"] == "INVITATION_NOT_PENDING"

    household_response = await client.get(
        f"/households/{household_id}", headers=auth_headers("guest")
    )
    assert household_response.status_code == 200
    assert household_response.json()["member_count"] == 2
    assert household_response.json()["role"] == "admin"

    result = await db_session.exec(
        select(AuditEvent).where(AuditEvent.action == "invite_accepted")
    )
    assert len(result.all()) == 1


@pytest.mark.asyncio
async def test_accept_with_different_email(client: AsyncClient, household):
    invite_response = await client.post(
        f"/households/{household['id']}/invitations",
        json={"email": "guest@example.com"},
        headers=auth_headers("owner"),
    )
    token = invite_response.json()["invite_token"]

    response = await client.post(
        f"/invitations/{token}/accept",
        headers=auth_headers("intruder", "intruder@example.com"),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "EMAIL_MISMATCH"


@pytest.mark.asyncio
async def test_mixed_case_email_is_stored_as_sent(client: AsyncClient, db_session, household):
    """The invited address is kept verbatim so the invitee's own email matches"""
    email = "Guest@Example.COM"
    invite_response = await client.post(
        f"/households/{household['id']}/invitations",
        json={"email": email},
        headers=auth_headers("owner"),
    )
    assert invite_response.status_code == 201
    assert invite_response.json()["email"] == email
    token = invite_response.json()["invite_token"]

    stored = (await db_session.exec(select(Invitation))).one()
    assert stored.email == email

    mine_response = await client.get(
        "/invitations/mine", headers=auth_headers("guest", email)
    )
    assert mine_response.status_code == 200
    assert len(mine_response.json()["invitations"]) == 1

    accept_response = await client.post(
        f"/invitations/{token}/accept", headers=auth_headers("guest", email)
    )
    assert accept_response.status_code == 200
    assert accept_response.json()["membership"]["email"] == email


@pytest.mark.asyncio
async def test_malformed_email_is_rejected(client: AsyncClient, household):
    response = await client.post(
        f"/households/{household['id']}/invitations",
        json={"email": "not-an-address"},
        headers=auth_headers("owner"),
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_expired_invitation_cannot_be_accepted(client: AsyncClient, db_session, household):
    invite_response = await client.post(
        f"/households/{household['id']}/invitations",
        json={"email": "late@example.com"},
        headers=auth_headers("owner"),
    )
    invitation_id = UUID(invite_response.json()["id"])
    token = invite_response.json()["invite_token"]

    result = await db_session.exec(select(Invitation).where(Invitation.id == invitation_id))
    invitation = result.one()
    invitation.expires_at = invitation.expires_at - timedelta(hours=100)
    db_session.add(invitation)
    await db_session.commit()

    lookup_response = await client.get(f"/invitations/{token}")
    assert lookup_response.json()["status"] == "expired"

    response = await client.post(
        f"/invitations/{token}/accept",
        headers=auth_headers("late", "late@example.com"),
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INVITATION_NOT_PENDING"

    await db_session.refresh(invitation)
    assert invitation.status == InvitationStatus.expired


@pytest.mark.asyncio
async def test_duplicate_pending_invitation(client: AsyncClient, household):
    payload = {"email": "twice@example.com"}
    first = await client.post(
        f"/households/{household['id']}/invitations", json=payload, headers=auth_headers("owner")
    )
    assert first.status_code == 201

    second = await client.post(
        f"/households/{household['id']}/invitations", json=payload, headers=auth_headers("owner")
    )
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "INVITE_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_decline_then_accept(client: AsyncClient, household):
    invite_response = await client.post(
        f"/households/{household['id']}/invitations",
        json={"email": "maybe@example.com"},
        headers=auth_headers("owner"),
    )
    token = invite_response.json()["invite_token"]

    decline_response = await client.post(f"/invitations/{token}/decline")
    assert decline_response.status_code == 200
    assert decline_response.json()["status"] == "declined"

    accept_response = await client.post(
        f"/invitations/{token}/accept", headers=auth_headers("maybe")
    )
    assert accept_response.status_code == 409


@pytest.mark.asyncio
async def test_revoke_and_resend(client: AsyncClient, household):
    household_id = household["id"]
    invite_response = await client.post(
        f"/households/{household_id}/invitations",
        json={"email": "resend@example.com"},
        headers=auth_headers("owner"),
    )
    invitation_id = invite_response.json()["id"]
    old_token = invite_response.json()["invite_token"]

    resend_response = await client.post(
        f"/households/{household_id}/invitations/{invitation_id}/resend",
        headers=auth_headers("owner"),
    )
    assert resend_response.status_code == 200
    new_token = resend_response.json()["invite_token"]
    assert new_token != old_token

    old_lookup = await client.get(f"/invitations/{old_token}")
    assert old_lookup.status_code == 404

    revoke_response = await client.delete(
        f"/households/{household_id}/invitations/{invitation_id}",
        headers=auth_headers("owner"),
    )
    assert revoke_response.status_code == 200
    assert revoke_response.json()["status"] == "expired"

    list_response = await client.get(
        f"/households/{household_id}/invitations",
        params={"status": "pending"},
        headers=auth_headers("owner"),
    )
    assert list_response.json()["invitations"] == []


@pytest.mark.asyncio
async def test_list_my_invitations(client: AsyncClient, household):
    await client.post(
        f"/households/{household['id']}/invitations",
        json={"email": "me@example.com"},
        headers=auth_headers("owner"),
    )

    response = await client.get(
        "/invitations/mine",
        params={"status": "pending"},
        headers=auth_headers("me", "me@example.com"),
    )

    assert response.status_code == 200
    invitations = response.json()["invitations"]
    assert len(invitations) == 1
    assert invitations[0]["household_name"] == "Home"


@pytest.mark.asyncio
async def test_invalid_status_filter(client: AsyncClient, household):
    response = await client.get(
        f"/households/{household['id']}/invitations",
        params={"status": "bogus"},
        headers=auth_headers("owner"),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_STATUS"


@pytest.mark.asyncio
async def test_reinvited_former_member_is_reactivated(client: AsyncClient, db_session, household):
    household_id = household["id"]
    await invite_and_accept(client, household_id, "returning")

    leave_response = await client.post(
        f"/households/{household_id}/leave", headers=auth_headers("returning")
    )
    assert leave_response.status_code == 200

    await invite_and_accept(client, household_id, "returning", role="admin")

    result = await db_session.exec(
        select(Membership).where(
            Membership.household_id == UUID(household_id),
            Membership.user_id == "returning",
        )
    )
    memberships = result.all()
    assert len(memberships) == 1
    assert memberships[0].is_active is True
