"""Unit tests for token helpers and the calling principal."""

from datetime import timedelta
from uuid import uuid4

from app.core.principal import Principal
from app.core.security import create_access_token, decode_token, get_password_hash
from app.models.enums import Role
from app.models.user import User


def test_access_token_round_trip():
    user_id = str(uuid4())
    payload = decode_token(create_access_token({"sub": user_id}))
    assert payload["sub"] == user_id
    assert payload["type"] == "access"


def test_expired_token_is_rejected():
    token = create_access_token({"sub": str(uuid4())}, expires_delta=timedelta(minutes=-5))
    assert decode_token(token) is None


def test_garbage_token_is_rejected():
    assert decode_token("not-a-jwt") is None


def test_password_hash_is_bcrypt():
    hashed = get_password_hash("password123")
    assert hashed.startswith("$2")
    assert hashed != "password123"


def test_principal_roles():
    admin = Principal(user_id=uuid4(), role=Role.ADMIN)
    lead = Principal(user_id=uuid4(), role=Role.LEAD)
    member = Principal(user_id=uuid4(), role=Role.MEMBER)
    assert admin.can_grade and admin.is_admin
    assert lead.can_grade and not lead.is_admin
    assert not member.can_grade and member.is_member


def test_principal_from_user():
    domain_id = uuid4()
    user = User(id=uuid4(), username="ada", role=Role.MEMBER, domain_id=domain_id)
    principal = Principal.from_user(user)
    assert principal.user_id == user.id
    assert principal.domain_id == domain_id
    assert principal.username == "ada"
