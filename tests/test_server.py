import string

import pytest

from chaumpedersen.server import (
    AuthError,
    AuthService,
    NotFoundError,
    PermissionDeniedError,
    UserInfo,
)
from chaumpedersen.zkp import ZKP, random_below

ALNUM = set(string.ascii_letters + string.digits)


@pytest.fixture
def service():
    return AuthService(ZKP(p=23, q=11, alpha=4, beta=9))


def _register(service, user, x):
    y1, y2 = service.zkp.compute_pair(x)
    service.register(user, y1, y2)


def test_register_stores_user(service):
    _register(service, "alice", 6)
    info = service.user_info["alice"]
    assert isinstance(info, UserInfo)
    assert (info.y1, info.y2) == service.zkp.compute_pair(6)
    assert (info.r1, info.r2, info.c, info.s, info.session_id) == (0, 0, 0, 0, "")


def test_challenge_records_commitments(service):
    _register(service, "alice", 6)
    k = 3
    r1, r2 = service.zkp.compute_pair(k)
    auth_id, c = service.create_authentication_challenge("alice", r1, r2)
    assert len(auth_id) == 12
    assert set(auth_id) <= ALNUM
    assert 0 <= c < service.zkp.q
    info = service.user_info["alice"]
    assert (info.r1, info.r2, info.c) == (r1, r2, c)
    assert service.auth_id_to_user[auth_id] == "alice"


def test_full_round_succeeds(service):
    x = 6
    _register(service, "alice", x)
    k = random_below(service.zkp.q)
    r1, r2 = service.zkp.compute_pair(k)
    auth_id, c = service.create_authentication_challenge("alice", r1, r2)
    s = service.zkp.solve(k, c, x)
    session_id = service.verify_authentication(auth_id, s)
    assert len(session_id) == 12
    assert set(session_id) <= ALNUM
    assert service.user_info["alice"].s == s


def test_standard_group_round():
    service = AuthService()
    zkp = service.zkp
    x = random_below(zkp.q)
    y1, y2 = zkp.compute_pair(x)
    service.register("bob", y1, y2)
    k = random_below(zkp.q)
    r1, r2 = zkp.compute_pair(k)
    auth_id, c = service.create_authentication_challenge("bob", r1, r2)
    assert len(service.verify_authentication(auth_id, zkp.solve(k, c, x))) == 12


def test_wrong_secret_denied(service):
    _register(service, "alice", 6)
    k = 3
    r1, r2 = service.zkp.compute_pair(k)
    auth_id, c = service.create_authentication_challenge("alice", r1, r2)
    s = service.zkp.solve(k, c, 6)
    bad = (s + 1) % service.zkp.q
    with pytest.raises(PermissionDeniedError) as excinfo:
        service.verify_authentication(auth_id, bad)
    assert auth_id in str(excinfo.value)
    assert isinstance(excinfo.value, AuthError)


def test_unknown_user_challenge(service):
    with pytest.raises(NotFoundError) as excinfo:
        service.create_authentication_challenge("nobody", 1, 1)
    assert "nobody" in str(excinfo.value)


def test_unknown_auth_id(service):
    with pytest.raises(NotFoundError) as excinfo:
        service.verify_authentication("missing", 1)
    assert "missing" in str(excinfo.value)


def test_reregister_replaces_keys(service):
    _register(service, "alice", 6)
    _register(service, "alice", 2)
    assert (service.user_info["alice"].y1, service.user_info["alice"].y2) == service.zkp.compute_pair(2)