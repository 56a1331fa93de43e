"""HTTP contract of the uid8 and star endpoints."""

import re

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from conftest import ADMIN_PASSWORD, BOT_TOKEN
from starledger.modules.handles import service as handle_service_module

HANDLE_RE = re.compile(r"^[0-9]{8}$")


def add_stars_body(uid8, amount, bot_token=BOT_TOKEN, password=ADMIN_PASSWORD):
    return {"botToken": bot_token, "password": password, "uid8": uid8, "amount": amount}


async def test_health(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.text == "OK"


async def test_allocate_uid8_is_stable(client):
    first = await client.post("/api/uid8", json={"telegram_id": "123456789"})
    second = await client.post("/api/uid8", json={"telegram_id": "123456789"})

    assert first.status_code == 200
    uid8 = first.json()["uid8"]
    assert HANDLE_RE.fullmatch(uid8)
    assert second.json() == {"uid8": uid8}


async def test_allocate_uid8_rejects_bad_ids(client):
    for body in ({"telegram_id": "12a"}, {"telegram_id": 123}, {}):
        res = await client.post("/api/uid8", json=body)
        assert res.status_code == 400
        assert res.json()["ok"] is False
        assert res.json()["error"] == "invalid_input"


async def test_allocate_uid8_without_body(client):
    res = await client.post("/api/uid8")
    assert res.status_code == 400
    assert res.json()["error"] == "invalid_input"


async def test_allocate_uid8_exhaustion_is_503(client, monkeypatch):
    monkeypatch.setattr(handle_service_module.secrets, "randbelow", lambda bound: 7)
    assert (await client.post("/api/uid8", json={"telegram_id": "1"})).json() == {"uid8": "00000007"}

    res = await client.post("/api/uid8", json={"telegram_id": "2"})

    assert res.status_code == 503
    assert res.json() == {"ok": False, "error": "allocation_exhausted", "message": "Could not allocate uid8"}
    balance = await client.get("/api/user-balance", params={"user_id": "2"})
    assert balance.json()["uid8"] is None


async def test_user_balance_without_uid8(client):
    res = await client.get("/api/user-balance", params={"user_id": "555"})
    assert res.status_code == 200
    assert res.json() == {"ok": True, "uid8": None, "stars": 0}


async def test_user_balance_requires_numeric_user_id(client):
    for params in ({}, {"user_id": ""}, {"user_id": "abc"}):
        res = await client.get("/api/user-balance", params=params)
        assert res.status_code == 400
        assert res.json()["error"] == "invalid_input"


async def test_deposit_then_read_back(client):
    uid8 = (await client.post("/api/uid8", json={"telegram_id": "42"})).json()["uid8"]

    res = await client.post("/api/cli/add-stars", json=add_stars_body(uid8, 10))
    assert res.status_code == 200
    assert res.json() == {"ok": True, "uid8": uid8, "added": 10, "newBalance": 10}

    res = await client.post("/api/cli/add-stars", json=add_stars_body(uid8, "25"))
    assert res.json()["newBalance"] == 35

    by_user = await client.get("/api/user-balance", params={"user_id": "42"})
    assert by_user.json() == {"ok": True, "uid8": uid8, "stars": 35}
    by_uid8 = await client.get(f"/api/stars/by-uid8/{uid8}")
    assert by_uid8.json() == {"ok": True, "uid8": uid8, "stars": 35}


async def test_stars_by_uid8_defaults_to_zero(client):
    res = await client.get("/api/stars/by-uid8/00000001")
    assert res.json() == {"ok": True, "uid8": "00000001", "stars": 0}


async def test_stars_by_uid8_rejects_bad_handle(client):
    res = await client.get("/api/stars/by-uid8/1234567")
    assert res.status_code == 400
    assert res.json()["error"] == "invalid_input"


async def test_deposit_unauthorized_does_not_reveal_which_secret(client):
    bad_token = await client.post(
        "/api/cli/add-stars", json=add_stars_body("00000001", 10, bot_token="nope")
    )
    bad_password = await client.post(
        "/api/cli/add-stars", json=add_stars_body("00000001", 10, password="nope")
    )
    missing = await client.post("/api/cli/add-stars", json={"uid8": "00000001", "amount": 10})

    for res in (bad_token, bad_password, missing):
        assert res.status_code == 401
        assert res.json() == {"ok": False, "error": "unauthorized", "message": "Invalid credentials"}

    balance = await client.get("/api/stars/by-uid8/00000001")
    assert balance.json()["stars"] == 0


async def test_deposit_checks_credentials_before_input(client):
    res = await client.post("/api/cli/add-stars", json=add_stars_body("bad", -1, bot_token="nope"))
    assert res.status_code == 401


async def test_deposit_rejects_bad_amount_and_handle(client):
    for uid8, amount in (("00000001", 0), ("00000001", -5), ("00000001", "ten"), ("1234", 10)):
        res = await client.post("/api/cli/add-stars", json=add_stars_body(uid8, amount))
        assert res.status_code == 400
        assert res.json()["error"] == "invalid_input"

    balance = await client.get("/api/stars/by-uid8/00000001")
    assert balance.json()["stars"] == 0


async def test_storage_failure_is_generic(client, monkeypatch):
    async def broken_execute(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(AsyncSession, "execute", broken_execute)

    res = await client.get("/api/stars/by-uid8/00000001")

    assert res.status_code == 500
    assert res.json() == {"ok": False, "error": "storage_error", "message": "Server error"}
    assert "disk" not in res.text


async def test_deposit_past_balance_limit_is_rejected(client):
    uid8 = "00000001"
    assert (await client.post("/api/cli/add-stars", json=add_stars_body(uid8, 2**63 - 1))).status_code == 200

    res = await client.post("/api/cli/add-stars", json=add_stars_body(uid8, 1))

    assert res.status_code == 400
    assert res.json() == {"ok": False, "error": "invalid_input", "message": "Balance limit exceeded"}
    balance = await client.get(f"/api/stars/by-uid8/{uid8}")
    assert balance.json()["stars"] == 2**63 - 1
