import asyncio
import json

import httpx

from warm_admin.client.api import create_api_client
from warm_admin.client.session import current_admin, get_token, is_authenticated, logout
from warm_admin.client.storage import ADMIN_TOKEN_KEY, ADMIN_USER_KEY, JsonFileStorage, MemoryStorage
from warm_admin.core.i18n import translate

PROFILE = {"id": 1, "username": "admin", "email": "admin@warmphuket.ru", "role": "super_admin"}


def logged_in_storage():
    return MemoryStorage({ADMIN_TOKEN_KEY: "abc", ADMIN_USER_KEY: json.dumps(PROFILE)})


def test_current_admin_reads_profile():
    storage = logged_in_storage()

    admin = current_admin(storage)

    assert admin.username == "admin"
    assert admin.role == "super_admin"
    assert is_authenticated(storage)
    assert get_token(storage) == "abc"


def test_current_admin_ignores_corrupt_profile():
    assert current_admin(MemoryStorage({ADMIN_USER_KEY: "{not json"})) is None
    assert current_admin(MemoryStorage({ADMIN_USER_KEY: "[1, 2]"})) is None
    assert current_admin(MemoryStorage()) is None


def test_logout_removes_both_keys():
    storage = logged_in_storage()
    storage.set("language", "ru")

    logout(storage)

    assert storage.snapshot() == {"language": "ru"}
    assert not is_authenticated(storage)


def test_json_file_storage_survives_reopen(tmp_path):
    path = tmp_path / "profile" / "storage.json"
    JsonFileStorage(path).set_many({ADMIN_TOKEN_KEY: "abc", ADMIN_USER_KEY: json.dumps(PROFILE)})

    reopened = JsonFileStorage(path)
    assert reopened.get(ADMIN_TOKEN_KEY) == "abc"
    assert current_admin(reopened).email == "admin@warmphuket.ru"

    logout(reopened)
    assert list(JsonFileStorage(path).keys()) == []
    assert [p.name for p in path.parent.iterdir()] == ["storage.json"]


def test_json_file_storage_unreadable_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("garbage", encoding="utf-8")

    storage = JsonFileStorage(path)
    assert storage.get(ADMIN_TOKEN_KEY) is None
    storage.set(ADMIN_TOKEN_KEY, "abc")
    assert storage.get(ADMIN_TOKEN_KEY) == "abc"


def test_api_client_attaches_bearer_token(notifier):
    seen = []

    def handler(request):
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json={"success": True})

    async def call(storage):
        async with create_api_client(
            storage, notifier, base_url="http://testserver", transport=httpx.MockTransport(handler)
        ) as client:
            return await client.get("/api/admin/properties")

    asyncio.run(call(logged_in_storage()))
    asyncio.run(call(MemoryStorage()))

    assert seen == ["Bearer abc", None]


def test_api_client_drops_session_on_401(notifier):
    storage = logged_in_storage()

    async def call():
        async with create_api_client(
            storage, notifier, base_url="http://testserver",
            transport=httpx.MockTransport(lambda request: httpx.Response(401, json={"success": False})),
        ) as client:
            return await client.get("/api/admin/properties")

    response = asyncio.run(call())

    assert response.status_code == 401
    assert storage.get(ADMIN_TOKEN_KEY) is None
    assert storage.get(ADMIN_USER_KEY) is None
    assert notifier.messages == [("error", translate("admin.session.expired"))]


def test_api_client_keeps_session_on_other_errors(notifier):
    storage = logged_in_storage()

    async def call():
        async with create_api_client(
            storage, notifier, base_url="http://testserver",
            transport=httpx.MockTransport(lambda request: httpx.Response(403)),
        ) as client:
            return await client.get("/api/admin/properties")

    asyncio.run(call())

    assert storage.get(ADMIN_TOKEN_KEY) == "abc"
    assert notifier.messages == []
