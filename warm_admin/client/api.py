# warm_admin/client/api.py
"""
HTTP client for authenticated admin API calls.

Attaches the stored bearer token to every request and drops the stored
session when the API answers 401.
"""
import logging
from typing import Optional

import httpx

from warm_admin.client.notifications import LogNotifier, Notifier
from warm_admin.client.session import get_token, logout
from warm_admin.client.storage import KeyValueStorage
from warm_admin.core.config import settings
from warm_admin.core.i18n import translate

log = logging.getLogger("warm_admin.api")


def create_api_client(
    storage: KeyValueStorage,
    notifier: Optional[Notifier] = None,
    base_url: str = settings.API_BASE_URL,
    timeout: float = settings.API_TIMEOUT,
    language: str = settings.UI_LANGUAGE,
    **kwargs,
) -> httpx.AsyncClient:
    """
    Build an AsyncClient wired to the stored admin session.

    Extra keyword arguments go straight to httpx.AsyncClient
    (e.g. transport=httpx.MockTransport(...) in tests).
    """
    notifier = notifier or LogNotifier()

    async def attach_token(request: httpx.Request):
        token = get_token(storage)
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def drop_expired_session(response: httpx.Response):
        if response.status_code == 401:
            log.warning(f"401 from {response.request.method} {response.request.url.path}, clearing session")
            logout(storage)
            notifier.error(translate("admin.session.expired", language))

    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        headers={"Content-Type": "application/json"},
        event_hooks={"request": [attach_token], "response": [drop_expired_session]},
        **kwargs,
    )
