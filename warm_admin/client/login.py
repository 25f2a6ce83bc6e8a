# warm_admin/client/login.py
"""
Admin login form.

    idle -> submitting -> authenticated
                       -> failed -> submitting -> ...

The form posts the credentials to the auth endpoint and, on success, stores
the bearer token and admin profile. Every failure ends in one generic error
notification; nothing escapes submit().
"""
import enum
import json
from typing import Callable, Mapping, Optional, Union

import httpx

from warm_admin.client.notifications import LogNotifier, Notifier
from warm_admin.client.storage import ADMIN_TOKEN_KEY, ADMIN_USER_KEY, KeyValueStorage
from warm_admin.core.config import settings
from warm_admin.core.exceptions import AuthenticationFailure, ValidationError
from warm_admin.core.i18n import translate
from warm_admin.core.logging_config import get_auth_logger, mask_secrets
from warm_admin.schemas.auth import LoginCredentials, LoginData, LoginResponse

log = get_auth_logger()

ADMIN_LOGIN_PATH = "/api/auth/admin/login"
ADMIN_DASHBOARD_PATH = "/admin/dashboard"


class LoginState(str, enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


class AdminLoginForm:
    """
    One login form instance.

    Args:
        http: client used for the login request; a plain AsyncClient on
            settings.API_BASE_URL is created (and owned) when omitted
        storage: where the token and profile are kept after login
        notifier: receives the success / error toasts
        navigate: called with the dashboard path after a successful login
        language: notification language
    """

    def __init__(
        self,
        http: Optional[httpx.AsyncClient] = None,
        storage: Optional[KeyValueStorage] = None,
        notifier: Optional[Notifier] = None,
        navigate: Optional[Callable[[str], None]] = None,
        language: str = settings.UI_LANGUAGE,
    ):
        if storage is None:
            raise TypeError("AdminLoginForm needs a storage backend")
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(base_url=settings.API_BASE_URL, timeout=settings.API_TIMEOUT)
        self.storage = storage
        self.notifier = notifier or LogNotifier()
        self.navigate = navigate
        self.language = language

        self.state = LoginState.IDLE
        self.is_loading = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        if self._owns_http:
            await self.http.aclose()

    def _t(self, key: str) -> str:
        return translate(key, self.language)

    # ────────────────────────────────────────────
    # Submit
    # ────────────────────────────────────────────

    async def submit(self, credentials: Union[LoginCredentials, Mapping[str, str]]) -> LoginState:
        """Run one login attempt and return the resulting state."""
        # Button is disabled while a request is in flight
        if self.is_loading or self.state == LoginState.AUTHENTICATED:
            log.debug(f"Login submit ignored in state {self.state.value}")
            return self.state

        credentials = self._coerce(credentials)
        try:
            self._validate(credentials)
        except ValidationError as e:
            log.debug(f"Login form rejected: {e}")
            self.notifier.error(self._t("admin.login.required"))
            return self.state

        self.is_loading = True
        self.state = LoginState.SUBMITTING
        log.info(f"Admin login attempt: {credentials.username}")
        try:
            data = await self._authenticate(credentials)
            self._store_session(data)
        except AuthenticationFailure as e:
            log.warning(f"Admin login failed for {credentials.username}: {e}")
            return self._fail()
        except Exception:
            log.exception(f"Admin login crashed for {credentials.username}")
            return self._fail()
        finally:
            self.is_loading = False

        log.info(f"Admin login succeeded: {credentials.username}")
        self.notifier.success(self._t("admin.login.welcome"))
        self.state = LoginState.AUTHENTICATED
        if self.navigate is not None:
            self.navigate(ADMIN_DASHBOARD_PATH)
        return self.state

    def _fail(self) -> LoginState:
        """Same generic toast whatever went wrong."""
        self.notifier.error(self._t("admin.login.error"))
        self.state = LoginState.FAILED
        return self.state

    @staticmethod
    def _coerce(credentials) -> LoginCredentials:
        if isinstance(credentials, LoginCredentials):
            return credentials
        return LoginCredentials(
            username=credentials.get("username") or "",
            password=credentials.get("password") or "",
        )

    @staticmethod
    def _validate(credentials: LoginCredentials):
        missing = credentials.missing_fields()
        if missing:
            raise ValidationError(f"Required fields missing: {', '.join(missing)}", fields=missing)

    async def _authenticate(self, credentials: LoginCredentials) -> LoginData:
        payload = credentials.to_wire()
        log.debug(f"POST {ADMIN_LOGIN_PATH} {mask_secrets(payload)}")
        try:
            response = await self.http.post(ADMIN_LOGIN_PATH, json=payload)
        except httpx.HTTPError as e:
            raise AuthenticationFailure(f"Login request failed: {e}") from e

        if not response.is_success:
            raise AuthenticationFailure(
                f"Login endpoint returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = LoginResponse.model_validate(response.json())
        except ValueError as e:
            raise AuthenticationFailure("Malformed login response", status_code=response.status_code) from e

        if not body.success:
            raise AuthenticationFailure(body.message or "Login rejected", status_code=response.status_code)
        if body.data is None:
            raise AuthenticationFailure("Login response has no data", status_code=response.status_code)
        return body.data

    def _store_session(self, data: LoginData):
        try:
            self.storage.set_many({
                ADMIN_TOKEN_KEY: data.token,
                ADMIN_USER_KEY: json.dumps(data.admin, ensure_ascii=False),
            })
        except OSError as e:
            raise AuthenticationFailure(f"Could not store session: {e}") from e
