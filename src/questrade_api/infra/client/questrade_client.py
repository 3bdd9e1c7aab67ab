import asyncio
import httpx
import logging
import time

from pydantic import (
    BaseModel,
    ValidationError
)
from typing import (
    Any,
    Callable,
    TypeVar
)

from questrade_api.config.settings import ClientSettings
from questrade_api.domain.errors import ApiError
from questrade_api.domain.models.account import AccountsResponse
from questrade_api.domain.models.balance import BalancesResponse
from questrade_api.domain.models.session import Session
from questrade_api.domain.models.token_refresh import TokenRefreshResponse
from questrade_api.utils.masking import mask_token

logger = logging.getLogger(__name__)

CODE_BAD_REQUEST = 400
CODE_BAD_GATEWAY = 502

RefreshListener = Callable[[], None]
ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


def current_time_seconds() -> int:
    return int(time.time())


class QuestradeClient:
    """
    Read-only Questrade API client that owns the OAuth token lifecycle.

    The refresh token passed in is exchanged for an access token on first use.
    Every exchange rotates the refresh token and may move the client to a
    different API server, so callers that need to keep the latest refresh token
    should register a listener with `add_refresh_listener` and read it back via
    `get_refresh_token()`.
    """

    def __init__(
        self,
        refresh_token: str,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        self.__settings = settings or ClientSettings()
        self.__transport = transport
        self.__session = Session(
            refresh_token=refresh_token,
            api_server=self.__settings.QT_DEFAULT_API_SERVER
        )
        self.__listeners: list[RefreshListener] = []
        self.__refresh_lock = asyncio.Lock()

    def add_refresh_listener(self, listener: RefreshListener) -> None:
        self.__listeners.append(listener)

    def remove_refresh_listener(self, listener: RefreshListener) -> None:
        self.__listeners.remove(listener)

    def needs_token_refresh(self) -> bool:
        if not self.__session.has_access_token:
            return True

        margin = self.__settings.QT_REFRESH_MARGIN_SECONDS

        return current_time_seconds() >= self.__session.expiration_time - margin

    async def refresh(self) -> None:
        """
        Exchange the current refresh token for a new access/refresh token pair.

        Session state is replaced only once the response has been fully parsed, so
        a failed exchange keeps the previous tokens. Listeners run after the swap.

        Raises:
            ApiError: the token endpoint answered with a non-success status, or
                with a body that is not a valid token response.
        """
        params = {
            "grant_type": "refresh_token",
            "refresh_token": self.__session.refresh_token,
        }

        async with self.__http_client() as c:
            r = await c.post(self.__settings.QT_AUTH_URL, params=params)

        if not r.is_success:
            logger.warning("Token refresh failed with status %s", r.status_code)

            if r.status_code == CODE_BAD_REQUEST:
                raise ApiError("Invalid refresh token", r.status_code, r.text)

            raise ApiError("Failed to refresh tokens", r.status_code, r.text)

        try:
            payload = TokenRefreshResponse.model_validate(r.json())
        except (ValueError, ValidationError) as e:
            raise ApiError(f"Malformed token refresh response: {e}", CODE_BAD_GATEWAY, r.text) from e

        self.__session = Session(
            refresh_token=payload.refresh_token,
            access_token=payload.access_token,
            expiration_time=current_time_seconds() + payload.expires_in,
            api_server=payload.api_server,
        )

        logger.info(
            "Refreshed access token %s, server %s, expires at %s",
            mask_token(payload.access_token),
            payload.api_server,
            self.__session.expiration_time
        )

        for listener in list(self.__listeners):
            listener()

    async def get_accounts(self) -> AccountsResponse:
        await self.__ensure_access_token()

        data = await self._do_api_request("/v1/accounts")

        return self.__parse(AccountsResponse, data, "/v1/accounts")

    async def get_account_balances(self, account_number: str) -> BalancesResponse:
        """Balances for one account; the server rejects numbers the token does not own."""
        await self.__ensure_access_token()

        data = await self._do_api_request(f"/v1/accounts/{account_number}/balances")

        return self.__parse(BalancesResponse, data, f"/v1/accounts/{account_number}/balances")

    async def force_refresh(self) -> None:
        """Refresh now, waiting for any exchange already in flight on this client."""
        async with self.__refresh_lock:
            await self.refresh()

    def get_refresh_token(self) -> str:
        return self.__session.refresh_token

    def get_access_token(self) -> str | None:
        return self.__session.access_token

    def get_access_token_expiration_time(self) -> int:
        return self.__session.expiration_time

    def get_api_server(self) -> str:
        return self.__session.api_server

    async def _do_api_request(self, endpoint: str, method: str = "GET") -> Any:
        url = f"{self.__session.api_server.rstrip('/')}{endpoint}"

        async with self.__http_client() as c:
            r = await c.request(method, url, headers=self.__get_headers())

        if not r.is_success:
            raise ApiError(f"Failed to {method} {url}", r.status_code, r.text)

        try:
            return r.json()
        except ValueError as e:
            raise ApiError(f"Malformed response from {method} {url}", CODE_BAD_GATEWAY, r.text) from e

    async def __ensure_access_token(self) -> None:
        if not self.needs_token_refresh():
            return

        # Callers that queued behind an in-flight refresh see the new token here.
        async with self.__refresh_lock:
            if self.needs_token_refresh():
                await self.refresh()

    def __parse(self, model: type[ResponseModel], data: Any, endpoint: str) -> ResponseModel:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ApiError(f"Unexpected {endpoint} response: {e}", CODE_BAD_GATEWAY, str(data)) from e

    def __get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.__session.access_token}",
            "Accept": "application/json",
        }

    def __http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.__settings.QT_HTTP_TIMEOUT, transport=self.__transport)
