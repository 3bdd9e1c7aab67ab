import logging

from datetime import (
    datetime,
    timezone
)
from fastapi import HTTPException

from questrade_api.domain.errors import ApiError
from questrade_api.infra.client.questrade_client import QuestradeClient

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, client: QuestradeClient):
        self.__client = client
        self.__refresh_count = 0
        self.__last_refreshed_at: datetime | None = None

        self.__client.add_refresh_listener(self.__on_refresh)

    def __on_refresh(self) -> None:
        self.__refresh_count += 1
        self.__last_refreshed_at = datetime.now(timezone.utc)

        logger.debug("Refresh #%s recorded", self.__refresh_count)

    async def refresh(self) -> dict:
        try:
            await self.__client.force_refresh()
        except ApiError as e:
            raise HTTPException(status_code=e.code, detail={"error": e.message, "body": e.body})

        return self.status()

    def status(self) -> dict:
        last = self.__last_refreshed_at

        return {
            "has_access_token": self.__client.get_access_token() is not None,
            "expires_at": self.__client.get_access_token_expiration_time(),
            "needs_refresh": self.__client.needs_token_refresh(),
            "api_server": self.__client.get_api_server(),
            "refresh_count": self.__refresh_count,
            "last_refreshed_at": last.isoformat(timespec="seconds").replace("+00:00", "Z") if last else None,
        }
