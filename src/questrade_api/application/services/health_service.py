from datetime import (
    datetime,
    timezone
)

from questrade_api.config.settings import Settings


class HealthService:
    def __init__(self, settings: Settings):
        self.__settings = settings

    def get_health(self) -> dict[str, str]:
        return {
            "status": "ok",
            "service": self.__settings.SERVICE_NAME,
            "ts_utc": datetime\
                        .now(timezone.utc)
                        .isoformat(timespec="seconds")
                        .replace("+00:00","Z")
        }

    def get_env_check(self) -> dict[str, bool | str]:
        return {
            "refresh_token_set": bool(self.__settings.QT_REFRESH_TOKEN),
            "auth_url": self.__settings.QT_AUTH_URL
        }
