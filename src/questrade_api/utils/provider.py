from functools import lru_cache

from questrade_api.application.services.account_service import AccountService
from questrade_api.application.services.auth_service import AuthService
from questrade_api.application.services.health_service import HealthService
from questrade_api.config.settings import Settings
from questrade_api.infra.client.questrade_client import QuestradeClient


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def get_client() -> QuestradeClient:
    settings = get_settings()

    return QuestradeClient(settings.QT_REFRESH_TOKEN, settings)


def get_health_service() -> HealthService:
    return HealthService(get_settings())


@lru_cache(maxsize=1)
def get_auth_service() -> AuthService:
    return AuthService(get_client())


def get_account_service() -> AccountService:
    return AccountService(get_client())
