from pathlib import Path
from pydantic import StringConstraints
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict
)
from typing import Annotated

ROOT = Path(__file__).resolve().parents[3]
ENV_PATH = ROOT / ".env"


class ClientSettings(BaseSettings):
    QT_AUTH_URL          : str = "https://login.questrade.com/oauth2/token"
    QT_DEFAULT_API_SERVER: str = "https://api01.iq.questrade.com"

    QT_REFRESH_MARGIN_SECONDS: int   = 20
    QT_HTTP_TIMEOUT          : float = 20.0

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )


class Settings(ClientSettings):
    QT_REFRESH_TOKEN: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

    SERVICE_NAME: str = "questrade-api"
    LOG_LEVEL   : str = "INFO"
