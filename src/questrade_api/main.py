import logging

from fastapi import FastAPI

from questrade_api.infra.routes import (
    accounts,
    auth,
    health
)
from questrade_api.utils.provider import get_settings

logging.basicConfig(
    level=get_settings().LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Questrade Accounts API")

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(accounts.router)
