from fastapi import (
    APIRouter,
    Depends
)

from questrade_api.application.services.auth_service import AuthService
from questrade_api.utils.provider import get_auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/status")
def auth_status(service: AuthService = Depends(get_auth_service)):
    return service.status()


@router.post("/refresh")
async def auth_refresh(service: AuthService = Depends(get_auth_service)):
    return await service.refresh()
