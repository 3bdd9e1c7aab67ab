from fastapi import (
    APIRouter,
    Depends
)

from questrade_api.application.services.account_service import AccountService
from questrade_api.utils.provider import get_account_service

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("")
async def accounts(service: AccountService = Depends(get_account_service)):
    return await service.list_accounts()


@router.get("/{account_number}/balances")
async def account_balances(account_number: str, service: AccountService = Depends(get_account_service)):
    return await service.get_balances(account_number)
