from fastapi import HTTPException

from questrade_api.domain.errors import ApiError
from questrade_api.infra.client.questrade_client import QuestradeClient


class AccountService:
    def __init__(self, client: QuestradeClient):
        self.__client = client

    async def list_accounts(self) -> dict:
        try:
            resp = await self.__client.get_accounts()
        except ApiError as e:
            raise HTTPException(status_code=e.code, detail={"error": e.message, "body": e.body})

        return resp.model_dump(by_alias=True)

    async def get_balances(self, account_number: str) -> dict:
        try:
            resp = await self.__client.get_account_balances(account_number)
        except ApiError as e:
            raise HTTPException(status_code=e.code, detail={"error": e.message, "body": e.body})

        return resp.model_dump(by_alias=True)
