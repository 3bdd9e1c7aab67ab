from pydantic import (
    BaseModel,
    ConfigDict
)
from pydantic.alias_generators import to_camel


class Account(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    type               : str
    number             : str
    status             : str
    is_primary         : bool = False
    is_billing         : bool = False
    client_account_type: str | None = None


class AccountsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    accounts: list[Account] = []
    user_id : int | None    = None
