from pydantic import (
    BaseModel,
    ConfigDict
)
from pydantic.alias_generators import to_camel


class Balance(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    currency          : str
    cash              : float = 0.0
    market_value      : float = 0.0
    total_equity      : float = 0.0
    buying_power      : float = 0.0
    maintenance_excess: float = 0.0
    is_real_time      : bool  = False


class BalancesResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    per_currency_balances    : list[Balance] = []
    combined_balances        : list[Balance] = []
    sod_per_currency_balances: list[Balance] = []
    sod_combined_balances    : list[Balance] = []

    def combined_for(self, currency: str) -> Balance | None:
        for balance in self.combined_balances:
            if balance.currency.upper() == currency.upper():
                return balance

        return None
