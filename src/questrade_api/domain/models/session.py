from pydantic import (
    BaseModel,
    ConfigDict
)


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    refresh_token  : str
    access_token   : str | None = None
    expiration_time: int        = -1
    api_server     : str

    @property
    def has_access_token(self) -> bool:
        return bool(self.access_token)
