from pydantic import (
    BaseModel,
    StringConstraints
)
from typing import Annotated

NonEmpty = Annotated[str, StringConstraints(min_length=1)]


class TokenRefreshResponse(BaseModel):
    access_token : NonEmpty
    refresh_token: NonEmpty
    api_server   : NonEmpty
    expires_in   : int
    token_type   : str = "Bearer"
