from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

AuthMode = Literal["basic", "bearer", "none"]


class AccountConfig(BaseModel):
    """
    Account data for one Basecamp client.
    Frozen; the token is rotated by building a copy with with_token().
    """

    account_id: str = Field(alias="accountId")
    app_name: str = Field(alias="appName")
    token: Optional[str] = None
    login: Optional[str] = None
    password: Optional[str] = None

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    @property
    def auth_mode(self) -> AuthMode:
        # Basic wins over bearer even when a token is set as well.
        if self.login and self.password:
            return "basic"
        if self.token:
            return "bearer"
        return "none"

    def with_token(self, token: Optional[str]) -> "AccountConfig":
        return self.model_copy(update={"token": token})

    def __repr__(self) -> str:
        return (
            f"AccountConfig(account_id={self.account_id!r}, "
            f"app_name={self.app_name!r}, auth_mode={self.auth_mode!r})"
        )

    __str__ = __repr__


__all__ = ["AccountConfig", "AuthMode"]
