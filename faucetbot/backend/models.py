"""
Request and response payloads of the faucet backend API.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class BalanceResponse(BaseModel):
    """Answer of ``GET /balance``. The backend sends the balance as a string or a number."""

    balance: Decimal = Field(description="Remaining faucet balance in base units")

    model_config = ConfigDict(extra="ignore")


class DripRequest(BaseModel):
    """Body of ``POST /bot-endpoint``."""

    address: str = Field(min_length=1, description="SS58 address of the receiver")
    amount: float = Field(gt=0, description="Amount to send, in whole units")
    parachain_id: str = Field(
        default="",
        description="Target parachain for a teleport; empty for a direct transfer",
    )
    sender: str = Field(description="Matrix id of the user who asked for the drip")


class DripResponse(BaseModel):
    """
    Answer of ``POST /bot-endpoint``.

    A drip succeeded only if the backend returned a non-empty extrinsic hash.
    An empty or null hash is a failure even when ``error`` is absent.
    """

    hash: str | None = Field(None, description="Extrinsic hash of the transfer")
    error: str | None = Field(None, description="Backend error message")

    model_config = ConfigDict(extra="ignore")

    @property
    def is_success(self) -> bool:
        return bool(self.hash)
