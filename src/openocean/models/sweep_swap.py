"""Models for sweep swaps (many input tokens into one output token)."""

from typing import Optional

from pydantic import Field

from openocean.models.base import OpenOceanModel
from openocean.types import U128, CommaSeparatedInts


class SweepInToken(OpenOceanModel):
    in_token_symbol: str
    in_token_address: str
    amount: str
    slippage: int = Field(..., ge=0, description="Slippage tolerance in percent")


class SweepOutToken(OpenOceanModel):
    out_token_symbol: str
    out_token_address: str


class MultiSwapQuoteParams(OpenOceanModel):
    in_token: list[SweepInToken]
    out_token: SweepOutToken
    gas_price: float
    account: str
    referrer: Optional[str] = None
    disabled_dex_ids: Optional[CommaSeparatedInts] = None


class SweepToken(OpenOceanModel):
    address: str
    decimals: int
    symbol: str
    name: str


class SweepLeg(OpenOceanModel):
    """Amounts for one input token of the sweep."""

    in_amount: U128
    out_amount: U128
    min_out_amount: U128


class MultiSwapQuoteResponse(OpenOceanModel):
    """Sweep route with the transaction to sign. Not wrapped in an envelope."""

    in_token: list[SweepToken]
    out_token: SweepToken
    from_address: str = Field(..., alias="from")
    to: str
    swap: list[SweepLeg]
    gas_price: U128
    chain_id: str
    value: U128
    data: str
