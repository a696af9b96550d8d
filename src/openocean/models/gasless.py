"""Models for the gasless (meta-transaction) swap endpoints."""

from typing import Optional

from pydantic import Field

from openocean.models.base import (
    Envelope,
    LogicalFailure,
    MsgResponse,
    OpenOceanModel,
    Outcome,
    Success,
)
from openocean.models.swap import QuotePath, QuoteToken
from openocean.types import F64, U128, CommaSeparatedInts


class GaslessQuoteParams(OpenOceanModel):
    in_token_address: str
    out_token_address: str
    amount_decimals: str
    gas_price_decimals: str
    slippage: Optional[str] = None
    referrer: Optional[str] = None
    disabled_dex_ids: Optional[CommaSeparatedInts] = None


class QuoteFee(OpenOceanModel):
    """Fee charged in the input token to cover gas."""

    address: str
    decimals: int
    symbol: str
    name: str
    usd: F64
    in_fee_amount: F64
    volume: F64


class GaslessQuoteData(OpenOceanModel):
    in_token: QuoteToken
    out_token: QuoteToken
    native: QuoteToken
    fees: list[QuoteFee] = Field(default_factory=list)
    flag: int
    in_amount: U128
    out_amount: U128
    estimated_gas: U128
    path: QuotePath


GaslessQuoteResponse = MsgResponse[GaslessQuoteData]


class GaslessSwapParams(OpenOceanModel):
    """Signed gasless order submitted to the relayer."""

    from_address: str = Field(..., alias="from")
    to: str
    data: str
    amount_decimals: str
    fee_amount1: str
    fee_amount2: str
    flag: int
    gas_price_decimals: int
    deadline: int
    in_token: str
    out_token: str
    nonce: int
    permit: str
    usd_valuation: float = Field(..., alias="usdvaluation")


class GaslessSwapResponse(Envelope):
    """Relayer acknowledgement; carries the order hash instead of `data`."""

    msg: Optional[str] = None
    order_hash: Optional[str] = None

    @property
    def message(self) -> Optional[str]:
        return self.msg

    def result(self) -> Outcome:
        if self.is_success:
            return Success(self.order_hash)
        return LogicalFailure(code=self.code, message=self.msg)


class OrderStatusData(OpenOceanModel):
    hash: str
    err: Optional[str] = None


OrderStatusResponse = MsgResponse[OrderStatusData]
