"""Models for support tickets attached to a failed swap."""

from typing import Optional

from pydantic import Field

from openocean.models.base import MsgResponse, OpenOceanModel
from openocean.types import CommaSeparatedInts


class TicketError(OpenOceanModel):
    code: int
    error: str


class TicketTransaction(OpenOceanModel):
    from_address: str = Field(..., alias="from")
    to: str
    value: str
    data: str
    gas_price: str
    gas_limit: str


class TicketQuote(OpenOceanModel):
    """The quote request that produced the failed transaction."""

    quote_type: str
    in_token_symbol: str
    in_token_address: str
    out_token_symbol: str
    out_token_address: str
    amount_all: int
    amount: str
    gas_price: str
    slippage: int
    referrer: Optional[str] = None
    disabled_dex_ids: Optional[CommaSeparatedInts] = None


class SubmitTicketParams(OpenOceanModel):
    hash: str
    chain: str
    version: str
    question: str
    account: str
    quote: TicketQuote
    transaction: TicketTransaction
    error: TicketError


class SubmitTicketData(OpenOceanModel):
    ticket: str


class TicketParams(OpenOceanModel):
    quote: TicketQuote


class TicketData(OpenOceanModel):
    hash: str
    remark: str
    process: str
    question: str
    answer: str
    params: TicketParams
    account: str
    created_at: str


SubmitTicketResponse = MsgResponse[SubmitTicketData]
TicketResponse = MsgResponse[TicketData]
