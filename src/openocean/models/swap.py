"""Models for the v4 swap endpoints (quote, swap, token list, gas, dex list)."""

from typing import Annotated, Any, Optional, Union

from pydantic import ConfigDict, Field, PlainValidator

from openocean.models.base import ApiResponse, Envelope, OpenOceanModel
from openocean.types import F64, U128, CommaSeparatedInts, JsonData, decode_f64

# ======================
# Request parameters
# ======================


class QuoteParams(OpenOceanModel):
    """Query for GET /v4/{chain}/quote."""

    in_token_address: str = Field(..., description="Input token contract address")
    out_token_address: str = Field(..., description="Output token contract address")
    amount_decimals: str = Field(..., description="Input amount in smallest units")
    gas_price_decimals: str = Field(..., description="Gas price in wei")
    slippage: Optional[str] = Field(None, description="Slippage tolerance in percent")
    disabled_dex_ids: Optional[CommaSeparatedInts] = Field(None, description="Dex ids to exclude")
    enabled_dex_ids: Optional[CommaSeparatedInts] = Field(None, description="Dex ids to restrict to")


class ReverseQuoteParams(OpenOceanModel):
    """Query for GET /v4/{chain}/reverseQuote (quote by desired output)."""

    in_token_address: str
    out_token_address: str
    amount: str = Field(..., description="Desired output amount")
    gas_price: str
    slippage: Optional[str] = None
    disabled_dex_ids: Optional[CommaSeparatedInts] = None
    enabled_dex_ids: Optional[CommaSeparatedInts] = None


class SwapQuoteParams(OpenOceanModel):
    """Query for GET /v4/{chain}/swap; returns executable calldata."""

    in_token_address: str
    out_token_address: str
    amount_decimals: str
    gas_price_decimals: str
    account: str = Field(..., description="Wallet that will send the transaction")
    slippage: Optional[str] = None
    referrer: Optional[str] = None
    referrer_fee: Optional[str] = None
    disabled_dex_ids: Optional[CommaSeparatedInts] = None
    enabled_dex_ids: Optional[CommaSeparatedInts] = None
    sender: Optional[str] = None
    mint_output: Optional[str] = None


# ======================
# Quote responses
# ======================


class QuoteToken(OpenOceanModel):
    """Token descriptor embedded in quote responses."""

    address: str
    decimals: int
    symbol: str
    name: str
    usd: Optional[F64] = None
    volume: Optional[F64] = None


class QuoteDex(OpenOceanModel):
    """Per-dex output for the requested amount."""

    dex_index: int
    dex_code: str
    swap_amount: U128


class QuoteSubRouteDex(OpenOceanModel):
    dex: str
    id: str
    parts: int
    percentage: F64
    fee: Optional[F64] = None


class QuoteSubRoute(OpenOceanModel):
    from_address: str = Field(..., alias="from")
    to: str
    parts: int
    dexes: list[QuoteSubRouteDex] = Field(default_factory=list)


class QuoteRoute(OpenOceanModel):
    parts: int
    # may be fractional
    percentage: F64
    sub_routes: list[QuoteSubRoute] = Field(default_factory=list)


class QuotePath(OpenOceanModel):
    """Split routing of the input amount across routes and dexes."""

    from_address: str = Field(..., alias="from")
    to: str
    parts: int
    routes: list[QuoteRoute] = Field(default_factory=list)


class QuoteData(OpenOceanModel):
    """Payload of quote and reverse-quote responses."""

    in_token: QuoteToken
    out_token: QuoteToken
    in_amount: U128
    out_amount: U128
    estimated_gas: U128
    dexes: list[QuoteDex] = Field(default_factory=list)
    path: Optional[QuotePath] = None
    save: Optional[F64] = None
    price_impact: Optional[str] = Field(None, alias="price_impact")
    reverse_amount: Optional[U128] = None


class SwapQuoteData(OpenOceanModel):
    """Payload of a swap response: quote plus transaction to sign."""

    in_token: QuoteToken
    out_token: QuoteToken
    in_amount: U128
    out_amount: U128
    estimated_gas: U128
    min_out_amount: U128
    from_address: str = Field(..., alias="from")
    to: str
    value: U128
    gas_price: U128
    data: str
    chain_id: Optional[U128] = None
    rfq_deadline: Optional[int] = None
    gmx_fee: Optional[U128] = None
    price_impact: Optional[str] = Field(None, alias="price_impact")


QuoteResponse = ApiResponse[QuoteData]
ReverseQuoteResponse = ApiResponse[QuoteData]
SwapQuoteResponse = ApiResponse[SwapQuoteData]

# ======================
# Token list
# ======================


class Token(OpenOceanModel):
    """Entry of the per-chain token list."""

    id: int
    code: str
    name: str
    address: str
    decimals: int
    symbol: str
    icon: Optional[str] = None
    chain: str
    create_time: Optional[str] = Field(None, alias="createtime")
    chain_id: Optional[int] = None
    custom_symbol: Optional[str] = None
    custom_address: Optional[str] = None
    usd: Optional[F64] = None


class TokenListResponse(Envelope):
    """Token list envelope; `data` is always present."""

    data: list[Token]


# ======================
# Gas prices
# ======================


class GasTiers(OpenOceanModel):
    """Legacy gas prices per speed tier."""

    standard: F64
    fast: F64
    instant: F64
    low: Optional[F64] = None


class GasResponse(Envelope):
    """Gas price envelope carrying both scaled and raw tiers."""

    data: GasTiers
    without_decimals: GasTiers = Field(..., alias="without_decimals")


class Eip1559Gas(OpenOceanModel):
    """EIP-1559 gas quote for one speed tier."""

    legacy_gas_price: Optional[F64] = None
    max_priority_fee_per_gas: F64
    max_fee_per_gas: F64
    wait_time_estimate: Optional[F64] = None


def decode_gas_tier(value: Any) -> Union[Eip1559Gas, float]:
    """Decode one gas tier: a JSON object is an EIP-1559 quote, anything else a price.

    Nested validation errors keep their own location, so a bad field reports
    as e.g. `data.standard.maxFeePerGas`.
    """
    if isinstance(value, Eip1559Gas):
        return value
    if isinstance(value, dict):
        return Eip1559Gas.model_validate(value)
    return decode_f64(value)


GasTier = Annotated[Union[Eip1559Gas, float], PlainValidator(decode_gas_tier)]


class GasPriceData(OpenOceanModel):
    """Gas tiers that are either a plain price or an EIP-1559 quote."""

    standard: GasTier
    fast: GasTier
    instant: GasTier
    low: Optional[GasTier] = None
    base: Optional[F64] = None


class GasPriceResponse(ApiResponse[GasPriceData]):
    without_decimals: Optional[GasPriceData] = Field(None, alias="without_decimals")


# ======================
# Dex list / transactions
# ======================


class Dex(OpenOceanModel):
    index: int
    code: str
    name: str


DexListResponse = ApiResponse[list[Dex]]


class TransactionData(OpenOceanModel):
    """Swap transaction record. The wire uses snake_case for this object."""

    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="ignore")

    id: Optional[int] = None
    tx_id: Optional[str] = None
    block_number: Optional[int] = None
    tx_index: Optional[int] = None
    address: Optional[str] = None
    tx_hash: str
    in_token_address: Optional[str] = None
    in_token_symbol: Optional[str] = None
    in_token_decimals: Optional[int] = None
    out_token_address: Optional[str] = None
    out_token_symbol: Optional[str] = None
    out_token_decimals: Optional[int] = None
    referrer: Optional[str] = None
    in_amount: Optional[U128] = None
    out_amount: Optional[U128] = None
    fee: Optional[str] = None
    referrer_fee: Optional[str] = None
    usd_valuation: Optional[F64] = None
    tx_fee: Optional[str] = None
    tx_fee_valuation: Optional[F64] = None
    create_at: Optional[str] = None
    update_at: Optional[str] = None


TransactionResponse = ApiResponse[TransactionData]

DecodeInputDataResponse = ApiResponse[JsonData]
