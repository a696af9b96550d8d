"""Models for zap-in (single transaction liquidity provision) routes."""

from typing import Optional

from pydantic import AliasChoices, Field, model_validator

from openocean.models.base import MsgResponse, OpenOceanModel
from openocean.types import F64


class ZapTokenAmount(OpenOceanModel):
    token: str
    amount: str


class ZapRouteParams(OpenOceanModel):
    dex: str
    pool: str
    position_tick_upper: float
    position_tick_lower: float
    tokens: list[ZapTokenAmount]
    slippage: str
    referrer: Optional[str] = None
    referrer_fee: Optional[str] = None


class PoolToken(OpenOceanModel):
    symbol: str
    name: str
    address: str
    decimals: int
    price: F64


class Pool(OpenOceanModel):
    pool_id: str
    dex: str
    token0: PoolToken
    token1: PoolToken


class ActionToken(OpenOceanModel):
    address: str
    amount: str
    amount_usd: Optional[str] = None


class ProtocolFee(OpenOceanModel):
    address: str
    amount: PoolToken
    amount_usd: str
    zap_fee_rate: str


class AggregatorSwap(OpenOceanModel):
    token_in: ActionToken
    token_out: ActionToken
    swap_impact: F64


class AddLiquidity(OpenOceanModel):
    token0: ActionToken
    token1: ActionToken
    liquidity: str


class ZapActionData(OpenOceanModel):
    """Externally tagged action payload: exactly one variant key is present."""

    protocol_fee: Optional[ProtocolFee] = Field(
        None,
        validation_alias=AliasChoices("ProtocolFee", "ProtocalFee"),
        serialization_alias="ProtocolFee",
    )
    aggregator_swap: Optional[AggregatorSwap] = Field(None, alias="AggregatorSwap")
    add_liquidity: Optional[AddLiquidity] = Field(None, alias="AddLiquidity")

    @model_validator(mode="after")
    def _exactly_one_variant(self) -> "ZapActionData":
        present = [
            v for v in (self.protocol_fee, self.aggregator_swap, self.add_liquidity) if v is not None
        ]
        if len(present) != 1:
            raise ValueError(
                "expected exactly one of ProtocolFee, AggregatorSwap, AddLiquidity"
            )
        return self

    @property
    def variant(self) -> str:
        if self.protocol_fee is not None:
            return "ProtocolFee"
        if self.aggregator_swap is not None:
            return "AggregatorSwap"
        return "AddLiquidity"


class ZapAction(OpenOceanModel):
    type: str
    data: ZapActionData


class ZapDetails(OpenOceanModel):
    initial_amount_usd: F64
    actions: list[ZapAction] = Field(default_factory=list)
    added_liquidity_usd: F64
    zap_impact: F64


class ZapRouteData(OpenOceanModel):
    chain_id: str
    pool_detail: Pool
    zap_details: ZapDetails
    route: str = Field(..., description="Encoded route, passed back to build_route")
    route_address: str


class ZapPermit(OpenOceanModel):
    token: str
    permit: str


class BuildRouteParams(OpenOceanModel):
    route: str
    deadline: str
    account: str
    permits: list[ZapPermit] = Field(default_factory=list)


class BuildRouteData(OpenOceanModel):
    zap_details: ZapDetails
    to: str
    value: str
    data: str


ZapRouteResponse = MsgResponse[ZapRouteData]
BuildRouteResponse = MsgResponse[BuildRouteData]
