"""Models for limit orders."""

from typing import Optional

from openocean.models.base import ApiResponse, OpenOceanModel
from openocean.types import U128, CommaSeparatedInts, JsonData


class CreateLimitOrderParams(OpenOceanModel):
    """Signed limit order as produced by the OpenOcean limit-order SDK."""

    maker_asset: str
    taker_asset: str
    maker_amount: str
    taker_amount: str
    expire_time: str
    order_maker: str
    signature: str
    referrer: Optional[str] = None
    referrer_fee: Optional[str] = None
    enabled_dex_ids: Optional[CommaSeparatedInts] = None
    disabled_dex_ids: Optional[CommaSeparatedInts] = None


class CancelLimitOrderParams(OpenOceanModel):
    order_hash: str
    signature: Optional[str] = None


class LimitOrdersQuery(OpenOceanModel):
    """Query for GET /v2/{chain}/limit-order/address/{address}."""

    page: Optional[int] = None
    limit: Optional[int] = None
    # comma-joined on the wire, e.g. statuses=1,2,5
    statuses: Optional[CommaSeparatedInts] = None
    sort_by: Optional[str] = None
    exclude: Optional[int] = None


class CancelLimitOrderData(OpenOceanModel):
    status: Optional[int] = None


class LimitOrderData(OpenOceanModel):
    maker_asset: str
    maker_asset_symbol: Optional[str] = None
    maker_asset_decimals: Optional[int] = None
    taker_asset: str
    taker_asset_symbol: Optional[str] = None
    taker_asset_decimals: Optional[int] = None
    salt: Optional[str] = None
    maker: Optional[str] = None


class LimitOrder(OpenOceanModel):
    maker_amount: U128
    taker_amount: U128
    order_hash: str
    signature: Optional[str] = None
    create_date_time: Optional[str] = None
    order_maker: str
    remaining_maker_amount: Optional[U128] = None
    maker_balance: Optional[U128] = None
    maker_allowance: Optional[U128] = None
    expire_time: Optional[str] = None
    statuses: int
    data: Optional[LimitOrderData] = None


CreateLimitOrderResponse = ApiResponse[JsonData]
CancelLimitOrderResponse = ApiResponse[CancelLimitOrderData]
LimitOrdersResponse = ApiResponse[list[LimitOrder]]
