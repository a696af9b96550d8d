"""Models for DCA (dollar-cost averaging) orders."""

from typing import Optional

from pydantic import Field

from openocean.models.base import CodeResponse, MsgResponse, OpenOceanModel
from openocean.types import U128, CommaSeparatedInts


class DcaCreateParams(OpenOceanModel):
    """Signed DCA order.

    `time` is the interval between executions in seconds and `times` the
    number of executions.
    """

    maker_amount: str
    signature: str
    order_maker: str
    maker_asset: str
    taker_asset: str
    time: int
    times: int
    min_price: str
    max_price: str
    referrer: str
    referrer_fee: str
    enabled_dex_ids: Optional[CommaSeparatedInts] = None
    disabled_dex_ids: Optional[CommaSeparatedInts] = None


class DcaCancelParams(OpenOceanModel):
    order_hash: str
    signature: str


DcaCreateResponse = CodeResponse
DcaCancelResponse = CodeResponse


class DcaOrderData(OpenOceanModel):
    """Asset metadata attached to a DCA order."""

    maker_asset: str
    maker_asset_symbol: str
    maker_asset_decimals: int
    maker_asset_icon: Optional[str] = None
    taker_asset: str
    taker_asset_symbol: str
    taker_asset_decimals: int
    taker_asset_icon: Optional[str] = None


class DcaOrder(OpenOceanModel):
    maker_amount: U128
    taker_amount: U128
    order_hash: str
    create_date_time: str
    order_maker: str
    expire_time: str
    statuses: int
    time: int
    times: int
    have_filled: Optional[str] = None
    min_price: Optional[str] = None
    max_price: Optional[str] = None
    data: DcaOrderData = Field(..., description="Asset metadata")


class DcaOrderFill(OpenOceanModel):
    order_hash: str
    tx_hash: str
    filled_order_time: str
    payment: str
    payment_value: str
    status: str
    reason: Optional[str] = None


DcaOrdersResponse = MsgResponse[list[DcaOrder]]
DcaOrderFillsResponse = MsgResponse[list[DcaOrderFill]]
