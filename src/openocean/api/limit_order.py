"""Limit order endpoints.

API docs: https://apis.openocean.finance/developer/apis/limit-order-api
"""

from typing import Optional

from openocean.api.base import ApiNamespace
from openocean.chain import ChainLike
from openocean.models.limit_order import (
    CancelLimitOrderParams,
    CancelLimitOrderResponse,
    CreateLimitOrderParams,
    CreateLimitOrderResponse,
    LimitOrdersQuery,
    LimitOrdersResponse,
)
from openocean.request import path_segment


class LimitOrderApi(ApiNamespace):
    async def create_order(
        self, chain: ChainLike, params: CreateLimitOrderParams
    ) -> CreateLimitOrderResponse:
        return await self.client.post_json(
            f"/v2/{self.slug(chain)}/limit-order", CreateLimitOrderResponse, params
        )

    async def cancel_order(
        self, chain: ChainLike, params: CancelLimitOrderParams
    ) -> CancelLimitOrderResponse:
        return await self.client.post_json(
            f"/v2/{self.slug(chain)}/limit-order/cancelLimitOrder", CancelLimitOrderResponse, params
        )

    async def get_orders_by_address(
        self,
        chain: ChainLike,
        address: str,
        params: Optional[LimitOrdersQuery] = None,
    ) -> LimitOrdersResponse:
        """Limit orders of a wallet, optionally filtered by status and paged."""
        return await self.client.get_json(
            f"/v2/{self.slug(chain)}/limit-order/address/{path_segment(address)}",
            LimitOrdersResponse,
            params,
        )
