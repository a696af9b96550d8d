"""Gasless swap endpoints: the relayer pays gas, fees come out of the input token."""

from openocean.api.base import ApiNamespace
from openocean.chain import ChainLike
from openocean.models.gasless import (
    GaslessQuoteParams,
    GaslessQuoteResponse,
    GaslessSwapParams,
    GaslessSwapResponse,
    OrderStatusResponse,
)


class GaslessApi(ApiNamespace):
    async def quote(self, chain: ChainLike, params: GaslessQuoteParams) -> GaslessQuoteResponse:
        return await self.client.get_json(
            f"/v1/{self.slug(chain)}/gasless/quote", GaslessQuoteResponse, params
        )

    async def swap(self, chain: ChainLike, params: GaslessSwapParams) -> GaslessSwapResponse:
        """Submit a signed gasless order to the relayer."""
        return await self.client.post_json(
            f"/v1/{self.slug(chain)}/gasless/swap", GaslessSwapResponse, params
        )

    async def get_order_status(self, chain: ChainLike, order_hash: str) -> OrderStatusResponse:
        return await self.client.get_json(
            f"/v1/{self.slug(chain)}/gasless/order",
            OrderStatusResponse,
            {"orderHash": order_hash},
        )
