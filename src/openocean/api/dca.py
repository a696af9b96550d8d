"""DCA order endpoints.

API docs: https://apis.openocean.finance/developer/apis/dca-api
"""

from openocean.api.base import ApiNamespace
from openocean.chain import ChainLike
from openocean.models.dca import (
    DcaCancelParams,
    DcaCancelResponse,
    DcaCreateParams,
    DcaCreateResponse,
    DcaOrderFillsResponse,
    DcaOrdersResponse,
)
from openocean.request import path_segment


class DcaApi(ApiNamespace):
    """Create, cancel and list DCA orders."""

    async def create_order(self, chain: ChainLike, params: DcaCreateParams) -> DcaCreateResponse:
        return await self.client.post_json(
            f"/v2/{self.slug(chain)}/dca/swap", DcaCreateResponse, params
        )

    async def cancel_order(self, chain: ChainLike, params: DcaCancelParams) -> DcaCancelResponse:
        return await self.client.post_json(
            f"/v2/{self.slug(chain)}/dca/cancel", DcaCancelResponse, params
        )

    async def get_orders(self, chain: ChainLike, address: str) -> DcaOrdersResponse:
        """All DCA orders created by a wallet."""
        return await self.client.get_json(
            f"/v2/{self.slug(chain)}/dca/address/{path_segment(address)}", DcaOrdersResponse
        )

    async def get_order_fills(self, chain: ChainLike, order_hash: str) -> DcaOrderFillsResponse:
        """Executions of one DCA order."""
        return await self.client.get_json(
            f"/v2/{self.slug(chain)}/dca/fill/{path_segment(order_hash)}", DcaOrderFillsResponse
        )
