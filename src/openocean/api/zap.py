"""Zap-in endpoints: provide concentrated liquidity from arbitrary tokens."""

from openocean.api.base import ApiNamespace
from openocean.chain import ChainLike
from openocean.models.zap import (
    BuildRouteParams,
    BuildRouteResponse,
    ZapRouteParams,
    ZapRouteResponse,
)


class ZapApi(ApiNamespace):
    async def route(self, chain: ChainLike, params: ZapRouteParams) -> ZapRouteResponse:
        """Compute a zap route; pass `data.route` to build_route."""
        return await self.client.post_json(
            f"/zap/{self.slug(chain)}/in/route", ZapRouteResponse, params
        )

    async def build_route(self, chain: ChainLike, params: BuildRouteParams) -> BuildRouteResponse:
        """Turn a zap route into a transaction to sign."""
        return await self.client.post_json(
            f"/zap/{self.slug(chain)}/in/route/build", BuildRouteResponse, params
        )
