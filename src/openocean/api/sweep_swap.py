"""Sweep swap: convert several input tokens into one output in a single transaction."""

from openocean.api.base import ApiNamespace
from openocean.chain import ChainLike
from openocean.models.sweep_swap import MultiSwapQuoteParams, MultiSwapQuoteResponse


class SweepSwapApi(ApiNamespace):
    async def multi_swap_quote(
        self, chain: ChainLike, params: MultiSwapQuoteParams
    ) -> MultiSwapQuoteResponse:
        # unversioned path, bare (non-enveloped) response
        return await self.client.post_json(
            f"/{self.slug(chain)}/multi_swap_route", MultiSwapQuoteResponse, params
        )
