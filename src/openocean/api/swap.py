"""Swap endpoints: quotes, calldata, token and dex lists, gas, transactions.

API docs: https://apis.openocean.finance/developer/apis/swap-api/api-v4
"""

from typing import Optional

from openocean.api.base import ApiNamespace
from openocean.chain import ChainLike
from openocean.models.swap import (
    DecodeInputDataResponse,
    DexListResponse,
    GasPriceResponse,
    GasResponse,
    QuoteParams,
    QuoteResponse,
    ReverseQuoteParams,
    ReverseQuoteResponse,
    SwapQuoteParams,
    SwapQuoteResponse,
    TokenListResponse,
    TransactionResponse,
)


class SwapApi(ApiNamespace):
    """v4 swap endpoints."""

    async def quote(self, chain: ChainLike, params: QuoteParams) -> QuoteResponse:
        """Best route and output amount for an exact input amount."""
        return await self.client.get_json(f"/v4/{self.slug(chain)}/quote", QuoteResponse, params)

    async def reverse_quote(
        self, chain: ChainLike, params: ReverseQuoteParams
    ) -> ReverseQuoteResponse:
        """Input amount required for a desired output amount."""
        return await self.client.get_json(
            f"/v4/{self.slug(chain)}/reverseQuote", ReverseQuoteResponse, params
        )

    async def swap_quote(self, chain: ChainLike, params: SwapQuoteParams) -> SwapQuoteResponse:
        """Quote plus the transaction (to, data, value) to sign and send."""
        return await self.client.get_json(f"/v4/{self.slug(chain)}/swap", SwapQuoteResponse, params)

    async def get_token_list(self, chain: ChainLike) -> TokenListResponse:
        return await self.client.get_json(f"/v4/{self.slug(chain)}/tokenList", TokenListResponse)

    async def get_price(self, chain: ChainLike) -> GasResponse:
        """Legacy gas tiers (standard/fast/instant) as plain numbers."""
        return await self.client.get_json(f"/v4/{self.slug(chain)}/gasPrice", GasResponse)

    async def get_gas_price(self, chain: ChainLike) -> GasPriceResponse:
        """Gas tiers as plain prices or EIP-1559 quotes, depending on the chain."""
        return await self.client.get_json(f"/v4/{self.slug(chain)}/gasPrice", GasPriceResponse)

    async def get_dex_list(self, chain: ChainLike) -> DexListResponse:
        return await self.client.get_json(f"/v4/{self.slug(chain)}/dexList", DexListResponse)

    async def get_transaction(self, chain: ChainLike, tx_hash: str) -> TransactionResponse:
        """Look up a swap transaction executed through OpenOcean."""
        return await self.client.get_json(
            f"/v4/{self.slug(chain)}/getTransaction", TransactionResponse, {"hash": tx_hash}
        )

    async def decode_input_data(
        self, chain: ChainLike, data: str, method: Optional[str] = "swap"
    ) -> DecodeInputDataResponse:
        """Decode router calldata. The decoded payload is returned as plain JSON."""
        return await self.client.get_json(
            f"/v4/{self.slug(chain)}/decodeInputData",
            DecodeInputDataResponse,
            {"data": data, "method": method},
        )
