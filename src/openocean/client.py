"""Async OpenOcean API client.

One client owns one pooled httpx.AsyncClient and may be shared by any number
of concurrent calls. Each call issues exactly one HTTP request; nothing is
retried or cached.

API docs: https://apis.openocean.finance/developer/apis
"""

import logging
from typing import Optional, TypeVar

import httpx

from openocean.api.dca import DcaApi
from openocean.api.gasless import GaslessApi
from openocean.api.limit_order import LimitOrderApi
from openocean.api.swap import SwapApi
from openocean.api.sweep_swap import SweepSwapApi
from openocean.api.ticket import TicketApi
from openocean.api.zap import ZapApi
from openocean.chain import ChainLike
from openocean.config import ClientConfig
from openocean.errors import TIMEOUT_MESSAGE, NetworkError
from openocean.models.swap import GasResponse, TokenListResponse
from openocean.request import Params, RequestDescriptor, build_get, build_post
from openocean.response import decode_response

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OpenOceanClient:
    """Typed client for the OpenOcean aggregation API.

    Endpoint families are exposed as namespaces:

        async with OpenOceanClient() as client:
            quote = await client.swap.quote("bsc", QuoteParams(...))
            orders = await client.limit_order.get_orders_by_address("bsc", address)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration (defaults to the production origin)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.config = config or ClientConfig()
        self.base_url = self.config.url

        headers = {"Accept": "application/json"}
        if self.config.user_agent:
            headers["User-Agent"] = self.config.user_agent

        self._http = httpx.AsyncClient(
            timeout=self.config.timeout,
            headers=headers,
            transport=transport,
        )

        self.swap = SwapApi(self)
        self.gasless = GaslessApi(self)
        self.dca = DcaApi(self)
        self.limit_order = LimitOrderApi(self)
        self.zap = ZapApi(self)
        self.sweep_swap = SweepSwapApi(self)
        self.ticket = TicketApi(self)

    async def __aenter__(self) -> "OpenOceanClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False

    async def aclose(self) -> None:
        """Close the pooled transport."""
        await self._http.aclose()

    async def send(self, request: RequestDescriptor, shape: type[T]) -> T:
        """Perform the fetch stage and decode the response into `shape`.

        Raises:
            NetworkError: if no HTTP response was received
            HttpError: for non-2xx statuses
            ParseError: if the body does not match `shape`
        """
        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self._http.request(
                request.method,
                request.url,
                params=request.params,
                json=request.json,
            )
        except httpx.TimeoutException as e:
            raise NetworkError(TIMEOUT_MESSAGE) from e
        except httpx.RequestError as e:
            raise NetworkError(str(e) or type(e).__name__) from e

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return decode_response(response, shape)

    async def get_json(self, path: str, shape: type[T], params: Params = None) -> T:
        """GET `path` with query parameters and decode the body."""
        return await self.send(build_get(self.base_url, path, params), shape)

    async def post_json(self, path: str, shape: type[T], body: Params = None) -> T:
        """POST a JSON body to `path` and decode the response."""
        return await self.send(build_post(self.base_url, path, body), shape)

    # ======================
    # Shortcuts
    # ======================

    async def get_token_list(self, chain: ChainLike) -> TokenListResponse:
        """Token list for a chain. Same as client.swap.get_token_list."""
        return await self.swap.get_token_list(chain)

    async def get_price(self, chain: ChainLike) -> GasResponse:
        """Gas price tiers for a chain. Same as client.swap.get_price."""
        return await self.swap.get_price(chain)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.config.base_url!r})"

