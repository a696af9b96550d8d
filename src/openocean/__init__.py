"""Async typed client for the OpenOcean DEX aggregation API.

Endpoint families:
- swap: quotes, reverse quotes, swap calldata, token/dex lists, gas prices
- gasless: relayer-paid swaps
- dca: dollar-cost averaging orders
- limit_order: limit orders
- zap: zap-in liquidity routes
- sweep_swap: many-to-one swaps
- ticket: support tickets
"""

__version__ = "0.1.0"

from openocean.chain import Chain, resolve_chain
from openocean.client import OpenOceanClient
from openocean.config import ClientConfig, ClientConfigBuilder
from openocean.errors import (
    HttpError,
    InternalError,
    NetworkError,
    OpenOceanError,
    ParseError,
)
from openocean.models.base import ApiResponse, LogicalFailure, MsgResponse, Success
from openocean.types import F64, U128, CommaSeparatedInts, decode_f64, decode_u128

__all__ = [
    "__version__",
    # Client
    "OpenOceanClient",
    "ClientConfig",
    "ClientConfigBuilder",
    # Chains
    "Chain",
    "resolve_chain",
    # Errors
    "OpenOceanError",
    "NetworkError",
    "HttpError",
    "ParseError",
    "InternalError",
    # Envelopes
    "ApiResponse",
    "MsgResponse",
    "Success",
    "LogicalFailure",
    # Numeric types
    "U128",
    "F64",
    "CommaSeparatedInts",
    "decode_u128",
    "decode_f64",
]
