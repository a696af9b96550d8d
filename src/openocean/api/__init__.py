"""Endpoint namespaces, one per API family."""

from openocean.api.base import ApiNamespace
from openocean.api.dca import DcaApi
from openocean.api.gasless import GaslessApi
from openocean.api.limit_order import LimitOrderApi
from openocean.api.swap import SwapApi
from openocean.api.sweep_swap import SweepSwapApi
from openocean.api.ticket import TicketApi
from openocean.api.zap import ZapApi

__all__ = [
    "ApiNamespace",
    "DcaApi",
    "GaslessApi",
    "LimitOrderApi",
    "SwapApi",
    "SweepSwapApi",
    "TicketApi",
    "ZapApi",
]
