#!/usr/bin/env python3
"""Query gas prices and token counts across several chains concurrently."""

import argparse
import asyncio
import logging

from openocean import Chain, OpenOceanClient, OpenOceanError
from openocean.settings import get_settings

GAS_CHAINS = [
    (Chain.ETH, "Ethereum"),
    (Chain.BSC, "BNB Chain"),
    (Chain.ZKSYNC_ERA, "zkSync Era"),
    (Chain.POLYGON, "Polygon"),
    (Chain.BASE, "Base"),
    (Chain.LINEA, "Linea"),
    (Chain.FANTOM, "Fantom"),
    (Chain.AVALANCHE, "Avalanche"),
    (Chain.ARBITRUM, "Arbitrum"),
    (Chain.OPTIMISM, "Optimism"),
    (Chain.CRONOS, "Cronos"),
    (Chain.GNOSIS, "Gnosis"),
]

TOKEN_CHAINS = [
    (Chain.ETH, "Ethereum"),
    (Chain.BSC, "BNB Chain"),
    (Chain.ARBITRUM, "Arbitrum One"),
    (Chain.POLYGON, "Polygon"),
]

POPULAR = {"eth", "btc", "usdt", "usdc", "bnb", "matic"}


async def gas_line(client: OpenOceanClient, chain: Chain, name: str) -> str:
    try:
        gas = await client.swap.get_gas_price(chain)
    except OpenOceanError as e:
        return f"--- {name} ---\n  Failed: {e}"
    if gas.data is None:
        return f"--- {name} ---\n  API error {gas.code}: {gas.message}"
    return (
        f"--- {name} ---\n"
        f"  Standard: {gas.data.standard}\n"
        f"  Fast:     {gas.data.fast}\n"
        f"  Instant:  {gas.data.instant}"
    )


async def token_line(client: OpenOceanClient, chain: Chain, name: str) -> str:
    try:
        tokens = await client.get_token_list(chain)
    except OpenOceanError as e:
        return f"--- {name} ---\n  Failed: {e}"
    popular = [t for t in tokens.data if t.symbol.lower() in POPULAR][:3]
    lines = [f"--- {name} ---", f"  Total tokens: {len(tokens.data)}"]
    lines += [f"    - {t.name} ({t.symbol})" for t in popular]
    return "\n".join(lines)


async def main(timeout: float) -> None:
    settings = get_settings()
    config = settings.client_config().model_copy(update={"timeout": timeout})

    async with OpenOceanClient(config) as client:
        print("Gas prices:\n")
        for line in await asyncio.gather(*(gas_line(client, c, n) for c, n in GAS_CHAINS)):
            print(line + "\n")

        print("Token counts:\n")
        for line in await asyncio.gather(*(token_line(client, c, n) for c, n in TOKEN_CHAINS)):
            print(line + "\n")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="OpenOcean multi-chain demo")
    parser.add_argument("--timeout", type=float, default=30.0, help="Request timeout (s)")
    args = parser.parse_args()

    logging.basicConfig(level=get_settings().log_level)
    asyncio.run(main(args.timeout))
