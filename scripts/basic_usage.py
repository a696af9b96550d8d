#!/usr/bin/env python3
"""Fetch gas prices and the token list for one chain."""

import argparse
import asyncio
import logging

from openocean import OpenOceanClient, OpenOceanError
from openocean.settings import get_settings


async def main(chain: str, limit: int) -> int:
    settings = get_settings()
    print("=== OpenOcean basic usage ===\n")

    async with OpenOceanClient(settings.client_config()) as client:
        print(f"Gas prices on {chain}...")
        try:
            gas = await client.get_price(chain)
            print(f"  Standard: {gas.data.standard} Gwei")
            print(f"  Fast:     {gas.data.fast} Gwei")
            print(f"  Instant:  {gas.data.instant} Gwei")
        except OpenOceanError as e:
            print(f"  Failed: {e}")

        print(f"\nToken list on {chain}...")
        try:
            tokens = await client.get_token_list(chain)
        except OpenOceanError as e:
            print(f"  Failed: {e}")
            return 1

        print(f"  {len(tokens.data)} tokens, first {limit}:")
        for i, token in enumerate(tokens.data[:limit], start=1):
            print(f"  {i}. {token.name} ({token.symbol})")
            print(f"     Address:  {token.address}")
            print(f"     Decimals: {token.decimals}")

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="OpenOcean basic usage")
    parser.add_argument("--chain", default=get_settings().chain, help="Chain slug or id")
    parser.add_argument("--limit", type=int, default=5, help="Tokens to print")
    args = parser.parse_args()

    logging.basicConfig(level=get_settings().log_level)
    raise SystemExit(asyncio.run(main(args.chain, args.limit)))
