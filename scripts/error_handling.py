#!/usr/bin/env python3
"""Show how each error kind surfaces to the caller."""

import argparse
import asyncio
import logging

from openocean import (
    ClientConfig,
    HttpError,
    InternalError,
    NetworkError,
    OpenOceanClient,
    ParseError,
)
from openocean.settings import get_settings

HTTP_HINTS = {
    400: "Bad request: check the request parameters.",
    401: "Unauthorized: check credentials.",
    403: "Forbidden: no access to this resource.",
    404: "Not found: the resource does not exist.",
    429: "Rate limited: slow down.",
}


def describe(error: Exception) -> None:
    """Print what kind of failure occurred and what it carries."""
    match error:
        case NetworkError():
            kind = "timeout" if error.is_timeout else "connection"
            print(f"  Network error ({kind}): {error.message}")
        case HttpError(status=status):
            print(f"  HTTP error: status={status} content-type={error.content_type}")
            print(f"  Body: {error.body[:200]}")
            if status >= 500:
                print("  Server error: the API is having issues.")
            else:
                print(f"  {HTTP_HINTS.get(status, 'Unexpected HTTP status.')}")
        case ParseError():
            print(f"  Parse error at '{error.path}': {error.message}")
        case InternalError():
            print(f"  Internal error: {error.message}")
        case _:
            raise error


async def call(config: ClientConfig, chain: str) -> None:
    async with OpenOceanClient(config) as client:
        try:
            gas = await client.get_price(chain)
            print(f"  OK: standard={gas.data.standard} fast={gas.data.fast}")
        except (NetworkError, HttpError, ParseError, InternalError) as e:
            describe(e)


async def main(chain: str) -> None:
    settings = get_settings()

    print("1. Normal request:")
    await call(settings.client_config(), chain)

    print("\n2. Very short timeout:")
    await call(ClientConfig.builder().base_url(settings.base_url).timeout(0.001).build(), chain)

    print("\n3. Unreachable host:")
    await call(
        ClientConfig.builder().base_url("https://invalid-url-that-does-not-exist.invalid").timeout(5).build(),
        chain,
    )

    print("\n4. Unsupported chain:")
    await call(settings.client_config(), "not-a-chain")

    print("\n5. Malformed base URL:")
    try:
        ClientConfig.builder().base_url("not a url").build()
    except InternalError as e:
        describe(e)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="OpenOcean error handling demo")
    parser.add_argument("--chain", default=get_settings().chain, help="Chain slug or id")
    args = parser.parse_args()

    logging.basicConfig(level=get_settings().log_level)
    asyncio.run(main(args.chain))
