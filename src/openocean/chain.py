"""Supported OpenOcean networks.

Chain members map to the lowercase slug used in URL paths through a static
table. The table is checked for completeness at import time.

Reference: https://apis.openocean.finance/developer/apis/supported-chains
"""

from enum import Enum
from typing import Optional, Union

from openocean.errors import InternalError


class Chain(str, Enum):
    """Networks supported by the OpenOcean API."""

    ETH = "eth"
    BSC = "bsc"
    ZKSYNC_ERA = "zksync"
    POLYGON = "polygon"
    BASE = "base"
    LINEA = "linea"
    FANTOM = "fantom"
    AVALANCHE = "avax"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    MOONRIVER = "moonriver"
    AURORA = "aurora"
    CRONOS = "cronos"
    HARMONY = "harmony"
    KAVA = "kava"
    METIS_ANDROMEDA = "metis"
    CELO = "celo"
    TELOS = "telos"
    POLYGON_ZKEVM = "polygon_zkevm"
    GNOSIS = "gnosis"
    OPBNB = "opbnb"
    MANTLE = "mantle"
    MANTA = "manta"
    SCROLL = "scroll"
    BLAST = "blast"
    MODE = "mode"
    ROOTSTOCK = "rootstock"
    SEI = "sei"
    GRAVITY = "gravity"
    APECHAIN = "ape"
    SONIC = "sonic"
    BERACHAIN = "bera"
    MONAD_TESTNET = "monad"
    UNICHAIN = "uni"
    FLARE = "flare"
    SWELL = "swell"
    HYPER_EVM = "hyperevm"
    PLUME = "plume"
    TAC = "tac"

    # Non-EVM
    SOLANA = "solana"
    ONTOLOGY = "ont"
    NEAR = "near"
    STARKNET = "starknet"

    @property
    def slug(self) -> str:
        """Path segment used by the API for this chain."""
        return CHAIN_SLUGS[self]

    @property
    def chain_id(self) -> Optional[int]:
        """Numeric EVM chain id, None for non-EVM networks."""
        return CHAIN_IDS.get(self)

    @property
    def is_evm(self) -> bool:
        return self not in NON_EVM_CHAINS

    def __str__(self) -> str:
        return self.slug


# ======================
# Slug table
# ======================

CHAIN_SLUGS: dict[Chain, str] = {
    Chain.ETH: "eth",
    Chain.BSC: "bsc",
    Chain.ZKSYNC_ERA: "zksync",
    Chain.POLYGON: "polygon",
    Chain.BASE: "base",
    Chain.LINEA: "linea",
    Chain.FANTOM: "fantom",
    Chain.AVALANCHE: "avax",
    Chain.ARBITRUM: "arbitrum",
    Chain.OPTIMISM: "optimism",
    Chain.MOONRIVER: "moonriver",
    Chain.AURORA: "aurora",
    Chain.CRONOS: "cronos",
    Chain.HARMONY: "harmony",
    Chain.KAVA: "kava",
    Chain.METIS_ANDROMEDA: "metis",
    Chain.CELO: "celo",
    Chain.TELOS: "telos",
    Chain.POLYGON_ZKEVM: "polygon_zkevm",
    Chain.GNOSIS: "gnosis",
    Chain.OPBNB: "opbnb",
    Chain.MANTLE: "mantle",
    Chain.MANTA: "manta",
    Chain.SCROLL: "scroll",
    Chain.BLAST: "blast",
    Chain.MODE: "mode",
    Chain.ROOTSTOCK: "rootstock",
    Chain.SEI: "sei",
    Chain.GRAVITY: "gravity",
    Chain.APECHAIN: "ape",
    Chain.SONIC: "sonic",
    Chain.BERACHAIN: "bera",
    Chain.MONAD_TESTNET: "monad",
    Chain.UNICHAIN: "uni",
    Chain.FLARE: "flare",
    Chain.SWELL: "swell",
    Chain.HYPER_EVM: "hyperevm",
    Chain.PLUME: "plume",
    Chain.TAC: "tac",
    Chain.SOLANA: "solana",
    Chain.ONTOLOGY: "ont",
    Chain.NEAR: "near",
    Chain.STARKNET: "starknet",
}

NON_EVM_CHAINS = frozenset({Chain.SOLANA, Chain.ONTOLOGY, Chain.NEAR, Chain.STARKNET})

# ======================
# EVM chain ids
# ======================

CHAIN_IDS: dict[Chain, int] = {
    Chain.ETH: 1,
    Chain.BSC: 56,
    Chain.ZKSYNC_ERA: 324,
    Chain.POLYGON: 137,
    Chain.BASE: 8453,
    Chain.LINEA: 59144,
    Chain.FANTOM: 250,
    Chain.AVALANCHE: 43114,
    Chain.ARBITRUM: 42161,
    Chain.OPTIMISM: 10,
    Chain.MOONRIVER: 1285,
    Chain.AURORA: 1313161554,
    Chain.CRONOS: 25,
    Chain.HARMONY: 1666600000,
    Chain.KAVA: 2222,
    Chain.METIS_ANDROMEDA: 1088,
    Chain.CELO: 42220,
    Chain.TELOS: 40,
    Chain.POLYGON_ZKEVM: 1101,
    Chain.GNOSIS: 100,
    Chain.OPBNB: 204,
    Chain.MANTLE: 5000,
    Chain.MANTA: 169,
    Chain.SCROLL: 534352,
    Chain.BLAST: 81457,
    Chain.MODE: 34443,
    Chain.ROOTSTOCK: 30,
    Chain.SEI: 1329,
    Chain.GRAVITY: 1625,
    Chain.APECHAIN: 33139,
    Chain.SONIC: 146,
    Chain.BERACHAIN: 80094,
    Chain.MONAD_TESTNET: 10143,
    Chain.UNICHAIN: 130,
    Chain.FLARE: 14,
    Chain.SWELL: 1923,
    Chain.HYPER_EVM: 999,
    Chain.PLUME: 98866,
    Chain.TAC: 239,
}

# Alternative spellings accepted by resolve_chain
CHAIN_ALIASES: dict[str, Chain] = {
    "ethereum": Chain.ETH,
    "bnb": Chain.BSC,
    "avalanche": Chain.AVALANCHE,
    "matic": Chain.POLYGON,
    "zksync_era": Chain.ZKSYNC_ERA,
    "polygonzkevm": Chain.POLYGON_ZKEVM,
    "apechain": Chain.APECHAIN,
    "berachain": Chain.BERACHAIN,
    "unichain": Chain.UNICHAIN,
    "ontology": Chain.ONTOLOGY,
}


def _check_tables() -> None:
    missing = [chain.name for chain in Chain if chain not in CHAIN_SLUGS]
    if missing:
        raise RuntimeError(f"Chains missing from CHAIN_SLUGS: {', '.join(missing)}")
    missing_ids = [
        chain.name for chain in Chain if chain not in CHAIN_IDS and chain not in NON_EVM_CHAINS
    ]
    if missing_ids:
        raise RuntimeError(f"EVM chains missing from CHAIN_IDS: {', '.join(missing_ids)}")


_check_tables()

_BY_SLUG: dict[str, Chain] = {slug: chain for chain, slug in CHAIN_SLUGS.items()}
_BY_ID: dict[int, Chain] = {chain_id: chain for chain, chain_id in CHAIN_IDS.items()}

ChainLike = Union[Chain, str, int]


def resolve_chain(value: ChainLike) -> Chain:
    """Translate a chain identifier into a Chain member.

    Args:
        value: Chain member, slug ("bsc"), alias ("ethereum") or numeric
            chain id (56 or "56")

    Returns:
        The matching Chain

    Raises:
        InternalError: if the identifier is not supported
    """
    if isinstance(value, Chain):
        return value

    # bool is an int subclass and never a valid chain id
    if isinstance(value, int) and not isinstance(value, bool):
        chain = _BY_ID.get(value)
        if chain is not None:
            return chain
    elif isinstance(value, str):
        key = value.strip().lower()
        if key.isdigit():
            chain = _BY_ID.get(int(key))
        else:
            chain = _BY_SLUG.get(key) or CHAIN_ALIASES.get(key)
        if chain is not None:
            return chain

    raise InternalError(f"Unsupported chain: {value}")
