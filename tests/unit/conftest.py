"""Общие fixtures для unit тестов ledger."""

import pytest

from rwa_ledger import AssetLedgerEngine, HostLedger


OWNER = "SP-OWNER"
ALICE = "SP-ALICE"
BOB = "SP-BOB"
START_HEIGHT = 100


@pytest.fixture
def host() -> HostLedger:
    """Хост на высоте START_HEIGHT."""
    return HostLedger(block_height=START_HEIGHT)


@pytest.fixture
def engine(host: HostLedger) -> AssetLedgerEngine:
    """Engine, развёрнутый OWNER."""
    return AssetLedgerEngine(host, OWNER)


@pytest.fixture
def asset_id(engine: AssetLedgerEngine, host: HostLedger) -> int:
    """Актив REAL_ESTATE с эмиссией 1000 у OWNER."""
    return engine.register(host.context(OWNER), "REAL_ESTATE", "ipfs://x", 1000).unwrap()
