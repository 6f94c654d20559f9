"""Shared test fixtures for Osculate tests.

Addresses are the first well-known development accounts, so ciphertexts in
the tests can be checked against fixed values.
"""

import pytest

from osculate.config import GWEI
from osculate.ledger import MintLedger

DEPLOYER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
ADDR1 = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
ADDR2 = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
ADDR3 = "0x90F79bf6EB2c4f870365E785982E1f101E93b906"

PRICE = GWEI


@pytest.fixture
def ledger():
    """A fresh ledger with token #0 owned by DEPLOYER."""
    return MintLedger(DEPLOYER, mint_price=PRICE)


@pytest.fixture
def ledger_file(tmp_path):
    return str(tmp_path / "ledger.json")
