"""
Token ledger for Osculate.

Implements:
- Token records (owner, kissed flag, previous-owner ciphertext)
- Genesis token creation
- Minting with the "no self-kiss" rule and the kiss hand-off
- Descriptor (token URI) queries
- JSON persistence
"""

import json
import logging
import os
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

from osculate.config import (
    COLLECTION_NAME,
    GENESIS_CIPHER,
    GENESIS_TOKEN_ID,
    LEDGER_FILE,
    MINT_PRICE,
    TICKER,
)
from osculate.crypto import address_cipher, address_key, same_address
from osculate.errors import (
    InsufficientFundsError,
    MintError,
    SelfKissError,
    TokenNotFoundError,
)
from osculate.metadata import build_descriptor, encode_descriptor

logger = logging.getLogger("osculate.ledger")


# ===========================================================================
# Token
# ===========================================================================

@dataclass
class Token:
    """A single kiss."""

    token_id: int
    owner: str
    previous_owner_cipher: str
    kissed: bool = False

    # --- Serialisation -------------------------------------------------------

    def serialize(self) -> dict:
        return {
            "token_id": self.token_id,
            "owner": self.owner,
            "previous_owner_cipher": self.previous_owner_cipher,
            "kissed": self.kissed,
        }

    @classmethod
    def deserialize(cls, data: dict) -> "Token":
        return cls(
            token_id=data["token_id"],
            owner=data["owner"],
            previous_owner_cipher=data["previous_owner_cipher"],
            kissed=data.get("kissed", False),
        )

    def __repr__(self) -> str:
        state = "kissed" if self.kissed else "unkissed"
        return (
            f"<Token #{self.token_id} owner={self.owner[:12]}… "
            f"cipher={self.previous_owner_cipher} {state}>"
        )


def create_genesis_token(deployer: str) -> Token:
    """
    Create token #0.

    It has no predecessor, so it carries the collection's name in place of
    a ciphertext.
    """
    address_key(deployer)  # validate
    return Token(
        token_id=GENESIS_TOKEN_ID,
        owner=deployer,
        previous_owner_cipher=GENESIS_CIPHER,
    )


# ===========================================================================
# Ledger
# ===========================================================================

class MintLedger:
    """
    The Osculate token ledger.

    Maintains:
    - Ordered list of tokens (index == token id)
    - Owner -> token ids reverse lookup
    - Total payments collected by mints
    """

    def __init__(self, deployer: str, mint_price: int = MINT_PRICE):
        self.owner = deployer
        self.mint_price = mint_price
        self.balance = 0
        self.tokens: List[Token] = []
        self.owner_index: Dict[bytes, List[int]] = {}
        self._lock = threading.Lock()

        # Initialise with genesis token
        self._append_token(create_genesis_token(deployer))

    # --- Properties ----------------------------------------------------------

    @property
    def tip(self) -> Token:
        """The most recently minted token: the only one that can be kissed."""
        return self.tokens[-1]

    # --- Minting -------------------------------------------------------------

    def validate_mint(self, requester: str, payment: int):
        """Raise the MintError a mint would fail with, if any."""
        if payment < self.mint_price:
            raise InsufficientFundsError(payment, self.mint_price)

        # Only the latest owner is compared, not the whole history.
        if same_address(requester, self.tip.owner):
            raise SelfKissError(requester)

    def mint(self, requester: str, payment: int) -> int:
        """
        Mint the next token to ``requester``.

        The current tip gets kissed and the new token records the cipher of
        the tip's owner.  Returns the new token id.
        """
        with self._lock:
            try:
                self.validate_mint(requester, payment)
            except MintError as e:
                logger.warning(f"Mint by {requester} rejected: {e}")
                raise

            previous = self.tip
            token = Token(
                token_id=len(self.tokens),
                owner=requester,
                previous_owner_cipher=address_cipher(previous.owner),
            )
            previous.kissed = True
            self._append_token(token)
            self.balance += payment

        logger.info(
            f"💋 Token #{token.token_id} minted to {requester}, "
            f"kissed #{previous.token_id} (cipher {token.previous_owner_cipher})"
        )
        return token.token_id

    def _append_token(self, token: Token):
        """Internal: append token and update the owner index."""
        self.tokens.append(token)
        key = address_key(token.owner)
        self.owner_index.setdefault(key, []).append(token.token_id)

    # --- Queries -------------------------------------------------------------

    def get_supply(self) -> int:
        return len(self.tokens)

    def get_token(self, token_id: int) -> Token:
        if 0 <= token_id < len(self.tokens):
            return self.tokens[token_id]
        raise TokenNotFoundError(token_id)

    def owner_of(self, token_id: int) -> str:
        return self.get_token(token_id).owner

    def tokens_of(self, address: str) -> List[int]:
        return list(self.owner_index.get(address_key(address), []))

    def balance_of(self, address: str) -> int:
        return len(self.owner_index.get(address_key(address), []))

    def token_uri(self, token_id: int) -> str:
        """The token's descriptor as a base64 JSON data URI."""
        return encode_descriptor(build_descriptor(self.get_token(token_id)))

    def get_info(self) -> dict:
        return {
            "collection": f"{COLLECTION_NAME} ({TICKER})",
            "owner": self.owner,
            "supply": self.get_supply(),
            "kissed": sum(1 for t in self.tokens if t.kissed),
            "tip": self.tip.token_id,
            "mint_price": self.mint_price,
            "balance": self.balance,
        }

    # --- Persistence ---------------------------------------------------------

    def serialize(self) -> dict:
        return {
            "owner": self.owner,
            "mint_price": self.mint_price,
            "balance": self.balance,
            "tokens": [token.serialize() for token in self.tokens],
        }

    def save(self, filepath: Optional[str] = None):
        """Save the ledger to a JSON file."""
        filepath = filepath or LEDGER_FILE
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, "w") as f:
            json.dump(self.serialize(), f, indent=2)
        logger.debug(f"Ledger saved ({self.get_supply()} tokens) → {filepath}")

    @classmethod
    def load(cls, filepath: Optional[str] = None) -> "MintLedger":
        """Load a ledger from a JSON file.  Tokens are restored verbatim."""
        filepath = filepath or LEDGER_FILE
        with open(filepath, "r") as f:
            data = json.load(f)

        if "owner" not in data:
            raise ValueError(f"Ledger file has no owner: {filepath}")
        try:
            tokens = [Token.deserialize(t) for t in data.get("tokens", [])]
        except KeyError as e:
            raise ValueError(f"Ledger file token is missing {e}: {filepath}") from e
        if not tokens:
            raise ValueError(f"Ledger file has no genesis token: {filepath}")
        for expected_id, token in enumerate(tokens):
            if token.token_id != expected_id:
                raise ValueError(
                    f"Ledger file out of order: expected token #{expected_id}, "
                    f"got #{token.token_id}"
                )
            # Every token but the tip has been kissed by its successor.
            if token.kissed != (expected_id < len(tokens) - 1):
                state = "unkissed" if expected_id < len(tokens) - 1 else "kissed"
                raise ValueError(
                    f"Ledger file breaks the kiss chain: token #{expected_id} is {state}"
                )

        ledger = cls.__new__(cls)
        ledger.owner = data["owner"]
        ledger.mint_price = data.get("mint_price", MINT_PRICE)
        ledger.balance = data.get("balance", 0)
        ledger.tokens = []
        ledger.owner_index = {}
        ledger._lock = threading.Lock()
        for token in tokens:
            ledger._append_token(token)

        logger.debug(f"Ledger loaded ({ledger.get_supply()} tokens) from {filepath}")
        return ledger

    def __repr__(self) -> str:
        return f"<MintLedger supply={self.get_supply()} tip=#{self.tip.token_id}>"
