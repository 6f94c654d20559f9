# ==============================================================================
# Osculate (KISS) Configuration
# ==============================================================================

import os

# --- Collection Identity ---
COLLECTION_NAME = "Osculate"
TICKER = "KISS"
DESCRIPTION = (
    "A chain of kisses. Every new token kisses the one minted before it "
    "and keeps a ciphertext of the address that minted it."
)

# --- Minting ---
#   Payments are counted in wei, the smallest denomination.
GWEI = 10 ** 9
MINT_PRICE = int(os.environ.get("OSCULATE_MINT_PRICE", GWEI))

# --- Genesis Token ---
GENESIS_TOKEN_ID = 0
GENESIS_CIPHER = "osculate"  # Placeholder: token #0 has no predecessor

# --- Address Cipher ---
CIPHER_LENGTH = 8
CIPHER_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"

# --- Heart Image ---
#   Only the heartbeat and the colour saturation depend on the kissed state.
UNKISSED_DURATION = "1.5"  # Resting heartbeat
KISSED_DURATION = "0.7"  # Racing heartbeat
UNKISSED_SATURATION = 0  # Percent: grey
KISSED_SATURATION = 30  # Percent: blushing
HEART_HUE = 350
HEART_LIGHTNESS = 60
IMAGE_SIZE = 400

# --- Paths ---
DATA_DIR = os.environ.get(
    "OSCULATE_DATA_DIR",
    os.path.expanduser("~/.osculate"),
)
LEDGER_FILE = os.path.join(DATA_DIR, "ledger.json")
