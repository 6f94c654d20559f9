"""
Osculate (KISS) - a chain of kisses.

Key Features:
- Sequentially numbered tokens, token #0 minted to the deployer
- Every mint "kisses" the previous token and records a ciphertext of
  the address that minted it
- Fully self-contained metadata: base64 JSON wrapping an inline SVG heart
- The heart beats slow and grey until kissed, then fast and rosy
"""

__version__ = "1.0.0"
__collection_name__ = "Osculate"
__ticker__ = "KISS"
