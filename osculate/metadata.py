"""
Token metadata for Osculate.

A token's descriptor is a small JSON document:

    {
      "name": "Osculate #3",
      "description": "...",
      "image": "data:image/svg+xml,<svg ...>",
      "attributes": [
        {"trait_type": "Previous Token Ciphertext", "value": "..."},
        {"trait_type": "Kissed", "value": "yes" | "no"}
      ]
    }

served as ``data:application/json;base64,<base64 of the JSON>``.  The image
is a nested data URI holding the SVG text with only ``%`` and ``#`` escaped,
not base64.
"""

import base64
import json
from typing import Dict, List
from urllib.parse import unquote

from osculate.config import COLLECTION_NAME, DESCRIPTION
from osculate.svg import render_svg

JSON_URI_PREFIX = "data:application/json;base64,"
SVG_URI_PREFIX = "data:image/svg+xml,"

CIPHER_TRAIT = "Previous Token Ciphertext"
KISSED_TRAIT = "Kissed"


# ---------------------------------------------------------------------------
# Image data URI
# ---------------------------------------------------------------------------

def svg_to_data_text(svg: str) -> str:
    """Escape an SVG document for use after ``data:image/svg+xml,``."""
    return svg.replace("%", "%25").replace("#", "%23").replace("\n", "")


def svg_data_uri(svg: str) -> str:
    return SVG_URI_PREFIX + svg_to_data_text(svg)


# ---------------------------------------------------------------------------
# Descriptor
# ---------------------------------------------------------------------------

def build_attributes(previous_owner_cipher: str, kissed: bool) -> List[dict]:
    # Order matters: consumers read these positionally.
    return [
        {"trait_type": CIPHER_TRAIT, "value": previous_owner_cipher},
        {"trait_type": KISSED_TRAIT, "value": "yes" if kissed else "no"},
    ]


def build_descriptor(token) -> dict:
    """
    Assemble the descriptor for a token.

    ``token`` needs ``token_id``, ``previous_owner_cipher`` and ``kissed``.
    """
    return {
        "name": f"{COLLECTION_NAME} #{token.token_id}",
        "description": DESCRIPTION,
        "image": svg_data_uri(render_svg(token.kissed)),
        "attributes": build_attributes(token.previous_owner_cipher, token.kissed),
    }


def encode_descriptor(descriptor: dict) -> str:
    """Encode a descriptor as a self-describing base64 JSON data URI."""
    raw = json.dumps(descriptor, separators=(",", ":")).encode()
    return JSON_URI_PREFIX + base64.b64encode(raw).decode("ascii")


def decode_descriptor(uri: str) -> dict:
    """Inverse of encode_descriptor."""
    if not uri.startswith(JSON_URI_PREFIX):
        raise ValueError("Not a base64 JSON data URI")
    raw = base64.b64decode(uri[len(JSON_URI_PREFIX):], validate=True)
    return json.loads(raw.decode("utf-8"))


# ---------------------------------------------------------------------------
# Consumer helpers
# ---------------------------------------------------------------------------

def extract_svg(uri: str) -> str:
    """Pull the SVG text (still escaped) out of a descriptor URI."""
    image = decode_descriptor(uri)["image"]
    if not image.startswith(SVG_URI_PREFIX):
        raise ValueError("Descriptor image is not an SVG data URI")
    return image[len(SVG_URI_PREFIX):]


def extract_svg_document(uri: str) -> str:
    """Pull the SVG out of a descriptor URI and undo the escaping."""
    return unquote(extract_svg(uri))


def attributes_dict(uri: str) -> Dict[str, str]:
    """Map trait_type -> value for a descriptor URI."""
    return {
        attr["trait_type"]: attr["value"]
        for attr in decode_descriptor(uri)["attributes"]
    }
