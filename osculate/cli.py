"""
Osculate CLI — Command-Line Interface.

Provides:
  - Ledger creation (genesis) and info
  - Minting (kissing the previous token)
  - Owner, descriptor and image queries
  - Address cipher lookups

Usage:
    python -m osculate.cli [command] [options]
"""

import argparse
import json
import logging
import os
import sys

from osculate import __version__, __collection_name__, __ticker__
from osculate.config import LEDGER_FILE, MINT_PRICE
from osculate.crypto import address_cipher
from osculate.errors import OsculateError
from osculate.ledger import MintLedger
from osculate.metadata import decode_descriptor, extract_svg_document


BANNER = r"""
   ___                 _       _
  / _ \ ___  ___ _   _| | __ _| |_ ___
 | | | / __|/ __| | | | |/ _` | __/ _ \
 | |_| \__ \ (__| |_| | | (_| | ||  __/
  \___/|___/\___|\__,_|_|\__,_|\__\___|

        💋 Every mint is a kiss. 💋
        Version {version} — Ticker: {ticker}
"""


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_ledger(path: str) -> MintLedger:
    """Load the ledger, or explain how to create one."""
    if not os.path.exists(path):
        raise SystemExit(
            f"\n❌ No ledger at {path}. Create one with: osculate genesis <deployer>\n"
        )
    return MintLedger.load(path)


# ===========================================================================
# Commands
# ===========================================================================

def cmd_genesis(args):
    """Create a new ledger with token #0 minted to the deployer."""
    if os.path.exists(args.ledger) and not args.force:
        print(f"\n❌ Ledger already exists at {args.ledger} (use --force)\n")
        return 1

    ledger = MintLedger(args.deployer, mint_price=args.price)
    ledger.save(args.ledger)
    genesis = ledger.get_token(0)
    print(f"\n{'═' * 50}")
    print(f"  {__collection_name__} — Genesis Token")
    print(f"{'═' * 50}")
    print(f"  Owner:      {genesis.owner}")
    print(f"  Ciphertext: {genesis.previous_owner_cipher}")
    print(f"  Mint price: {ledger.mint_price:,} wei")
    print(f"{'═' * 50}\n")
    return 0


def cmd_info(args):
    """Show ledger information."""
    ledger = get_ledger(args.ledger)
    info = ledger.get_info()
    print(f"\n{'═' * 50}")
    print(f"  {__collection_name__} ({__ticker__}) — Ledger Info")
    print(f"{'═' * 50}")
    for key, val in info.items():
        print(f"  {key:>12s}: {val}")
    print(f"{'═' * 50}\n")
    return 0


def cmd_mint(args):
    """Mint the next token, kissing the previous one."""
    ledger = get_ledger(args.ledger)
    value = args.value if args.value is not None else ledger.mint_price

    token_id = ledger.mint(args.address, value)
    ledger.save(args.ledger)

    token = ledger.get_token(token_id)
    print(f"\n💋 Token #{token_id} minted to {token.owner}")
    print(f"   Kissed:     #{token_id - 1}")
    print(f"   Ciphertext: {token.previous_owner_cipher}\n")
    return 0


def cmd_owner(args):
    """Show the owner of a token."""
    ledger = get_ledger(args.ledger)
    print(ledger.owner_of(args.token_id))
    return 0


def cmd_token(args):
    """Show a token's descriptor URI (or the decoded JSON)."""
    ledger = get_ledger(args.ledger)
    uri = ledger.token_uri(args.token_id)
    if args.decode:
        print(json.dumps(decode_descriptor(uri), indent=2))
    else:
        print(uri)
    return 0


def cmd_svg(args):
    """Write a token's SVG image to a file or stdout."""
    ledger = get_ledger(args.ledger)
    svg = extract_svg_document(ledger.token_uri(args.token_id))
    if args.output:
        with open(args.output, "w") as f:
            f.write(svg)
        print(f"\n✅ Token #{args.token_id} image written to {args.output}\n")
    else:
        print(svg)
    return 0


def cmd_cipher(args):
    """Show the ciphertext an address leaves on the next token."""
    print(address_cipher(args.address))
    return 0


# ===========================================================================
# Argument parser
# ===========================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osculate",
        description=f"{__collection_name__} ({__ticker__}) — a chain of kisses",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--ledger", type=str, default=LEDGER_FILE, help="Ledger file path"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # genesis
    genesis_p = subparsers.add_parser("genesis", help="Create a new ledger")
    genesis_p.add_argument("deployer", type=str, help="Deployer address")
    genesis_p.add_argument(
        "--price", type=int, default=MINT_PRICE, help="Mint price in wei"
    )
    genesis_p.add_argument(
        "--force", action="store_true", help="Overwrite an existing ledger"
    )

    # info
    subparsers.add_parser("info", help="Show ledger information")

    # mint
    mint_p = subparsers.add_parser("mint", help="Mint (kiss) the next token")
    mint_p.add_argument("address", type=str, help="Minting address")
    mint_p.add_argument(
        "--value", type=int, default=None, help="Payment in wei (default: price)"
    )

    # owner
    owner_p = subparsers.add_parser("owner", help="Show a token's owner")
    owner_p.add_argument("token_id", type=int, help="Token id")

    # token
    token_p = subparsers.add_parser("token", help="Show a token's descriptor")
    token_p.add_argument("token_id", type=int, help="Token id")
    token_p.add_argument(
        "--decode", action="store_true", help="Print the decoded JSON"
    )

    # svg
    svg_p = subparsers.add_parser("svg", help="Export a token's image")
    svg_p.add_argument("token_id", type=int, help="Token id")
    svg_p.add_argument("--output", "-o", type=str, help="Output file")

    # cipher
    cipher_p = subparsers.add_parser("cipher", help="Show an address's cipher")
    cipher_p.add_argument("address", type=str, help="Address")

    return parser


# ===========================================================================
# Main entry point
# ===========================================================================

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    commands = {
        "genesis": cmd_genesis,
        "info": cmd_info,
        "mint": cmd_mint,
        "owner": cmd_owner,
        "token": cmd_token,
        "svg": cmd_svg,
        "cipher": cmd_cipher,
    }

    if args.command not in commands:
        print(BANNER.format(version=__version__, ticker=__ticker__))
        parser.print_help()
        return 0

    try:
        return commands[args.command](args)
    except OsculateError as e:
        print(f"\n❌ Error: {e}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
