"""
Errors surfaced to Osculate callers.

Every failure the ledger reports derives from OsculateError, so the CLI can
turn any of them into a one-line message.  Each also derives from the
closest builtin (ValueError, LookupError) for callers that only know those.
"""


class OsculateError(Exception):
    """Base class for ledger failures surfaced to callers."""


class InvalidAddressError(OsculateError, ValueError):
    def __init__(self, address):
        super().__init__(f"Invalid address: {address!r}")
        self.address = address


class MintError(OsculateError, ValueError):
    """A mint was rejected.  Nothing was changed."""


class InsufficientFundsError(MintError):
    def __init__(self, payment: int, price: int):
        super().__init__("Insufficient funds to mint")
        self.payment = payment
        self.price = price


class SelfKissError(MintError):
    def __init__(self, requester: str):
        super().__init__("You can't kiss yourself!")
        self.requester = requester


class TokenNotFoundError(OsculateError, LookupError):
    def __init__(self, token_id: int):
        super().__init__(f"Token #{token_id} does not exist")
        self.token_id = token_id
