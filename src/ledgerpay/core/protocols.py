"""Protocol interfaces for the host collaborators LedgerPay consumes.

The engine never produces blocks or moves value itself; the host supplies
both through these Protocols. Structural typing, no inheritance required.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ledgerpay.core.types import Amount, Height, Principal


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@runtime_checkable
class IHeightSource(Protocol):
    """Monotonically non-decreasing logical clock owned by the host."""

    def current_height(self) -> Height: ...


# ---------------------------------------------------------------------------
# Funds movement
# ---------------------------------------------------------------------------

@runtime_checkable
class IFundsTransfer(Protocol):
    """Moves value into and out of the ledger's custody.

    Implementations raise on failure; a returned call means the movement
    happened.
    """

    def deposit(self, sender: Principal, amount: Amount) -> None: ...

    def pay_out(self, recipient: Principal, amount: Amount) -> None: ...
