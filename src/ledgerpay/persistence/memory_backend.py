"""In-memory host collaborators for tests and the development host."""

from __future__ import annotations

from ledgerpay.core.types import Amount, Height, Principal


class MemoryHeightSource:
    """IHeightSource whose height only moves when blocks are mined."""

    def __init__(self, height: Height = 1) -> None:
        self._height = height

    def current_height(self) -> Height:
        return self._height

    def mine_block(self) -> Height:
        self._height += 1
        return self._height

    def mine_blocks(self, count: int) -> Height:
        if count < 0:
            raise ValueError("Height cannot move backwards")
        self._height += count
        return self._height


class TransferRejected(Exception):
    """Raised by MemoryFundsTransfer when a movement cannot be honoured."""


class MemoryFundsTransfer:
    """Dict-backed IFundsTransfer tracking account balances and a transfer log.

    Senders without a registered balance are treated as unlimited, which
    keeps simple tests free of account setup.
    """

    def __init__(self, balances: dict[Principal, Amount] | None = None) -> None:
        self._balances: dict[Principal, Amount] = dict(balances or {})
        self._received: dict[Principal, Amount] = {}
        self.transfers: list[tuple[str, Principal, Amount]] = []
        self.fail_next = False

    def _check_failure(self) -> None:
        if self.fail_next:
            self.fail_next = False
            raise TransferRejected("transfer rejected by host")

    def deposit(self, sender: Principal, amount: Amount) -> None:
        self._check_failure()
        if sender in self._balances:
            if self._balances[sender] < amount:
                raise TransferRejected(f"{sender} holds {self._balances[sender]}, needs {amount}")
            self._balances[sender] -= amount
        self.transfers.append(("deposit", sender, amount))

    def pay_out(self, recipient: Principal, amount: Amount) -> None:
        self._check_failure()
        self._received[recipient] = self._received.get(recipient, 0) + amount
        self.transfers.append(("pay_out", recipient, amount))

    def balance_of(self, principal: Principal) -> Amount | None:
        return self._balances.get(principal)

    def received_by(self, principal: Principal) -> Amount:
        return self._received.get(principal, 0)
