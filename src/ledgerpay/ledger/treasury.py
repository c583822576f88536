"""Treasury: the ledger's single custodial balance."""

from __future__ import annotations

from ledgerpay.core.exceptions import InsufficientFundsError
from ledgerpay.core.types import Amount


class Treasury:
    def __init__(self, balance: Amount = 0) -> None:
        self._balance = balance

    @property
    def balance(self) -> Amount:
        return self._balance

    def covers(self, amount: Amount) -> bool:
        return self._balance >= amount

    def credit(self, amount: Amount) -> Amount:
        self._balance += amount
        return self._balance

    def debit(self, amount: Amount) -> Amount:
        # Balance never goes negative.
        if not self.covers(amount):
            raise InsufficientFundsError(required=amount, available=self._balance)
        self._balance -= amount
        return self._balance
