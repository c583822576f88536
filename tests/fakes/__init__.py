"""Shared test doubles: memory host collaborators and principals."""

from __future__ import annotations

from ledgerpay.persistence.memory_backend import (
    MemoryFundsTransfer,
    MemoryHeightSource,
    TransferRejected,
)

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
OUTSIDER = "ST1SJ3DTE5DN7X54YDH5D64R3BCB6A2AG2ZQ8YPD5"
EMPLOYEE_WALLET = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"

__all__ = [
    "EMPLOYEE_WALLET",
    "MemoryFundsTransfer",
    "MemoryHeightSource",
    "OUTSIDER",
    "OWNER",
    "TransferRejected",
]
