"""Re-export host protocols from core for convenience."""

from __future__ import annotations

from ledgerpay.core.protocols import IFundsTransfer, IHeightSource

__all__ = ["IFundsTransfer", "IHeightSource"]
