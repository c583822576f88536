"""Host collaborator backends behind Protocol interfaces."""

from __future__ import annotations

from ledgerpay.core.config import AppSettings
from ledgerpay.persistence.memory_backend import MemoryFundsTransfer, MemoryHeightSource


def create_host(settings: AppSettings | None = None):
    """Create in-memory host collaborators from application settings.

    Returns:
        Tuple of (height_source, funds).
    """
    if settings is None:
        settings = AppSettings()

    height_source = MemoryHeightSource(height=settings.api.initial_height)
    funds = MemoryFundsTransfer()
    return height_source, funds
