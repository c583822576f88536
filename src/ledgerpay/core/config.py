"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings

from ledgerpay.models.employee import PayFrequency


class CadenceConfig(BaseSettings):
    """Height units that must elapse before a payment falls due.

    Defaults approximate one week / two weeks / one month at ten-minute blocks.
    """

    model_config = {"env_prefix": "LEDGERPAY_CADENCE_"}

    weekly: int = 1008
    biweekly: int = 2016
    monthly: int = 4320

    def threshold(self, frequency: str) -> int | None:
        """Return the due threshold for ``frequency``, or None if unknown."""
        return {
            PayFrequency.WEEKLY: self.weekly,
            PayFrequency.BIWEEKLY: self.biweekly,
            PayFrequency.MONTHLY: self.monthly,
        }.get(frequency)


class ApiConfig(BaseSettings):
    """HTTP host adapter configuration."""

    model_config = {"env_prefix": "LEDGERPAY_API_"}

    principal_header: str = "X-Principal"
    initial_height: int = 1


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "LEDGERPAY_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    owner: str = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"

    cadence: CadenceConfig = CadenceConfig()
    api: ApiConfig = ApiConfig()
