"""Run configuration for etherscan-verify."""

import os
from dataclasses import dataclass
from typing import Any, Optional

from .constants import API_KEY_ENV, DEFAULT_POLL_INTERVAL, DEFAULT_REQUEST_TIMEOUT


@dataclass
class VerificationConfig:
    """Options controlling a verification batch."""

    api_key: Optional[str] = None
    license: Optional[str] = None  # SPDX id used when the source has none (--license)
    force_license: bool = False  # Let `license` override the source license
    fallback_on_solc_input: bool = False  # Retry once with the full compiler input
    poll_interval: float = DEFAULT_POLL_INTERVAL
    max_poll_attempts: Optional[int] = None  # None polls until a terminal status
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def from_env(cls, **overrides: Any) -> "VerificationConfig":
        """
        Build a configuration, reading the API key from the environment.

        Args:
            **overrides: Field values; api_key defaults to $ETHERSCAN_API_KEY

        Returns:
            VerificationConfig
        """
        if overrides.get("api_key") is None:
            overrides["api_key"] = os.environ.get(API_KEY_ENV)
        return cls(**overrides)
