"""Application settings — all configuration loaded from environment variables.

Usage:
    from config.settings import Settings
    settings = Settings()
    settings.search_configured     # True when both Google values are set
    settings.inference_configured  # True when ANTHROPIC_API_KEY is set

Missing credentials never raise here: the search and inference clients report
a ``ConfigurationError`` at call time instead, so the process still starts.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class Settings:
    """Centralised application configuration.

    All values are read from environment variables at instantiation time
    so that tests can override them by patching ``os.environ``.
    """

    # ── API Keys ────────────────────────────────────────────────────────────
    anthropic_api_key: str = field(
        default_factory=lambda: os.environ.get("ANTHROPIC_API_KEY", "")
    )
    google_api_key: str = field(
        default_factory=lambda: os.environ.get("GOOGLE_API_KEY", "")
    )
    google_search_engine_id: str = field(
        default_factory=lambda: os.environ.get("GOOGLE_SEARCH_ENGINE_ID", "")
    )

    # ── Flask ───────────────────────────────────────────────────────────────
    debug: bool = field(
        default_factory=lambda: os.environ.get("FLASK_DEBUG", "0") == "1"
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("PORT", "3000"))
    )

    # ── Timeouts (seconds) ──────────────────────────────────────────────────
    search_timeout: float = field(
        default_factory=lambda: float(os.environ.get("SEARCH_TIMEOUT", "15"))
    )
    inference_timeout: float = field(
        default_factory=lambda: float(os.environ.get("INFERENCE_TIMEOUT", "120"))
    )

    # ── AI Model ────────────────────────────────────────────────────────────
    #: Model used for the eligibility analysis. Not read from the environment.
    inference_model: str = "claude-3-5-sonnet-20241022"
    #: Output token budget for the analysis call.
    inference_max_tokens: int = 2000

    @property
    def search_configured(self) -> bool:
        """True when both Google Custom Search credentials are present."""
        return bool(self.google_api_key and self.google_search_engine_id)

    @property
    def inference_configured(self) -> bool:
        """True when the Anthropic API key is present."""
        return bool(self.anthropic_api_key)
