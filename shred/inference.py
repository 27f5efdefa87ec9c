"""Eligibility judgment from the Claude Messages API.

The model id and output token budget come from ``Settings`` as fixed values.
One attempt per call: the SDK's own retries are disabled so a failure
surfaces immediately and the orchestrator can fall back to the prompt.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import anthropic

from shred.errors import ConfigurationError, InferenceTransportError

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = (
    "Claude API not configured. Please set ANTHROPIC_API_KEY environment variable."
)


class ClaudeClient:
    """Sends a composed prompt to Claude and returns the text answer.

    The Anthropic client is lazy-initialised to allow instantiation without
    a live API key (useful in tests when the client is mocked).
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._client: anthropic.Anthropic | None = None

    @property
    def client(self) -> anthropic.Anthropic:
        """Lazy-initialise and return the Anthropic SDK client."""
        if self._client is None:
            self._client = anthropic.Anthropic(
                api_key=self.settings.anthropic_api_key,
                max_retries=0,
                timeout=self.settings.inference_timeout,
            )
        return self._client

    def complete(self, prompt: str) -> str:
        """Send *prompt* as a single user message and return the reply text.

        Only the first content block is used.

        Raises:
            ConfigurationError: If no API key is configured. No request is made.
            InferenceTransportError: On any API failure (timeout, auth, rate
                limit) or an empty reply.
        """
        if not self.settings.inference_configured:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

        logger.info(
            "Inference model=%s max_tokens=%d prompt_chars=%d",
            self.settings.inference_model,
            self.settings.inference_max_tokens,
            len(prompt),
        )
        try:
            response = self.client.messages.create(
                model=self.settings.inference_model,
                max_tokens=self.settings.inference_max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as exc:
            logger.error("Claude API call failed: %s", exc)
            raise InferenceTransportError(f"Claude API error: {exc}") from exc

        if not response.content:
            raise InferenceTransportError("Claude API error: empty response")
        text = getattr(response.content[0], "text", None)
        if text is None:
            raise InferenceTransportError("Claude API error: first content block has no text")
        return text
