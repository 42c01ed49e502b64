"""Anthropic Messages API adapter.

Implements TextCompletionPort with a single-turn ``messages.create``
call. The client is built once from LLMConfig and injected by the
container; it is never a module-level global.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import anthropic

from ...config import LLMConfig, get_config
from ...domain.errors import (
    PARSE_ERROR_MESSAGE,
    ConfigurationError,
    LanguageModelError,
    ParseError,
)

API_KEY_SETTING = "ANTHROPIC_API_KEY"


@dataclass
class AnthropicCompletionAdapter:
    """Text completion through the Anthropic SDK.

    Attributes:
        config: Model, credential and endpoint settings
        client: Pre-built SDK client (built from config when omitted)
    """

    config: LLMConfig = field(default_factory=lambda: get_config().llm)
    client: Optional[Any] = field(default=None, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.client is None:
            self.client = self._create_client()

    def _create_client(self) -> anthropic.Anthropic:
        if not self.config.api_key:
            raise ConfigurationError(
                f"{API_KEY_SETTING} environment variable is required",
                setting_name=API_KEY_SETTING,
            )

        kwargs: dict[str, Any] = {
            "api_key": self.config.api_key,
            "timeout": self.config.timeout_seconds,
        }
        if self.config.base_url:
            kwargs["base_url"] = self.config.base_url

        self._logger.info(
            "Anthropic client initialized",
            extra={"model": self.config.model, "base_url": self.config.base_url},
        )
        return anthropic.Anthropic(**kwargs)

    def complete(self, prompt: str) -> str:
        """Send one user message and return the first text block.

        Raises:
            LanguageModelError: If the API call fails.
            ParseError: If the reply contains no text block.
        """
        assert self.client is not None

        try:
            response = self.client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            self._logger.error(
                "Language model call failed",
                extra={"model": self.config.model, "error": str(e)},
            )
            raise LanguageModelError(
                "Language model call failed",
                cause=e,
                model=self.config.model,
            )

        for block in response.content:
            if getattr(block, "type", None) == "text":
                return block.text

        self._logger.warning(
            "Language model reply has no text block",
            extra={"model": self.config.model},
        )
        raise ParseError(PARSE_ERROR_MESSAGE)
