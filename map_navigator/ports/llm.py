"""Language model port - Abstraction for a text-completion service."""

from __future__ import annotations

from typing import Protocol


class TextCompletionPort(Protocol):
    """Port for an opaque prompt-completion service.

    Implementation: adapters/llm/anthropic_adapter.py
    """

    def complete(self, prompt: str) -> str:
        """Send a single user prompt and return the first text block of the reply.

        Args:
            prompt: Full prompt text.

        Returns:
            The reply text.

        Raises:
            LanguageModelError: If the call fails.
            ParseError: If the reply contains no text block.
        """
        ...
