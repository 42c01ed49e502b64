"""Language model adapters - Implementations of TextCompletionPort."""

from .anthropic_adapter import AnthropicCompletionAdapter

__all__ = ["AnthropicCompletionAdapter"]
