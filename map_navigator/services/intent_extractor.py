"""Intent extraction service.

Asks the language model to pull the origin and destination out of a
free-text request and decodes its JSON reply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from ..domain.errors import PARSE_ERROR_MESSAGE, ParseError
from ..domain.models import ExtractedIntent
from ..nlp.json_reply import parse_json_object
from ..ports.llm import TextCompletionPort

PROMPT_TEMPLATE = """从以下用户输入中提取起点和终点信息，以JSON格式返回：{{"from": "起点", "to": "终点"}}

用户输入：{text}

如果用户没有明确指定起点（例如只说"去xxx"、"到xxx"），请将from字段设置为null。
请只返回JSON，不要有其他说明文字。"""

NULL_SENTINEL = "null"


def build_prompt(free_text: str) -> str:
    """Embed the user's text verbatim in the extraction prompt."""
    return PROMPT_TEMPLATE.format(text=free_text)


def _normalize_place(value: Any) -> Optional[str]:
    """Map JSON null, ``"null"`` and blank strings to None."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or text.lower() == NULL_SENTINEL:
        return None
    return text


@dataclass
class IntentExtractorService:
    """Extracts ``{from, to}`` from a request via the language model.

    Attributes:
        completion: Language model collaborator
    """

    completion: TextCompletionPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def extract(self, free_text: str) -> ExtractedIntent:
        """Extract origin and destination names.

        Args:
            free_text: The user's request, e.g. "从北京西站到天安门".

        Returns:
            ExtractedIntent; ``origin`` is None when no origin was stated.

        Raises:
            ParseError: If the reply holds no valid JSON object or no destination.
            LanguageModelError: If the model call fails.
        """
        reply = self.completion.complete(build_prompt(free_text))
        payload = parse_json_object(reply)

        origin = _normalize_place(payload.get("from"))
        destination = _normalize_place(payload.get("to"))
        if destination is None:
            self._logger.warning(
                "Model reply has no destination",
                extra={"reply": reply},
            )
            raise ParseError(PARSE_ERROR_MESSAGE, reply=reply)

        intent = ExtractedIntent(origin=origin, destination=destination)
        self._logger.info(
            "Locations extracted",
            extra={"origin": intent.origin, "destination": intent.destination},
        )
        return intent
