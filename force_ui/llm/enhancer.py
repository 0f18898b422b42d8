# force_ui/llm/enhancer.py

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from ..exceptions import EnhancementError
from ..models import IntentEnhancement
from ..prompts.intent_classification_prompt import INTENT_CLASSIFICATION_PROMPT

logger = logging.getLogger(__name__)


class IntentEnhancer:
    """
    LLM-based refinement of a low-confidence keyword classification.

    - One chat completion per call, JSON response format.
    - Any failure (no client, API error, malformed answer) is raised as
      EnhancementError; the classifier decides what to fall back to.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4.1-mini",
        temperature: float = 0.0,
        timeout: float = 10.0,
        base_prompt: str | None = None,
        client: Any | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self.base_prompt = base_prompt or INTENT_CLASSIFICATION_PROMPT
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            try:
                self._client = OpenAI(api_key=self.api_key, timeout=self.timeout)
            except OpenAIError as e:
                # raised when no api key is configured anywhere
                raise EnhancementError(f"OpenAI client unavailable: {e}", last_error=e) from e
        return self._client

    def enhance(self, text: str) -> IntentEnhancement:
        """
        Ask the model to classify `text`.

        Returns the validated IntentEnhancement, with primary_intent removed
        from sub_intents and at most two sub_intents kept.
        """
        client = self._get_client()

        try:
            response = client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": self.base_prompt},
                    {"role": "user", "content": text},
                ],
            )
        except Exception as e:
            # injected clients may raise outside the OpenAIError hierarchy
            raise EnhancementError(f"LLM call failed: {e}", last_error=e) from e

        try:
            content = response.choices[0].message.content or ""
        except (IndexError, AttributeError, TypeError) as e:
            raise EnhancementError(f"LLM response had no message: {e}", last_error=e) from e
        logger.debug("[IntentEnhancer.enhance] raw answer: %s", content)

        try:
            result = IntentEnhancement.model_validate_json(content)
        except ValidationError as e:
            raise EnhancementError(f"LLM answer did not validate: {e}", last_error=e) from e

        sub_intents = [i for i in result.sub_intents if i != result.primary_intent]
        sub_intents = list(dict.fromkeys(sub_intents))[:2]
        return result.model_copy(update={"sub_intents": sub_intents})
