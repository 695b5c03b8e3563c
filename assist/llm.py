# assist/llm.py

import logging
from typing import Any, Dict, Optional

from django.conf import settings
from openai import OpenAI, OpenAIError

logger = logging.getLogger(__name__)


class LlmError(Exception):
    """The provider could not be reached or refused the call."""


class LlmClient:
    """
    Minimal wrapper for "completion-style" use:

        text = llm.invoke("some prompt")

    Under the hood it is one call to the OpenAI Responses API. The SDK's
    own retries are switched off and nothing here retries either; a
    failed call surfaces as LlmError and the caller decides the fallback.
    The SDK client is built on first use, so a missing API key only
    fails the request that needed it.
    """

    def __init__(
        self,
        model_name: Optional[str] = None,
        *,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.model_name = model_name or settings.AI_MODEL_NAME
        self._api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self._timeout = timeout if timeout is not None else settings.AI_TIMEOUT_SECONDS
        self._client = None

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not self._api_key:
                raise LlmError("The AI service is not configured.")
            client_kwargs: Dict[str, Any] = {"max_retries": 0, "api_key": self._api_key}
            if self._timeout is not None:
                client_kwargs["timeout"] = self._timeout
            self._client = OpenAI(**client_kwargs)
        return self._client

    def invoke(self, prompt: str) -> str:
        """Single HTTP call without retries/backoff."""
        try:
            resp = self._get_client().responses.create(model=self.model_name, input=prompt)
        except OpenAIError as e:
            logger.warning("LLM call to %s failed: %s", self.model_name, e)
            raise LlmError(str(e)) from e

        text = getattr(resp, "output_text", "") or ""
        return text.strip()


_default_client: Optional[LlmClient] = None


def get_llm_client() -> LlmClient:
    global _default_client
    if _default_client is None:
        _default_client = LlmClient()
    return _default_client
