# services/openai_gateway.py
import logging
from typing import Any, Dict, Optional

from openai import OpenAI

import config
from schemas import ImagePayload

logger = logging.getLogger(__name__)


class OpenAIGateway:
    """Vision model access shared by the classifier and the report generator.

    The OpenAI client is created on first use so the app can start without a
    key; a missing key only fails the request that needs the model.
    Requests are never retried.
    """

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None,
                 client: Optional[OpenAI] = None):
        self._api_key = api_key
        self._timeout = timeout
        self._client = client

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not self._api_key:
                raise RuntimeError("OPENAI_API_KEY not set")
            kwargs: Dict[str, Any] = {"api_key": self._api_key, "max_retries": 0}
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._client = OpenAI(**kwargs)
        return self._client

    def complete(
        self,
        model: str,
        system_prompt: str,
        image: ImagePayload,
        user_prompt: str,
        temperature: Optional[float] = None,
        response_format: Optional[Dict[str, Any]] = None,
    ) -> str:
        """One chat completion with a single image; returns the raw message text."""
        params: Dict[str, Any] = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt.strip()},
                {"role": "user", "content": [
                    {"type": "text", "text": user_prompt.strip()},
                    {"type": "image_url", "image_url": {"url": image.data_url()}},
                ]},
            ],
        }
        if temperature is not None:
            params["temperature"] = temperature
        if response_format is not None:
            params["response_format"] = response_format

        logger.debug("calling %s (structured=%s, %d image bytes)", model, response_format is not None, len(image.data))
        resp = self._get_client().chat.completions.create(**params)
        return resp.choices[0].message.content or ""


def build_gateway() -> OpenAIGateway:
    return OpenAIGateway(api_key=config.OPENAI_API_KEY, timeout=config.OPENAI_TIMEOUT)
