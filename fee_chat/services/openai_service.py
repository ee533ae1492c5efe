"""OpenAI chat completion wrapper."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import openai
from openai import OpenAI

from fee_chat.errors import CompletionError


class OpenAICompleter:
    """Sends one system + one user message and returns the trimmed reply.

    The SDK client is created on first use so the app can start (and report
    readiness through /healthz) without an API key.
    """

    def __init__(self, api_key: str = "", model: str = "gpt-3.5-turbo",
                 timeout: float = 60, client: Optional[Any] = None):
        self.api_key = (api_key or "").strip()
        self.model = model
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_config(cls, cfg) -> "OpenAICompleter":
        return cls(
            api_key=cfg.get("OPENAI_API_KEY", ""),
            model=cfg.get("OPENAI_MODEL") or "gpt-3.5-turbo",
            timeout=cfg.get("OPENAI_TIMEOUT", 60),
        )

    def ready(self) -> Tuple[bool, str]:
        if self._client is not None:
            return True, ""
        if not self.api_key:
            return False, "OPENAI_API_KEY is missing"
        return True, ""

    def get_client(self):
        if self._client is None:
            ok, msg = self.ready()
            if not ok:
                raise CompletionError(msg)
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def complete(self, system_prompt: str, user_prompt: str, max_tokens: int = 100) -> str:
        messages: List[Dict[str, str]] = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        client = self.get_client()
        try:
            res = client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
            )
        except openai.APITimeoutError as e:
            raise CompletionError(f"LLM request timed out after {self.timeout}s") from e
        except openai.OpenAIError as e:
            raise CompletionError(f"LLM request failed: {type(e).__name__}: {e}") from e

        if not res.choices:
            raise CompletionError("Model returned no choices")
        text = (res.choices[0].message.content or "").strip()
        if not text:
            raise CompletionError("Model returned an empty reply")
        return text
