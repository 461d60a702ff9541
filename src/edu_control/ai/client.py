from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

import requests

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class AiServiceError(Exception):
    """The text-generation service failed or returned no text."""


class TextGenerator(Protocol):
    def generate(
        self,
        contents: Sequence[dict],
        *,
        system_instruction: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        """Send ``contents`` (``{"role", "text"}`` turns) and return the reply text."""

        raise NotImplementedError


class GeminiClient:
    """TextGenerator backed by the Gemini ``generateContent`` REST endpoint."""

    def __init__(
        self,
        api_key: str,
        *,
        default_model: str,
        timeout: float = 60.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._default_model = default_model
        self._timeout = timeout
        self._session = session or requests.Session()

    def generate(
        self,
        contents: Sequence[dict],
        *,
        system_instruction: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        if not self._api_key:
            raise AiServiceError("GEMINI_API_KEY is not configured")

        body: dict = {
            "contents": [{"role": c["role"], "parts": [{"text": c["text"]}]} for c in contents],
        }
        if system_instruction:
            body["systemInstruction"] = {"parts": [{"text": system_instruction}]}

        try:
            resp = self._session.post(
                GEMINI_URL.format(model=model or self._default_model),
                json=body,
                headers={"x-goog-api-key": self._api_key},
                timeout=self._timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise AiServiceError(str(e)) from e

        text = _reply_text(payload)
        if not text:
            raise AiServiceError("Empty reply from text-generation service")
        return text


def _reply_text(payload: dict) -> str:
    parts: List[str] = []
    for candidate in payload.get("candidates") or []:
        for part in (candidate.get("content") or {}).get("parts") or []:
            if part.get("text"):
                parts.append(part["text"])
        if parts:
            break
    return "".join(parts).strip()
