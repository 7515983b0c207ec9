# docgen/providers/gemini_client.py
"""
Google Gemini client built on the google-genai SDK.

Usage:
    from docgen.providers.gemini_client import GeminiClient, GeminiConfig
    llm = GeminiClient(GeminiConfig(api_key="..."))
    text = llm.generate(system="", prompt="...")

Environment overrides:
    GEMINI_API_KEY
    DOCGEN_GEMINI_MODEL
"""

from __future__ import annotations
import logging
import os
import time
from dataclasses import dataclass
from typing import Optional

from google import genai
from google.genai import errors, types

logger = logging.getLogger(__name__)


@dataclass
class GeminiConfig:
    api_key: Optional[str] = None
    model: str = "gemini-2.0-flash"
    temperature: float = 0.3
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 1024
    max_retries: int = 3


class GeminiClient:
    def __init__(self, cfg: Optional[GeminiConfig] = None, client=None) -> None:
        cfg = cfg or GeminiConfig()
        self.model = os.getenv("DOCGEN_GEMINI_MODEL") or cfg.model
        self.cfg = cfg
        self.max_retries = max(1, cfg.max_retries)
        if client is None:
            api_key = os.getenv("GEMINI_API_KEY") or cfg.api_key
            if not api_key:
                raise RuntimeError("GEMINI_API_KEY is not set")
            client = genai.Client(api_key=api_key)
        self._client = client

    def generate(
        self,
        *,
        system: str = "",
        prompt: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        config = types.GenerateContentConfig(
            system_instruction=system.strip() or None,
            temperature=self.cfg.temperature if temperature is None else temperature,
            top_k=self.cfg.top_k,
            top_p=self.cfg.top_p,
            max_output_tokens=max_tokens or self.cfg.max_output_tokens,
        )

        for attempt in range(self.max_retries):
            last = attempt == self.max_retries - 1
            try:
                response = self._client.models.generate_content(
                    model=self.model, contents=prompt.strip(), config=config
                )
            except errors.ClientError as e:
                if e.code != 429 or last:
                    raise RuntimeError(f"Gemini request failed: {e}") from e
                self._backoff(attempt, "Rate limited")
                continue
            except errors.ServerError as e:
                if last:
                    raise RuntimeError(f"Gemini server error after {self.max_retries} attempts") from e
                self._backoff(attempt, f"Server error {e.code}")
                continue

            text = response.text
            if not text:
                raise RuntimeError("No response from Gemini API")
            return text

        raise RuntimeError("Unknown error in Gemini request")

    @staticmethod
    def _backoff(attempt: int, reason: str) -> None:
        wait_time = 2 ** attempt
        logger.warning(f"{reason}, retrying in {wait_time}s (attempt {attempt + 1})")
        time.sleep(wait_time)
