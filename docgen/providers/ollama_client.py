# docgen/providers/ollama_client.py
"""
Local LLM client for Ollama.
- Pure stdlib (urllib)
- POSTs to {base_url}/api/generate with streaming disabled

Usage:
    from docgen.providers.ollama_client import OllamaClient, OllamaConfig
    llm = OllamaClient(OllamaConfig(model="qwen2.5-coder:7b"))
    text = llm.generate(system="", prompt="...")

Environment overrides:
    OLLAMA_BASE_URL  (default http://localhost:11434)
    DOCGEN_MODEL     (e.g., qwen2.5-coder:7b)
    OLLAMA_TEMPERATURE
    DOCGEN_TIMEOUT
"""

from __future__ import annotations
import json
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Optional
import urllib.error
from urllib.request import Request, urlopen

logger = logging.getLogger(__name__)


@dataclass
class OllamaConfig:
    base_url: str = "http://localhost:11434"
    model: str = "qwen2.5-coder:7b"
    temperature: float = 0.3
    max_output_tokens: Optional[int] = 1024
    timeout_seconds: int = 120
    max_retries: int = 3


class OllamaClient:
    def __init__(self, cfg: Optional[OllamaConfig] = None) -> None:
        cfg = cfg or OllamaConfig()
        self.base = (os.getenv("OLLAMA_BASE_URL") or cfg.base_url).rstrip("/")
        self.model = os.getenv("DOCGEN_MODEL") or cfg.model
        self.temperature = float(os.getenv("OLLAMA_TEMPERATURE") or cfg.temperature)
        self.timeout = int(os.getenv("DOCGEN_TIMEOUT") or cfg.timeout_seconds)
        self.max_output_tokens = cfg.max_output_tokens
        self.max_retries = max(1, cfg.max_retries)

    def generate(
        self,
        *,
        system: str = "",
        prompt: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        final_prompt = f"{system.strip()}\n\n{prompt.strip()}" if system else prompt.strip()
        options: dict[str, Any] = {
            "temperature": float(self.temperature if temperature is None else temperature),
        }
        limit = max_tokens if max_tokens is not None else self.max_output_tokens
        if limit is not None:
            options["num_predict"] = int(limit)
        payload = {"model": self.model, "prompt": final_prompt, "stream": False, "options": options}

        for attempt in range(self.max_retries):
            last = attempt == self.max_retries - 1
            try:
                return self._post("/api/generate", payload).get("response", "")

            except urllib.error.HTTPError as e:
                if e.code != 429 and 400 <= e.code < 500:
                    raise RuntimeError(f"HTTP {e.code}: {e.reason}") from e
                if last:
                    raise RuntimeError(f"Ollama returned HTTP {e.code} after {self.max_retries} attempts") from e
                self._backoff(attempt, f"HTTP {e.code}")

            except (urllib.error.URLError, TimeoutError, ConnectionResetError) as e:
                if last:
                    raise RuntimeError(f"Failed to reach Ollama after {self.max_retries} attempts") from e
                self._backoff(attempt, f"connection error ({e})")

            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise RuntimeError(f"Failed to decode Ollama response: {e}") from e

        raise RuntimeError("Unknown error in Ollama request")

    def _post(self, path: str, payload: dict) -> dict:
        req = Request(
            f"{self.base}{path}",
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )
        with urlopen(req, timeout=self.timeout) as resp:
            return json.loads(resp.read().decode("utf-8"))

    @staticmethod
    def _backoff(attempt: int, reason: str) -> None:
        wait_time = 2 ** attempt
        logger.warning(f"{reason}, retrying in {wait_time}s (attempt {attempt + 1})")
        time.sleep(wait_time)
