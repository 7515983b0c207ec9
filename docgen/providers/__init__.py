"""
LLM providers. Every client exposes ``generate(system=..., prompt=..., temperature=...) -> str``.
"""

from .ollama_client import OllamaClient, OllamaConfig

__all__ = ["OllamaClient", "OllamaConfig"]
