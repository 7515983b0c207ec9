# docgen/cache_manager.py

"""
Cache of generated docstrings keyed by language, style and source code.
Unchanged functions are not sent to the model twice.
"""

import json
import hashlib
import logging
import os
import threading
from typing import Optional

logger = logging.getLogger(__name__)


class DocstringCache:
    """JSON-file cache shared by the generation worker threads."""

    def __init__(self, cache_file: str = '.docstring_cache.json', enabled: bool = True):
        """
        Initialize the cache manager.

        Args:
            cache_file: Path to the cache file
            enabled: Whether caching is enabled
        """
        self.cache_file = cache_file
        self.enabled = enabled
        self.cache = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

        if self.enabled:
            self._load_cache()

    def _load_cache(self) -> None:
        if not os.path.exists(self.cache_file):
            logger.debug(f"Cache file {self.cache_file} not found, starting with empty cache")
            return
        try:
            with open(self.cache_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self.cache = data if isinstance(data, dict) else {}
            logger.info(f"Loaded cache with {len(self.cache)} entries from {self.cache_file}")
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load cache from {self.cache_file}: {e}")
            self.cache = {}

    def _save_cache(self) -> None:
        try:
            with open(self.cache_file, 'w', encoding='utf-8') as f:
                json.dump(self.cache, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save cache to {self.cache_file}: {e}")

    @staticmethod
    def make_key(code_snippet: str, language: str = '', style: str = '') -> str:
        """
        Build the cache key for a snippet.

        Returns:
            SHA-256 hex digest of language, style and code
        """
        content = f"{language}:{style}:{code_snippet}".encode('utf-8')
        return hashlib.sha256(content).hexdigest()

    def get(self, code_snippet: str, language: str = '', style: str = '') -> Optional[str]:
        """Return the cached docstring for a snippet, or None."""
        if not self.enabled:
            return None

        key = self.make_key(code_snippet, language, style)
        with self._lock:
            docstring = self.cache.get(key)
            if docstring:
                self.hits += 1
            else:
                self.misses += 1
        logger.debug(f"Cache {'hit' if docstring else 'miss'} for key {key[:8]}...")
        return docstring

    def set(self, code_snippet: str, docstring: str, language: str = '', style: str = '') -> None:
        """Store a docstring and persist the cache immediately."""
        if not self.enabled or not docstring:
            return

        key = self.make_key(code_snippet, language, style)
        with self._lock:
            self.cache[key] = docstring
            self._save_cache()
        logger.debug(f"Cached docstring for key {key[:8]}...")

    def clear(self) -> None:
        """Clear all cached entries."""
        with self._lock:
            self.cache = {}
            if self.enabled and os.path.exists(self.cache_file):
                os.remove(self.cache_file)
        logger.info("Cache cleared")

    def get_stats(self) -> dict:
        return {
            'enabled': self.enabled,
            'total_entries': len(self.cache),
            'hits': self.hits,
            'misses': self.misses,
            'cache_file': self.cache_file,
        }
