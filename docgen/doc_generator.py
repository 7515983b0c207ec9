# docgen/doc_generator.py

"""
Documentation generation through an LLM client.

Turns extracted records into a ``name -> documentation`` mapping that the
inserter consumes. Requests fan out over a small thread pool, one batch of
``max_concurrency`` functions at a time with a pause between batches.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, List, Optional

from tqdm import tqdm

from .cache_manager import DocstringCache
from .models import DocstringStyle, FunctionRecord, Language
from .rate_limiter import RateLimiter
from .sanitizer import clean_docstring

logger = logging.getLogger(__name__)

STYLE_INSTRUCTIONS = {
    DocstringStyle.GOOGLE: "Use Google style docstrings with Args:, Returns:, and Raises: sections.",
    DocstringStyle.NUMPY: "Use NumPy style docstrings with Parameters, Returns, and Raises sections.",
    DocstringStyle.SPHINX: "Use Sphinx style docstrings with :param, :type, :return, and :rtype directives.",
    DocstringStyle.JSDOC: "Use JSDoc style comments with @param, @returns, and @throws tags.",
}

PYTHON_STYLES = (DocstringStyle.GOOGLE, DocstringStyle.NUMPY, DocstringStyle.SPHINX)


def resolve_style(language: Language, style=None) -> DocstringStyle:
    """
    Pick the style to request for a language.

    Python defaults to Google style, JavaScript always uses JSDoc.
    """
    if style is None:
        return DocstringStyle.GOOGLE if language is Language.PYTHON else DocstringStyle.JSDOC
    resolved = DocstringStyle.from_value(style)
    if language is Language.JAVASCRIPT and resolved is not DocstringStyle.JSDOC:
        logger.warning(f"Style '{resolved.value}' is not available for JavaScript, using jsdoc")
        return DocstringStyle.JSDOC
    return resolved


def build_prompt(record: FunctionRecord, language: Language, style: DocstringStyle) -> str:
    """
    Create the generation prompt for one record.

    Args:
        record: Extracted function, method or class
        language: Source language
        style: Requested documentation style

    Returns:
        Prompt string for the LLM
    """
    request = record.to_generation_request()
    params = ", ".join(request["parameters"]) or "none"
    instruction = STYLE_INSTRUCTIONS[style]

    if language is Language.PYTHON:
        return (
            f"You are a documentation expert for Python code. Generate a professional, clear, "
            f"and concise docstring for the following {request['kind']}. {instruction}\n\n"
            f"Function name: {request['name']}\n"
            f"Parameters: {params}\n"
            f"Function body:\n```python\n{request['body']}\n```\n\n"
            f"Generate ONLY the docstring content (the text that goes inside the triple quotes), "
            f"without the triple quotes themselves, without any code, and without any additional "
            f"explanation. Be concise but informative. Focus on what the function does, what "
            f"parameters it accepts, and what it returns."
        )
    return (
        f"You are a documentation expert for JavaScript/TypeScript code. Generate a professional, "
        f"clear, and concise documentation comment for the following {request['kind']}. "
        f"{instruction}\n\n"
        f"Function name: {request['name']}\n"
        f"Parameters: {params}\n"
        f"Function body:\n```javascript\n{request['body']}\n```\n\n"
        f"Generate ONLY the documentation content (the text that goes inside the comment block), "
        f"without the comment delimiters (/** */), without any code, and without any additional "
        f"explanation. Be concise but informative. Focus on what the function does, what "
        f"parameters it accepts, and what it returns."
    )


class DocstringGenerator:
    """Generates documentation for extracted records with caching and rate limiting."""

    def __init__(self, client, cache: Optional[DocstringCache] = None,
                 rate_limiter: Optional[RateLimiter] = None,
                 max_concurrency: int = 3, batch_delay: float = 1.0,
                 temperature: Optional[float] = None, show_progress: bool = True):
        """
        Initialize the generator.

        Args:
            client: LLM client exposing ``generate(system=..., prompt=..., temperature=...)``
            cache: Cache manager for storing generated docstrings
            rate_limiter: Rate limiter for API calls
            max_concurrency: Requests in flight at once (batch size)
            batch_delay: Seconds to pause between batches
            temperature: Sampling temperature passed to the client, client default if None
            show_progress: Show a tqdm progress bar
        """
        self.client = client
        self.cache = cache
        self.rate_limiter = rate_limiter
        self.max_concurrency = max(1, int(max_concurrency))
        self.batch_delay = max(0.0, float(batch_delay))
        self.temperature = temperature
        self.show_progress = show_progress

    def generate_one(self, record: FunctionRecord, language, style=None) -> Optional[str]:
        """
        Generate documentation for a single record.

        Returns:
            Cleaned documentation, or None if generation failed
        """
        language = Language.from_value(language)
        style = resolve_style(language, style)

        if self.cache:
            cached = self.cache.get(record.original_code, language.value, style.value)
            if cached:
                logger.debug(f"Using cached docstring for {record.name}")
                return cached

        if self.rate_limiter:
            self.rate_limiter.wait_if_needed()

        logger.info(f"Generating {style.value} docstring for `{record.name}`")
        try:
            raw = self.client.generate(
                system="",
                prompt=build_prompt(record, language, style),
                temperature=self.temperature,
            )
        except Exception as e:
            logger.error(f"Failed to generate docstring for {record.name}: {e}")
            return None

        docstring = clean_docstring(raw, language)
        if not docstring:
            logger.error(f"Empty docstring generated for {record.name}")
            return None

        if self.cache:
            self.cache.set(record.original_code, docstring, language.value, style.value)
        return docstring

    def generate(self, records: Iterable[FunctionRecord], language,
                 style=None) -> Dict[str, str]:
        """
        Generate documentation for many records.

        Records sharing a name are requested once, using the first of them.
        Functions whose generation fails are left out of the result.

        Args:
            records: Extracted records
            language: Source language
            style: Documentation style, language default if None

        Returns:
            Mapping of record name to documentation text

        Raises:
            ValueError: If no records are given
        """
        language = Language.from_value(language)
        style = resolve_style(language, style)

        unique: Dict[str, FunctionRecord] = {}
        for record in records:
            unique.setdefault(record.name, record)
        if not unique:
            raise ValueError("No functions to document")

        pending: List[FunctionRecord] = list(unique.values())
        results: Dict[str, str] = {}

        with tqdm(total=len(pending), desc="Generating docstrings",
                  disable=not self.show_progress) as pbar:
            for start in range(0, len(pending), self.max_concurrency):
                if start and self.batch_delay:
                    time.sleep(self.batch_delay)
                batch = pending[start:start + self.max_concurrency]
                with ThreadPoolExecutor(max_workers=len(batch)) as executor:
                    futures = {executor.submit(self.generate_one, r, language, style): r
                               for r in batch}
                    for future in as_completed(futures):
                        docstring = future.result()
                        if docstring:
                            results[futures[future].name] = docstring
                        pbar.update(1)

        logger.info(f"Generated documentation for {len(results)}/{len(pending)} definition(s)")
        return results
