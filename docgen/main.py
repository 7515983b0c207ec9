# docgen/main.py

"""
Command-line entry point.

    docgen path/to/module.py --style numpy
    docgen app.ts --output app.documented.ts
    docgen utils.py --list
    docgen --history

Without a file argument the path (and, for Python, the style) is asked for
interactively.
"""

import argparse
import os
import sys
import logging
from typing import Dict, List, Optional, Tuple

from dotenv import load_dotenv

from .cache_manager import DocstringCache
from .code_parser import detect_language, extract, insert, read_source
from .config_loader import ConfigLoader
from .doc_generator import DocstringGenerator, resolve_style
from .history import HistoryStore
from .models import DocstringStyle, FunctionRecord, Language
from .path_validator import PathValidator
from .providers.ollama_client import OllamaClient, OllamaConfig
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


def setup_logging(config: ConfigLoader):
    log_level = getattr(logging, config.get_log_level().upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format=config.get_log_format(),
        handlers=[logging.FileHandler(config.get_log_file(), encoding="utf-8"),
                  logging.StreamHandler(sys.stdout)],
    )
    logger.info("Logging initialized")


def initialize_llm_client(config: ConfigLoader):
    """Create the LLM client selected by ``llm.provider``."""
    llm_cfg = config.get_llm_settings()
    provider = config.get_llm_provider()

    if provider == "gemini":
        from .providers.gemini_client import GeminiClient, GeminiConfig
        client = GeminiClient(
            GeminiConfig(
                api_key=llm_cfg.get("api_key"),
                model=llm_cfg.get("gemini_model", "gemini-2.0-flash"),
                temperature=float(llm_cfg.get("temperature", 0.3)),
                max_output_tokens=int(llm_cfg.get("max_output_tokens", 1024)),
                max_retries=int(llm_cfg.get("max_retries", 3)),
            )
        )
        logger.info("Gemini LLM client initialized")
        return client

    if provider != "ollama":
        logger.warning(f"Unknown LLM provider '{provider}', falling back to ollama")
    client = OllamaClient(
        OllamaConfig(
            base_url=llm_cfg.get("base_url", "http://localhost:11434"),
            model=llm_cfg.get("model", "qwen2.5-coder:7b"),
            temperature=float(llm_cfg.get("temperature", 0.3)),
            max_output_tokens=llm_cfg.get("max_output_tokens", 1024),
            timeout_seconds=int(llm_cfg.get("timeout", 120)),
            max_retries=int(llm_cfg.get("max_retries", 3)),
        )
    )
    logger.info("Ollama LLM client initialized (local)")
    return client


def document_source(source: str, language: Language, generator: DocstringGenerator,
                    style=None) -> Tuple[str, List[FunctionRecord], Dict[str, str]]:
    """
    Extract, generate and insert documentation for one source text.

    Returns:
        (updated source, extracted records, name -> documentation mapping)
    """
    records = extract(source, language)
    if not records:
        return source, records, {}
    documentation = generator.generate(records, language, style)
    return insert(source, language, documentation), records, documentation


def _menu_choice() -> Optional[str]:
    print("\nChoose docstring style:")
    print("  1) Google  [default]")
    print("  2) NumPy")
    print("  3) Sphinx")
    choice = input("Enter choice [1/2/3]: ").strip()
    if choice == "2":
        return DocstringStyle.NUMPY.value
    if choice == "3":
        return DocstringStyle.SPHINX.value
    return DocstringStyle.GOOGLE.value


def _print_records(records: List[FunctionRecord]) -> None:
    if not records:
        print("No functions found.")
        return
    for r in records:
        status = "documented" if r.has_documentation else "undocumented"
        params = ", ".join(p.name for p in r.parameters)
        print(f"  {r.start_line:>5}-{r.end_line:<5} {r.kind.value:<8} {r.name}({params})  [{status}]")


def _print_history(store: HistoryStore) -> None:
    entries = store.list()
    if not entries:
        print("No history entries.")
        return
    for e in entries:
        print(f"  {e.created_at}  {e.id}  {e.language:<10} {e.filename}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docgen",
        description="Generate and insert docstrings/JSDoc for Python and JavaScript files.",
    )
    parser.add_argument("file", nargs="?", help="source file to document")
    parser.add_argument("--style", choices=[s.value for s in DocstringStyle],
                        help="documentation style (JavaScript always uses jsdoc)")
    parser.add_argument("--output", help="where to write the documented file")
    parser.add_argument("--in-place", action="store_true", help="overwrite the input file")
    parser.add_argument("--list", action="store_true", help="list extracted definitions and exit")
    parser.add_argument("--history", action="store_true", help="show saved history and exit")
    parser.add_argument("--config", default="config.yaml", help="path to config.yaml")
    return parser


def run(args: argparse.Namespace, config: ConfigLoader, client=None) -> int:
    """
    Execute one CLI invocation.

    Args:
        args: Parsed command-line arguments
        config: Loaded configuration
        client: LLM client override; created from config when None

    Returns:
        Process exit status
    """
    history = HistoryStore(
        history_file=config.get_history_file(),
        max_entries=config.get_history_max_entries(),
        enabled=config.is_history_enabled(),
    )
    if args.history:
        _print_history(history)
        return 0

    interactive = not args.file
    file_path = args.file or input("Enter the file path to document: ").strip()
    if not file_path:
        logger.error("No file path provided")
        print("Error: File path is required")
        return 1

    validator = PathValidator(config.get_forbidden_paths())
    if config.should_validate_paths() and not validator.validate_source_file(file_path):
        print("\nError: Invalid file path or access denied")
        print("Please ensure the file exists, is a .py/.js/.jsx/.mjs/.cjs/.ts/.tsx file "
              "and is not inside a system directory.")
        return 1

    source = read_source(file_path)
    if source is None:
        print(f"\nError: Could not read {file_path}")
        return 1
    language = detect_language(file_path)

    if args.list:
        _print_records(extract(source, language))
        return 0

    style = args.style
    if style is None and interactive and language is Language.PYTHON:
        style = _menu_choice()
    if style is None:
        style = config.get_docstring_style() if language is Language.PYTHON else None
    style = resolve_style(language, style)

    if args.in_place or config.is_in_place():
        output_path = file_path
    else:
        output_path = validator.get_output_path(file_path, config.get_output_suffix(), args.output)
    if not output_path:
        print("\nError: Output path is not allowed")
        return 1

    cache = DocstringCache(cache_file=config.get_cache_file(), enabled=config.is_cache_enabled())
    rate_limiter = RateLimiter(calls_per_minute=config.get_rate_limit())
    generator = DocstringGenerator(
        client if client is not None else initialize_llm_client(config),
        cache=cache,
        rate_limiter=rate_limiter,
        max_concurrency=config.get_max_concurrency(),
        batch_delay=config.get_batch_delay(),
    )

    print(f"\nDocumenting {file_path} ({language.value}, {style.value} style)")
    updated, records, documentation = document_source(source, language, generator, style)
    if not records:
        logger.warning(f"No functions found in {file_path}")
        print("\nNo functions or classes were found in this file.")
        return 1
    if not documentation:
        print("\nError: Documentation could not be generated for any function")
        return 1

    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(updated)
    history.add(os.path.basename(file_path), language.value, source, updated)

    print("\n" + "=" * 60)
    print(f"  ✓ Documented {len(documentation)}/{len(records)} definition(s)")
    print(f"  ✓ Written to {output_path}")
    print("=" * 60)

    stats = cache.get_stats()
    if stats["enabled"]:
        print(f"\nCache statistics:")
        print(f"  - Total entries: {stats['total_entries']}")
        print(f"  - Hits: {stats['hits']}, misses: {stats['misses']}")
    print(f"\nLLM calls made: {rate_limiter.get_stats()['total_calls']}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    config = ConfigLoader(args.config)
    setup_logging(config)
    logger.info("Starting documentation generator")

    try:
        return run(args, config)
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user")
        logger.info("Operation cancelled by user")
        return 130
    except Exception as e:
        print(f"\nUnexpected error: {e}")
        logger.exception("Unexpected error in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())
