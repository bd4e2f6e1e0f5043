"""
Resolved options and configuration handling for Complexity CLI.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from complexity_cli.core.config import AnalyzerConfig, load_config_file
from complexity_cli.core.logging import configure_logging, log_debug, log_info
from complexity_cli.engine import resolve_language


@dataclass
class ResolvedOptions:
    """Container for resolved CLI options."""

    language: Optional[str]
    output_format: str
    timestamp_format: str
    show_explanation: bool
    use_store: bool
    store_path: Path


def resolve_options(
    language_override: Optional[str] = None,
    config_override: Optional[str] = None,
    debug_override: bool = False,
    verbose_override: bool = False,
    json_override: bool = False,
    no_store_override: bool = False,
    log_file_override: Optional[str] = None,
) -> ResolvedOptions:
    """Resolves options based on command args, config files, and defaults."""
    config = AnalyzerConfig.from_dict(load_config_file(config_override))

    configure_logging(
        debug=debug_override or config.debug,
        verbose=verbose_override,
        log_file=log_file_override or config.log_file,
    )
    log_debug(f"Loaded config from {config_override or 'default locations'}")

    language = None
    if language_override:
        log_debug(f"Resolving language from override: {language_override}")
        language = resolve_language(language_override)
    elif config.language:
        log_debug(f"Using language from config: {config.language}")
        language = resolve_language(config.language)

    output_format = "json" if json_override else config.output_format

    use_store = config.store.enabled
    if no_store_override:
        log_debug("Result store disabled via --no-store flag")
        use_store = False

    resolved = ResolvedOptions(
        language=language,
        output_format=output_format,
        timestamp_format=config.timestamp_format,
        show_explanation=config.show_explanation,
        use_store=use_store,
        store_path=config.get_store_path(),
    )

    log_info(
        f"Options resolved (output={resolved.output_format}, store={resolved.use_store})",
        language=resolved.language,
    )

    return resolved
