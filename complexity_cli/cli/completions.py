"""
Autocompletion functions for Complexity CLI.
"""

from typing import List

from complexity_cli.engine.languages import LANGUAGE_ALIASES, SUPPORTED_LANGUAGES


class Completions:
    """Autocompletion provider for Complexity CLI."""

    @staticmethod
    def languages(incomplete: str) -> List[str]:
        """Complete language options."""
        langs = sorted(SUPPORTED_LANGUAGES) + sorted(LANGUAGE_ALIASES)
        return [lang for lang in langs if lang.startswith(incomplete.lower())]
