"""Analyzer that coordinates tree providers and the traversal."""

from __future__ import annotations

import logging
from pathlib import Path

from astprofile.config import AnalysisConfig
from astprofile.core.models import AnalysisResult
from astprofile.core.traversal import traverse
from astprofile.languages import get_provider

logger = logging.getLogger(__name__)


def analyze_file(file: Path, config: AnalysisConfig | None = None) -> AnalysisResult:
    """Parse one source file and traverse its syntax tree.

    Args:
        file: Source file to analyze
        config: Parsing and traversal settings (defaults when omitted)

    Returns:
        AnalysisResult with the metrics, graph records and DOT source

    Raises:
        UnsupportedLanguageError: No provider handles the file suffix
        ParseError: The file cannot be read or parsed
        TreeTooDeepError: The tree exceeds ``config.max_depth``
    """
    config = config or AnalysisConfig()
    provider = get_provider(
        file,
        clang_args=config.clang_args,
        include_headers=config.include_headers,
    )
    logger.debug("Parsing %s with %s", file, type(provider).__name__)

    tree = provider.parse(file)
    return traverse(tree, max_depth=config.max_depth)
