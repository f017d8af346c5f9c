"""Render, display and clean up the DOT graph of a traversal."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import graphviz

from astprofile.config import RenderConfig
from astprofile.core.exceptions import RenderError

logger = logging.getLogger(__name__)

Acknowledge = Callable[[], object]


def render_graph(dot_source: str, config: RenderConfig) -> Path:
    """Write the DOT source and rasterize it with Graphviz.

    Returns:
        Path of the rendered image

    Raises:
        RenderError: If the DOT file cannot be written or ``dot`` fails
    """
    dot_path = config.dot_path
    image_path = config.image_path

    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
        dot_path.write_text(dot_source, encoding="utf-8")
    except OSError as e:
        raise RenderError(f"Cannot write {dot_path}: {e}") from e

    try:
        graphviz.render("dot", config.format, dot_path, outfile=image_path, quiet=True)
    except graphviz.ExecutableNotFound as e:
        raise RenderError("Graphviz 'dot' executable not found on PATH") from e
    except graphviz.CalledProcessError as e:
        raise RenderError(
            f"Failed to convert {dot_path.name} to {config.format.upper()}: {e}"
        ) from e

    logger.debug("Rendered %s -> %s", dot_path, image_path)
    return image_path


def present(image_path: Path, config: RenderConfig, acknowledge: Acknowledge | None = None) -> bool:
    """Open the image, wait for acknowledgment, then remove the artifacts.

    Artifacts are removed even when no acknowledgment arrives because
    input is closed, unless ``config.keep`` is set.

    Returns:
        True if the artifacts were removed

    Raises:
        RenderError: If no viewer can be launched or input ends before
            acknowledgment
    """
    try:
        graphviz.view(image_path, quiet=True)
    except (RuntimeError, OSError) as e:
        raise RenderError(f"Failed to launch a viewer for {image_path}: {e}") from e

    try:
        if acknowledge is not None:
            acknowledge()
    except EOFError as e:
        raise RenderError(f"Input closed before {image_path.name} was acknowledged") from e
    finally:
        removed = not config.keep
        if removed:
            cleanup(config)
    return removed


def cleanup(config: RenderConfig) -> None:
    """Remove the DOT and image artifacts if present."""
    for path in (config.dot_path, config.image_path):
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise RenderError(f"Failed to delete {path}: {e}") from e
        logger.debug("Removed %s", path)


def run_pipeline(
    dot_source: str, config: RenderConfig, acknowledge: Acknowledge | None = None
) -> Path:
    """Render the graph and, unless viewing is disabled, present it.

    Returns:
        Path of the rendered image (already removed when presented without keep)
    """
    image_path = render_graph(dot_source, config)
    if config.view:
        present(image_path, config, acknowledge)
    return image_path
