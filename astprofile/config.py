"""Default settings for analysis and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_MAX_DEPTH = 1024
MAX_DEPTH_LIMIT = 4096
DEFAULT_FORMAT = "svg"
DEFAULT_ARTIFACT_STEM = "ast"
DEFAULT_OUTPUT_DIR = Path(".")

ENV_MAX_DEPTH = "ASTPROFILE_MAX_DEPTH"
ENV_OUTPUT_DIR = "ASTPROFILE_OUTPUT_DIR"
ENV_FORMAT = "ASTPROFILE_FORMAT"


@dataclass
class AnalysisConfig:
    """Settings that affect how a source file is parsed and walked."""

    max_depth: int = DEFAULT_MAX_DEPTH
    include_headers: bool = False
    clang_args: list[str] = field(default_factory=list)


@dataclass
class RenderConfig:
    """Settings for the render/view/cleanup pipeline."""

    output_dir: Path = DEFAULT_OUTPUT_DIR
    format: str = DEFAULT_FORMAT
    stem: str = DEFAULT_ARTIFACT_STEM
    view: bool = True
    keep: bool = False

    @property
    def dot_path(self) -> Path:
        return self.output_dir / f"{self.stem}.dot"

    @property
    def image_path(self) -> Path:
        return self.output_dir / f"{self.stem}.{self.format}"
