"""Defaults shared by the library and the CLI, plus the JSON batch config loader."""

import json
import logging
import os
from dataclasses import dataclass, field, fields
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# -------------------------
# Defaults
# -------------------------
DEF_DIMENSION  = 20
DEF_DIFFICULTY = 0.0
DEF_METHOD     = 'rescan'

DEF_CELL_PX        = 10   # canvas px per cell
DEF_WALL_PX        = 1    # interior wall thickness on the canvas
DEF_BORDER_PX      = 3    # outer wall thickness on the canvas
DEF_SOLUTION_PX    = 2
DEF_SOLUTION_COLOR = (255, 0, 0)

SVG_CELL_SIZE     = 10
SVG_STROKE_WIDTH  = 2
SVG_BORDER_STROKE = 4

DEF_RASTER_W = 500
DEF_RASTER_H = 500
DEF_JPEG_QUALITY = 95

DEF_BATCH_TOTAL     = 100
DEF_BATCH_DIMENSION = 40
DEF_BASE_SEED       = 20250924
DEF_MANIFEST_NAME   = "info_labels.jsonl"

# Safety valve for the CLI and batch retry loops; the library default is unbounded.
DEF_MAX_ITERATIONS = 1000


@dataclass(frozen=True)
class Band:
    name: str
    difficulty: float
    share: int  # percent of the batch

# easy: first 20 %, medium: next 30 %, hard: the rest.
# The difficulty is a label unless BatchConfig.enforce_difficulty is set.
DEF_BANDS: Tuple[Band, ...] = (
    Band("easy", 0.12, 20),
    Band("medium", 0.16, 30),
    Band("hard", 0.23, 50),
)


@dataclass
class BatchConfig:
    total: int = DEF_BATCH_TOTAL
    dimension: int = DEF_BATCH_DIMENSION
    width: int = DEF_RASTER_W
    height: int = DEF_RASTER_H
    quality: int = DEF_JPEG_QUALITY
    base_seed: Optional[int] = DEF_BASE_SEED
    method: str = DEF_METHOD
    workers: int = 1
    enforce_difficulty: bool = False
    max_iterations: Optional[int] = DEF_MAX_ITERATIONS
    bands: Tuple[Band, ...] = field(default=DEF_BANDS)


def load_batch_config(config_path: str = "config/batch.json") -> BatchConfig:
    """
    Load batch export settings from a JSON file of the form {"batch": {...}}.
    Unknown keys are ignored; a missing file yields the defaults.
    """
    if not os.path.exists(config_path):
        logger.warning("Config file not found: %s, using defaults", config_path)
        return BatchConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    config_data = data.get("batch", {})
    allowed_keys = {f.name for f in fields(BatchConfig)}
    filtered = {k: v for k, v in config_data.items() if k in allowed_keys}
    ignored = sorted(set(config_data) - allowed_keys)
    if ignored:
        logger.warning("Ignoring unknown batch config keys: %s", ", ".join(ignored))

    if "bands" in filtered:
        filtered["bands"] = tuple(
            Band(b["name"], float(b["difficulty"]), int(b["share"])) for b in filtered["bands"]
        )
    return BatchConfig(**filtered)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
