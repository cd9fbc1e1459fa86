"""
Batch export: a fixed number of mazes split into difficulty bands, each one
generated once, exported to SVG, encoded to JPEG and stored as
<band>/maze-<k>.jpg in a zip archive, next to an info_labels.jsonl manifest
with one record per written maze.

The band difficulty is recorded in the manifest next to the bend ratio the
maze actually has. With enforce_difficulty set, each unit is instead
regenerated until it reaches its band's ratio, up to max_iterations attempts.

A unit that fails (threshold not reached within the iteration cap, or an
encode error) is logged and reported in the returned BatchReport; the rest
of the batch is still written.
"""

import json
import logging
import random
import zipfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from bendmaze.config import BatchConfig, Band, DEF_MANIFEST_NAME
from bendmaze.difficulty import generate_with_bend_ratio
from bendmaze.errors import EncodeError, NonConvergentDifficulty
from bendmaze.grid import encode_maze, validate_dimension
from bendmaze.raster import encode_jpeg
from bendmaze.solver import path_segments
from bendmaze.svg import maze_to_svg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unit:
    index: int   # 1-based position in the whole batch
    band: Band
    number: int  # 1-based position inside the band

    @property
    def arcname(self) -> str:
        return f"{self.band.name}/maze-{self.number}.jpg"


@dataclass
class UnitFailure:
    unit: Unit
    error: str


@dataclass
class BatchReport:
    out_zip: str
    written: List[Unit] = field(default_factory=list)
    failures: List[UnitFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def plan_batch(total: int, bands: Sequence[Band]) -> List[Unit]:
    """
    Assign units 1..total to bands in order, each band taking its percentage
    share of the total (rounded down at the cumulative boundary; the last band
    takes whatever is left).
    """
    if total < 0:
        raise ValueError(f"total must be >= 0, got {total}")
    if not bands:
        raise ValueError("at least one band is required")
    if sum(b.share for b in bands) != 100:
        raise ValueError(f"band shares must add up to 100, got {sum(b.share for b in bands)}")

    units: List[Unit] = []
    start = 0
    cum = 0
    for i, band in enumerate(bands):
        cum += band.share
        stop = total if i == len(bands) - 1 else total * cum // 100
        for k, idx in enumerate(range(start, stop), start=1):
            units.append(Unit(index=idx + 1, band=band, number=k))
        start = stop
    return units


def export_batch(out_zip: str, config: Optional[BatchConfig] = None,
                 encoder: Callable[..., bytes] = encode_jpeg) -> BatchReport:
    if config is None:
        config = BatchConfig()
    validate_dimension(config.dimension)
    units = plan_batch(config.total, config.bands)
    report = BatchReport(out_zip=out_zip)

    # Generation stays sequential; each unit gets its own seeded rng.
    jobs = []
    for unit in units:
        if config.base_seed is None:
            rng = random.Random()
        else:
            rng = random.Random(config.base_seed + unit.index)
        target = unit.band.difficulty if config.enforce_difficulty else 0.0
        try:
            result = generate_with_bend_ratio(
                config.dimension, target, rng,
                max_iterations=config.max_iterations, method=config.method,
            )
        except NonConvergentDifficulty as e:
            logger.warning("Skipping %s: %s", unit.arcname, e)
            report.failures.append(UnitFailure(unit, str(e)))
            continue
        jobs.append((unit, result, maze_to_svg(result.grid)))

    def encode(job):
        _, _, svg = job
        return encoder(svg, config.width, config.height, config.quality)

    if config.workers > 1:
        with ThreadPoolExecutor(max_workers=config.workers) as pool:
            futures = [pool.submit(encode, job) for job in jobs]
            outcomes = [_outcome(f.result) for f in futures]
    else:
        outcomes = [_outcome(lambda job=job: encode(job)) for job in jobs]

    with zipfile.ZipFile(out_zip, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        manifest = []
        for (unit, result, _), (data, err) in zip(jobs, outcomes):
            if err is not None:
                logger.warning("Encode failed for %s: %s", unit.arcname, err)
                report.failures.append(UnitFailure(unit, str(err)))
                continue
            zf.writestr(unit.arcname, data)
            report.written.append(unit)
            manifest.append(_manifest_record(unit, result))
        zf.writestr(DEF_MANIFEST_NAME, "".join(json.dumps(rec) + "\n" for rec in manifest))

    logger.info("Wrote %d mazes to %s (%d failed)", len(report.written), out_zip, len(report.failures))
    return report


def _outcome(call):
    try:
        return call(), None
    except EncodeError as e:
        return None, e

def _manifest_record(unit: Unit, result) -> dict:
    return {
        "index": unit.index,
        "band": unit.band.name,
        "number": unit.number,
        "file": unit.arcname,
        "difficulty": unit.band.difficulty,
        "meets_difficulty": result.bend_ratio >= unit.band.difficulty,
        "dimension": result.dimension,
        "iterations": result.iterations,
        "bend_ratio": round(result.bend_ratio, 6),
        "bends": result.bends,
        "signature": encode_maze(result.grid),
        "true_path": [[r, c] for (r, c) in (result.solution or [])],
        "segments": [[d, k] for (d, k) in path_segments(result.solution or [])],
    }
