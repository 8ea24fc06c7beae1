"""Pair raster files with their acquisition dates.

A directory of per-date rasters and a metadata CSV of dates are joined
explicitly, never by assuming the directory listing and the CSV rows share
an order:

- **file column**: the metadata names the raster file of every row.
- **file name date**: each file name embeds its date (e.g.
  ``NDVI_20240117.tif`` with ``filename_date_format="%Y%m%d"``); the parsed
  dates must match the metadata dates one to one.
- **positional**: only when requested with ``positional=True`` and neither
  key is configured; counts must match and a warning is logged. With no key
  and no opt-in the join is refused.

Every mismatch raises OrderingMismatchError.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

import pandas as pd

from satpix.contracts import (
    ContractViolation,
    MissingSourceError,
    OrderingMismatchError,
    assert_dates_match_files,
    require,
    require_path,
)

if TYPE_CHECKING:
    from satpix.schemas import InternalConfig

__all__ = [
    'AcquisitionCatalog',
    'build_catalog',
    'list_rasters',
    'parse_filename_date',
    'read_metadata',
]

logger = logging.getLogger(__name__)

_FORMAT_TOKENS = {
    "%Y": r"\d{4}",
    "%y": r"\d{2}",
    "%m": r"\d{2}",
    "%d": r"\d{2}",
    "%j": r"\d{3}",
    "%H": r"\d{2}",
    "%M": r"\d{2}",
    "%S": r"\d{2}",
}


def _format_regex(fmt: str) -> re.Pattern:
    pattern = re.escape(fmt)
    for token, rx in _FORMAT_TOKENS.items():
        pattern = pattern.replace(re.escape(token), rx)
    return re.compile(pattern)


def list_rasters(raster_dir, pattern: str = "*.tif") -> List[Path]:
    """Return the raster files of `raster_dir` matching `pattern`, sorted by name."""
    raster_dir = require_path(raster_dir, kind="dir")
    paths = sorted(p for p in raster_dir.glob(pattern) if p.is_file())
    require(
        len(paths) > 0,
        f"No rasters matching '{pattern}' in {raster_dir}",
        MissingSourceError,
    )
    return paths


def read_metadata(metadata_csv, date_column: str = "date",
                  date_format: Optional[str] = None) -> pd.DataFrame:
    """Read the metadata CSV and parse its date column to datetime64."""
    path = require_path(metadata_csv)
    meta = pd.read_csv(path)
    require(
        date_column in meta.columns,
        f"Metadata contract violated: column '{date_column}' not in {path.name} "
        f"(columns: {list(meta.columns)})",
        ContractViolation,
    )
    meta[date_column] = pd.to_datetime(meta[date_column], format=date_format)
    blank = meta.index[meta[date_column].isna()].tolist()
    require(
        not blank,
        f"Metadata contract violated: rows {blank} of {path.name} have no "
        f"'{date_column}' value",
        OrderingMismatchError,
    )
    return meta


def parse_filename_date(path, fmt: str) -> pd.Timestamp:
    """Extract the date embedded in a file name.

    Raises
    ------
    OrderingMismatchError
        If the name holds no date in `fmt`.
    """
    stem = Path(path).stem
    match = _format_regex(fmt).search(stem)
    require(
        match is not None,
        f"No date in format '{fmt}' found in file name {Path(path).name}",
        OrderingMismatchError,
    )
    try:
        return pd.Timestamp(datetime.strptime(match.group(0), fmt))
    except ValueError as e:
        raise OrderingMismatchError(
            f"Invalid date '{match.group(0)}' in file name {Path(path).name}"
        ) from e


def _join_on_file_column(paths, meta, date_column, file_column) -> List[pd.Timestamp]:
    require(
        file_column in meta.columns,
        f"Metadata contract violated: column '{file_column}' not found",
        ContractViolation,
    )
    names = meta[file_column].astype(str).map(lambda s: Path(s.strip()).name)
    require(
        not names.duplicated().any(),
        f"Metadata lists files more than once: {sorted(set(names[names.duplicated()]))}",
        OrderingMismatchError,
    )
    lookup = dict(zip(names, meta[date_column]))

    file_names = [p.name for p in paths]
    unmatched = [n for n in file_names if n not in lookup]
    require(
        not unmatched,
        f"Rasters without a metadata row: {unmatched}",
        OrderingMismatchError,
    )
    orphaned = sorted(set(lookup) - set(file_names))
    require(
        not orphaned,
        f"Metadata rows without a raster file: {orphaned}",
        OrderingMismatchError,
    )
    return [lookup[n] for n in file_names]


def _join_on_filename_date(paths, meta, date_column, fmt) -> List[pd.Timestamp]:
    file_dates = [parse_filename_date(p, fmt) for p in paths]
    meta_dates = list(meta[date_column])

    extra = sorted(set(file_dates) - set(meta_dates))
    missing = sorted(set(meta_dates) - set(file_dates))
    require(
        not extra and not missing and sorted(file_dates) == sorted(meta_dates),
        "File name dates do not match metadata dates: "
        f"not in metadata={[d.date().isoformat() for d in extra]}, "
        f"no raster={[d.date().isoformat() for d in missing]}",
        OrderingMismatchError,
    )
    return file_dates


def build_catalog(raster_paths, metadata: pd.DataFrame, date_column: str = "date",
                  file_column: Optional[str] = None,
                  filename_date_format: Optional[str] = None,
                  positional: bool = False) -> pd.DataFrame:
    """Assign an acquisition date to every raster file.

    Parameters
    ----------
    raster_paths : sequence of Path
        Raster files, in directory listing order.
    metadata : pd.DataFrame
        Output of read_metadata().
    date_column : str
        Metadata column with acquisition dates.
    file_column : str, optional
        Metadata column with raster file names (keyed join).
    filename_date_format : str, optional
        strftime format of the date embedded in each file name.
    positional : bool
        Pair files and dates by order when no key is given. Off unless
        the listing order is known to be the acquisition order.

    Returns
    -------
    pd.DataFrame
        Columns ``path`` and ``date``, in the order of `raster_paths`.

    Raises
    ------
    OrderingMismatchError
        If files and dates cannot be paired one to one, or no join key is
        configured and `positional` is False.
    """
    paths = [Path(p) for p in raster_paths]
    assert_dates_match_files(paths, metadata[date_column])

    if file_column:
        dates = _join_on_file_column(paths, metadata, date_column, file_column)
    elif filename_date_format:
        dates = _join_on_filename_date(paths, metadata, date_column, filename_date_format)
    else:
        require(
            positional,
            "No join key configured: set file_column or filename_date_format, "
            "or enable positional pairing explicitly",
            OrderingMismatchError,
        )
        logger.warning(
            "Pairing %d rasters with metadata dates by position; set file_column "
            "or filename_date_format for a keyed join", len(paths)
        )
        dates = list(metadata[date_column])

    return pd.DataFrame({"path": paths, "date": pd.to_datetime(dates)})


class AcquisitionCatalog:
    """Builds the raster-to-date catalog from ``config.series``."""

    def __init__(self, config: "InternalConfig"):
        self.raster_dir = config.series.raster_dir
        self.metadata_csv = config.series.metadata_csv
        self.raster_glob = config.series.raster_glob
        self.date_column = config.series.date_column
        self.date_format = config.series.date_format
        self.file_column = config.series.file_column
        self.filename_date_format = config.series.filename_date_format
        self.positional_join = config.series.positional_join

    def build(self) -> pd.DataFrame:
        paths = list_rasters(self.raster_dir, self.raster_glob)
        meta = read_metadata(self.metadata_csv, self.date_column, self.date_format)
        catalog = build_catalog(
            paths, meta, self.date_column,
            file_column=self.file_column,
            filename_date_format=self.filename_date_format,
            positional=self.positional_join,
        )
        logger.info("Catalog: %d rasters from %s to %s", len(catalog),
                    catalog["date"].min().date(), catalog["date"].max().date())
        return catalog
