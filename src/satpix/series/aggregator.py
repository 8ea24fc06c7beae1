"""Aggregate a long pixel table into one mean value per date."""

import logging

import pandas as pd

from satpix.contracts import require

__all__ = ['DateAggregator', 'aggregate_by_date']

logger = logging.getLogger(__name__)


def aggregate_by_date(table: pd.DataFrame) -> pd.DataFrame:
    """Mean of non-missing ``value`` per distinct ``date``.

    Returns
    -------
    pd.DataFrame
        Columns ``date``, ``value`` (NaN when a date has no valid pixel) and
        ``n_valid``; sorted by date ascending.
    """
    require(
        {"date", "value"} <= set(table.columns),
        f"Series contract violated: expected 'date' and 'value' columns, got {list(table.columns)}",
    )
    values = pd.to_numeric(table["value"], errors="coerce")
    series = (
        values.groupby(table["date"], sort=True)
        .agg(value="mean", n_valid="count")
        .reset_index()
    )
    return series.sort_values("date", kind="stable").reset_index(drop=True)


class DateAggregator:
    """Stage wrapper around aggregate_by_date() with logging."""

    def aggregate(self, table: pd.DataFrame) -> pd.DataFrame:
        series = aggregate_by_date(table)
        empty = series.loc[series["n_valid"] == 0, "date"]
        for date in empty:
            logger.warning("No valid pixels on %s; mean is no-data", pd.Timestamp(date).date())
        logger.info("Aggregated %d dates", len(series))
        return series
