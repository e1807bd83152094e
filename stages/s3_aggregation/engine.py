"""Aggregation of submissions into chart-ready series"""

import logging
import math
from typing import Any, Callable, Optional, Sequence

from core.enums import ChartType
from core.models import ChartConfig, HistogramBin, ParetoPoint, Submission
from utils.numbers import js_string, round_half_up, to_number
from config import settings

logger = logging.getLogger(__name__)

ChartPoint = dict[str, Any]

UNKNOWN_CATEGORY = "Unknown"


class AggregationEngine:
    """
    Turns submissions into chart points for a ChartConfig.

    Pure: no I/O, inputs are never mutated, and malformed numbers degrade to
    0 instead of raising.
    """

    def __init__(self, bin_count: Optional[int] = None):
        self.bin_count = bin_count or settings.HISTOGRAM_BIN_COUNT
        self.strategies: dict[ChartType, Callable[[Sequence[Submission], ChartConfig], list[ChartPoint]]] = {
            ChartType.HISTOGRAM: self.histogram,
            ChartType.PARETO: self.pareto,
            ChartType.SCATTER: self.series,
            ChartType.COLUMN: self.series,
            ChartType.BAR: self.series,
            ChartType.LINE: self.series,
            ChartType.AREA: self.series,
            ChartType.COMBO: self.series,
        }

    def aggregate(self, submissions: Sequence[Submission], config: ChartConfig) -> list[ChartPoint]:
        """
        Compute the chart series for ``config``

        Histogram needs only the Y axis, Pareto only the X axis, every other
        chart needs both.
        """
        if not submissions or not self._axes_ready(config):
            return []

        points = self.strategies[config.type](submissions, config)
        logger.debug("Aggregated %d submissions into %d %s points",
                     len(submissions), len(points), config.type.value)
        return points

    def _axes_ready(self, config: ChartConfig) -> bool:
        if config.type == ChartType.HISTOGRAM:
            return bool(config.y_axis)
        if config.type == ChartType.PARETO:
            return bool(config.x_axis)
        return bool(config.x_axis and config.y_axis)

    def histogram(self, submissions: Sequence[Submission], config: ChartConfig) -> list[ChartPoint]:
        """Equal-width bins over [min, max]; the top edge belongs to the last bin"""
        values = sorted(to_number(sub.data.get(config.y_axis)) for sub in submissions)
        low, high = values[0], values[-1]
        width = (high - low) / self.bin_count or 1

        bins = []
        for i in range(self.bin_count):
            start = low + i * width
            end = start + width
            bins.append(HistogramBin(
                range=f"{start:.1f} - {end:.1f}",
                start=start,
                end=end,
                target=config.target
            ))

        for value in values:
            target_bin = next((b for b in bins if b.start <= value < b.end), bins[-1])
            target_bin.count += 1

        return [b.to_point() for b in bins]

    def pareto(self, submissions: Sequence[Submission], config: ChartConfig) -> list[ChartPoint]:
        """Categories by summed value, descending, with cumulative share of total"""
        grouped: dict[str, float] = {}
        for sub in submissions:
            category = self._category(sub.data.get(config.x_axis))
            grouped[category] = grouped.get(category, 0) + to_number(sub.data.get(config.y_axis))

        ranked = sorted(grouped.items(), key=lambda item: item[1], reverse=True)
        total = sum(value for _, value in ranked)

        points = []
        cumulative = 0
        for name, value in ranked:
            cumulative += value
            # An all-zero total has no meaningful share; report 0%
            share = round_half_up(cumulative / total * 100) if total else 0
            points.append(ParetoPoint(
                name=name,
                value=value,
                cumulative_percentage=share,
                target=config.target
            ).to_point())
        return points

    def series(self, submissions: Sequence[Submission], config: ChartConfig) -> list[ChartPoint]:
        """One point per submission, in order, with the Y value made numeric"""
        return [
            {
                **sub.data,
                "index": index,
                config.y_axis: to_number(sub.data.get(config.y_axis)),
                "target": config.target,
            }
            for index, sub in enumerate(submissions, 1)
        ]

    def _category(self, raw: Any) -> str:
        if raw is None or raw == "" or raw is False or raw == 0:
            return UNKNOWN_CATEGORY
        if isinstance(raw, float) and math.isnan(raw):
            return UNKNOWN_CATEGORY
        return js_string(raw)


def aggregate(submissions: Sequence[Submission], config: ChartConfig) -> list[ChartPoint]:
    return AggregationEngine().aggregate(submissions, config)
