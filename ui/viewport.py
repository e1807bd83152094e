"""Interactive value-axis viewport"""

from typing import Literal, Optional, Sequence, Union

from core.models import ChartConfig
from config import settings

AUTO = "auto"

Bound = Union[float, Literal["auto"]]


class ViewportController:
    """
    Zoom/pan state of a chart's value axis.

    The domain ``(y_min, y_max)`` is independent of the data; ``"auto"``
    bounds are resolved against the data only while a gesture is applied
    (0 floor, ``max * headroom`` ceiling).
    """

    def __init__(
        self,
        headroom: Optional[float] = None,
        zoom_step: Optional[float] = None,
        pan_factor: Optional[float] = None,
    ):
        self.headroom = headroom or settings.VIEWPORT_HEADROOM
        self.zoom_step = zoom_step or settings.VIEWPORT_ZOOM_STEP
        self.pan_factor = pan_factor or settings.VIEWPORT_PAN_FACTOR

        self.y_min: Bound = 0
        self.y_max: Bound = AUTO
        self.dragging = False
        self.last_pointer_y: Optional[float] = None
        self._tracked: Optional[tuple] = None

    @property
    def domain(self) -> tuple[Bound, Bound]:
        return (self.y_min, self.y_max)

    @property
    def is_zoomed(self) -> bool:
        return self.y_max != AUTO

    def reset(self) -> None:
        self.y_min = 0
        self.y_max = AUTO

    def track(self, form_id: Optional[str], config: ChartConfig) -> bool:
        """
        Reset when the form, the value axis or the chart type changed

        Returns:
            True if the viewport was reset
        """
        key = (form_id, config.y_axis, config.type)
        changed = self._tracked is not None and key != self._tracked
        self._tracked = key
        if changed:
            self.reset()
        return changed

    def zoom(self, delta: float, data_values: Sequence[float]) -> None:
        """
        Apply one scroll tick

        A positive delta widens the range by one step (zoom out), anything
        else narrows it (zoom in). The range never grows past the auto
        ceiling of the data.
        """
        if not data_values:
            return

        envelope = max(data_values) * self.headroom
        current_max = envelope if self.y_max == AUTO else self.y_max
        current_min = 0 if self.y_min == AUTO else self.y_min

        span = current_max - current_min
        step = self.zoom_step if delta > 0 else -self.zoom_step
        new_span = min(span * (1 + step), envelope)

        self.y_min = current_min
        self.y_max = current_min + new_span

    def start_drag(self, pointer_y: float) -> None:
        self.dragging = True
        self.last_pointer_y = pointer_y

    def drag(self, pointer_y: float) -> None:
        """Pan by the pointer movement since the last event; needs an explicit domain"""
        if not self.dragging or self.last_pointer_y is None:
            return
        if self.y_max == AUTO:
            return

        y_min = 0 if self.y_min == AUTO else self.y_min
        span = self.y_max - y_min
        shift = (self.last_pointer_y - pointer_y) * span * self.pan_factor

        self.y_min = y_min + shift
        self.y_max = self.y_max + shift
        self.last_pointer_y = pointer_y

    def end_drag(self) -> None:
        self.dragging = False
