"""Viewport virtualization: which rows or columns to materialize."""

import math
from enum import Enum
from typing import List, Optional, Sequence, TypeVar

from ..models.layout import ViewportRange

T = TypeVar('T')

DEFAULT_BUFFER_SIZE = 5


class Axis(Enum):
    """Scroll axis of a virtualized list."""

    VERTICAL = 'vertical'      # task rows
    HORIZONTAL = 'horizontal'  # date columns


def compute_range(
    scroll_offset: float,
    viewport_size: float,
    item_size: float,
    item_count: int,
    buffer: int = DEFAULT_BUFFER_SIZE,
) -> ViewportRange:
    """Minimal contiguous index range to render, padded by ``buffer`` items.

    The caller renders a spacer of ``before_size`` ahead of ``start_index``
    and one of ``after_size`` behind ``end_index`` so the scroll extent
    matches the full list. An empty list yields ``end_index == -1``.
    """
    if item_size <= 0:
        raise ValueError(f"item_size must be positive, got {item_size}")

    if item_count <= 0:
        return ViewportRange(start_index=0, end_index=-1, before_size=0, after_size=0)

    scroll_offset = max(0, scroll_offset)
    viewport_size = max(0, viewport_size)

    start_index = max(0, math.floor(scroll_offset / item_size) - buffer)
    end_index = min(item_count - 1, math.ceil((scroll_offset + viewport_size) / item_size) + buffer)
    # scrolled past the end
    start_index = min(start_index, end_index)

    return ViewportRange(
        start_index=start_index,
        end_index=end_index,
        before_size=start_index * item_size,
        after_size=(item_count - end_index - 1) * item_size,
    )


def full_range(item_count: int) -> ViewportRange:
    """Range covering every item, with no spacers."""
    return ViewportRange(
        start_index=0,
        end_index=item_count - 1 if item_count > 0 else -1,
        before_size=0,
        after_size=0,
    )


def materialize(items: Sequence[T], window: ViewportRange) -> List[T]:
    """The items inside the range, in order."""
    if window.end_index < window.start_index:
        return []
    return list(items[window.start_index:window.end_index + 1])


class ViewportVirtualizer:
    """Windowing along one axis with a configured item size and buffer."""

    def __init__(self, axis: Axis, config: dict, item_size: Optional[float] = None):
        """Initialize virtualizer for an axis from configuration."""
        self.axis = axis
        self.config = config
        if axis is Axis.VERTICAL:
            section = config.get('rows', {})
            default_size = section.get('row_height', 50)
        else:
            section = config.get('columns', {})
            default_size = config.get('timeline', {}).get('day_width', 40)
        self.item_size = item_size if item_size is not None else default_size
        self.buffer = section.get('buffer_size', DEFAULT_BUFFER_SIZE if axis is Axis.VERTICAL else 0)

    def compute_range(self, scroll_offset: float, viewport_size: float, item_count: int) -> ViewportRange:
        """Visible index range for the current scroll position."""
        return compute_range(scroll_offset, viewport_size, self.item_size, item_count, self.buffer)

    def full_range(self, item_count: int) -> ViewportRange:
        """Range that renders every item (the date header grid)."""
        return full_range(item_count)

    def total_size(self, item_count: int) -> float:
        """Scrollable extent of the whole list."""
        return max(0, item_count) * self.item_size

    def materialize(self, items: Sequence[T], scroll_offset: float, viewport_size: float) -> List[T]:
        """Items to render for the current scroll position."""
        return materialize(items, self.compute_range(scroll_offset, viewport_size, len(items)))
