"""SDP normal play time (NPT) ranges, as found in ``a=range`` attributes."""

from __future__ import annotations

import math
import sys

from sdpline.helpers import scan_float, slots_dataclass


__all__ = [
    "NPT_OPEN_END",
    "NPTRange",
    "parse_ntp_range",
]


# end value of ranges without an end time
NPT_OPEN_END: float = sys.float_info.max


@slots_dataclass(frozen=True)
class NPTRange:
    """
    A normal play time range, in seconds.

    Spec::
        <start>-<end>
        <start>-
    """

    start: float
    end: float = NPT_OPEN_END

    @property
    def is_open_ended(self) -> bool:
        """Whether the range has no end time."""
        return self.end == NPT_OPEN_END

    @property
    def duration(self) -> float | None:
        """The duration of the range in seconds, or None if it's open-ended."""
        if self.is_open_ended:
            return None
        return self.end - self.start


def parse_ntp_range(value: str) -> NPTRange | None:
    """
    Parse an NPT range, without its ``npt=`` prefix.

    Ranges without an absolute start time (``-<end>``, ``now-``), or with ``now``
    as end time, are unavailable. When both times are given, the end must come
    after the start.

    :param value: the range value, e.g. ``5.0-10.0`` or ``0-``.
    :return: the parsed range, or None if it is unavailable or malformed.
    """
    if value.startswith("-"):
        return None  # no start time
    if value.startswith("now"):
        return None  # no absolute start time

    scanned = scan_float(value)
    if scanned is None:
        return None
    start, end_pos = scanned
    if not math.isfinite(start):
        return None
    if end_pos == len(value) or value[end_pos] != "-":
        return None

    rest = value[end_pos + 1 :]
    if not rest:
        return NPTRange(start=start)
    if rest.startswith("now"):
        return None  # no absolute end time

    scanned = scan_float(rest)
    if scanned is None or scanned[1] != len(rest):
        return None
    end = scanned[0]
    if not math.isfinite(end) or not end > start:
        return None
    return NPTRange(start=start, end=end)
