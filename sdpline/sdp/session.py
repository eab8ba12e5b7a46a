"""SDP session description: parsing into sections, and per-section queries."""

from __future__ import annotations

import logging
from typing import Sequence

from typing_extensions import Self

from sdpline.constants import CVO_EXTENSION_URN, NPT_PREFIXES, ROOT_FORMAT
from sdpline.exceptions import (
    SDPInvalidStateError,
    SDPParseError,
    SDPTrackIndexError,
)
from sdpline.helpers import atoi

from .common import Section
from .lines import SDPLine
from .media import Dimensions, FormatType, parse_payload_type
from .time import parse_ntp_range


__all__ = [
    "SessionDescription",
]


_logger = logging.getLogger(__name__)


class SessionDescription:
    """
    A parsed session description, as an ordered list of sections (tracks).

    Section 0 is the root section with the session-level lines, every ``m=`` line
    opens a new section. Parsing is all-or-nothing: after a failed parse the
    description is invalid and has no sections at all.

    Instances are not thread-safe: :meth:`set_to` must not run concurrently
    with queries on the same instance.
    """

    def __init__(self) -> None:
        self._sections: list[Section] = []
        self._is_valid: bool = False

    @classmethod
    def parse(cls, data: str | bytes) -> Self:
        """
        Parse SDP data into a new session description.

        :raises SDPParseError: if the data is not valid SDP.
        """
        description = cls()
        description._sections = cls._parse_sections(data)
        description._is_valid = True
        return description

    def set_to(self, data: str | bytes) -> bool:
        """
        Replace the contents of this description by parsing the given SDP data.

        :return: whether parsing succeeded. On failure, all sections are cleared.
        """
        try:
            self._sections = self._parse_sections(data)
        except SDPParseError as e:
            _logger.debug(f"Failed to parse SDP: {e}")
            self._sections = []
            self._is_valid = False
        else:
            self._is_valid = True
        return self._is_valid

    @staticmethod
    def _parse_sections(data: str | bytes) -> list[Section]:
        text = data.decode("latin-1") if isinstance(data, bytes) else data

        sections: list[Section] = [Section(format=ROOT_FORMAT)]
        # only newline-terminated lines are considered
        *lines, _ = text.split("\n")
        for line in lines:
            if line.endswith("\r"):
                line = line[:-1]  # noqa: PLW2901
            if not line:
                continue
            _logger.debug(line)
            SDPLine.parse(line).apply(sections)
        return sections

    @property
    def is_valid(self) -> bool:
        """Whether the last parse succeeded."""
        return self._is_valid

    @property
    def sections(self) -> Sequence[Section]:
        """Read-only view of the parsed sections."""
        return tuple(self._sections)

    def count_tracks(self) -> int:
        """The number of sections, including the root one."""
        return len(self._sections)

    def _get_section(self, index: int) -> Section:
        if not 0 <= index < len(self._sections):
            raise SDPTrackIndexError(
                f"Track index {index} out of range (tracks: {len(self._sections)})"
            )
        return self._sections[index]

    def get_format(self, index: int) -> str:
        """Return the media format of a section, i.e. its ``m=`` line content."""
        return self._get_section(index).format

    def find_attribute(self, index: int, key: str) -> str | None:
        """
        Return the value of the first attribute of a section with the given key.

        Keys include the line type, e.g. ``a=range``, ``b=AS``, ``a=rtpmap:96``, ``o=``.
        """
        return self._get_section(index).attributes.find(key)

    def get_cvo_ext_map(self, index: int) -> int | None:
        """Return the RTP header extension id of the video orientation (CVO) extension."""
        key = self._get_section(index).attributes.find_key_by_value(CVO_EXTENSION_URN)
        colon_pos = key.rfind(":") if key else -1
        if colon_pos < 0:
            return None
        return atoi(key[colon_pos + 1 :])

    def get_format_type(self, index: int) -> FormatType:
        """
        Return the payload type of a media section, with its codec description and parameters.

        The description and parameters are empty if there's no matching rtpmap.

        :raises SDPMalformedValueError: if the section format has no payload type.
        """
        payload_type = parse_payload_type(self.get_format(index))

        description = self.find_attribute(index, f"a=rtpmap:{payload_type}")
        if description is None:
            return FormatType(payload_type=payload_type)
        params = self.find_attribute(index, f"a=fmtp:{payload_type}")
        return FormatType(
            payload_type=payload_type,
            description=description,
            params=params or "",
        )

    def get_dimensions(self, index: int, payload_type: int) -> Dimensions | None:
        """
        Return the video frame size advertised for the payload type, if any.

        :raises SDPMalformedValueError: if the framesize attribute is present but malformed.
        """
        value = self.find_attribute(index, f"a=framesize:{payload_type}")
        if value is None:
            return None
        return Dimensions.parse(value)

    def get_duration_us(self) -> int | None:
        """
        Return the session duration in microseconds, from the root ``a=range`` attribute.

        :return: the duration, or None if there's no range, or it has no absolute
            start or end time.
        :raises SDPInvalidStateError: if the description is not valid.
        """
        if not self._is_valid:
            raise SDPInvalidStateError("Cannot get duration of an invalid session description")

        value = self.find_attribute(0, "a=range")
        if value is None:
            return None
        if not value.startswith(NPT_PREFIXES):
            return None

        npt_range = parse_ntp_range(value[len(NPT_PREFIXES[0]) :])
        if npt_range is None or npt_range.duration is None:
            return None
        return int(npt_range.duration * 1e6)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} valid={self._is_valid} "
            f"tracks={[section.format for section in self._sections]}>"
        )

