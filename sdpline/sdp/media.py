"""SDP media related values: payload types, codec descriptions and frame sizes."""

from __future__ import annotations

from typing_extensions import Self

from sdpline.exceptions import SDPMalformedValueError
from sdpline.helpers import scan_uint, slots_dataclass


__all__ = [
    "FormatDesc",
    "FormatType",
    "Dimensions",
    "parse_format_desc",
    "parse_payload_type",
]


@slots_dataclass(frozen=True)
class FormatDesc:
    """
    Timescale and channels of an rtpmap encoding description.

    Spec::
        <encoding name>/<clock rate>[/<channels>]
    """

    timescale: int
    channels: int = 1

    @classmethod
    def parse(cls, desc: str) -> Self:
        """
        Parse an rtpmap encoding description, like ``mpeg4-generic/44100/2``.

        :raises SDPMalformedValueError: if the description doesn't match the grammar.
        """
        slash_pos = desc.find("/")
        if slash_pos < 0:
            raise SDPMalformedValueError(f"Missing clock rate in format description {desc!r}")

        scanned = scan_uint(desc, slash_pos + 1)
        if scanned is None:
            raise SDPMalformedValueError(f"Invalid clock rate in format description {desc!r}")
        timescale, end = scanned
        if end == len(desc):
            return cls(timescale=timescale)
        if desc[end] != "/":
            raise SDPMalformedValueError(
                f"Unexpected data after clock rate in format description {desc!r}"
            )

        scanned = scan_uint(desc, end + 1)
        if scanned is None or scanned[1] != len(desc):
            raise SDPMalformedValueError(f"Invalid channels in format description {desc!r}")
        return cls(timescale=timescale, channels=scanned[0])


def parse_format_desc(desc: str) -> FormatDesc:
    """Parse the ``<name>/<timescale>[/<channels>]`` value of an rtpmap attribute."""
    return FormatDesc.parse(desc)


def parse_payload_type(media_format: str) -> int:
    """
    Extract the payload type from a media format, i.e. the token after its last space.

    E.g. ``audio 0 RTP/AVP 96`` gives ``96``.

    :raises SDPMalformedValueError: if there's no trailing numeric token.
    """
    space_pos = media_format.rfind(" ")
    if space_pos < 0:
        raise SDPMalformedValueError(f"No payload type in media format {media_format!r}")
    scanned = scan_uint(media_format, space_pos + 1)
    if scanned is None or scanned[1] != len(media_format):
        raise SDPMalformedValueError(
            f"Invalid payload type in media format {media_format!r}"
        )
    return scanned[0]


@slots_dataclass(frozen=True)
class FormatType:
    """The payload type of a media section, with its rtpmap and fmtp values."""

    payload_type: int
    description: str = ""
    params: str = ""


@slots_dataclass(frozen=True)
class Dimensions:
    """
    Video frame size, as advertised by the framesize attribute.

    Spec::
        framesize:<payload type> <width>-<height>
    """

    width: int
    height: int

    @classmethod
    def parse(cls, value: str) -> Self:
        """
        Parse a ``<width>-<height>`` frame size.

        :raises SDPMalformedValueError: if the value isn't exactly two dash-separated numbers.
        """
        scanned = scan_uint(value)
        if scanned is None or scanned[1] == len(value) or value[scanned[1]] != "-":
            raise SDPMalformedValueError(f"Invalid frame width in framesize {value!r}")
        width, end = scanned

        scanned = scan_uint(value, end + 1)
        if scanned is None or scanned[1] != len(value):
            raise SDPMalformedValueError(f"Invalid frame height in framesize {value!r}")
        return cls(width=width, height=scanned[0])

    def serialize(self) -> str:
        """Serialize the dimensions to a ``<width>-<height>`` string."""
        return f"{self.width}-{self.height}"

    def __str__(self) -> str:
        return self.serialize()
