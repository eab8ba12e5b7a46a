"""Various constants used by the sdpline library."""

from __future__ import annotations


SUPPORTED_SDP_VERSIONS: list[str] = ["0"]

ROOT_FORMAT: str = "[root]"

# attributes whose stored key also carries the following payload type / id token
KEYED_ATTRIBUTES: frozenset[str] = frozenset({
    "a=fmtp",
    "a=rtpmap",
    "a=framesize",
    "a=extmap",
})

CVO_EXTENSION_URN: str = "urn:3gpp:video-orientation"

NPT_PREFIXES: tuple[str, ...] = ("npt=", "npt:")

DEFAULT_BANDWIDTH_KBPS: int = 960
AUDIO_CLOCK_RATE: int = 8000
VIDEO_CLOCK_RATE: int = 90000

LINE_TERMINATOR: str = "\r\n"
