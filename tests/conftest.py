from __future__ import annotations

import logging

import pytest

from sdpline import SessionDescription


CAMERA_SDP_LINES = [
    "v=0",
    "o=- 1234 1 IN IP4 192.168.0.10",
    "s=Session streamed by camera",
    "t=0 0",
    "a=control:*",
    "a=range:npt=0-12.5",
    "m=video 0 RTP/AVP 96",
    "b=AS:5000",
    "a=rtpmap:96 H264/90000",
    "a=fmtp:96 packetization-mode=1;profile-level-id=42e01f",
    "a=framesize:96 1280-720",
    "a=extmap:4 urn:3gpp:video-orientation",
    "a=control:trackID=1",
    "m=audio 0 RTP/AVP 97",
    "a=rtpmap:97 mpeg4-generic/44100/2",
    "a=fmtp:97 streamtype=5;mode=AAC-hbr",
    "a=control:trackID=2",
]


@pytest.fixture(params=["\r\n", "\n"], ids=["crlf", "lf"])
def camera_sdp(request) -> str:
    """A two tracks SDP description, as sent by an RTSP camera, with either line ending."""
    return "".join(line + request.param for line in CAMERA_SDP_LINES)


@pytest.fixture
def camera_description(camera_sdp) -> SessionDescription:
    """The parsed camera SDP description."""
    description = SessionDescription()
    assert description.set_to(camera_sdp)
    return description


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    """Capture the library debug logs, to exercise the logging calls."""
    caplog.set_level(logging.DEBUG, logger="sdpline")
