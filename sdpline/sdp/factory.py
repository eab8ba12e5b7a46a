"""Generation of minimal single-stream SDP descriptions."""

from __future__ import annotations

import logging

from sdpline.constants import (
    AUDIO_CLOCK_RATE,
    CVO_EXTENSION_URN,
    DEFAULT_BANDWIDTH_KBPS,
    LINE_TERMINATOR,
    VIDEO_CLOCK_RATE,
)

from .media import Dimensions


__all__ = [
    "build_sdp",
]


_logger = logging.getLogger(__name__)


def build_sdp(
    ip: str,
    is_audio: bool,
    port: int,
    payload_type: int,
    bandwidth_kbps: int | None,
    codec: str,
    fmtp: str | None = None,
    width: int = 0,
    height: int = 0,
    cvo_ext_map: int | None = 0,
) -> str:
    """
    Build the SDP description of a single open-ended RTP/AVP stream.

    The clock rate is always 8000 for audio and 90000 for video.

    :param ip: the connection address, IPv6 if it contains ``::``.
    :param is_audio: whether the stream is audio, or video.
    :param port: the RTP port.
    :param payload_type: the RTP payload type.
    :param bandwidth_kbps: the bandwidth in kbps, or a falsy value for the default one.
    :param codec: the encoding name, e.g. ``H264``.
    :param fmtp: the format specific parameters, if any.
    :param width: the video frame width, only advertised for video with a height.
    :param height: the video frame height, only advertised for video with a width.
    :param cvo_ext_map: the RTP header extension id for video orientation, if any.
    :return: the SDP text, with CRLF line endings.
    """
    ip_version = "6" if "::" in ip else "4"
    media_type = "audio" if is_audio else "video"
    clock_rate = AUDIO_CLOCK_RATE if is_audio else VIDEO_CLOCK_RATE

    lines: list[str] = [
        "v=0",
        "a=range:npt=now-",
        f"m={media_type} {port} RTP/AVP {payload_type}",
        f"c=IN IP{ip_version} {ip}",
        f"b=AS:{bandwidth_kbps or DEFAULT_BANDWIDTH_KBPS}",
        f"a=rtpmap:{payload_type} {codec}/{clock_rate}",
    ]
    if fmtp is not None:
        lines.append(f"a=fmtp:{payload_type} {fmtp}")
    if not is_audio and width > 0 and height > 0:
        lines.append(f"a=framesize:{payload_type} {Dimensions(width, height)}")
    if cvo_ext_map and cvo_ext_map > 0:
        lines.append(f"a=extmap:{cvo_ext_map} {CVO_EXTENSION_URN}")

    sdp = "".join(line + LINE_TERMINATOR for line in lines)
    _logger.debug(f"Built SDP:\n{sdp}")
    return sdp
