"""Exception classes for the sdpline library."""

from __future__ import annotations


class SDPLineException(Exception):
    """Base class for all custom library exceptions."""


class ParseError(SDPLineException, ValueError):
    """Raised when some data cannot be parsed."""


class SDPException(SDPLineException):
    """Base class for all exceptions raised by the SDP module."""


class SDPParseError(SDPException, ParseError):
    """Exception related to SDP data parsing. The whole description is rejected."""


class SDPUnsupportedVersion(SDPParseError, NotImplementedError):
    """The SDP version is not supported by this library."""


class SDPContractError(SDPException, AssertionError):
    """
    Base class for violated preconditions of the SDP accessors.

    These are programming errors, and are not meant to be recovered from.
    """


class SDPMalformedValueError(SDPContractError):
    """A value that was found does not match its expected strict grammar."""


class SDPInvalidStateError(SDPContractError):
    """The session description is not in a valid (successfully parsed) state."""


class SDPTrackIndexError(SDPContractError, IndexError):
    """A section (track) index is out of range."""
