"""SDP line types, and how each of them contributes to a session description."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, MutableSequence, Union

from typing_extensions import Self, override

from sdpline.constants import KEYED_ATTRIBUTES, SUPPORTED_SDP_VERSIONS
from sdpline.exceptions import SDPParseError, SDPUnsupportedVersion
from sdpline.helpers import DEFAULT, DefaultType, Registry, slots_dataclass

from .common import Section


__all__ = [
    "SDPLine",
    "KeyValueLine",
    "VersionLine",
    "AttributeLine",
    "BandwidthLine",
    "MediaLine",
    "GenericLine",
]


_logger = logging.getLogger(__name__)


@slots_dataclass(frozen=True)
class SDPLine(
    Registry[Union[str, DefaultType], "SDPLine"],
    ABC,
    registry=True,
    registry_attr="_type",
):
    """
    Abstract base dataclass for a single ``<type>=<value>`` line of SDP.

    Concrete subclasses are registered by their ``_type`` letter, and the one
    registered as ``DEFAULT`` handles every other letter.
    """

    _type: ClassVar[str | DefaultType]

    @classmethod
    def parse(cls, line: str) -> SDPLine:
        """
        Parse a single non-empty line, dispatching on its type letter.

        :param line: the line, without its line terminator.
        :return: the parsed line object.
        :raises SDPParseError: if the line is malformed.
        """
        if len(line) < 2 or line[1] != "=":
            raise SDPParseError(f"Invalid SDP line, expected <type>=<value>: {line!r}")
        line_type = line[0]
        line_cls = cls.__registry__.get(line_type)
        if line_cls is None:
            line_cls = cls.__registry_get_class_for__(DEFAULT)
        return line_cls.from_raw_line(line)

    @classmethod
    @abstractmethod
    def from_raw_line(cls, line: str) -> Self:
        """Build the line object from a raw line already known to be of this type."""

    @abstractmethod
    def apply(self, sections: MutableSequence[Section]) -> None:
        """
        Apply the line to the sections of the description being parsed.

        :param sections: the sections parsed so far; the last one is the current section.
        """


@slots_dataclass(frozen=True)
class KeyValueLine(SDPLine, ABC):
    """Abstract base dataclass for lines that add an attribute to the current section."""

    key: str
    value: str

    def apply(self, sections: MutableSequence[Section]) -> None:  # noqa: D102
        _logger.debug(f"adding {self.key!r} => {self.value!r}")
        sections[-1].attributes.append(self.key, self.value)


@slots_dataclass(frozen=True)
class VersionLine(SDPLine):
    """
    SDP protocol version line.

    Spec::
        v=0
    """

    _type = "v"

    version: str

    @classmethod
    @override
    def from_raw_line(cls, line: str) -> Self:
        version = line[2:]
        if version not in SUPPORTED_SDP_VERSIONS:
            raise SDPUnsupportedVersion(f"Unsupported SDP version: {line!r}")
        return cls(version=version)

    def apply(self, sections: MutableSequence[Section]) -> None:  # noqa: D102
        pass


@slots_dataclass(frozen=True)
class AttributeLine(KeyValueLine):
    """
    SDP attribute line.

    Spec::
        a=<attribute>
        a=<attribute>:<value>

    The key is everything before the first colon. For rtpmap, fmtp, framesize and
    extmap, the key also includes the payload type (or extension id) token, up to
    the first space after the colon, e.g. ``a=rtpmap:96``.
    """

    _type = "a"

    @classmethod
    @override
    def from_raw_line(cls, line: str) -> Self:
        colon_pos = line.find(":", 2)
        if colon_pos < 0:
            return cls(key=line.strip(), value="")

        key = line[:colon_pos]
        if key in KEYED_ATTRIBUTES:
            space_pos = line.find(" ", colon_pos + 1)
            if space_pos < 0:
                raise SDPParseError(f"Missing value after {key} identifier: {line!r}")
            key = line[:space_pos]
            colon_pos = space_pos

        return cls(key=key.strip(), value=line[colon_pos + 1 :].strip())


@slots_dataclass(frozen=True)
class BandwidthLine(AttributeLine):
    """
    SDP bandwidth line, stored the same way as attributes.

    Spec::
        b=<bwtype>:<bandwidth>
    """

    _type = "b"


@slots_dataclass(frozen=True)
class MediaLine(SDPLine):
    """
    SDP media line, which opens a new section.

    Spec::
        m=<media> <port> <proto> <fmt> ...
    """

    _type = "m"

    format: str

    @classmethod
    @override
    def from_raw_line(cls, line: str) -> Self:
        return cls(format=line[2:])

    def apply(self, sections: MutableSequence[Section]) -> None:  # noqa: D102
        _logger.debug(f"new section {self.format!r}")
        sections.append(Section(format=self.format))


@slots_dataclass(frozen=True)
class GenericLine(KeyValueLine):
    """
    Any other SDP line, e.g. session-level fields like ``o=``, ``s=``, ``c=``.

    The key is the type letter with its equal sign, e.g. ``o=``.
    """

    _type = DEFAULT

    @classmethod
    @override
    def from_raw_line(cls, line: str) -> Self:
        equal_pos = line.find("=")
        if equal_pos < 0:
            raise SDPParseError(f"Invalid SDP line, missing '=': {line!r}")
        return cls(
            key=line[: equal_pos + 1].strip(),
            value=line[equal_pos + 1 :].strip(),
        )
