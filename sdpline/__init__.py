"""sdpline is a pure-Python Session Description Protocol (SDP) parser and generator."""

from ._package_metadata import get_metadata as _metadata


__title__ = _metadata("Name", ["project", "name"])
__description__ = _metadata("Summary", ["project", "description"])
__version__ = _metadata("Version", ["project", "version"])
__license__ = _metadata("License", ["project", "license", "text"])


from .exceptions import *
from .sdp import *
