"""Implementation of Session Description Protocol (SDP) parsing and generation."""

from .common import *
from .factory import *
from .lines import *
from .media import *
from .session import *
from .time import *
