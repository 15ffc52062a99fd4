"""Byte order of the running platform."""

from __future__ import annotations

import enum
import sys


class Endian(enum.Enum):
    """Byte orders; NATIVE is an alias of the platform's own order."""

    LITTLE = 1234
    BIG = 4321
    NATIVE = 1234 if sys.byteorder == "little" else 4321