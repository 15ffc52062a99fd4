"""Small helpers: assertion exceptions, environment access, clamping, endianness and scope guards."""

__version__ = "0.1.0"

__all__ = ["asserts", "clamp", "endian", "env", "find_and_replace", "scope_exit"]