# Constant-time X448 (RFC 7748) in plain Python

# Field elements are 56-byte little-endian bytearrays with lazy reduction mod
# p = 2^448 - 2^224 - 1. The ladder and the field arithmetic avoid branches and
# table lookups on secret values, although CPython itself cannot promise
# constant time at the machine level (see curve448ct.timing for an audit).

# Public symbols are imported here. The field operations in curve448ct.field
# are lower level primitives writing into caller-provided buffers.

__version__ = "0.1.0"

from . import field
from .exceptions import MalformedInputError
from .mont import BASE, ladder, scalarmult, x448, x448_base
from .util import clamp, tobytes, toint
