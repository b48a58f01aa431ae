from .exceptions import MalformedInputError
from .field import FE_SIZE, BytesLike, add, copy, cswap, invert, mul, mul39081, new, norm, sqr, sub
from .util import clamp

# Curve448 in Montgomery form: v2 = u3 + 156326 u2 + u over GF(2^448 - 2^224 - 1)
# Only u coordinates are used (RFC 7748 section 5).

# Standard base point u = 5
BASE = bytes([5]) + bytes(FE_SIZE - 1)


def ladder(r: bytearray, n: BytesLike, a: BytesLike) -> None:
  """Multiply point u coordinate a by the scalar n (used as is) into r."""
  # In projective coordinates, to avoid divisions: u = X / Z
  x1 = new()
  x3 = new()
  copy(x1, a)
  copy(x3, a)
  # Reduce a non-canonical input first, the lazy folds assume operands below p
  norm(x1)
  norm(x3)
  x2, z2 = new(1), new()  # "zero" point
  z3 = new(1)             # x3 / z3 is the "one" point
  t0, t1 = new(), new()

  swap = 0
  for i in reversed(range(8 * FE_SIZE)):
    b = n[i >> 3] >> (i & 7) & 1
    swap ^= b
    cswap(x2, x3, swap)
    cswap(z2, z3, swap)
    swap = b  # anticipates one last swap after the loop

    # Montgomery ladder step: replaces (P2, P3) by (P2*2, P2+P3) with differential addition
    add(t0, x2, z2)
    add(t1, x3, z3)
    sub(x2, x2, z2)
    sub(x3, x3, z3)
    mul(t1, t1, x2)
    mul(z3, x3, t0)
    sqr(t0, t0)
    sqr(x2, x2)
    add(x3, z3, t1)
    sqr(x3, x3)
    sub(z3, z3, t1)
    sqr(z3, z3)
    mul(z3, z3, x1)
    sub(t1, t0, x2)
    mul(x2, t0, x2)
    mul39081(z2, t1)
    add(z2, t0, z2)
    mul(z2, z2, t1)

  # last swap is necessary to compensate for the xor trick
  cswap(x2, x3, swap)
  cswap(z2, z3, swap)

  # normalises the coordinates: u == X / Z
  invert(z2, z2)
  mul(r, x2, z2)
  norm(r)


def scalarmult(q: bytearray, n: BytesLike, p: BytesLike) -> None:
  """X448: q = clamp(n) * p, on 56-byte buffers. Lengths are not checked."""
  ladder(q, clamp(n), p)


def x448(scalar: BytesLike, point: BytesLike) -> bytes:
  """Checked X448 returning a new 56-byte u coordinate.

  Only the lengths are validated. Non-canonical points (u >= p) are accepted
  and treated modulo p as RFC 7748 requires.

  :raises MalformedInputError: if either argument is not 56 bytes
  """
  for name, val in (("scalar", scalar), ("point", point)):
    if not isinstance(val, (bytes, bytearray, memoryview)):
      raise MalformedInputError(f"X448 {name} must be bytes, not {type(val).__name__}")
    if len(val) != FE_SIZE:
      raise MalformedInputError(f"X448 {name} must be {FE_SIZE} bytes, got {len(val)}")
  q = new()
  scalarmult(q, scalar, point)
  return bytes(q)


def x448_base(scalar: BytesLike) -> bytes:
  """Public u coordinate for a secret scalar."""
  return x448(scalar, BASE)
