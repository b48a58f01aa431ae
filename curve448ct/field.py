# Arithmetic in GF(p), p = 2^448 - 2^224 - 1, on 56-byte little-endian buffers.

# Elements are bytearrays of FE_SIZE bytes. Reduction is lazy: add, sub, mul and
# mul39081 only fold their carries back in, so the result is congruent mod p and
# fits in 448 bits but may still be >= p. norm() gives the canonical value and
# sqr() and invert() normalize their output.

# Every function writing into an output buffer r accepts r aliasing an input.
# Loop bounds and branches depend on byte positions only, never on values, and
# the swap is done with masks rather than branching on the swap bit.

from operator import mul as _mul
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

FE_SIZE = 56

# The field prime, for tests and conversions (the arithmetic never uses it)
p = 2**448 - 2**224 - 1

# Curve448 ladder constant (A - 2) / 4 with A = 156326
A24 = 39081

# 2^448 = 2^224 + 1 (mod p): carries out of the top byte re-enter at bytes 0 and 28
_FOLD = tuple(1 if i in (0, 28) else 0 for i in range(FE_SIZE))

# 2p spread over the bytes, keeps sub() from going negative
_SUB_OFFSET = tuple(0x1fc if i == 28 else 0x1fe for i in range(FE_SIZE))


def new(x: Union[int, BytesLike] = 0) -> bytearray:
  """A fresh field element holding an int (below 2^448) or a copy of 56 bytes."""
  if isinstance(x, int): return bytearray(x.to_bytes(FE_SIZE, "little"))
  d = bytearray(FE_SIZE)
  copy(d, x)
  return d


def _fold(r: bytearray, c: int) -> None:
  """Add c * 2^448, taken as c * (2^224 + 1), into r."""
  o = 0
  for i in range(FE_SIZE):
    o += r[i] + c * _FOLD[i]
    r[i] = o & 0xff
    o >>= 8


def norm(a: bytearray) -> None:
  """Normalize in place into 0..p-1. Any 56-byte value is accepted."""
  # Carry out of a + 2^224 + 1 is 1 exactly when a >= p
  c = 0
  for i in range(FE_SIZE):
    c += a[i] + _FOLD[i]
    c >>= 8
  _fold(a, c)


def copy(d: bytearray, a: BytesLike) -> None:
  for i in range(FE_SIZE):
    d[i] = a[i]


def cswap(a: bytearray, b: bytearray, c: int) -> None:
  """Swap the contents of a and b if c is 1, leave both if c is 0."""
  mask = -c & 0xff
  for i in range(FE_SIZE):
    t = (a[i] ^ b[i]) & mask
    a[i] ^= t
    b[i] ^= t


def add(r: bytearray, a: BytesLike, b: BytesLike) -> None:
  """r = a + b (unnormalized)"""
  c = 0
  for i in range(FE_SIZE):
    c += a[i] + b[i]
    r[i] = c & 0xff
    c >>= 8
  _fold(r, c)


def sub(r: bytearray, a: BytesLike, b: BytesLike) -> None:
  """r = a - b (unnormalized)"""
  c = 0
  for i in range(FE_SIZE):
    c += _SUB_OFFSET[i] + a[i] - b[i]
    r[i] = c & 0xff
    c >>= 8
  _fold(r, c)


def mul39081(r: bytearray, a: BytesLike) -> None:
  """r = 39081 * a (unnormalized)"""
  c = 0
  for i in range(FE_SIZE):
    c += a[i] * A24
    r[i] = c & 0xff
    c >>= 8
  _fold(r, c)


def _reduce(r: bytearray, t: list) -> None:
  """Fold a 112-byte product into r using 2^448 = 2^224 + 1.

  With t = L + H * 2^448 and H = Hl + Hh * 2^224 split at byte 28 of the high
  half, the product is L + H + Hl * 2^224 + Hh * 2^448. The last term folds once
  more into Hh + Hh * 2^224, which is why Hh enters the upper bytes twice.
  """
  o = 0
  for i in range(28):
    o += t[i] + t[i + 56] + t[i + 84]
    r[i] = o & 0xff
    o >>= 8
  for i in range(28, FE_SIZE):
    o += t[i] + t[i + 56] + t[i + 28] + t[i + 56]
    r[i] = o & 0xff
    o >>= 8
  _fold(r, o)


def mul(r: bytearray, a: BytesLike, b: BytesLike) -> None:
  """r = a * b (unnormalized)"""
  # Column k sums a[i] * b[k - i]; with b reversed that is a straight slice
  rb = bytes(b)[::-1]
  t = [0] * (2 * FE_SIZE)
  c = 0
  for k in range(2 * FE_SIZE - 1):
    lo, hi = max(0, k - 55), min(k, 55) + 1
    c += sum(map(_mul, a[lo:hi], rb[55 - k + lo:55 - k + hi]))
    t[k] = c & 0xff
    c >>= 8
  t[-1] = c
  _reduce(r, t)


def sqr(r: bytearray, a: BytesLike) -> None:
  """r = a * a, normalized"""
  ra = bytes(a)[::-1]
  t = [0] * (2 * FE_SIZE)
  c = 0
  for k in range(2 * FE_SIZE - 1):
    # Cross products a[i] * a[k - i] with i < k - i, counted twice
    lo, hi = max(0, k - 55), (k + 1) // 2
    c += 2 * sum(map(_mul, a[lo:hi], ra[55 - k + lo:55 - k + hi]))
    if not k & 1:
      c += a[k >> 1] * a[k >> 1]
    t[k] = c & 0xff
    c >>= 8
  t[-1] = c
  _reduce(r, t)
  norm(r)


def invert(r: bytearray, a: BytesLike) -> None:
  """r = 1 / a, computed as a^(p-2) with a fixed chain. Zero maps to zero."""
  # p - 2 = 2^448 - 2^224 - 3 is binary 1{223} 0 1{222} 0 1
  t = bytearray(FE_SIZE)
  sqr(t, a)
  mul(t, t, a)
  for _ in range(221):
    sqr(t, t)
    mul(t, t, a)
  sqr(t, t)
  for _ in range(222):
    sqr(t, t)
    mul(t, t, a)
  sqr(t, t)
  sqr(t, t)
  mul(r, t, a)
  norm(r)
