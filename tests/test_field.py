from secrets import token_bytes

import pytest

from curve448ct import field
from curve448ct.field import FE_SIZE, p
from curve448ct.util import tobytes, toint


def rand():
  return field.new(token_bytes(FE_SIZE))

def val(a) -> int:
  """Canonical integer value of an element (normalizing a copy)."""
  a = field.new(a)
  field.norm(a)
  return toint(a)


def test_constants():
  assert len(field.new()) == FE_SIZE
  assert field.new(1) == bytearray([1]) + bytearray(55)
  # Subtraction offset is exactly 2p
  assert sum(o << 8 * i for i, o in enumerate(field._SUB_OFFSET)) == 2 * p
  assert field.A24 == (156326 - 2) // 4


def test_norm():
  # Values between p and 2^448 wrap around, everything below is kept
  for x, expected in [
    (0, 0),
    (1, 1),
    (p - 1, p - 1),
    (p, 0),
    (p + 1, 1),
    (2**448 - 1, 2**224),
    (2**224, 2**224),
  ]:
    a = field.new(x)
    field.norm(a)
    assert toint(a) == expected, hex(x)

  for i in range(50):
    a = rand()
    b = field.new(a)
    field.norm(b)
    assert toint(b) == toint(a) % p
    # Idempotent
    c = field.new(b)
    field.norm(c)
    assert c == b


def test_copy():
  a = rand()
  d = field.new()
  field.copy(d, a)
  assert d == a
  assert d is not a
  d[0] ^= 1
  assert d != a


def test_cswap():
  a, b = rand(), rand()
  a0, b0 = bytes(a), bytes(b)
  field.cswap(a, b, 0)
  assert bytes(a) == a0 and bytes(b) == b0
  field.cswap(a, b, 1)
  assert bytes(a) == b0 and bytes(b) == a0
  field.cswap(a, b, 1)
  assert bytes(a) == a0 and bytes(b) == b0


def test_add_sub():
  for i in range(50):
    a, b = rand(), rand()
    r = field.new()
    field.add(r, a, b)
    assert val(r) == (toint(a) + toint(b)) % p
    field.sub(r, a, b)
    assert val(r) == (toint(a) - toint(b)) % p
    field.sub(r, b, a)
    assert val(r) == (toint(b) - toint(a)) % p

  # Edge values
  zero, one, pm1 = field.new(0), field.new(1), field.new(p - 1)
  r = field.new()
  field.add(r, pm1, one)
  assert val(r) == 0
  field.sub(r, zero, one)
  assert val(r) == p - 1
  field.sub(r, zero, zero)
  assert val(r) == 0


def test_mul39081():
  for i in range(50):
    a = rand()
    r = field.new()
    field.mul39081(r, a)
    assert val(r) == toint(a) * 39081 % p


def test_mul_sqr():
  for i in range(30):
    a, b = rand(), rand()
    r = field.new()
    field.mul(r, a, b)
    assert val(r) == toint(a) * toint(b) % p
    field.sqr(r, a)
    # Squaring normalizes by itself
    assert toint(r) == toint(a)**2 % p

  for x in (0, 1, p - 1, p, p + 5, 2**224, 2**224 - 1):
    a = field.new(x)
    r = field.new()
    field.mul(r, a, a)
    assert val(r) == x * x % p, hex(x)
    field.sqr(r, a)
    assert toint(r) == x * x % p, hex(x)


def test_aliasing():
  """Output buffer may be the same as an input."""
  a, b = rand(), rand()
  x, y = toint(a), toint(b)

  r = field.new(a)
  field.add(r, r, b)
  assert val(r) == (x + y) % p
  r = field.new(b)
  field.sub(r, a, r)
  assert val(r) == (x - y) % p
  r = field.new(a)
  field.mul39081(r, r)
  assert val(r) == x * 39081 % p
  r = field.new(a)
  field.mul(r, r, r)
  assert val(r) == x * x % p
  r = field.new(a)
  field.sqr(r, r)
  assert toint(r) == x * x % p
  r = field.new(a)
  field.invert(r, r)
  assert toint(r) == pow(x, p - 2, p)


def test_invert():
  one = tobytes(1)
  for a in (rand(), field.new(1), field.new(p - 1), field.new(p + 5)):
    r = field.new()
    field.invert(r, a)
    assert toint(r) == pow(toint(a), p - 2, p)
    field.mul(r, r, a)
    field.norm(r)
    assert bytes(r) == one

  # Zero and its non-canonical form p invert to zero
  for x in (0, p):
    r = field.new(123)
    field.invert(r, field.new(x))
    assert bytes(r) == bytes(FE_SIZE)


def test_read_only_inputs():
  """Inputs may be immutable bytes or memoryviews."""
  a, b = token_bytes(FE_SIZE), token_bytes(FE_SIZE)
  r = field.new()
  field.mul(r, a, memoryview(b))
  assert val(r) == toint(a) * toint(b) % p
  field.add(r, memoryview(a), b)
  assert val(r) == (toint(a) + toint(b)) % p


def test_toint():
  assert toint(5) == 5
  assert toint(tobytes(p)) == p
  with pytest.raises(ValueError) as exc:
    toint(bytes(32))
  assert "exactly 56 bytes" in str(exc.value)
