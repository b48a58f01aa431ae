from typing import Union

from .exceptions import MalformedInputError
from .field import FE_SIZE, BytesLike, copy


def clamp(n: BytesLike) -> bytearray:
  """X448 clamping of a secret scalar, returning a private copy."""
  # 448 bits 1[x]00  (clear the cofactor bits, force the top bit on)
  z = bytearray(FE_SIZE)
  copy(z, n)
  z[0] &= 0xfc
  z[55] |= 0x80
  return z


def toint(x: Union[int, BytesLike]) -> int:
  if isinstance(x, int): return x
  if len(x) != FE_SIZE: raise MalformedInputError(f"Should be exactly {FE_SIZE} bytes")
  return int.from_bytes(x, "little")

def tobytes(x: int) -> bytes:
  return x.to_bytes(FE_SIZE, "little")

def hexbytes(s: str) -> bytes:
  """Parse hex from the command line, allowing spaces and colons between bytes."""
  try:
    return bytes.fromhex(s.replace(":", ""))
  except ValueError:
    raise ValueError(f"Invalid hex string {s!r}") from None
