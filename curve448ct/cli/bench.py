import sys
from secrets import token_bytes
from time import perf_counter

from cryptography.hazmat.primitives.asymmetric.x448 import X448PrivateKey, X448PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from tqdm import tqdm

from curve448ct.cli.audit import parse_rounds
from curve448ct.field import FE_SIZE, new
from curve448ct.mont import scalarmult


def openssl_x448(scalar: bytes, point: bytes) -> bytes:
  return X448PrivateKey.from_private_bytes(scalar).exchange(X448PublicKey.from_public_bytes(point))


def main_bench(args):
  rounds = parse_rounds(args.rounds, 5)
  q = new()
  ourtotal = ssltotal = 0
  for _ in tqdm(range(rounds), desc="X448", unit="mult", leave=False):
    scalar = token_bytes(FE_SIZE)
    point = X448PrivateKey.generate().public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    t0 = perf_counter()
    scalarmult(q, scalar, point)
    ourtotal += perf_counter() - t0

    t0 = perf_counter()
    expected = openssl_x448(scalar, point)
    ssltotal += perf_counter() - t0

    if bytes(q) != expected:
      raise ValueError(f"Result differs from OpenSSL for scalar {scalar.hex()} and point {point.hex()}")

  sys.stderr.write(f"Ran {rounds} scalar multiplications, all matching OpenSSL.\n")
  print(f"curve448ct {ourtotal / rounds * 1e3:10.1f} ms/op")
  print(f"OpenSSL    {ssltotal / rounds * 1e3:10.3f} ms/op")
