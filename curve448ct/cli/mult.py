from curve448ct.exceptions import CliArgError
from curve448ct.mont import BASE, x448
from curve448ct.util import hexbytes


def main_mult(args):
  if not 1 <= len(args.params) <= 2:
    raise CliArgError("Expected a scalar and optionally a point, both in hex")
  scalar = hexbytes(args.params[0])
  point = hexbytes(args.params[1]) if len(args.params) == 2 else BASE
  print(x448(scalar, point).hex())
