import sys
from typing import NoReturn

import curve448ct

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  mult=f"{C}curve448ct {F}mult {N}scalar {D}[{N}point{D}] —{N} X448 of hex scalar and point (base point by default)\n",
  bench=f"{C}curve448ct {F}bench {D}[{F}-n {N}rounds{D}] —{N} time scalar multiplication, checked against OpenSSL\n",
  audit=f"{C}curve448ct {F}audit {D}[{F}-n {N}rounds{D}] —{N} statistical test for timing leaks\n",
)

usagetext = dict(
  mult=f"""\
Computes the X448 function (RFC 7748) of a secret scalar and a point u
coordinate, both given as 56 bytes of little endian hex. The scalar is clamped
as usual. Without a point the standard base point u = 5 is used, giving the
public key of the scalar. The result is printed in hex.
""",
  bench=f"""\
Runs scalar multiplications with random keys, comparing the time and the
result with the OpenSSL X448 provided by the cryptography package.

  {F}-n {N}ROUNDS         Number of multiplications (default 5)
""",
  audit=f"""\
Measures conditional swap and scalar multiplication with two classes of
inputs in random order and reports Welch's t statistic between them. Values
of |t| above 10 suggest that timing depends on the secret data.

  {F}-n {N}ROUNDS         Scalar multiplications per class (default 10)
""",
)

introduction = """\
Constant-time X448 scalar multiplication on Curve448 in plain Python.
"""


def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: modehelp = "help"
  if modehelp not in usage and modehelp != "help": raise ValueError(f"Invalid argument {modehelp=}")
  title = f"Curve448ct {curve448ct.__version__} - X448 key agreement primitive"
  stream.write(f"{T}{title:78}{N}\n" if stream.isatty() else f"{title}\n")
  if modehelp == "help":
    stream.write(f"\n{introduction}\n")
    for text in usage.values():
      stream.write(text)
  else:
    stream.write(f"\n{usage[modehelp]}\n{usagetext[modehelp]}")
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)


def print_version() -> NoReturn:
  print(f"Curve448ct {curve448ct.__version__}")
  sys.exit(0)
