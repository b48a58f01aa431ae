import sys

from curve448ct import timing
from curve448ct.exceptions import CliArgError

G = "\x1B[1;32m"  # pass
R = "\x1B[1;31m"  # leak
N = "\x1B[0m"


def parse_rounds(rounds: str, default: int) -> int:
  if not rounds:
    return default
  try:
    n = int(rounds)
  except ValueError:
    raise CliArgError(f"Invalid number of rounds {rounds!r}") from None
  if n < 2:
    raise CliArgError("At least 2 rounds are needed")
  return n


def main_audit(args):
  rounds = parse_rounds(args.rounds, 10)
  results = {
    "cswap": timing.audit_cswap(1000 * rounds, progress=True),
    "scalarmult": timing.audit_scalarmult(rounds, progress=True),
  }
  leaks = []
  for name, t in results.items():
    ok = abs(t) <= timing.THRESHOLD
    sys.stderr.write(f"{name:12} t = {t:+8.2f}  {G + 'ok' if ok else R + 'LEAK'}{N}\n")
    if not ok: leaks.append(name)
  if leaks:
    raise ValueError(f"Timing depends on secret data in {', '.join(leaks)} (|t| > {timing.THRESHOLD:.0f})")
