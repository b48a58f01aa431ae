"""Timing-invariance audit in the style of dudect.

Two classes of inputs are fed to the same function in a random interleaved
order and Welch's t-test is run on the measured durations. A large |t| means
the durations depend on the input class, i.e. the code leaks timing.

The interpreter adds plenty of noise of its own, so this only detects leaks
that are large compared to that noise. It is a smoke test, not a proof.
"""

from math import sqrt
from secrets import SystemRandom, token_bytes
from statistics import fmean, variance
from time import perf_counter_ns
from typing import Callable, List, Sequence, Tuple

from tqdm import tqdm

from . import field
from .field import FE_SIZE
from .mont import BASE, scalarmult

# |t| above this is considered a leak (same limit as dudect)
THRESHOLD = 10.0

# Measurements above this percentile of all samples are dropped as outliers
CROP_PERCENTILE = 0.9


def welch_t(xs: Sequence[float], ys: Sequence[float]) -> float:
  """Welch's t statistic for two independent samples."""
  mx, my = fmean(xs), fmean(ys)
  se = sqrt(variance(xs, mx) / len(xs) + variance(ys, my) / len(ys))
  return (mx - my) / se if se else 0.0


def crop(samples: Tuple[List[int], List[int]], percentile=CROP_PERCENTILE) -> Tuple[List[int], List[int]]:
  """Drop the slowest measurements (interrupts, GC) from both classes alike."""
  joined = sorted(samples[0] + samples[1])
  limit = joined[min(len(joined) - 1, int(percentile * len(joined)))]
  return [s for s in samples[0] if s <= limit], [s for s in samples[1] if s <= limit]


def measure(fn: Callable, inputs: Sequence[tuple], rounds: int, desc="", progress=False) -> Tuple[List[int], List[int]]:
  """Call fn(*inputs[0]) and fn(*inputs[1]) rounds times each in random order.

  Returns the durations in nanoseconds for each class.
  """
  order = [i & 1 for i in range(2 * rounds)]
  SystemRandom().shuffle(order)
  samples: Tuple[List[int], List[int]] = [], []
  for cls in tqdm(order, desc=desc, disable=not progress, leave=False, unit="call"):
    args = inputs[cls]
    t0 = perf_counter_ns()
    fn(*args)
    samples[cls].append(perf_counter_ns() - t0)
  return samples


def audit_cswap(rounds=20000, progress=False) -> float:
  """t statistic of cswap with c=0 vs c=1 on random elements."""
  a, b = field.new(token_bytes(FE_SIZE)), field.new(token_bytes(FE_SIZE))
  samples = measure(field.cswap, [(a, b, 0), (a, b, 1)], rounds, "cswap", progress)
  return welch_t(*crop(samples))


def audit_scalarmult(rounds=10, progress=False) -> float:
  """t statistic of scalarmult with a fixed all-zero scalar vs a random one (fix-vs-random)."""
  q = field.new()
  inputs = [(q, bytes(FE_SIZE), BASE), (q, token_bytes(FE_SIZE), BASE)]
  samples = measure(scalarmult, inputs, rounds, "scalarmult", progress)
  return welch_t(*crop(samples))
