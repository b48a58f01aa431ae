import sys
from typing import NoReturn

import colorama

from curve448ct.cli.args import argparse
from curve448ct.cli.audit import main_audit
from curve448ct.cli.bench import main_bench
from curve448ct.cli.mult import main_mult

modes = {
  "mult": main_mult,
  "bench": main_bench,
  "audit": main_audit,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Python code should use curve448ct.x448 (checked) or curve448ct.scalarmult (raw buffers) instead.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted (Ctrl+C)
  * 3 I/O error (broken pipe)
  * 10 Errors in input or results, including timing leaks found by audit

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()

  # Run the mode-specific main function
  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
