import sys

from curve448ct.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.params = []
    self.rounds = ""
    self.debug = None


multargs = dict(debug='--debug'.split(),)

benchargs = dict(
  rounds='-n --rounds'.split(),
  debug='--debug'.split(),
)

auditargs = dict(
  rounds='-n --rounds'.split(),
  debug='--debug'.split(),
)

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('mult', 'scalarmult', 'x448'): return 'mult', multargs
  if arg in ('bench', 'benchmark'): return 'bench', benchargs
  if arg in ('audit', ): return 'audit', auditargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing: no abbreviated flags, and -- ends flag processing
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (mult/bench/audit/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  for a in aiter:
    # Hex values never start with a hyphen, so anything else is a flag
    if not a.startswith('-'):
      args.params.append(a)
      continue
    if a == '--':
      args.params += aiter
      break
    argvar = next((k for k, v in ad.items() if a.lower() in v), None)
    if argvar is None:
      print_help(args.mode, f' 💣  Unknown argument: curve448ct {args.mode} {a}')
    try:
      var = getattr(args, argvar)
      if isinstance(var, list):
        var.append(next(aiter))
      elif isinstance(var, str):
        setattr(args, argvar, next(aiter))
      else:
        setattr(args, argvar, True)
    except StopIteration:
      print_help(args.mode, f' 💣  Argument parameter missing: curve448ct {args.mode} {a} …')

  return args
