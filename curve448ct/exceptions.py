class MalformedInputError(ValueError):
  """Scalar or point given to the checked X448 functions is not 56 bytes"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
