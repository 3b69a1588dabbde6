"""
Exception hierarchy for leaf-key derivation.

Every error raised by this package derives from SmtKeyError. The concrete
classes also derive from the builtin that best matches them, so callers
that only catch ValueError / RuntimeError keep working.
"""


class SmtKeyError(Exception):
    """Base class for all smt_keys errors."""


class EncodingError(SmtKeyError, ValueError):
    """An integer does not fit the bit width it is being encoded into."""


class FormatError(SmtKeyError, ValueError):
    """A hex string, digest or key has the wrong shape."""


class HashOracleError(SmtKeyError, RuntimeError):
    """The hash primitive rejected its input or failed internally."""


class ParameterError(SmtKeyError, ValueError):
    """Poseidon parameters are malformed or disagree with the capacity seed."""
