"""Exceptions raised by the chunk success-probability engine."""


class InvalidInputError(ValueError):
    """Malformed query: negative SNR, bad bit count, or a (constellation, code rate)
    pair absent from the distance spectrum table."""
