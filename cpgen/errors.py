"""
Exceptions raised by the character-class password generator.
"""


class PasswordGeneratorError(Exception):
    """Generic generator error."""


class InvalidArgumentError(PasswordGeneratorError, ValueError):
    """A configuration value was rejected (bad alphabet, bad minimum length)."""


class InvalidStateError(PasswordGeneratorError, RuntimeError):
    """The generator cannot produce a password with the current request."""


class QuantumEngineError(PasswordGeneratorError):
    """The quantum randomness backend is misconfigured or misbehaved."""
