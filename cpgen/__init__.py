"""
Character-class password generator package.

The quantum randomness source lives in ``cpgen.quantum_engine`` and is not
imported here, so using the package does not load qiskit.
"""

import logging

from .config import (
    CharacterClass,
    PasswordGeneratorConfig,
    QuantumSourceConfig,
    DEFAULT_CONFIG,
    DEFAULT_QUANTUM_CONFIG,
)
from .errors import (
    PasswordGeneratorError,
    InvalidArgumentError,
    InvalidStateError,
    QuantumEngineError,
)
from .random_source import RandomSource, SecureRandomSource, SeededRandomSource
from .generator import PasswordGenerator
from .builder import PasswordGeneratorBuilder, generate_password

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CharacterClass",
    "PasswordGeneratorConfig",
    "QuantumSourceConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_QUANTUM_CONFIG",
    "PasswordGeneratorError",
    "InvalidArgumentError",
    "InvalidStateError",
    "QuantumEngineError",
    "RandomSource",
    "SecureRandomSource",
    "SeededRandomSource",
    "PasswordGenerator",
    "PasswordGeneratorBuilder",
    "generate_password",
]
