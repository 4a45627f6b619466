"""
Configuration for the character-class password generator.

Both dataclasses validate themselves, so a config built by hand holds the
same invariants as one built through PasswordGeneratorBuilder.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import InvalidArgumentError
from .validation import (
    validate_digits,
    validate_lowercase,
    validate_minimum_length,
    validate_symbols,
    validate_uppercase,
)


LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!@#$%&*()_+-=[]|,./?><"

DEFAULT_MINIMUM_LENGTH = 4

# Class name -> alphabet check, in rule order.
_ALPHABET_VALIDATORS = {
    "lowercase": validate_lowercase,
    "uppercase": validate_uppercase,
    "digits": validate_digits,
    "symbols": validate_symbols,
}


@dataclass(frozen=True)
class CharacterClass:
    """
    One named category of characters and whether it takes part in generation.
    """

    name: str
    alphabet: str
    enabled: bool = False

    def __post_init__(self) -> None:
        validator = _ALPHABET_VALIDATORS.get(self.name)
        if validator is None:
            raise InvalidArgumentError(f"Unknown character class {self.name!r}")
        validator(self.alphabet)


@dataclass(frozen=True)
class PasswordGeneratorConfig:
    # Requested lengths must be strictly greater than this.
    minimum_length: int = DEFAULT_MINIMUM_LENGTH

    lowercase: CharacterClass = field(
        default_factory=lambda: CharacterClass("lowercase", LOWERCASE)
    )
    uppercase: CharacterClass = field(
        default_factory=lambda: CharacterClass("uppercase", UPPERCASE)
    )
    digits: CharacterClass = field(
        default_factory=lambda: CharacterClass("digits", DIGITS)
    )
    symbols: CharacterClass = field(
        default_factory=lambda: CharacterClass("symbols", SYMBOLS)
    )

    def __post_init__(self) -> None:
        validate_minimum_length(self.minimum_length)
        for name in _ALPHABET_VALIDATORS:
            cc = getattr(self, name)
            if not isinstance(cc, CharacterClass) or cc.name != name:
                raise InvalidArgumentError(
                    f"{name} must be a CharacterClass named {name!r}"
                )

    @property
    def character_classes(self) -> tuple[CharacterClass, ...]:
        """All four classes, in rule order."""
        return (self.lowercase, self.uppercase, self.digits, self.symbols)

    @property
    def enabled_classes(self) -> tuple[CharacterClass, ...]:
        return tuple(cc for cc in self.character_classes if cc.enabled)

    @property
    def active_rules(self) -> tuple[str, ...]:
        """
        Alphabets of the enabled classes (the active rule set).

        Order is fixed: lowercase, uppercase, digits, symbols. The coverage
        characters of a generated password are appended in this order.
        """
        return tuple(cc.alphabet for cc in self.enabled_classes)


# Default configuration instance you can import elsewhere.
# Every class is disabled, so it must be customised before generating.
DEFAULT_CONFIG = PasswordGeneratorConfig()


@dataclass(frozen=True)
class QuantumSourceConfig:
    # Number of qubits prepared in superposition per circuit run.
    # Each qubit gives one raw bit.
    # NOTE: Keep this <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20

    # Rounds of SHA-256 mixing applied to each combined sample.
    entropy_rounds: int = 2

    # Independent circuit runs XOR-combined into one sample.
    quantum_streams: int = 2


DEFAULT_QUANTUM_CONFIG = QuantumSourceConfig()
