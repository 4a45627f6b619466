"""
Fluent builder for PasswordGenerator.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from .config import DEFAULT_CONFIG, PasswordGeneratorConfig
from .generator import PasswordGenerator
from .random_source import RandomSource

logger = logging.getLogger(__name__)


class PasswordGeneratorBuilder:
    """
    Accumulates generator settings and validates each one as it is set.

    Every class starts disabled with its default alphabet, and the minimum
    length starts at 4. Setters return the builder so calls can be chained::

        generator = (
            PasswordGeneratorBuilder()
            .use_lower_case()
            .use_digits()
            .custom_digits("2468")
            .build()
        )

    Not thread-safe; configure from one thread, then share the built
    generator freely.
    """

    def __init__(self, config: PasswordGeneratorConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._random_source: RandomSource | None = None

    def _set_class(self, name: str, **changes) -> "PasswordGeneratorBuilder":
        current = getattr(self._config, name)
        self._config = replace(self._config, **{name: replace(current, **changes)})
        return self

    # --- class toggles ---

    def use_lower_case(self, enabled: bool = True) -> "PasswordGeneratorBuilder":
        """Include lowercase letters (abc...xyz). Default off."""
        return self._set_class("lowercase", enabled=bool(enabled))

    def use_upper_case(self, enabled: bool = True) -> "PasswordGeneratorBuilder":
        """Include uppercase letters (ABC...XYZ). Default off."""
        return self._set_class("uppercase", enabled=bool(enabled))

    def use_digits(self, enabled: bool = True) -> "PasswordGeneratorBuilder":
        """Include digits (0-9). Default off."""
        return self._set_class("digits", enabled=bool(enabled))

    def use_symbols(self, enabled: bool = True) -> "PasswordGeneratorBuilder":
        """Include symbols (!@#...). Default off."""
        return self._set_class("symbols", enabled=bool(enabled))

    # --- validated settings ---

    def set_minimum_length(self, length: int) -> "PasswordGeneratorBuilder":
        """
        Change the length floor. ``generate`` only accepts lengths strictly
        greater than it. Must be at least 2.
        """
        self._config = replace(self._config, minimum_length=length)
        return self

    def custom_lower_case(self, alphabet: str) -> "PasswordGeneratorBuilder":
        return self._set_class("lowercase", alphabet=alphabet)

    def custom_upper_case(self, alphabet: str) -> "PasswordGeneratorBuilder":
        return self._set_class("uppercase", alphabet=alphabet)

    def custom_digits(self, alphabet: str) -> "PasswordGeneratorBuilder":
        return self._set_class("digits", alphabet=alphabet)

    def custom_symbols(self, alphabet: str) -> "PasswordGeneratorBuilder":
        """
        Replace the symbol alphabet. Rejected only when every character is
        an ASCII letter or digit, so "ab#" is accepted.
        """
        return self._set_class("symbols", alphabet=alphabet)

    def with_random_source(self, source: RandomSource) -> "PasswordGeneratorBuilder":
        """Use ``source`` instead of the default SecureRandomSource."""
        self._random_source = source
        return self

    # --- results ---

    def build_config(self) -> PasswordGeneratorConfig:
        """Return the current settings as an immutable snapshot."""
        return self._config

    def build(self) -> PasswordGenerator:
        """
        Return a generator over a snapshot of the current settings.

        No cross-field checks happen here: a builder with every class
        disabled still builds, and fails later in ``generate``.
        """
        config = self.build_config()
        logger.debug(
            "Building password generator: minimum_length=%d, classes=%s",
            config.minimum_length,
            [cc.name for cc in config.enabled_classes],
        )
        return PasswordGenerator(config, self._random_source)


def generate_password(
    length: int,
    *,
    lowercase: bool = True,
    uppercase: bool = True,
    digits: bool = True,
    symbols: bool = False,
    minimum_length: int | None = None,
    random_source: RandomSource | None = None,
) -> str:
    """
    High-level function:
    - Configure a builder with the requested classes.
    - Build a generator.
    - Generate one password of ``length + enabled classes`` characters.
    """
    builder = (
        PasswordGeneratorBuilder()
        .use_lower_case(lowercase)
        .use_upper_case(uppercase)
        .use_digits(digits)
        .use_symbols(symbols)
    )
    if minimum_length is not None:
        builder.set_minimum_length(minimum_length)
    if random_source is not None:
        builder.with_random_source(random_source)

    return builder.build().generate(length)
