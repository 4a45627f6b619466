"""
Password generation over an immutable PasswordGeneratorConfig.
"""

from __future__ import annotations

import logging

from .config import DEFAULT_CONFIG, PasswordGeneratorConfig
from .errors import InvalidStateError
from .random_source import RandomSource, SecureRandomSource

logger = logging.getLogger(__name__)


class PasswordGenerator:
    """
    Produces passwords from the enabled character classes of a config.

    Holds nothing but the frozen config and a random source, so a single
    instance can serve concurrent callers.
    """

    def __init__(
        self,
        config: PasswordGeneratorConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.random_source = random_source or SecureRandomSource()

    @property
    def minimum_length(self) -> int:
        return self.config.minimum_length

    @property
    def active_rules(self) -> tuple[str, ...]:
        return self.config.active_rules

    def generate(self, length: int) -> str:
        """
        Generate a password from the enabled classes.

        The result is ``length + number_of_enabled_classes`` characters long:
        ``length`` characters drawn from randomly chosen classes, followed by
        one character from each enabled class in rule order. That suffix is
        what guarantees every enabled class appears at least once.

        Raises InvalidStateError when ``length`` is not an integer strictly
        greater than the configured minimum, or when no class is enabled.
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidStateError(
                f"Password length must be an integer, got {type(length).__name__}"
            )
        if length <= self.minimum_length:
            raise InvalidStateError(
                f"Password length must be greater than {self.minimum_length}, "
                f"got {length}"
            )

        rules = self.active_rules
        if not rules:
            raise InvalidStateError(
                "No character class is enabled; enable at least one before generating"
            )

        logger.debug(
            "Generating password: length=%d, rules=%d", length, len(rules)
        )
        return self._build_password(rules, length)

    def _pick(self, alphabet: str) -> str:
        return alphabet[self.random_source.randbelow(len(alphabet))]

    def _build_password(self, rules: tuple[str, ...], length: int) -> str:
        rand = self.random_source
        chars: list[str] = []

        for _ in range(length):
            rule = rules[rand.randbelow(len(rules))]
            chars.append(self._pick(rule))

        for rule in rules:
            chars.append(self._pick(rule))

        return "".join(chars)

    def __repr__(self) -> str:
        names = ", ".join(cc.name for cc in self.config.enabled_classes) or "none"
        return (
            f"PasswordGenerator(minimum_length={self.minimum_length}, "
            f"classes=[{names}])"
        )
