"""Pattern registry — every pattern generator is a standalone function registered via decorator.

Usage:
    @pattern(name="bars", description="Rotated stripes")
    def generate_bars(silhouette, config, rng, name) -> GenerationResult:
        ...

Adding a new pattern = one decorated function. Callers look it up by name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from topfill.engine.config import GenerationConfig
    from topfill.engine.context import GenerationResult, Silhouette
    from topfill.engine.rng import Mulberry32

logger = logging.getLogger(__name__)

PatternFn = Callable[["Silhouette", "GenerationConfig", "Mulberry32", str], "GenerationResult"]


@dataclass
class PatternSpec:
    name: str
    fn: PatternFn
    description: str = ""


class PatternRegistry:
    """Registry of pattern generators, keyed by name."""

    def __init__(self) -> None:
        self._patterns: dict[str, PatternSpec] = {}

    def register(self, spec: PatternSpec) -> None:
        if spec.name in self._patterns:
            raise ValueError(f"Duplicate pattern name: {spec.name}")
        self._patterns[spec.name] = spec
        logger.debug("Registered pattern %s", spec.name)

    def get(self, name: str) -> PatternSpec:
        return self._patterns[name]

    def names(self) -> list[str]:
        return sorted(self._patterns)

    @property
    def count(self) -> int:
        return len(self._patterns)


# Module-level singleton
_registry = PatternRegistry()


def get_registry() -> PatternRegistry:
    return _registry


def pattern(*, name: str, description: str = ""):
    """Decorator to register a pattern generator."""

    def decorator(fn: PatternFn) -> PatternFn:
        _registry.register(PatternSpec(name=name, fn=fn, description=description))
        return fn

    return decorator
