"""topfill pattern engine.

Pattern generators register themselves when ``topfill.engine.generator`` is imported.
"""

from topfill.engine.config import GenerationConfig
from topfill.engine.context import GenerationResult, Silhouette
from topfill.engine.registry import get_registry, pattern
from topfill.engine.rng import Mulberry32

__all__ = [
    "GenerationConfig",
    "GenerationResult",
    "Silhouette",
    "get_registry",
    "pattern",
    "Mulberry32",
]
