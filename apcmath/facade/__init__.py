"""
Facade layer — APC static methods, number normalization, default scale.

Сюда вынесено всё, что движок сознательно не делает:
- приведение int/float/str/научной нотации к канонической строке
- хранение process-wide scale по умолчанию
"""

from .apc import APC
from .normalizer import MAX_EXPONENT, NumberLike, expand_scientific, normalize_number
from .scale_registry import DEFAULT_REGISTRY, ScaleConfig, ScaleRegistry

__all__ = [
    "APC",
    "MAX_EXPONENT",
    "NumberLike",
    "expand_scientific",
    "normalize_number",
    "DEFAULT_REGISTRY",
    "ScaleConfig",
    "ScaleRegistry",
]
