"""Config merger for combining settings trees."""
import logging
from enum import Enum
from typing import Any, Dict, List


logger = logging.getLogger(__name__)


class MergeStrategy(Enum):
    """Strategy for merging list values that collide on the same key."""
    MERGE_INDEXED = "MERGE_INDEXED"      # Ordered union, duplicates dropped
    REPLACE_INDEXED = "REPLACE_INDEXED"  # Override list completely


def _same_value(left: Any, right: Any) -> bool:
    """Structural equality that keeps 1, 1.0 and True distinct at any depth."""
    if type(left) is not type(right):
        return False
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(
            _same_value(value, right[key]) for key, value in left.items()
        )
    if isinstance(left, list):
        return len(left) == len(right) and all(
            _same_value(a, b) for a, b in zip(left, right)
        )
    return left == right


def _union(base_list: List[Any], override_list: List[Any]) -> List[Any]:
    """Concatenate two lists keeping only first occurrences."""
    result: List[Any] = []
    for item in base_list + override_list:
        if not any(_same_value(item, seen) for seen in result):
            result.append(item)
    return result


def merge_objects(
    base: Dict[str, Any],
    override: Dict[str, Any],
    strategy: MergeStrategy = MergeStrategy.MERGE_INDEXED,
) -> Dict[str, Any]:
    """Deep merge override into base.

    Merge rules:
    - Key only in base: kept as-is
    - Key only in override: taken as-is
    - Both dicts: merged recursively
    - Both lists with MERGE_INDEXED: ordered union without duplicates
    - Anything else: override value wins

    Lists of dicts are not merged element-wise.

    Args:
        base: Base settings (lower priority)
        override: Override settings (higher priority)
        strategy: How to combine colliding lists

    Returns:
        Merged settings (new dict, inputs not modified)
    """
    # Create new dict (don't modify inputs)
    result = base.copy()

    for key, override_value in override.items():
        if key not in result:
            result[key] = override_value
            continue

        base_value = result[key]

        if isinstance(base_value, dict) and isinstance(override_value, dict):
            # Both dicts: merge recursively
            result[key] = merge_objects(base_value, override_value, strategy)
        elif (
            strategy == MergeStrategy.MERGE_INDEXED
            and isinstance(base_value, list)
            and isinstance(override_value, list)
        ):
            result[key] = _union(base_value, override_value)
        else:
            # Scalar, type mismatch or replaced list: override
            result[key] = override_value

    return result


class ConfigMerger:
    """Deep merges settings trees with a fixed list strategy.

    Example:
        base = {"sources": ["arxiv", "kaggle"]}
        override = {"sources": ["kaggle", "web"], "models": {"claude": "sonnet"}}

        With MERGE_INDEXED:
            result = {"sources": ["arxiv", "kaggle", "web"], "models": {"claude": "sonnet"}}

        With REPLACE_INDEXED:
            result = {"sources": ["kaggle", "web"], "models": {"claude": "sonnet"}}
    """

    def __init__(self, strategy: MergeStrategy = MergeStrategy.MERGE_INDEXED):
        """Initialize config merger.

        Args:
            strategy: Strategy for merging lists
        """
        self.strategy = strategy

    def merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge override into base (see merge_objects)."""
        result = merge_objects(base, override, self.strategy)

        logger.debug(
            "Settings merged",
            extra={
                "base_keys": len(base),
                "override_keys": len(override),
                "result_keys": len(result),
                "strategy": self.strategy.value,
            },
        )

        return result

    def merge_multiple(self, *trees: Dict[str, Any]) -> Dict[str, Any]:
        """Merge multiple trees in order (left to right, right wins).

        Args:
            *trees: Settings trees to merge

        Returns:
            Final merged tree
        """
        result: Dict[str, Any] = {}

        for tree in trees:
            result = self.merge(result, tree)

        return result
