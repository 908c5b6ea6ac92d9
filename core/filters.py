"""Include/exclude filtering of entities by entity_id"""
import re
from typing import Iterable, List, Sequence

from model.entity import HAEntity


class FilterError(ValueError):
    """Raised when an include/exclude pattern is not a valid regular expression"""


def _compile(patterns: Sequence[str]) -> List[re.Pattern]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise FilterError(f"invalid entity pattern {pattern!r}: {e}") from e
    return compiled


def _matches_any(patterns: Sequence[re.Pattern], entity_id: str) -> bool:
    for pattern in patterns:
        if pattern.search(entity_id):
            return True
    return False


def filter_entities(entities: Iterable[HAEntity],
                    includes: Sequence[str],
                    excludes: Sequence[str]) -> List[HAEntity]:
    """
    Keep entities whose id matches at least one include pattern and no exclude pattern.

    Patterns are unanchored regular expressions. An empty include list keeps
    nothing; an empty exclude list excludes nothing. Input order is preserved.

    Raises:
        FilterError: if any pattern fails to compile; no partial result is returned
    """
    include_patterns = _compile(includes)
    exclude_patterns = _compile(excludes)

    return [
        entity for entity in entities
        if _matches_any(include_patterns, entity.entity_id)
        and not _matches_any(exclude_patterns, entity.entity_id)
    ]
