"""Generic coupling from type names used inside de-nested bodies.

Each (declaration, name) test is independent and reads only immutable
text, so the search can fan out over a thread pool. Coupling increments
are applied afterwards in a single reduction step, which keeps the
one-increment-per-ordered-pair rule regardless of worker count.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from ..logging_config import get_logger
from ..scanning.models import TypeDeclaration
from ..scanning.tokens import contains_word
from .models import TypeRegistry

logger = get_logger(__name__)


def find_body_references(declaration: TypeDeclaration, names: Sequence[str]) -> List[str]:
    """Declared names (other than its own) occurring as whole words in the body."""
    body = declaration.denested_body
    return [name for name in names if name != declaration.name and contains_word(body, name)]


def resolve_bodies(registry: TypeRegistry, workers: Optional[int] = None) -> int:
    """Count body references for every declaration occurrence.

    Args:
        registry: Run accumulator
        workers: Thread count for the search; None or 1 runs sequentially

    Returns:
        Number of coupling increments applied
    """
    names = registry.names()
    declarations = registry.declarations

    if workers and workers > 1 and len(declarations) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            found = list(executor.map(lambda decl: find_body_references(decl, names), declarations))
    else:
        found = [find_body_references(decl, names) for decl in declarations]

    increments = 0
    for decl, targets in zip(declarations, found):
        for target in targets:
            registry.couple(decl.name, target)
            increments += 1

    logger.debug(f"Body pass: {increments} coupling increments")
    return increments
