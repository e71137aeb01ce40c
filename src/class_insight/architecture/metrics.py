"""Martin metrics computation for declared types.

Computes per-type metrics:
- Abstractness flag (A): 1 for interfaces and abstract classes, else 0
- Instability (I): Ce / (Ca + Ce), 0 if the type is isolated
- Main Sequence Distance (D): |A_global + I - 1|, where A_global is the
  abstractness ratio of the whole analyzed set
- Zone: where the type sits relative to the main sequence
"""

from typing import Dict, Iterable, Tuple

from ..scanning.models import TypeKind

ZONE_PAIN = "pain"
ZONE_USELESSNESS = "uselessness"
ZONE_MAIN_SEQUENCE = "main_sequence"


def compute_abstractness(kinds: Iterable[TypeKind]) -> float:
    """Compute A = abstract types / total types.

    Interfaces and abstract classes count as abstract.

    Args:
        kinds: Kind of every declared type

    Returns:
        Abstractness in [0, 1], or 0.0 if there are no types
    """
    total = 0
    abstract = 0
    for kind in kinds:
        total += 1
        if kind.is_abstract:
            abstract += 1
    if total == 0:
        return 0.0
    return abstract / total


def compute_instability(ca: int, ce: int) -> float:
    """Compute instability I = Ce / (Ca + Ce).

    Args:
        ca: Afferent coupling (incoming references)
        ce: Efferent coupling (outgoing references)

    Returns:
        Instability in [0, 1]; 0.0 for an isolated type (Ca = Ce = 0)
    """
    total = ca + ce
    if total == 0:
        return 0.0
    return ce / total


def compute_main_seq_distance(abstractness: float, instability: float) -> float:
    """Compute main sequence distance D = |A + I - 1|.

    The main sequence is the line from (0, 1) to (1, 0) in the A-I plane.
    - D ≈ 0: balanced (on the main sequence)
    - D ≈ 1 with A=0, I=0: Zone of Pain (stable but concrete)
    - D ≈ 1 with A=1, I=1: Zone of Uselessness (abstract but unstable)
    """
    return abs(abstractness + instability - 1.0)


def classify_zone(
    abstractness: float,
    instability: float,
    abstractness_threshold: float = 0.30,
    instability_threshold: float = 0.30,
) -> str:
    """Place a type in the zone of pain, the zone of uselessness or neither."""
    if abstractness <= abstractness_threshold and instability <= instability_threshold:
        return ZONE_PAIN
    if abstractness >= 1.0 - abstractness_threshold and instability >= 1.0 - instability_threshold:
        return ZONE_USELESSNESS
    return ZONE_MAIN_SEQUENCE


def compute_type_metrics(
    couplings: Dict[str, Tuple[int, int]], global_abstractness: float
) -> Dict[str, Tuple[float, float]]:
    """Compute (I, D) for every type from its (Ca, Ce).

    Pure function of the coupling counts; recompute whenever they change.
    """
    metrics: Dict[str, Tuple[float, float]] = {}
    for name, (ca, ce) in couplings.items():
        instability = compute_instability(ca, ce)
        metrics[name] = (instability, compute_main_seq_distance(global_abstractness, instability))
    return metrics
