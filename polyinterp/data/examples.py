"""Built-in example point sets, keyed by point count."""

from typing import Dict, List, Tuple

EXAMPLE_POINT_SETS: Dict[int, List[Tuple[float, float]]] = {
    1: [(0.0, 0.0)],
    2: [(0.0, 0.0), (1.0, 1.0)],
    # y = x^2
    3: [(0.0, 0.0), (1.0, 1.0), (2.0, 4.0)],
}


def example_points(n: int) -> List[Tuple[object, object]]:
    """Return ``n`` rows prefilled with the example for ``n``, blank rows otherwise.

    Blank rows are ``("", "")`` as an empty form would submit them.
    """
    if n < 1:
        raise ValueError("n must be positive")
    defaults = EXAMPLE_POINT_SETS.get(n)
    if defaults is not None:
        return list(defaults)
    return [("", "")] * n
