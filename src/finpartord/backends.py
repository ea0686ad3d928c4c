from finpartord.dag import DagPartOrd
from finpartord.pairs import PairPartOrd

BACKENDS = {
    "pairs": PairPartOrd,
    "dag": DagPartOrd,
}

DEFAULT_BACKEND = "dag"


def make_order(backend=None):
    """
    Build an empty partial order.

    Args:
        backend: A name from BACKENDS, a FinPartOrd subclass, or None for
            DEFAULT_BACKEND

    Returns:
        An empty instance of the chosen representation
    """
    if backend is None:
        backend = DEFAULT_BACKEND
    if isinstance(backend, str):
        if backend not in BACKENDS:
            known = ", ".join(sorted(BACKENDS))
            raise ValueError(f"Unknown backend {backend!r}, expected one of: {known}")
        backend = BACKENDS[backend]
    return backend.empty()
