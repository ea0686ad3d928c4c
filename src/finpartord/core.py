# Re-export all public APIs
from finpartord.errors import StructuralViolation, AntisymmetryError, WouldCycle
from finpartord.order import FinPartOrd
from finpartord.pairs import Pair, PairPartOrd
from finpartord.dag import Dag, DagPartOrd
from finpartord.backends import BACKENDS, DEFAULT_BACKEND, make_order

__all__ = [
    'StructuralViolation', 'AntisymmetryError', 'WouldCycle',
    'FinPartOrd',
    'Pair', 'PairPartOrd',
    'Dag', 'DagPartOrd',
    'BACKENDS', 'DEFAULT_BACKEND', 'make_order',
]
