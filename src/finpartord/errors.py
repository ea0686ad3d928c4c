class StructuralViolation(Exception):
    """Raised when declaring lo <= hi would break the partial order."""
    def __init__(self, lo, hi, message):
        self.lo = lo
        self.hi = hi
        self.message = message
        super().__init__(message)


class AntisymmetryError(StructuralViolation):
    """Raised by the pair-chasing order when a declared pair makes an element precede itself."""
    def __init__(self, lo, hi):
        super().__init__(lo, hi, f"Adding {lo!r} <= {hi!r} makes an element precede itself")


class WouldCycle(StructuralViolation):
    """Raised when an edge would close a cycle in the graph."""
    def __init__(self, lo, hi):
        super().__init__(lo, hi, f"Adding edge {lo!r} -> {hi!r} would introduce a cycle")
