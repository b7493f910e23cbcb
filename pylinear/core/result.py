"""
Envelope returned inside Success by linalg.solvers.evaluate().
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Value of one dispatched operation plus how it was produced.

    Attributes:
        params: OperationParams holding the computed value
        info: operation name, scalar kind ('int'/'float'), operand shapes
            and the scalar factor when one was given
        timing: Timer breakdown ('validate', 'compute', 'total_seconds')
        backend_name: Always 'cpu_reference'
        warnings: Messages of TruncationWarnings raised while computing
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if any recorded warning mentions substring, e.g. 'inverse'."""
        return any(substring in w for w in self.warnings)
