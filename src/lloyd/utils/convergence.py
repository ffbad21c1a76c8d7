"""
Convergence criteria for the clustering engine.

A run stops for one of two reasons:
- the assignment step reproduced the previous assignments exactly
- the pass counter ran past the iteration budget
"""

from typing import Any, Dict, List, Optional, Sequence

from ..base.interfaces import ConvergenceCriterion


class AssignmentStability(ConvergenceCriterion):
    """Convergence when a pass leaves every assignment unchanged.

    Comparison is element-wise and exact, so sentinel positions count too.
    """

    def __init__(self):
        super().__init__()
        self._prev_assignments: Optional[List[int]] = None

    def snapshot(self, assignments: Sequence[int]) -> None:
        """Remember the assignments a pass starts from."""
        self._prev_assignments = [int(a) for a in assignments]

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check the current assignments against the last snapshot."""
        current = [int(a) for a in current_state['assignments']]

        if self._prev_assignments is None:
            self._prev_assignments = current
            return False

        n_changed = sum(
            1 for before, after in zip(self._prev_assignments, current)
            if before != after
        )
        n_total = len(current)

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_changed': n_changed,
            'change_fraction': n_changed / n_total if n_total else 0.0
        })

        return n_changed == 0

    def reset(self):
        """Reset history and drop the snapshot."""
        super().reset()
        self._prev_assignments = None


class IterationBudget:
    """Counter of non-converged passes.

    The counter is incremented after each pass that changed something and
    compared against the budget afterwards, so a run that never settles
    performs ``budget + 1`` passes before it is stopped. Testing with a
    post-increment instead (``used++ > budget``) would allow one more pass,
    stopping after ``budget + 2`` passes and reporting ``budget + 2``.

    This is a stopping rule, not a convergence criterion: running out of
    budget never means the assignments have settled.
    """

    def __init__(self, budget: int):
        self.budget = budget
        self.used = 0

    def step(self) -> bool:
        """Count one more pass. Returns True once the budget is exceeded."""
        self.used += 1
        return self.used > self.budget

    def reset(self):
        self.used = 0
