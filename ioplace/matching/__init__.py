"""Assignment of pins to the slots of a section by minimum-cost bipartite
matching.

The matching is broken into three components: construction of a cost matrix
for the section (:py:mod:`~ioplace.matching.cost_matrix`), a solver for the
resulting assignment problem (:py:mod:`~ioplace.matching.solver`) and the
:py:class:`~ioplace.matching.section.SectionAssigner` which drives the two and
places the pins.

The solver may be swapped for any implementation of the
:py:class:`~ioplace.matching.solver.Solver` interface. The default,
:py:class:`~ioplace.matching.solver.LinearSumAssignmentSolver`, is built on
SciPy.
"""

from ioplace.matching.cost_matrix import FAIL, CostMatrix

from ioplace.matching.solver import \
    UNASSIGNED, Solver, LinearSumAssignmentSolver, default_solver

from ioplace.matching.section import SectionAssigner
