"""Minimum-cost bipartite matching solvers.

A solver takes a rectangular ``(R, C)`` matrix of non-negative integer costs
(with :py:data:`~ioplace.matching.cost_matrix.FAIL` marking forbidden pairs,
which are nevertheless permitted to be chosen) and pairs ``min(R, C)`` rows
with distinct columns such that the total cost of the pairs is minimal. The
result is given as a list with one entry per row: the column paired with that
row or :py:data:`UNASSIGNED`.

Tie-breaking between solutions of equal cost is left to the solver.
"""

import sentinel

from scipy.optimize import linear_sum_assignment


"""Marks a row which was not paired with any column."""
UNASSIGNED = sentinel.create("UNASSIGNED")


class Solver(object):
    """A general API for a minimum-cost assignment solver."""

    def solve(self, costs):
        """Solve an assignment problem.

        Implementations must run in polynomial time.

        Parameters
        ----------
        costs : :py:class:`numpy.ndarray`
            An ``(R, C)`` array of integer costs.

        Returns
        -------
        [int or UNASSIGNED, ...]
            The column assigned to each of the ``R`` rows. Exactly
            ``min(R, C)`` rows are assigned distinct columns.
        """
        raise NotImplementedError()


class LinearSumAssignmentSolver(Solver):
    """Solves assignment problems using
    :py:func:`scipy.optimize.linear_sum_assignment`.

    SciPy uses a shortest augmenting path variant of the Jonker-Volgenant
    algorithm which runs in O(n^3) time and handles rectangular matrices
    directly.
    """

    def solve(self, costs):
        num_rows = costs.shape[0]
        assignment = [UNASSIGNED] * num_rows
        if costs.size == 0:
            return assignment

        rows, columns = linear_sum_assignment(costs)
        for row, column in zip(rows, columns):
            assignment[int(row)] = int(column)
        return assignment


def assignment_cost(costs, assignment):
    """Get the total cost of the pairs in an assignment.

    Parameters
    ----------
    costs : :py:class:`numpy.ndarray`
    assignment : [int or UNASSIGNED, ...]

    Returns
    -------
    int
    """
    return sum(int(costs[row, column])
               for row, column in enumerate(assignment)
               if column is not UNASSIGNED)


"""The solver used when none is specified."""
default_solver = LinearSumAssignmentSolver
