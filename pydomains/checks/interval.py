"""
Self-checks for interval implementations.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


class IntervalAxiomChecks:
    """
    A mixin class providing a self-checking mechanism for interval algebra.

    When inherited by an interval class, it provides the `.check()` method
    to run a suite of randomized tests, ensuring the implementation is valid.
    """

    __slots__ = ()

    def _check_point_in_domain(self):
        """Checks that the representative point is a member."""
        if self.is_empty:
            return
        if not self.indomain(self.point_in_domain()):
            raise AssertionError("Check failed: point_in_domain() not in domain")

    def _check_translation(self, shift):
        """Checks that (d + x) - x has the endpoints of d."""
        result = (self + shift) - shift
        if not np.allclose(
            [result.left_endpoint, result.right_endpoint],
            [self.left_endpoint, self.right_endpoint],
        ):
            raise AssertionError("Check failed: (d + x) - x != d")
        if (result.left_kind, result.right_kind) != (self.left_kind, self.right_kind):
            raise AssertionError("Check failed: translation changed boundary kinds")

    def _check_negation(self):
        """Checks that negation is an involution."""
        # The unit interval comes back as a general closed interval, so
        # compare endpoints and boundary kinds rather than values.
        result = -(-self)
        if (
            result.left_endpoint != self.left_endpoint
            or result.right_endpoint != self.right_endpoint
            or result.left_kind is not self.left_kind
            or result.right_kind is not self.right_kind
        ):
            raise AssertionError("Check failed: -(-d) != d")

    def _check_scaling(self, factor):
        """Checks that scaling by any sign keeps the endpoints ordered."""
        if self.is_empty:
            return
        for scaled in (self * factor, factor * self, self / factor):
            if scaled.left_endpoint > scaled.right_endpoint:
                raise AssertionError(
                    f"Check failed: scaling by {factor} inverted the interval"
                )

    def check(self, n_checks: int = 10, rng=None) -> None:
        """
        Runs a suite of randomized checks on the interval algebra.

        Translation, negation and scaling are only checked for bounded
        intervals, since the halflines cannot move.

        Args:
            n_checks: The number of randomized trials to run.
            rng: Optional `numpy.random.Generator`.

        Raises:
            AssertionError: If any of the underlying checks fail.
        """
        rng = np.random.default_rng() if rng is None else rng
        logger.info(
            "Running %d randomized interval checks for %s...",
            n_checks, self.__class__.__name__,
        )
        for _ in range(n_checks):
            self._check_point_in_domain()
            if not self.is_bounded:
                continue
            self._check_negation()
            self._check_translation(float(rng.normal()))
            factor = float(rng.normal())
            if factor != 0.0:
                self._check_scaling(factor)
        logger.info("All %d interval checks passed.", n_checks)
