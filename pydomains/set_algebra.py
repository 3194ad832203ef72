"""
Union, intersection and difference of two intervals.

The results are single intervals where possible. Two intervals that neither
overlap nor touch at a closed endpoint unite to a `UnionDomain`, and an empty
intersection or difference is an `EmptySpace`.

Intersections and the pieces of a difference are always built as closed
intervals, whatever the boundary kinds of the operands.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

import numpy as np

from .domain import Domain, EmptySpace, UnionDomain
from .interval import OPEN, Interval, interval

if TYPE_CHECKING:
    from .interval import AbstractInterval, BoundaryKind

logger = logging.getLogger(__name__)


def _common_dtype(d1: AbstractInterval, d2: AbstractInterval) -> np.dtype:
    return np.promote_types(d1.dtype, d2.dtype)


def _matches(d: AbstractInterval, a, b, left: BoundaryKind, right: BoundaryKind) -> bool:
    return (
        d.left_endpoint == a
        and d.right_endpoint == b
        and d.left_kind is left
        and d.right_kind is right
    )


def union(d1: AbstractInterval, d2: AbstractInterval) -> Domain:
    """
    Returns the union of two intervals.

    The intervals are disjoint if one ends before the other starts, or if
    they touch at a point where both are open. Disjoint intervals give a
    `UnionDomain` holding both. Otherwise the result is a single interval
    from the smaller left endpoint to the larger right endpoint, each end
    taking the boundary kind of the operand it came from (of d1 on ties).
    """
    if d1.is_empty:
        return d2
    if d2.is_empty:
        return d1

    a1, b1 = d1.left_endpoint, d1.right_endpoint
    a2, b2 = d2.left_endpoint, d2.right_endpoint
    L1, R1 = d1.left_kind, d1.right_kind
    L2, R2 = d2.left_kind, d2.right_kind

    if (
        (b1 < a2)
        or (b2 < a1)
        or (b1 == a2 and R1 is OPEN and L2 is OPEN)
        or (b2 == a1 and R2 is OPEN and L1 is OPEN)
    ):
        logger.debug("%r and %r are disjoint; returning a UnionDomain.", d1, d2)
        return UnionDomain(d1, d2)

    a = min(a1, a2)
    b = max(b1, b2)
    left = L1 if a == a1 else L2
    right = R1 if b == b1 else R2

    for d in (d1, d2):
        if _matches(d, a, b, left, right):
            return d
    if not (np.isfinite(a) and np.isfinite(b)):
        # Unbounded results only exist as fixed intervals.
        logger.debug(
            "Union of %r and %r is unbounded; returning a UnionDomain.", d1, d2
        )
        return UnionDomain(d1, d2)
    return Interval(a, b, left, right, dtype=_common_dtype(d1, d2))


def intersect(d1: AbstractInterval, d2: AbstractInterval) -> Domain:
    """
    Returns the intersection of two intervals.

    Non-overlapping intervals give an `EmptySpace`. Otherwise the result is
    the closed interval [max(a1, a2), min(b1, b2)]; the boundary kinds of the
    operands are not taken into account.
    """
    a1, b1 = d1.left_endpoint, d1.right_endpoint
    a2, b2 = d2.left_endpoint, d2.right_endpoint

    if (b1 < a2) or (a1 > b2):
        return EmptySpace(_common_dtype(d1, d2))

    a = max(a1, a2)
    b = min(b1, b2)
    if not (np.isfinite(a) and np.isfinite(b)):
        # Both operands are unbounded on the same side; one of them is the result.
        for d in (d1, d2):
            if d.left_endpoint == a and d.right_endpoint == b:
                return d
    return interval(a, b)


def setdiff(d1: AbstractInterval, d2: AbstractInterval) -> Domain:
    """
    Returns the points of d1 that are not in d2.

    The cases are, in order:
    - d1 or d2 is empty, or d2 lies right of d1: d1 itself
    - d2 covers the right part of d1: [a1, a2]
    - d2 lies inside d1: the union of [a1, a2] and [b2, b1]
    - d2 covers the left part of d1: [b2, b1]
    - d2 covers d1: the empty set
    - otherwise (d2 lies left of d1, or starts at b1): d1 itself
    """
    a1, b1 = d1.left_endpoint, d1.right_endpoint
    a2, b2 = d2.left_endpoint, d2.right_endpoint

    if a1 > b1:
        return d1
    if a2 > b2:
        return d1
    if b1 < a2:
        return d1
    if a1 < a2 < b1 <= b2:
        return interval(a1, a2)
    if a1 < a2 <= b2 < b1:
        return union(interval(a1, a2), interval(b2, b1))
    if a2 <= a1 < b2 < b1:
        return interval(b2, b1)
    if a2 <= a1 <= b1 <= b2:
        logger.debug("%r covers %r; returning the empty set.", d2, d1)
        return EmptySpace(d1.dtype)

    # d2 lies left of d1, or starts exactly where d1 ends.
    return d1
