"""
Defines one-dimensional interval domains.

Hierarchy:
- AbstractInterval (Abstract Base)
    - FixedInterval: endpoints determined by the class and the element type
        - UnitInterval [0, 1]
        - ChebyshevInterval [-1, 1]
        - Halfline [0, inf)
        - NegativeHalfline (-inf, 0)
    - Interval: stored finite endpoints, each of them open or closed

All intervals are immutable. Arithmetic with real scalars maps the endpoints
and builds a new interval of the same kind through `similar_interval`. Set
operations between intervals are implemented in `pydomains.set_algebra`.
"""

from __future__ import annotations
import enum
import logging
import numbers
import operator
from abc import abstractmethod
from functools import reduce
from typing import Optional

import numpy as np

from .checks.interval import IntervalAxiomChecks
from .configs import get_config
from .domain import Domain, FullSpace, UnionDomain
from .exceptions import (
    EmptyIntervalError,
    InvalidEndpointError,
    UndefinedEndpointError,
)

logger = logging.getLogger(__name__)


class BoundaryKind(str, enum.Enum):
    """Whether an endpoint belongs to the interval (closed) or not (open)."""

    OPEN = "open"
    CLOSED = "closed"


OPEN = BoundaryKind.OPEN
CLOSED = BoundaryKind.CLOSED

# Comparison at an endpoint, applied as (a, x) on the left and (x, b) on the right.
_COMPARE = {CLOSED: operator.le, OPEN: operator.lt}


def _is_real(x) -> bool:
    return isinstance(x, numbers.Real)


def _real_dtype(dtype) -> np.dtype:
    dtype = np.dtype(dtype)
    if not (np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)):
        raise TypeError(f"Interval endpoints must be real numbers, not {dtype}.")
    return dtype


def _float_dtype(dtype, name: str) -> np.dtype:
    dtype = _real_dtype(get_config().dtype if dtype is None else dtype)
    if not np.issubdtype(dtype, np.floating):
        raise TypeError(f"{name} requires a floating point element type, not {dtype}.")
    return dtype


def _elementwise(x, test):
    # Scalars give a plain bool, arrays an elementwise boolean array.
    if np.ndim(x) == 0:
        return bool(test(x))
    return test(np.asarray(x))


def _scale(d: AbstractInterval, f, x) -> AbstractInterval:
    # A negative factor reverses the order of the endpoints.
    if x >= 0:
        return d.similar_interval(f(d.left_endpoint), f(d.right_endpoint))
    return d.similar_interval(f(d.right_endpoint), f(d.left_endpoint))


class AbstractInterval(IntervalAxiomChecks, Domain):
    """
    Abstract base class for a one-dimensional interval.

    Subclasses provide the endpoints, the boundary kind at each endpoint and
    the `similar_interval` factory. Classification, membership and arithmetic
    are derived from these.
    """

    __slots__ = ()

    # --- Endpoints ---

    @property
    @abstractmethod
    def left_endpoint(self):
        """The left endpoint of the interval."""

    @property
    @abstractmethod
    def right_endpoint(self):
        """The right endpoint of the interval."""

    @property
    @abstractmethod
    def left_kind(self) -> BoundaryKind:
        """Whether the interval is open or closed at the left."""

    @property
    @abstractmethod
    def right_kind(self) -> BoundaryKind:
        """Whether the interval is open or closed at the right."""

    @property
    def a(self):
        """Alias of `left_endpoint`."""
        return self.left_endpoint

    @property
    def b(self):
        """Alias of `right_endpoint`."""
        return self.right_endpoint

    @property
    def infimum(self):
        """
        The greatest lower bound of the interval.

        Raises:
            UndefinedEndpointError: If the interval is empty.
        """
        if self.left_endpoint > self.right_endpoint:
            raise UndefinedEndpointError(
                f"Infimum not defined for the empty interval {self!r}."
            )
        return self.left_endpoint

    @property
    def supremum(self):
        """
        The least upper bound of the interval.

        Raises:
            UndefinedEndpointError: If the interval is empty.
        """
        if self.left_endpoint > self.right_endpoint:
            raise UndefinedEndpointError(
                f"Supremum not defined for the empty interval {self!r}."
            )
        return self.right_endpoint

    @property
    def minimum(self):
        """
        The smallest element of the interval.

        Raises:
            UndefinedEndpointError: If the interval is unbounded below or open
                at the left. Use `infimum` instead.
        """
        if not np.isfinite(self.left_endpoint):
            raise UndefinedEndpointError(f"{self!r} is unbounded. Use infimum.")
        if self.left_kind is OPEN:
            raise UndefinedEndpointError(
                f"{self!r} is open on the left. Use infimum."
            )
        return self.infimum

    @property
    def maximum(self):
        """
        The largest element of the interval.

        Raises:
            UndefinedEndpointError: If the interval is unbounded above or open
                at the right. Use `supremum` instead.
        """
        if not np.isfinite(self.right_endpoint):
            raise UndefinedEndpointError(f"{self!r} is unbounded. Use supremum.")
        if self.right_kind is OPEN:
            raise UndefinedEndpointError(
                f"{self!r} is open on the right. Use supremum."
            )
        return self.supremum

    # --- Classification ---

    @property
    def is_empty(self) -> bool:
        """
        True if no number lies in the interval.

        A closed interval is empty when a > b; an interval that is open at
        either end is already empty when a >= b.
        """
        if self.left_kind is CLOSED and self.right_kind is CLOSED:
            return bool(self.left_endpoint > self.right_endpoint)
        return bool(self.left_endpoint >= self.right_endpoint)

    @property
    def is_open(self) -> bool:
        """True if the interval is open at both endpoints."""
        return self.left_kind is OPEN and self.right_kind is OPEN

    @property
    def is_closed(self) -> bool:
        """True if the interval is closed at both endpoints."""
        return self.left_kind is CLOSED and self.right_kind is CLOSED

    @property
    def is_bounded(self) -> bool:
        """True if both endpoints are finite."""
        return bool(
            np.isfinite(self.left_endpoint) and np.isfinite(self.right_endpoint)
        )

    @property
    def is_compact(self) -> bool:
        """True if the interval is bounded and closed."""
        return self.is_bounded and self.is_closed

    # --- Membership ---

    def indomain(self, x):
        """
        Returns True if x lies in the interval.

        The comparison at each endpoint is strict or not according to its
        boundary kind. Arrays are tested elementwise.
        """
        a, b = self.left_endpoint, self.right_endpoint
        left_test = _COMPARE[self.left_kind]
        right_test = _COMPARE[self.right_kind]
        return _elementwise(x, lambda t: left_test(a, t) & right_test(t, b))

    def approx_indomain(self, x, tolerance=None):
        """
        Returns True if x lies in the interval widened by `tolerance`.

        The boundary kinds are ignored: the test is
        `a - tolerance <= x <= b + tolerance`.

        Args:
            x: A number or an array of numbers.
            tolerance: Non-negative tolerance. Defaults to
                `self.default_tolerance`.
        """
        if tolerance is None:
            tolerance = self.default_tolerance
        a = self.left_endpoint - tolerance
        b = self.right_endpoint + tolerance
        return _elementwise(x, lambda t: (t >= a) & (t <= b))

    def point_in_domain(self):
        """
        Returns a member of the interval: its midpoint.

        Raises:
            EmptyIntervalError: If the interval is empty.
        """
        if self.is_empty:
            raise EmptyIntervalError(f"The interval {self!r} has no points.")
        return (self.left_endpoint + self.right_endpoint) / 2

    # --- Construction of related intervals ---

    @abstractmethod
    def similar_interval(self, a, b) -> AbstractInterval:
        """
        Returns an interval of the same kind as this one, with endpoints a, b.
        """

    def astype(self, dtype) -> AbstractInterval:
        """Returns the same interval with another element type."""
        return type(self).from_interval(self, dtype=dtype)

    @classmethod
    @abstractmethod
    def from_interval(cls, d: AbstractInterval, dtype=None) -> AbstractInterval:
        """Converts the interval d to this class."""

    # --- Arithmetic with real scalars ---

    def __neg__(self):
        return self.similar_interval(-self.right_endpoint, -self.left_endpoint)

    def __pos__(self):
        return self

    def __add__(self, x):
        if not _is_real(x):
            return NotImplemented
        return self.similar_interval(self.left_endpoint + x, self.right_endpoint + x)

    def __radd__(self, x):
        if not _is_real(x):
            return NotImplemented
        return self.similar_interval(x + self.left_endpoint, x + self.right_endpoint)

    def __sub__(self, x):
        if isinstance(x, Domain):
            return self.setdiff(x)
        if not _is_real(x):
            return NotImplemented
        return self.similar_interval(self.left_endpoint - x, self.right_endpoint - x)

    def __rsub__(self, x):
        if not _is_real(x):
            return NotImplemented
        return self.similar_interval(x - self.right_endpoint, x - self.left_endpoint)

    def __mul__(self, x):
        if not _is_real(x):
            return NotImplemented
        return _scale(self, lambda t: t * x, x)

    def __rmul__(self, x):
        if not _is_real(x):
            return NotImplemented
        return _scale(self, lambda t: x * t, x)

    def __truediv__(self, x):
        if not _is_real(x):
            return NotImplemented
        return _scale(self, lambda t: t / x, x)

    # --- Set operations ---

    def union(self, other: Domain) -> Domain:
        """Returns the union of this interval and another domain."""
        if isinstance(other, AbstractInterval):
            from .set_algebra import union
            return union(self, other)
        return super().union(other)

    def intersect(self, other: Domain) -> Domain:
        """Returns the intersection of this interval and another domain."""
        if isinstance(other, AbstractInterval):
            from .set_algebra import intersect
            return intersect(self, other)
        if isinstance(other, UnionDomain):
            return other.intersect(self)
        return super().intersect(other)

    def setdiff(self, other: Domain) -> Domain:
        """Returns the points of this interval that are not in `other`."""
        if isinstance(other, AbstractInterval):
            from .set_algebra import setdiff
            return setdiff(self, other)
        if isinstance(other, UnionDomain):
            return reduce(lambda acc, d: acc.setdiff(d), other.domains, self)
        return super().setdiff(other)

    # --- Value semantics ---

    def _key(self):
        return (
            type(self),
            self.left_kind,
            self.right_kind,
            self.left_endpoint,
            self.right_endpoint,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbstractInterval):
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        left = "[" if self.left_kind is CLOSED else "("
        right = "]" if self.right_kind is CLOSED else ")"
        return f"{left}{self.left_endpoint}, {self.right_endpoint}{right}"


class FixedInterval(AbstractInterval):
    """
    Base class of intervals whose endpoints are determined by the class and
    the element type, rather than by stored values.

    Fixed intervals are closed and compact unless a subclass says otherwise.
    """

    __slots__ = ("_dtype",)

    _LEFT_KIND = CLOSED
    _RIGHT_KIND = CLOSED

    def __init__(self, dtype=None):
        self._dtype = _real_dtype(get_config().dtype if dtype is None else dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def left_kind(self) -> BoundaryKind:
        return self._LEFT_KIND

    @property
    def right_kind(self) -> BoundaryKind:
        return self._RIGHT_KIND

    def similar_interval(self, a, b) -> AbstractInterval:
        """
        Returns this interval if (a, b) are its own endpoints, and otherwise
        a general interval with the same boundary kinds.
        """
        if a == self.left_endpoint and b == self.right_endpoint:
            return self
        logger.debug(
            "%r mapped to endpoints (%s, %s); returning a general interval.",
            self, a, b,
        )
        return Interval(a, b, self.left_kind, self.right_kind)

    @classmethod
    def from_interval(cls, d: AbstractInterval, dtype=None) -> FixedInterval:
        """
        Converts the interval d to this fixed interval.

        Raises:
            AssertionError: If the endpoints of d differ from those of the
                fixed interval.
        """
        target = cls(d.dtype if dtype is None else dtype)
        if (
            d.left_endpoint != target.left_endpoint
            or d.right_endpoint != target.right_endpoint
        ):
            raise AssertionError(
                f"Cannot convert {d!r} to {cls.__name__}: endpoints must be "
                f"{target.left_endpoint} and {target.right_endpoint}."
            )
        return target

    def _key(self):
        return (type(self), self.left_endpoint, self.right_endpoint)


class UnitInterval(FixedInterval):
    """The closed unit interval [0, 1]."""

    __slots__ = ()

    @property
    def left_endpoint(self):
        return self._dtype.type(0)

    @property
    def right_endpoint(self):
        return self._dtype.type(1)


class ChebyshevInterval(FixedInterval):
    """The closed symmetric interval [-1, 1]."""

    __slots__ = ()

    @property
    def left_endpoint(self):
        return self._dtype.type(-1)

    @property
    def right_endpoint(self):
        return self._dtype.type(1)

    def __neg__(self):
        return self


class Halfline(FixedInterval):
    """The half-open positive halfline [0, inf)."""

    __slots__ = ()

    _RIGHT_KIND = OPEN

    def __init__(self, dtype=None):
        self._dtype = _float_dtype(dtype, "Halfline")

    @property
    def left_endpoint(self):
        return self._dtype.type(0)

    @property
    def right_endpoint(self):
        return self._dtype.type(np.inf)

    def indomain(self, x):
        return _elementwise(x, lambda t: t >= 0)

    def point_in_domain(self):
        return self._dtype.type(0)

    def similar_interval(self, a, b) -> Halfline:
        if a != 0:
            raise AssertionError(f"{self!r} must keep its left endpoint 0, got {a}.")
        if not (np.isinf(b) and b > 0):
            raise AssertionError(f"{self!r} must keep its right endpoint inf, got {b}.")
        return self


class NegativeHalfline(FixedInterval):
    """The open negative halfline (-inf, 0)."""

    __slots__ = ()

    _LEFT_KIND = OPEN
    _RIGHT_KIND = OPEN

    def __init__(self, dtype=None):
        self._dtype = _float_dtype(dtype, "NegativeHalfline")

    @property
    def left_endpoint(self):
        return -self._dtype.type(np.inf)

    @property
    def right_endpoint(self):
        return self._dtype.type(0)

    def indomain(self, x):
        return _elementwise(x, lambda t: t < 0)

    def point_in_domain(self):
        return -self._dtype.type(1)

    def similar_interval(self, a, b) -> NegativeHalfline:
        if not (np.isinf(a) and a < 0):
            raise AssertionError(f"{self!r} must keep its left endpoint -inf, got {a}.")
        if b != 0:
            raise AssertionError(f"{self!r} must keep its right endpoint 0, got {b}.")
        return self


class Interval(AbstractInterval):
    """
    A general interval with finite endpoints a and b.

    The interval can be open or closed at each endpoint. The four
    combinations are available through `Interval.closed` ([a, b]),
    `Interval.open` ((a, b)), `Interval.left_open` ((a, b]) and
    `Interval.right_open` ([a, b)).

    Args:
        a: Left endpoint. Defaults to 0.
        b: Right endpoint. Defaults to 1.
        left: Boundary kind at a, "open" or "closed".
        right: Boundary kind at b, "open" or "closed".
        dtype: Element type. If omitted, the common type of a and b is used.

    Raises:
        InvalidEndpointError: If an endpoint is not finite.
        TypeError: If the endpoints are not real numbers.
    """

    __slots__ = ("_a", "_b", "_left", "_right")

    def __init__(
        self,
        a=0.0,
        b=1.0,
        left: BoundaryKind = CLOSED,
        right: BoundaryKind = CLOSED,
        *,
        dtype=None,
    ):
        if not (_is_real(a) and _is_real(b)):
            raise TypeError(
                f"Interval endpoints must be real numbers, got {a!r} and {b!r}."
            )
        if not (np.isfinite(a) and np.isfinite(b)):
            raise InvalidEndpointError(
                f"Interval endpoints must be finite, got {a} and {b}."
            )
        dtype = _real_dtype(np.result_type(a, b) if dtype is None else dtype)
        self._a = dtype.type(a)
        self._b = dtype.type(b)
        self._left = BoundaryKind(left)
        self._right = BoundaryKind(right)

    @classmethod
    def closed(cls, a=0.0, b=1.0, *, dtype=None) -> Interval:
        """The closed interval [a, b]."""
        return cls(a, b, CLOSED, CLOSED, dtype=dtype)

    @classmethod
    def open(cls, a=0.0, b=1.0, *, dtype=None) -> Interval:
        """The open interval (a, b)."""
        return cls(a, b, OPEN, OPEN, dtype=dtype)

    @classmethod
    def left_open(cls, a=0.0, b=1.0, *, dtype=None) -> Interval:
        """The half-open interval (a, b]."""
        return cls(a, b, OPEN, CLOSED, dtype=dtype)

    @classmethod
    def right_open(cls, a=0.0, b=1.0, *, dtype=None) -> Interval:
        """The half-open interval [a, b)."""
        return cls(a, b, CLOSED, OPEN, dtype=dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._a.dtype

    @property
    def left_endpoint(self):
        return self._a

    @property
    def right_endpoint(self):
        return self._b

    @property
    def left_kind(self) -> BoundaryKind:
        return self._left

    @property
    def right_kind(self) -> BoundaryKind:
        return self._right

    def similar_interval(self, a, b) -> Interval:
        return Interval(a, b, self._left, self._right)

    @classmethod
    def from_interval(
        cls,
        d: AbstractInterval,
        dtype=None,
        left: Optional[BoundaryKind] = None,
        right: Optional[BoundaryKind] = None,
    ) -> Interval:
        """
        Converts the interval d to a general interval.

        The boundary kinds of d are kept unless `left` or `right` are given.
        """
        return cls(
            d.left_endpoint,
            d.right_endpoint,
            d.left_kind if left is None else left,
            d.right_kind if right is None else right,
            dtype=d.dtype if dtype is None else dtype,
        )


# --- Constructors ---


def unitinterval(dtype=None) -> UnitInterval:
    """The unit interval [0, 1] with the given element type."""
    return UnitInterval(dtype)


def chebyshev_interval(dtype=None) -> ChebyshevInterval:
    """The symmetric interval [-1, 1] with the given element type."""
    return ChebyshevInterval(dtype)


symmetric_interval = chebyshev_interval


def halfline(dtype=None) -> Halfline:
    """The positive halfline [0, inf) with the given floating element type."""
    return Halfline(dtype)


def negative_halfline(dtype=None) -> NegativeHalfline:
    """The negative halfline (-inf, 0) with the given floating element type."""
    return NegativeHalfline(dtype)


def real_line(dtype=None) -> FullSpace:
    """All real numbers of the given floating element type."""
    return FullSpace(_float_dtype(dtype, "real_line"))


def closed_interval(a=0.0, b=1.0, *, dtype=None) -> Interval:
    """The closed interval [a, b]."""
    return Interval.closed(a, b, dtype=dtype)


def open_interval(a=0.0, b=1.0, *, dtype=None) -> Interval:
    """The open interval (a, b)."""
    return Interval.open(a, b, dtype=dtype)


def halfopen_left_interval(a=0.0, b=1.0, *, dtype=None) -> Interval:
    """The half-open interval (a, b]."""
    return Interval.left_open(a, b, dtype=dtype)


def halfopen_right_interval(a=0.0, b=1.0, *, dtype=None) -> Interval:
    """The half-open interval [a, b)."""
    return Interval.right_open(a, b, dtype=dtype)


def interval(a=None, b=None, *, dtype=None) -> AbstractInterval:
    """
    Return an interval domain:
    - with no arguments, the unit interval [0, 1]
    - with a single element type, the unit interval of that type
    - with two endpoints, the closed interval [a, b]

    Integer endpoints give a floating point interval unless promotion is
    switched off in the configuration. An integer interval can always be
    built by passing an integer `dtype`.
    """
    if a is None and b is None:
        return unitinterval(dtype)
    if b is None:
        return unitinterval(a)
    config = get_config()
    if (
        dtype is None
        and config.promote_integers
        and isinstance(a, numbers.Integral)
        and isinstance(b, numbers.Integral)
    ):
        dtype = config.dtype
    return closed_interval(a, b, dtype=dtype)


def convert(d: AbstractInterval, target: type, dtype=None, **kinds) -> AbstractInterval:
    """
    Converts the interval d to the interval class `target`.

    Args:
        d: The interval to convert.
        target: `Interval` or one of the fixed interval classes.
        dtype: Element type of the result. Defaults to that of d.
        **kinds: `left` and `right` boundary kinds, for `Interval` only.

    Raises:
        AssertionError: If target is a fixed interval with other endpoints.
    """
    if not (isinstance(target, type) and issubclass(target, AbstractInterval)):
        raise TypeError(f"Cannot convert an interval to {target!r}.")
    return target.from_interval(d, dtype=dtype, **kinds)


def ldiv(x, d: AbstractInterval) -> AbstractInterval:
    """
    Left division `x \\ d`: divides the endpoints of d by the scalar x.

    As for multiplication, a negative x swaps the endpoints.
    """
    if not _is_real(x):
        raise TypeError(f"Cannot divide an interval by {x!r}.")
    return _scale(d, lambda t: t / x, x)
