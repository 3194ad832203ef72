"""
Tests for the general Interval class and its constructors.
"""

import numpy as np
import pytest

from pydomains.interval import (
    CLOSED,
    OPEN,
    BoundaryKind,
    ChebyshevInterval,
    Halfline,
    Interval,
    UnitInterval,
    closed_interval,
    convert,
    halfline,
    halfopen_left_interval,
    halfopen_right_interval,
    interval,
    open_interval,
    unitinterval,
)
from pydomains.exceptions import (
    EmptyIntervalError,
    IntervalError,
    InvalidEndpointError,
    UndefinedEndpointError,
)
from .checks.interval import IntervalChecks


class TestClosedIntervalChecks(IntervalChecks):
    @pytest.fixture
    def domain(self):
        return Interval.closed(-0.5, 2.0)


class TestOpenIntervalChecks(IntervalChecks):
    @pytest.fixture
    def domain(self):
        return Interval.open(-1.0, 3.0)


class TestLeftOpenIntervalChecks(IntervalChecks):
    @pytest.fixture
    def domain(self):
        return Interval.left_open(0.0, 1.0)


class TestRightOpenIntervalChecks(IntervalChecks):
    @pytest.fixture
    def domain(self):
        return Interval.right_open(-1.0, 0.0)


class TestIntegerIntervalChecks(IntervalChecks):
    @pytest.fixture
    def domain(self):
        return Interval.closed(1, 4)


class TestSinglePrecisionIntervalChecks(IntervalChecks):
    @pytest.fixture
    def domain(self):
        return Interval.closed(0.25, 0.75, dtype=np.float32)


class TestMembership:
    @pytest.mark.parametrize(
        "left, right, expected",
        [
            ("closed", "closed", [False, True, True, True, False]),
            ("open", "open", [False, False, True, False, False]),
            ("open", "closed", [False, False, True, True, False]),
            ("closed", "open", [False, True, True, False, False]),
        ],
    )
    def test_membership_rule(self, left, right, expected):
        d = Interval(1.0, 2.0, left, right)
        points = [1.0 - 1e-9, 1.0, 1.5, 2.0, 2.0 + 1e-9]
        assert [d.indomain(x) for x in points] == expected
        assert list(d.indomain(np.array(points))) == expected

    def test_closed_interval_contains_endpoints_and_midpoint(self):
        a, b = -3.0, 7.5
        d = closed_interval(a, b)
        eps = 1e-10
        assert a in d
        assert b in d
        assert 0.5 * (a + b) in d
        assert (a - eps) not in d
        assert (b + eps) not in d

    def test_approx_indomain_default_tolerance(self):
        d = closed_interval(0.0, 1.0)
        assert d.approx_indomain(1.0 + 1e-14)
        assert not d.approx_indomain(1.0 + 1e-3)
        assert d.approx_indomain(1.0 + 1e-3, tolerance=1e-2)

    def test_approx_indomain_ignores_openness(self):
        d = open_interval(0.0, 1.0)
        assert not d.indomain(0.0)
        assert d.approx_indomain(0.0)


class TestEmptiness:
    def test_degenerate_closed_interval_is_not_empty(self):
        assert not closed_interval(1.0, 1.0).is_empty

    @pytest.mark.parametrize(
        "factory", [open_interval, halfopen_left_interval, halfopen_right_interval]
    )
    def test_degenerate_interval_with_open_end_is_empty(self, factory):
        assert factory(1.0, 1.0).is_empty

    def test_inverted_interval_is_empty(self):
        assert closed_interval(1.0, 0.0).is_empty
        assert open_interval(1.0, 0.0).is_empty

    def test_infimum_and_supremum_of_empty_interval(self):
        d = closed_interval(1.0, 0.0)
        with pytest.raises(UndefinedEndpointError, match="Infimum"):
            d.infimum
        with pytest.raises(UndefinedEndpointError, match="Supremum"):
            d.supremum
        with pytest.raises(ValueError):
            d.infimum

    def test_point_in_domain_of_empty_interval(self):
        with pytest.raises(EmptyIntervalError):
            open_interval(2.0, 2.0).point_in_domain()
        with pytest.raises(IndexError):
            closed_interval(2.0, 1.0).point_in_domain()


class TestExtrema:
    def test_closed_interval(self):
        d = closed_interval(-1.0, 4.0)
        assert d.minimum == -1.0
        assert d.maximum == 4.0

    def test_left_open_interval(self):
        d = halfopen_left_interval(-1.0, 4.0)
        with pytest.raises(UndefinedEndpointError, match="open on the left. Use infimum"):
            d.minimum
        assert d.maximum == 4.0

    def test_right_open_interval(self):
        d = halfopen_right_interval(-1.0, 4.0)
        assert d.minimum == -1.0
        with pytest.raises(UndefinedEndpointError, match="open on the right. Use supremum"):
            d.maximum

    def test_error_names_the_interval(self):
        with pytest.raises(IntervalError, match=r"\(-1.0, 4.0\)"):
            open_interval(-1.0, 4.0).minimum

    def test_point_in_domain_is_midpoint(self):
        assert closed_interval(1.0, 2.0).point_in_domain() == 1.5
        assert Interval.closed(1, 2).point_in_domain() == 1.5


class TestClassification:
    def test_closed(self):
        d = closed_interval(0.0, 1.0)
        assert d.is_closed and not d.is_open
        assert d.is_compact

    def test_open(self):
        d = open_interval(0.0, 1.0)
        assert d.is_open and not d.is_closed
        assert not d.is_compact

    @pytest.mark.parametrize("factory", [halfopen_left_interval, halfopen_right_interval])
    def test_half_open_is_neither(self, factory):
        d = factory(0.0, 1.0)
        assert not d.is_open
        assert not d.is_closed
        assert not d.is_compact

    def test_boundary_kinds(self):
        d = halfopen_left_interval(0.0, 1.0)
        assert d.left_kind is OPEN
        assert d.right_kind is CLOSED


class TestConstruction:
    def test_default_is_closed_unit_range(self):
        d = Interval()
        assert d == Interval.closed(0.0, 1.0)
        assert d.dtype == np.float64

    def test_boundary_kinds_from_strings(self):
        d = Interval(0.0, 1.0, "open", "closed")
        assert d == Interval.left_open(0.0, 1.0)
        assert d.left_kind is BoundaryKind.OPEN

    def test_unknown_boundary_kind(self):
        with pytest.raises(ValueError):
            Interval(0.0, 1.0, "ajar", "closed")

    @pytest.mark.parametrize("a, b", [(0.0, np.inf), (-np.inf, 0.0), (np.nan, 1.0)])
    def test_endpoints_must_be_finite(self, a, b):
        with pytest.raises(InvalidEndpointError):
            Interval(a, b)

    def test_endpoints_must_be_real(self):
        with pytest.raises(TypeError):
            Interval("a", 1.0)
        with pytest.raises(TypeError):
            Interval(0.0, 1.0, dtype=np.complex128)

    def test_mixed_endpoint_types_are_promoted(self):
        d = Interval(1, 2.5)
        assert d.dtype == np.float64
        assert isinstance(d.left_endpoint, np.float64)

    def test_explicit_dtype(self):
        d = Interval(0, 1, dtype=np.float32)
        assert d.dtype == np.float32
        assert isinstance(d.right_endpoint, np.float32)

    def test_integer_interval(self):
        d = Interval.closed(1, 3)
        assert np.issubdtype(d.dtype, np.integer)

    def test_interval_without_arguments(self):
        d = interval()
        assert isinstance(d, UnitInterval)
        assert d.dtype == np.float64

    def test_interval_with_element_type(self):
        d = interval(np.float32)
        assert isinstance(d, UnitInterval)
        assert d.dtype == np.float32

    def test_interval_promotes_integers(self):
        d = interval(1, 2)
        assert isinstance(d, Interval)
        assert d.is_closed
        assert d.dtype == np.float64

    def test_named_constructors(self):
        assert closed_interval(0, 1) == Interval(0, 1, CLOSED, CLOSED)
        assert open_interval(0, 1) == Interval(0, 1, OPEN, OPEN)
        assert halfopen_left_interval(0, 1) == Interval(0, 1, OPEN, CLOSED)
        assert halfopen_right_interval(0, 1) == Interval(0, 1, CLOSED, OPEN)


class TestRepresentation:
    @pytest.mark.parametrize(
        "factory, text",
        [
            (closed_interval, "[0.5, 2.0]"),
            (open_interval, "(0.5, 2.0)"),
            (halfopen_left_interval, "(0.5, 2.0]"),
            (halfopen_right_interval, "[0.5, 2.0)"),
        ],
    )
    def test_bracket_notation(self, factory, text):
        assert repr(factory(0.5, 2.0)) == text
        assert str(factory(0.5, 2.0)) == text


class TestEquality:
    def test_equal_values(self):
        assert Interval.closed(0, 1) == Interval.closed(0.0, 1.0)
        assert hash(Interval.closed(0, 1)) == hash(Interval.closed(0.0, 1.0))

    def test_boundary_kinds_matter(self):
        assert Interval.closed(0.0, 1.0) != Interval.open(0.0, 1.0)

    def test_fixed_and_general_intervals_differ(self):
        assert Interval.closed(0.0, 1.0) != unitinterval()

    def test_usable_in_sets(self):
        items = {Interval.closed(0.0, 1.0), Interval.closed(0.0, 1.0), Interval.open(0.0, 1.0)}
        assert len(items) == 2


class TestConversion:
    def test_to_unit_interval(self):
        d = convert(Interval.closed(0.0, 1.0), UnitInterval)
        assert isinstance(d, UnitInterval)
        assert d == unitinterval()

    def test_to_unit_interval_with_other_endpoints(self):
        with pytest.raises(AssertionError):
            convert(Interval.closed(0.0, 2.0), UnitInterval)

    def test_to_chebyshev_interval(self):
        d = convert(Interval.closed(-1.0, 1.0), ChebyshevInterval)
        assert isinstance(d, ChebyshevInterval)
        with pytest.raises(AssertionError):
            convert(Interval.closed(0.0, 1.0), ChebyshevInterval)

    def test_conversion_keeps_element_type(self):
        d = convert(Interval.closed(0.0, 1.0, dtype=np.float32), UnitInterval)
        assert d.dtype == np.float32
        d = convert(Interval.closed(0.0, 1.0), UnitInterval, dtype=np.float32)
        assert d.dtype == np.float32

    def test_from_fixed_interval(self):
        assert convert(unitinterval(), Interval) == Interval.closed(0.0, 1.0)
        assert convert(unitinterval(), Interval, left="open") == Interval.left_open(0.0, 1.0)

    def test_unbounded_interval_cannot_become_general(self):
        with pytest.raises(InvalidEndpointError):
            convert(halfline(), Interval)

    def test_to_halfline(self):
        assert convert(halfline(), Halfline) == halfline()

    def test_unsupported_target(self):
        with pytest.raises(TypeError):
            convert(unitinterval(), float)

    def test_astype(self):
        d = Interval.right_open(0.0, 1.0).astype(np.float32)
        assert d.dtype == np.float32
        assert d == Interval.right_open(0.0, 1.0)
        assert unitinterval().astype(np.float32).dtype == np.float32
