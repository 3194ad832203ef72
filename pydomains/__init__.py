from pydomains.configs import DomainConfig, get_config, set_config

from pydomains.exceptions import (
    IntervalError,
    InvalidEndpointError,
    UndefinedEndpointError,
    EmptyIntervalError,
)

from pydomains.domain import Domain, EmptySpace, FullSpace, UnionDomain

from pydomains.interval import (
    BoundaryKind,
    OPEN,
    CLOSED,
    AbstractInterval,
    FixedInterval,
    UnitInterval,
    ChebyshevInterval,
    Halfline,
    NegativeHalfline,
    Interval,
    interval,
    unitinterval,
    chebyshev_interval,
    symmetric_interval,
    halfline,
    negative_halfline,
    real_line,
    closed_interval,
    open_interval,
    halfopen_left_interval,
    halfopen_right_interval,
    convert,
    ldiv,
)

from pydomains.set_algebra import union, intersect, setdiff

from pydomains.checks.interval import IntervalAxiomChecks

__version__ = "0.1.0"
