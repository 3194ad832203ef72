"""
Defines the minimal domain hierarchy that intervals live in.

Hierarchy:
- Domain (Abstract Base)
    - EmptySpace / FullSpace
    - UnionDomain (a finite union of domains, kept unmerged)
    - AbstractInterval (see `pydomains.interval`)

The set operations on this base class are generic: they either simplify
trivially (empty or full operands) or wrap their operands lazily. Interval
types override them with exact results.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from functools import reduce
from typing import Iterable, Tuple

import numpy as np

from .configs import get_config


class Domain(ABC):
    """
    Abstract base class for a set of numbers of a given element type.

    A domain knows its element type, can decide whether a point belongs to it
    and supports the set operations union (`|`), intersection (`&`) and
    difference (`-`).

    The generic intersection and difference only simplify empty and full
    operands; other combinations raise `NotImplementedError`. In particular
    `FullSpace() - d` is not supported, since the complement of an interval
    is unbounded on both sides and has no interval representation here.
    """

    __slots__ = ()

    # Make numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        """The numpy element type of the domain."""

    @property
    def ndim(self) -> int:
        """The dimension of the points in the domain."""
        return 1

    @property
    def is_empty(self) -> bool:
        """
        Returns True if the domain is known to be empty.

        Returning False does not guarantee the domain is non-empty, only
        that it is not trivially known to be empty.
        """
        return False

    @abstractmethod
    def indomain(self, x):
        """Returns True if x is a member of the domain."""

    def approx_indomain(self, x, tolerance=None):
        """
        Membership test relaxed by a tolerance.

        The generic implementation ignores the tolerance.
        """
        return self.indomain(x)

    @property
    def default_tolerance(self) -> float:
        """Default tolerance of `approx_indomain` for this element type."""
        return get_config().default_tolerance(self.dtype)

    def __contains__(self, x) -> bool:
        return bool(self.indomain(x))

    # --- Set operations ---

    def union(self, other: Domain) -> Domain:
        """Returns the union of this domain and another."""
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        if isinstance(self, FullSpace) or isinstance(other, FullSpace):
            return FullSpace(np.promote_types(self.dtype, other.dtype))
        return UnionDomain(self, other)

    def intersect(self, other: Domain) -> Domain:
        """Returns the intersection of this domain and another."""
        if self.is_empty or other.is_empty:
            return EmptySpace(np.promote_types(self.dtype, other.dtype))
        if isinstance(self, FullSpace):
            return other
        if isinstance(other, FullSpace):
            return self
        raise NotImplementedError(
            f"Intersection of {self!r} and {other!r} is not supported."
        )

    def setdiff(self, other: Domain) -> Domain:
        """Returns the points of this domain that are not in `other`."""
        if self.is_empty or other.is_empty:
            return self
        if isinstance(other, FullSpace):
            return EmptySpace(self.dtype)
        raise NotImplementedError(
            f"Difference of {self!r} and {other!r} is not supported."
        )

    def __or__(self, other):
        if not isinstance(other, Domain):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, Domain):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other):
        if not isinstance(other, Domain):
            return NotImplemented
        return self.setdiff(other)


class EmptySpace(Domain):
    """The empty set of a given element type."""

    __slots__ = ("_dtype",)

    def __init__(self, dtype=None):
        self._dtype = np.dtype(get_config().dtype if dtype is None else dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def is_empty(self) -> bool:
        """Returns True, as this is the empty set."""
        return True

    def indomain(self, x):
        """Returns False for any point."""
        if np.ndim(x) == 0:
            return False
        return np.zeros(np.shape(x), dtype=bool)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EmptySpace)

    def __hash__(self) -> int:
        return hash(EmptySpace)

    def __repr__(self) -> str:
        return "{}"


class FullSpace(Domain):
    """All numbers of a given element type."""

    __slots__ = ("_dtype",)

    def __init__(self, dtype=None):
        self._dtype = np.dtype(get_config().dtype if dtype is None else dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def indomain(self, x):
        """Returns True for any point."""
        if np.ndim(x) == 0:
            return True
        return np.ones(np.shape(x), dtype=bool)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FullSpace)

    def __hash__(self) -> int:
        return hash(FullSpace)

    def __repr__(self) -> str:
        return "(-inf, inf)"


class UnionDomain(Domain):
    """
    The union of a finite number of domains.

    The member domains are stored as given; no attempt is made to merge them.
    Nested unions are flattened.
    """

    __slots__ = ("_domains",)

    def __init__(self, *domains: Domain):
        if len(domains) == 1 and not isinstance(domains[0], Domain):
            domains = tuple(domains[0])
        members = []
        for d in domains:
            if isinstance(d, UnionDomain):
                members.extend(d.domains)
            else:
                members.append(d)
        if not members:
            raise ValueError("UnionDomain needs at least one member domain")
        self._domains: Tuple[Domain, ...] = tuple(members)

    @property
    def domains(self) -> Tuple[Domain, ...]:
        """The member domains of the union."""
        return self._domains

    @property
    def dtype(self) -> np.dtype:
        return np.result_type(*(d.dtype for d in self._domains))

    @property
    def is_empty(self) -> bool:
        return all(d.is_empty for d in self._domains)

    def indomain(self, x):
        """Returns True if x is a member of any of the member domains."""
        result = self._domains[0].indomain(x)
        for d in self._domains[1:]:
            result = result | d.indomain(x)
        return result

    def approx_indomain(self, x, tolerance=None):
        result = self._domains[0].approx_indomain(x, tolerance)
        for d in self._domains[1:]:
            result = result | d.approx_indomain(x, tolerance)
        return result

    def intersect(self, other: Domain) -> Domain:
        """Intersects every member with `other` and unites the pieces."""
        if other.is_empty:
            return EmptySpace(np.promote_types(self.dtype, other.dtype))
        return reduce(
            lambda acc, d: acc.union(d.intersect(other)),
            self._domains,
            EmptySpace(self.dtype),
        )

    def setdiff(self, other: Domain) -> Domain:
        """Removes `other` from every member and unites the pieces."""
        if other.is_empty:
            return self
        return reduce(
            lambda acc, d: acc.union(d.setdiff(other)),
            self._domains,
            EmptySpace(self.dtype),
        )

    def __iter__(self) -> Iterable[Domain]:
        return iter(self._domains)

    def __len__(self) -> int:
        return len(self._domains)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnionDomain):
            return False
        return set(self._domains) == set(other._domains)

    def __hash__(self) -> int:
        return hash(frozenset(self._domains))

    def __repr__(self) -> str:
        return " ∪ ".join(repr(d) for d in self._domains)
