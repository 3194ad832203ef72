"""
Configuration objects for interval domains.

This module keeps the numerical defaults shared by all interval types in one
place: the default element type, the default tolerance of approximate
membership tests and the promotion of integer endpoints.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any

import numpy as np


@dataclass
class DomainConfig:
    """
    Configuration for interval domains.

    Attributes:
        dtype: Element type used for fixed intervals and for promoted
            integer endpoints.
        tolerance_factor: The default tolerance of `approx_indomain` is this
            factor times the machine epsilon of the interval's element type.
        promote_integers: If True, `interval(a, b)` with integer endpoints
            builds a floating point interval.

    Example:
        >>> config = DomainConfig()
        >>> config.default_tolerance(np.float64)
        2.220446049250313e-13
        >>> strict = config.copy(tolerance_factor=0.0)
    """

    dtype: Any = field(default=np.float64)
    tolerance_factor: float = 1000.0
    promote_integers: bool = True

    def __post_init__(self):
        self.dtype = np.dtype(self.dtype)
        if self.tolerance_factor < 0:
            raise ValueError("tolerance_factor must be non-negative")

    def copy(self, **overrides) -> 'DomainConfig':
        """
        Create a copy with optional parameter overrides.

        Example:
            >>> base = DomainConfig()
            >>> single = base.copy(dtype=np.float32)
        """
        known = {f.name for f in fields(self)}
        for key in overrides:
            if key not in known:
                raise ValueError(f"Unknown parameter: {key}")
        return replace(self, **overrides)

    def default_tolerance(self, dtype=None) -> float:
        """
        Default tolerance for approximate membership tests.

        Args:
            dtype: Element type of the interval. Defaults to `self.dtype`.

        Returns:
            `tolerance_factor * eps(dtype)` for floating types, 0 otherwise.
        """
        dtype = self.dtype if dtype is None else np.dtype(dtype)
        if not np.issubdtype(dtype, np.floating):
            return 0.0
        return float(self.tolerance_factor * np.finfo(dtype).eps)

    @classmethod
    def strict(cls) -> 'DomainConfig':
        """Preset where approximate membership coincides with closed membership."""
        return cls(tolerance_factor=0.0)

    @classmethod
    def loose(cls) -> 'DomainConfig':
        """Preset with a generous membership tolerance."""
        return cls(tolerance_factor=1.0e6)

    def __repr__(self) -> str:
        return (
            f"DomainConfig(dtype={self.dtype.name}, "
            f"tolerance_factor={self.tolerance_factor}, "
            f"promote_integers={self.promote_integers})"
        )


_default_config = DomainConfig()


def get_config() -> DomainConfig:
    """Return the process-wide default configuration."""
    return _default_config


def set_config(config: DomainConfig) -> None:
    """Replace the process-wide default configuration."""
    global _default_config
    if not isinstance(config, DomainConfig):
        raise TypeError("config must be a DomainConfig instance")
    _default_config = config
