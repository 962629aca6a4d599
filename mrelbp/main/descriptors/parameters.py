"""Descriptor parameters and their YAML loading."""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from mrelbp.main.filtering.padding import check_policy
from mrelbp.main.utils.config import require, require_int, require_int_list, require_section
from mrelbp.main.utils.config_loader import load_descriptor_settings
from mrelbp.main.utils.errors import DescriptorError, KernelWidthError, first_error

__all__ = ["Parameters", "load_parameters"]


@dataclass(frozen=True)
class Parameters:
    radius: int = 3
    large_radius: int = 9
    neighbours: int = 8
    w_c: int = 5
    # (large, small) median filter widths
    w_r: Tuple[int, int] = (5, 5)
    eps1: float = 1e-6
    eps2: float = 1e-12
    # (w1, w2, sigma1, sigma2) for local standardization
    w_stand: Tuple[int, int, int, int] = (23, 5, 5, 1)
    padding: str = "Reflect"
    n_jobs: Optional[int] = field(default=None, compare=False)

    @property
    def w_large(self) -> int:
        return self.w_r[0]

    @property
    def w_small(self) -> int:
        return self.w_r[1]

    def margin(self, mre: bool) -> int:
        """Distance from the border at which every sampled neighbour stays in-bounds."""
        if mre:
            return self.large_radius + (self.w_large - 1) // 2
        return self.radius

    def validate(self) -> Optional[DescriptorError]:
        if self.neighbours < 1:
            return DescriptorError(f"neighbours must be >= 1, got {self.neighbours}")
        if self.radius <= 0 or self.large_radius <= 0:
            return DescriptorError("Radii must be positive")
        if self.eps1 < 0 or self.eps2 < 0:
            return DescriptorError("Tolerances must be non-negative")
        widths = [self.w_c, *self.w_r, self.w_stand[0], self.w_stand[1]]
        if any(w <= 0 for w in widths):
            return DescriptorError("Kernel widths must be positive")
        return first_error(
            [KernelWidthError() if w % 2 == 0 else None for w in widths] + [check_policy(self.padding)]
        )

    def with_overrides(self, **changes: Any) -> "Parameters":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "Parameters":
        """Build from the ``lbp`` / ``median`` / ``standardization`` sections of a merged config."""
        lbp = require_section(cfg, 'lbp')
        median = require_section(cfg, 'median')
        stand = cfg.get('standardization') or {}
        kwargs: Dict[str, Any] = dict(
            radius=require_int(lbp, 'radius'),
            large_radius=require_int(lbp, 'large_radius'),
            neighbours=require_int(lbp, 'neighbours'),
            eps1=float(require(lbp, 'eps1')),
            eps2=float(require(lbp, 'eps2')),
            w_c=require_int(median, 'w_c'),
            w_r=tuple(require_int_list(median, 'w_r', 2)),
        )
        if stand:
            kwargs['w_stand'] = tuple(require_int_list(stand, 'kernels', 4))
            kwargs['padding'] = str(stand.get('padding', cls.padding))
        if cfg.get('n_jobs') is not None:
            kwargs['n_jobs'] = int(cfg['n_jobs'])
        return cls(**kwargs)


def load_parameters(overrides: Optional[List[str]] = None) -> Parameters:
    return Parameters.from_config(load_descriptor_settings(overrides))
