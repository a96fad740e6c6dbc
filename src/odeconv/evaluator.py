'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 09:44:15
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-22 16:05:38
FilePath: /odeconv/src/odeconv/evaluator.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# odeconv/evaluator.py
import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

import numpy as np

from .conditions import Conditions
from .config import StudyConfig
from .equation import CauchyProblem
from .grid import UniformGrid
from .schemes import Scheme, SchemeKind, make_scheme
from .suggester import suggest
from .timestepping import march

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluatedRow:
    index: int
    x: float
    exact: float
    coarse_error: float
    dense_error: float
    order: float  # 无法估计时为 NaN


def observed_order(coarse_error: np.ndarray, dense_error: np.ndarray, ratio: int = 3) -> np.ndarray:
    """
    p = log_ratio(coarse / dense)。
    任一误差为 0 或非有限值时 p 无定义，记为 NaN。
    """
    coarse_error = np.asarray(coarse_error, dtype=float)
    dense_error = np.asarray(dense_error, dtype=float)
    defined = (
        np.isfinite(coarse_error) & np.isfinite(dense_error)
        & (coarse_error > 0.0) & (dense_error > 0.0)
    )
    p = np.full(coarse_error.shape, np.nan)
    p[defined] = np.log(coarse_error[defined] / dense_error[defined]) / np.log(ratio)
    return p


@dataclass(eq=False)
class ConvergenceEvaluator:
    """
    粗网格 + 加密 ratio 倍的密网格上跑同一个近似格式，粗网格上跑解析解，
    逐点给出两套误差和观测收敛阶。

    例子：
        ev = ConvergenceEvaluator(0.0, 4.0, 0.1,
                                  ForwardDifferenceScheme(), {0: 0.0},
                                  ExactSolutionScheme(), {0: 0.0},
                                  dense_conditions={0: 0.0})
        for row in ev:
            print(row.x, row.coarse_error, row.dense_error, row.order)

    dense_conditions 由调用方按密网格给出（两步格式的 y_1 在两套网格上不同）。
    """
    a: float
    b: float
    h: float
    scheme: Scheme
    conditions: Conditions
    exact_scheme: Scheme
    exact_conditions: Conditions
    dense_conditions: Conditions
    ratio: int = 3

    coarse_grid: UniformGrid = field(init=False)
    dense_grid: UniformGrid = field(init=False)

    _coarse: Optional[np.ndarray] = field(default=None, init=False, repr=False)
    _dense: Optional[np.ndarray] = field(default=None, init=False, repr=False)
    _exact: Optional[np.ndarray] = field(default=None, init=False, repr=False)
    _rows: Optional[Tuple[EvaluatedRow, ...]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.ratio < 2:
            raise ValueError(f"density ratio must be >= 2, got {self.ratio}")
        n1 = suggest(self.a, self.b, self.h)
        self.coarse_grid = UniformGrid(self.a, self.b, n1)
        self.dense_grid = self.coarse_grid.refine(self.ratio)
        logger.debug(
            "coarse grid n=%d step=%g, dense grid n=%d step=%g",
            self.coarse_grid.size, self.coarse_grid.step,
            self.dense_grid.size, self.dense_grid.step,
        )

    def build(self) -> "ConvergenceEvaluator":
        if self._rows is not None:
            return self

        # 1) 三次推进
        self._coarse = march(self.scheme, self.coarse_grid, self.conditions)
        self._dense = march(self.scheme, self.dense_grid, self.dense_conditions)
        self._exact = march(self.exact_scheme, self.coarse_grid, self.exact_conditions)

        # 2) 粗网格第 i 点对应密网格第 ratio*i 点
        dense_on_coarse = self._dense[:: self.ratio]
        coarse_error = np.abs(self._exact - self._coarse)
        dense_error = np.abs(self._exact - dense_on_coarse)
        order = observed_order(coarse_error, dense_error, self.ratio)

        # 3) 组装并缓存
        x = self.coarse_grid.x
        self._rows = tuple(
            EvaluatedRow(
                index=i,
                x=float(x[i]),
                exact=float(self._exact[i]),
                coarse_error=float(coarse_error[i]),
                dense_error=float(dense_error[i]),
                order=float(order[i]),
            )
            for i in range(self.coarse_grid.size)
        )
        logger.debug("cached %d rows for %r", len(self._rows), self.scheme)
        return self

    def rows(self) -> Tuple[EvaluatedRow, ...]:
        if self._rows is None:
            self.build()
        return self._rows  # type: ignore[return-value]

    def max_errors(self) -> Tuple[float, float]:
        rows = self.rows()
        return (
            max(row.coarse_error for row in rows),
            max(row.dense_error for row in rows),
        )

    def __iter__(self) -> Iterator[EvaluatedRow]:
        return iter(self.rows())

    def __len__(self) -> int:
        return self.coarse_grid.size


def study(config: StudyConfig) -> ConvergenceEvaluator:
    """按配置搭一个 evaluator，已知条件从解析解取（两步格式要 y_0, y_1）。"""
    problem = CauchyProblem(x0=config.x0, y0=config.y0)
    scheme = make_scheme(config.scheme)
    exact_scheme = make_scheme(SchemeKind.EXACT)

    coarse = UniformGrid(config.a, config.b, suggest(config.a, config.b, config.h))
    dense = coarse.refine(config.ratio)
    return ConvergenceEvaluator(
        a=config.a,
        b=config.b,
        h=config.h,
        scheme=scheme,
        conditions=problem.initial_conditions(coarse, scheme.lookback),
        exact_scheme=exact_scheme,
        exact_conditions=problem.initial_conditions(coarse, exact_scheme.lookback),
        dense_conditions=problem.initial_conditions(dense, scheme.lookback),
        ratio=config.ratio,
    )
