'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 13:05:44
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-22 09:18:30
FilePath: /odeconv/src/odeconv/schemes.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# odeconv/schemes.py
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from .conditions import Conditions, last_index
from .equation import RhsFn, SolutionFn, exact_solution, rhs
from .errors import GridIndexError, RecurrenceError
from .grid import UniformGrid
from .timestepping import ForwardSweep


class SchemeKind(Enum):
    FIRST_ORDER = "first"
    SECOND_ORDER = "second"
    EXACT = "exact"


class Scheme(ABC):
    """
    递推格式的统一接口：已知 conditions（下标 -> y），求网格第 j 点的值。

    子类只需要实现 _step，并声明：
      lookback: 至少需要多少个已知值
      order   : 名义收敛阶（解析解为 None）
    """
    kind: SchemeKind
    lookback: int = 1
    order: Optional[int] = None

    def compute(self, j: int, grid: UniformGrid, conditions: Conditions) -> float:
        return self._compute(j, grid, conditions, last_index(conditions))

    def sweep(self, grid: UniformGrid, conditions: Conditions) -> ForwardSweep:
        """从条件之后的第一个下标开始，逐点向前推进的惰性迭代器。"""
        return ForwardSweep(self, grid, conditions)

    def _compute(self, j: int, grid: UniformGrid, conditions: Conditions, last: int) -> float:
        # last 已经由调用方校验过
        if j <= last:
            raise RecurrenceError(
                f"index {j} is already covered by the known values 0..{last}"
            )
        if j >= grid.size:
            raise GridIndexError(f"grid index {j} out of range [0, {grid.size})")
        if len(conditions) < self.lookback:
            raise RecurrenceError(
                f"{type(self).__name__} needs at least {self.lookback} known values, "
                f"got {len(conditions)}"
            )
        return float(self._step(j, grid, conditions))

    @abstractmethod
    def _step(self, j: int, grid: UniformGrid, conditions: Conditions) -> float:
        ...

    @staticmethod
    def _require(j: int, conditions: Conditions, needed: int) -> float:
        if needed not in conditions:
            raise RecurrenceError(f"value at index {j} depends on y_{needed}, which is unknown")
        return conditions[needed]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ForwardDifferenceScheme(Scheme):
    """一阶向前差分：y_j = g(x_{j-1}) * h + y_{j-1}"""
    kind = SchemeKind.FIRST_ORDER
    lookback = 1
    order = 1

    def __init__(self, rhs: RhsFn = rhs) -> None:
        self.rhs = rhs

    def _step(self, j: int, grid: UniformGrid, conditions: Conditions) -> float:
        y_prev = self._require(j, conditions, j - 1)
        return self.rhs(grid.get(j - 1)) * grid.step + y_prev


class TwoStepScheme(Scheme):
    """二阶两步格式：y_j = 2h * g(x_{j-1}) + y_{j-2}，需要 y_0 和 y_1 启动。"""
    kind = SchemeKind.SECOND_ORDER
    lookback = 2
    order = 2

    def __init__(self, rhs: RhsFn = rhs) -> None:
        self.rhs = rhs

    def _step(self, j: int, grid: UniformGrid, conditions: Conditions) -> float:
        y_prev2 = self._require(j, conditions, j - 2)
        return 2.0 * grid.step * self.rhs(grid.get(j - 1)) + y_prev2


class ExactSolutionScheme(Scheme):
    """
    解析解逐点求值。只用 (x_0, y_0)，不依赖前一个点，
    放在同一接口下是为了和差分格式走同一套推进/比较流程。
    """
    kind = SchemeKind.EXACT
    lookback = 1

    def __init__(self, solution: SolutionFn = exact_solution) -> None:
        self.solution = solution

    def _step(self, j: int, grid: UniformGrid, conditions: Conditions) -> float:
        y0 = self._require(j, conditions, 0)
        return self.solution(grid.get(j), grid.get(0), y0)


def make_scheme(kind: SchemeKind, rhs: RhsFn = rhs, solution: SolutionFn = exact_solution) -> Scheme:
    if kind is SchemeKind.FIRST_ORDER:
        return ForwardDifferenceScheme(rhs)
    if kind is SchemeKind.SECOND_ORDER:
        return TwoStepScheme(rhs)
    if kind is SchemeKind.EXACT:
        return ExactSolutionScheme(solution)
    raise ValueError(f"Unsupported scheme: {kind}")
