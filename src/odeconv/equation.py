'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 11:10:32
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 14:47:19
FilePath: /odeconv/src/odeconv/equation.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# odeconv/equation.py

from dataclasses import dataclass
from typing import Callable, Dict, TypeAlias, Union

import numpy as np

from .grid import UniformGrid

ArrayOrScalar = Union[float, np.ndarray]
RhsFn: TypeAlias = Callable[[ArrayOrScalar], ArrayOrScalar]
SolutionFn: TypeAlias = Callable[[ArrayOrScalar, float, float], ArrayOrScalar]


def rhs(x: ArrayOrScalar) -> ArrayOrScalar:
    """右端项 g(x) = e^x cos(x)，标量和 numpy 数组都可以。"""
    return np.exp(x) * np.cos(x)


def exact_solution(x: ArrayOrScalar, x0: float, y0: float) -> ArrayOrScalar:
    """
    y' = e^x cos(x), y(x0) = y0 的解析解：
        y(x) = 1/2 * (-e^x0 sin(x0) - e^x0 cos(x0) + 2 y0 + e^x sin(x) + e^x cos(x))
    """
    boundary = -np.exp(x0) * np.sin(x0) - np.exp(x0) * np.cos(x0) + 2.0 * y0
    return 0.5 * (boundary + np.exp(x) * np.sin(x) + np.exp(x) * np.cos(x))


@dataclass(frozen=True)
class CauchyProblem:
    """
    柯西问题 y' = g(x), y(x0) = y0。

    例子：
        problem = CauchyProblem(x0=0.0, y0=0.0)
        conds = problem.initial_conditions(grid, points=2)   # {0: y0, 1: y(x1)}
    """
    x0: float = 0.0
    y0: float = 0.0
    rhs: RhsFn = rhs
    solution: SolutionFn = exact_solution

    def exact(self, x: ArrayOrScalar) -> ArrayOrScalar:
        return self.solution(x, self.x0, self.y0)

    def initial_conditions(self, grid: UniformGrid, points: int = 1) -> Dict[int, float]:
        """
        按下标给出前 points 个已知值。第 0 点固定为 y0，
        其余点（两步格式需要 y_1）取解析解。
        """
        if points < 1:
            raise ValueError(f"at least one initial condition is required, got {points}")
        if not np.isclose(grid.get(0), self.x0):
            raise ValueError(
                f"grid starts at {grid.get(0)} but the initial condition is given at x0={self.x0}"
            )
        conditions = {0: float(self.y0)}
        for j in range(1, points):
            conditions[j] = float(self.exact(grid.get(j)))
        return conditions
