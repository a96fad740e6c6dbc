'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 13:36:09
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-22 09:20:02
FilePath: /odeconv/src/odeconv/timestepping.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# odeconv/timestepping.py
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterator, Mapping

import numpy as np

from .conditions import Conditions, last_index
from .errors import GridIndexError
from .grid import UniformGrid

if TYPE_CHECKING:
    from .schemes import Scheme

logger = logging.getLogger(__name__)


class ForwardSweep(Iterator[float]):
    """
    单次遍历的前向推进：内部持有一份条件表的拷贝，
    每次 next() 算出下一个点，写回表里，再返回这个值。
    走完整个网格后抛 StopIteration。
    """

    def __init__(self, scheme: "Scheme", grid: UniformGrid, conditions: Conditions) -> None:
        last = last_index(conditions)
        if last >= grid.size:
            raise GridIndexError(
                f"known values reach index {last}, beyond grid of {grid.size} points"
            )
        self.scheme = scheme
        self.grid = grid
        self._values: Dict[int, float] = {j: float(y) for j, y in conditions.items()}
        self._next = last + 1

    @property
    def index(self) -> int:
        """下一个要计算的下标。"""
        return self._next

    @property
    def values(self) -> Mapping[int, float]:
        return MappingProxyType(self._values)

    def __iter__(self) -> "ForwardSweep":
        return self

    def __next__(self) -> float:
        j = self._next
        if j >= self.grid.size:
            raise StopIteration
        y = self.scheme._compute(j, self.grid, self._values, j - 1)
        self._values[j] = y
        self._next = j + 1
        return y


def march(scheme: "Scheme", grid: UniformGrid, conditions: Conditions) -> np.ndarray:
    """把格式在整个网格上推进完，返回全部 n 个值（含已知条件）。"""
    sweep = ForwardSweep(scheme, grid, conditions)
    for _ in sweep:
        pass
    logger.debug("%r marched over %d points, step=%g", scheme, grid.size, grid.step)
    values = sweep.values
    return np.fromiter((values[j] for j in range(grid.size)), dtype=float, count=grid.size)
