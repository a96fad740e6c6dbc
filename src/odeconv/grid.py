'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:05:57
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 15:02:13
FilePath: /odeconv/src/odeconv/grid.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from dataclasses import dataclass, field
from typing import Iterator, Tuple

import numpy as np

from .errors import GridError, GridIndexError


@dataclass(frozen=True)
class UniformGrid:
    """
    区间 [a, b] 上的一维均匀网格。
    n: 网格点数量（包含两个端点），步长 h = (b - a) / (n - 1)
    """
    a: float
    b: float
    n: int
    step: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.b <= self.a:
            raise GridError(f"grid end {self.b} must be greater than start {self.a}")
        if self.n < 2:
            raise GridError(f"grid requires at least 2 points, got {self.n}")
        # frozen dataclass 只能这样写派生字段
        object.__setattr__(self, "step", (self.b - self.a) / (self.n - 1))

    @property
    def size(self) -> int:
        return self.n

    @property
    def x(self) -> np.ndarray:
        """网格点坐标（含两端点）."""
        return self.a + self.step * np.arange(self.n, dtype=float)

    def get(self, j: int) -> float:
        if not 0 <= j < self.n:
            raise GridIndexError(f"grid index {j} out of range [0, {self.n})")
        return self.a + j * self.step

    def refine(self, factor: int) -> "UniformGrid":
        """同一区间上区间数乘以 factor 的加密网格，原网格第 i 点对应加密网格第 factor*i 点。"""
        if factor < 1:
            raise GridError(f"refinement factor must be >= 1, got {factor}")
        return UniformGrid(self.a, self.b, factor * (self.n - 1) + 1)

    def __getitem__(self, j: int) -> float:
        return self.get(j)

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        for j in range(self.n):
            yield j, self.a + j * self.step
