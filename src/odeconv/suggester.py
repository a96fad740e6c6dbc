'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:40:18
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-20 11:02:45
FilePath: /odeconv/src/odeconv/suggester.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# odeconv/suggester.py
from .errors import GridError


def suggest(a: float, b: float, h: float) -> int:
    """
    给定区间 [a, b] 和名义步长 h，返回最小的点数 n，使实际步长 (b - a) / (n - 1) 不超过 h。
    先把 (b - a) / h 向零截断得到区间数，截断导致步长偏大时再多加一个区间。
    """
    if b <= a:
        raise GridError(f"interval end {b} must be greater than start {a}")
    if h <= 0:
        raise GridError(f"step must be positive, got {h}")

    intervals = int((b - a) / h)
    if intervals == 0:
        raise GridError(f"step {h} exceeds interval length {b - a}")

    if (b - a) / intervals > h:
        intervals += 1
    return intervals + 1
