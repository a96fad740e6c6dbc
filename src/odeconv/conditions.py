'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 13:22:09
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-20 13:40:51
FilePath: /odeconv/src/odeconv/conditions.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# odeconv/conditions.py
from numbers import Integral
from typing import Mapping, TypeAlias

from .errors import RecurrenceError

# 下标 -> 已知值 y_j
Conditions: TypeAlias = Mapping[int, float]


def last_index(conditions: Conditions) -> int:
    """
    校验条件是从 0 开始的连续下标前缀，返回最大下标。
    """
    if not conditions:
        raise RecurrenceError("at least one known value (index 0) is required")
    last = len(conditions) - 1
    for j in conditions:
        if isinstance(j, bool) or not isinstance(j, Integral) or not 0 <= j <= last:
            raise RecurrenceError(
                f"condition indices must be a contiguous prefix 0..{last}, got {list(conditions)}"
            )
    return last
