'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:12:41
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-20 10:31:07
FilePath: /odeconv/src/odeconv/errors.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# odeconv/errors.py


class GridError(ValueError):
    """网格构造失败：端点顺序错误、点数不足，或者步长无法得到合法点数。"""


class GridIndexError(IndexError):
    """网格下标越界（不在 [0, n) 内）。"""


class RecurrenceError(ValueError):
    """
    递推请求不合法：
      - 目标下标落在已知条件窗口内（不允许重算条件点）
      - 递推所依赖的前序下标不在条件里
      - 条件本身不是从 0 开始的连续前缀
    """
