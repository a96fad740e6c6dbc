'''
Author: leviathan 670916484@qq.com
Date: 2025-11-22 10:02:51
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-22 16:11:09
FilePath: /odeconv/src/odeconv/report.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# odeconv/report.py
import math
from typing import Iterable, List

from .evaluator import ConvergenceEvaluator, EvaluatedRow

HEADER = ("j", "x_j", "y(x_j)", "err(h)", "err(h/3)", "p_j")


def _cell(value: float) -> str:
    if math.isnan(value):
        return "-"
    return f"{value:.6e}"


def format_rows(rows: Iterable[EvaluatedRow]) -> str:
    """把行排成等宽文本表，NaN 显示为 '-'。"""
    table: List[tuple] = [HEADER]
    for row in rows:
        table.append((
            str(row.index),
            f"{row.x:.6f}",
            _cell(row.exact),
            _cell(row.coarse_error),
            _cell(row.dense_error),
            "-" if math.isnan(row.order) else f"{row.order:.4f}",
        ))

    widths = [max(len(line[k]) for line in table) for k in range(len(HEADER))]
    lines = [
        "  ".join(cell.rjust(width) for cell, width in zip(line, widths))
        for line in table
    ]
    return "\n".join(lines)


def format_summary(evaluator: ConvergenceEvaluator) -> str:
    coarse, dense = evaluator.coarse_grid, evaluator.dense_grid
    max_coarse, max_dense = evaluator.max_errors()
    return "\n".join([
        f"scheme      : {type(evaluator.scheme).__name__}",
        f"coarse grid : n={coarse.size}, h={coarse.step:.6g}",
        f"dense grid  : n={dense.size}, h={dense.step:.6g}",
        f"max error   : {_cell(max_coarse)} (coarse), {_cell(max_dense)} (dense)",
    ])
