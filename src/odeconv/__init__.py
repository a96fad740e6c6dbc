'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:01:12
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-22 16:24:03
FilePath: /odeconv/src/odeconv/__init__.py
Description:  

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# src/odeconv/__init__.py

from .errors import GridError, GridIndexError, RecurrenceError
from .grid import UniformGrid
from .suggester import suggest
from .equation import CauchyProblem, rhs, exact_solution

# 递推格式 / 前向推进
from .conditions import Conditions
from .schemes import (
    SchemeKind,
    Scheme,
    ForwardDifferenceScheme,
    TwoStepScheme,
    ExactSolutionScheme,
    make_scheme,
)
from .timestepping import ForwardSweep, march

# 收敛阶评估
from .config import StudyConfig
from .evaluator import ConvergenceEvaluator, EvaluatedRow, observed_order, study
from .report import format_rows, format_summary


__all__ = [
    # errors
    "GridError",
    "GridIndexError",
    "RecurrenceError",

    # grid / problem
    "UniformGrid",
    "suggest",
    "CauchyProblem",
    "rhs",
    "exact_solution",

    # schemes
    "Conditions",
    "SchemeKind",
    "Scheme",
    "ForwardDifferenceScheme",
    "TwoStepScheme",
    "ExactSolutionScheme",
    "make_scheme",
    "ForwardSweep",
    "march",

    # evaluation
    "StudyConfig",
    "ConvergenceEvaluator",
    "EvaluatedRow",
    "observed_order",
    "study",
    "format_rows",
    "format_summary",
]
