'''
Author: leviathan 670916484@qq.com
Date: 2025-11-22 10:30:17
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-22 16:20:44
FilePath: /odeconv/src/odeconv/cli.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# odeconv/cli.py
"""y' = e^x cos(x) 差分格式收敛阶实验的命令行入口"""
import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .config import StudyConfig
from .evaluator import study
from .report import format_rows, format_summary
from .schemes import SchemeKind


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="odeconv",
        description="Observed convergence order of finite-difference schemes for y' = e^x cos(x)",
    )
    parser.add_argument("--x0", type=float, help="initial point, also the left end of the grid")
    parser.add_argument("--y0", type=float, help="initial value y(x0)")
    parser.add_argument("--b", type=float, help="right end of the grid")
    parser.add_argument("--h", type=float, help="nominal step of the coarse grid")
    parser.add_argument(
        "--scheme",
        choices=[kind.value for kind in SchemeKind],
        help="scheme to evaluate against the exact solution",
    )
    parser.add_argument("--ratio", type=int, help="dense/coarse interval ratio")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = StudyConfig.from_env()
    except ValueError as exc:
        parser.error(str(exc))

    overrides = {
        name: getattr(args, name)
        for name in ("x0", "y0", "b", "h", "ratio")
        if getattr(args, name) is not None
    }
    if args.scheme is not None:
        overrides["scheme"] = SchemeKind(args.scheme)
    config = replace(config, **overrides)

    try:
        evaluator = study(config)
        table = format_rows(evaluator)
    except ValueError as exc:
        parser.error(str(exc))

    print(table)
    print()
    print(format_summary(evaluator))
    return 0


if __name__ == "__main__":
    sys.exit(main())
