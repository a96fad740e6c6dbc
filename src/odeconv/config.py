'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 11:20:03
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-22 15:41:26
FilePath: /odeconv/src/odeconv/config.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# odeconv/config.py
import os
from dataclasses import dataclass, replace
from typing import Callable, Mapping, Optional

from .schemes import SchemeKind

ENV_PREFIX = "ODECONV_"


@dataclass(frozen=True)
class StudyConfig:
    """
    一次收敛性实验的参数。区间左端 a 就是初值点 x0。
    """
    x0: float = 0.0
    y0: float = 0.0
    b: float = 4.0
    h: float = 0.1
    scheme: SchemeKind = SchemeKind.FIRST_ORDER
    ratio: int = 3

    @property
    def a(self) -> float:
        return self.x0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StudyConfig":
        """
        用环境变量覆盖默认值：
          ODECONV_X0, ODECONV_Y0, ODECONV_B, ODECONV_H, ODECONV_SCHEME, ODECONV_RATIO
        """
        env = os.environ if environ is None else environ
        parsers: Mapping[str, Callable[[str], object]] = {
            "x0": float,
            "y0": float,
            "b": float,
            "h": float,
            "scheme": SchemeKind,
            "ratio": int,
        }
        overrides = {}
        for name, parse in parsers.items():
            key = ENV_PREFIX + name.upper()
            raw = env.get(key)
            if raw is None or raw == "":
                continue
            try:
                overrides[name] = parse(raw.strip())
            except ValueError as exc:
                raise ValueError(f"invalid value for {key}: {raw!r}") from exc
        return replace(cls(), **overrides)
