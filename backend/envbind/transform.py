"""
值转换 - 将环境变量原始字符串转换为类型化配置值

规则：
- None / NONE: 原样返回
- INTEGER / FLOAT: 解析失败直接抛出 ValueError（不包装）
- BYTES: os.fsencode 还原环境变量的原始字节
- SYMBOL: sys.intern 驻留
- 可调用对象: 调用并原样返回结果
- 非字符串输入（例如非字符串默认值）: 不做转换
"""

from __future__ import annotations

import os
import sys
from typing import Any

from .models import Transform, TransformSpec


def transform_value(raw: Any, spec: TransformSpec = None) -> Any:
    """按转换规则转换原始值"""
    if not isinstance(raw, str):
        return raw

    if spec is None or spec is Transform.NONE:
        return raw
    if spec is Transform.INTEGER:
        return int(raw, 10)
    if spec is Transform.FLOAT:
        return float(raw)
    if spec is Transform.BYTES:
        return os.fsencode(raw)
    if spec is Transform.SYMBOL:
        return sys.intern(raw)
    if callable(spec):
        return spec(raw)

    # 字符串形式的转换名（例如来自YAML）
    return transform_value(raw, Transform(spec))
