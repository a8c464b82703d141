"""
数据模型层 - 定义系统核心数据结构

- Binding / BindingOptions: 绑定声明与选项
- Transform: 内置转换类型
- EnvAssignment / NoMatch: 环境文件解析结果
- ReloadResult: 重载结果
"""

from .binding import Binding, BindingOptions, Transform, TransformSpec
from .env_line import EnvAssignment, NoMatch, ParsedLine
from .reload_result import ReloadResult

__all__ = [
    "Binding",
    "BindingOptions",
    "Transform",
    "TransformSpec",
    "EnvAssignment",
    "NoMatch",
    "ParsedLine",
    "ReloadResult",
]
