"""
绑定声明加载器 - 从YAML读取批量绑定声明

文件格式：
    bindings:
      - app: web
        config_key: port
        env_key: PORT
        transform: integer
        default: "8080"

使用方式：
    bindings = load_declarations("bindings.yaml")
    bind_from_yaml("bindings.yaml")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ..interfaces import InvalidDeclarationError
from ..models import Binding

if TYPE_CHECKING:
    from ..engine import BindingEngine


def load_declarations(yaml_path: str | Path) -> list[Binding]:
    """加载绑定声明（顺序与文件一致）"""
    path = Path(yaml_path)
    if not path.exists():
        raise FileNotFoundError(f"绑定声明文件不存在: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    entries = data.get("bindings", [])
    if not isinstance(entries, list):
        raise InvalidDeclarationError(f"bindings 必须是列表: {path}")

    return [_parse_entry(entry) for entry in entries]


def _parse_entry(entry: Any) -> Binding:
    if not isinstance(entry, dict):
        raise InvalidDeclarationError(f"无效的绑定声明: {entry!r}")
    return Binding.from_mapping(entry)


def bind_from_yaml(yaml_path: str | Path, engine: BindingEngine | None = None) -> list[Binding]:
    """加载并按顺序绑定"""
    from ..engine import BindingEngine

    bindings = load_declarations(yaml_path)
    (engine or BindingEngine()).bind_all(bindings)
    return bindings
