"""
绑定模型 - 定义环境变量与配置键的绑定关系

一个 Binding 由 (app, env_key) 唯一标识，重复声明直接覆盖。
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from ..interfaces import InvalidDeclarationError


class Transform(str, Enum):
    """内置转换类型"""
    NONE = "none"
    INTEGER = "integer"
    FLOAT = "float"
    BYTES = "bytes"       # 原始字节序列
    SYMBOL = "symbol"     # 驻留字符串（符号）


TransformSpec = Transform | Callable[[str], Any] | None


class BindingOptions(BaseModel):
    """绑定选项（default 是否存在通过 model_fields_set 判断）"""

    default: Any = None
    transform: TransformSpec = None

    model_config = {"arbitrary_types_allowed": True, "extra": "forbid"}

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set


OPTION_KEYS = ("default", "transform")


class Binding(BaseModel):
    """绑定实体"""
    app: str
    config_key: str
    env_key: str = Field(..., pattern=r"^[^=\x00]+$", description="环境变量名")
    options: BindingOptions = Field(default_factory=BindingOptions)

    model_config = {"arbitrary_types_allowed": True, "extra": "forbid"}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Binding:
        """
        从映射构建绑定

        default/transform 既可以放在 options 中，也可以平铺在顶层（YAML声明格式），
        两处同时出现时报错。未知字段由 extra=forbid 拒绝。
        """
        fields = dict(data)
        flat = {k: fields.pop(k) for k in OPTION_KEYS if k in fields}
        options = fields.pop("options", None)

        if options is None:
            options = BindingOptions(**flat)
        elif flat:
            raise InvalidDeclarationError(f"default/transform 不能同时出现在顶层和 options 中: {sorted(flat)}")
        elif isinstance(options, Mapping):
            options = BindingOptions.model_validate(dict(options))

        return cls(**fields, options=options)

    @property
    def registry_key(self) -> tuple[str, str]:
        """映射表键"""
        return (self.app, self.env_key)
