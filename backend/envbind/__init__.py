"""
envbind - 环境变量到应用配置的绑定工具

模块结构：
- config/       运行期配置与YAML绑定声明
- models/       数据模型定义（绑定/解析行/重载结果）
- transform     值转换（integer/float/bytes/symbol/自定义函数）
- registry      进程级映射表 (app, env_key) -> Binding
- engine        绑定引擎（读取环境 -> 默认值 -> 转换 -> 写入）
- env_file      export 文件解析器
- reloader      重载编排器

使用方式：
    import envbind

    envbind.init()
    envbind.set_config("web", "port", "PORT", {"transform": "integer", "default": "8080"})
    envbind.get_config("web", "port")
    envbind.update_env("web", "/etc/web/env.sh")
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .engine import _MISSING, BindingEngine, Declaration
from .interfaces import (
    EnvBindError,
    IConfigStore,
    InvalidDeclarationError,
    MissingConfigError,
    MissingEnvKeyError,
    RegistryAlreadyInitializedError,
    RegistryError,
    RegistryNotInitializedError,
)
from .log import configure_logging
from .models import Binding, BindingOptions, ReloadResult, Transform
from .registry import MappingRegistry, init_registry
from .reloader import EnvReloader
from .store import ConfigStore

__version__ = "0.1.0"


def init() -> None:
    """初始化进程级映射表（每个进程只能调用一次）"""
    # 配置失败时映射表保持未初始化，允许修正后重试
    configure_logging()
    init_registry()


def set_config(
    app: str,
    config_key: str,
    env_key: str,
    options: BindingOptions | Mapping[str, Any] | None = None,
) -> Any:
    """声明单个绑定并立即解析"""
    return BindingEngine().bind(app, config_key, env_key, options)


def set_configs(declarations: Iterable[Declaration]) -> None:
    """按顺序声明多个绑定"""
    BindingEngine().bind_all(declarations)


def get_config(app: str, config_key: str, default: Any = _MISSING) -> Any:
    """读取配置（未设置且无 default 时抛出 MissingConfigError）"""
    return BindingEngine().get(app, config_key, default)


def update_env(app: str, filename: str | Path | None = None) -> ReloadResult:
    """从环境文件重载已映射的配置"""
    return EnvReloader().reload(app, filename)


__all__ = [
    "init",
    "set_config",
    "set_configs",
    "get_config",
    "update_env",
    "Binding",
    "BindingOptions",
    "BindingEngine",
    "ConfigStore",
    "EnvReloader",
    "IConfigStore",
    "MappingRegistry",
    "ReloadResult",
    "Transform",
    "EnvBindError",
    "InvalidDeclarationError",
    "MissingConfigError",
    "MissingEnvKeyError",
    "RegistryError",
    "RegistryAlreadyInitializedError",
    "RegistryNotInitializedError",
]
