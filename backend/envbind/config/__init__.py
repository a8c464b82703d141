"""
配置层 - envbind 自身配置与绑定声明文件

职责：
- 加载运行期配置（环境变量 ENVBIND_* 覆盖）
- 加载 YAML 绑定声明
"""

from .declarations import bind_from_yaml, load_declarations
from .settings import EnvBindSettings, LoggingConfig, get_settings, reload_settings

__all__ = [
    "EnvBindSettings",
    "LoggingConfig",
    "get_settings",
    "reload_settings",
    "load_declarations",
    "bind_from_yaml",
]
