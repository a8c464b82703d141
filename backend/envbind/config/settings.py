"""
运行期配置 - envbind 自身的参数

职责：
- 默认环境文件路径 / 绑定声明文件路径
- 日志级别
- 支持 ENVBIND_ 前缀的环境变量覆盖与 YAML 加载
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class LoggingConfig(BaseModel):
    """日志配置（log_level 为空时不修改宿主设置的级别）"""

    log_level: str | None = None


class EnvBindSettings(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    # 重载时默认读取的环境文件
    env_file: Path | None = None
    # YAML 绑定声明文件
    bindings_file: Path | None = None

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "ENVBIND_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> EnvBindSettings:
        """从YAML文件加载配置（文件不存在时使用默认值）"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        section: dict[str, Any] = data.get("envbind", {}) or {}
        settings = cls(**section)
        settings._resolve_paths(base_dir=path.parent)
        return settings

    def _resolve_paths(self, base_dir: Path) -> None:
        """相对路径基于配置文件所在目录解析"""
        if self.env_file and not self.env_file.is_absolute():
            self.env_file = (base_dir / self.env_file).resolve()
        if self.bindings_file and not self.bindings_file.is_absolute():
            self.bindings_file = (base_dir / self.bindings_file).resolve()


DEFAULT_SETTINGS_PATH = Path("envbind.yaml")

# 全局配置实例
_settings: EnvBindSettings | None = None


def get_settings() -> EnvBindSettings:
    """获取全局配置（惰性加载）"""
    global _settings
    if _settings is None:
        _settings = EnvBindSettings.from_yaml(DEFAULT_SETTINGS_PATH)
    return _settings


def reload_settings(yaml_path: str | Path | None = None) -> EnvBindSettings:
    """重新加载配置"""
    global _settings
    _settings = EnvBindSettings.from_yaml(yaml_path or DEFAULT_SETTINGS_PATH)
    return _settings
