"""
模块接口契约 - 定义宿主配置存储的抽象接口与异常体系

设计原则：
1. 绑定引擎只依赖 IConfigStore，不依赖具体存储实现
2. 宿主应用可以替换为自己的配置存储
3. 致命错误统一继承 EnvBindError，由调用方决定是否终止

使用方式：
    from envbind.interfaces import IConfigStore

    class MyStore(IConfigStore):
        def set_value(self, app: str, key: str, value: Any) -> None:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


# ============================================================================
# 宿主配置存储接口
# ============================================================================

class IConfigStore(ABC):
    """宿主配置存储接口 - 按 (应用, 配置键) 存取已解析的配置值"""

    @abstractmethod
    def set_value(self, app: str, key: str, value: Any) -> None:
        """
        写入配置值（无条件覆盖旧值）

        Args:
            app: 应用标识
            key: 配置键
            value: 已转换的配置值
        """
        ...

    @abstractmethod
    def get_value(self, app: str, key: str) -> Any:
        """
        读取配置值

        Raises:
            KeyError: 配置未设置
        """
        ...

    @abstractmethod
    def has_value(self, app: str, key: str) -> bool:
        """配置是否已设置"""
        ...


# ============================================================================
# 异常定义
# ============================================================================

class EnvBindError(Exception):
    """基础异常"""
    pass


class MissingEnvKeyError(EnvBindError):
    """环境变量缺失且未配置默认值"""

    def __init__(self, app: str, env_key: str):
        self.app = app
        self.env_key = env_key
        super().__init__(f"环境变量缺失: app={app} env_key={env_key}")


class MissingConfigError(EnvBindError):
    """读取未设置的配置键"""

    def __init__(self, app: str, config_key: str):
        self.app = app
        self.config_key = config_key
        super().__init__(f"配置缺失: app={app} key={config_key}")


class RegistryError(EnvBindError):
    """映射表错误"""
    pass


class RegistryAlreadyInitializedError(RegistryError):
    """映射表重复初始化"""
    pass


class RegistryNotInitializedError(RegistryError):
    """映射表尚未初始化"""
    pass


class InvalidDeclarationError(EnvBindError):
    """绑定声明格式错误"""
    pass
