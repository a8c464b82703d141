"""
映射表 - 进程级 (app, env_key) -> Binding 注册表

职责：
1. 记录每个绑定声明（重复声明直接覆盖）
2. 供重载时按环境变量名反查配置键
3. 支持多线程并发读写（单键原子，后写者生效）

测试要点：
- test_init_twice: 重复初始化报错
- test_save_overwrite: 覆盖写入
- test_concurrent_save: 并发写入
"""

from __future__ import annotations

import logging
import threading

from .interfaces import RegistryAlreadyInitializedError, RegistryNotInitializedError
from .models import Binding

logger = logging.getLogger(__name__)


class MappingRegistry:
    """线程安全的绑定映射表"""

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: dict[tuple[str, str], Binding] = {}

    def save(self, binding: Binding) -> None:
        """插入或覆盖绑定"""
        with self._lock:
            self._entries[binding.registry_key] = binding

    def lookup(self, app: str, env_key: str) -> Binding | None:
        """按 (app, env_key) 查找绑定"""
        with self._lock:
            return self._entries.get((app, env_key))

    def bindings(self, app: str | None = None) -> list[Binding]:
        """列出绑定快照"""
        with self._lock:
            entries = list(self._entries.values())
        if app is not None:
            entries = [b for b in entries if b.app == app]
        return entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


# 全局映射表实例（只能初始化一次）
_registry: MappingRegistry | None = None
_init_lock = threading.Lock()


def init_registry() -> MappingRegistry:
    """创建进程级映射表"""
    global _registry
    with _init_lock:
        if _registry is not None:
            raise RegistryAlreadyInitializedError("映射表已初始化")
        _registry = MappingRegistry()
    logger.debug("映射表初始化完成")
    return _registry


def get_registry() -> MappingRegistry:
    """获取进程级映射表"""
    if _registry is None:
        raise RegistryNotInitializedError("映射表尚未初始化，请先调用 init()")
    return _registry
