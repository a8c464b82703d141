"""
宿主配置存储 - 默认的进程内实现

宿主应用可通过 set_store() 替换为自己的 IConfigStore 实现。
"""

from __future__ import annotations

import threading
from typing import Any

from .interfaces import IConfigStore


class ConfigStore(IConfigStore):
    """按应用分区的内存配置存储"""

    def __init__(self):
        self._lock = threading.Lock()
        self._apps: dict[str, dict[str, Any]] = {}

    def set_value(self, app: str, key: str, value: Any) -> None:
        with self._lock:
            self._apps.setdefault(app, {})[key] = value

    def get_value(self, app: str, key: str) -> Any:
        with self._lock:
            return self._apps[app][key]

    def has_value(self, app: str, key: str) -> bool:
        with self._lock:
            return key in self._apps.get(app, {})

    def unset(self, app: str, key: str) -> None:
        """删除单个配置（不存在时忽略）"""
        with self._lock:
            self._apps.get(app, {}).pop(key, None)

    def clear(self, app: str | None = None) -> None:
        """清空某个应用或全部配置"""
        with self._lock:
            if app is None:
                self._apps.clear()
            else:
                self._apps.pop(app, None)


# 全局存储实例
_store: IConfigStore = ConfigStore()


def get_store() -> IConfigStore:
    """获取进程级宿主配置存储"""
    return _store


def set_store(store: IConfigStore) -> None:
    """替换进程级宿主配置存储"""
    global _store
    _store = store
