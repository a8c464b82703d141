"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(engine, write_env_file):
        path = write_env_file("export FOO='42'\\n")
        ...

每个测试都使用全新的映射表/配置存储，并在结束后恢复 os.environ 与 envbind 日志级别。
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Generator

import pytest

from envbind import env_file as env_file_module
from envbind import registry as registry_module
from envbind import store as store_module
from envbind.config import settings as settings_module
from envbind.engine import BindingEngine
from envbind.registry import MappingRegistry, init_registry
from envbind.reloader import EnvReloader
from envbind.store import ConfigStore


# ============================================================================
# 全局状态隔离
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """重置进程级映射表/存储/配置，并在测试后恢复环境变量"""
    monkeypatch.setattr(registry_module, "_registry", None)
    monkeypatch.setattr(store_module, "_store", ConfigStore())
    monkeypatch.setattr(settings_module, "_settings", None)

    envbind_logger = logging.getLogger("envbind")
    saved_level = envbind_logger.level
    saved_environ = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(saved_environ)
    envbind_logger.setLevel(saved_level)


# ============================================================================
# 核心组件 Fixtures
# ============================================================================

@pytest.fixture
def registry() -> MappingRegistry:
    """已初始化的进程级映射表"""
    return init_registry()


@pytest.fixture
def store() -> ConfigStore:
    """当前进程级配置存储"""
    return store_module.get_store()


@pytest.fixture
def engine(registry: MappingRegistry, store: ConfigStore) -> BindingEngine:
    """使用进程级映射表和存储的绑定引擎"""
    return BindingEngine(registry=registry, store=store)


@pytest.fixture
def reloader(engine: BindingEngine) -> EnvReloader:
    """重载器"""
    return EnvReloader(engine=engine)


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_env_file(temp_dir: Path) -> Callable[..., Path]:
    """写入环境文件并返回路径"""

    def _write(content: str, name: str = "env.sh") -> Path:
        path = temp_dir / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


class _FailingFile:
    """读取第一行后抛出 OSError 的文件对象"""

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def __iter__(self):
        yield b"export FOO='1'\n"
        raise OSError(5, "Input/output error")


@pytest.fixture
def failing_read(monkeypatch: pytest.MonkeyPatch) -> None:
    """让环境文件解析器在读取第一行后发生 I/O 错误"""
    monkeypatch.setattr(env_file_module, "open", lambda *args, **kwargs: _FailingFile(), raising=False)
