"""
绑定引擎 - 读取环境变量并写入宿主配置

职责：
1. 登记绑定到映射表（无论后续解析是否成功）
2. 读取环境变量，缺失时回退默认值，否则报错
3. 应用值转换并写入宿主配置存储
4. 批量绑定（遇错即停，不回滚）

测试要点：
- test_bind_raw_string: 无转换原样写入
- test_bind_missing_env: 缺失且无默认值报错
- test_bind_all_stops_on_error: 批量绑定遇错即停
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from typing import Any

from .interfaces import (
    IConfigStore,
    InvalidDeclarationError,
    MissingConfigError,
    MissingEnvKeyError,
)
from .models import Binding, BindingOptions
from .registry import MappingRegistry, get_registry
from .store import get_store
from .transform import transform_value

logger = logging.getLogger(__name__)

_MISSING = object()

Declaration = tuple | Mapping[str, Any] | Binding


class BindingEngine:
    """绑定引擎"""

    def __init__(
        self,
        registry: MappingRegistry | None = None,
        store: IConfigStore | None = None,
    ):
        self._registry = registry
        self._store = store

    @property
    def registry(self) -> MappingRegistry:
        return self._registry if self._registry is not None else get_registry()

    @property
    def store(self) -> IConfigStore:
        return self._store if self._store is not None else get_store()

    def bind(
        self,
        app: str,
        config_key: str,
        env_key: str,
        options: BindingOptions | Mapping[str, Any] | None = None,
    ) -> Any:
        """声明绑定并立即解析，返回写入的配置值"""
        binding = Binding(
            app=app,
            config_key=config_key,
            env_key=env_key,
            options=_coerce_options(options),
        )
        self.registry.save(binding)
        return self.resolve(binding)

    def resolve(self, binding: Binding) -> Any:
        """解析单个绑定（读取环境 -> 默认值回退 -> 转换 -> 写入）"""
        raw = os.environ.get(binding.env_key, _MISSING)
        if raw is _MISSING:
            if not binding.options.has_default:
                raise MissingEnvKeyError(binding.app, binding.env_key)
            raw = binding.options.default

        value = transform_value(raw, binding.options.transform)
        self.store.set_value(binding.app, binding.config_key, value)
        logger.debug(f"绑定生效: {binding.app}.{binding.config_key} <- ${binding.env_key}")
        return value

    def bind_all(self, declarations: Iterable[Declaration]) -> None:
        """按顺序批量绑定，遇到错误立即抛出"""
        for declaration in declarations:
            binding = _to_binding(declaration)
            self.bind(binding.app, binding.config_key, binding.env_key, binding.options)

    def get(self, app: str, config_key: str, default: Any = _MISSING) -> Any:
        """读取配置；未设置时返回 default，未提供 default 则报错"""
        if self.store.has_value(app, config_key):
            return self.store.get_value(app, config_key)
        if default is _MISSING:
            raise MissingConfigError(app, config_key)
        return default


def _coerce_options(options: BindingOptions | Mapping[str, Any] | None) -> BindingOptions:
    """统一转换为 BindingOptions"""
    if options is None:
        return BindingOptions()
    if isinstance(options, BindingOptions):
        return options
    if isinstance(options, Mapping):
        return BindingOptions.model_validate(dict(options))
    raise InvalidDeclarationError(f"无效的绑定选项: {options!r}")


def _to_binding(declaration: Declaration) -> Binding:
    """将 3/4 元组或映射转换为 Binding"""
    if isinstance(declaration, Binding):
        return declaration
    if isinstance(declaration, Mapping):
        return Binding.from_mapping(declaration)
    if isinstance(declaration, tuple) and len(declaration) in (3, 4):
        app, config_key, env_key, *rest = declaration
        options = _coerce_options(rest[0] if rest else None)
        return Binding(app=app, config_key=config_key, env_key=env_key, options=options)
    raise InvalidDeclarationError(f"无效的绑定声明: {declaration!r}")
