"""
重载编排器 - 根据新的环境文件重新绑定已映射的配置

流程：
1. 解析环境文件（打开/读取失败作为结果返回，不做任何修改）
2. 逐行处理：
   - 不匹配行: 跳过（解析器已记录日志）
   - 未映射变量: 记录日志后跳过
   - 已映射变量: 覆盖进程环境变量，重新解析绑定
3. 绑定失败立即抛出，之前已生效的更新不回滚

测试要点：
- test_reload_round_trip: export FOO='42' -> get(app, foo) == 42
- test_reload_unmapped: 未映射变量不报错
- test_reload_missing_file: 文件不存在返回错误
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import get_settings
from .engine import BindingEngine
from .env_file import EnvFileParser
from .models import EnvAssignment, ReloadResult

logger = logging.getLogger(__name__)


class EnvReloader:
    """环境文件重载器"""

    def __init__(
        self,
        engine: BindingEngine | None = None,
        parser: EnvFileParser | None = None,
    ):
        self.engine = engine or BindingEngine()
        self.parser = parser or EnvFileParser()

    def reload(self, app: str, filename: str | Path | None = None) -> ReloadResult:
        """重载环境文件"""
        path = self._resolve_path(filename)
        result = ReloadResult(app=app, source=path)

        try:
            lines = self.parser.parse(path)
        except OSError as e:
            logger.warning(f"环境文件读取失败: {path}: {e}")
            result.error = e
            return result

        registry = self.engine.registry
        for line in lines:
            if not isinstance(line, EnvAssignment):
                result.skipped_lines += 1
                continue

            binding = registry.lookup(app, line.key)
            if binding is None:
                logger.info(f"未映射的环境变量: app={app} env_key={line.key}")
                result.unmapped.append(line.key)
                continue

            os.environ[line.key] = line.value
            self.engine.resolve(binding)
            result.applied.append(line.key)

        logger.info(
            f"[{app}] 环境文件重载完成: {path} "
            f"applied={len(result.applied)} unmapped={len(result.unmapped)}"
        )
        return result

    @staticmethod
    def _resolve_path(filename: str | Path | None) -> Path:
        if filename is not None:
            return Path(filename)
        env_file = get_settings().env_file
        if env_file is None:
            raise ValueError("未指定环境文件，且 ENVBIND_ENV_FILE 未配置")
        return env_file
