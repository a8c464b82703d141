"""
环境文件解析器 - 读取 shell 风格的 export 文件

文件格式（每行一个）：
    export NAME='value'

- export 与 NAME 之间只允许空格
- NAME 只允许 [A-Z0-9_]
- value 取第一个单引号到最后一个单引号之间的内容，不支持转义
- 不匹配的行记录日志后跳过，不影响整体解析
- 打开/读取失败直接抛出 OSError，不返回部分结果
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from .models import EnvAssignment, NoMatch, ParsedLine

logger = logging.getLogger(__name__)

EXPORT_PATTERN = re.compile(r"export +([A-Z0-9_]+)='(.*)'\n?")


class EnvFileParser:
    """环境文件解析器"""

    def __init__(self, pattern: re.Pattern[str] = EXPORT_PATTERN):
        self.pattern = pattern

    def parse(self, path: str | Path) -> list[ParsedLine]:
        """逐行解析文件，结果顺序与行顺序一致"""
        results: list[ParsedLine] = []
        with open(path, "rb") as f:
            for lineno, data in enumerate(f, start=1):
                results.append(self.parse_line(os.fsdecode(data), lineno))
        return results

    def parse_line(self, line: str, lineno: int = 0) -> ParsedLine:
        """解析单行"""
        match = self.pattern.fullmatch(line)
        if match is None:
            logger.info(f"环境文件行不匹配: line={lineno} content={line.rstrip()!r}")
            return NoMatch(lineno=lineno, line=line)
        key, value = match.groups()
        return EnvAssignment(key=key, value=value, lineno=lineno)


def parse_env_file(path: str | Path) -> list[ParsedLine]:
    """解析环境文件"""
    return EnvFileParser().parse(path)
