"""
环境文件行模型 - 解析器的输出结果

每一行要么解析为 EnvAssignment，要么是 NoMatch（不中断解析）。
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class EnvAssignment(BaseModel):
    """匹配成功的 export 行"""
    key: str
    value: str
    lineno: int = Field(0, description="行号（从1开始）")


class NoMatch(BaseModel):
    """未匹配的行"""
    lineno: int = 0
    line: str = ""


ParsedLine = EnvAssignment | NoMatch
