"""
重载结果模型

文件错误作为值返回（error 字段），配置错误直接抛出。
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class ReloadResult(BaseModel):
    """一次环境文件重载的结果"""
    app: str
    source: Path | None = None

    applied: list[str] = Field(default_factory=list, description="已重新绑定的环境变量")
    unmapped: list[str] = Field(default_factory=list, description="未映射的环境变量")
    skipped_lines: int = Field(0, description="未匹配的行数")

    error: OSError | None = None

    model_config = {"arbitrary_types_allowed": True}

    @property
    def ok(self) -> bool:
        return self.error is None
