"""
环境文件解析单元测试

每个模块完成后必须运行：pytest tests/unit/test_env_file.py -v
"""

import logging
import os

import pytest

from envbind.env_file import EnvFileParser, parse_env_file
from envbind.models import EnvAssignment, NoMatch


class TestParseLine:
    """单行解析测试"""

    def test_simple_export(self):
        """测试标准 export 行"""
        line = EnvFileParser().parse_line("export FOO='bar'\n", 1)
        assert line == EnvAssignment(key="FOO", value="bar", lineno=1)

    def test_without_trailing_newline(self):
        """测试最后一行没有换行符"""
        line = EnvFileParser().parse_line("export FOO_2='x'")
        assert isinstance(line, EnvAssignment)
        assert line.key == "FOO_2"

    def test_empty_value(self):
        """测试空值"""
        line = EnvFileParser().parse_line("export EMPTY=''\n")
        assert line.value == ""

    def test_value_spans_first_to_last_quote(self):
        """测试值取第一个到最后一个单引号之间（不支持转义）"""
        line = EnvFileParser().parse_line("export MSG='it's here'\n")
        assert line.value == "it's here"

    @pytest.mark.parametrize(
        "text",
        [
            "export foo='lower'\n",
            "export FOO=bar\n",
            'export FOO="bar"\n',
            "FOO='bar'\n",
            "# comment\n",
            "\n",
            "export FOO='bar' # trailing\n",
            "export\tFOO='bar'\n",
        ],
    )
    def test_no_match(self, text: str):
        """测试不匹配的行"""
        assert isinstance(EnvFileParser().parse_line(text), NoMatch)

    def test_no_match_is_logged(self, caplog: pytest.LogCaptureFixture):
        """测试不匹配行记录日志"""
        with caplog.at_level(logging.INFO, logger="envbind"):
            EnvFileParser().parse_line("garbage\n", 3)
        assert "line=3" in caplog.text


class TestParseFile:
    """文件解析测试"""

    def test_parse_preserves_order(self, write_env_file):
        """测试结果顺序与行顺序一致"""
        path = write_env_file(
            "export A='1'\n"
            "not an export\n"
            "export B='2'\n"
        )
        lines = parse_env_file(path)
        assert [type(line) for line in lines] == [EnvAssignment, NoMatch, EnvAssignment]
        assert [line.lineno for line in lines] == [1, 2, 3]
        assert lines[2].value == "2"

    def test_parse_empty_file(self, write_env_file):
        """测试空文件"""
        assert parse_env_file(write_env_file("")) == []

    def test_parse_non_ascii_value(self, write_env_file):
        """测试非ASCII值"""
        lines = parse_env_file(write_env_file("export GREETING='你好'\n"))
        assert lines[0].value == "你好"

    def test_parse_missing_file(self, temp_dir):
        """测试文件不存在直接抛出"""
        with pytest.raises(FileNotFoundError):
            parse_env_file(temp_dir / "nope.sh")

    def test_parse_multiple_spaces_after_export(self, write_env_file):
        """测试 export 后多个空格"""
        lines = parse_env_file(write_env_file("export   FOO='bar'\n"))
        assert lines[0] == EnvAssignment(key="FOO", value="bar", lineno=1)

    def test_parse_non_utf8_bytes(self, temp_dir):
        """测试非UTF-8字节按 os.fsdecode 解码，可无损还原"""
        path = temp_dir / "env.sh"
        path.write_bytes(b"export RAW='\xff\xfe'\n")
        lines = parse_env_file(path)
        assert isinstance(lines[0], EnvAssignment)
        assert os.fsencode(lines[0].value) == b"\xff\xfe"

    def test_parse_read_error_mid_file(self, failing_read):
        """测试读取中途出错直接抛出，不返回部分结果"""
        with pytest.raises(OSError):
            parse_env_file("env.sh")

