"""提供 jsoncolor 测试的公共 Fixtures 和配置."""

import json
import re
from collections.abc import Callable

import pytest

from jsoncolor import Formatter, FormatterConfig

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\-_]|\[[0-?]*[ -/]*[@-~])")


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """提供去除 ANSI 转义序列的函数."""

    def _strip(text: str) -> str:
        return _ANSI_ESCAPE.sub("", text)

    return _strip


@pytest.fixture
def reference() -> Callable[..., str]:
    """提供标准库的缩进输出作为对照.

    Returns:
        对照函数: `json.dumps(value, indent=indent)`, 每次换行后追加 prefix。
    """

    def _reference(value: object, prefix: str = "", indent: str = "  ") -> str:
        return json.dumps(value, indent=indent).replace("\n", "\n" + prefix)

    return _reference


@pytest.fixture
def plain_formatter() -> Formatter:
    """提供不输出颜色的格式化器."""
    return Formatter(FormatterConfig(color_system=None))
