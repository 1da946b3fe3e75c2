"""测试格式化配置."""

import dataclasses

import pytest
from rich.color import ColorSystem

from jsoncolor import DEFAULT_SCHEME, FormatterConfig


def test_defaults() -> None:
    """默认配置: 无前缀, 两个空格缩进, 标准 16 色."""
    config = FormatterConfig()

    assert config.prefix == ""
    assert config.indent == "  "
    assert config.scheme is DEFAULT_SCHEME
    assert config.ensure_ascii
    assert config.color_system == ColorSystem.STANDARD
    assert not config.compact


@pytest.mark.parametrize(
    ("prefix", "indent", "compact"),
    [
        ("", "", True),
        ("", None, True),
        ("", "  ", False),
        ("> ", "", False),
        ("> ", None, False),
    ],
)
def test_compact_mode(prefix: str, indent: str | None, compact: bool) -> None:
    """前缀和缩进都为空时为紧凑模式."""
    assert FormatterConfig(prefix=prefix, indent=indent).compact is compact


def test_from_params_int_indent() -> None:
    """整数缩进表示相应数量的空格."""
    assert FormatterConfig.from_params(indent=4).indent == "    "
    assert FormatterConfig.from_params(indent=0).compact


def test_from_params_default_scheme() -> None:
    """未指定配色方案时使用默认方案."""
    assert FormatterConfig.from_params(scheme=None).scheme is DEFAULT_SCHEME


def test_config_is_frozen() -> None:
    """配置对象不可变."""
    config = FormatterConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.prefix = "x"  # type: ignore[misc]
