"""测试 jsoncolor API 层."""

import io
import json
import re
from dataclasses import dataclass
from decimal import Decimal

import pytest
from pydantic import BaseModel

from jsoncolor import DEFAULT_SCHEME, colorize, dump, marshal, marshal_indent

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\-_]|\[[0-?]*[ -/]*[@-~])")


def strip_ansi(data: bytes) -> str:
    """去除 ANSI 转义序列并解码."""
    return _ANSI_ESCAPE.sub("", data.decode("utf-8"))


class User(BaseModel):
    """测试用的 pydantic 模型."""

    uid: int
    name: str
    tags: list[str] = []


@dataclass
class Point:
    """测试用的 dataclass."""

    x: int
    y: int


def test_marshal_compact() -> None:
    """marshal() 去掉颜色后应为紧凑格式."""
    assert strip_ansi(marshal({"a": 1, "b": [1, 2]})) == '{"a":1,"b":[1,2]}'


def test_marshal_indent_default_indent() -> None:
    """marshal_indent() 默认使用两个空格缩进."""
    value = {"a": [1, {"b": None}]}

    assert strip_ansi(marshal_indent(value)) == json.dumps(value, indent=2)


def test_marshal_indent_int_indent() -> None:
    """整数缩进与 json.dumps(indent=n) 一致."""
    value = {"a": [1, 2]}

    assert strip_ansi(marshal_indent(value, indent=4)) == json.dumps(value, indent=4)


def test_marshal_indent_empty_indent_is_compact() -> None:
    """前缀和缩进都为空时输出紧凑格式."""
    assert strip_ansi(marshal_indent({"a": 1, "b": 2}, "", "")) == '{"a":1,"b":2}'


def test_sort_keys() -> None:
    """sort_keys=True 时按键排序."""
    value = {"b": 1, "a": {"d": 1, "c": 2}}

    assert strip_ansi(marshal_indent(value, sort_keys=True)) == json.dumps(
        value, indent=2, sort_keys=True
    )


def test_ensure_ascii_false() -> None:
    """ensure_ascii=False 时保留非 ASCII 字符."""
    out = marshal_indent({"名字": "值"}, ensure_ascii=False, color_system=None)

    assert out.decode("utf-8") == json.dumps({"名字": "值"}, indent=2, ensure_ascii=False)


def test_pydantic_model() -> None:
    """pydantic 模型按 model_dump(mode="json") 编码."""
    user = User(uid=1, name="alice", tags=["x"])

    out = strip_ansi(marshal(user))

    assert out == '{"uid":1,"name":"alice","tags":["x"]}'


def test_nested_dataclass() -> None:
    """dataclass 实例 (包括嵌套在容器中) 按字段编码."""
    out = strip_ansi(marshal({"points": [Point(1, 2)]}))

    assert out == '{"points":[{"x":1,"y":2}]}'


def test_custom_default() -> None:
    """用户提供的 default 处理未知类型."""
    out = strip_ansi(marshal([Decimal("1.10")], default=str))

    assert out == '["1.10"]'


def test_unserializable_raises_type_error() -> None:
    """无法编码的对象应原样抛出 TypeError."""
    with pytest.raises(TypeError, match="not JSON serializable"):
        marshal({"x": object()})


def test_circular_reference_raises_value_error() -> None:
    """循环引用应原样抛出 ValueError."""
    value: list[object] = []
    value.append(value)

    with pytest.raises(ValueError, match="Circular reference"):
        marshal_indent(value)


def test_colorize_arbitrary_json() -> None:
    """colorize() 接受任意合法 JSON, 不限于本库的输出."""
    out = colorize(b'{\n\t"a" :[ 1 ,2 ] }', indent="  ", color_system=None)

    assert out == b'{\n  "a": [\n    1,\n    2\n  ]\n}'


def test_colorize_invalid_json() -> None:
    """colorize() 对非法输入原样抛出 json.JSONDecodeError."""
    with pytest.raises(json.JSONDecodeError):
        colorize(b'{"a": }')


def test_colorize_custom_scheme() -> None:
    """自定义配色方案生效, 且不影响默认输出."""
    scheme = DEFAULT_SCHEME.with_styles(number_color="red")

    custom = colorize(b"1", scheme=scheme)
    default = colorize(b"1")

    assert custom == b"\x1b[31m1\x1b[0m"
    assert default == b"\x1b[37m1\x1b[0m"


def test_dump_writes_file() -> None:
    """dump() 应将着色输出写入文件对象."""
    f = io.BytesIO()

    dump({"a": [1]}, f, prefix="> ")

    assert f.getvalue() == marshal_indent({"a": [1]}, prefix="> ")
    assert strip_ansi(f.getvalue()) == '{\n>   "a": [\n>     1\n>   ]\n> }'
