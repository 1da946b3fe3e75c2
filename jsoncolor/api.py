"""jsoncolor API 模块.

提供单次调用的高级接口 `marshal`, `marshal_indent`, `colorize`, `dump`.
值的 JSON 编码委托给标准库 `json`, 着色和排版由 `Formatter` 完成.
"""

import dataclasses
import json
from collections.abc import Callable
from typing import IO, Any

from pydantic import BaseModel
from rich.color import ColorSystem

from .colors import ColorScheme
from .config import DEFAULT_INDENT, DEFAULT_PREFIX, FormatterConfig
from .formatter import Formatter
from .log import logger

# 紧凑编码器的分隔符
COMPACT_SEPARATORS = (",", ":")


def _make_default(
    default: Callable[[Any], Any] | None,
) -> Callable[[Any], Any]:
    """构造 `json.dumps` 的 default 钩子.

    - pydantic 模型 -> `model_dump(mode="json")`
    - dataclass 实例 -> `dataclasses.asdict`
    - 其他类型 -> 交给用户提供的 `default`
    """

    def _default(obj: Any) -> Any:
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json")
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        if default is not None:
            return default(obj)
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    return _default


def _encode(
    obj: Any,
    sort_keys: bool,
    ensure_ascii: bool,
    default: Callable[[Any], Any] | None,
) -> str:
    try:
        return json.dumps(
            obj,
            separators=COMPACT_SEPARATORS,
            sort_keys=sort_keys,
            ensure_ascii=ensure_ascii,
            default=_make_default(default),
        )
    except (TypeError, ValueError) as e:
        logger.debug("[api] 编码失败: %s", e)
        raise


def colorize(
    data: bytes | bytearray | memoryview | str,
    prefix: str = DEFAULT_PREFIX,
    indent: str | int | None = DEFAULT_INDENT,
    *,
    scheme: ColorScheme | None = None,
    ensure_ascii: bool = True,
    color_system: ColorSystem | None = ColorSystem.STANDARD,
) -> bytes:
    """为已编码的 JSON 着色并重新排版.

    Args:
        data: 一个完整的 JSON 文档 (任意合法 JSON, 不限于本库的输出).
        prefix: 每次换行后写入的前缀.
        indent: 缩进单元. `prefix` 和 `indent` 都为空时输出紧凑格式.
        scheme: 配色方案, 默认为 `DEFAULT_SCHEME`.
        ensure_ascii: 是否转义非 ASCII 字符.
        color_system: 颜色系统, `None` 表示不着色.

    Returns:
        bytes: 着色后的 UTF-8 字节.

    Raises:
        json.JSONDecodeError: 输入不是合法的 JSON.
        JsonColorFormatError: 字符串无法重新编码.
    """
    config = FormatterConfig.from_params(
        prefix=prefix,
        indent=indent,
        scheme=scheme,
        ensure_ascii=ensure_ascii,
        color_system=color_system,
    )
    return Formatter(config).format(data)


def marshal(
    obj: Any,
    *,
    scheme: ColorScheme | None = None,
    sort_keys: bool = False,
    ensure_ascii: bool = True,
    default: Callable[[Any], Any] | None = None,
    color_system: ColorSystem | None = ColorSystem.STANDARD,
) -> bytes:
    """序列化对象为带颜色的紧凑 JSON.

    去掉颜色后与 `json.dumps(obj, separators=(",", ":"))` 一致.

    Args:
        obj: 要序列化的对象. 除 `json` 支持的类型外, 还支持 pydantic 模型和 dataclass.
        scheme: 配色方案.
        sort_keys: 是否按键排序.
        ensure_ascii: 是否转义非 ASCII 字符.
        default: 自定义序列化函数, 用于处理无法默认序列化的类型.
        color_system: 颜色系统.

    Returns:
        bytes: 着色后的 UTF-8 字节.

    Raises:
        TypeError: 对象无法被 JSON 编码.
        ValueError: 循环引用等编码错误.
    """
    encoded = _encode(obj, sort_keys, ensure_ascii, default)
    return colorize(
        encoded,
        prefix="",
        indent=None,
        scheme=scheme,
        ensure_ascii=ensure_ascii,
        color_system=color_system,
    )


def marshal_indent(
    obj: Any,
    prefix: str = DEFAULT_PREFIX,
    indent: str | int | None = DEFAULT_INDENT,
    *,
    scheme: ColorScheme | None = None,
    sort_keys: bool = False,
    ensure_ascii: bool = True,
    default: Callable[[Any], Any] | None = None,
    color_system: ColorSystem | None = ColorSystem.STANDARD,
) -> bytes:
    """序列化对象为带颜色的缩进 JSON.

    去掉颜色后与 `json.dumps(obj, indent=indent)` 一致, 且每次换行后追加 `prefix`.

    Args:
        obj: 要序列化的对象.
        prefix: 每次换行后写入的前缀.
        indent: 缩进单元 (字符串, 或表示空格数量的整数).
        scheme: 配色方案.
        sort_keys: 是否按键排序.
        ensure_ascii: 是否转义非 ASCII 字符.
        default: 自定义序列化函数.
        color_system: 颜色系统.

    Returns:
        bytes: 着色后的 UTF-8 字节.

    Examples:
        >>> marshal_indent([1, None], color_system=None)
        b'[\\n  1,\\n  null\\n]'
    """
    encoded = _encode(obj, sort_keys, ensure_ascii, default)
    return colorize(
        encoded,
        prefix=prefix,
        indent=indent,
        scheme=scheme,
        ensure_ascii=ensure_ascii,
        color_system=color_system,
    )


def dump(
    obj: Any,
    fp: IO[bytes],
    prefix: str = DEFAULT_PREFIX,
    indent: str | int | None = DEFAULT_INDENT,
    *,
    scheme: ColorScheme | None = None,
    sort_keys: bool = False,
    ensure_ascii: bool = True,
    default: Callable[[Any], Any] | None = None,
    color_system: ColorSystem | None = ColorSystem.STANDARD,
) -> None:
    """序列化对象为带颜色的缩进 JSON 并写入文件.

    Args:
        obj: 要序列化的对象.
        fp: 文件类对象, 必须实现 `write(bytes)` 方法.
        prefix: 换行前缀.
        indent: 缩进单元.
        scheme: 配色方案.
        sort_keys: 是否按键排序.
        ensure_ascii: 是否转义非 ASCII 字符.
        default: 自定义序列化函数.
        color_system: 颜色系统.
    """
    fp.write(
        marshal_indent(
            obj,
            prefix=prefix,
            indent=indent,
            scheme=scheme,
            sort_keys=sort_keys,
            ensure_ascii=ensure_ascii,
            default=default,
            color_system=color_system,
        )
    )
