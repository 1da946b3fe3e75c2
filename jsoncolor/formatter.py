"""帧跟踪格式化器.

把 `Tokenizer` 产生的扁平 Token 流, 通过一个记录嵌套层级的栈帧状态机,
重放为带颜色的缩进 JSON. 去掉颜色转义序列后, 输出与标准库的
`json.dumps(value, indent=indent)` (每次换行后追加 prefix) 逐字节一致;
紧凑模式下与 `json.dumps(value, separators=(",", ":"))` 一致.
"""

import json
from json.encoder import encode_basestring, encode_basestring_ascii
from typing import IO

from .colors import Category, paint
from .config import FormatterConfig
from .exceptions import JsonColorError, JsonColorFormatError, JsonColorInvariantError
from .frame import Frame
from .log import get_snippet, logger
from .tokens import Token, Tokenizer, TokenKind

_SCALARS = frozenset(
    {TokenKind.STRING, TokenKind.NUMBER, TokenKind.BOOLEAN, TokenKind.NULL}
)


class _FormatterState:
    """单次格式化调用的遍历状态 (栈帧和输出缓冲区), 不在调用之间共享."""

    __slots__ = ("_compact", "_config", "_frames", "_indent_cache", "_parts", "_tokenizer")

    def __init__(self, config: FormatterConfig, tokenizer: Tokenizer):
        self._config = config
        self._tokenizer = tokenizer
        self._compact = config.compact
        self._frames: list[Frame] = [Frame()]
        self._parts: list[str] = []
        self._indent_cache = ""

    @property
    def frame(self) -> Frame:
        return self._frames[-1]

    def _print(self, category: Category, text: str) -> None:
        self._parts.append(
            paint(self._config.scheme, category, text, self._config.color_system)
        )

    def _print_newline(self) -> None:
        if not self._compact:
            self._print(Category.SPACE, "\n")

    def _print_indent(self, depth: int) -> None:
        if self._compact:
            return
        if self._config.prefix:
            self._parts.append(self._config.prefix)
        if depth > 0:
            unit = self._config.indent_unit
            length = len(unit) * depth
            if len(self._indent_cache) < length:
                self._indent_cache = unit * depth
            self._print(Category.SPACE, self._indent_cache[:length])

    def _quote(self, value: str) -> str:
        if self._config.ensure_ascii:
            return encode_basestring_ascii(value)
        quoted = encode_basestring(value)
        try:
            quoted.encode("utf-8")
        except UnicodeEncodeError as e:
            raise JsonColorFormatError(
                f"字符串无法编码为 UTF-8: {e.reason}", pos=self._tokenizer.pos
            ) from e
        return quoted

    def _end_element(self, frame: Frame, more: bool) -> None:
        # 顶层值之后不输出逗号和换行
        if frame.is_root:
            return
        if more:
            self._print(Category.COMMA, ",")
        self._print_newline()

    def _check_value_position(self, frame: Frame) -> None:
        if frame.is_object and frame.expecting_field_name:
            raise JsonColorInvariantError(
                f"对象在字段名位置收到了值 (at {self._tokenizer.pos})"
            )

    def _open(self, kind: TokenKind, more: bool) -> None:
        frame = self.frame
        self._check_value_position(frame)
        # 作为字段值时, 字段名和冒号已经在同一行
        if frame.is_array:
            self._print_indent(frame.depth)

        is_object = kind is TokenKind.OBJECT_START
        self._print(Category.OBJECT if is_object else Category.ARRAY, kind.value)

        is_empty = not more
        if not is_empty:
            self._print_newline()
        self._frames.append(frame.child(is_object, is_empty))

    def _close(self, kind: TokenKind, more: bool) -> None:
        if len(self._frames) == 1:
            raise JsonColorInvariantError(f"多余的容器结束符 {kind.value!r}")
        closed = self._frames.pop()
        is_object = kind is TokenKind.OBJECT_END
        if closed.is_object != is_object:
            raise JsonColorInvariantError(f"容器结束符 {kind.value!r} 与 {closed!r} 不匹配")

        parent = self.frame
        # 非空容器的结束符与开始行对齐; 空容器紧贴开始符
        if not closed.is_empty:
            self._print_indent(parent.depth)
        self._print(Category.OBJECT if is_object else Category.ARRAY, kind.value)
        self._end_element(parent, more)
        parent.toggle_field()

    def _field(self, name: str) -> None:
        frame = self.frame
        if not (frame.is_object and frame.expecting_field_name):
            raise JsonColorInvariantError(
                f"字段名 {name!r} 出现在对象键位置以外 (at {self._tokenizer.pos})"
            )
        self._print_indent(frame.depth)
        self._print(Category.FIELD, self._quote(name))
        self._print(Category.COLON, ":")
        if not self._compact:
            self._print(Category.SPACE, " ")
        frame.toggle_field()

    def _scalar(self, token: Token, more: bool) -> None:
        frame = self.frame
        self._check_value_position(frame)
        if frame.is_array:
            self._print_indent(frame.depth)

        kind = token.kind
        if kind is TokenKind.STRING:
            self._print(Category.STRING, self._quote(token.value))
        elif kind is TokenKind.NUMBER:
            # 保留原始字面量, 不做任何精度转换
            self._print(Category.NUMBER, token.value)
        elif kind is TokenKind.BOOLEAN:
            if token.value:
                self._print(Category.TRUE, "true")
            else:
                self._print(Category.FALSE, "false")
        else:
            self._print(Category.NULL, "null")

        self._end_element(frame, more)
        frame.toggle_field()

    def run(self) -> str:
        tokenizer = self._tokenizer
        while (token := tokenizer.next_token()) is not None:
            more = tokenizer.more()
            kind = token.kind

            if kind is TokenKind.OBJECT_START or kind is TokenKind.ARRAY_START:
                self._open(kind, more)
            elif kind is TokenKind.OBJECT_END or kind is TokenKind.ARRAY_END:
                self._close(kind, more)
            elif kind is TokenKind.FIELD_NAME:
                self._field(token.value)
            elif kind in _SCALARS:
                self._scalar(token, more)
            else:
                raise JsonColorInvariantError(f"未知的 Token 类型: {kind!r}")

        return "".join(self._parts)


class Formatter:
    """JSON 着色格式化器.

    `Formatter` 只持有不可变的配置, 可以在多个调用 (包括并发调用) 之间复用.

    Examples:
        >>> from jsoncolor import Formatter, FormatterConfig
        >>> f = Formatter(FormatterConfig(color_system=None))
        >>> print(f.format(b'{"a":[1,2]}').decode())
        {
          "a": [
            1,
            2
          ]
        }
    """

    __slots__ = ("_config",)

    def __init__(self, config: FormatterConfig | None = None):
        """初始化格式化器.

        Args:
            config: 格式化配置, 默认使用 `FormatterConfig()`.
        """
        self._config = config if config is not None else FormatterConfig()

    @property
    def config(self) -> FormatterConfig:
        """格式化配置."""
        return self._config

    def format(
        self, src: bytes | bytearray | memoryview | str, suppress_log: bool = False
    ) -> bytes:
        """把已编码的 JSON 转换为带颜色的格式化 JSON.

        Args:
            src: 一个完整的 JSON 文档.
            suppress_log: 是否关闭日志输出.

        Returns:
            bytes: UTF-8 编码的着色输出.

        Raises:
            json.JSONDecodeError: 输入不是合法的 JSON (原样抛出).
            JsonColorFormatError: 字符串或输出无法编码为 UTF-8.
            JsonColorInvariantError: Token 流不符合预期.
        """
        if not suppress_log:
            unit = "字符" if isinstance(src, str) else "字节"
            logger.debug("[Formatter] 开始格式化 %d %s", len(src), unit)

        try:
            tokenizer = Tokenizer(src)
            text = _FormatterState(self._config, tokenizer).run()
        except json.JSONDecodeError as e:
            if not suppress_log:
                logger.error("[Formatter] 解码错误: %s\n%s", e, get_snippet(e.doc, e.pos))
            raise
        except JsonColorError as e:
            if not suppress_log:
                logger.error("[Formatter] 格式化错误: %s", e)
            raise

        # prefix / indent 中的孤立代理字符同样无法编码
        try:
            result = text.encode("utf-8")
        except UnicodeEncodeError as e:
            if not suppress_log:
                logger.error("[Formatter] 输出编码错误: %s", e)
            raise JsonColorFormatError(f"输出无法编码为 UTF-8: {e.reason}") from e

        if not suppress_log:
            logger.debug("[Formatter] 成功输出 %d 字节", len(result))
        return result

    def write(
        self,
        fp: IO[bytes],
        src: bytes | bytearray | memoryview | str,
        suppress_log: bool = False,
    ) -> None:
        """格式化并写入二进制文件对象."""
        fp.write(self.format(src, suppress_log=suppress_log))
