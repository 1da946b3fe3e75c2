"""JSON 词法 Token 源.

该模块提供 `Tokenizer`, 把已编码的 JSON 文本拆解为一个有限的、只能前进的
Token 序列, 并提供单 Token 前瞻信号 `more()`.
字符串和数字的扫描复用标准库 `json` 的扫描器, 错误信息与 `json.loads` 一致.
"""

import json
from collections.abc import Iterator
from enum import Enum
from json.decoder import WHITESPACE, scanstring
from json.scanner import NUMBER_RE
from typing import Any, NamedTuple


class TokenKind(Enum):
    """Token 类型."""

    OBJECT_START = "{"
    OBJECT_END = "}"
    ARRAY_START = "["
    ARRAY_END = "]"
    FIELD_NAME = "field"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class Token(NamedTuple):
    """一个词法 Token.

    Attributes:
        kind: Token 类型.
        value: Token 的值.
            - FIELD_NAME / STRING: 解码后的 str.
            - NUMBER: 原始数字字面量 (如 "1.50e+3"), 不做任何转换.
            - BOOLEAN: bool.
            - 其他: None.
    """

    kind: TokenKind
    value: Any = None


# 解析状态
_VALUE = 0  # 期待一个值 (顶层, 数组逗号之后, 或对象冒号之后)
_ARRAY_FIRST = 1  # "[" 之后: 值或 "]"
_OBJECT_FIRST = 2  # "{" 之后: 字段名或 "}"
_OBJECT_KEY = 3  # 对象逗号之后: 必须是字段名
_AFTER_VALUE = 4  # 值之后: "," / 容器结束符 / 文档结束

# 非有限数字字面量, 与 json.loads 的默认行为一致
_CONSTANTS = ("NaN", "Infinity", "-Infinity")

_CLOSERS = {"{": "}", "[": "]"}


def _decode_source(data: bytes | bytearray | memoryview | str) -> str:
    if isinstance(data, str):
        if data.startswith("\ufeff"):
            raise json.JSONDecodeError(
                "Unexpected UTF-8 BOM (decode using utf-8-sig)", data, 0
            )
        return data
    raw = bytes(data)
    return raw.decode(json.detect_encoding(raw), "surrogatepass")


class Tokenizer:
    """已编码 JSON 文档的顺序 Token 解码器.

    只接受一个完整的 JSON 文档 (对象, 数组或标量).
    逗号和冒号在内部消费, 不会作为 Token 输出.

    Examples:
        >>> tokenizer = Tokenizer(b'{"a": [1, true]}')
        >>> [t.kind.name for t in tokenizer]
        ['OBJECT_START', 'FIELD_NAME', 'ARRAY_START', 'NUMBER', 'BOOLEAN', 'ARRAY_END', 'OBJECT_END']
    """

    __slots__ = ("_containers", "_pos", "_state", "_strict", "_text")

    _text: str
    _pos: int
    _state: int
    _containers: list[str]
    _strict: bool

    def __init__(self, data: bytes | bytearray | memoryview | str, strict: bool = True):
        """初始化 Tokenizer.

        Args:
            data: JSON 文本或字节. 字节的编码按 `json.detect_encoding` 自动识别.
            strict: 是否拒绝字符串中的控制字符 (同 `json.loads`).

        Raises:
            json.JSONDecodeError: 字节带有 str 不允许的 BOM.
        """
        self._text = _decode_source(data)
        self._pos = 0
        self._state = _VALUE
        self._containers = []
        self._strict = strict

    @property
    def text(self) -> str:
        """解码后的输入文本."""
        return self._text

    @property
    def pos(self) -> int:
        """当前读取位置 (字符偏移)."""
        return self._pos

    def _skip(self, pos: int) -> int:
        return WHITESPACE.match(self._text, pos).end()

    def _error(self, msg: str, pos: int) -> json.JSONDecodeError:
        return json.JSONDecodeError(msg, self._text, pos)

    def more(self) -> bool:
        """当前容器在结束符之前是否还有下一个元素.

        仅查看下一个非空白字符, 不消费任何输入.
        """
        pos = self._skip(self._pos)
        char = self._text[pos : pos + 1]
        return char != "" and char not in "]}"

    def next_token(self) -> Token | None:
        """读取下一个 Token.

        Returns:
            Token | None: 下一个 Token; 顶层值已读完时返回 None.

        Raises:
            json.JSONDecodeError: 输入不是合法的 JSON.
        """
        text = self._text

        if self._state == _AFTER_VALUE:
            pos = self._skip(self._pos)
            if not self._containers:
                if pos != len(text):
                    raise self._error("Extra data", pos)
                self._pos = pos
                return None

            char = text[pos : pos + 1]
            opener = self._containers[-1]
            if char == _CLOSERS[opener]:
                return self._close(pos)
            if char != ",":
                raise self._error("Expecting ',' delimiter", pos)
            self._pos = pos + 1
            self._state = _OBJECT_KEY if opener == "{" else _VALUE

        pos = self._skip(self._pos)
        char = text[pos : pos + 1]

        if self._state == _ARRAY_FIRST and char == "]":
            return self._close(pos)
        if self._state == _OBJECT_FIRST and char == "}":
            return self._close(pos)

        if self._state in (_OBJECT_FIRST, _OBJECT_KEY):
            if char != '"':
                raise self._error(
                    "Expecting property name enclosed in double quotes", pos
                )
            name, end = scanstring(text, pos + 1, self._strict)
            end = self._skip(end)
            if text[end : end + 1] != ":":
                raise self._error("Expecting ':' delimiter", end)
            self._pos = end + 1
            self._state = _VALUE
            return Token(TokenKind.FIELD_NAME, name)

        return self._scan_value(pos)

    def _close(self, pos: int) -> Token:
        opener = self._containers.pop()
        self._pos = pos + 1
        self._state = _AFTER_VALUE
        if opener == "{":
            return Token(TokenKind.OBJECT_END)
        return Token(TokenKind.ARRAY_END)

    def _scan_value(self, pos: int) -> Token:
        text = self._text
        char = text[pos : pos + 1]

        if char == "{":
            self._containers.append(char)
            self._pos = pos + 1
            self._state = _OBJECT_FIRST
            return Token(TokenKind.OBJECT_START)
        if char == "[":
            self._containers.append(char)
            self._pos = pos + 1
            self._state = _ARRAY_FIRST
            return Token(TokenKind.ARRAY_START)

        self._state = _AFTER_VALUE

        if char == '"':
            value, self._pos = scanstring(text, pos + 1, self._strict)
            return Token(TokenKind.STRING, value)
        if text.startswith("null", pos):
            self._pos = pos + 4
            return Token(TokenKind.NULL)
        if text.startswith("true", pos):
            self._pos = pos + 4
            return Token(TokenKind.BOOLEAN, True)
        if text.startswith("false", pos):
            self._pos = pos + 5
            return Token(TokenKind.BOOLEAN, False)

        match = NUMBER_RE.match(text, pos)
        if match is not None:
            self._pos = match.end()
            return Token(TokenKind.NUMBER, match.group())

        for literal in _CONSTANTS:
            if text.startswith(literal, pos):
                self._pos = pos + len(literal)
                return Token(TokenKind.NUMBER, literal)

        raise self._error("Expecting value", pos)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token
