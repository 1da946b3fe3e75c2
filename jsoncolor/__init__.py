"""JSON 着色格式化库.

把已编码的 JSON 重新排版为带 ANSI 颜色的缩进 JSON, 可直接替代标准库的
缩进输出: 去掉颜色后与 `json.dumps(..., indent=...)` 逐字节一致.
"""

from .api import colorize, dump, marshal, marshal_indent
from .colors import DEFAULT_SCHEME, Category, ColorScheme, paint
from .config import DEFAULT_INDENT, DEFAULT_PREFIX, FormatterConfig
from .exceptions import (
    JsonColorError,
    JsonColorFormatError,
    JsonColorInvariantError,
)
from .formatter import Formatter
from .tokens import Token, Tokenizer, TokenKind

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_INDENT",
    "DEFAULT_PREFIX",
    "DEFAULT_SCHEME",
    "Category",
    "ColorScheme",
    "Formatter",
    "FormatterConfig",
    "JsonColorError",
    "JsonColorFormatError",
    "JsonColorInvariantError",
    "Token",
    "TokenKind",
    "Tokenizer",
    "__version__",
    "colorize",
    "dump",
    "marshal",
    "marshal_indent",
    "paint",
]
