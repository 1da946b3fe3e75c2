"""jsoncolor 配置对象."""

from dataclasses import dataclass, field

from rich.color import ColorSystem

from .colors import DEFAULT_SCHEME, ColorScheme

# 默认不使用前缀
DEFAULT_PREFIX = ""
# 默认使用两个空格缩进
DEFAULT_INDENT = "  "


@dataclass(frozen=True)
class FormatterConfig:
    """格式化配置 (不可变).

    在 API 入口层创建, 然后传递给 `Formatter`.
    不持有任何遍历状态, 可以在并发调用之间共享.

    Attributes:
        scheme: 各词法类别的配色方案.
        prefix: 每次换行后写入的前缀.
        indent: 每层嵌套重复一次的缩进单元. `None` 与 `""` 等价.
        ensure_ascii: 重新转义字符串时是否转义非 ASCII 字符 (同 `json.dumps`).
        color_system: 输出使用的颜色系统, `None` 表示不输出颜色.
    """

    scheme: ColorScheme = field(default=DEFAULT_SCHEME)
    prefix: str = DEFAULT_PREFIX
    indent: str | None = DEFAULT_INDENT
    ensure_ascii: bool = True
    color_system: ColorSystem | None = ColorSystem.STANDARD

    @classmethod
    def from_params(
        cls,
        prefix: str = DEFAULT_PREFIX,
        indent: str | int | None = DEFAULT_INDENT,
        scheme: ColorScheme | None = None,
        ensure_ascii: bool = True,
        color_system: ColorSystem | None = ColorSystem.STANDARD,
    ) -> "FormatterConfig":
        """从参数构建配置对象.

        Args:
            prefix: 换行前缀.
            indent: 缩进单元. 整数表示相应数量的空格 (同 `json.dumps`).
            scheme: 配色方案, 默认为 `DEFAULT_SCHEME`.
            ensure_ascii: 是否转义非 ASCII 字符.
            color_system: 颜色系统.

        Returns:
            FormatterConfig: 配置对象.
        """
        if isinstance(indent, int):
            indent = " " * indent

        return cls(
            scheme=scheme if scheme is not None else DEFAULT_SCHEME,
            prefix=prefix,
            indent=indent,
            ensure_ascii=ensure_ascii,
            color_system=color_system,
        )

    @property
    def compact(self) -> bool:
        """是否为紧凑模式 (无换行, 无缩进, 冒号后无空格)."""
        return not self.indent and not self.prefix

    @property
    def indent_unit(self) -> str:
        """缩进单元 (None 视为空字符串)."""
        return self.indent or ""
