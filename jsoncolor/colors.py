"""颜色类别与配色方案.

每个词法类别 (标点, 字段名, 字符串, 布尔, 数字, null, 逗号, 冒号, 空白)
对应一个独立的 `rich.style.Style`. 配色方案不可变, 自定义时通过复制并覆盖
生成新实例, 因此并发的格式化调用之间不会互相影响.
"""

from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style


class Category(Enum):
    """词法类别, 值为 `ColorScheme` 中对应的字段名."""

    OBJECT = "object_color"
    ARRAY = "array_color"
    FIELD = "field_color"
    STRING = "string_color"
    TRUE = "true_color"
    FALSE = "false_color"
    NUMBER = "number_color"
    NULL = "null_color"
    COMMA = "comma_color"
    COLON = "colon_color"
    SPACE = "space_color"


def _style(definition: str) -> Any:
    return Field(default_factory=lambda: Style.parse(definition))


class ColorScheme(BaseModel):
    """各词法类别的样式表 (不可变).

    字段既可以是 `rich.style.Style`, 也可以是样式定义字符串
    (如 `"bold blue"`, `"#ff8800 on black"`, `"none"`).

    Examples:
        >>> scheme = DEFAULT_SCHEME.with_styles(field_color="bold magenta")
        >>> str(scheme.style_for(Category.FIELD))
        'bold magenta'
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    # 对象定界符 '{' 和 '}'
    object_color: Style = _style("bold white")
    # 数组定界符 '[' 和 ']'
    array_color: Style = _style("bold white")
    # 对象字段名
    field_color: Style = _style("bold blue")
    string_color: Style = _style("green")
    true_color: Style = _style("white")
    false_color: Style = _style("white")
    number_color: Style = _style("white")
    null_color: Style = _style("bold black")
    # 分隔对象字段和数组元素的 ','
    comma_color: Style = _style("white")
    # 分隔字段名和值的 ':'
    colon_color: Style = _style("white")
    # 空白字符 (换行, 缩进) 默认不着色
    space_color: Style = _style("none")

    @field_validator("*", mode="before")
    @classmethod
    def _parse_style(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return Style.parse(value)
            except StyleSyntaxError as e:
                raise ValueError(str(e)) from e
        return value

    def style_for(self, category: Category) -> Style:
        """返回类别对应的样式."""
        return getattr(self, category.value)

    def with_styles(self, **overrides: Style | str) -> "ColorScheme":
        """复制当前方案并覆盖部分样式.

        Args:
            **overrides: 字段名到样式 (或样式字符串) 的映射.

        Returns:
            ColorScheme: 新的配色方案, 原方案不变.

        Raises:
            pydantic.ValidationError: 字段名未知或样式定义无效.
        """
        values: dict[str, Any] = {
            name: getattr(self, name) for name in type(self).model_fields
        }
        values.update(overrides)
        return type(self).model_validate(values)

    @classmethod
    def plain(cls) -> "ColorScheme":
        """所有类别都不着色的方案."""
        return cls.model_validate({category.value: "none" for category in Category})


DEFAULT_SCHEME = ColorScheme()


def paint(
    scheme: ColorScheme,
    category: Category,
    text: str,
    color_system: ColorSystem | None = ColorSystem.STANDARD,
) -> str:
    """用类别对应的样式包裹文本.

    空文本、空样式或 `color_system=None` 时原样返回.
    """
    if not text or color_system is None:
        return text
    style = _style_for_system(scheme.style_for(category), color_system)
    return style.render(text, color_system=color_system)


_ATTRIBUTES = (
    "bold",
    "dim",
    "italic",
    "underline",
    "blink",
    "blink2",
    "reverse",
    "conceal",
    "strike",
    "underline2",
    "frame",
    "encircle",
    "overline",
)


@lru_cache(maxsize=1024)
def _style_for_system(style: Style, color_system: ColorSystem) -> Style:
    """为每个 (样式, 颜色系统) 组合返回独立的 Style 实例.

    `Style.render` 会把首次生成的 SGR 序列缓存在实例上,
    同一个实例不能跨颜色系统共享.
    """
    return Style(
        color=style.color,
        bgcolor=style.bgcolor,
        link=style.link,
        **{name: getattr(style, name) for name in _ATTRIBUTES},
    )
