"""格式化器的嵌套栈帧."""


class Frame:
    """一层容器嵌套的遍历状态.

    根帧 (`is_object` 和 `is_array` 均为 False) 始终位于栈底, 不会被弹出.
    """

    __slots__ = ("depth", "expecting_field_name", "is_array", "is_empty", "is_object")

    def __init__(
        self,
        is_object: bool = False,
        is_array: bool = False,
        is_empty: bool = False,
        depth: int = 0,
    ):
        self.is_object = is_object
        self.is_array = is_array
        self.is_empty = is_empty  # 创建时由前瞻信号确定, 之后不变
        self.depth = depth  # 根帧为 0, 每层 +1
        # 仅对对象有意义: 字段名 / 值交替
        self.expecting_field_name = is_object

    @property
    def is_root(self) -> bool:
        """是否为根帧."""
        return not (self.is_object or self.is_array)

    @property
    def in_value_position(self) -> bool:
        """当前对象是否在等待字段值."""
        return self.is_object and not self.expecting_field_name

    def toggle_field(self) -> None:
        """对象中切换字段名 / 值角色."""
        if self.is_object:
            self.expecting_field_name = not self.expecting_field_name

    def child(self, is_object: bool, is_empty: bool) -> "Frame":
        """创建下一层嵌套的栈帧."""
        return Frame(
            is_object=is_object,
            is_array=not is_object,
            is_empty=is_empty,
            depth=self.depth + 1,
        )

    def __repr__(self) -> str:
        kind = "object" if self.is_object else "array" if self.is_array else "root"
        return f"Frame({kind}, depth={self.depth}, empty={self.is_empty})"
