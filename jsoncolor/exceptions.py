"""jsoncolor 特定的异常类.

该模块为 jsoncolor 库定义了异常层次结构.
输入不是合法 JSON 时, 抛出的是标准库的 `json.JSONDecodeError`, 不做包装.
"""


class JsonColorError(Exception):
    """所有 jsoncolor 异常的基类."""

    pass


class JsonColorFormatError(JsonColorError):
    """格式化输出失败时抛出.

    Case:
        - 字段名或字符串值重新转义失败.
        - 输出无法编码为 UTF-8 (如 `ensure_ascii=False` 时出现孤立代理字符).
    """

    def __init__(self, msg: str, pos: int | None = None) -> None:
        """初始化格式化错误.

        Args:
            msg: 错误描述信息.
            pos: 出错位置 (输入文本中的字符偏移).
        """
        super().__init__(msg)
        self.pos = pos

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.pos is not None:
            return f"{base_msg} (at {self.pos})"
        return base_msg


class JsonColorInvariantError(JsonColorError, RuntimeError):
    """内部不变量被破坏时抛出.

    Case:
        - 格式化器收到未知类型的 Token.
        - 字段名出现在对象键位置以外.
    """

    pass
