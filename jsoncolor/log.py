"""jsoncolor 日志记录器."""

import logging

logger = logging.getLogger("jsoncolor")


def get_snippet(text: str, pos: int, window: int = 16) -> str:
    """获取指定位置周围的文本片段 (用于错误日志)."""
    start = max(0, pos - window)
    end = min(len(text), pos + window)
    chunk = text[start:end]

    # 控制字符转义后再输出, 并用 ^ 标出出错位置
    before = chunk[: max(0, pos - start)].encode("unicode_escape").decode("ascii")
    after = chunk[max(0, pos - start) :].encode("unicode_escape").decode("ascii")

    return f"位置 {pos} 的上下文 (显示 {start}-{end}):\n{before}{after}\n{' ' * len(before)}^"
