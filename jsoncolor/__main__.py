"""jsoncolor 命令行工具."""

import json
import sys
from pathlib import Path
from typing import IO

import click
from rich.color import ColorSystem

from .api import colorize
from .config import DEFAULT_INDENT
from .exceptions import JsonColorError


def _print_traceback(verbose: bool) -> None:
    if verbose:
        import traceback

        traceback.print_exc(file=sys.stderr)


@click.command(help="JSON 着色格式化工具")
@click.argument("input_file", type=click.File("rb"), default="-")
@click.option(
    "--indent",
    default=DEFAULT_INDENT,
    show_default=True,
    help="每层嵌套的缩进单元",
)
@click.option("--tab", is_flag=True, help="使用制表符缩进 (覆盖 --indent)")
@click.option("--prefix", default="", help="每次换行后写入的前缀")
@click.option("--compact", is_flag=True, help="输出紧凑格式 (无换行和缩进)")
@click.option(
    "--color/--no-color",
    default=None,
    help="强制开启/关闭颜色 (默认仅在终端中着色)",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="将输出保存到文件 (如不指定则输出到控制台)",
)
@click.option("-v", "--verbose", is_flag=True, help="显示详细信息")
def cli(
    input_file: IO[bytes],
    indent: str,
    tab: bool,
    prefix: str,
    compact: bool,
    color: bool | None,
    output_file: Path | None,
    verbose: bool,
) -> None:
    """JSON 着色格式化工具.

    Examples:
      # 格式化文件
      jsoncolor data.json

      # 从标准输入读取
      echo '{"a": [1, 2]}' | jsoncolor

      # 紧凑输出并强制着色
      jsoncolor --compact --color data.json
    """
    data = input_file.read()
    if verbose:
        click.echo(f"[DEBUG] 数据大小: {len(data)} 字节", err=True)

    if compact:
        prefix, indent = "", ""
    elif tab:
        indent = "\t"

    # 写入文件时默认不着色
    colored = color if color is not None else output_file is None
    color_system = ColorSystem.STANDARD if colored else None

    try:
        result = colorize(data, prefix=prefix, indent=indent, color_system=color_system)
    except json.JSONDecodeError as e:
        _print_traceback(verbose)
        raise click.ClickException(f"解码失败: {e}") from e
    except (JsonColorError, UnicodeDecodeError) as e:
        _print_traceback(verbose)
        raise click.ClickException(f"格式化失败: {e}") from e

    if output_file:
        output_file.write_bytes(result + b"\n")
        click.echo(f"结果已保存到: {output_file}", err=True)
    else:
        click.echo(result.decode("utf-8"), color=color)


def main() -> None:
    """入口函数."""
    cli()


if __name__ == "__main__":
    main()
