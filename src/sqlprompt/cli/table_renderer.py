"""
结果表格渲染
固定使用 tabulate 的 simple_outline 风格(框线字符，仅表头下有分隔线)
"""

import sys
from typing import List, Sequence

from tabulate import tabulate

NO_DATA = "No Data"
TABLE_FORMAT = "simple_outline"


def render_table(columns: Sequence[str], rows: List[Sequence[str]]) -> str:
    """
    生成表格文本

    Args:
        columns: 列名
        rows: 已转换为字符串的行

    Returns:
        表格文本；没有数据行时返回 "No Data"
    """
    if not rows:
        return NO_DATA

    # 单元格原样输出："1.0"、"007" 不重新格式化，首尾空白保留
    return tabulate(rows, headers=list(columns), tablefmt=TABLE_FORMAT,
                    disable_numparse=True, preserve_whitespace=True)


def print_table(columns: Sequence[str], rows: List[Sequence[str]], out=None) -> None:
    """打印表格"""
    out = out or sys.stdout
    print(render_table(columns, rows), file=out)
