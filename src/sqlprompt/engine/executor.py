# 文件路径: SqlPrompt/src/sqlprompt/engine/executor.py

"""
QueryExecutor - 单条SQL执行器

【功能说明】
- 把一行用户输入交给嵌入式引擎作为单条SQL语句准备并执行
- 收集列名(无结果列的语句如DDL为空列表)与全部结果行
- 按固定规则把每个单元格转换为显示字符串
- 准备/执行/取行任一阶段失败 -> ExecutionError(可恢复，不终止会话)

【单元格显示规则】
NULL   -> "NULL"
BLOB   -> "BINARY DATA"(原始字节从不输出)
INTEGER/REAL -> 十进制文本(不使用指数形式，整数值浮点数不带小数点: 2.0 -> "2")
TEXT   -> 原样
"""

import logging
import math
import sqlite3
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List

from sqlprompt.engine.interfaces import SqlError

logger = logging.getLogger("SqlPrompt")

NULL_TEXT = "NULL"
BINARY_TEXT = "BINARY DATA"

# sqlite3.Warning: 旧版本Python一行多条语句时抛出，不是sqlite3.Error子类
# ValueError: SQL中含NUL字符或无法编码的代理字符
ENGINE_ERRORS = (sqlite3.Error, sqlite3.Warning, ValueError)


class ExecutionError(SqlError):
    """单条SQL执行失败(可恢复)"""
    pass


@dataclass
class QueryResult:
    """一次查询的结果集"""
    columns: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rows


def render_float(value: float) -> str:
    """浮点数 -> 十进制文本，保留最短往返精度"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def render_cell(value: Any) -> str:
    """单元格 -> 显示字符串，对任何输入都不抛异常"""
    if value is None:
        return NULL_TEXT
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BINARY_TEXT
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return render_float(value)
    return str(value)


def render_row(row) -> List[str]:
    """整行转换"""
    return [render_cell(cell) for cell in row]


class QueryExecutor:
    """SQL执行器"""

    def __init__(self, storage_engine):
        self.storage_engine = storage_engine

    def execute(self, sql: str) -> QueryResult:
        """
        执行单条SQL语句

        Args:
            sql: 一行SQL文本

        Returns:
            QueryResult，行已全部转换为字符串

        Raises:
            ExecutionError: 语法错误、约束冲突、运行时错误等
        """
        logger.debug(f"[QueryExecutor] 执行SQL: {sql}")

        try:
            cursor = self.storage_engine.execute(sql)
            try:
                columns = [desc[0] for desc in cursor.description or ()]
                # 取行阶段的错误(如整数溢出)同样作为本条SQL的错误上报，已取到的部分结果丢弃
                rows = [render_row(row) for row in cursor]
            finally:
                cursor.close()
        except ENGINE_ERRORS as e:
            logger.info(f"[QueryExecutor] 执行失败: {e}")
            raise ExecutionError.from_engine_error(e) from e

        logger.debug(f"[QueryExecutor] 返回 {len(rows)} 行, {len(columns)} 列")
        return QueryResult(columns, rows)
