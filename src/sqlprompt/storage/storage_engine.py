# 文件路径: SqlPrompt/src/sqlprompt/storage/storage_engine.py

"""
StorageEngine - 嵌入式数据库句柄

【功能说明】
- 根据用户输入的路径打开(或创建)SQLite数据库
- 空路径 -> 内存数据库(:memory:)，进程退出即丢弃
- 自动提交模式：每条语句执行完立即生效，与裸SQLite句柄行为一致
- 句柄在整个会话期间由主循环独占持有

【设计架构】
SqlPromptCLI → QueryExecutor → StorageEngine → sqlite3 → 磁盘文件
"""

import logging
import sqlite3
from typing import Optional

from sqlprompt.engine.interfaces import SqlError

logger = logging.getLogger("SqlPrompt")

MEMORY_PATH = ":memory:"


class DatabaseOpenError(SqlError):
    """数据库打开失败(致命)"""
    pass


def resolve_db_path(raw: str) -> str:
    """空路径映射为内存数据库"""
    if raw == "":
        return MEMORY_PATH
    return raw


def _decode_text(data: bytes) -> str:
    # 非法UTF-8字节用替换字符代替，保证取行永不失败
    return data.decode("utf-8", errors="replace")


class StorageEngine:
    """嵌入式SQLite数据库句柄"""

    def __init__(self, db_path: str):
        """
        打开数据库

        Args:
            db_path: 数据库文件路径，空串表示内存数据库

        Raises:
            DatabaseOpenError: 路径无效、权限不足、文件不是数据库等
        """
        self.path = resolve_db_path(db_path)
        self.connection: Optional[sqlite3.Connection] = None

        try:
            conn = sqlite3.connect(self.path, isolation_level=None)
        except sqlite3.Error as e:
            raise DatabaseOpenError("OpenError", str(e)) from e

        try:
            # SQLite延迟打开文件，这里读一次schema让错误立即暴露
            conn.execute("PRAGMA schema_version").fetchone()
        except sqlite3.Error as e:
            conn.close()
            raise DatabaseOpenError("OpenError", str(e)) from e

        conn.text_factory = _decode_text
        self.connection = conn

        logger.info(f"[StorageEngine] 数据库已打开: {self.path}")

    @property
    def in_memory(self) -> bool:
        return self.path == MEMORY_PATH

    @property
    def closed(self) -> bool:
        return self.connection is None

    def execute(self, sql: str) -> sqlite3.Cursor:
        """
        执行单条SQL语句

        Args:
            sql: SQL语句文本

        Returns:
            sqlite3游标，行尚未读取

        Raises:
            sqlite3.Error: 由调用方(QueryExecutor)统一转换
            sqlite3.ProgrammingError: 句柄已关闭
        """
        if self.connection is None:
            raise sqlite3.ProgrammingError("Cannot operate on a closed database.")
        return self.connection.execute(sql)

    def close(self) -> None:
        """关闭句柄(可重复调用)"""
        if self.connection is not None:
            self.connection.close()
            self.connection = None
            logger.debug(f"[StorageEngine] 数据库已关闭: {self.path}")

    def __enter__(self) -> 'StorageEngine':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"StorageEngine(path={self.path!r}, closed={self.closed})"
