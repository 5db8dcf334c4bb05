# 文件路径: SqlPrompt/src/sqlprompt/engine/interfaces.py

"""
SqlPrompt核心接口定义

【接口层次】
1. StorageEngine：打开/持有嵌入式数据库句柄
2. QueryExecutor：SQL -> QueryResult
3. 统一错误结构

【错误分级】
- 致命错误：数据库无法打开、首行输入缺失 -> 程序退出
- 可恢复错误：单条SQL准备/执行失败 -> 打印 ERROR: 后继续循环
"""

from typing import Dict


class SqlError(Exception):
    """统一SQL错误结构"""

    def __init__(self, error_type: str, hint: str):
        self.error_type = error_type  # "OpenError"|"OperationalError"|"IntegrityError"|...
        self.hint = hint  # 引擎给出的原始错误信息
        super().__init__(hint)

    def to_dict(self) -> Dict:
        """转换为字典格式"""
        return {
            "etype": self.error_type,
            "hint": self.hint
        }

    @classmethod
    def from_engine_error(cls, error: Exception) -> 'SqlError':
        """由sqlite3异常构造，error_type取异常类名"""
        return cls(type(error).__name__, str(error))
