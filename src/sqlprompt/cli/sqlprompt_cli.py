# 文件路径: SqlPrompt/src/sqlprompt/cli/sqlprompt_cli.py

"""
SqlPrompt交互式CLI
读取数据库路径 → 打开嵌入式数据库 → 循环: 提示 → 读一行 → 执行 → 打印表格

【状态】
INIT       询问数据库路径并打开句柄
RUNNING    每行输入作为一条SQL执行，失败打印 ERROR: 后继续
TERMINATED 输入流结束，正常退出
"""

import argparse
import logging
import sys

from sqlprompt.cli.prompt import PromptReader, PromptClosedError
from sqlprompt.cli.table_renderer import print_table, NO_DATA
from sqlprompt.engine.executor import QueryExecutor, ExecutionError
from sqlprompt.storage.storage_engine import StorageEngine, DatabaseOpenError
from sqlprompt.utils.app_logging import setup_logging

VERSION = "1.0.0"
DB_PATH_PROMPT = "DB file (leave blank to keep db alive only in memory):"

logger = logging.getLogger("SqlPrompt")


class SqlPromptCLI:
    """交互式SQL命令行"""

    def __init__(self, input_stream=None, output_stream=None, db_path: str = None):
        self.output_stream = output_stream or sys.stdout
        self.prompt = PromptReader(input_stream, self.output_stream)
        self.db_path = db_path
        self.storage_engine = None
        self.executor = None

    def _print(self, text: str = ""):
        print(text, file=self.output_stream)

    def open_database(self) -> StorageEngine:
        """
        INIT阶段：获取路径并打开数据库

        Raises:
            PromptClosedError: 路径行缺失
            DatabaseOpenError: 数据库无法打开
        """
        db_path = self.db_path
        if db_path is None:
            self._print(DB_PATH_PROMPT)
            db_path = self.prompt.get()

        self.storage_engine = StorageEngine(db_path)
        self.executor = QueryExecutor(self.storage_engine)

        self._print(f'Opened DB "{self.storage_engine.path}"')
        self._print()
        if self.storage_engine.in_memory:
            logger.debug("[SqlPromptCLI] 内存数据库，退出后数据丢弃")
        return self.storage_engine

    def run_interactive(self):
        """RUNNING阶段：直到输入流结束"""
        if self.storage_engine is None:
            self.open_database()

        try:
            for sql in self.prompt:
                self._process_sql_statement(sql)
            # 输入结束时光标停在提示符后，补一个换行
            self._print()
            logger.debug("[SqlPromptCLI] 输入结束，会话退出")
        finally:
            self._cleanup()

    def _process_sql_statement(self, sql: str):
        """执行一条SQL并输出结果，错误不终止会话"""
        try:
            result = self.executor.execute(sql)
        except ExecutionError as e:
            self._print(f"ERROR: {e.hint}")
            return

        if result.is_empty:
            self._print(NO_DATA)
            return

        print_table(result.columns, result.rows, out=self.output_stream)

    def _cleanup(self):
        """释放数据库句柄"""
        if self.storage_engine is not None:
            self.storage_engine.close()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlprompt",
        description="SqlPrompt - 嵌入式SQLite交互式命令行",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('--db', default=None, metavar='PATH',
                        help='数据库文件路径，给出时不再交互询问 (空串为内存数据库)')
    parser.add_argument('--log-level', default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        type=str.upper,
                        help='日志级别 (默认读取环境变量 LOG_LEVEL，否则 WARNING)')
    parser.add_argument('--version', action='version',
                        version=f'SqlPrompt {VERSION}')
    return parser


def main(argv=None) -> int:
    """主函数，返回进程退出码"""
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level)

    cli = SqlPromptCLI(db_path=args.db)

    try:
        cli.open_database()
    except PromptClosedError:
        logger.error("[SqlPromptCLI] 未读取到数据库路径")
        print("\nFailed to start: no database path given (input ended)", file=sys.stderr)
        return 1
    except DatabaseOpenError as e:
        logger.error(f"[SqlPromptCLI] 数据库打开失败: {e.hint}")
        print(f"Failed to open database: {e.hint}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 1

    try:
        cli.run_interactive()
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
