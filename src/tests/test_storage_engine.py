"""
StorageEngine测试
内存/文件数据库、打开失败、自动提交持久化
"""

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

# 添加src目录到路径
src_dir = Path(__file__).parent.parent
sys.path.insert(0, str(src_dir))

from sqlprompt.storage.storage_engine import (
    StorageEngine, DatabaseOpenError, resolve_db_path, MEMORY_PATH
)


class TestStorageEngine(unittest.TestCase):

    def setUp(self):
        self.data_dir = tempfile.mkdtemp(prefix="sqlprompt_test_")

    def tearDown(self):
        shutil.rmtree(self.data_dir, ignore_errors=True)

    def test_resolve_db_path(self):
        self.assertEqual(resolve_db_path(""), ":memory:")
        self.assertEqual(MEMORY_PATH, ":memory:")
        self.assertEqual(resolve_db_path("a.db"), "a.db")

    def test_empty_path_opens_memory_database(self):
        cwd = os.getcwd()
        os.chdir(self.data_dir)
        try:
            with StorageEngine("") as engine:
                self.assertTrue(engine.in_memory)
                self.assertEqual(engine.path, ":memory:")
                engine.execute("CREATE TABLE t(a)")
            self.assertEqual(os.listdir(self.data_dir), [])
        finally:
            os.chdir(cwd)

    def test_file_path_creates_database(self):
        db_file = os.path.join(self.data_dir, "test.db")
        with StorageEngine(db_file) as engine:
            self.assertFalse(engine.in_memory)
            self.assertEqual(engine.path, db_file)
        self.assertTrue(os.path.exists(db_file))

    def test_statements_are_committed_immediately(self):
        db_file = os.path.join(self.data_dir, "persist.db")

        engine1 = StorageEngine(db_file)
        engine1.execute("CREATE TABLE t(a INT, b TEXT)")
        engine1.execute("INSERT INTO t VALUES (1, 'x')")
        # 未显式提交，直接关闭
        engine1.close()

        with StorageEngine(db_file) as engine2:
            rows = engine2.execute("SELECT a, b FROM t").fetchall()
        self.assertEqual(rows, [(1, "x")])

    def test_missing_directory_is_fatal(self):
        bad_path = os.path.join(self.data_dir, "missing", "dir", "x.db")
        with self.assertRaises(DatabaseOpenError) as ctx:
            StorageEngine(bad_path)
        self.assertEqual(ctx.exception.error_type, "OpenError")
        self.assertIn("unable to open database file", ctx.exception.hint)

    def test_non_database_file_is_fatal(self):
        junk = os.path.join(self.data_dir, "junk.db")
        with open(junk, "w", encoding="utf-8") as f:
            f.write("this is definitely not an sqlite database\n" * 64)

        with self.assertRaises(DatabaseOpenError) as ctx:
            StorageEngine(junk)
        self.assertIn("not a database", ctx.exception.hint)

    def test_close_is_idempotent(self):
        engine = StorageEngine("")
        engine.close()
        engine.close()
        self.assertTrue(engine.closed)

    def test_execute_after_close_raises(self):
        import sqlite3

        engine = StorageEngine("")
        engine.close()
        with self.assertRaises(sqlite3.ProgrammingError):
            engine.execute("SELECT 1")


if __name__ == "__main__":
    unittest.main()
