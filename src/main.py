# 文件路径: SqlPrompt/src/main.py
"""
SqlPrompt 主启动文件
提供项目的统一入口点
"""

import sys
from pathlib import Path

# 确保可以导入项目模块
current_dir = Path(__file__).parent
sys.path.insert(0, str(current_dir))

from sqlprompt.cli.sqlprompt_cli import main


if __name__ == "__main__":
    sys.exit(main())
