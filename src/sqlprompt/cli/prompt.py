"""
PromptReader - 逐行读取用户输入
每次读取前输出提示符 "> " 并刷新，输入流关闭后停止产生数据
"""

import sys
from typing import Iterator, Optional

PROMPT_MARKER = "> "


class PromptClosedError(EOFError):
    """必需的输入行缺失(致命)"""
    pass


class PromptReader:
    """带提示符的行读取器，可直接用于 for 循环"""

    def __init__(self, input_stream=None, output_stream=None, marker: str = PROMPT_MARKER):
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout
        self.marker = marker
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def next_line(self) -> Optional[str]:
        """
        读取下一行

        Returns:
            去掉行尾换行符的文本；输入流结束返回 None
        """
        if self._closed:
            return None

        self.output_stream.write(self.marker)
        self.output_stream.flush()

        line = self.input_stream.readline()
        if line == "":
            self._closed = True
            return None

        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line

    def get(self) -> str:
        """读取必需的一行，输入流结束时抛出 PromptClosedError"""
        line = self.next_line()
        if line is None:
            raise PromptClosedError("input ended before a line was read")
        return line

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line
