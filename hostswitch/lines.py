"""
hosts 文本的行切分
"""

from typing import List

COMMENT_MARKER = "#"


def split_lines(content: str) -> List[str]:
    """
    按行切分文本

    以 \\n 切分，去掉每行末尾的一个 \\r，忽略结尾的空段。
    因此 "a\\r\\nb\\n" 与 "a\\nb" 得到相同的结果。
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
