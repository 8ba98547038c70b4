"""
按 IP 切换 hosts 行的注释状态
"""

import re
from typing import Pattern

from hostswitch.errors import AddressNotFoundError
from hostswitch.lines import COMMENT_MARKER, split_lines


def build_line_pattern(address: str) -> Pattern[str]:
    """
    构造匹配某个 IP 所在行的正则

    分组: 前导空白、可选的 "# " 注释前缀、IP 本身、行的剩余部分。
    IP 中的特殊字符会被转义，且 IP 之后必须是空白，避免子串误匹配。
    """
    return re.compile(
        rf"^(\s*)({COMMENT_MARKER}\s*)?({re.escape(address)})(\s+.+)$"
    )


def toggle_content(content: str, address: str) -> str:
    """
    切换所有引用 address 的行的注释状态，返回新的文件内容

    被注释的行去掉匹配到的注释符及其后空白；启用的行在 IP 前插入 "# "。
    所有匹配行都会被切换，其余行原样保留。输出统一使用 \\n 换行。

    参数:
        content: 当前文件内容
        address: 目标 IP 地址

    返回:
        切换后的文件内容

    异常:
        AddressNotFoundError: 没有任何行匹配该地址
    """
    pattern = build_line_pattern(address)
    output = []
    found = False

    for line in split_lines(content):
        match = pattern.match(line)
        if match is None:
            output.append(line)
            continue

        found = True
        leading, marker, matched, rest = match.groups()
        if marker is not None:
            output.append(f"{leading}{matched}{rest}")
        else:
            output.append(f"{leading}{COMMENT_MARKER} {matched}{rest}")

    if not found:
        raise AddressNotFoundError(address)

    return "".join(f"{line}\n" for line in output)
