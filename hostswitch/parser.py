"""
hosts 文件内容解析模块
"""

import re
from typing import List, Optional

from hostswitch.lines import COMMENT_MARKER, split_lines
from hostswitch.models import HostEntry
from hostswitch.validators import is_valid_address

# 行首的空白与（可能多个）注释符
_COMMENT_PREFIX = re.compile(r"^[\s#]*")


def parse_line(line: str) -> Optional[HostEntry]:
    """
    解析单行，不是主机条目时返回 None

    规则:
        - 去掉行首空白后以 # 开头视为被注释（enabled=False）
        - 被注释的行会去掉所有前导 # 及其间空白，剩余内容照常解析
        - 第一个 # 之后是行内注释
        - 第一个 token 必须是合法 IP，且至少跟一个主机名

    参数:
        line: 原始行（不含换行符）

    返回:
        HostEntry 或 None
    """
    is_commented = line.lstrip().startswith(COMMENT_MARKER)

    text = _COMMENT_PREFIX.sub("", line, count=1) if is_commented else line
    if not text:
        # 纯注释行
        return None

    text, _, comment = text.partition(COMMENT_MARKER)

    tokens = text.split()
    if not tokens:
        return None

    address, hostnames = tokens[0], tokens[1:]
    if not is_valid_address(address) or not hostnames:
        return None

    return HostEntry(
        address=address,
        hostnames=tuple(hostnames),
        raw_line=line,
        enabled=not is_commented,
        comment=comment.strip(),
    )


def parse_hosts_content(content: str) -> List[HostEntry]:
    """
    将 hosts 文件内容解析为条目列表

    顺序与文件中出现顺序一致；同一地址的重复条目全部保留。
    空行、纯注释行和无法识别的行会被静默跳过。

    参数:
        content: 完整文件内容

    返回:
        HostEntry 列表
    """
    entries = []
    for line in split_lines(content):
        entry = parse_line(line)
        if entry is not None:
            entries.append(entry)
    return entries
