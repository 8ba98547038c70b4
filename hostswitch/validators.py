"""
地址与主机名校验
"""

import ipaddress
import re

_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")


def is_valid_address(token: str) -> bool:
    """
    检查 token 是否为合法的 IPv4 或 IPv6 地址字面量

    只做语法检查，不做 DNS 解析。不合法时返回 False，从不抛出异常。
    """
    try:
        ipaddress.ip_address(token)
    except ValueError:
        return False
    return True


def is_valid_hostname(name: str) -> bool:
    """
    检查主机名语法是否合法（仅用于提示，不用于过滤条目）

    每个标签 1-63 个字母、数字或连字符，不能以连字符开头或结尾，
    总长度不超过 253。
    """
    if not name or len(name) > 253:
        return False
    labels = name[:-1].split(".") if name.endswith(".") else name.split(".")
    return all(_HOSTNAME_LABEL.match(label) for label in labels)
