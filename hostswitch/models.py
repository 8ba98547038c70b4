"""
HostSwitch 数据模型
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class HostEntry:
    """
    代表 hosts 文件中的单个条目（由一行解析得到）

    属性:
        address: IP 地址字面量（保留原始写法，不做规范化）
        hostnames: 主机名元组，保持原顺序，且不为空
        raw_line: 原始行文本（包括注释符和原始空白）
        enabled: 解析时该行未被注释则为 True
        comment: 行内注释内容（不含 #），没有则为空字符串
    """

    address: str
    hostnames: Tuple[str, ...]
    raw_line: str
    enabled: bool = True
    comment: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.hostnames:
            raise ValueError(f"条目 {self.address} 至少需要一个主机名")

    def to_dict(self) -> Dict[str, Any]:
        """转换为可 JSON 序列化的字典"""
        return {
            "address": self.address,
            "hostnames": list(self.hostnames),
            "line": self.raw_line,
            "enabled": self.enabled,
            "comment": self.comment,
        }

    def __str__(self) -> str:
        state = "enabled" if self.enabled else "disabled"
        return f"{self.address} -> {' '.join(self.hostnames)} ({state})"


class WriteMethod(str, Enum):
    """hosts 文件写入所采用的方式"""

    DIRECT = "direct"
    ELEVATED = "elevated"


@dataclass(frozen=True)
class PermissionReport:
    """hosts 文件的读写权限探测结果"""

    readable: bool
    writable: bool

    @property
    def needs_elevation(self) -> bool:
        return not self.writable
