"""
HostSwitch 异常类型
"""

from typing import Optional


class HostsError(Exception):
    """所有 hosts 操作异常的基类"""


class HostsIOError(HostsError):
    """与权限无关的读、写、stat 错误"""


class HostsPermissionError(HostsIOError):
    """没有 hosts 文件的写入权限（在任何提权尝试之前判定）"""


class BackupError(HostsIOError):
    """备份文件无法写入，修改操作必须中止"""


class ElevationError(HostsError):
    """
    提权辅助程序已调用但失败或被用户取消

    属性:
        returncode: 辅助程序退出码（未能启动时为 None）
        output: 辅助程序的诊断输出
    """

    def __init__(self, message: str, returncode: Optional[int] = None, output: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.output = output

    def __str__(self) -> str:
        message = super().__str__()
        if self.output:
            return f"{message}: {self.output}"
        return message


class AddressNotFoundError(HostsError, KeyError):
    """目标 IP 地址不在当前 hosts 内容中"""

    def __init__(self, address: str):
        super().__init__(address)
        self.address = address

    def __str__(self) -> str:
        return f"IP 地址 {self.address} 不在 hosts 文件中"


class UnsupportedPlatformError(HostsError):
    """当前操作系统没有对应的平台实现"""
