"""
HostSwitch - 查看并切换 hosts 文件条目的启用状态
"""

__version__ = "1.0.0"
__author__ = "HostSwitch Project"

from hostswitch.app import HostSwitch
from hostswitch.config import Config
from hostswitch.errors import (
    AddressNotFoundError,
    BackupError,
    ElevationError,
    HostsError,
    HostsIOError,
    HostsPermissionError,
    UnsupportedPlatformError,
)
from hostswitch.hosts_manager import HostsFileManager
from hostswitch.models import HostEntry, PermissionReport, WriteMethod
from hostswitch.parser import parse_hosts_content
from hostswitch.toggle import toggle_content

__all__ = [
    "HostSwitch",
    "Config",
    "HostEntry",
    "HostsFileManager",
    "PermissionReport",
    "WriteMethod",
    "parse_hosts_content",
    "toggle_content",
    "HostsError",
    "HostsIOError",
    "HostsPermissionError",
    "BackupError",
    "ElevationError",
    "AddressNotFoundError",
    "UnsupportedPlatformError",
]
