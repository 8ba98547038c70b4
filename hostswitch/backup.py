"""
修改前的 hosts 备份
"""

import logging
from pathlib import Path
from typing import Optional, Union

from hostswitch.errors import BackupError, HostsIOError
from hostswitch.privilege import PrivilegedWriteGateway

DEFAULT_BACKUP_SUFFIX = ".bak"


def backup_path_for(hosts_path: Union[str, Path], suffix: str = DEFAULT_BACKUP_SUFFIX) -> Path:
    """返回与 hosts 文件同目录的备份路径，例如 /etc/hosts -> /etc/hosts.bak"""
    hosts_path = Path(hosts_path)
    return hosts_path.with_name(hosts_path.name + suffix)


def write_backup(
    hosts_path: Union[str, Path],
    content: str,
    suffix: str = DEFAULT_BACKUP_SUFFIX,
    logger: Optional[logging.Logger] = None,
    gateway: Optional[PrivilegedWriteGateway] = None,
) -> Path:
    """
    将原始内容原样写入备份文件

    备份文件每次都会被覆盖，不做轮转。
    hosts 所在目录通常需要管理员权限，传入 gateway 时备份同样经由写入网关
    （必要时提权）写入；否则直接写文件。

    参数:
        hosts_path: hosts 文件路径
        content: 修改前的完整内容
        suffix: 备份文件后缀
        logger: 日志记录器实例
        gateway: 写入网关

    返回:
        备份文件路径

    异常:
        BackupError: 备份写入失败，调用方不得继续写入 hosts 文件
        ElevationError: 备份所需的提权失败或被用户取消
    """
    logger = logger or logging.getLogger("hostswitch")
    dst = backup_path_for(hosts_path, suffix)

    try:
        if gateway is not None:
            gateway.write(dst, content)
        else:
            with open(dst, "w", encoding="utf-8", newline="") as f:
                f.write(content)
    except (OSError, HostsIOError) as e:
        logger.error(f"创建备份文件失败: {dst}: {e}")
        raise BackupError(f"创建备份文件失败: {dst}: {e}") from e

    logger.debug(f"已备份 hosts 文件到 {dst}")
    return dst
