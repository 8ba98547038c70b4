"""
Hosts 文件管理模块：读取、查询、切换与整体替换
"""

import logging
from pathlib import Path
from typing import List, Union

from hostswitch.backup import DEFAULT_BACKUP_SUFFIX, backup_path_for, write_backup
from hostswitch.errors import AddressNotFoundError, HostsIOError, HostsPermissionError
from hostswitch.models import HostEntry, PermissionReport, WriteMethod
from hostswitch.parser import parse_hosts_content
from hostswitch.privilege import PrivilegedWriteGateway
from hostswitch.toggle import toggle_content


class HostsFileManager:
    """
    管理 hosts 文件的读取与修改

    条目每次读取时重新解析，不在两次读取之间缓存。
    修改流程: 读取 -> 切换 -> 备份 -> 通过写入网关写回。
    不加锁，同一文件的并发修改以最后一次写入为准。
    """

    def __init__(
        self,
        hosts_path: Union[str, Path],
        gateway: PrivilegedWriteGateway,
        logger: logging.Logger,
        backup_suffix: str = DEFAULT_BACKUP_SUFFIX,
    ):
        """
        初始化 hosts 文件管理器

        参数:
            hosts_path: hosts 文件路径
            gateway: 写入网关
            logger: 日志记录器实例
            backup_suffix: 备份文件后缀
        """
        self.hosts_path = Path(hosts_path)
        self.gateway = gateway
        self.logger = logger
        self.backup_suffix = backup_suffix

    @property
    def backup_path(self) -> Path:
        return backup_path_for(self.hosts_path, self.backup_suffix)

    def read_raw(self) -> str:
        """
        读取 hosts 文件原始内容（不解析）

        异常:
            HostsPermissionError: 没有读取权限
            HostsIOError: 其他读取错误
        """
        return self._read(self.hosts_path)

    def list_entries(self) -> List[HostEntry]:
        """读取并解析 hosts 文件，返回所有条目（含被注释的）"""
        entries = parse_hosts_content(self.read_raw())
        self.logger.debug(f"解析到 {len(entries)} 条 host 记录")
        return entries

    def get_status(self, address: str) -> bool:
        """
        查询某个 IP 的启用状态（按地址精确匹配第一个条目）

        异常:
            AddressNotFoundError: 没有该地址的条目
        """
        for entry in self.list_entries():
            if entry.address == address:
                return entry.enabled

        raise AddressNotFoundError(address)

    def toggle(self, address: str) -> WriteMethod:
        """
        切换某个 IP 所有行的注释状态

        找不到地址时不会创建备份，也不会写入。
        备份失败时不会写入 hosts 文件。

        返回:
            实际采用的写入方式

        异常:
            AddressNotFoundError: 没有行引用该地址
            BackupError: 备份写入失败
            ElevationError: 提权失败或被取消
            HostsIOError: 其他文件系统错误
        """
        content = self.read_raw()

        try:
            new_content = toggle_content(content, address)
        except AddressNotFoundError:
            self.logger.error(f"IP 地址 {address} 不在 hosts 文件中")
            raise

        write_backup(
            self.hosts_path,
            content,
            self.backup_suffix,
            self.logger,
            gateway=self.gateway,
        )

        method = self.gateway.write(self.hosts_path, new_content)
        self.logger.info(f"已切换 {address} 的状态（{method.value}）")
        return method

    def replace_all(self, new_content: str) -> WriteMethod:
        """
        用给定内容整体覆盖 hosts 文件（不解析、不备份）

        异常:
            ElevationError: 提权失败或被取消
            HostsIOError: 其他文件系统错误
        """
        method = self.gateway.write(self.hosts_path, new_content)
        self.logger.info(f"已覆盖 hosts 文件（{method.value}）")
        return method

    def restore_backup(self) -> WriteMethod:
        """
        将备份内容写回 hosts 文件

        异常:
            HostsIOError: 备份不存在或无法读取
        """
        content = self._read(self.backup_path)
        method = self.gateway.write(self.hosts_path, content)
        self.logger.info(f"已从 {self.backup_path} 恢复 hosts 文件（{method.value}）")
        return method

    def check_permissions(self) -> PermissionReport:
        """在修改前探测读写权限，便于提前提示用户将要提权"""
        report = PermissionReport(
            readable=self.gateway.can_read(self.hosts_path),
            writable=self.gateway.can_write(self.hosts_path),
        )
        self.logger.debug(f"权限检查: {report}")
        return report

    def _read(self, path: Path) -> str:
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except PermissionError as e:
            self.logger.error(f"读取文件权限被拒绝: {path}")
            raise HostsPermissionError(f"读取文件权限被拒绝: {path}") from e
        except OSError as e:
            self.logger.error(f"读取文件时出错: {path}: {e}")
            raise HostsIOError(f"读取文件时出错: {path}: {e}") from e
        except UnicodeDecodeError as e:
            self.logger.error(f"文件不是 UTF-8 文本: {path}")
            raise HostsIOError(f"文件不是 UTF-8 文本: {path}") from e
