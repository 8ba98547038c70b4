"""
配置管理模块，支持环境变量
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """应用配置类，从环境变量加载配置"""

    hosts_file_path: Optional[str] = None
    backup_suffix: str = ".bak"
    log_level: str = "INFO"
    elevation_timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "Config":
        """
        从环境变量加载配置

        环境变量说明:
            HOSTS_FILE: hosts 文件路径 (默认: 当前平台的系统 hosts 文件)
            HOSTS_BACKUP_SUFFIX: 备份文件后缀 (默认: .bak)
            LOG_LEVEL: 日志级别 (默认: INFO)
            ELEVATION_TIMEOUT: 等待提权程序的秒数 (默认: 不限)
        """
        timeout = os.getenv("ELEVATION_TIMEOUT")
        try:
            elevation_timeout = float(timeout) if timeout else None
        except ValueError:
            raise ValueError(f"无效的 ELEVATION_TIMEOUT: {timeout}") from None

        return cls(
            hosts_file_path=os.getenv("HOSTS_FILE") or None,
            backup_suffix=os.getenv("HOSTS_BACKUP_SUFFIX", ".bak"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            elevation_timeout=elevation_timeout,
        )

    def validate(self) -> None:
        """验证配置是否有效"""
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"无效的 LOG_LEVEL: {self.log_level}. "
                f"必须是以下之一: {', '.join(sorted(valid_log_levels))}"
            )
        if not self.backup_suffix:
            raise ValueError("HOSTS_BACKUP_SUFFIX 不能为空")
        if self.elevation_timeout is not None and self.elevation_timeout <= 0:
            raise ValueError(
                f"无效的 ELEVATION_TIMEOUT: {self.elevation_timeout}. 必须大于 0"
            )
