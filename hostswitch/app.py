"""
HostSwitch 主应用模块
"""

import logging
import sys
from typing import Optional

from hostswitch.config import Config
from hostswitch.hosts_manager import HostsFileManager
from hostswitch.privilege import Platform, PrivilegedWriteGateway, detect_platform


class HostSwitch:
    """
    主应用控制器，组装所有组件

    - 校验配置并初始化日志
    - 启动时选定一次平台实现（hosts 路径与提权方式）
    - 创建写入网关和 hosts 文件管理器
    """

    def __init__(self, config: Config, platform: Optional[Platform] = None):
        """
        初始化 HostSwitch 应用

        参数:
            config: 应用配置
            platform: 平台实现，默认按当前操作系统检测

        异常:
            ValueError: 如果配置无效
            UnsupportedPlatformError: 如果当前操作系统不受支持
        """
        self.config = config
        self.config.validate()

        self.logger = self._setup_logging()

        self.platform = platform or detect_platform()
        hosts_path = config.hosts_file_path or self.platform.hosts_path
        self.logger.debug(f"平台: {self.platform.name}, hosts 文件: {hosts_path}")

        self.gateway = PrivilegedWriteGateway(
            self.platform,
            self.logger,
            timeout=config.elevation_timeout,
        )
        self.hosts_manager = HostsFileManager(
            hosts_path,
            self.gateway,
            self.logger,
            backup_suffix=config.backup_suffix,
        )

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        日志输出到 stderr，stdout 只用于命令输出。

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('hostswitch')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器
        if logger.handlers:
            for handler in logger.handlers:
                handler.setLevel(self.config.log_level)
            return logger

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger
