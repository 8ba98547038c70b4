"""
权限探测与提权写入模块

每个受支持的操作系统对应一个 Platform 实现，启动时选定一次，
提供 hosts 文件的默认路径以及用系统提权程序覆盖文件的命令。
"""

import logging
import os
import platform as _platform
import shlex
import shutil
import subprocess
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Type, Union

from hostswitch.errors import (
    ElevationError,
    HostsIOError,
    HostsPermissionError,
    UnsupportedPlatformError,
)
from hostswitch.models import WriteMethod

PROBE_SUFFIX = ".test_write"


class Platform(ABC):
    """操作系统相关的 hosts 路径与提权方式"""

    name: str = ""

    @property
    @abstractmethod
    def hosts_path(self) -> Path:
        """系统 hosts 文件的规范路径"""

    @abstractmethod
    def copy_command(self, src: Path, dst: Path) -> List[str]:
        """
        构造以管理员身份将 src 复制覆盖到 dst 的命令

        异常:
            ElevationError: 系统上没有可用的提权程序
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.hosts_path}>"


class LinuxPlatform(Platform):
    """Linux: 依次尝试 pkexec、sudo"""

    name = "Linux"
    ELEVATION_COMMANDS = ("pkexec", "sudo")

    @property
    def hosts_path(self) -> Path:
        return Path("/etc/hosts")

    def find_helper(self) -> Optional[str]:
        for cmd in self.ELEVATION_COMMANDS:
            if shutil.which(cmd) is not None:
                return cmd
        return None

    def copy_command(self, src: Path, dst: Path) -> List[str]:
        helper = self.find_helper()
        if helper is None:
            raise ElevationError(
                f"未找到提权程序（{', '.join(self.ELEVATION_COMMANDS)}）"
            )
        return [helper, "cp", str(src), str(dst)]


class MacOSPlatform(Platform):
    """macOS: 通过 osascript 弹出管理员授权对话框"""

    name = "Darwin"

    @property
    def hosts_path(self) -> Path:
        return Path("/etc/hosts")

    def copy_command(self, src: Path, dst: Path) -> List[str]:
        cmd = " ".join(shlex.quote(p) for p in ("cp", str(src), str(dst)))
        # AppleScript 字符串字面量中需要转义 \ 和 "
        cmd = cmd.replace("\\", "\\\\").replace('"', '\\"')
        applescript = f'do shell script "{cmd}" with administrator privileges'
        return ["osascript", "-e", applescript]


class WindowsPlatform(Platform):
    """Windows: 通过 PowerShell Start-Process -Verb RunAs 触发 UAC"""

    name = "Windows"

    @property
    def hosts_path(self) -> Path:
        system_root = os.environ.get("SystemRoot", r"C:\Windows")
        return Path(system_root, "System32", "drivers", "etc", "hosts")

    def copy_command(self, src: Path, dst: Path) -> List[str]:
        copy_args = f'/c copy /Y "{src}" "{dst}"'.replace("'", "''")
        script = (
            "$p = Start-Process -FilePath cmd.exe "
            f"-ArgumentList '{copy_args}' "
            "-Verb RunAs -Wait -PassThru -WindowStyle Hidden; "
            "exit $p.ExitCode"
        )
        return ["powershell", "-NoProfile", "-NonInteractive", "-Command", script]


PLATFORMS: Dict[str, Type[Platform]] = {
    cls.name: cls for cls in (LinuxPlatform, MacOSPlatform, WindowsPlatform)
}


def detect_platform(system: Optional[str] = None) -> Platform:
    """
    根据 platform.system() 选择平台实现

    参数:
        system: 系统名称，默认自动检测

    异常:
        UnsupportedPlatformError: 不受支持的操作系统
    """
    system = system or _platform.system()
    try:
        return PLATFORMS[system]()
    except KeyError:
        raise UnsupportedPlatformError(f"不支持的操作系统: {system}") from None


class PrivilegedWriteGateway:
    """
    hosts 文件写入网关

    有写权限时直接原子性写入；否则先将内容暂存到私有临时文件，
    再调用平台提权程序将其复制覆盖到目标路径。
    不加锁、不重试，提权调用可能阻塞直到用户响应授权提示。
    """

    def __init__(
        self,
        platform: Platform,
        logger: logging.Logger,
        timeout: Optional[float] = None,
    ):
        """
        初始化写入网关

        参数:
            platform: 平台实现
            logger: 日志记录器实例
            timeout: 提权程序的超时时间（秒），None 表示不限
        """
        self.platform = platform
        self.logger = logger
        self.timeout = timeout

    def can_read(self, path: Union[str, Path]) -> bool:
        """
        检查是否可以读取文件

        异常:
            HostsIOError: 文件不存在或其他与权限无关的错误
        """
        try:
            with open(path, "rb"):
                pass
        except PermissionError:
            return False
        except OSError as e:
            raise HostsIOError(f"检查读取权限失败: {path}: {e}") from e
        return True

    def can_write(self, path: Union[str, Path]) -> bool:
        """
        通过在目标旁创建并删除探测文件来检查写入权限

        异常:
            HostsIOError: 与权限无关的错误
        """
        path = Path(path)
        probe = path.with_name(path.name + PROBE_SUFFIX)
        try:
            with open(probe, "w", encoding="utf-8") as f:
                f.write("test")
        except PermissionError:
            self.logger.debug(f"没有写入权限: {path.parent}")
            return False
        except OSError as e:
            raise HostsIOError(f"检查写入权限失败: {path}: {e}") from e

        try:
            probe.unlink()
        except OSError as e:
            self.logger.warning(f"删除探测文件失败: {probe}: {e}")
        return True

    def write(self, path: Union[str, Path], content: str) -> WriteMethod:
        """
        写入 hosts 文件，必要时提权

        参数:
            path: 目标文件路径
            content: 完整文件内容

        返回:
            实际采用的写入方式

        异常:
            HostsPermissionError: 直接写入时权限被拒绝
            ElevationError: 提权程序失败或被用户取消
            HostsIOError: 其他文件系统错误
        """
        path = Path(path)
        if self.can_write(path):
            self._write_direct(path, content)
            return WriteMethod.DIRECT

        self.logger.info(f"没有 {path} 的写入权限，正在请求管理员权限...")
        self._write_elevated(path, content)
        return WriteMethod.ELEVATED

    def _write_direct(self, path: Path, content: str) -> None:
        """临时文件 + 重命名的原子性写入，保留原文件权限位"""
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.tmp.",
                text=True,
            )
        except PermissionError as e:
            self.logger.error(f"写入 hosts 文件权限被拒绝: {path}")
            raise HostsPermissionError(f"写入 hosts 文件权限被拒绝: {path}") from e
        except OSError as e:
            raise HostsIOError(f"创建临时文件失败: {e}") from e

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            if path.exists():
                shutil.copymode(path, temp_path)

            os.replace(temp_path, path)
            self.logger.debug(f"已直接写入 {path}")

        except PermissionError as e:
            self._discard(temp_path)
            self.logger.error(f"写入 hosts 文件权限被拒绝: {path}")
            raise HostsPermissionError(f"写入 hosts 文件权限被拒绝: {path}") from e
        except OSError as e:
            self._discard(temp_path)
            self.logger.error(f"写入 hosts 文件失败: {e}")
            raise HostsIOError(f"写入 hosts 文件失败: {path}: {e}") from e

    def _write_elevated(self, path: Path, content: str) -> None:
        """暂存内容后调用提权程序覆盖目标文件"""
        try:
            temp_fd, temp_path = tempfile.mkstemp(prefix="hostswitch-", suffix=".hosts", text=True)
        except OSError as e:
            self.logger.error(f"暂存 hosts 内容失败: {e}")
            raise HostsIOError(f"暂存 hosts 内容失败: {e}") from e

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            self._discard(temp_path)
            self.logger.error(f"暂存 hosts 内容失败: {e}")
            raise HostsIOError(f"暂存 hosts 内容失败: {e}") from e

        try:
            command = self.platform.copy_command(Path(temp_path), path)
            self._run_helper(command)
        finally:
            self._discard(temp_path)

    def _run_helper(self, command: List[str]) -> None:
        self.logger.debug(f"执行提权命令: {command[0]}")
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            self.logger.error(f"提权程序不存在: {command[0]}")
            raise ElevationError(f"提权程序不存在: {command[0]}") from e
        except subprocess.TimeoutExpired as e:
            self.logger.error(f"提权程序超时（{self.timeout} 秒）")
            raise ElevationError(f"提权程序超时（{self.timeout} 秒）") from e
        except OSError as e:
            self.logger.error(f"启动提权程序失败: {e}")
            raise ElevationError(f"启动提权程序失败: {e}") from e

        if result.returncode != 0:
            output = (result.stderr or result.stdout or "").strip()
            self.logger.error(
                f"提权操作失败（退出码 {result.returncode}）"
                + (f": {output}" if output else "")
            )
            raise ElevationError(
                f"提权操作失败（退出码 {result.returncode}）",
                returncode=result.returncode,
                output=output,
            )

        self.logger.debug("提权写入完成")

    def _discard(self, temp_path: str) -> None:
        try:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
        except OSError as e:
            self.logger.warning(f"清理临时文件失败: {temp_path}: {e}")
