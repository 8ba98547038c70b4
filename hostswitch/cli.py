"""
HostSwitch 命令行入口
"""

import argparse
import json
import sys
from typing import List, Optional

from hostswitch.app import HostSwitch
from hostswitch.config import Config
from hostswitch.errors import (
    AddressNotFoundError,
    BackupError,
    ElevationError,
    HostsError,
    HostsPermissionError,
)
from hostswitch.models import HostEntry
from hostswitch.validators import is_valid_hostname

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 3
EXIT_ELEVATION = 4
EXIT_PERMISSION = 5
EXIT_BACKUP = 6
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hostswitch",
        description="查看并切换 hosts 文件条目的启用状态",
    )
    parser.add_argument("--hosts-file", help="hosts 文件路径（覆盖 HOSTS_FILE）")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="日志级别（覆盖 LOG_LEVEL）",
    )

    subparser = parser.add_subparsers(dest="cmd", required=True)

    list_parser = subparser.add_parser("list", help="列出所有条目")
    list_parser.add_argument("--json", action="store_true", help="以 JSON 输出")
    state = list_parser.add_mutually_exclusive_group()
    state.add_argument("--all", dest="state", action="store_const", const="all", help="全部条目（默认）")
    state.add_argument("--enabled", dest="state", action="store_const", const="enabled", help="仅启用的条目")
    state.add_argument("--disabled", dest="state", action="store_const", const="disabled", help="仅被注释的条目")

    subparser.add_parser("raw", help="输出原始内容")

    status_parser = subparser.add_parser("status", help="查询 IP 的启用状态")
    status_parser.add_argument("address")

    toggle_parser = subparser.add_parser("toggle", help="切换 IP 的启用状态")
    toggle_parser.add_argument("address")

    replace_parser = subparser.add_parser("replace", help="用文件内容覆盖 hosts 文件")
    replace_parser.add_argument("file", help="内容来源文件，- 表示标准输入")

    subparser.add_parser("check", help="检查读写权限")
    subparser.add_parser("restore", help="从备份恢复 hosts 文件")

    return parser


def _filter_entries(entries: List[HostEntry], state: Optional[str]) -> List[HostEntry]:
    if state == "enabled":
        return [e for e in entries if e.enabled]
    if state == "disabled":
        return [e for e in entries if not e.enabled]
    return entries


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def run(app: HostSwitch, args: argparse.Namespace) -> int:
    """执行子命令，返回退出码"""
    manager = app.hosts_manager

    if args.cmd == "list":
        entries = _filter_entries(manager.list_entries(), args.state)
        for entry in entries:
            for name in entry.hostnames:
                if not is_valid_hostname(name):
                    app.logger.warning(f"可疑的主机名: {name} ({entry.address})")

        if args.json:
            print(json.dumps([e.to_dict() for e in entries], ensure_ascii=False, indent=2))
        else:
            for entry in entries:
                mark = " " if entry.enabled else "#"
                print(f"{mark} {entry.address}\t{' '.join(entry.hostnames)}")

    elif args.cmd == "raw":
        sys.stdout.write(manager.read_raw())

    elif args.cmd == "status":
        print("enabled" if manager.get_status(args.address) else "disabled")

    elif args.cmd == "toggle":
        report = manager.check_permissions()
        if report.needs_elevation:
            app.logger.warning("修改 hosts 文件需要管理员权限，将弹出授权提示")
        manager.toggle(args.address)
        print("enabled" if manager.get_status(args.address) else "disabled")

    elif args.cmd == "replace":
        try:
            content = _read_source(args.file)
        except OSError as e:
            print(f"无法读取 {args.file}: {e}", file=sys.stderr)
            return EXIT_ERROR
        manager.replace_all(content)

    elif args.cmd == "check":
        report = manager.check_permissions()
        print(f"readable: {'yes' if report.readable else 'no'}")
        print(f"writable: {'yes' if report.writable else 'no'}")

    elif args.cmd == "restore":
        manager.restore_backup()

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """主入口点"""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
        if args.hosts_file:
            config.hosts_file_path = args.hosts_file
        if args.log_level:
            config.log_level = args.log_level
        app = HostSwitch(config)
    except (ValueError, HostsError) as e:
        print(f"初始化 HostSwitch 失败: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        return run(app, args)
    except KeyboardInterrupt:
        app.logger.info("被用户中断")
        return EXIT_INTERRUPTED
    except AddressNotFoundError as e:
        print(e, file=sys.stderr)
        return EXIT_NOT_FOUND
    except ElevationError as e:
        print(e, file=sys.stderr)
        return EXIT_ELEVATION
    except BackupError as e:
        print(e, file=sys.stderr)
        return EXIT_BACKUP
    except HostsPermissionError as e:
        print(e, file=sys.stderr)
        return EXIT_PERMISSION
    except HostsError as e:
        print(e, file=sys.stderr)
        return EXIT_ERROR
