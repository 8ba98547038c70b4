#!/usr/bin/env python3
"""
HostSwitch - 主入口点

查看 hosts 文件条目，并切换其启用（注释）状态。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 hostswitch 模块
sys.path.insert(0, str(Path(__file__).parent))

from hostswitch.cli import main


if __name__ == '__main__':
    sys.exit(main())
