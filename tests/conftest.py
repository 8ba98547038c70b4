import logging
from pathlib import Path

import pytest

from hostswitch.privilege import Platform


SAMPLE_HOSTS = (
    "# Static table lookup for hostnames.\n"
    "127.0.0.1\tlocalhost\n"
    "::1\tlocalhost ip6-localhost\n"
    "\n"
    "# 10.0.0.5 dev.local api.dev.local\n"
    "192.168.1.10 nas.lan # storage box\n"
)


class FakePlatform(Platform):
    name = "Fake"

    def __init__(self, hosts_path: Path):
        self._hosts_path = hosts_path

    @property
    def hosts_path(self) -> Path:
        return self._hosts_path

    def copy_command(self, src: Path, dst: Path) -> list:
        return ["fake-elevate", "cp", str(src), str(dst)]


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("hostswitch.tests")


@pytest.fixture
def hosts_file(tmp_path: Path) -> Path:
    path = tmp_path / "hosts"
    path.write_text(SAMPLE_HOSTS, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_app_logger():
    yield
    app_logger = logging.getLogger("hostswitch")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)


@pytest.fixture
def deny_write_probe(monkeypatch):
    """Makes the write-permission probe fail the way an OS-protected directory does."""
    import builtins

    from hostswitch import privilege

    real_open = builtins.open

    def guarded_open(file, *args, **kwargs):
        if str(file).endswith(privilege.PROBE_SUFFIX):
            raise PermissionError(13, "Permission denied", str(file))
        return real_open(file, *args, **kwargs)

    monkeypatch.setattr(privilege, "open", guarded_open, raising=False)
