import json

import pytest

from hostswitch import cli

from tests.conftest import SAMPLE_HOSTS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("HOSTS_FILE", "HOSTS_BACKUP_SUFFIX", "LOG_LEVEL", "ELEVATION_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def run(hosts_file, *args):
    return cli.main(["--hosts-file", str(hosts_file), "--log-level", "error", *args])


def test_list_json(hosts_file, capsys) -> None:
    assert run(hosts_file, "list", "--json") == cli.EXIT_OK
    data = json.loads(capsys.readouterr().out)
    assert data[0] == {
        "address": "127.0.0.1",
        "hostnames": ["localhost"],
        "line": "127.0.0.1\tlocalhost",
        "enabled": True,
        "comment": "",
    }
    assert len(data) == 4


def test_list_disabled(hosts_file, capsys) -> None:
    assert run(hosts_file, "list", "--disabled") == cli.EXIT_OK
    out = capsys.readouterr().out
    assert out == "# 10.0.0.5\tdev.local api.dev.local\n"


def test_raw(hosts_file, capsys) -> None:
    assert run(hosts_file, "raw") == cli.EXIT_OK
    assert capsys.readouterr().out == SAMPLE_HOSTS


def test_status_and_toggle(hosts_file, capsys) -> None:
    assert run(hosts_file, "status", "127.0.0.1") == cli.EXIT_OK
    assert capsys.readouterr().out == "enabled\n"

    assert run(hosts_file, "toggle", "127.0.0.1") == cli.EXIT_OK
    assert capsys.readouterr().out == "disabled\n"
    assert "# 127.0.0.1\tlocalhost\n" in hosts_file.read_text(encoding="utf-8")


def test_not_found_exit_code(hosts_file, capsys) -> None:
    assert run(hosts_file, "toggle", "9.9.9.9") == cli.EXIT_NOT_FOUND
    assert "9.9.9.9" in capsys.readouterr().err
    assert run(hosts_file, "status", "9.9.9.9") == cli.EXIT_NOT_FOUND


def test_replace_and_restore(hosts_file, tmp_path) -> None:
    source = tmp_path / "new_hosts"
    source.write_text("0.0.0.0 blocked.example\n", encoding="utf-8")

    assert run(hosts_file, "toggle", "::1") == cli.EXIT_OK
    assert run(hosts_file, "replace", str(source)) == cli.EXIT_OK
    assert hosts_file.read_text(encoding="utf-8") == "0.0.0.0 blocked.example\n"

    assert run(hosts_file, "restore") == cli.EXIT_OK
    assert hosts_file.read_text(encoding="utf-8") == SAMPLE_HOSTS


def test_check(hosts_file, capsys) -> None:
    assert run(hosts_file, "check") == cli.EXIT_OK
    assert capsys.readouterr().out == "readable: yes\nwritable: yes\n"


def test_missing_hosts_file(tmp_path, capsys) -> None:
    assert run(tmp_path / "missing", "list") == cli.EXIT_ERROR
    assert capsys.readouterr().err
