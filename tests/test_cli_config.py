from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _run_cli(tmp_path: Path, *args: str) -> subprocess.CompletedProcess[str]:
    config_file = tmp_path / "config.toml"
    if not config_file.exists():
        config_file.write_text("[dashboard]\nmax_articles = 10\n", encoding="utf-8")
    cmd = [
        sys.executable,
        "-m",
        "newsdash.config_manager",
        "--config",
        str(config_file),
        *args,
    ]
    env = {key: value for key, value in os.environ.items() if not key.startswith("NEWSDASH__")}
    return subprocess.run(
        cmd, check=False, capture_output=True, text=True, cwd=ROOT, env=env
    )


def test_validate_success(tmp_path: Path) -> None:
    result = _run_cli(tmp_path, "--validate")
    assert result.returncode == 0
    assert "Configuration OK" in result.stdout


def test_explain_reports_source(tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text("NEWSDASH__DASHBOARD__MAX_ARTICLES=20\n", encoding="utf-8")
    result = _run_cli(tmp_path, "--explain", "dashboard.max_articles")
    assert result.returncode == 0
    assert "dashboard.max_articles = 20" in result.stdout
    assert "NEWSDASH__DASHBOARD__MAX_ARTICLES" in result.stdout


def test_validate_failure_reports_error(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text("[dashboard]\nmax_articles = 'oops'\n", encoding="utf-8")
    result = _run_cli(tmp_path, "--validate")
    assert result.returncode == 1
    assert "dashboard.max_articles" in result.stderr
    assert "file" in result.stderr


def test_show_sources_lists_layers(tmp_path: Path) -> None:
    (tmp_path / ".env").touch()
    result = _run_cli(tmp_path, "--show-sources")
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines[0].startswith("defaults:")
    assert lines[1] == f"config file: {tmp_path / 'config.toml'}"
    assert lines[2] == f".env file: {tmp_path / '.env'}"
    assert lines[3] == "environment: NEWSDASH__<SECTION>__<KEY>"


def test_explain_unknown_key_fails(tmp_path: Path) -> None:
    result = _run_cli(tmp_path, "--explain", "dashboard.page_size")
    assert result.returncode == 1
    assert "Unknown configuration key" in result.stderr
