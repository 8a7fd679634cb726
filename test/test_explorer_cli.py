# -*- coding: utf-8 -*-

from pathlib import Path
import yaml

import explorer_cli
import explorer.assets as assets
import mock_cdn
from conftest import MOCK_SPEC_FILE


def test_no_command_prints_usage(capsys):
    assert explorer_cli.main(["explorer_cli.py"]) == 0
    assert "Usage: python explorer_cli.py" in capsys.readouterr().out


def test_unknown_command_prints_usage(capsys, test_config):
    explorer_cli.main(["explorer_cli.py", "deploy"])
    assert "Commands:" in capsys.readouterr().out


def test_build_command(test_config):
    assert explorer_cli.main(["explorer_cli.py", "build"]) == 0
    explorer_dir = Path(test_config["static_site_dir"]) / "explorer"
    assert (explorer_dir / "index.html").exists()
    assert (explorer_dir / "swagger.json").exists()


def test_bundle_command(monkeypatch, test_config):
    monkeypatch.setattr(assets.requests, "get", mock_cdn.simple_mock_requests_get)
    explorer_cli.main(["explorer_cli.py", "bundle"])
    explorer_dir = Path(test_config["static_site_dir"]) / "explorer"
    assert (explorer_dir / "swagger-ui-bundle.js").exists()


def test_fetch_command(monkeypatch, test_config):
    monkeypatch.setattr(assets.requests, "get", mock_cdn.simple_mock_requests_get)
    explorer_cli.main(["explorer_cli.py", "fetch"])
    assert assets.has_local_assets(test_config["asset_dir"])


def test_spec_command_writes_yaml(tmp_path, monkeypatch, test_config):
    target = tmp_path / "specs" / "swagger.yaml"
    monkeypatch.setitem(test_config, "spec_file", str(target))
    assert explorer_cli.main(["explorer_cli.py", "spec", str(MOCK_SPEC_FILE)]) == 0
    with open(target, encoding="utf-8") as f:
        assert yaml.safe_load(f)["info"]["title"] == "Nanocl Daemon API"


def test_spec_command_with_missing_source(tmp_path, test_config):
    assert explorer_cli.main(["explorer_cli.py", "spec", str(tmp_path / "missing.yml")]) == 1
    assert explorer_cli.main(["explorer_cli.py", "spec"]) == 1


def test_serve_command_runs_server(monkeypatch, test_config):
    import explorer.server
    started = []
    monkeypatch.setattr(explorer.server, "run", lambda: started.append(True))
    explorer_cli.main(["explorer_cli.py", "serve"])
    assert started == [True]


def test_clean_command(test_config):
    explorer_cli.main(["explorer_cli.py", "build"])
    explorer_cli.main(["explorer_cli.py", "clean"])
    assert not Path(test_config["static_site_dir"]).exists()


def test_spec_file_argument(tmp_path, test_config):
    spec_file = tmp_path / "other.yml"
    spec_file.write_text("openapi: 3.0.0\ninfo:\n  title: Other API\n", encoding="utf-8")
    explorer_cli.main(["explorer_cli.py", "build", str(spec_file)])
    index = Path(test_config["static_site_dir"]) / "explorer" / "index.html"
    assert "<title>Other API</title>" in index.read_text(encoding="utf-8")


def test_build_command_with_non_utf8_spec(tmp_path, test_config):
    spec_file = tmp_path / "binary.yml"
    spec_file.write_bytes(b"\xff\xfe\x00")
    assert explorer_cli.main(["explorer_cli.py", "build", str(spec_file)]) == 0
    explorer_dir = Path(test_config["static_site_dir"]) / "explorer"
    assert not (explorer_dir / "swagger.json").exists()
    assert explorer_cli.main(["explorer_cli.py", "spec", str(spec_file)]) == 1
