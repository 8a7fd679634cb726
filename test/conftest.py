import os
import sys
from pathlib import Path
import pytest

# プロジェクトのルートディレクトリをパスに追加
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from explorer.config import CONFIG

MOCK_SPEC_FILE = Path(__file__).parent / "mock_data" / "openapi.yml"


@pytest.fixture
def test_config(tmp_path, monkeypatch):
    """
    出力先をテスト用の一時ディレクトリに変更する (テスト終了時に元に戻る)
    """
    static_site_dir = tmp_path / "static_site"
    monkeypatch.setitem(CONFIG, "static_site_dir", str(static_site_dir))
    monkeypatch.setitem(CONFIG, "asset_dir", str(static_site_dir / "explorer"))
    monkeypatch.setitem(CONFIG, "spec_file", str(MOCK_SPEC_FILE))
    return CONFIG
