# -*- coding: utf-8 -*-

import logging
import mimetypes
from pathlib import Path
import requests
from explorer.config import CONFIG

logger = logging.getLogger('openapi-explorer')

# swagger-ui-distから取得するファイル
ASSET_FILES = [
    "swagger-ui.css",
    "swagger-ui-bundle.js",
    "swagger-ui-standalone-preset.js",
]


def fetch_assets(dest_dir):
    """
    Swagger UIのアセットをCDNから取得してdest_dirに保存する
    保存できたファイルのリストを返す
    """
    dest_dir = Path(dest_dir)
    dest_dir.mkdir(exist_ok=True, parents=True)
    base_url = CONFIG["swagger_ui_cdn"].rstrip("/")
    saved_files = []
    for name in ASSET_FILES:
        url = f"{base_url}/{name}"
        try:
            logger.info(f"外部リソースを取得中: {url}")
            response = requests.get(url, timeout=CONFIG["request_timeout"])
        except requests.RequestException as e:
            logger.error(f"リソース取得中にエラーが発生しました: {url}, エラー: {e}")
            continue
        if response.status_code != 200:
            logger.warning(f"リソースの取得に失敗しました: {url}, ステータスコード: {response.status_code}")
            continue
        asset_file = dest_dir / name
        with open(asset_file, "wb") as f:
            f.write(response.content)
        logger.info(f"外部リソースを取得しました: {name} ({len(response.content)} バイト)")
        saved_files.append(asset_file)
    return saved_files


def has_local_assets(asset_dir):
    return all((Path(asset_dir) / name).is_file() for name in ASSET_FILES)


def content_type_for(name):
    if name.endswith(".js"):
        return "application/javascript"
    content_type, _ = mimetypes.guess_type(name)
    return content_type or "application/octet-stream"
