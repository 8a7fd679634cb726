# -*- coding: utf-8 -*-

import logging
from pathlib import Path
from explorer.config import CONFIG
from explorer.assets import fetch_assets, ASSET_FILES
from explorer.bootstrap import start, render_initializer, render_index, DEFAULT_TITLE
from explorer.spec_loader import load_spec, spec_to_json, spec_title

logger = logging.getLogger('openapi-explorer')

EXPLORER_DIR_NAME = "explorer"


def _write(path, content):
    with open(path, "w", encoding='utf-8') as f:
        f.write(content)
    logger.info(f"ファイルを生成しました: {path}")


def generate_static_site(vendor_assets=False):
    """
    API仕様書からエクスプローラの静的サイトを生成する
    vendor_assets: Trueの場合はSwagger UIのアセットをサイト内に保存する
    生成先ディレクトリを返す
    """
    static_site_dir = Path(CONFIG["static_site_dir"])
    explorer_dir = static_site_dir / EXPLORER_DIR_NAME
    logger.info(f"静的サイトの生成を開始します [出力先: {explorer_dir}]")
    explorer_dir.mkdir(exist_ok=True, parents=True)

    spec_data = load_spec(CONFIG["spec_file"])
    if spec_data is None:
        logger.warning("仕様書が読み込めなかったため、swagger.jsonは生成されません")
    else:
        try:
            _write(explorer_dir / "swagger.json", spec_to_json(spec_data))
        except (TypeError, ValueError) as e:
            logger.error(f"swagger.jsonの生成中にエラーが発生しました: {e}")

    asset_base = CONFIG["swagger_ui_cdn"]
    if vendor_assets:
        saved_files = fetch_assets(explorer_dir)
        if len(saved_files) == len(ASSET_FILES):
            asset_base = "."
        else:
            logger.warning(f"アセットを取得できなかったためCDNを使用します ({len(saved_files)} 件取得)")

    scripts = []
    start(lambda config: scripts.append(render_initializer(config)))
    _write(explorer_dir / "swagger-initializer.js", scripts[0])

    title = spec_title(spec_data, DEFAULT_TITLE)
    _write(explorer_dir / "index.html", render_index(asset_base, title=title))

    logger.info(f"静的サイトが {explorer_dir} に生成されました")
    return explorer_dir
