# -*- coding: utf-8 -*-

import shutil
import logging
from pathlib import Path
from explorer.config import CONFIG
from explorer.site_generator import EXPLORER_DIR_NAME

logger = logging.getLogger('openapi-explorer')


def clean_directories():
    """
    生成したエクスプローラと取得済みのSwagger UIアセットを削除する
    静的サイトディレクトリは空になった場合のみ削除する
    削除したディレクトリのリストを返す
    """
    static_site_dir = Path(CONFIG["static_site_dir"])
    targets = [static_site_dir / EXPLORER_DIR_NAME, Path(CONFIG["asset_dir"])]
    removed = []
    for target in targets:
        if target.is_dir():
            logger.info(f"ディレクトリを削除: {target}")
            shutil.rmtree(target)
            removed.append(target)
    if static_site_dir.is_dir() and not any(static_site_dir.iterdir()):
        static_site_dir.rmdir()
        removed.append(static_site_dir)
    return removed


def clean():
    removed = clean_directories()
    logger.info(f"クリーンアップが完了しました ({len(removed)} 件削除)")
