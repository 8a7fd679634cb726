# -*- coding: utf-8 -*-

from pathlib import Path
from jinja2 import Environment, FileSystemLoader
from explorer.viewer_config import build_viewer_config, DOM_ID

TEMPLATES_DIR = Path(__file__).parent / "templates"

DEFAULT_TITLE = "API Explorer"


def _environment():
    return Environment(loader=FileSystemLoader(TEMPLATES_DIR))


def start(widget_factory):
    """
    ページ読み込み時の処理
    ビューア設定を1件生成してウィジェットに渡す
    """
    config = build_viewer_config()
    widget_factory(config)


def render_initializer(config):
    """
    swagger-initializer.js を生成する
    presets / plugins は文字列ではなくJavaScriptの参照として出力する
    """
    template = _environment().get_template("swagger-initializer.js")
    return template.render(options=config.to_options()) + "\n"


def render_index(asset_base, title=DEFAULT_TITLE):
    """
    Swagger UIを読み込むindex.htmlを生成する
    asset_base: swagger-ui-distのファイルを置いた場所 (CDNまたは相対パス)
    """
    template = _environment().get_template("index.html")
    return template.render(
        asset_base=asset_base.rstrip("/"),
        mount_id=DOM_ID.lstrip("#"),
        title=title,
    )
