# -*- coding: utf-8 -*-

from dataclasses import dataclass

# 外部ライブラリ (swagger-ui-dist) が提供するプリセット・プラグイン
APIS_PRESET = "SwaggerUIBundle.presets.apis"
STANDALONE_PRESET = "SwaggerUIStandalonePreset"
DOWNLOAD_URL_PLUGIN = "SwaggerUIBundle.plugins.DownloadUrl"

# Swagger UIでのアルファベット順の指定
ALPHA_SORTER = "alpha"

SPEC_URL = "/explorer/swagger.json"
DOM_ID = "#swagger-ui"


@dataclass(frozen=True)
class ViewerConfig:
    """
    Swagger UIに渡す設定
    presets / plugins はJavaScript側の参照名をそのまま保持する
    """
    url: str
    dom_id: str
    deep_linking: bool
    operations_sorter: str
    apis_sorter: str
    tags_sorter: str
    presets: tuple
    plugins: tuple

    def to_options(self):
        """
        SwaggerUIBundleのオプション名に対応した辞書を返す (呼び出し毎に新しい辞書)
        """
        return {
            "url": self.url,
            "dom_id": self.dom_id,
            "deepLinking": self.deep_linking,
            "operationsSorter": self.operations_sorter,
            "apisSorter": self.apis_sorter,
            "tagsSorter": self.tags_sorter,
            "presets": list(self.presets),
            "plugins": list(self.plugins),
        }


def build_viewer_config():
    """
    ビューア設定を1件生成する
    """
    return ViewerConfig(
        url=SPEC_URL,
        dom_id=DOM_ID,
        deep_linking=True,
        operations_sorter=ALPHA_SORTER,
        apis_sorter=ALPHA_SORTER,
        tags_sorter=ALPHA_SORTER,
        presets=(APIS_PRESET, STANDALONE_PRESET),
        plugins=(DOWNLOAD_URL_PLUGIN,),
    )
