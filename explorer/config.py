# -*- coding: utf-8 -*-

# 設定
CONFIG = {
    # API仕様書ファイル (YAML / JSON)
    "spec_file": "specs/swagger.yaml",

    # 静的サイトの出力先ディレクトリ
    "static_site_dir": "static_site",

    # Swagger UIアセットの保存先
    "asset_dir": "static_site/explorer",

    # Swagger UIアセットの取得元
    "swagger_ui_cdn": "https://cdn.jsdelivr.net/npm/swagger-ui-dist@5",

    # サーバーの待ち受けアドレス
    "host": "0.0.0.0",
    "port": 8585,

    # アセット取得のタイムアウト (秒)
    "request_timeout": 30,
}
