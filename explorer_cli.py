import sys
import logging
from explorer.config import CONFIG
from explorer.assets import fetch_assets
from explorer.site_generator import generate_static_site
from explorer.spec_loader import load_spec, write_spec_yaml
from explorer.cleaner import clean

logger = logging.getLogger('openapi-explorer')

# ロギング設定
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def print_usage():
    print("""
Usage: python explorer_cli.py <command> [spec_file]

Commands:
  build     静的サイト生成 (Swagger UIはCDNから読み込む)
  bundle    Swagger UIのアセットを含めて静的サイト生成
  serve     エクスプローラを起動 (/explorer/)
  spec      指定した仕様書をYAMLに変換して specs/swagger.yaml に保存
  fetch     Swagger UIのアセットのみ取得
  clean     クリーンアップのみ
""")

def build_only(vendor_assets=False):
    logger.info("静的サイト生成を実行します")
    explorer_dir = generate_static_site(vendor_assets=vendor_assets)
    logger.info(f"エクスプローラを生成しました: {explorer_dir / 'index.html'}")

def serve():
    from explorer.server import run
    logger.info("エクスプローラを起動します")
    run()

def convert_spec(source):
    """
    仕様書 (YAML / JSON) を読み込み、設定された仕様書ファイルにYAMLとして保存する
    """
    spec_data = load_spec(source)
    if spec_data is None:
        logger.error(f"仕様書を変換できませんでした: {source}")
        return False
    write_spec_yaml(spec_data, CONFIG["spec_file"])
    return True

def fetch_only():
    saved_files = fetch_assets(CONFIG["asset_dir"])
    logger.info(f"{len(saved_files)}件のアセットを取得しました")

def main(argv=None):
    argv = sys.argv if argv is None else argv
    if len(argv) <= 1:
        print_usage()
        return 0
    command = argv[1]
    if command == "spec":
        if len(argv) <= 2:
            print_usage()
            return 1
        return 0 if convert_spec(argv[2]) else 1
    if len(argv) > 2:
        CONFIG["spec_file"] = argv[2]
    if command == "build":
        build_only()
    elif command == "bundle":
        build_only(vendor_assets=True)
    elif command == "serve":
        serve()
    elif command == "fetch":
        fetch_only()
    elif command == "clean":
        clean()
    else:
        print_usage()
    return 0

if __name__ == "__main__":
    sys.exit(main())
