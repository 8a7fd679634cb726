# -*- coding: utf-8 -*-

import json
import logging
from pathlib import Path
import yaml

logger = logging.getLogger('openapi-explorer')


def load_spec(spec_file):
    """
    API仕様書 (YAML / JSON) を読み込む
    読み込めない場合はNoneを返す
    """
    spec_file = Path(spec_file)
    try:
        with open(spec_file, 'r', encoding='utf-8') as f:
            content = f.read()
        # JSONはYAMLとしても読み込める
        spec_data = yaml.safe_load(content)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.error(f"仕様書の読み込み中にエラーが発生: {spec_file} - {e}")
        return None
    if not isinstance(spec_data, dict):
        logger.error(f"仕様書の形式が不正です: {spec_file}")
        return None
    logger.info(f"仕様書を読み込みました: {spec_file.name} ({len(content)} バイト)")
    return spec_data


def spec_to_json(spec_data):
    # YAMLの日付などはJSONでは文字列として出力する
    return json.dumps(spec_data, indent=2, ensure_ascii=False, default=str)


def write_spec_yaml(spec_data, spec_file):
    """
    API仕様書をYAMLとして保存する
    """
    spec_file = Path(spec_file)
    spec_file.parent.mkdir(exist_ok=True, parents=True)
    with open(spec_file, "w", encoding='utf-8') as f:
        yaml.safe_dump(spec_data, f, allow_unicode=True, sort_keys=False)
    logger.info(f"仕様書を保存しました: {spec_file}")
    return spec_file


def spec_title(spec_data, default):
    info = spec_data.get('info') if isinstance(spec_data, dict) else None
    if isinstance(info, dict) and info.get('title'):
        return str(info['title'])
    return default
