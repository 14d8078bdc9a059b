#!/usr/bin/env python3
"""
手動テスト: BioLogreenClient実動作確認
実行方法:
    python scripts/manual_tests/manual_face_auth.py login face.jpg --config api.yaml
    python scripts/manual_tests/manual_face_auth.py signup face.jpg --api-key bl_... \
        --custom-fields '{"name": "Alice"}'

実際のAPIへリクエストを送信するため、有効なAPIキーが必要。
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# プロジェクトルートをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

try:
    from biologreen import BioLogreenClient, ClientConfig
    from biologreen.core.exceptions import APIError, BioLogreenError, NetworkError
    from biologreen.utils.logger_manager import LoggerManager
except ImportError as e:
    print(f"Error: 必要なモジュールをインポートできません: {e}")
    sys.exit(1)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="BioLogreen 顔認証APIの手動確認")
    parser.add_argument("action", choices=["signup", "login"], help="実行する操作")
    parser.add_argument("image", type=Path, help="顔画像ファイル")
    parser.add_argument("--config", type=Path, help="YAML設定ファイル")
    parser.add_argument("--api-key", help="APIキー（--config未指定時に必須）")
    parser.add_argument("--base-url", help="APIベースURL")
    parser.add_argument("--custom-fields", help="signup時に保存するJSONオブジェクト")
    parser.add_argument("--debug", action="store_true", help="デバッグログを表示")
    return parser.parse_args()


def build_config(args: argparse.Namespace) -> ClientConfig:
    if args.config:
        return ClientConfig.from_yaml(args.config)
    if not args.api_key:
        print("Error: --config または --api-key を指定してください。")
        sys.exit(2)
    return ClientConfig.create(args.api_key, base_url=args.base_url)


def parse_custom_fields(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    """--custom-fields をJSONオブジェクトとして解釈（不正な場合は終了）"""
    if raw is None:
        return None
    try:
        custom_fields = json.loads(raw)
    except ValueError as e:
        print(f"Error: --custom-fields がJSONとして解釈できません: {e}")
        sys.exit(2)
    if not isinstance(custom_fields, dict):
        print("Error: --custom-fields にはJSONオブジェクトを指定してください。")
        sys.exit(2)
    return custom_fields


async def run(args: argparse.Namespace) -> int:
    config = build_config(args)
    image_bytes = args.image.read_bytes()
    custom_fields = parse_custom_fields(args.custom_fields)

    async with BioLogreenClient.from_config(config) as client:
        print(f"Client: {client!r}")
        try:
            if args.action == "signup":
                result = await client.signup_with_face(image_bytes, custom_fields)
            else:
                result = await client.login_with_face(image_bytes)
        except APIError as e:
            print(f"❌ API error (status {e.status_code}): {e.message}")
            return 1
        except NetworkError as e:
            print(f"❌ Network error: {e}")
            return 1

    print("✅ Success")
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


def main():
    args = parse_args()
    LoggerManager(debug_mode=args.debug)
    try:
        sys.exit(asyncio.run(run(args)))
    except BioLogreenError as e:
        print(f"❌ {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
