"""
BioLogreen SDK 定数定義

SDK全体で使用される定数（バージョン、エンドポイント、タイムアウト等）を管理。
値はすべてプロセス全体で共通で、クライアント構築後に変更されることはない。
"""

# ============================================================================
# バージョン情報
# ============================================================================

VERSION = "0.1.0"

# ============================================================================
# API設定
# ============================================================================

DEFAULT_BASE_URL = "https://api.biologreen.com/v1"

SIGNUP_FACE_ENDPOINT = "/auth/signup-face"
LOGIN_FACE_ENDPOINT = "/auth/login-face"

# ヘッダー
API_KEY_HEADER = "X-API-KEY"
USER_AGENT = f"BioLogreen-Python-SDK/{VERSION}"
JSON_CONTENT_TYPE = "application/json"

# エラーレスポンスに detail が無い場合のメッセージ
UNKNOWN_API_ERROR_MESSAGE = "An unknown API error occurred."

# ============================================================================
# タイムアウト設定（秒）
# ============================================================================

DEFAULT_TIMEOUT = 30.0

# ============================================================================
# 設定ファイル
# ============================================================================

# YAML設定ファイルのトップレベルキー
CONFIG_SECTION = "biologreen"
MAX_CONFIG_FILE_SIZE = 1 * 1024 * 1024  # 1MB

# ============================================================================
# ヘルパー関数
# ============================================================================


def mask_api_key(api_key: str) -> str:
    """APIキーをマスク表示用に変換

    Args:
        api_key: マスクするAPIキー

    Returns:
        str: マスクされたAPIキー（例: "bl_...abcd"）
    """
    if not api_key or len(api_key) < 8:
        return "***"

    return f"{api_key[:3]}...{api_key[-4:]}"
