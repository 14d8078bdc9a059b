"""
BioLogreen Configuration Package

settingsモジュールによる定数管理と、
ClientConfigによるクライアント設定の検証・読み込みを行う。
"""

from biologreen.configuration.client_config import ClientConfig, is_valid_header_value
from biologreen.configuration.settings import (
    API_KEY_HEADER,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    LOGIN_FACE_ENDPOINT,
    SIGNUP_FACE_ENDPOINT,
    UNKNOWN_API_ERROR_MESSAGE,
    USER_AGENT,
    VERSION,
    mask_api_key,
)

__all__ = [
    # クラス
    "ClientConfig",
    # バージョン情報
    "VERSION",
    # API設定
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "SIGNUP_FACE_ENDPOINT",
    "LOGIN_FACE_ENDPOINT",
    "API_KEY_HEADER",
    "USER_AGENT",
    "UNKNOWN_API_ERROR_MESSAGE",
    # ヘルパー関数
    "is_valid_header_value",
    "mask_api_key",
]
