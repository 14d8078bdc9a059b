"""
BioLogreen Python SDK

BioLogreen 顔認証APIのクライアントライブラリ。
顔画像によるユーザー登録と認証を提供する。
"""

from biologreen.configuration.settings import VERSION

__version__ = VERSION
__license__ = "MIT"

from biologreen.configuration.client_config import ClientConfig
from biologreen.core.api.face_auth import BioLogreenClient
from biologreen.core.exceptions import (
    APIError,
    BioLogreenError,
    ConfigurationError,
    NetworkError,
    ResponseFormatError,
)
from biologreen.core.models import FaceAuthResponse
from biologreen.utils.logger_manager import LoggerManager

__all__ = [
    # バージョン情報
    "__version__",
    "__license__",
    # クライアント
    "BioLogreenClient",
    "ClientConfig",
    "FaceAuthResponse",
    # 例外クラス
    "BioLogreenError",
    "ConfigurationError",
    "NetworkError",
    "ResponseFormatError",
    "APIError",
    # ログ管理
    "LoggerManager",
]
