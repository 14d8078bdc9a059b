"""
BioLogreen Core Package

例外クラス、データモデル、API通信クライアントを含む。
"""

from biologreen.core.exceptions import (
    APIError,
    BioLogreenError,
    ConfigurationError,
    NetworkError,
    ResponseFormatError,
)
from biologreen.core.models import (
    CustomFields,
    FaceAuthResponse,
    JSONValue,
    LoginRequest,
    SignupRequest,
    encode_image,
)

__all__ = [
    # 例外クラス
    "BioLogreenError",
    "ConfigurationError",
    "NetworkError",
    "ResponseFormatError",
    "APIError",
    # データモデル
    "FaceAuthResponse",
    "SignupRequest",
    "LoginRequest",
    "CustomFields",
    "JSONValue",
    "encode_image",
]
