"""API通信関連モジュール

- base.py: BaseAPIClient（API通信の基底クラス）
- face_auth.py: BioLogreenClient（顔登録/顔認証）
"""

from .base import BaseAPIClient
from .face_auth import BioLogreenClient

__all__ = [
    "BaseAPIClient",
    "BioLogreenClient",
]
