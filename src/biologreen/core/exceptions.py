"""BioLogreen SDK 例外クラス階層

SDK全体で使用される例外クラスを定義。
エラーコード体系に基づいた構造化されたエラーハンドリングを提供。

呼び出し側が区別すべき失敗は2種類のみ:
    NetworkError: HTTP応答そのものを得られなかった（または想定外の形式だった）
    APIError: サーバーが非2xxステータスで失敗を返した
"""

from datetime import datetime
from typing import Any, Dict, Optional


class BioLogreenError(Exception):
    """BioLogreen SDKの基底例外クラス

    すべてのカスタム例外の親クラス。
    エラーコード、詳細情報、原因となった例外の連鎖をサポート。

    Attributes:
        message: ユーザー向けエラーメッセージ
        error_code: エラーコード（E0001など）
        details: 詳細情報の辞書
        cause: 原因となった例外
        timestamp: エラー発生時刻
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        """例外を初期化

        Args:
            message: エラーメッセージ
            error_code: エラーコード（E0001-E9999）
            details: 追加の詳細情報
            cause: 原因となった例外
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """エラー情報を辞書形式で取得

        Returns:
            Dict[str, Any]: エラー情報の辞書
        """
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """文字列表現"""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


# ============================================================================
# 設定関連エラー (E0001-E0099)
# ============================================================================


class ConfigurationError(BioLogreenError):
    """設定関連エラー (E0001-E0099)

    クライアント構築時の設定値検証、設定ファイルの読み込みに関するエラー

    エラーコード:
        E0001: 無効な設定値（ヘッダーに使えないAPIキーなど）
        E0002: 設定ファイルが見つからない / 形式が無効
    """

    def __init__(self, message: str, config_file: Optional[str] = None, **kwargs):
        # デフォルトエラーコードを設定
        if "error_code" not in kwargs:
            kwargs["error_code"] = "E0001"
        super().__init__(message, **kwargs)
        if config_file:
            self.details["config_file"] = config_file


# ============================================================================
# API関連エラー (E2000-E2999)
# ============================================================================


class APIError(BioLogreenError):
    """APIエラー (E2000)

    HTTP通信は完了したが、サーバーが非2xxステータスで失敗を通知した場合のエラー。
    リトライは行わず、そのまま呼び出し側へ返す。

    Attributes:
        status_code: HTTPステータスコード
    """

    def __init__(self, message: str, status_code: int, **kwargs):
        if "error_code" not in kwargs:
            kwargs["error_code"] = "E2000"
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.details["status_code"] = status_code

    def __str__(self) -> str:
        return f"[{self.error_code}] API error: {self.message} (status: {self.status_code})"


# ============================================================================
# ネットワーク関連エラー (E5200-E5599)
# ============================================================================


class NetworkError(BioLogreenError):
    """ネットワーク関連エラー (E5200-E5299, E5502)

    利用可能なHTTP応答を得られなかった場合のエラー。
    原因となった例外を cause と __cause__ の両方に保持する。

    エラーコード:
        E5200: ネットワークエラー（汎用）
        E5201: HTTPクライアントエラー
        E5203: プロキシ接続エラー
        E5204: リクエストボディのエンコード失敗
        E5205: タイムアウト
        E5206: レスポンス形式エラー
        E5502: 接続失敗（DNS、接続拒否、TLS）
    """

    def __init__(self, message: str, url: Optional[str] = None, **kwargs):
        # デフォルトエラーコードを設定
        if "error_code" not in kwargs:
            kwargs["error_code"] = "E5200"
        super().__init__(message, **kwargs)
        if url:
            self.details["url"] = url


class ResponseFormatError(NetworkError):
    """レスポンス形式エラー (E5206)

    応答ボディがJSONとして解釈できない、または期待した形でない場合のエラー。
    APIエラーではなくトランスポート側の失敗として扱う。
    """

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, error_code="E5206", **kwargs)
        self.status_code = status_code
        if status_code is not None:
            self.details["status_code"] = status_code
