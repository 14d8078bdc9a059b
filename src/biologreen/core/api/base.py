"""API通信基底クラス

すべてのAPI通信クライアントの基底となるクラス。
セッション管理、SSL/TLS、タイムアウト、ステータスによるエラー判別を実装。

リトライは行わない。失敗はすべて NetworkError か APIError として
そのまま呼び出し側へ返す。
"""

# 標準ライブラリ
import asyncio
import json
import logging
import ssl
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Union

# サードパーティ
import aiohttp
import certifi

# プロジェクト内
from biologreen.configuration.client_config import ClientConfig
from biologreen.configuration.settings import (
    JSON_CONTENT_TYPE,
    UNKNOWN_API_ERROR_MESSAGE,
    mask_api_key,
)
from biologreen.core.exceptions import APIError, NetworkError, ResponseFormatError

logger = logging.getLogger(__name__)


class BaseAPIClient(ABC):
    """API通信の基底クラス

    設定はすべて構築時に確定し、以後変更しない。
    セッションは最初のリクエスト時に1つだけ作成され、並行リクエスト間で共有される。

    Attributes:
        config: 検証済みのクライアント設定
        _headers: 全リクエスト共通のヘッダー（構築時に確定）
        _session: aiohttp ClientSession
    """

    def __init__(self, config: ClientConfig):
        """BaseAPIClientの初期化

        Args:
            config: 検証済みのクライアント設定
        """
        self.config = config
        self._headers: Dict[str, str] = dict(self._build_headers())
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def timeout(self) -> float:
        return self.config.timeout

    # ------------------------------------------------------------------------
    # 非同期コンテキストマネージャー
    # ------------------------------------------------------------------------

    async def __aenter__(self):
        """セッションを初期化し、自身を返す"""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """セッションをクリーンアップする"""
        await self.close()

    # ------------------------------------------------------------------------
    # セッション管理
    # ------------------------------------------------------------------------

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """セッションが初期化されていることを確認

        セッションが存在しない（またはクローズ済みの）場合は新規作成する。
        セッションは作成したイベントループに束縛されるため、別のループから
        呼ばれた場合（asyncio.runを複数回呼ぶ場合など）も新規作成する。
        作成処理の途中でawaitしないため、並行して呼ばれても作成は1回だけ。

        Returns:
            aiohttp.ClientSession: 利用可能なセッション
        """
        loop = asyncio.get_running_loop()
        if (
            self._session is None
            or self._session.closed
            or self._session_loop is not loop
        ):
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            connector = aiohttp.TCPConnector(ssl=self._create_ssl_context())

            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=timeout,
                trust_env=True,  # 環境変数のプロキシ設定を信頼
            )
            self._session_loop = loop
            logger.debug(
                f"{self.__class__.__name__} session initialized",
                extra={"base_url": self.base_url, "timeout": self.timeout},
            )

        return self._session

    def _create_ssl_context(self) -> ssl.SSLContext:
        """SSL/TLSコンテキストを作成

        Returns:
            ssl.SSLContext: 設定済みのSSLコンテキスト
        """
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        ssl_context.check_hostname = True
        ssl_context.verify_mode = ssl.CERT_REQUIRED
        ssl_context.minimum_version = ssl.TLSVersion.TLSv1_2
        return ssl_context

    async def close(self) -> None:
        """セッションをクローズ（複数回呼んでも安全）

        別のイベントループで作成されたセッションはクローズできないため、参照を破棄するのみ。
        """
        if self._session is not None:
            if self._session_loop is asyncio.get_running_loop():
                await self._session.close()
            self._session = None
            self._session_loop = None
            logger.debug(f"{self.__class__.__name__} session closed")

    # ------------------------------------------------------------------------
    # リクエスト処理
    # ------------------------------------------------------------------------

    async def _request_json(
        self, method: str, endpoint: str, payload: Dict[str, Any]
    ) -> Tuple[int, Any]:
        """JSONボディ付きでHTTPリクエストを実行

        URLは base_url と endpoint を単純に連結する（スラッシュの正規化はしない）。
        非2xxの場合は APIError を送出する。

        Args:
            method: HTTPメソッド
            endpoint: エンドポイントパス
            payload: リクエストボディ

        Returns:
            Tuple[int, Any]: (ステータスコード, デコード済みのレスポンスボディ)

        Raises:
            NetworkError: 応答を得られなかった、またはボディが解釈できない
            APIError: サーバーが非2xxステータスを返した
        """
        url = f"{self.base_url}{endpoint}"

        try:
            body = json.dumps(payload, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise NetworkError(
                f"Failed to encode request body: {e}", url=url, error_code="E5204", cause=e
            ) from e

        headers = dict(self._headers)
        headers["Content-Type"] = JSON_CONTENT_TYPE

        session = await self._ensure_session()
        logger.debug(f"{method} {url}", extra={"body_bytes": len(body)})

        try:
            async with session.request(method, url, data=body, headers=headers) as response:
                status = response.status
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise self._handle_connection_error(e, url) from e
        except (RuntimeError, AssertionError) as e:
            # リクエスト中にclose()されたセッションからの例外のみ変換する
            if not session.closed:
                raise
            raise NetworkError(
                f"Session was closed during the request: {e!r}",
                url=url,
                error_code="E5201",
                cause=e,
            ) from e

        logger.debug(f"{method} {url} -> {status}", extra={"status": status})

        data = self._decode_body(raw, url, status)
        if not 200 <= status < 300:
            raise self._build_api_error(status, data, url)
        return status, data

    def _decode_body(self, raw: bytes, url: str, status: int) -> Any:
        """レスポンスボディをJSONとしてデコード

        Raises:
            ResponseFormatError: JSONとして解釈できない場合
        """
        try:
            return json.loads(raw)
        except ValueError as e:
            raise ResponseFormatError(
                f"Response body is not valid JSON: {e}",
                status_code=status,
                url=url,
                cause=e,
            ) from e

    def _build_api_error(
        self, status: int, data: Any, url: str
    ) -> Union[APIError, ResponseFormatError]:
        """非2xxレスポンスからエラーを作成

        ボディは文字列キーのオブジェクトであることを期待し、
        "detail" が文字列ならそれをメッセージとする。
        それ以外のキーはメッセージに使わず details["response_body"] に残す。

        Args:
            status: HTTPステータスコード
            data: デコード済みのレスポンスボディ
            url: リクエストURL

        Returns:
            APIError、またはボディがオブジェクトでない場合は ResponseFormatError
        """
        if not isinstance(data, dict):
            return ResponseFormatError(
                f"Error response body is not a JSON object (status {status})",
                status_code=status,
                url=url,
            )

        detail = data.get("detail")
        message = detail if isinstance(detail, str) else UNKNOWN_API_ERROR_MESSAGE

        return APIError(
            message,
            status_code=status,
            details={"url": url, "response_body": data},
        )

    def _handle_connection_error(self, error: BaseException, url: str) -> NetworkError:
        """接続エラーのハンドリング

        Args:
            error: aiohttp例外、またはタイムアウト
            url: リクエストURL

        Returns:
            NetworkError: 原因を保持したNetworkError
        """
        if isinstance(error, aiohttp.ClientProxyConnectionError):
            return NetworkError(
                f"Proxy connection failed: {error}", url=url, error_code="E5203", cause=error
            )
        elif isinstance(error, aiohttp.ClientConnectorError):
            return NetworkError(
                f"Connection failed: {error}", url=url, error_code="E5502", cause=error
            )
        elif isinstance(error, asyncio.TimeoutError):
            return NetworkError(
                f"Request timed out after {self.timeout} seconds",
                url=url,
                error_code="E5205",
                cause=error,
            )
        else:
            return NetworkError(
                f"Network request failed: {error}", url=url, error_code="E5201", cause=error
            )

    # ------------------------------------------------------------------------
    # 抽象メソッド（サブクラスで実装）
    # ------------------------------------------------------------------------

    @abstractmethod
    def _build_headers(self) -> Dict[str, str]:
        """サービス固有の共通ヘッダーを作成

        構築時に1回だけ呼ばれる。

        Returns:
            Dict[str, str]: リクエストヘッダー
        """

    def __repr__(self) -> str:
        """文字列表現（APIキーをマスク）"""
        return (
            f"<{self.__class__.__name__} "
            f"api_key={mask_api_key(self.api_key)} "
            f"base_url={self.base_url}>"
        )
