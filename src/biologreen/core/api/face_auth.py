"""BioLogreen 顔認証APIクライアント

顔画像によるユーザー登録（signup）と認証（login）を行う。
どちらの操作も _post を経由し、成功/失敗の判定はそこに集約される。

使用例:
    async with BioLogreenClient(api_key="bl_...") as client:
        with open("face.jpg", "rb") as f:
            result = await client.login_with_face(f.read())
        print(result.user_id)
"""

from typing import Dict, Optional, Union

from biologreen.configuration.client_config import ClientConfig
from biologreen.configuration.settings import (
    API_KEY_HEADER,
    LOGIN_FACE_ENDPOINT,
    SIGNUP_FACE_ENDPOINT,
    USER_AGENT,
)
from biologreen.core.api.base import BaseAPIClient
from biologreen.core.exceptions import ResponseFormatError
from biologreen.core.models import (
    CustomFields,
    FaceAuthResponse,
    LoginRequest,
    SignupRequest,
    encode_image,
)

ImageBytes = Union[bytes, bytearray, memoryview]


class BioLogreenClient(BaseAPIClient):
    """BioLogreen 顔認証APIのクライアント

    設定は構築時に確定する不変値のみで、呼び出し間で共有される可変状態は無い。
    同一インスタンスから任意の数のリクエストを並行に発行できる。
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """クライアントを作成

        Args:
            api_key: APIキー
            base_url: APIベースURL（省略時は本番URL）
            timeout: リクエストのタイムアウト秒数（省略時は30秒）

        Raises:
            ConfigurationError: APIキーがヘッダー値として無効な場合など
        """
        super().__init__(ClientConfig.create(api_key, base_url=base_url, timeout=timeout))

    @classmethod
    def from_config(cls, config: ClientConfig) -> "BioLogreenClient":
        """既存の設定からクライアントを作成"""
        return cls(config.api_key, base_url=config.base_url, timeout=config.timeout)

    def _build_headers(self) -> Dict[str, str]:
        return {
            API_KEY_HEADER: self.config.api_key,
            "User-Agent": USER_AGENT,
        }

    async def signup_with_face(
        self,
        image_bytes: ImageBytes,
        custom_fields: Optional[CustomFields] = None,
    ) -> FaceAuthResponse:
        """顔画像で新規ユーザーを登録

        Args:
            image_bytes: 顔画像の生バイト列（JPEG、PNGなど）
            custom_fields: ユーザーに保存する任意データ

        Returns:
            FaceAuthResponse: 登録結果

        Raises:
            NetworkError: 通信失敗、またはレスポンス形式が不正
            APIError: APIが非2xxステータスを返した
        """
        request = SignupRequest(
            image_base64=encode_image(image_bytes), custom_fields=custom_fields
        )
        return await self._post(SIGNUP_FACE_ENDPOINT, request)

    async def login_with_face(self, image_bytes: ImageBytes) -> FaceAuthResponse:
        """顔画像で既存ユーザーを認証

        Args:
            image_bytes: 顔画像の生バイト列

        Returns:
            FaceAuthResponse: 認証結果

        Raises:
            NetworkError: 通信失敗、またはレスポンス形式が不正
            APIError: APIが非2xxステータスを返した
        """
        request = LoginRequest(image_base64=encode_image(image_bytes))
        return await self._post(LOGIN_FACE_ENDPOINT, request)

    async def _post(
        self, endpoint: str, request: Union[SignupRequest, LoginRequest]
    ) -> FaceAuthResponse:
        """POSTリクエストを送信し、成功レスポンスをデコード"""
        status, data = await self._request_json("POST", endpoint, request.to_payload())

        try:
            return FaceAuthResponse.from_dict(data)
        except ValueError as e:
            raise ResponseFormatError(
                f"Unexpected response body: {e}",
                status_code=status,
                url=f"{self.base_url}{endpoint}",
                cause=e,
            ) from e
