"""リクエスト/レスポンスのデータモデル

APIとやり取りするJSONペイロードを表すデータクラス群。
custom_fields はサーバー側で不透明に扱われるため、固定スキーマを持たない
任意のJSON値として保持する。
"""

import base64
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

# JSONで表現可能な任意の値
JSONValue = Union[str, int, float, bool, None, List["JSONValue"], Dict[str, "JSONValue"]]
CustomFields = Dict[str, JSONValue]

# user_id は64bit符号付き整数
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def encode_image(image_bytes: Union[bytes, bytearray, memoryview]) -> str:
    """画像バイト列を標準Base64（パディングあり）に変換

    Args:
        image_bytes: 顔画像の生バイト列（JPEG、PNGなど）

    Returns:
        str: Base64文字列

    Raises:
        TypeError: バイト列以外が渡された場合
    """
    if not isinstance(image_bytes, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"image_bytes must be bytes-like, got {type(image_bytes).__name__}"
        )
    return base64.b64encode(bytes(image_bytes)).decode("ascii")


@dataclass(frozen=True)
class SignupRequest:
    """顔登録リクエスト"""

    image_base64: str
    custom_fields: Optional[CustomFields] = None

    def to_payload(self) -> Dict[str, Any]:
        """送信用のJSONペイロードを作成

        custom_fields が None の場合はキー自体を含めない（null は送らない）。
        """
        payload: Dict[str, Any] = {"image_base64": self.image_base64}
        if self.custom_fields is not None:
            payload["custom_fields"] = self.custom_fields
        return payload


@dataclass(frozen=True)
class LoginRequest:
    """顔認証リクエスト"""

    image_base64: str

    def to_payload(self) -> Dict[str, Any]:
        return {"image_base64": self.image_base64}


@dataclass(frozen=True)
class FaceAuthResponse:
    """登録/認証成功時のレスポンス

    Attributes:
        user_id: ユーザーID（int64）
        is_new_user: 今回のリクエストで新規登録された場合True
        custom_fields: ユーザーに紐づく任意データ（無い場合None）
    """

    user_id: int
    is_new_user: bool
    custom_fields: Optional[CustomFields] = None

    @classmethod
    def from_dict(cls, data: Any) -> "FaceAuthResponse":
        """デコード済みJSONからレスポンスを作成

        Args:
            data: レスポンスボディをデコードした値

        Returns:
            FaceAuthResponse: レスポンス

        Raises:
            ValueError: 必須フィールドの欠落、または型が一致しない場合
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

        for key in ("user_id", "is_new_user"):
            if key not in data:
                raise ValueError(f"Missing required field: {key}")

        user_id = data["user_id"]
        # boolはintのサブクラスなので明示的に除外
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise ValueError(f"user_id must be an integer, got {user_id!r}")
        if not INT64_MIN <= user_id <= INT64_MAX:
            raise ValueError(f"user_id out of int64 range: {user_id}")

        is_new_user = data["is_new_user"]
        if not isinstance(is_new_user, bool):
            raise ValueError(f"is_new_user must be a boolean, got {is_new_user!r}")

        custom_fields = data.get("custom_fields")
        if custom_fields is not None and not isinstance(custom_fields, dict):
            raise ValueError(
                f"custom_fields must be an object or null, got {type(custom_fields).__name__}"
            )

        return cls(user_id=user_id, is_new_user=is_new_user, custom_fields=custom_fields)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "is_new_user": self.is_new_user,
            "custom_fields": self.custom_fields,
        }
