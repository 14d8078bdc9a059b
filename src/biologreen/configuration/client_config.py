"""クライアント設定

BioLogreenClient が構築時に取り込む不変の設定値を定義する。
APIキーはHTTPヘッダー値として送信できるかを構築時に検証し、
最初のリクエストまで失敗を遅延させない。

YAMLフォーマット:
    biologreen:
      api_key: "bl_..."
      base_url: "https://api.biologreen.com/v1"   # 省略可
      timeout: 30                                  # 省略可（秒）
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from biologreen.configuration.settings import (
    CONFIG_SECTION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    MAX_CONFIG_FILE_SIZE,
    mask_api_key,
)
from biologreen.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def is_valid_header_value(value: str) -> bool:
    """HTTPヘッダー値として送信可能か判定

    可視ASCII文字（0x20-0x7E）とタブのみ許可する。
    改行や非ASCII文字を含む値はヘッダーインジェクションの原因になるため拒否。

    Args:
        value: 判定する文字列

    Returns:
        bool: 送信可能な場合True
    """
    return all(ch == "\t" or 0x20 <= ord(ch) < 0x7F for ch in value)


@dataclass(frozen=True)
class ClientConfig:
    """APIクライアントの不変設定

    Attributes:
        api_key: APIキー（X-API-KEYヘッダーで送信）
        base_url: APIベースURL（末尾スラッシュの正規化は行わない）
        timeout: リクエスト全体のタイムアウト（秒）
    """

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not isinstance(self.api_key, str):
            raise ConfigurationError(
                f"API key must be a string, got {type(self.api_key).__name__}"
            )
        if not is_valid_header_value(self.api_key):
            raise ConfigurationError(
                "API key contains characters that cannot be sent in an HTTP header"
            )

        if not isinstance(self.base_url, str) or not self.base_url:
            raise ConfigurationError(f"Invalid base URL: {self.base_url!r}")

        if (
            isinstance(self.timeout, bool)
            or not isinstance(self.timeout, (int, float))
            or self.timeout <= 0
        ):
            raise ConfigurationError(
                f"Invalid timeout value: {self.timeout!r} (must be a positive number)"
            )

    @classmethod
    def create(
        cls,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "ClientConfig":
        """省略された値をデフォルトで補って設定を作成

        Args:
            api_key: APIキー
            base_url: APIベースURL（Noneの場合は本番URL）
            timeout: タイムアウト秒数（Noneの場合は30秒）

        Returns:
            ClientConfig: 検証済みの設定

        Raises:
            ConfigurationError: 設定値が無効な場合
        """
        return cls(
            api_key=api_key,
            base_url=DEFAULT_BASE_URL if base_url is None else base_url,
            timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientConfig":
        """辞書から設定を作成

        Args:
            data: api_key, base_url, timeout を含む辞書

        Returns:
            ClientConfig: 検証済みの設定

        Raises:
            ConfigurationError: api_keyが無い、または値が無効な場合
        """
        if "api_key" not in data:
            raise ConfigurationError("Required field missing: api_key")

        return cls.create(
            api_key=data["api_key"],
            base_url=data.get("base_url"),
            timeout=data.get("timeout"),
        )

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "ClientConfig":
        """呼び出し側が指定したYAMLファイルから設定を読み込み

        Args:
            config_path: 設定ファイルのパス

        Returns:
            ClientConfig: 検証済みの設定

        Raises:
            ConfigurationError: ファイルが無い、形式が無効、値が無効な場合
        """
        config_path = Path(config_path)
        logger.debug(f"Loading client config from: {config_path}")

        if not config_path.is_file():
            raise ConfigurationError(
                f"Config file not found: {config_path}",
                config_file=str(config_path),
                error_code="E0002",
            )

        if config_path.stat().st_size > MAX_CONFIG_FILE_SIZE:
            raise ConfigurationError(
                f"Config file too large: {config_path}",
                config_file=str(config_path),
                error_code="E0002",
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse YAML config file: {e}",
                config_file=str(config_path),
                error_code="E0002",
                cause=e,
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read config file: {e}",
                config_file=str(config_path),
                error_code="E0002",
                cause=e,
            ) from e

        section = data.get(CONFIG_SECTION) if isinstance(data, dict) else None
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"Missing required section: {CONFIG_SECTION}",
                config_file=str(config_path),
            )

        try:
            config = cls.from_dict(section)
        except ConfigurationError as e:
            e.details["config_file"] = str(config_path)
            raise

        logger.debug(
            "Client config loaded",
            extra={"api_key": mask_api_key(config.api_key), "base_url": config.base_url},
        )
        return config
