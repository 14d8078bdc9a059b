"""
ログ管理モジュール

アプリケーション側から "biologreen" ロガー配下の出力先を設定するためのユーティリティ。
SDK自身はハンドラーを設定せず、各モジュールで logging.getLogger(__name__) を使うのみ。
シングルトンパターンで実装。
"""

import json
import logging
import logging.handlers
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER_NAME = "biologreen"


class LoggerManager:
    """
    統一されたログ管理クラス（シングルトン）

    Attributes:
        log_dir: ログファイルの出力ディレクトリ（Noneの場合はコンソールのみ）
        log_level: コンソールのログレベル
        debug_mode: デバッグモードフラグ
    """

    _instance: Optional["LoggerManager"] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        """シングルトンインスタンスの取得"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(
        self,
        log_dir: Optional[Union[str, Path]] = None,
        log_level: str = "INFO",
        debug_mode: bool = False,
    ):
        """
        LoggerManagerの初期化

        Args:
            log_dir: ログディレクトリ（指定時のみファイルへJSON形式で出力）
            log_level: コンソールのログレベル
            debug_mode: デバッグモードフラグ（TrueでDEBUGかつ詳細フォーマット）
        """
        # 既に初期化済みなら何もしない
        if LoggerManager._initialized:
            return

        self.log_dir = Path(log_dir) if log_dir is not None else None
        self.log_level = "DEBUG" if debug_mode else log_level.upper()
        self.debug_mode = debug_mode

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self._setup_root_logger()

        LoggerManager._initialized = True

        logger = self.get_logger("LoggerManager")
        logger.info(
            "LoggerManager initialized",
            extra={
                "log_dir": str(self.log_dir) if self.log_dir else None,
                "log_level": self.log_level,
            },
        )

    def _setup_root_logger(self):
        """ルートロガーの設定"""
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(logging.DEBUG)  # ハンドラーで制御

        # 既存のハンドラーをクリア
        root_logger.handlers.clear()

        root_logger.addHandler(self._create_console_handler())

        if self.log_dir is not None:
            root_logger.addHandler(self._create_file_handler())

    def _create_console_handler(self) -> logging.StreamHandler:
        """
        コンソールハンドラーの作成

        Returns:
            設定済みのStreamHandler
        """
        handler = logging.StreamHandler()
        handler.setLevel(getattr(logging, self.log_level))

        if self.debug_mode:
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        else:
            formatter = logging.Formatter("%(levelname)s - %(message)s")

        handler.setFormatter(formatter)
        return handler

    def _create_file_handler(self) -> logging.handlers.RotatingFileHandler:
        """
        ファイルハンドラーの作成（ローテーション付き）

        Returns:
            設定済みのRotatingFileHandler
        """
        log_file = self.log_dir / "biologreen.log"

        handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10_485_760, backupCount=5, encoding="utf-8"  # 10MB
        )
        handler.setLevel(logging.DEBUG)  # ファイルには全てのログを記録
        handler.setFormatter(JSONLogFormatter())
        return handler

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        指定された名前のロガーを取得

        Args:
            name: ロガー名（通常は__name__を使用）

        Returns:
            Logger
        """
        # "biologreen"プレフィックスを追加（重複しない場合のみ）
        if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
            full_name = name
        else:
            full_name = f"{ROOT_LOGGER_NAME}.{name}"

        return logging.getLogger(full_name)

    @classmethod
    def reset(cls):
        """
        シングルトンをリセット（テスト用）

        設定済みのハンドラーも閉じて取り外す。
        """
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        cls._instance = None
        cls._initialized = False


class JSONLogFormatter(logging.Formatter):
    """
    JSON形式でログを出力するフォーマッター

    extraフィールドを含めてJSON形式で出力する。
    """

    # LogRecordの標準属性（extraとして出力しない）
    STANDARD_FIELDS = {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }

    def format(self, record: logging.LogRecord) -> str:
        """
        ログレコードをJSON形式にフォーマット

        Args:
            record: ログレコード

        Returns:
            JSON形式の文字列
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key, value in record.__dict__.items():
            if key not in self.STANDARD_FIELDS and not key.startswith("_"):
                log_data[key] = value

        # 例外情報がある場合は追加
        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_data, ensure_ascii=False, default=str)
