"""
BioLogreen Utils Package

ログ管理などの共通機能。
"""

from biologreen.utils.logger_manager import JSONLogFormatter, LoggerManager

__all__ = [
    # ログ管理
    "LoggerManager",
    "JSONLogFormatter",
]
