"""pytest共通設定ファイル"""

import logging
import sys
from pathlib import Path

import pytest

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


# =============================================================================
# ログ設定
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """テスト実行時のログ設定"""
    logging.basicConfig(
        level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # 特定のロガーのレベル調整
    logging.getLogger("asyncio").setLevel(logging.WARNING)


# =============================================================================
# テスト用設定
# =============================================================================

TEST_API_KEY = "bl_test_0123456789abcdef"
TEST_BASE_URL = "https://api.example.com/v1"


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def base_url() -> str:
    return TEST_BASE_URL


@pytest.fixture
def signup_url() -> str:
    return f"{TEST_BASE_URL}/auth/signup-face"


@pytest.fixture
def login_url() -> str:
    return f"{TEST_BASE_URL}/auth/login-face"


@pytest.fixture
def face_image() -> bytes:
    """JPEGヘッダー風のダミー画像"""
    return b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + bytes(range(256))


# =============================================================================
# テストマーカー
# =============================================================================


def pytest_configure(config):
    """pytestのカスタムマーカーを定義"""
    config.addinivalue_line("markers", "unit: 単体テスト")
    config.addinivalue_line("markers", "integration: 統合テスト（ローカルHTTPサーバー使用）")
