"""例外クラスのテスト

例外階層とエラーコード体系の動作を検証。
"""

from datetime import datetime

import pytest

from biologreen.core.exceptions import (
    APIError,
    BioLogreenError,
    ConfigurationError,
    NetworkError,
    ResponseFormatError,
)


@pytest.mark.unit
class TestBioLogreenError:
    """BioLogreenError基底例外クラスのテスト"""

    def test_basic_initialization(self):
        error = BioLogreenError("Test error message")

        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.error_code is None
        assert error.details == {}
        assert error.cause is None
        assert isinstance(error.timestamp, datetime)

    def test_initialization_with_error_code(self):
        error = BioLogreenError("Test error", error_code="E5000")

        assert str(error) == "[E5000] Test error"

    def test_to_dict(self):
        cause = ValueError("Original error")
        error = BioLogreenError("Wrapped", error_code="E5000", details={"k": 1}, cause=cause)

        result = error.to_dict()

        assert result["error_type"] == "BioLogreenError"
        assert result["error_code"] == "E5000"
        assert result["message"] == "Wrapped"
        assert result["details"] == {"k": 1}
        assert result["cause"] == "Original error"
        assert result["timestamp"] == error.timestamp.isoformat()


@pytest.mark.unit
class TestErrorKinds:
    """2種類のエラー区分のテスト"""

    def test_configuration_error(self):
        error = ConfigurationError("bad key", config_file="biologreen.yaml")

        assert error.error_code == "E0001"
        assert error.details["config_file"] == "biologreen.yaml"

    def test_network_error(self):
        error = NetworkError("refused", url="https://api.example.com/v1/auth/login-face")

        assert error.error_code == "E5200"
        assert error.details["url"] == "https://api.example.com/v1/auth/login-face"

    def test_response_format_error_is_network_error(self):
        error = ResponseFormatError("not json", status_code=200)

        assert isinstance(error, NetworkError)
        assert not isinstance(error, APIError)
        assert error.error_code == "E5206"
        assert error.details["status_code"] == 200

    def test_api_error(self):
        error = APIError("invalid image", status_code=400)

        assert error.status_code == 400
        assert error.message == "invalid image"
        assert error.details["status_code"] == 400
        assert str(error) == "[E2000] API error: invalid image (status: 400)"
        assert not isinstance(error, NetworkError)

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("x"),
            NetworkError("x"),
            ResponseFormatError("x"),
            APIError("x", status_code=500),
        ],
    )
    def test_all_inherit_base(self, error):
        assert isinstance(error, BioLogreenError)
