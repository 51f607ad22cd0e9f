"""Tests for the process entry point."""

from unittest.mock import patch

import pytest

import main
from helpers.errors import InvalidListenAddressError


def test_main_serves_on_listen_address():
    with patch("main.uvicorn") as mock_uvicorn, patch.object(main, "LISTEN_ADDRESS", ":9614"):
        main.main()
    mock_uvicorn.run.assert_called_once_with(
        "fastapi_app.app:app", host="0.0.0.0", port=9614, log_config=None
    )


def test_main_rejects_bad_address():
    with patch("main.uvicorn") as mock_uvicorn, patch.object(main, "LISTEN_ADDRESS", "nope"):
        with pytest.raises(InvalidListenAddressError):
            main.main()
    mock_uvicorn.run.assert_not_called()
