"""Tests for the process entry point."""

from unittest.mock import ANY, patch

import pytest

from ovh_webhook.__main__ import main


@patch("ovh_webhook.__main__.uvicorn")
@patch("ovh_webhook.__main__.OvhDnsSolver")
def test_main_serves_solver_for_group(mock_solver_cls, mock_uvicorn, monkeypatch):
    monkeypatch.setenv("GROUP_NAME", "acme.example.com")
    monkeypatch.setenv("SECURE_PORT", "8443")
    monkeypatch.setenv("TLS_CERT_FILE", "/tls/tls.crt")
    monkeypatch.setenv("TLS_PRIVATE_KEY_FILE", "/tls/tls.key")
    mock_solver_cls.return_value.name.return_value = "ovh"

    main()

    mock_solver_cls.return_value.initialize.assert_called_once_with()
    mock_uvicorn.run.assert_called_once_with(
        ANY,
        host="0.0.0.0",
        port=8443,
        ssl_certfile="/tls/tls.crt",
        ssl_keyfile="/tls/tls.key",
        log_config=None,
    )


@patch("ovh_webhook.__main__.uvicorn")
@patch("ovh_webhook.__main__.OvhDnsSolver")
def test_main_refuses_to_start_without_group_name(mock_solver_cls, mock_uvicorn, monkeypatch):
    monkeypatch.delenv("GROUP_NAME", raising=False)

    with pytest.raises(ValueError, match="GROUP_NAME"):
        main()

    mock_solver_cls.assert_not_called()
    mock_uvicorn.run.assert_not_called()
