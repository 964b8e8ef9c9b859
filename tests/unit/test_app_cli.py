"""Unit tests for CLI argument handling and handler registration."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from telegram.ext import CommandHandler, MessageHandler

from auntie_bot.app import CHAT_COMMANDS, _parse_args, _register_handlers, _resolve_webhook_path


def test_parse_args_defaults_to_polling() -> None:
    args = _parse_args([])

    assert args.mode == "polling"
    assert args.port == 8443


def test_parse_args_api_mode_uses_http_port() -> None:
    args = _parse_args(["--mode", "api"])

    assert args.port == 3000
    assert _parse_args(["--mode", "api", "--port", "9000"]).port == 9000


def test_webhook_mode_requires_url() -> None:
    with pytest.raises(SystemExit):
        _parse_args(["--mode", "webhook"])


def test_resolve_webhook_path() -> None:
    assert _resolve_webhook_path("https://bot.example/hook/abc/", None) == "hook/abc"
    assert _resolve_webhook_path("https://bot.example/hook", "/custom/") == "custom"
    assert _resolve_webhook_path("https://bot.example", None) == ""


def test_register_handlers_adds_commands_then_text() -> None:
    application = SimpleNamespace(add_handler=MagicMock())

    _register_handlers(application)

    handlers = [call.args[0] for call in application.add_handler.call_args_list]
    assert isinstance(handlers[0], CommandHandler)
    assert handlers[0].commands == frozenset(CHAT_COMMANDS)
    assert isinstance(handlers[1], MessageHandler)
