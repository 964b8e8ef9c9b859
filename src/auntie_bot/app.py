"""CLI entrypoint for the Auntie Can Count One chatbot and its summary API."""

from __future__ import annotations

import argparse
from typing import Sequence
from urllib.parse import urlparse

import uvicorn
from telegram.ext import Application, CommandHandler, MessageHandler, filters

from auntie_bot import get_logger
from auntie_bot.api import create_api
from auntie_bot.config import Settings, get_settings
from auntie_bot.dispatcher import create_dispatcher
from auntie_bot.integrations import (
    create_application,
    handle_chat_command,
    handle_chat_message,
    register_handler,
    set_dispatcher,
)
from auntie_bot.ledger.store import SQLiteLedgerStore

LOGGER = get_logger("app")

# Slash commands forwarded to the dispatcher as their keyword equivalents.
CHAT_COMMANDS = ("start", "menu", "help", "list", "undo", "summary", "tip")


class _RunMode:
    POLLING = "polling"
    WEBHOOK = "webhook"
    API = "api"


def _register_handlers(application: Application) -> None:
    register_handler(application, CommandHandler(list(CHAT_COMMANDS), handle_chat_command))
    register_handler(
        application,
        MessageHandler(filters.TEXT & ~filters.COMMAND, handle_chat_message),
    )


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run Auntie Can Count One as a Telegram bot or as the summary HTTP API."
    )
    parser.add_argument(
        "--mode",
        choices=(_RunMode.POLLING, _RunMode.WEBHOOK, _RunMode.API),
        default=_RunMode.POLLING,
        help="Execution mode (default: polling).",
    )
    parser.add_argument(
        "--listen",
        default="0.0.0.0",
        help="Host to bind for the webhook listener or the HTTP API.",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="TCP port (default: 8443 for webhook, 3000 for api).",
    )
    parser.add_argument(
        "--webhook-url",
        help="Full HTTPS URL Telegram should call when running in webhook mode.",
    )
    parser.add_argument(
        "--url-path",
        help="Override the webhook path (defaults to the path of --webhook-url).",
    )
    parser.add_argument(
        "--drop-pending-updates",
        action="store_true",
        help="Drop pending Telegram updates before starting.",
    )
    args = parser.parse_args(argv)
    if args.mode == _RunMode.WEBHOOK and not args.webhook_url:
        parser.error("--webhook-url is required when --mode webhook")
    if args.port is None:
        args.port = 3000 if args.mode == _RunMode.API else 8443
    return args


def _resolve_webhook_path(webhook_url: str, override: str | None) -> str:
    candidate = override or urlparse(webhook_url).path or ""
    return candidate.strip().strip("/")


def _open_store(settings: Settings) -> SQLiteLedgerStore:
    return SQLiteLedgerStore(
        settings.ledger_db,
        token_secret=settings.summary_salt.get_secret_value(),
    )


def _run_api(args: argparse.Namespace, settings: Settings, store: SQLiteLedgerStore) -> None:
    app = create_api(settings, store=store)
    LOGGER.info("Starting HTTP API on %s:%d", args.listen, args.port)
    uvicorn.run(app, host=args.listen, port=args.port, log_level=settings.log_level.lower())


def _run_bot(args: argparse.Namespace, settings: Settings, store: SQLiteLedgerStore) -> None:
    application = create_application(settings=settings)
    set_dispatcher(application, create_dispatcher(settings, store=store))
    _register_handlers(application)

    drop_updates = True if args.drop_pending_updates else None
    if args.mode == _RunMode.POLLING:
        LOGGER.info("Starting Telegram polling (dropping pending=%s)", drop_updates)
        application.run_polling(drop_pending_updates=drop_updates)
        return

    webhook_path = _resolve_webhook_path(args.webhook_url, args.url_path)
    LOGGER.info(
        "Starting Telegram webhook listener on %s:%d/%s (webhook=%s)",
        args.listen,
        args.port,
        webhook_path,
        args.webhook_url,
    )
    application.run_webhook(
        listen=args.listen,
        port=args.port,
        webhook_url=args.webhook_url,
        url_path=webhook_path,
        drop_pending_updates=drop_updates,
        secret_token=settings.telegram_webhook_secret,
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = get_settings()
    store = _open_store(settings)
    try:
        if args.mode == _RunMode.API:
            _run_api(args, settings, store)
        else:
            _run_bot(args, settings, store)
    finally:
        store.close()


if __name__ == "__main__":
    main()
