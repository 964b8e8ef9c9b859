"""Telegram Application factory and chat handlers."""

from __future__ import annotations

from typing import Any

from langsmith import traceable
from telegram import Update
from telegram.ext import Application, ApplicationBuilder, BaseHandler, ContextTypes

from auntie_bot import get_logger
from auntie_bot.config import Settings, get_settings
from auntie_bot.dispatcher import MessageDispatcher
from auntie_bot.replies import ResponseSelector

LOGGER = get_logger("integrations.telegram")
DISPATCHER_KEY = "auntie_bot.dispatcher"
SETTINGS_KEY = "auntie_bot.settings"
ADDRESS_PREFIX = "telegram"

# Slash commands map onto the plain-text keywords the dispatcher understands.
COMMAND_ALIASES: dict[str, str] = {"start": "menu"}


def create_application(*, settings: Settings | None = None) -> Application:
    """Return a python-telegram-bot Application for the configured token."""

    resolved_settings = settings or get_settings()
    token = resolved_settings.require_telegram_token()
    application = ApplicationBuilder().token(token).build()
    application.bot_data[SETTINGS_KEY] = resolved_settings
    LOGGER.info("Telegram application ready.")
    return application


def register_handler(
    application: Application,
    handler: BaseHandler[Any, Any, Any],
    *,
    group: int = 0,
) -> None:
    application.add_handler(handler, group=group)


def _resolve_application(source: Any) -> Application | None:
    if isinstance(source, Application):
        return source
    application = getattr(source, "application", None)
    if isinstance(application, Application):
        return application
    if hasattr(source, "bot_data"):
        return source
    if application is not None and hasattr(application, "bot_data"):
        return application  # type: ignore[return-value]
    return None


def set_dispatcher(application: Application, dispatcher: MessageDispatcher) -> None:
    """Store the dispatcher inside the Application for handler reuse."""

    application.bot_data[DISPATCHER_KEY] = dispatcher


def get_dispatcher(source: Any) -> MessageDispatcher | None:
    """Retrieve the dispatcher from an Application or CallbackContext."""

    application = _resolve_application(source)
    if application is None:
        return None
    dispatcher = application.bot_data.get(DISPATCHER_KEY)
    if isinstance(dispatcher, MessageDispatcher):
        return dispatcher
    return None


def make_address(chat_id: int | None) -> str | None:
    return f"{ADDRESS_PREFIX}:{int(chat_id)}" if chat_id is not None else None


def command_to_text(text: str) -> str:
    """Turn ``/summary@AuntieBot month`` into ``summary month``."""

    head, _, rest = text.strip().lstrip("/").partition(" ")
    command = head.split("@", 1)[0].lower()
    command = COMMAND_ALIASES.get(command, command)
    return f"{command} {rest.strip()}".strip()


def _extract_message_data(update: Update) -> tuple[str | None, int | None, int | None]:
    message = getattr(update, "message", None) or getattr(update, "edited_message", None)
    text = getattr(message, "text", None) if message is not None else None
    text = text.strip() if isinstance(text, str) and text.strip() else None
    chat = getattr(update, "effective_chat", None) or getattr(message, "chat", None)
    chat_id = getattr(chat, "id", None)
    message_id = getattr(message, "message_id", None)
    return text, chat_id, message_id


def _langsmith_extra_for_update(event: str, update: Update) -> dict[str, Any]:
    _, chat_id, message_id = _extract_message_data(update)
    metadata: dict[str, Any] = {
        "event": event,
        "chat_id": chat_id,
        "telegram_message_id": message_id,
    }
    filtered_metadata = {key: value for key, value in metadata.items() if value is not None}
    return {
        "metadata": filtered_metadata,
        "tags": ["telegram", f"event:{event}"],
    }


async def _reply_text(
    update: Update,
    context: ContextTypes.DEFAULT_TYPE,
    text: str,
    chat_id: int | None,
) -> None:
    if not text:
        return
    target = getattr(update, "effective_message", None)
    if target is not None and hasattr(target, "reply_text"):
        await target.reply_text(text)
        return
    if chat_id is not None:
        await context.bot.send_message(chat_id=chat_id, text=text)


@traceable(run_type="chain", name="telegram.update")
async def _process_telegram_update(
    update: Update,
    context: ContextTypes.DEFAULT_TYPE,
    *,
    as_command: bool = False,
) -> None:
    dispatcher = get_dispatcher(context)
    if dispatcher is None:
        raise RuntimeError("Message dispatcher is not configured for Telegram handlers.")

    text, chat_id, _ = _extract_message_data(update)
    if not text:
        return
    if as_command:
        text = command_to_text(text)

    try:
        reply = dispatcher.handle_message(make_address(chat_id), text)
    except Exception as exc:
        LOGGER.exception("Telegram update failed to process", exc_info=exc)
        await _reply_text(update, context, ResponseSelector.store_failure(), chat_id)
        return

    await _reply_text(update, context, reply, chat_id)


async def handle_chat_message(
    update: Update, context: ContextTypes.DEFAULT_TYPE
) -> None:
    """Handle free-form text: commands typed as words or expenses."""

    extra = _langsmith_extra_for_update("chat_message", update)
    await _process_telegram_update(update, context, langsmith_extra=extra)


async def handle_chat_command(
    update: Update, context: ContextTypes.DEFAULT_TYPE
) -> None:
    """Handle slash commands such as /list or /summary month."""

    extra = _langsmith_extra_for_update("chat_command", update)
    await _process_telegram_update(
        update, context, as_command=True, langsmith_extra=extra
    )


__all__ = [
    "COMMAND_ALIASES",
    "DISPATCHER_KEY",
    "command_to_text",
    "create_application",
    "get_dispatcher",
    "handle_chat_command",
    "handle_chat_message",
    "make_address",
    "register_handler",
    "set_dispatcher",
]
