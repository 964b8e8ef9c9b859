"""Chat transport integrations."""

from .telegram import (
    command_to_text,
    create_application,
    get_dispatcher,
    handle_chat_command,
    handle_chat_message,
    make_address,
    register_handler,
    set_dispatcher,
)

__all__ = [
    "command_to_text",
    "create_application",
    "get_dispatcher",
    "handle_chat_command",
    "handle_chat_message",
    "make_address",
    "register_handler",
    "set_dispatcher",
]
