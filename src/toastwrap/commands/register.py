"""Register an app identity with Windows notification settings."""

import logging
import shlex

from rich.markup import escape

from toastwrap.core.config import load_settings
from toastwrap.core.errors import ToastError
from toastwrap.core.manager import ToastManager
from toastwrap.core.theme import (
    fmt,
    print_error,
    print_header,
    print_info,
    print_kv,
    setup_logging,
)

COMMAND = {
    "description": "Register an app id for toasts",
    "args": "<app-id> [name] [icon]",
}


def run(*args: str) -> int:
    settings = load_settings()
    setup_logging(logging.DEBUG if settings.debug_script else logging.WARNING)

    app_id = args[0] if args else settings.app_id
    display_name = args[1] if len(args) > 1 else settings.display_name
    icon = args[2] if len(args) > 2 else settings.icon

    if not app_id:
        print_error("Missing app id")
        return 1

    try:
        manager = ToastManager.create(app_id, display_name, icon, settings)
    except ToastError as e:
        print_error(escape(str(e)))
        return 1

    print_header("Registered")
    print_kv("App ID", fmt(escape(manager.app_id)))
    print_kv("Name", fmt(escape(manager.display_name or "Windows App")))
    if manager.icon:
        print_kv("Icon", fmt(escape(manager.icon)))
    hint = escape(f"toast send --app-id {shlex.quote(manager.app_id)}")
    print_info(f"Send with [value]{hint}[/value]")
    return 0
