"""Send a toast notification."""

import argparse
import logging

from rich.markup import escape

from toastwrap.core.config import Settings, load_settings
from toastwrap.core.enums import resolve_audio, resolve_duration
from toastwrap.core.errors import InvalidEnumValue, ToastError
from toastwrap.core.manager import resolve_icon
from toastwrap.core.model import Notification, build_actions
from toastwrap.core.notify import push
from toastwrap.core.theme import print_error, print_success, print_warning, setup_logging

COMMAND = {
    "description": "Show a toast notification",
    "args": "[options]",
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="toast send", description=COMMAND["description"])
    parser.add_argument("--app-id", "--id", dest="app_id", default="",
                        help="the app identifier (used for grouping multiple toasts)")
    parser.add_argument("-t", "--title", default="", help="the main toast title/heading")
    parser.add_argument("-m", "--message", default="",
                        help="the toast's main message (new lines as separator)")
    parser.add_argument("-i", "--icon", default="",
                        help="the app icon path (displays to the left of the toast)")
    parser.add_argument("--activation-type", default="protocol",
                        help="the type of action to invoke when the user clicks the toast")
    parser.add_argument("--activation-arg", default="", help="the activation argument")
    parser.add_argument("--action", action="append", default=[], help="optional action button")
    parser.add_argument("--action-type", action="append", default=[],
                        help="the type of action button")
    parser.add_argument("--action-arg", action="append", default=[],
                        help="the action button argument")
    parser.add_argument("--audio", default="silent", help="which kind of audio should be played")
    parser.add_argument("--loop", action="store_true", help="whether to loop the audio")
    parser.add_argument("--duration", default="short",
                        help="how long the toast should display for")
    parser.add_argument("--strict", action="store_true",
                        help="fail on unknown audio or duration names")
    parser.add_argument("--debug-script", action="store_true",
                        help="log the rendered PowerShell script")
    return parser


def build_notification(
    ns: argparse.Namespace,
    settings: Settings,
) -> tuple[Notification, list[InvalidEnumValue]]:
    """Turn parsed flags into a notification plus any name-resolution errors."""
    audio = resolve_audio(ns.audio)
    duration = resolve_duration(ns.duration)
    errors = [r.error for r in (audio, duration) if r.error is not None]

    notification = Notification(
        title=ns.title,
        message=ns.message,
        app_id=ns.app_id or settings.app_id,
        icon=resolve_icon(ns.icon or settings.icon),
        activation_type=ns.activation_type,
        activation_arguments=ns.activation_arg,
        actions=build_actions(ns.action, ns.action_type, ns.action_arg),
        audio=audio.value,
        loop=ns.loop,
        duration=duration.value,
    )
    return notification, errors


def run(*args: str) -> int:
    ns = _parser().parse_args(list(args))
    settings = load_settings()
    if ns.debug_script:
        settings.debug_script = True
        setup_logging(logging.DEBUG)
    else:
        setup_logging()

    try:
        notification, errors = build_notification(ns, settings)
    except ToastError as e:
        print_error(escape(str(e)))
        return 1

    for error in errors:
        if ns.strict:
            print_error(escape(str(error)))
        else:
            print_warning(f"{escape(str(error))}, using fallback")
    if errors and ns.strict:
        return 1

    try:
        push(notification, settings)
    except ToastError as e:
        print_error(escape(str(e)))
        return 1

    print_success("Toast sent")
    return 0
