"""Windows toast notifications via PowerShell."""

import logging

from toastwrap.core.config import Settings
from toastwrap.core.enums import resolve_audio, resolve_duration
from toastwrap.core.model import Notification
from toastwrap.core.powershell import run_script
from toastwrap.core.render import render_script

logger = logging.getLogger(__name__)


def push(notification: Notification, settings: Settings | None = None) -> None:
    """Default, render, stage and display a notification.

    Raises:
        RenderError: The notification could not be rendered.
        StageError: The script could not be written.
        DispatchError: PowerShell failed or timed out.
    """
    script = render_script(notification.with_defaults())
    run_script(script, settings)


def notify(
    title: str,
    message: str,
    icon: str | None = None,
    audio: str = "silent",
    duration: str = "short",
    loop: bool = False,
    app_id: str = "",
    settings: Settings | None = None,
) -> None:
    """Send a toast from plain strings.

    Unknown ``audio`` or ``duration`` names fall back to the default sound
    and a short toast, with a warning logged.

    Args:
        title: Notification title
        message: Notification body
        icon: Absolute path to icon file (optional)
        audio: Audio name, e.g. ``default``, ``mail``, ``loopingalarm3``
        duration: ``short`` or ``long``
        loop: Whether the audio loops
        app_id: App identity shown as the toast source
        settings: Dispatch settings (defaults when omitted)
    """
    resolved_audio = resolve_audio(audio)
    resolved_duration = resolve_duration(duration)
    for resolved in (resolved_audio, resolved_duration):
        if resolved.error is not None:
            logger.warning("%s; using %s", resolved.error, resolved.value.name.lower())

    push(
        Notification(
            title=title,
            message=message,
            app_id=app_id,
            icon=icon or "",
            audio=resolved_audio.value,
            loop=loop,
            duration=resolved_duration.value,
        ),
        settings,
    )
