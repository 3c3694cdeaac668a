"""Core toast pipeline and shared components."""

from toastwrap.core.enums import Audio, Duration, resolve_audio, resolve_duration
from toastwrap.core.manager import ToastManager, new_manager
from toastwrap.core.model import Action, Notification
from toastwrap.core.notify import notify, push

__all__ = [
    "Action",
    "Audio",
    "Duration",
    "Notification",
    "ToastManager",
    "new_manager",
    "notify",
    "push",
    "resolve_audio",
    "resolve_duration",
]
