"""App identity registration and toast construction."""

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass

from toastwrap.core.config import Settings
from toastwrap.core.enums import Audio, Duration
from toastwrap.core.errors import PathResolutionError, RegistrationError, ToastError
from toastwrap.core.model import DEFAULT_ACTIVATION_TYPE, Action, Notification
from toastwrap.core.powershell import run_script
from toastwrap.core.render import render_registration

logger = logging.getLogger(__name__)


def resolve_icon(icon_path: str) -> str:
    """Return ``icon_path`` as an absolute path, or ``""`` for no icon.

    Raises:
        PathResolutionError: The path is malformed (e.g. contains NUL).
    """
    if not icon_path:
        return ""
    # posixpath.abspath accepts NUL; Windows and the filesystem do not
    if "\x00" in icon_path:
        raise PathResolutionError(f"Icon path contains a NUL byte: {icon_path!r}")
    try:
        return os.path.abspath(icon_path)
    except (TypeError, ValueError, OSError) as e:
        raise PathResolutionError(f"Cannot resolve icon path {icon_path!r}: {e}") from e


def register(app_id: str, display_name: str, icon: str, settings: Settings | None = None) -> None:
    """Register an app identity so Windows shows its toasts.

    Safe to repeat; existing registry keys are overwritten in place.

    Raises:
        RegistrationError: The registration script failed.
    """
    script = render_registration(app_id, display_name, icon)
    try:
        run_script(script, settings)
    except ToastError as e:
        raise RegistrationError(f"Failed to register app {app_id!r}: {e}") from e
    logger.debug("Registered app identity %r", app_id)


@dataclass
class ToastManager:
    """Shared app identity and icon for a family of toasts."""

    app_id: str
    display_name: str
    icon: str

    @classmethod
    def create(
        cls,
        app_id: str,
        display_name: str,
        icon_path: str,
        settings: Settings | None = None,
    ) -> "ToastManager":
        """Resolve the icon, register the app identity and return a manager.

        Raises:
            PathResolutionError: ``icon_path`` cannot be made absolute.
            RegistrationError: Windows registration failed.
        """
        icon = resolve_icon(icon_path)
        manager = cls(app_id=app_id, display_name=display_name, icon=icon)
        register(manager.app_id, manager.display_name, manager.icon, settings)
        return manager

    def new_toast(
        self,
        title: str,
        message: str,
        activation_type: str,
        activation_arguments: str,
        actions: Iterable[Action],
        audio: Audio | None,
        loop: bool,
        duration: Duration | None,
    ) -> Notification:
        """Build a notification bound to this manager's app id and icon."""
        return Notification(
            title=title,
            message=message,
            app_id=self.app_id,
            icon=self.icon,
            activation_type=activation_type,
            activation_arguments=activation_arguments,
            actions=tuple(actions),
            audio=audio,
            loop=loop,
            duration=duration,
        )

    def new_simple_toast(self, title: str, message: str) -> Notification:
        """Silent, short, protocol-activated toast with no buttons."""
        return self.new_toast(
            title,
            message,
            activation_type=DEFAULT_ACTIVATION_TYPE,
            activation_arguments="",
            actions=(),
            audio=Audio.SILENT,
            loop=False,
            duration=Duration.SHORT,
        )


def new_manager(
    app_id: str,
    display_name: str,
    icon_path: str,
    settings: Settings | None = None,
) -> ToastManager:
    """Shorthand for :meth:`ToastManager.create`."""
    return ToastManager.create(app_id, display_name, icon_path, settings)
