"""Toast notification data model."""

from dataclasses import dataclass, field, replace

from toastwrap.core.enums import Audio, Duration

DEFAULT_ACTIVATION_TYPE = "protocol"


@dataclass(frozen=True, kw_only=True)
class Action:
    """A button shown at the bottom of a toast. Fields are keyword-only."""

    action_type: str = DEFAULT_ACTIVATION_TYPE
    label: str
    arguments: str = ""


@dataclass(frozen=True)
class Notification:
    """Everything needed to render one toast.

    ``audio`` and ``duration`` may be left as ``None``; :meth:`with_defaults`
    fills them in before rendering. An empty ``app_id`` is rendered as the
    generic "Windows App" identity.
    """

    title: str = ""
    message: str = ""
    app_id: str = ""
    icon: str = ""
    activation_type: str = ""
    activation_arguments: str = ""
    actions: tuple[Action, ...] = field(default_factory=tuple)
    audio: Audio | None = None
    loop: bool = False
    duration: Duration | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of actions but store an immutable tuple
        if not isinstance(self.actions, tuple):
            object.__setattr__(self, "actions", tuple(self.actions))

    @property
    def is_silent(self) -> bool:
        return self.audio is Audio.SILENT

    def with_defaults(self) -> "Notification":
        """Return a copy with activation type, duration and audio filled in.

        Idempotent: a notification that already has all three set is
        returned unchanged.
        """
        changes: dict = {}
        if not self.activation_type:
            changes["activation_type"] = DEFAULT_ACTIVATION_TYPE
        if self.duration is None:
            changes["duration"] = Duration.SHORT
        if self.audio is None:
            changes["audio"] = Audio.DEFAULT
        if not changes:
            return self
        return replace(self, **changes)


def apply_defaults(notification: Notification) -> Notification:
    """Module-level alias for :meth:`Notification.with_defaults`."""
    return notification.with_defaults()


def build_actions(
    labels: list[str],
    types: list[str] | None = None,
    arguments: list[str] | None = None,
) -> list[Action]:
    """Zip index-aligned label/type/argument lists into actions.

    Labels drive the count. A missing type falls back to ``protocol`` and a
    missing argument to an empty string.
    """
    types = types or []
    arguments = arguments or []
    actions = []
    for i, label in enumerate(labels):
        actions.append(
            Action(
                label=label,
                arguments=arguments[i] if i < len(arguments) else "",
                action_type=types[i] if i < len(types) else DEFAULT_ACTIVATION_TYPE,
            )
        )
    return actions
