"""Audio and duration enums with their user-facing name tables."""

from enum import Enum
from typing import Any, NamedTuple

from toastwrap.core.errors import InvalidAudio, InvalidDuration, InvalidEnumValue

_SOUND_EVENT = "ms-winsoundevent:Notification."


class Audio(str, Enum):
    """Windows sound events a toast can play."""

    DEFAULT = _SOUND_EVENT + "Default"
    IM = _SOUND_EVENT + "IM"
    MAIL = _SOUND_EVENT + "Mail"
    REMINDER = _SOUND_EVENT + "Reminder"
    SMS = _SOUND_EVENT + "SMS"
    LOOPING_ALARM = _SOUND_EVENT + "Looping.Alarm"
    LOOPING_ALARM2 = _SOUND_EVENT + "Looping.Alarm2"
    LOOPING_ALARM3 = _SOUND_EVENT + "Looping.Alarm3"
    LOOPING_ALARM4 = _SOUND_EVENT + "Looping.Alarm4"
    LOOPING_ALARM5 = _SOUND_EVENT + "Looping.Alarm5"
    LOOPING_ALARM6 = _SOUND_EVENT + "Looping.Alarm6"
    LOOPING_ALARM7 = _SOUND_EVENT + "Looping.Alarm7"
    LOOPING_ALARM8 = _SOUND_EVENT + "Looping.Alarm8"
    LOOPING_ALARM9 = _SOUND_EVENT + "Looping.Alarm9"
    LOOPING_ALARM10 = _SOUND_EVENT + "Looping.Alarm10"
    LOOPING_CALL = _SOUND_EVENT + "Looping.Call"
    LOOPING_CALL2 = _SOUND_EVENT + "Looping.Call2"
    LOOPING_CALL3 = _SOUND_EVENT + "Looping.Call3"
    LOOPING_CALL4 = _SOUND_EVENT + "Looping.Call4"
    LOOPING_CALL5 = _SOUND_EVENT + "Looping.Call5"
    LOOPING_CALL6 = _SOUND_EVENT + "Looping.Call6"
    LOOPING_CALL7 = _SOUND_EVENT + "Looping.Call7"
    LOOPING_CALL8 = _SOUND_EVENT + "Looping.Call8"
    LOOPING_CALL9 = _SOUND_EVENT + "Looping.Call9"
    LOOPING_CALL10 = _SOUND_EVENT + "Looping.Call10"
    SILENT = "silent"


class Duration(str, Enum):
    """How long a toast stays on screen."""

    SHORT = "Short"
    LONG = "Long"


def _looping(kind: str) -> dict[str, Audio]:
    names = {f"looping{kind}": Audio[f"LOOPING_{kind.upper()}"]}
    for i in range(2, 11):
        names[f"looping{kind}{i}"] = Audio[f"LOOPING_{kind.upper()}{i}"]
    return names


# Lowercase name -> enum. Callers pass these on the command line, so the
# key set must stay stable.
AUDIO_NAMES: dict[str, Audio] = {
    "default": Audio.DEFAULT,
    "im": Audio.IM,
    "mail": Audio.MAIL,
    "reminder": Audio.REMINDER,
    "sms": Audio.SMS,
    **_looping("alarm"),
    **_looping("call"),
    "silent": Audio.SILENT,
}

DURATION_NAMES: dict[str, Duration] = {
    "short": Duration.SHORT,
    "long": Duration.LONG,
}


class Resolved(NamedTuple):
    """A resolved enum value, plus the error if the name was unknown.

    On failure ``value`` still holds a usable fallback, so callers can
    either keep it (lenient) or call :meth:`unwrap` (strict).
    """

    value: Any
    error: InvalidEnumValue | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, raising the resolution error if there was one."""
        if self.error is not None:
            raise self.error
        return self.value


def resolve_audio(name: str) -> Resolved:
    """Map a case-insensitive audio name to an :class:`Audio` member.

    Unknown names yield ``Audio.DEFAULT`` together with :class:`InvalidAudio`.
    """
    audio = AUDIO_NAMES.get(name.lower())
    if audio is None:
        return Resolved(Audio.DEFAULT, InvalidAudio(name))
    return Resolved(audio)


def resolve_duration(name: str) -> Resolved:
    """Map ``short``/``long`` (any case) to a :class:`Duration` member.

    Unknown names yield ``Duration.SHORT`` together with :class:`InvalidDuration`.
    """
    duration = DURATION_NAMES.get(name.lower())
    if duration is None:
        return Resolved(Duration.SHORT, InvalidDuration(name))
    return Resolved(duration)
