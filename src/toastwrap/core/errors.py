"""Exceptions raised along the toast build and dispatch pipeline."""


class ToastError(Exception):
    """Base class for all toastwrap errors."""


class InvalidEnumValue(ToastError, ValueError):
    """A user-facing name did not match any known enum member.

    Resolvers return these alongside a fallback value instead of raising.
    """

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"toast: invalid {kind} {name!r}")
        self.kind = kind
        self.name = name


class InvalidAudio(InvalidEnumValue):
    def __init__(self, name: str) -> None:
        super().__init__("audio", name)


class InvalidDuration(InvalidEnumValue):
    def __init__(self, name: str) -> None:
        super().__init__("duration", name)


class PathResolutionError(ToastError):
    """Icon path could not be made absolute."""


class RegistrationError(ToastError):
    """Registering the app identity with Windows failed."""


class RenderError(ToastError):
    """Notification fields could not be projected into toast XML."""


class StageError(ToastError):
    """Writing the staged script to disk failed."""


class DispatchError(ToastError):
    """PowerShell could not be started or exited with a failure."""

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
