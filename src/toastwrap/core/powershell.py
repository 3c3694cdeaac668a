"""Run staged scripts through PowerShell with the console window hidden."""

import logging
import subprocess
import sys
from pathlib import Path

from toastwrap.core.config import Settings
from toastwrap.core.errors import DispatchError
from toastwrap.core.stage import discard, stage

logger = logging.getLogger(__name__)


def _command(powershell: str, script_path: Path) -> list[str]:
    return [
        powershell,
        "-NoProfile",
        "-NonInteractive",
        "-ExecutionPolicy",
        "Bypass",
        "-File",
        str(script_path),
    ]


def _hidden_window_kwargs() -> dict:
    """Popen kwargs that keep PowerShell from flashing a console window."""
    if sys.platform != "win32":
        return {}
    startupinfo = subprocess.STARTUPINFO()
    startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW
    startupinfo.wShowWindow = subprocess.SW_HIDE
    return {
        "startupinfo": startupinfo,
        "creationflags": subprocess.CREATE_NO_WINDOW,
    }


def dispatch(script_path: Path, settings: Settings | None = None) -> None:
    """Execute a staged script and wait for PowerShell to exit.

    Output is captured and only logged. A run that outlives
    ``settings.timeout`` is killed.

    Raises:
        DispatchError: PowerShell could not be started, timed out, or exited
            with a nonzero status.
    """
    settings = settings or Settings()
    cmd = _command(settings.powershell, script_path)
    logger.debug("Running %s", " ".join(cmd))

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=settings.timeout,
            **_hidden_window_kwargs(),
        )
    except subprocess.TimeoutExpired as e:
        raise DispatchError(
            f"{settings.powershell} did not finish within {settings.timeout:g}s"
        ) from e
    except OSError as e:
        raise DispatchError(f"Failed to start {settings.powershell}: {e}") from e

    if result.stdout:
        logger.debug("PowerShell stdout: %s", result.stdout.strip())
    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise DispatchError(
            stderr or f"{settings.powershell} exited with status {result.returncode}",
            returncode=result.returncode,
            stderr=stderr,
        )


def run_script(script: str, settings: Settings | None = None) -> None:
    """Stage ``script``, dispatch it, and always remove the staged file."""
    settings = settings or Settings()
    if settings.debug_script:
        logger.debug("Rendered script:\n%s", script)

    path = stage(script, settings.temp_dir)
    try:
        dispatch(path, settings)
    finally:
        discard(path)
