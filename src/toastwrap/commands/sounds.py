"""List the audio names accepted by --audio."""

from toastwrap.core.enums import AUDIO_NAMES, DURATION_NAMES
from toastwrap.core.theme import console, create_table, fmt

COMMAND = {
    "description": "List audio and duration names",
}


def run(*args: str) -> int:  # noqa: ARG001
    table = create_table("Name", "Sound event", title="Audio")
    for name, audio in AUDIO_NAMES.items():
        table.add_row(fmt(name), f"[muted]{audio.value}[/muted]")
    console.print(table)

    console.print(
        "[label]Durations:[/label] " + ", ".join(fmt(name) for name in DURATION_NAMES)
    )
    return 0
