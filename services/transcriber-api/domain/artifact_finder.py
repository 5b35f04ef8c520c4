"""
Locates files written by external tools.

Neither yt-dlp nor whisper reports the path it wrote to, so results are
found by scanning the working directory for names derived from the session.
Every function here only reads the directory it is given and returns the
first match in sorted name order, or ``None`` when nothing matches.
"""

from collections.abc import Callable
from pathlib import Path

from .models import AUDIO_PREFIX, Session

AUDIO_EXTENSIONS = (".wav", ".mp3")
TRANSCRIPT_EXTENSION = ".txt"


def _first_file(directory: Path, predicate: Callable[[str], bool]) -> Path | None:
    if not directory.is_dir():
        return None
    for path in sorted(directory.iterdir()):
        if path.is_file() and predicate(path.name):
            return path
    return None


def find_audio_artifact(
    directory: Path, session: Session, allow_loose_match: bool = False
) -> Path | None:
    """
    Finds the audio file extracted for ``session``.

    Args:
        directory: Directory the extractor wrote into.
        session: Session whose id is embedded in the output template.
        allow_loose_match: Also accept any ``audio_*`` file with an audio
            extension when no session-qualified file exists. This tolerates
            the extractor renaming its output, at the cost of possibly
            picking a stale file or one belonging to another session.

    Returns:
        Path of the first matching file, or None.
    """
    path = _first_file(
        directory,
        lambda name: session.audio_stem in name and name.endswith(AUDIO_EXTENSIONS),
    )
    if path is not None or not allow_loose_match:
        return path
    return _first_file(
        directory,
        lambda name: name.startswith(AUDIO_PREFIX) and name.endswith(AUDIO_EXTENSIONS),
    )


def find_transcript_artifact(directory: Path, audio_path: Path) -> Path | None:
    """Finds the text file the transcriber wrote for ``audio_path``."""
    base_name = audio_path.stem if audio_path.suffix else audio_path.name
    return _first_file(
        directory,
        lambda name: name.startswith(base_name) and name.endswith(TRANSCRIPT_EXTENSION),
    )


def find_session_files(directory: Path, session: Session) -> list[Path]:
    """Lists every file whose name carries the session id."""
    if not directory.is_dir():
        return []
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and session.id in path.name
    )
