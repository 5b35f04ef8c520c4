import threading
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from domain.models import ExternalProcessResult, ExternalTool, ToolInvocationForm
from exceptions import ProcessSpawnError
from infrastructure.interfaces import ProcessRunner

PROBE_ARGS = {"--version", "--help"}


def result(command, exit_code=0, output="", timed_out=False):
    return ExternalProcessResult(
        command=tuple(command),
        exit_code=None if timed_out else exit_code,
        output=output,
        timed_out=timed_out,
    )


class FakeRunner(ProcessRunner):
    """Records every command and answers with ``handler(command, timeout)``."""

    def __init__(self, handler: Callable[[tuple[str, ...], float], ExternalProcessResult]):
        self._handler = handler
        self._lock = threading.Lock()
        self.calls: list[tuple[str, ...]] = []
        self.timeouts: list[float] = []

    def run(self, command: Sequence[str], timeout_seconds: float, label=None):
        command = tuple(str(part) for part in command)
        with self._lock:
            self.calls.append(command)
            self.timeouts.append(timeout_seconds)
        return self._handler(command, timeout_seconds)

    def calls_to(self, program: str) -> list[tuple[str, ...]]:
        return [c for c in self.calls if program in " ".join(c)]

    def runs_of(self, program: str) -> list[tuple[str, ...]]:
        """Non-probe invocations whose argv mentions ``program``."""
        return [
            c
            for c in self.calls_to(program)
            if not PROBE_ARGS.intersection(c) and "-c" not in c
        ]


class SimulatedTools:
    """
    Behaves like yt-dlp and whisper by writing their output files.

    Probes always succeed. Individual behaviours can be overridden per test.
    """

    def __init__(self, work_dir: Path):
        self.work_dir = work_dir
        self.audio_size = 1024
        self.transcript_text = "hello world"
        self.transcript_bytes = None
        self.extractor_exit_code = 0
        self.extractor_timeout = False
        self.transcriber_exit_code = 0
        self.transcriber_timeout = False
        self.write_audio = True
        self.write_transcript = True

    def __call__(self, command, timeout_seconds):
        if PROBE_ARGS.intersection(command):
            return result(command)
        if "--extract-audio" in command:
            return self._extract(command)
        if "--output_dir" in command:
            return self._transcribe(command)
        raise ProcessSpawnError(command)

    def _extract(self, command):
        if self.extractor_timeout:
            template = command[command.index("--output") + 1]
            Path(template.replace("%(ext)s", "webm.part")).write_bytes(b"partial")
            return result(command, output="[download]  12.5% of 3.20MiB", timed_out=True)
        if self.extractor_exit_code != 0:
            return result(command, self.extractor_exit_code, "ERROR: video unavailable")
        if self.write_audio:
            template = command[command.index("--output") + 1]
            path = Path(template.replace("%(ext)s", "wav"))
            with open(path, "wb") as f:
                f.truncate(self.audio_size)
            # yt-dlp leaves the original download next to the converted file
            Path(template.replace("%(ext)s", "m4a")).write_bytes(b"raw")
        return result(command, output="[ExtractAudio] Destination: audio.wav")

    def _transcribe(self, command):
        if self.transcriber_timeout:
            return result(command, output="[00:00.000 --> 00:04.000] partial", timed_out=True)
        if self.transcriber_exit_code != 0:
            return result(command, self.transcriber_exit_code, "RuntimeError: bad audio")
        if self.write_transcript:
            audio = next(Path(part) for part in command if part.endswith((".wav", ".mp3")))
            output_dir = Path(command[command.index("--output_dir") + 1])
            text = self.transcript_text
            if "{session}" in text:
                text = text.format(session=audio.stem)
            transcript = output_dir / f"{audio.stem}.txt"
            if self.transcript_bytes is not None:
                transcript.write_bytes(self.transcript_bytes)
            else:
                transcript.write_text(text, encoding="utf-8")
        return result(command, output="Detecting language: English")


def three_form_tool(name: str, module: str, probe: str = "--version") -> ExternalTool:
    return ExternalTool(
        name=name,
        forms=(
            ToolInvocationForm(command=(name,)),
            ToolInvocationForm(command=("python", "-m", module)),
            ToolInvocationForm(command=("python3", "-m", module)),
        ),
        probe_args=(probe,),
        install_hint=f"pip install {name}",
    )


@pytest.fixture
def work_dir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def tools(work_dir):
    return SimulatedTools(work_dir)
