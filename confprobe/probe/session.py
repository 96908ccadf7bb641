# --- session.py : un passage lecture -> analyse -> rapport ---
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

import anyio

from confprobe.io_utils.config_manager import resolve_config_path
from confprobe.io_utils.json_loader import read_text, parse_json
from confprobe.io_utils.logger import debug, info
from .errors import ConfigProbeError, FileReadError, ParseError
from .reporter import Reporter


# --------------------------
# État d'un passage
# --------------------------
class ProbeState(enum.Enum):
    START = "start"
    READING = "reading"
    PARSING = "parsing"
    READ_FAILED = "read_failed"
    PARSE_FAILED = "parse_failed"
    REPORTED = "reported"

    @property
    def terminal(self) -> bool:
        return self in (ProbeState.READ_FAILED, ProbeState.PARSE_FAILED, ProbeState.REPORTED)


@dataclass
class ProbeResult:
    path: str
    state: ProbeState = ProbeState.START
    config: Any = None
    error: Optional[ConfigProbeError] = None

    @property
    def ok(self) -> bool:
        return self.state is ProbeState.REPORTED


# --------------------------
# Orchestration
# --------------------------
async def run_once(path: Optional[str] = None, reporter: Optional[Reporter] = None,
                   timeout: Optional[float] = None) -> ProbeResult:
    """
    Lit puis analyse le fichier et émet exactement un rapport.
    Les erreurs des deux étapes sont rapportées ici et jamais relancées.
    """
    reporter = reporter or Reporter()
    result = ProbeResult(path=resolve_config_path(path))
    info("Probe start", path=result.path, timeout=timeout)

    result.state = ProbeState.READING
    try:
        text = await read_text(result.path, timeout=timeout)
    except FileReadError as e:
        result.state, result.error = ProbeState.READ_FAILED, e
        info("Read failed", path=result.path, err=str(e))
        reporter.report(result)
        return result
    debug("Read ok", chars=len(text))

    result.state = ProbeState.PARSING
    try:
        result.config = parse_json(text, path=result.path)
    except ParseError as e:
        result.state, result.error = ProbeState.PARSE_FAILED, e
        info("Parse failed", path=result.path, err=str(e), line=e.lineno, col=e.colno)
        reporter.report(result)
        return result

    result.state = ProbeState.REPORTED
    debug("Parse ok", kind=type(result.config).__name__)
    reporter.report(result)
    return result


def run(path: Optional[str] = None, reporter: Optional[Reporter] = None,
        timeout: Optional[float] = None) -> ProbeResult:
    return anyio.run(run_once, path, reporter, timeout)
