from __future__ import annotations
import sys
from typing import Any, Optional, TextIO

from confprobe.io_utils.json_loader import dump_json
from .errors import FileReadError, ParseError

READ_FAILED_LABEL = "Failed to read config file:"
PARSE_FAILED_LABEL = "Failed to parse config file:"
SUCCESS_LABEL = "Config parsed successfully:"


class Reporter:
    """
    Rendu final d'un passage: succès sur stdout, échecs sur stderr.
    Les flux par défaut sont résolus à l'appel (capsys, redirections).
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None,
                 indent: int = 2):
        self._stdout = stdout
        self._stderr = stderr
        self.indent = indent

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def report_read_error(self, err: Exception) -> None:
        print(READ_FAILED_LABEL, err, file=self.stderr)

    def report_parse_error(self, err: Exception) -> None:
        print(PARSE_FAILED_LABEL, err, file=self.stderr)

    def report_success(self, config: Any) -> None:
        print(SUCCESS_LABEL, file=self.stdout)
        print(dump_json(config, indent=self.indent), file=self.stdout)

    def report(self, result) -> None:
        if result.ok:
            self.report_success(result.config)
        elif isinstance(result.error, FileReadError):
            self.report_read_error(result.error)
        elif isinstance(result.error, ParseError):
            self.report_parse_error(result.error)
        else:
            raise TypeError(f"Unexpected probe error: {result.error!r}")
