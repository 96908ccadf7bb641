from __future__ import annotations
import os, sys, json, threading, datetime
from typing import Optional, TextIO

_LEVELS = {"DEBUG":10, "INFO":20, "WARN":30, "ERROR":40}
_lock = threading.Lock()
_singleton = None

DEFAULT_LEVEL = "WARN"

def level_value(level: str) -> int:
    # WARNING accepté comme alias de WARN
    name = level.upper()
    if name == "WARNING":
        name = "WARN"
    return _LEVELS.get(name, _LEVELS[DEFAULT_LEVEL])

class Logger:
    """
    Logger minimal: une ligne par événement, contexte en JSON compact.
    Le stdout appartient au rapport, l'écho part donc toujours sur stderr.
    """
    def __init__(self, path: Optional[str]=None, level: str=DEFAULT_LEVEL, echo: bool=True,
                 stream: Optional[TextIO]=None):
        self.path = path
        self.level = level_value(level)
        self.echo = echo
        self.stream = stream

    def _write_file(self, line: str):
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            # fichier de log inutilisable: on continue sans
            print(f"[logger] log file disabled ({self.path}): {e}", file=(self.stream or sys.stderr))
            self.path = None

    def log(self, message: str, level: str="INFO", ctx: Optional[dict]=None):
        lvl = level_value(level)
        if lvl < self.level:
            return
        ts = datetime.datetime.now().isoformat(timespec="seconds")
        line = f"{ts} [{level.upper():5}] {message}"
        if ctx:
            line += " | " + json.dumps(ctx, ensure_ascii=False, separators=(",",":"), default=str)
        with _lock:
            if self.path:
                self._write_file(line)
        if self.echo:
            print(line, file=(self.stream or sys.stderr))

def get_logger(path: Optional[str]=None, level: Optional[str]=None, echo: bool=True) -> Logger:
    global _singleton
    if _singleton is None:
        if path is None:
            path = os.environ.get("CONFPROBE_LOG_FILE") or None
        if level is None:
            level = os.environ.get("CONFPROBE_LOG_LEVEL", DEFAULT_LEVEL)
        _singleton = Logger(path, level=level, echo=echo)
    return _singleton

def reset_logger():
    global _singleton
    _singleton = None

def debug(msg, **ctx): get_logger().log(msg, "DEBUG", ctx or None)
def info(msg, **ctx):  get_logger().log(msg, "INFO",  ctx or None)
def warn(msg, **ctx):  get_logger().log(msg, "WARN",  ctx or None)
def error(msg, **ctx): get_logger().log(msg, "ERROR", ctx or None)
