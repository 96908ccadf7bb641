from __future__ import annotations
import json
import math
import re
import sys
from contextlib import contextmanager
from typing import Any, Optional

import anyio

from confprobe.probe.errors import FileReadError, ParseError

# UTF-8 strict: un BOM reste dans le texte et échoue à l'analyse
ENCODING = "utf-8"

_SURROGATE = re.compile("[\ud800-\udfff]")

async def read_text(path: str, timeout: Optional[float] = None) -> str:
    """
    Lit tout le fichier en texte UTF-8. Une seule lecture, pas de retry.
    Toute erreur d'accès ou de décodage devient FileReadError.
    """
    p = anyio.Path(path)
    try:
        if timeout is None:
            return await p.read_text(encoding=ENCODING)
        with anyio.fail_after(timeout):
            return await p.read_text(encoding=ENCODING)
    # TimeoutError hérite d'OSError: à traiter en premier
    except TimeoutError as e:
        raise FileReadError(f"Timed out after {timeout}s reading {path}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(e), path) from e

@contextmanager
def _unbounded_int_digits():
    # lève la limite de conversion int <-> str (4300 chiffres par défaut)
    get_limit = getattr(sys, "get_int_max_str_digits", None)
    if get_limit is None:
        yield
        return
    previous = get_limit()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)

def _reject_constant(name: str):
    # NaN / Infinity ne font pas partie de JSON
    raise ValueError(f"Invalid JSON literal: {name}")

def _parse_float(raw: str) -> Optional[float]:
    # 1e400 déborde en inf: rendu null, comme JSON.stringify
    value = float(raw)
    return value if math.isfinite(value) else None

def parse_json(text: str, path: Optional[str] = None) -> Any:
    try:
        with _unbounded_int_digits():
            return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
    except json.JSONDecodeError as e:
        raise ParseError(str(e), path, lineno=e.lineno, colno=e.colno) from e
    except ValueError as e:
        raise ParseError(str(e), path) from e
    except RecursionError as e:
        raise ParseError("JSON document is nested too deeply", path) from e

async def load_json(path: str, timeout: Optional[float] = None) -> Any:
    text = await read_text(path, timeout=timeout)
    return parse_json(text, path=path)

def dump_json(data: Any, indent: int = 2) -> str:
    # ordre des clés conservé, pas d'échappement ASCII sauf surrogates isolés
    with _unbounded_int_digits():
        text = json.dumps(data, ensure_ascii=False, allow_nan=False, indent=indent)
    return _SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)
