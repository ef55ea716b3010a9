"""Input/output helpers for the wordset CLI."""
import json
import logging
import os
import sys
from typing import TextIO

from .engine.intset import IntegerSet

logger = logging.getLogger(__name__)


def _parse_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"expected an integer, got {value!r}")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"expected an integer, got {value!r}") from None


def _read_text_lines(handle: TextIO) -> list[int]:
    return [_parse_int(token) for line in handle for token in line.split()]


def _read_jsonl(handle: TextIO) -> list[int]:
    data: list[int] = []
    for raw in handle:
        raw = raw.strip()
        if not raw:
            continue
        obj = json.loads(raw)
        if isinstance(obj, dict) and "item" in obj:
            value = obj["item"]
        else:
            value = obj
        data.append(_parse_int(value))
    return data


def _read_json(handle: TextIO) -> list[int]:
    payload = json.load(handle)
    if isinstance(payload, dict) and "items" in payload:
        payload = payload["items"]
    if not isinstance(payload, list):
        raise ValueError("JSON items file must contain a list or an object with an 'items' key")
    return [_parse_int(value) for value in payload]


def _open_path(path: str) -> list[int]:
    _, ext = os.path.splitext(path)
    ext = ext.lower()
    with open(path, encoding="utf-8") as handle:
        if ext == ".jsonl":
            return _read_jsonl(handle)
        if ext == ".json":
            return _read_json(handle)
        return _read_text_lines(handle)


def read_items(path: str) -> list[int]:
    items = list(_open_path(path))
    logger.debug("read %d items from %s", len(items), path)
    return items


def read_bytes(path: str) -> bytes:
    if path == "-":
        data = sys.stdin.buffer.read()
    else:
        with open(path, "rb") as handle:
            data = handle.read()
    logger.debug("read %d bytes from %s", len(data), path)
    return data


def write_bytes(data: bytes, path: str) -> None:
    if path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        with open(path, "wb") as handle:
            handle.write(data)
    logger.debug("wrote %d bytes to %s", len(data), path)


def load_set(path: str) -> IntegerSet:
    return IntegerSet.from_bytes(read_bytes(path))


def save_set(value: IntegerSet, path: str) -> None:
    write_bytes(value.to_bytes(), path)


def write_json(obj: dict, path: str) -> None:
    if path == "-":
        json.dump(obj, sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(obj, handle, indent=2, sort_keys=True)
        handle.write("\n")


def write_text(text: str, path: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
