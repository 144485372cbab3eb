"""A key store kept in a plain text file, one ``kid:secret:created`` per line."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Sequence

from keyden.commons import InvalidFormatError, KeyMaterial, KeyStore, KeyStoreError

_LINE = re.compile(r"([^:]+):([^:]+):(\d+)")
_I64_MAX = 2**63 - 1


def _parse_timestamp(digits: str) -> int:
    if not digits.isascii():
        raise KeyStoreError("Parse error: invalid digit found in string")
    value = int(digits)
    if value > _I64_MAX:
        raise KeyStoreError("Parse error: number too large to fit in target type")
    return value


class FileKeyStore(KeyStore):
    """Stores keys in a text file at ``path``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def read_keys(self) -> list[KeyMaterial]:
        try:
            with self.path.open("r", encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise KeyStoreError(f"IO error: {exc}") from exc

        keys = []
        for number, raw in enumerate(content.split("\n"), start=1):
            line = raw.strip()
            if not line:
                continue
            match = _LINE.fullmatch(line)
            if match is None:
                raise InvalidFormatError(f"Invalid line {number}: {line}")
            kid, secret, created = match.groups()
            keys.append(
                KeyMaterial(kid=kid, secret=secret, created_at_unix=_parse_timestamp(created))
            )
        return keys

    def write_keys(self, keys: Sequence[KeyMaterial]) -> None:
        content = "".join(f"{k.kid}:{k.secret}:{k.created_at_unix}\n" for k in keys)
        try:
            self.path.write_text(content, encoding="utf-8", newline="")
        except OSError as exc:
            raise KeyStoreError(f"IO error: {exc}") from exc