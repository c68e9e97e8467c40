"""
`${...}` placeholder substitution applied to realm files before checksumming.

Supported forms:
  ${NAME}                 environment variable
  ${NAME:-fallback}       default when NAME is undefined
  ${env:NAME}             explicit environment lookup
  ${base64Decoder:...}    base64-decode the literal that follows
  ${base64Encoder:...}    base64-encode the literal that follows
  ${file:[charset:]PATH}  contents of a file
  $${NAME}                escaped, emitted as the literal ${NAME}
"""
from __future__ import annotations

import base64
import binascii
import codecs
import os
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional

from common.config import ImportSettings
from common.errors import InvalidImportError

_OPEN = "${"
_ESCAPED_OPEN = "$${"
_CLOSE = "}"
_DEFAULT = ":-"


def _b64decode(value: str) -> str:
    try:
        return base64.b64decode(value, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise InvalidImportError(f"Cannot base64-decode '{value}': {e}") from e


def _b64encode(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def _is_charset(name: str) -> bool:
    try:
        info = codecs.lookup(name)
    except LookupError:
        return False
    # bytes-to-bytes codecs such as base64 or zip cannot decode a file to text
    return info._is_text_encoding


def _read_file(value: str) -> str:
    charset, sep, path = value.partition(":")
    if not sep or not _is_charset(charset):
        charset, path = "utf-8", value
    try:
        return Path(path).read_text(encoding=charset)
    except (OSError, LookupError, UnicodeDecodeError) as e:
        raise InvalidImportError(f"Cannot read file '{path}': {e}") from e


class VariableInterpolator:
    def __init__(
        self,
        substitution_in_variables: bool = True,
        undefined_throws: bool = True,
        variables: Optional[Mapping[str, str]] = None,
    ):
        self.substitution_in_variables = substitution_in_variables
        self.undefined_throws = undefined_throws
        self.variables = os.environ if variables is None else variables
        self._lookups: Dict[str, Callable[[str], Optional[str]]] = {
            "env": self.variables.get,
            "base64Decoder": _b64decode,
            "base64Encoder": _b64encode,
            "file": _read_file,
        }

    def interpolate(self, text: str) -> str:
        if _OPEN not in text:
            return text
        try:
            return self._substitute(text, [])
        except RecursionError as e:
            raise InvalidImportError(
                "Variable substitution nested too deeply to resolve"
            ) from e

    def _lookup(self, name: str) -> Optional[str]:
        prefix, sep, key = name.partition(":")
        if sep and prefix in self._lookups:
            return self._lookups[prefix](key)
        return self.variables.get(name)

    def _closing_brace(self, text: str, start: int) -> int:
        if not self.substitution_in_variables:
            return text.find(_CLOSE, start)
        depth = 0
        i = start
        while i < len(text):
            if text.startswith(_OPEN, i):
                depth += 1
                i += len(_OPEN)
                continue
            if text[i] == _CLOSE:
                if depth == 0:
                    return i
                depth -= 1
            i += 1
        return -1

    def _substitute(self, text: str, resolving: List[str]) -> str:
        out: List[str] = []
        i = 0
        while i < len(text):
            if text.startswith(_ESCAPED_OPEN, i):
                out.append(_OPEN)
                i += len(_ESCAPED_OPEN)
                continue
            if text.startswith(_OPEN, i):
                end = self._closing_brace(text, i + len(_OPEN))
                if end == -1:
                    # unterminated placeholder stays as-is
                    out.append(text[i:])
                    break
                expr = text[i + len(_OPEN) : end]
                out.append(self._resolve(expr, text[i : end + 1], resolving))
                i = end + 1
                continue
            out.append(text[i])
            i += 1
        return "".join(out)

    def _resolve(self, expr: str, placeholder: str, resolving: List[str]) -> str:
        if self.substitution_in_variables:
            expr = self._substitute(expr, resolving)

        name, sep, default = expr.partition(_DEFAULT)
        value = self._lookup(name)
        if value is None:
            if sep:
                value = default
            elif self.undefined_throws:
                raise InvalidImportError(f"Cannot resolve variable '{name}'")
            else:
                return placeholder

        if not self.substitution_in_variables:
            return value
        if name in resolving:
            chain = "->".join(resolving + [name])
            raise InvalidImportError(
                f"Infinite loop in property interpolation of {placeholder}: {chain}"
            )
        return self._substitute(value, resolving + [name])


def build_interpolator(settings: ImportSettings) -> Optional[VariableInterpolator]:
    """None when substitution is disabled."""
    if not settings.var_substitution:
        return None
    return VariableInterpolator(
        substitution_in_variables=settings.var_substitution_in_variables,
        undefined_throws=settings.var_substitution_undefined_throws_exceptions,
    )
