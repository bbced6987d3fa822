# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Shared argument parser and the immutable result of a parse pass."""

import argparse
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator, Optional, Sequence

from .exceptions import ArgumentSyntaxError

#: Destination holding the positional (non-option) arguments.
NON_OPTIONS_DEST = "non_options"


class OptionParser(argparse.ArgumentParser):
    """
    ArgumentParser shared by all options beans.

    Help is owned by the common options bean, so argparse's own ``-h`` action is
    disabled by default. Parse errors raise ArgumentSyntaxError instead of
    terminating the process.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("add_help", False)
        kwargs.setdefault("formatter_class", argparse.RawTextHelpFormatter)
        super().__init__(*args, **kwargs)

    def error(self, message: str):
        raise ArgumentSyntaxError(message, usage=self.format_usage())


class ParseResult(Mapping):
    """
    Read-only view over the values produced by one parse pass.

    Values are keyed by argparse destination name. List values, such as those of
    ``nargs`` arguments, are stored as tuples. Positional arguments are exposed
    separately through ``non_options``.
    """

    def __init__(self, values: Mapping[str, Any], non_options: Sequence[str] = ()):
        self._values = MappingProxyType(
            {k: tuple(v) if isinstance(v, list) else v for k, v in values.items()}
        )
        self._non_options = tuple(non_options)

    @classmethod
    def from_namespace(cls, namespace: argparse.Namespace) -> "ParseResult":
        values = vars(namespace)
        return cls(values, values.get(NON_OPTIONS_DEST) or ())

    @property
    def non_options(self) -> tuple[str, ...]:
        return self._non_options

    def value_of(self, dest: str, default: Optional[Any] = None) -> Any:
        """Return the parsed value for ``dest``, or ``default`` if it is absent or None."""
        value = self._values.get(dest)
        return default if value is None else value

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParseResult({dict(self._values)!r}, non_options={list(self._non_options)!r})"
