# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Helpers for declaring options-bean flags with environment fallbacks."""

import argparse
import logging
import os
from typing import Any, Callable, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_truthy(val: str) -> bool:
    """
    Check if a string is truthy.

    Returns:
        True if the value is "1", "true", "on", or "yes" (case-insensitive).
    """
    return val.lower() in ("1", "true", "on", "yes")


def env_or_default(
    env_var: Optional[str], default: T, value_type: Optional[Callable] = None
) -> T:
    """
    Get value from environment variable or return default.

    Performs type conversion based on ``value_type`` or, when that is not
    given, on the default value's type.

    Args:
        env_var: Environment variable name (e.g., "REPORUN_CLUSTER_ID")
        default: Default value if env var not set
        value_type: Optional explicit conversion callable

    Returns:
        Environment variable value (type-converted) or default

    Examples:
        >>> env_or_default("REPORUN_CLUSTER_ID", 0)
        0  # if REPORUN_CLUSTER_ID not set
        >>> env_or_default("REPORUN_CLUSTER_ID", 0)
        5  # if REPORUN_CLUSTER_ID="5"
    """
    if env_var is None:
        return default
    value = os.environ.get(env_var)
    if value is None:
        return default

    if value_type is None and default is not None:
        value_type = type(default)

    if value_type is bool:
        return is_truthy(value)  # type: ignore
    if value_type is None:
        return value  # type: ignore
    return value_type(value)


def _help_with_env(help: str, env_var: Optional[str], default: Any) -> str:
    if env_var is None:
        return f"{help} (default: {default})"
    return f"{help} (env: {env_var}, default: {default})"


class _ObsoleteFlagAction(argparse.Action):
    """Stores into the replacement flag's destination and warns about the old spelling."""

    def __init__(self, option_strings, dest, replacement: str, **kwargs):
        self.replacement = replacement
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        logger.warning(
            f"Flag {option_string} is deprecated, use {self.replacement} instead"
        )
        setattr(namespace, self.dest, values)


def add_argument(
    parser,
    flag_name: str,
    help: str,
    env_var: Optional[str] = None,
    default: Any = None,
    arg_type: Optional[Callable] = None,
    choices: Optional[Sequence[Any]] = None,
    nargs: Optional[str] = None,
    obsolete_flag: Optional[str] = None,
    dest: Optional[str] = None,
) -> None:
    """
    Add a flag whose default may be overridden through an environment variable.

    When the environment variable is set and ``arg_type`` is a callable, the raw
    string is handed to argparse as the default so that the callable validates it
    exactly like a value given on the command line.

    Args:
        parser: ArgumentParser or argument group
        flag_name: Flag with dashes (e.g., "--cluster-id")
        help: Help text
        env_var: Optional environment variable name
        default: Default value
        arg_type: Conversion callable passed to argparse as ``type``
        choices: Allowed values
        nargs: argparse ``nargs``
        obsolete_flag: Older spelling still accepted, hidden from help
        dest: Destination name, derived from ``flag_name`` when omitted
    """
    dest = dest or flag_name.lstrip("-").replace("-", "_")

    if arg_type is not None and env_var is not None and env_var in os.environ:
        effective_default: Any = os.environ[env_var]
    else:
        effective_default = env_or_default(env_var, default, value_type=arg_type)

    kwargs: dict[str, Any] = {
        "dest": dest,
        "default": effective_default,
        "help": _help_with_env(help, env_var, effective_default),
    }
    if arg_type is not None:
        kwargs["type"] = arg_type
    if choices is not None:
        kwargs["choices"] = choices
    if nargs is not None:
        kwargs["nargs"] = nargs

    parser.add_argument(flag_name, **kwargs)

    if obsolete_flag:
        obsolete_kwargs: dict[str, Any] = {
            "dest": dest,
            "default": argparse.SUPPRESS,
            "help": argparse.SUPPRESS,
            "replacement": flag_name,
        }
        if arg_type is not None:
            obsolete_kwargs["type"] = arg_type
        if choices is not None:
            obsolete_kwargs["choices"] = choices
        if nargs is not None:
            obsolete_kwargs["nargs"] = nargs
        parser.add_argument(obsolete_flag, action=_ObsoleteFlagAction, **obsolete_kwargs)


def add_negatable_bool_argument(
    parser,
    flag_name: str,
    help: str,
    default: bool = False,
    env_var: Optional[str] = None,
) -> None:
    """
    Add negatable boolean flag (--foo / --no-foo).

    Args:
        parser: ArgumentParser or argument group
        flag_name: Flag with dashes (e.g., "--disable-branches")
        help: Help text
        default: Default value
        env_var: Optional environment variable name (e.g., "REPORUN_DISABLE_BRANCHES")
    """
    dest = flag_name.lstrip("-").replace("-", "_")
    default_with_env = env_or_default(env_var, default)

    parser.add_argument(
        flag_name,
        dest=dest,
        action=argparse.BooleanOptionalAction,
        default=default_with_env,
        help=_help_with_env(help, env_var, default_with_env),
    )
