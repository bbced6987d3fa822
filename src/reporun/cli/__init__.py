# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
OptionsBean-based command line configuration for reporun.

This package provides a pluggable option registry where:
- Each OptionsBean owns a set of flags and the typed values read from them
- Built-in bean kinds are enumerated by OptionBeans, extensions plug in through factories
- One shared parse pass configures every bean, which is then looked up by type
"""

from .exceptions import (
    ArgumentSyntaxError,
    DuplicateBeanError,
    OptionsError,
    RegistryStateError,
    UnknownBeanTypeError,
)
from .parser import OptionParser, ParseResult
from .utils import add_argument, add_negatable_bool_argument, env_or_default
from .options_bean import BeanClassFactory, OptionsBean, OptionsBeanFactory
from .groups import BlobStoreOptions, BlobStoreType, CommonOptions, DocumentStoreOptions
from .option_beans import OptionBeans
from .options import Options, ParseOutcome, ParseStatus

__all__ = [
    # Registry
    "Options",
    "OptionBeans",
    "ParseOutcome",
    "ParseStatus",
    # Base classes
    "OptionsBean",
    "OptionsBeanFactory",
    "BeanClassFactory",
    # Parsing
    "OptionParser",
    "ParseResult",
    # Built-in beans
    "CommonOptions",
    "DocumentStoreOptions",
    "BlobStoreOptions",
    "BlobStoreType",
    # Errors
    "OptionsError",
    "ArgumentSyntaxError",
    "UnknownBeanTypeError",
    "DuplicateBeanError",
    "RegistryStateError",
    # Utilities
    "env_or_default",
    "add_argument",
    "add_negatable_bool_argument",
]
