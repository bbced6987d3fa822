# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by the options registry."""

from typing import Iterable, Optional


class OptionsError(Exception):
    """Base exception for all options registry errors."""

    pass


class ArgumentSyntaxError(OptionsError, ValueError):
    """The command line could not be parsed against the registered flags."""

    def __init__(self, message: str, usage: Optional[str] = None):
        self.message = message
        self.usage = usage
        super().__init__(message)


class UnknownBeanTypeError(OptionsError, LookupError):
    """No bean of the requested type was registered."""

    def __init__(self, bean_type: type, registered: Iterable[type]):
        self.bean_type = bean_type
        self.registered = tuple(registered)
        names = ", ".join(t.__name__ for t in self.registered)
        super().__init__(f"No [{bean_type.__name__}] found in [{names}]")


class DuplicateBeanError(OptionsError, ValueError):
    """Two factories produced beans of the same type."""

    def __init__(self, bean_type: type):
        self.bean_type = bean_type
        super().__init__(f"Duplicate options bean type: {bean_type.__name__}")


class RegistryStateError(OptionsError, RuntimeError):
    """An operation was attempted in the wrong phase of the registry lifecycle."""

    pass
