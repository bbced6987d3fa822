# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Base OptionsBean and OptionsBeanFactory interfaces."""
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from .exceptions import RegistryStateError
from .parser import ParseResult

B = TypeVar("B", bound="OptionsBean")


class OptionsBean(ABC):
    """
    Base interface for all options beans.

    Each OptionsBean owns a set of command line flags. It declares them on the
    shared parser during registration and reads its own values back out of the
    parse result during configuration. Beans are looked up by their concrete
    type once the registry has configured them.
    """

    #: Heading of the bean's help section (e.g., "Document Store Options")
    title: str = ""

    #: Optional text printed under the heading
    description: Optional[str] = None

    #: If set, resolve() builds this pydantic model from the parse result's matching keys.
    #: Subclasses with custom resolve logic leave this None.
    config_class: Optional[Type[BaseModel]] = None

    def __init__(self) -> None:
        self._config: Any = None

    @abstractmethod
    def register_flags(self, parser) -> None:
        """
        Register CLI flags owned by this bean.

        Must not depend on runtime state or other beans.

        Args:
            parser: argparse.ArgumentParser shared by all beans
        """
        ...

    def configure(self, result: ParseResult) -> None:
        """
        Read this bean's values out of the parse result.

        Runs resolve() then validate() and keeps the resolved config. Errors
        from either step propagate to the caller unchanged.
        """
        if self._config is not None:
            raise RegistryStateError(f"{type(self).__name__} is already configured")
        resolved = self.resolve(result)
        self.validate(resolved)
        self._config = resolved

    def resolve(self, result: ParseResult) -> Any:
        """
        Normalize and coerce raw parsed values into a typed config object.

        Default implementation: if config_class is set, build it from the keys of
        the parse result that match its fields. Override for renames or derived
        values.
        """
        cls = self.config_class
        if cls is None:
            raise NotImplementedError(
                f"{type(self).__name__} must set config_class or override resolve()"
            )
        field_names = cls.model_fields.keys()
        return cls(**{k: v for k, v in result.items() if k in field_names})

    def validate(self, resolved: Any) -> None:
        """
        Optional additional validation of the resolved config.

        Raises:
            ValueError: If validation fails
        """
        pass

    @property
    def is_configured(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> Any:
        if self._config is None:
            raise RegistryStateError(f"{type(self).__name__} has not been configured")
        return self._config

    def add_group(self, parser):
        """Create the argument group holding this bean's flags."""
        return parser.add_argument_group(self.title or type(self).__name__, self.description)


class OptionsBeanFactory(ABC):
    """Produces exactly one OptionsBean per registry lifecycle."""

    @abstractmethod
    def create(self) -> OptionsBean:
        """Construct the bean without touching any parser."""
        ...

    def new_instance(self, parser) -> OptionsBean:
        """Construct the bean and register its flags on ``parser``."""
        bean = self.create()
        bean.register_flags(parser)
        return bean


class BeanClassFactory(OptionsBeanFactory, Generic[B]):
    """Factory for any OptionsBean subclass with a no-argument constructor."""

    def __init__(self, bean_class: Type[B]):
        self.bean_class = bean_class

    def create(self) -> B:
        return self.bean_class()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BeanClassFactory) and other.bean_class is self.bean_class

    def __hash__(self) -> int:
        return hash((BeanClassFactory, self.bean_class))

    def __repr__(self) -> str:
        return f"BeanClassFactory({self.bean_class.__name__})"
