# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Options registry that drives registration, parsing and configuration of beans."""

import argparse
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from itertools import chain
from typing import Dict, Optional, Sequence, Tuple, Type, TypeVar

from .exceptions import DuplicateBeanError, RegistryStateError, UnknownBeanTypeError
from .groups.common_options import CommonOptions
from .option_beans import OptionBeans
from .options_bean import OptionsBean, OptionsBeanFactory
from .parser import OptionParser, ParseResult

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=OptionsBean)


class ParseStatus(Enum):
    SUCCESS = "success"
    HELP_REQUESTED = "help_requested"
    NO_TARGET_SELECTED = "no_target_selected"


@dataclass(frozen=True)
class ParseOutcome:
    """Result of Options.parse(): the parse result plus what the caller should do next."""

    status: ParseStatus
    parse_result: ParseResult
    help_text: str = ""

    @property
    def exit_code(self) -> Optional[int]:
        """Process exit status for terminal outcomes, None on success."""
        if self.status is ParseStatus.HELP_REQUESTED:
            return 0
        if self.status is ParseStatus.NO_TARGET_SELECTED:
            return 1
        return None


class Options:
    """
    Registry of options beans.

    Built-in kinds are chosen at construction. Extension factories may be added
    until the arguments are parsed. A parse then registers every bean's flags on
    one shared parser, parses the arguments once and configures each bean from the
    result. Afterwards beans are looked up by their type.
    """

    def __init__(self, *kinds: OptionBeans):
        """
        Initialize registry with the built-in kinds to activate.

        Args:
            kinds: Built-in kinds to activate. All of OptionBeans when empty.
        """
        for kind in kinds:
            if not isinstance(kind, OptionBeans):
                raise TypeError(f"Expected an OptionBeans member, got {kind!r}")
        selected = set(kinds) if kinds else set(OptionBeans)
        self._kinds: Tuple[OptionBeans, ...] = tuple(k for k in OptionBeans if k in selected)
        # dict keys as an insertion-ordered set
        self._factories: Dict[OptionsBeanFactory, None] = {}
        self._beans: Dict[Type[OptionsBean], OptionsBean] = {}
        self._parse_result: Optional[ParseResult] = None
        self._started = False

    @property
    def kinds(self) -> Tuple[OptionBeans, ...]:
        """Active built-in kinds in OptionBeans definition order."""
        return self._kinds

    @property
    def is_configured(self) -> bool:
        """True once the arguments have been parsed."""
        return self._parse_result is not None

    @property
    def parse_result(self) -> Optional[ParseResult]:
        """Result of the parse pass, or None before parsing."""
        return self._parse_result

    @property
    def beans(self) -> Tuple[OptionsBean, ...]:
        """Registered beans in registration order."""
        return tuple(self._beans.values())

    def register_options_factory(self, factory: OptionsBeanFactory) -> None:
        """Add an extension factory. Must be called before parsing."""
        if self._started:
            raise RegistryStateError(
                "Options factories cannot be registered after the arguments were parsed"
            )
        self._factories[factory] = None

    def parse(
        self,
        parser: Optional[argparse.ArgumentParser] = None,
        args: Optional[Sequence[str]] = None,
        check_non_options: bool = True,
    ) -> ParseOutcome:
        """
        Register all beans, parse the arguments and configure the beans.

        CommonOptions is configured first. When it reports a help request the
        other beans are left unconfigured and HELP_REQUESTED is returned.

        Args:
            parser: Parser shared by all beans. A new OptionParser when None.
            args: Command line arguments (defaults to sys.argv[1:])
            check_non_options: If True, require at least one non-option argument
                (the store to operate on) when CommonOptions is registered

        Returns:
            ParseOutcome telling whether help was requested, no store was
            selected, or parsing succeeded

        Raises:
            ArgumentSyntaxError: If an OptionParser cannot parse the arguments
            DuplicateBeanError: If two factories produce beans of the same type
            RegistryStateError: If the arguments were already parsed
        """
        if self._started:
            raise RegistryStateError("Options were already parsed and configured")
        self._started = True
        if parser is None:
            parser = OptionParser()

        for factory in chain(self._kinds, self._factories):
            # a duplicate must be rejected before its flags reach the parser
            bean = factory.create()
            bean_type = type(bean)
            if bean_type in self._beans:
                raise DuplicateBeanError(bean_type)
            bean.register_flags(parser)
            logger.debug(f"Registered flags of {bean_type.__name__}")
            self._beans[bean_type] = bean

        result = ParseResult.from_namespace(parser.parse_intermixed_args(args))
        self._parse_result = result

        # help is answered before any other bean can reject its values
        common = self._beans.get(CommonOptions)
        if common is not None:
            common.configure(result)
            if common.is_help_requested():
                logger.debug("Help requested, remaining beans left unconfigured")
                return ParseOutcome(
                    ParseStatus.HELP_REQUESTED, result, parser.format_help()
                )

        for bean in self._beans.values():
            if bean is common:
                continue
            logger.debug(f"Configuring {type(bean).__name__}")
            bean.configure(result)

        if check_non_options and common is not None and not common.non_options:
            logger.debug("No store argument given")
            return ParseOutcome(
                ParseStatus.NO_TARGET_SELECTED, result, parser.format_help()
            )
        return ParseOutcome(ParseStatus.SUCCESS, result)

    def parse_and_configure(
        self,
        parser: Optional[argparse.ArgumentParser] = None,
        args: Optional[Sequence[str]] = None,
        check_non_options: bool = True,
    ) -> ParseResult:
        """
        Parse the arguments and configure the beans, exiting on help or a missing store.

        Prints the help text to stdout and exits with status 0 when help was
        requested, or with status 1 when ``check_non_options`` is set and no
        store argument was given.

        Returns:
            ParseResult of the parse pass
        """
        outcome = self.parse(parser, args, check_non_options)
        if outcome.exit_code is not None:
            sys.stdout.write(outcome.help_text)
            sys.stdout.flush()
            sys.exit(outcome.exit_code)
        return outcome.parse_result

    def get_option_bean(self, bean_type: Type[T]) -> T:
        """
        Return the configured bean of exactly ``bean_type``.

        Raises:
            UnknownBeanTypeError: If no bean of that type was registered
        """
        bean = self._beans.get(bean_type)
        if bean is None:
            raise UnknownBeanTypeError(bean_type, self._beans)
        return bean  # type: ignore[return-value]

    def get_common_options(self) -> CommonOptions:
        """Return the configured CommonOptions bean."""
        return self.get_option_bean(CommonOptions)
