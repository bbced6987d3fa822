# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Options shared by every reporun command."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from reporun.cli.options_bean import OptionsBean
from reporun.cli.parser import NON_OPTIONS_DEST, ParseResult
from reporun.cli.utils import add_negatable_bool_argument

MONGO_PREFIX = "mongodb://"
RDB_PREFIX = "jdbc:"


class CommonConfig(BaseModel):
    """Configuration common to all commands."""

    model_config = ConfigDict(frozen=True)

    help_requested: bool = False
    read_write: bool = False
    metrics: bool = False
    segment: bool = False
    non_options: tuple[str, ...] = ()


class CommonOptions(OptionsBean):
    """Help flag, store access mode and the positional store argument."""

    title = "Global Options"

    def register_flags(self, parser) -> None:
        g = self.add_group(parser)

        # a parser built with add_help=True keeps argparse's own help action
        if not any(
            flag in parser._option_string_actions for flag in ("-h", "--help")
        ):
            g.add_argument(
                "-h",
                "--help",
                dest="help_requested",
                action="store_true",
                help="Show this help message and exit",
            )
        add_negatable_bool_argument(
            g,
            flag_name="--read-write",
            env_var="REPORUN_READ_WRITE",
            default=False,
            help="Connect to the repository in read-write mode.",
        )
        add_negatable_bool_argument(
            g,
            flag_name="--metrics",
            env_var="REPORUN_METRICS",
            default=False,
            help="Enable metrics collection.",
        )
        add_negatable_bool_argument(
            g,
            flag_name="--segment",
            env_var="REPORUN_SEGMENT",
            default=False,
            help="Use the segment store even when the store argument is ambiguous.",
        )
        g.add_argument(
            NON_OPTIONS_DEST,
            nargs="*",
            metavar="STORE",
            help="Store to operate on: a segment store directory,\n"
            "a mongodb:// URI or a jdbc: URL.",
        )

    def resolve(self, result: ParseResult) -> CommonConfig:
        return CommonConfig(
            help_requested=result.value_of("help_requested", False),
            read_write=result.value_of("read_write", False),
            metrics=result.value_of("metrics", False),
            segment=result.value_of("segment", False),
            non_options=result.non_options,
        )

    def is_help_requested(self) -> bool:
        return self.config.help_requested

    @property
    def non_options(self) -> list[str]:
        return list(self.config.non_options)

    def positional_arguments(self) -> list[str]:
        return self.non_options

    def store_arg(self) -> Optional[str]:
        """Return the first non-option argument, which selects the store."""
        non_options = self.config.non_options
        return non_options[0] if non_options else None

    def is_mongo(self) -> bool:
        store = self.store_arg()
        return store is not None and store.startswith(MONGO_PREFIX)

    def is_rdb(self) -> bool:
        store = self.store_arg()
        return store is not None and store.startswith(RDB_PREFIX)

    def is_document(self) -> bool:
        return self.is_mongo() or self.is_rdb()

    def is_segment(self) -> bool:
        if self.config.segment:
            return True
        return self.store_arg() is not None and not self.is_document()

    def is_read_write(self) -> bool:
        return self.config.read_write

    def is_metrics_enabled(self) -> bool:
        return self.config.metrics
