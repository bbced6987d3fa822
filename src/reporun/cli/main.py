# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""reporun entry point: resolve the configuration for a repository store."""

import json
import logging
import sys
from typing import Any, Dict, Optional, Sequence

from reporun import __version__
from reporun.cli.exceptions import ArgumentSyntaxError
from reporun.cli.options import Options
from reporun.cli.parser import OptionParser
from reporun.runtime.logging import configure_reporun_logging

logger = logging.getLogger(__name__)


def build_parser() -> OptionParser:
    parser = OptionParser(
        prog="reporun",
        description="Resolve and print the configuration used to open a repository store.",
    )
    parser.add_argument(
        "--version", action="version", version=f"reporun {__version__}"
    )
    return parser


def dump_config(options: Options) -> Dict[str, Any]:
    """Return the resolved configuration of every bean, keyed by bean type name."""
    return {
        type(bean).__name__: bean.config.model_dump(mode="json")
        for bean in options.beans
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_reporun_logging()

    parser = build_parser()
    options = Options()
    try:
        options.parse_and_configure(parser, argv)
    except ArgumentSyntaxError as e:
        sys.stderr.write(e.usage or parser.format_usage())
        sys.stderr.write(f"{parser.prog}: error: {e.message}\n")
        return 2
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    common = options.get_common_options()
    if common.is_document():
        logger.info(f"Using document store {common.store_arg()}")
    else:
        logger.info(f"Using segment store {common.store_arg()}")

    print(json.dumps(dump_config(options), indent=2))
    return 0
