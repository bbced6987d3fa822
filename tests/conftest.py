# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Root conftest for reporun tests."""

import os

import pytest

from reporun.cli.parser import OptionParser, ParseResult


@pytest.fixture(autouse=True)
def clean_reporun_env(monkeypatch):
    """Keep REPORUN_* variables from the calling shell out of flag defaults."""
    for name in list(os.environ):
        if name.startswith("REPORUN_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def parser():
    return OptionParser(prog="reporun-test")


@pytest.fixture
def configure_bean(parser):
    """Register a bean on a fresh parser, parse ``args`` and configure the bean."""

    def _configure(bean, args):
        bean.register_flags(parser)
        result = ParseResult.from_namespace(parser.parse_intermixed_args(args))
        bean.configure(result)
        return bean

    return _configure
