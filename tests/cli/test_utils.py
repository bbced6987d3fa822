# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for flag declaration utility functions."""
import argparse
import logging

import pytest

from reporun.cli.utils import (
    add_argument,
    add_negatable_bool_argument,
    env_or_default,
    is_truthy,
)

pytestmark = [
    pytest.mark.unit,
    pytest.mark.pre_merge,
]


class TestEnvOrDefault:
    """Test env_or_default function."""

    def test_returns_default_when_env_not_set(self, monkeypatch):
        """Test returns default value when env var not set."""
        monkeypatch.delenv("TEST_VAR", raising=False)

        assert env_or_default("TEST_VAR", "default_value") == "default_value"

    def test_returns_default_without_env_var_name(self):
        """Test returns default value when no env var is named."""
        assert env_or_default(None, 5) == 5

    def test_returns_env_when_set(self, monkeypatch):
        """Test returns env value when set."""
        monkeypatch.setenv("TEST_VAR", "env_value")

        assert env_or_default("TEST_VAR", "default_value") == "env_value"

    @pytest.mark.parametrize("value", ["true", "True", "1", "yes", "YES", "on", "ON"])
    def test_bool_conversion_true(self, monkeypatch, value):
        """Test bool conversion for true values."""
        monkeypatch.setenv("TEST_BOOL", value)

        assert env_or_default("TEST_BOOL", False) is True

    @pytest.mark.parametrize("value", ["false", "False", "0", "no", "NO", "off", "OFF"])
    def test_bool_conversion_false(self, monkeypatch, value):
        """Test bool conversion for false values."""
        monkeypatch.setenv("TEST_BOOL", value)

        assert env_or_default("TEST_BOOL", True) is False

    def test_int_conversion(self, monkeypatch):
        """Test int conversion."""
        monkeypatch.setenv("TEST_INT", "42")

        result = env_or_default("TEST_INT", 0)
        assert result == 42
        assert isinstance(result, int)

    def test_float_conversion(self, monkeypatch):
        """Test float conversion."""
        monkeypatch.setenv("TEST_FLOAT", "3.14")

        result = env_or_default("TEST_FLOAT", 0.0)
        assert result == 3.14
        assert isinstance(result, float)

    def test_explicit_value_type(self, monkeypatch):
        """Test explicit value_type wins when the default is None."""
        monkeypatch.setenv("TEST_INT", "7")

        assert env_or_default("TEST_INT", None, value_type=int) == 7

    def test_none_default_with_no_value_type_returns_raw_env_value(self, monkeypatch):
        """Test env value is returned as string when no type info is available."""
        monkeypatch.setenv("TEST_VAR", "env_value")

        result = env_or_default("TEST_VAR", None, value_type=None)
        assert result == "env_value"
        assert isinstance(result, str)

    def test_is_truthy(self):
        """Test truthy strings."""
        assert is_truthy("On")
        assert not is_truthy("maybe")


class TestAddArgument:
    """Test add_argument function."""

    def test_dest_derived_from_flag(self):
        """Test that dashes in the flag become underscores in dest."""
        parser = argparse.ArgumentParser()
        add_argument(parser, flag_name="--cache-size", default=0, arg_type=int, help="Cache")

        args = parser.parse_args(["--cache-size", "64"])
        assert args.cache_size == 64

    def test_uses_env_default(self, monkeypatch):
        """Test that the env var overrides the default."""
        monkeypatch.setenv("TEST_CACHE", "128")
        parser = argparse.ArgumentParser()
        add_argument(
            parser,
            flag_name="--cache-size",
            env_var="TEST_CACHE",
            default=0,
            arg_type=int,
            help="Cache",
        )

        args = parser.parse_args([])
        assert args.cache_size == 128

    def test_command_line_beats_env(self, monkeypatch):
        """Test that an explicit flag wins over the env var."""
        monkeypatch.setenv("TEST_USER", "from-env")
        parser = argparse.ArgumentParser()
        add_argument(parser, flag_name="--user", env_var="TEST_USER", help="User")

        args = parser.parse_args(["--user", "from-cli"])
        assert args.user == "from-cli"

    def test_callable_type_with_none_default_uses_env_and_validates(self, monkeypatch):
        """Test callable arg_type works when default is None and env var is set."""
        monkeypatch.setenv("TEST_MODEL_NAME", "  model-A  ")
        parser = argparse.ArgumentParser()

        def validate_name(value: str) -> str:
            if len(value.strip()) == 0:
                raise argparse.ArgumentTypeError("name must be non-empty")
            return value.strip()

        add_argument(
            parser,
            flag_name="--name",
            env_var="TEST_MODEL_NAME",
            default=None,
            help="Name",
            arg_type=validate_name,
        )

        args = parser.parse_args([])
        assert args.name == "model-A"

    def test_callable_type_with_invalid_env_value_fails_parse(self, monkeypatch):
        """Test invalid env value still fails validation via argparse type callable."""
        monkeypatch.setenv("TEST_MODEL_NAME", "   ")
        parser = argparse.ArgumentParser()

        def validate_name(value: str) -> str:
            if len(value.strip()) == 0:
                raise argparse.ArgumentTypeError("name must be non-empty")
            return value.strip()

        add_argument(
            parser,
            flag_name="--name",
            env_var="TEST_MODEL_NAME",
            default=None,
            help="Name",
            arg_type=validate_name,
        )

        with pytest.raises(SystemExit):
            parser.parse_args([])

    def test_help_includes_env_var(self):
        """Test that help text includes environment variable name."""
        parser = argparse.ArgumentParser()
        add_argument(parser, flag_name="--user", env_var="MY_ENV_VAR", help="Test user")

        help_text = parser.format_help()
        assert "MY_ENV_VAR" in help_text
        assert "Test user" in help_text

    def test_choices_enforced(self):
        """Test that choices are passed to argparse."""
        parser = argparse.ArgumentParser()
        add_argument(parser, flag_name="--mode", choices=["a", "b"], default="a", help="Mode")

        with pytest.raises(SystemExit):
            parser.parse_args(["--mode", "c"])

    def test_obsolete_flag_sets_same_dest(self, caplog):
        """Test that the obsolete spelling stores into the new destination."""
        parser = argparse.ArgumentParser()
        add_argument(
            parser,
            flag_name="--cluster-id",
            default=0,
            arg_type=int,
            obsolete_flag="--clusterId",
            help="Cluster id",
        )

        with caplog.at_level(logging.WARNING, logger="reporun.cli.utils"):
            args = parser.parse_args(["--clusterId", "4"])

        assert args.cluster_id == 4
        assert "--clusterId is deprecated" in caplog.text

    def test_obsolete_flag_keeps_default(self):
        """Test that the obsolete flag does not clobber the default."""
        parser = argparse.ArgumentParser()
        add_argument(
            parser,
            flag_name="--cluster-id",
            default=0,
            arg_type=int,
            obsolete_flag="--clusterId",
            help="Cluster id",
        )

        args = parser.parse_args([])
        assert args.cluster_id == 0

    def test_obsolete_flag_hidden_from_help(self):
        """Test that the obsolete spelling is not advertised."""
        parser = argparse.ArgumentParser()
        add_argument(
            parser,
            flag_name="--cluster-id",
            default=0,
            arg_type=int,
            obsolete_flag="--clusterId",
            help="Cluster id",
        )

        assert "--clusterId" not in parser.format_help()


class TestAddNegatableBool:
    """Test add_negatable_bool_argument function."""

    def test_positive_flag(self):
        """Test that --flag is added."""
        parser = argparse.ArgumentParser()
        add_negatable_bool_argument(
            parser,
            flag_name="--enable-feature",
            env_var="TEST_ENABLE",
            default=False,
            help="Enable feature",
        )

        args = parser.parse_args(["--enable-feature"])
        assert args.enable_feature is True

    def test_negative_flag(self):
        """Test that --no-flag is added."""
        parser = argparse.ArgumentParser()
        add_negatable_bool_argument(
            parser,
            flag_name="--enable-feature",
            env_var="TEST_ENABLE",
            default=True,
            help="Enable feature",
        )

        args = parser.parse_args(["--no-enable-feature"])
        assert args.enable_feature is False

    def test_uses_env_var_when_set(self, monkeypatch):
        """Test uses environment variable when set."""
        monkeypatch.setenv("TEST_ENABLE", "false")

        parser = argparse.ArgumentParser()
        add_negatable_bool_argument(
            parser,
            flag_name="--enable-feature",
            env_var="TEST_ENABLE",
            default=True,
            help="Enable feature",
        )

        args = parser.parse_args([])
        assert args.enable_feature is False

    def test_without_env_var(self):
        """Test that the env var is optional."""
        parser = argparse.ArgumentParser()
        add_negatable_bool_argument(
            parser, flag_name="--feature", default=True, help="Test feature"
        )

        args = parser.parse_args([])
        assert args.feature is True
        assert "env:" not in parser.format_help()
