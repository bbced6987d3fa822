# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Blob store selection options."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from reporun.cli.options_bean import OptionsBean
from reporun.cli.parser import ParseResult
from reporun.cli.utils import add_argument


class BlobStoreType(str, Enum):
    NONE = "none"
    FDS = "fds"
    S3 = "s3"
    AZURE = "azure"
    FAKE = "fake"


class BlobStoreConfig(BaseModel):
    """Configuration for the external blob store, if any."""

    model_config = ConfigDict(frozen=True)

    fds: Optional[str] = None
    s3ds: Optional[str] = None
    azureblobds: Optional[str] = None
    fake_ds_path: Optional[str] = None

    def configured(self) -> dict[BlobStoreType, str]:
        """Map each blob store type that was given a path to that path."""
        candidates = {
            BlobStoreType.FDS: self.fds,
            BlobStoreType.S3: self.s3ds,
            BlobStoreType.AZURE: self.azureblobds,
            BlobStoreType.FAKE: self.fake_ds_path,
        }
        return {k: v for k, v in candidates.items() if v}


class BlobStoreOptions(OptionsBean):
    """Select at most one external blob store for binaries."""

    title = "BlobStore Options"
    description = "Binaries are kept in the node store unless one of these is given."
    config_class = BlobStoreConfig

    def register_flags(self, parser) -> None:
        g = self.add_group(parser)

        add_argument(
            g,
            flag_name="--fds",
            env_var="REPORUN_FDS",
            default=None,
            help="FileDataStore config path.",
        )
        add_argument(
            g,
            flag_name="--s3ds",
            env_var="REPORUN_S3DS",
            default=None,
            help="S3DataStore config path.",
        )
        add_argument(
            g,
            flag_name="--azureblobds",
            env_var="REPORUN_AZUREBLOBDS",
            default=None,
            help="AzureBlobStorageDataStore config path.",
        )
        add_argument(
            g,
            flag_name="--fake-ds-path",
            default=None,
            help="Path of a fake data store. Binaries read from it are empty,\n"
            "which lets tools run against a repository without its blobs.",
        )

    def resolve(self, result: ParseResult) -> BlobStoreConfig:
        # empty strings (e.g. an exported but blank env var) mean "not set"
        return BlobStoreConfig(
            fds=result.value_of("fds") or None,
            s3ds=result.value_of("s3ds") or None,
            azureblobds=result.value_of("azureblobds") or None,
            fake_ds_path=result.value_of("fake_ds_path") or None,
        )

    def validate(self, resolved: BlobStoreConfig) -> None:
        configured = resolved.configured()
        if len(configured) > 1:
            names = ", ".join(t.value for t in configured)
            raise ValueError(f"Only one blob store may be configured, got: {names}")

    def blob_store_type(self) -> BlobStoreType:
        configured = self.config.configured()
        if not configured:
            return BlobStoreType.NONE
        return next(iter(configured))

    def fds_config_path(self) -> Optional[str]:
        return self.config.fds

    def s3_config_path(self) -> Optional[str]:
        return self.config.s3ds

    def azure_config_path(self) -> Optional[str]:
        return self.config.azureblobds

    def fake_data_store_path(self) -> Optional[str]:
        return self.config.fake_ds_path
