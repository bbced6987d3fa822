# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Built-in OptionsBean implementations."""

from .blob_store_options import BlobStoreConfig, BlobStoreOptions, BlobStoreType
from .common_options import CommonConfig, CommonOptions
from .document_store_options import DocumentStoreConfig, DocumentStoreOptions

__all__ = [
    "BlobStoreConfig",
    "BlobStoreOptions",
    "BlobStoreType",
    "CommonConfig",
    "CommonOptions",
    "DocumentStoreConfig",
    "DocumentStoreOptions",
]
