# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Document node store options (MongoDB and RDB backends)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from reporun.cli.options_bean import OptionsBean
from reporun.cli.utils import add_argument, add_negatable_bool_argument

DEFAULT_NODE_CACHE_PERCENTAGE = 35
DEFAULT_PREV_DOC_CACHE_PERCENTAGE = 4
DEFAULT_CHILDREN_CACHE_PERCENTAGE = 15
DEFAULT_DIFF_CACHE_PERCENTAGE = 30


class DocumentStoreConfig(BaseModel):
    """Configuration for connecting to a document node store."""

    model_config = ConfigDict(frozen=True)

    rdb_jdbc_user: Optional[str] = None
    rdb_jdbc_password: Optional[SecretStr] = None
    cluster_id: int = Field(default=0, ge=0)
    disable_branches: bool = False
    cache_size: int = Field(default=0, ge=0)
    node_cache_percentage: int = Field(default=DEFAULT_NODE_CACHE_PERCENTAGE, ge=0, le=100)
    prev_doc_cache_percentage: int = Field(
        default=DEFAULT_PREV_DOC_CACHE_PERCENTAGE, ge=0, le=100
    )
    children_cache_percentage: int = Field(
        default=DEFAULT_CHILDREN_CACHE_PERCENTAGE, ge=0, le=100
    )
    diff_cache_percentage: int = Field(default=DEFAULT_DIFF_CACHE_PERCENTAGE, ge=0, le=100)


class DocumentStoreOptions(OptionsBean):
    """Flags used when the store argument points at MongoDB or an RDB."""

    title = "Document Store Options"
    description = "Apply when the store argument is a mongodb:// URI or a jdbc: URL."
    config_class = DocumentStoreConfig

    def register_flags(self, parser) -> None:
        g = self.add_group(parser)

        add_argument(
            g,
            flag_name="--rdb-jdbc-user",
            env_var="REPORUN_RDB_JDBC_USER",
            default=None,
            obsolete_flag="--rdbjdbcuser",
            help="RDB JDBC user.",
        )
        add_argument(
            g,
            flag_name="--rdb-jdbc-password",
            env_var="REPORUN_RDB_JDBC_PASSWORD",
            default=None,
            obsolete_flag="--rdbjdbcpasswd",
            help="RDB JDBC password.",
        )
        add_argument(
            g,
            flag_name="--cluster-id",
            env_var="REPORUN_CLUSTER_ID",
            default=0,
            arg_type=int,
            obsolete_flag="--clusterId",
            help="Cluster node instance id.",
        )
        add_negatable_bool_argument(
            g,
            flag_name="--disable-branches",
            env_var="REPORUN_DISABLE_BRANCHES",
            default=False,
            help="Disable branches (not recommended for write access).",
        )
        add_argument(
            g,
            flag_name="--cache-size",
            env_var="REPORUN_CACHE_SIZE",
            default=0,
            arg_type=int,
            obsolete_flag="--cacheSize",
            help="Cache size in MB. 0 keeps the store default.",
        )
        add_argument(
            g,
            flag_name="--node-cache-percentage",
            default=DEFAULT_NODE_CACHE_PERCENTAGE,
            arg_type=int,
            help="Share of the cache given to the node cache.",
        )
        add_argument(
            g,
            flag_name="--prev-doc-cache-percentage",
            default=DEFAULT_PREV_DOC_CACHE_PERCENTAGE,
            arg_type=int,
            help="Share of the cache given to the previous document cache.",
        )
        add_argument(
            g,
            flag_name="--children-cache-percentage",
            default=DEFAULT_CHILDREN_CACHE_PERCENTAGE,
            arg_type=int,
            help="Share of the cache given to the children cache.",
        )
        add_argument(
            g,
            flag_name="--diff-cache-percentage",
            default=DEFAULT_DIFF_CACHE_PERCENTAGE,
            arg_type=int,
            help="Share of the cache given to the diff cache.",
        )

    def validate(self, resolved: DocumentStoreConfig) -> None:
        total = (
            resolved.node_cache_percentage
            + resolved.prev_doc_cache_percentage
            + resolved.children_cache_percentage
            + resolved.diff_cache_percentage
        )
        if total >= 100:
            raise ValueError(
                f"Sum of cache percentages must be less than 100, got {total}"
            )

    def rdb_jdbc_user(self) -> Optional[str]:
        return self.config.rdb_jdbc_user

    def rdb_jdbc_password(self) -> Optional[str]:
        password = self.config.rdb_jdbc_password
        return password.get_secret_value() if password is not None else None

    def cluster_id(self) -> int:
        return self.config.cluster_id

    def is_disable_branches(self) -> bool:
        return self.config.disable_branches

    def cache_size(self) -> int:
        return self.config.cache_size

    def is_cache_size_set(self) -> bool:
        return self.config.cache_size > 0

    def node_cache_percentage(self) -> int:
        return self.config.node_cache_percentage

    def prev_doc_cache_percentage(self) -> int:
        return self.config.prev_doc_cache_percentage

    def children_cache_percentage(self) -> int:
        return self.config.children_cache_percentage

    def diff_cache_percentage(self) -> int:
        return self.config.diff_cache_percentage
