# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Built-in options bean kinds."""

from enum import Enum
from typing import Type

from .groups import BlobStoreOptions, CommonOptions, DocumentStoreOptions
from .options_bean import OptionsBean, OptionsBeanFactory


class OptionBeans(Enum):
    """
    Closed set of built-in bean kinds.

    Each member is itself an OptionsBeanFactory for its bean, so built-in kinds
    and extension factories are driven the same way by the registry. Iteration
    follows definition order.
    """

    COMMON = CommonOptions
    DOCUMENT = DocumentStoreOptions
    BLOB = BlobStoreOptions

    @property
    def bean_class(self) -> Type[OptionsBean]:
        return self.value

    def create(self) -> OptionsBean:
        return self.value()

    new_instance = OptionsBeanFactory.new_instance


# EnumMeta and ABCMeta do not combine, so OptionBeans is a virtual subclass
OptionsBeanFactory.register(OptionBeans)
