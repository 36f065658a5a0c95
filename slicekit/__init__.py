# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from . import functional as functional
from ._errors import (
    EmptySliceError,
    IndexOutOfBoundsError,
    SliceError,
    ValidationError,
)
from ._sentinel import Unset
from .config import SliceSettings, settings
from .functional import (
    all_,
    any_,
    as_slice,
    fold,
    len_,
    length,
    map_,
    push_back,
    reduce,
    sort,
    sort_via,
)
from .slice import Slice
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level)

__all__ = (
    "__version__",
    "EmptySliceError",
    "IndexOutOfBoundsError",
    "Slice",
    "SliceError",
    "SliceSettings",
    "Unset",
    "ValidationError",
    "all_",
    "any_",
    "as_slice",
    "fold",
    "functional",
    "len_",
    "length",
    "logger",
    "map_",
    "push_back",
    "reduce",
    "settings",
    "sort",
    "sort_via",
)
