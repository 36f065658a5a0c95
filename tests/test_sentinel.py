# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import copy
import pickle

from slicekit import Slice
from slicekit._sentinel import Unset, UnsetType, is_unset


class TestUnset:
    def test_singleton_identity(self):
        assert UnsetType() is Unset

    def test_falsy_and_repr(self):
        assert not Unset
        assert repr(Unset) == "Unset"

    def test_copy_and_pickle_preserve_identity(self):
        assert copy.copy(Unset) is Unset
        assert copy.deepcopy(Unset) is Unset
        assert pickle.loads(pickle.dumps(Unset)) is Unset

    def test_is_unset(self):
        assert is_unset(Unset)
        assert not is_unset(None)

    def test_get_distinguishes_none_default_from_unset(self):
        """Test an explicit None default is returned, not treated as missing."""
        assert Slice.of(1).get(3, None) is None
