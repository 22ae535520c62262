# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0

import os

import pytest

from file_manager.core.paths import is_root, resolve_path
from file_manager.exceptions import MissingArgumentError

ROOT = os.path.abspath(os.sep)


class TestResolvePath:
    def test_relative(self):
        base = os.path.join(ROOT, "home", "ann")
        assert resolve_path(base, "docs") == os.path.join(base, "docs")

    def test_absolute_ignores_current_directory(self):
        target = os.path.join(ROOT, "tmp")
        assert resolve_path(os.path.join(ROOT, "home"), target) == target

    def test_dot_segments_collapse(self):
        base = os.path.join(ROOT, "home", "ann")
        assert resolve_path(base, "../bob/./x") == os.path.join(ROOT, "home", "bob", "x")

    def test_parent_of_root_is_root(self):
        assert resolve_path(ROOT, "..") == ROOT

    def test_empty_fragment(self):
        with pytest.raises(MissingArgumentError) as exc_info:
            resolve_path(ROOT, "", "file name")
        assert exc_info.value.code == "MISSING_ARGUMENT"
        assert "file name" in exc_info.value.message


def test_is_root():
    assert is_root(ROOT)
    assert not is_root(os.path.join(ROOT, "home"))
