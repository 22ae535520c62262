# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0

import os

import pytest

from file_manager.core.session import Session
from file_manager.exceptions import MissingArgumentError, OperationFailedError


class TestStart:
    def test_normalises_home(self, workspace):
        session = Session.start(str(workspace / "docs" / ".."))
        assert session.current_directory == str(workspace)
        assert session.terminated is False

    def test_missing_home(self):
        with pytest.raises(MissingArgumentError):
            Session.start("")

    def test_home_must_be_directory(self, workspace):
        with pytest.raises(OperationFailedError):
            Session.start(str(workspace / "notes.txt"))


class TestUp:
    def test_goes_to_parent(self, session, workspace):
        assert session.up() == str(workspace.parent)
        assert session.current_directory == str(workspace.parent)

    def test_noop_at_root(self):
        root = os.path.abspath(os.sep)
        session = Session(current_directory=root)
        session.up()
        assert session.current_directory == root


@pytest.mark.asyncio
class TestCd:
    async def test_relative(self, session, workspace):
        await session.cd("docs")
        assert session.current_directory == str(workspace / "docs")

    async def test_absolute(self, session, workspace):
        await session.cd(str(workspace / "docs"))
        assert session.current_directory == str(workspace / "docs")

    async def test_dot_dot(self, session, workspace):
        await session.cd("..")
        assert session.current_directory == str(workspace.parent)

    async def test_missing_target_keeps_directory(self, session, workspace):
        with pytest.raises(OperationFailedError) as exc_info:
            await session.cd("nowhere")
        assert exc_info.value.code == "IO_ERROR"
        assert session.current_directory == str(workspace)

    async def test_file_target_keeps_directory(self, session, workspace):
        with pytest.raises(OperationFailedError):
            await session.cd("notes.txt")
        assert session.current_directory == str(workspace)

    async def test_empty_fragment(self, session, workspace):
        with pytest.raises(MissingArgumentError):
            await session.cd("")
        assert session.current_directory == str(workspace)


def test_terminate(session):
    session.terminate()
    assert session.terminated is True
