# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for config loading and the config singleton."""

import json
import logging

import pytest
from pydantic import ValidationError

import file_manager.config.config_loader as loader
from file_manager.config import (
    CONFIG_ENV,
    FileManagerConfig,
    FileManagerConfigSingleton,
    find_config_file,
    get_config,
    initialize_config,
    read_config_file,
)
from file_manager.core.engine import StreamingEngine


class TestFindConfigFile:
    def test_explicit_path(self, tmp_path):
        conf = tmp_path / "fm.conf"
        conf.write_text("{}")
        assert find_config_file(str(conf), environ={}) == conf

    def test_explicit_path_wins_over_env(self, tmp_path):
        explicit = tmp_path / "explicit.conf"
        explicit.write_text("{}")
        env_conf = tmp_path / "env.conf"
        env_conf.write_text("{}")
        assert find_config_file(str(explicit), environ={CONFIG_ENV: str(env_conf)}) == explicit

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="--config"):
            find_config_file(str(tmp_path / "missing.conf"), environ={})

    def test_env_path(self, tmp_path):
        conf = tmp_path / "env.conf"
        conf.write_text("{}")
        assert find_config_file(environ={CONFIG_ENV: str(conf)}) == conf

    def test_missing_env_path(self, tmp_path):
        with pytest.raises(FileNotFoundError, match=CONFIG_ENV):
            find_config_file(environ={CONFIG_ENV: str(tmp_path / "missing.conf")})

    def test_default_location(self, tmp_path, monkeypatch):
        conf = tmp_path / "fm.conf"
        conf.write_text("{}")
        monkeypatch.setattr(loader, "CONFIG_DIR", tmp_path)
        assert find_config_file(environ={}) == conf

    def test_default_location_is_optional(self):
        assert find_config_file(environ={}) is None

    def test_directory_is_not_a_config_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_config_file(str(tmp_path), environ={})


class TestReadConfigFile:
    def test_valid_json(self, tmp_path):
        conf = tmp_path / "fm.conf"
        conf.write_text('{"chunk_size": 1024}')
        assert read_config_file(conf) == {"chunk_size": 1024}

    def test_empty_file_means_defaults(self, tmp_path):
        conf = tmp_path / "fm.conf"
        conf.write_text("  \n")
        assert read_config_file(conf) == {}

    def test_invalid_json(self, tmp_path):
        conf = tmp_path / "fm.conf"
        conf.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            read_config_file(conf)

    def test_not_an_object(self, tmp_path):
        conf = tmp_path / "fm.conf"
        conf.write_text("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            read_config_file(conf)


class TestFileManagerConfig:
    def test_defaults(self):
        config = FileManagerConfig()
        assert config.default_username == "Guest"
        assert config.chunk_size == 64 * 1024
        assert config.compress_suffix == ".br"
        assert config.brotli_quality == 11
        assert config.log_level_value == logging.WARNING

    def test_log_level_is_normalised(self):
        assert FileManagerConfig(log_level="debug").log_level == "DEBUG"

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            FileManagerConfig.from_dict({"colour": "blue"})

    @pytest.mark.parametrize(
        "overrides",
        [
            {"chunk_size": 0},
            {"brotli_quality": 12},
            {"compress_suffix": "br"},
            {"compress_suffix": "./x"},
            {"log_level": "LOUD"},
        ],
    )
    def test_rejects_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            FileManagerConfig.from_dict(overrides)

    def test_engine_from_config(self):
        config = FileManagerConfig(chunk_size=10, compress_suffix=".brz", brotli_quality=4)
        engine = StreamingEngine.from_config(config)
        assert engine.chunk_size == 10
        assert engine.compress_suffix == ".brz"
        assert engine.brotli_quality == 4


class TestConfigSingleton:
    def test_defaults_without_file(self):
        assert get_config() == FileManagerConfig()

    def test_instance_is_shared(self):
        assert get_config() is FileManagerConfigSingleton.get_instance()

    def test_initialize_from_dict(self):
        config = initialize_config(config_dict={"default_username": "Ann"})
        assert config.default_username == "Ann"
        assert get_config() is config

    def test_initialize_from_path(self, tmp_path):
        conf = tmp_path / "fm.conf"
        conf.write_text(json.dumps({"chunk_size": 512}))
        assert initialize_config(config_path=str(conf)).chunk_size == 512

    def test_initialize_from_env(self, tmp_path, monkeypatch):
        conf = tmp_path / "env.conf"
        conf.write_text(json.dumps({"list_concurrency": 2}))
        monkeypatch.setenv("FILE_MANAGER_CONFIG_FILE", str(conf))
        assert initialize_config().list_concurrency == 2

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            initialize_config(config_path=str(tmp_path / "missing.conf"))

    def test_invalid_values_in_file_raise(self, tmp_path):
        conf = tmp_path / "fm.conf"
        conf.write_text(json.dumps({"brotli_quality": 99}))
        with pytest.raises(ValueError):
            initialize_config(config_path=str(conf))
