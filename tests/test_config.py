"""Tests for config.py — TransposerConfig YAML loading."""

import pytest
import yaml

from tab_transposer.config import ConfigError, TransposerConfig


class TestTransposerConfig:

    def test_defaults(self):
        config = TransposerConfig()
        assert config.from_key is None
        assert config.to_key is None
        assert config.sentinel == 'end'
        assert config.show_banner is True
        assert config.output_format == 'text'

    def test_from_yaml(self):
        config = TransposerConfig.from_yaml(
            "from_key: A\nto_key: Bb\nsentinel: done\nshow_banner: false\noutput_format: json\n"
        )
        assert config.from_key == 'A'
        assert config.to_key == 'Bb'
        assert config.sentinel == 'done'
        assert config.show_banner is False
        assert config.output_format == 'json'

    def test_empty_document_gives_defaults(self):
        assert TransposerConfig.from_yaml("") == TransposerConfig()

    def test_unknown_output_format(self):
        with pytest.raises(ConfigError):
            TransposerConfig.from_yaml("output_format: xml\n")

    def test_document_must_be_a_mapping(self):
        with pytest.raises(ValueError):
            TransposerConfig.from_yaml("- A\n- C\n")

    def test_malformed_yaml_is_a_config_error(self):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            TransposerConfig.from_yaml("from_key: [A\n")

    def test_quoted_show_banner_is_rejected(self):
        """A quoted "no" is a string, not false"""
        with pytest.raises(ConfigError, match="show_banner"):
            TransposerConfig.from_yaml('show_banner: "no"\n')

    def test_to_yaml_leaves_out_unset_keys(self):
        data = yaml.safe_load(TransposerConfig().to_yaml())
        assert 'from_key' not in data
        assert 'to_key' not in data
        assert data['sentinel'] == 'end'

    def test_yaml_round_trip(self):
        config = TransposerConfig(from_key='G', to_key='A', show_banner=False)
        assert TransposerConfig.from_yaml(config.to_yaml()) == config


class TestLoad:

    def test_missing_file_gives_defaults(self, tmp_path):
        assert TransposerConfig.load(tmp_path / "nope.yaml") == TransposerConfig()

    def test_load_file(self, tmp_path):
        path = tmp_path / "transposer.yaml"
        path.write_text("from_key: E\nto_key: G\n")
        config = TransposerConfig.load(path)
        assert config.from_key == 'E'
        assert config.to_key == 'G'
