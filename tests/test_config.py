import pytest
from pydantic import ValidationError

from openapi_typegen.config import load_options, merge_options
from openapi_typegen.errors import ConfigError
from openapi_typegen.parser.base import GenerateOptions


class TestMergeOptions:
    def test_defaults(self):
        assert merge_options().indent == 2
        assert merge_options({}).indent == 2

    def test_caller_values_win(self):
        assert merge_options({"indent": 4}).indent == 4

    def test_extra_values_layered_through(self):
        opts = merge_options({"banner": "// generated"})
        assert opts.indent == 2
        assert opts.model_dump()["banner"] == "// generated"

    def test_accepts_model(self):
        assert merge_options(GenerateOptions(indent=8)).indent == 8

    def test_rejects_non_positive_indent(self):
        with pytest.raises(ValidationError):
            merge_options({"indent": -1})


class TestLoadOptions:
    def test_yaml_mapping(self, tmp_path):
        f = tmp_path / "typegen.yaml"
        f.write_text("indent: 4\n")
        assert load_options(f) == {"indent": 4}

    def test_empty_file(self, tmp_path):
        f = tmp_path / "typegen.yaml"
        f.write_text("")
        assert load_options(f) == {}

    def test_non_mapping_rejected(self, tmp_path):
        f = tmp_path / "typegen.yaml"
        f.write_text("- indent\n- 4\n")
        with pytest.raises(ConfigError):
            load_options(f)
