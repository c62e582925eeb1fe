"""Tests for regex import extraction."""

import logging

import pytest

from circular_scan.extractor import decode_source, extract_imports


class TestPlainImport:
    def test_dotted_import_keeps_top_segment_only(self):
        targets = extract_imports("import a.b.c\n")
        assert "a" in targets
        assert "a.b.c" not in targets
        assert "a.b" not in targets

    def test_comma_separated_names(self):
        assert extract_imports("import os, sys, json\n") == {"os", "sys", "json"}

    def test_alias_is_ignored(self):
        assert extract_imports("import numpy as np, os.path as osp\n") == {"numpy", "os"}

    def test_tab_separated_alias(self):
        assert extract_imports("import numpy\tas np\n") == {"numpy"}

    def test_backslash_continuation(self):
        assert extract_imports("import os, \\\n    sys as system\n") == {"os", "sys"}

    def test_trailing_comment(self):
        assert extract_imports("import os  # needed for paths\n") == {"os"}

    def test_indented_import_matches(self):
        source = "def f():\n    import json\n    return json\n"
        assert extract_imports(source) == {"json"}

    def test_importlib_is_not_an_import(self):
        assert extract_imports("importlib.import_module('x')\n") == set()


class TestFromImport:
    def test_emits_full_path_and_top_segment(self):
        targets = extract_imports("from a.b import c\n")
        assert "a" in targets
        assert "a.b" in targets
        assert "c" not in targets

    def test_single_segment(self):
        assert extract_imports("from typing import Any\n") == {"typing"}

    def test_parenthesized_names(self):
        source = "from pkg.mod import (\n    one,\n    two,\n)\n"
        assert extract_imports(source) == {"pkg", "pkg.mod"}

    def test_relative_imports_are_ignored(self):
        source = "from . import sibling\nfrom .models import User\nfrom ..core import x\n"
        assert extract_imports(source) == set()


class TestLineAnchoring:
    def test_import_after_semicolon_is_missed(self):
        assert extract_imports("x = 1; import os\n") == set()

    def test_second_statement_after_semicolon_is_missed(self):
        assert extract_imports("import os; import sys\n") == {"os"}

    def test_import_inside_string_mid_line_is_missed(self):
        assert extract_imports('text = "import os"\n') == set()

    def test_duplicates_collapse(self):
        source = "import os\nimport os\nfrom os.path import join\nfrom os import sep\n"
        assert extract_imports(source) == {"os", "os.path"}

    def test_malformed_source_is_tolerated(self):
        source = "def broken(:\n    from a.b import c\nclass\n"
        assert extract_imports(source) == {"a", "a.b"}


class TestBytesInput:
    def test_utf8_bytes(self):
        assert extract_imports(b"import os\n") == {"os"}

    def test_bom_is_accepted(self):
        assert extract_imports("\ufeffimport os\n".encode("utf-8")) == {"os"}

    def test_undecodable_bytes_give_empty_set_and_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="circular_scan"):
            result = extract_imports(b"import os\n\xff\xfe\xfa", origin="bad.py")
        assert result == set()
        assert "bad.py" in caplog.text

    def test_decode_source_strips_bom(self):
        assert decode_source("\ufeffimport os\n".encode("utf-8")) == "import os\n"

    def test_decode_source_raises_value_error(self):
        with pytest.raises(ValueError):
            decode_source(b"\xff\xfe\xfa")
