"""Tests for the parallel scanner."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from unittest.mock import patch

import pytest

from circular_scan.resolver import ModuleResolver
from circular_scan.scanner import effective_workers, scan_file, scan_files


def _write_project(root: Path, files: dict[str, str | bytes]) -> list[Path]:
    paths = []
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        paths.append(path)
    return paths


class TestEffectiveWorkers:
    def test_clamped_to_file_count(self):
        assert effective_workers(64, 3) == 3

    def test_never_below_one(self):
        assert effective_workers(0, 5) == 1
        assert effective_workers(-4, 5) == 1

    def test_within_bounds(self):
        assert effective_workers(4, 10) == 4


class TestScanFile:
    def test_only_project_filters_external_imports(self, tmp_path):
        paths = _write_project(tmp_path, {
            "app/models/user.py": "import os\nfrom app.services.auth import login\n",
            "app/services/auth.py": "",
        })
        record = scan_file(paths[0], ModuleResolver(tmp_path))
        assert record.module == "app.models.user"
        assert record.imports == {"app.services.auth"}
        assert record.error is None

    def test_all_imports_keeps_everything(self, tmp_path):
        paths = _write_project(tmp_path, {
            "app/models/user.py": "import os\nfrom app.services.auth import login\n",
        })
        record = scan_file(paths[0], ModuleResolver(tmp_path), only_project=False)
        assert record.imports == {"os", "app", "app.services.auth"}

    def test_undecodable_file_degrades(self, tmp_path, caplog):
        paths = _write_project(tmp_path, {"bad.py": b"import os\n\xff\xfe"})
        with caplog.at_level(logging.WARNING, logger="circular_scan"):
            record = scan_file(paths[0], ModuleResolver(tmp_path), only_project=False)
        assert record.module == "bad"
        assert record.imports == set()
        assert record.error
        assert "bad.py" in caplog.text

    def test_bom_file_is_scanned(self, tmp_path):
        paths = _write_project(tmp_path, {"bom.py": "\ufeffimport os\n".encode("utf-8")})
        record = scan_file(paths[0], ModuleResolver(tmp_path), only_project=False)
        assert record.imports == {"os"}
        assert record.error is None

    def test_decoder_error_degrades(self, tmp_path):
        paths = _write_project(tmp_path, {"a.py": "import os\n"})
        with patch("circular_scan.scanner.decode_source", side_effect=UnicodeDecodeError("utf-8", b"", 0, 1, "bad")):
            record = scan_file(paths[0], ModuleResolver(tmp_path), only_project=False)
        assert record.imports == set()
        assert record.error

    def test_missing_file_degrades(self, tmp_path):
        record = scan_file(tmp_path / "gone.py", ModuleResolver(tmp_path))
        assert record.module == "gone"
        assert record.imports == set()
        assert record.error


class TestScanFiles:
    def test_empty_input_creates_no_pool(self, tmp_path):
        with patch("circular_scan.scanner.ThreadPoolExecutor") as pool_cls:
            assert scan_files([], ModuleResolver(tmp_path)) == []
        pool_cls.assert_not_called()

    def test_one_record_per_file(self, tmp_path):
        files = {f"pkg/mod_{i}.py": "import json\n" for i in range(12)}
        paths = _write_project(tmp_path, files)
        records = scan_files(paths, ModuleResolver(tmp_path), only_project=False, workers=4)
        assert len(records) == 12
        assert {r.file for r in records} == set(paths)
        assert all(r.imports == {"json"} for r in records)

    def test_pool_size_is_clamped(self, tmp_path):
        paths = _write_project(tmp_path, {"a.py": "", "b.py": ""})
        with patch("circular_scan.scanner.ThreadPoolExecutor", wraps=ThreadPoolExecutor) as pool_cls:
            scan_files(paths, ModuleResolver(tmp_path), workers=0)
        assert pool_cls.call_args.kwargs["max_workers"] == 1

    def test_bad_file_does_not_abort_batch(self, tmp_path):
        paths = _write_project(tmp_path, {
            "good.py": "import json\n",
            "bad.py": b"\xff\xfe\xfa",
            "also_good.py": "import os\n",
        })
        records = scan_files(paths, ModuleResolver(tmp_path), only_project=False, workers=3)
        by_module = {r.module: r for r in records}
        assert len(records) == 3
        assert by_module["good"].imports == {"json"}
        assert by_module["also_good"].imports == {"os"}
        assert by_module["bad"].imports == set()
        assert by_module["bad"].error

    def test_unexpected_error_aborts_run(self, tmp_path):
        paths = _write_project(tmp_path, {"a.py": "import os\n"})
        with patch("circular_scan.scanner.extract_imports", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError, match="boom"):
                scan_files(paths, ModuleResolver(tmp_path), workers=2)

    def test_progress_callback(self, tmp_path):
        paths = _write_project(tmp_path, {"a.py": "", "b.py": ""})
        calls = []
        scan_files(paths, ModuleResolver(tmp_path), progress=lambda *a: calls.append(a))
        assert calls[-1] == ("Scanning", 2, 2)
