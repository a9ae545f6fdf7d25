import importlib.util
from pathlib import Path


def _load_guard():
    script = (
        Path(__file__).resolve().parent.parent / "scripts" / "check_core_imports.py"
    )
    spec = importlib.util.spec_from_file_location("check_core_imports", script)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None  # for mypy
    spec.loader.exec_module(module)
    return module


def test_core_import_guard_passes():
    exit_code = _load_guard().main()
    assert exit_code == 0, "core import guard failed"


def test_core_import_guard_flags_resource_imports(tmp_path):
    guard = _load_guard()
    bad = tmp_path / "bad.py"
    bad.write_text(
        "from basecamp_sdk.api.messages import show_message\nfrom ..api import people\n"
    )
    errors = guard.scan_file(bad)
    assert len(errors) == 2
