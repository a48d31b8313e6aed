import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "check_core_imports.py"


def _load_guard():
    spec = importlib.util.spec_from_file_location("check_core_imports", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None  # for mypy
    spec.loader.exec_module(module)
    return module


def test_core_import_guard_passes():
    assert _load_guard().main() == 0, "core import guard failed"


def test_core_import_guard_flags_surface_imports(tmp_path, monkeypatch):
    guard = _load_guard()
    core = tmp_path / "freelo_mcp" / "core"
    (core / "adapters").mkdir(parents=True)
    offender = core / "adapters" / "leaky.py"
    offender.write_text(
        "import json\n"
        "from starlette.responses import JSONResponse\n"
        "from ...rest import app\n"
        "from ..client import FreeloClient\n"
    )
    monkeypatch.setattr(guard, "CORE_DIR", core)

    errors = guard.scan_file(offender)

    assert len(errors) == 2
    assert any("'starlette.responses'" in e for e in errors)
    assert any("'freelo_mcp.rest'" in e for e in errors)
