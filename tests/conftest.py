"""Pytest configuration and fixtures for scriptisto-harness tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from scriptisto_harness.core.config import HarnessConfig

TEMPLATE_TABLE = """\
+----------+----------+-----------+
| Template | Language | Extension |
+----------+----------+-----------+
| go       | Go       | .go       |
| python   | Python   | .py       |
| broken   | Broken   | .sh       |
+----------+----------+-----------+
"""

# Stand-in for `scriptisto new [template]`
FAKE_TOOL = f"""\
#!/bin/sh
if [ -z "$2" ]; then
cat <<'TABLE'
{TEMPLATE_TABLE}TABLE
exit 0
fi
case "$2" in
  go) printf '#!/bin/sh\\necho go-ok\\n' ;;
  python) printf '#!/bin/sh\\necho py-ok\\n' ;;
  *) echo "unknown template: $2" >&2; exit 1 ;;
esac
"""

def _write_executable(path: Path, content: str) -> Path:
    path.write_text(content)
    path.chmod(0o755)
    return path


@pytest.fixture
def write_script() -> Callable[[Path, str], Path]:
    """Factory fixture writing an executable script.

    Usage:
        def test_something(write_script, tmp_path):
            write_script(tmp_path / "ok.sh", "#!/bin/sh\\nexit 0\\n")
    """
    return _write_executable


@pytest.fixture
def template_table() -> str:
    """Listing printed by the fake scaffolding tool."""
    return TEMPLATE_TABLE


@pytest.fixture
def fake_tool(tmp_path: Path) -> list[str]:
    """Install a fake scaffolding tool and return its base command."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    tool = _write_executable(bin_dir / "scriptisto", FAKE_TOOL)
    return [str(tool), "new"]


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory set as cwd for the test."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def harness_config(fake_tool: list[str]) -> HarnessConfig:
    """Config pointing at the fake scaffolding tool."""
    return HarnessConfig(tool_command=fake_tool)
