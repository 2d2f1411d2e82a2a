"""Pytest configuration and fixtures."""
from pathlib import Path

import pytest
from click.testing import CliRunner

from logstrip.core import build_patterns

APP_JS = '''import { api } from "./api";

console.log("starting");
// console.log("commented");
export function run() {
  debugger;
  return api();
}
'''

UTIL_TS = '''export const add = (a: number, b: number) => {
  console.error("adding", a, b);
  return a + b;
};
'''


@pytest.fixture
def patterns():
    """Maximal pattern set (nothing kept)."""
    return build_patterns()


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_project(tmp_path) -> Path:
    """Small JS/TS tree with debug statements, a clean file and skipped dirs.

    Detectable: src/app.js (console.log L3, debugger L6), src/util.ts
    (console.error L2). node_modules/, .hidden/ and README.md must be ignored.
    """
    src = tmp_path / "src"
    src.mkdir()
    (src / "app.js").write_text(APP_JS)
    (src / "util.ts").write_text(UTIL_TS)
    (src / "clean.js").write_text("export const x = 1;\n")

    dep = tmp_path / "node_modules" / "lib"
    dep.mkdir(parents=True)
    (dep / "index.js").write_text('console.log("dep");\n')

    hidden = tmp_path / ".hidden"
    hidden.mkdir()
    (hidden / "x.js").write_text('alert("hi");\n')

    (tmp_path / "README.md").write_text('console.log("docs")\n')

    return tmp_path
