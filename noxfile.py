# topmark:header:start
#
#   project      : SchemaMark
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMark project automation via Nox.

Sessions:
  - `lint`: Ruff lint and format check.
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
  - `nox -s property_test`
"""

from __future__ import annotations

import nox

PYTHONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["lint", "qa"]


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff lint and format checks."""
    session.install("ruff")
    session.run("ruff", "check", "src", "tests", "noxfile.py")
    session.run("ruff", "format", "--check", "src", "tests", "noxfile.py")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.install("-e", ".[test]", "pyright")

    # We add *session.posargs to the end of the command
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property-based tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "tests", "-m", "hypothesis_slow", *session.posargs)
