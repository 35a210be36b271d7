"""Unit test fixtures.

Most helpers live in tests/conftest.py; this file re-exports the ones unit
tests import directly.
"""

from tests.conftest import FakeRunner, list_output, make_config, run_cmd, write_plist

__all__ = ["FakeRunner", "list_output", "make_config", "run_cmd", "write_plist"]
