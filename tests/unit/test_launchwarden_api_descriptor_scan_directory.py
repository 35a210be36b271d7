"""Unit tests for launchwarden.api.descriptor.scan_directory."""

import pytest

from launchwarden.api.descriptor.scan_directory import scan_directory
from launchwarden.api.domain.ServiceDomain import ServiceDomain
from tests.unit.conftest import write_plist

pytestmark = pytest.mark.descriptor


def test_missing_directory_is_empty(tmp_path):
    assert scan_directory(tmp_path / "nope", ServiceDomain.USER_AGENTS) == []


@pytest.mark.parametrize(("valid", "invalid"), [(0, 2), (3, 0), (2, 3)])
def test_invalid_files_are_skipped(tmp_path, valid, invalid):
    for i in range(valid):
        write_plist(tmp_path, f"com.valid.{i}.plist", {"Label": f"com.valid.{i}"})
    for i in range(invalid):
        (tmp_path / f"com.broken.{i}.plist").write_text("<plist><dict><key>")
    descriptors = scan_directory(tmp_path, ServiceDomain.USER_AGENTS)
    assert len(descriptors) == valid
    assert all(d.label.startswith("com.valid.") for d in descriptors)


def test_only_visible_plist_files_are_read(tmp_path):
    write_plist(tmp_path, "com.a.plist", {"Label": "com.a"})
    write_plist(tmp_path, ".com.hidden.plist", {"Label": "com.hidden"})
    write_plist(tmp_path, "com.b.plist.bak", {"Label": "com.b"})
    (tmp_path / "com.dir.plist").mkdir()
    (tmp_path / "README").write_text("hello")
    assert [d.label for d in scan_directory(tmp_path, ServiceDomain.USER_AGENTS)] == ["com.a"]


def test_files_are_read_in_sorted_order_with_domain(tmp_path):
    for name in ("c", "a", "b"):
        write_plist(tmp_path, f"com.{name}.plist", {})
    descriptors = scan_directory(tmp_path, ServiceDomain.GLOBAL_AGENTS)
    assert [d.label for d in descriptors] == ["com.a", "com.b", "com.c"]
    assert {d.domain for d in descriptors} == {ServiceDomain.GLOBAL_AGENTS}


BAD_DATE = """<?xml version="1.0" encoding="UTF-8"?>
<plist version="1.0">
<dict>
    <key>Label</key>
    <string>com.bad.date</string>
    <key>Installed</key>
    <date>garbage</date>
</dict>
</plist>
"""


def test_malformed_date_is_skipped(tmp_path):
    write_plist(tmp_path, "com.good.plist", {"Label": "com.good"})
    (tmp_path / "com.bad.date.plist").write_text(BAD_DATE)
    assert [d.label for d in scan_directory(tmp_path, ServiceDomain.USER_AGENTS)] == ["com.good"]
