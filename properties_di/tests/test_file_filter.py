from __future__ import annotations

import pytest

from properties_di.discovery.file_filter import PropertyFileFilter, is_property_file


@pytest.fixture()
def cut() -> PropertyFileFilter:
    return PropertyFileFilter()


@pytest.mark.parametrize(
    "pathname, expected",
    [
        ("/classes/test", False),
        ("/classes/test.properties", True),
        ("/myDirectory/classes/properties", False),
        ("/myDirectory/file.properties", True),
        ("/myDirectory/classes/weird.filenam.e.properties", True),
        ("test.properties", True),
        ("", False),
        (None, False),
    ],
)
def test_accept(cut, pathname, expected):
    assert cut.accept(pathname) is expected  # nosec B101 - test assertion


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("myFileproperties", ""),
        ("myFile.properties", "properties"),
        ("anotherFile.with.multiple.dots", "dots"),
        (None, ""),
        ("", ""),
        ("...", ""),
    ],
)
def test_get_extension(cut, filename, expected):
    assert cut.get_extension(filename) == expected  # nosec B101 - test assertion


def test_directory_with_properties_suffix_is_rejected(cut, tmp_path):
    conf_dir = tmp_path / "conf.properties"
    conf_dir.mkdir()
    assert not cut.accept(conf_dir)  # nosec B101 - test assertion


def test_existing_file_is_accepted(cut, tmp_path):
    f = tmp_path / "app.properties"
    f.write_text("a=b\n", encoding="utf-8")
    assert cut(f)  # nosec B101 - test assertion


def test_extension_match_is_case_sensitive():
    assert not is_property_file("/conf/app.PROPERTIES")  # nosec B101 - test assertion
    assert not is_property_file("/conf/app.properties.bak")  # nosec B101 - test assertion
