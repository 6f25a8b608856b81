from pathlib import Path

import pytest

from resource_probe.exceptions import UnsupportedLocator
from resource_probe.locator import Locator, LocatorKind, classify


@pytest.mark.parametrize(
    "url,kind",
    [
        ("file:/tmp/data.txt", LocatorKind.FILESYSTEM),
        ("file:///tmp/data.txt", LocatorKind.FILESYSTEM),
        ("vfsfile:/tmp/data.txt", LocatorKind.FILESYSTEM),
        ("/tmp/data.txt", LocatorKind.FILESYSTEM),
        ("relative/data.txt", LocatorKind.FILESYSTEM),
        ("C:\\data\\x.txt", LocatorKind.FILESYSTEM),
        ("jar:file:/tmp/lib.jar!/a/b.txt", LocatorKind.ARCHIVE_MEMBER),
        ("zip:/tmp/lib.zip!/a.txt", LocatorKind.ARCHIVE_MEMBER),
        ("vfszip:/tmp/lib.zip/a.txt", LocatorKind.ARCHIVE_MEMBER),
        ("wsjar:file:/tmp/lib.jar!/a.txt", LocatorKind.ARCHIVE_MEMBER),
        ("wsjar:file:/tmp/lib.jar", LocatorKind.REMOTE),
        ("https://example.org/a.txt", LocatorKind.REMOTE),
        ("ftp://example.org/a.txt", LocatorKind.REMOTE),
        ("data:text/plain,hello", LocatorKind.REMOTE),
    ],
)
def test_classify(url, kind):
    assert classify(url) is kind
    assert Locator(url).kind is kind


def test_classify_is_stable_and_does_no_io(tmp_path):
    missing = Locator.from_path(tmp_path / "never" / "created.txt")
    kinds = {classify(missing) for _ in range(5)}
    assert kinds == {LocatorKind.FILESYSTEM}
    assert not (tmp_path / "never").exists()


def test_parse_accepts_paths_and_urls(tmp_path):
    p = tmp_path / "with space.txt"
    from_path = Locator.parse(p)
    assert from_path.scheme == "file"
    assert from_path.to_filesystem_path() == p

    assert Locator.parse(str(p)) == from_path
    assert Locator.parse("https://example.org/x").url == "https://example.org/x"
    assert Locator.parse(from_path) is from_path


def test_to_filesystem_path_decodes_file_urls():
    assert Locator("file:/tmp/a%20b.txt").to_filesystem_path() == Path("/tmp/a b.txt")
    assert Locator("file://localhost/tmp/x.txt").to_filesystem_path() == Path("/tmp/x.txt")


def test_to_filesystem_path_rejects_non_files():
    loc = Locator("https://example.org/a.txt")
    with pytest.raises(UnsupportedLocator) as excinfo:
        loc.to_filesystem_path()
    assert "URL [https://example.org/a.txt]" in str(excinfo.value)
    assert isinstance(excinfo.value, FileNotFoundError)

    with pytest.raises(UnsupportedLocator, match="Archive URL"):
        Locator("jar:file:/x.jar!/a").to_filesystem_path("Archive URL")


def test_containing_archive_locator():
    member = Locator("jar:file:/tmp/lib.jar!/a/b.txt")
    assert member.containing_archive_locator() == Locator("file:/tmp/lib.jar")
    assert member.member_name == "a/b.txt"

    bare = Locator("zip:tmp/lib.zip!/a.txt")
    assert bare.containing_archive_locator() == Locator("file:/tmp/lib.zip")

    nested = Locator("jar:file:/tmp/outer.jar!/inner.jar!/x.txt")
    assert nested.containing_archive_locator() == Locator("file:/tmp/outer.jar")


def test_containing_archive_locator_without_separator():
    loc = Locator("vfszip:/tmp/lib.zip/a.txt")
    assert loc.containing_archive_locator() is loc
    assert loc.member_name is None
    with pytest.raises(UnsupportedLocator):
        loc.containing_archive_locator().to_filesystem_path("Archive URL")


def test_containing_archive_locator_requires_member():
    with pytest.raises(ValueError):
        Locator("https://example.org/a").containing_archive_locator()


def test_locator_is_immutable_and_hashable():
    loc = Locator("file:/tmp/a.txt")
    with pytest.raises(AttributeError):
        loc.url = "file:/tmp/b.txt"  # type: ignore[misc]
    assert {loc, Locator("file:/tmp/a.txt")} == {loc}
    assert loc.description() == "URL [file:/tmp/a.txt]"
