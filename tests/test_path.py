#
# FSUnits - Path Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from pathlib import PurePosixPath

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from fsunits.path import PATH_MAX, PathTooLongError, basename, dirname, dirname_inplace


# Tests ----------------------------------------------------------------------------------------------------------------

class TestBasename:

    @pytest.mark.parametrize(
        "path, expected",
        [
            pytest.param("", ".", id="empty"),
            pytest.param(None, ".", id="none"),
            pytest.param("/", "/", id="root"),
            pytest.param("///", "/", id="all-slashes"),
            pytest.param("a", "a", id="single"),
            pytest.param("a/", "a", id="trailing-slash"),
            pytest.param("/a", "a", id="absolute"),
            pytest.param("/a/b", "b", id="nested"),
            pytest.param("/a/b/", "b", id="nested-trailing"),
            pytest.param("/a/b///", "b", id="many-trailing"),
            pytest.param("a//b", "b", id="double-slash"),
            pytest.param("./file.txt", "file.txt", id="dot-relative"),
            pytest.param("..", "..", id="dot-dot"),
            pytest.param("/a/..", "..", id="ends-dot-dot"),
        ],
    )
    def test_str(self, path, expected):
        assert basename(path) == expected

    @pytest.mark.parametrize(
        "path, expected",
        [
            pytest.param(b"", b".", id="empty"),
            pytest.param(b"///", b"/", id="all-slashes"),
            pytest.param(b"/mnt/fs/dir/", b"dir", id="nested"),
        ],
    )
    def test_bytes(self, path, expected):
        assert basename(path) == expected

    def test_path_like(self):
        assert basename(PurePosixPath("/mnt/fs/file")) == "file"

    def test_rejects_unsupported_type(self):
        with pytest.raises(TypeError, match="os.PathLike"):
            basename(42)

    def test_too_long(self):
        component = "x" * PATH_MAX
        with pytest.raises(PathTooLongError) as excinfo:
            basename(f"/dir/{component}")
        assert excinfo.value.length == PATH_MAX
        assert excinfo.value.max_length == PATH_MAX
        assert str(excinfo.value).endswith(": '/dir/" + "x" * 55 + "...'")

    def test_longest_allowed(self):
        component = "x" * (PATH_MAX - 1)
        assert basename(f"/dir/{component}/") == component

    def test_custom_and_disabled_limit(self):
        with pytest.raises(PathTooLongError):
            basename("/abcd", max_length=4)
        assert basename("/abc", max_length=4) == "abc"
        assert basename("/" + "x" * 10_000, max_length=None) == "x" * 10_000


class TestDirname:

    @pytest.mark.parametrize(
        "path, expected",
        [
            pytest.param("", ".", id="empty"),
            pytest.param(None, ".", id="none"),
            pytest.param("/", "/", id="root"),
            pytest.param("///", "/", id="all-slashes"),
            pytest.param("a", ".", id="no-slash"),
            pytest.param("a/", ".", id="trailing-slash-only"),
            pytest.param("/a", "/", id="top-level"),
            pytest.param("/a/", "/", id="top-level-trailing"),
            pytest.param("//a", "/", id="double-leading"),
            pytest.param("/a/b", "/a", id="nested"),
            pytest.param("/a/b/", "/a", id="nested-trailing"),
            pytest.param("/a//b", "/a", id="collapse-separators"),
            pytest.param("a//b", "a", id="relative-collapse"),
            pytest.param("a/b/c", "a/b", id="relative-nested"),
            pytest.param("./x", ".", id="dot-relative"),
        ],
    )
    def test_str(self, path, expected):
        assert dirname(path) == expected

    def test_bytes(self):
        assert dirname(b"/a/b/") == b"/a"
        assert dirname(b"a") == b"."
        assert dirname(b"") == b"."

    def test_path_like(self):
        assert dirname(PurePosixPath("/mnt/fs/file")) == "/mnt/fs"

    def test_too_long(self):
        parent = "/" + "d" * PATH_MAX
        with pytest.raises(PathTooLongError):
            dirname(f"{parent}/file")

    def test_longest_allowed(self):
        parent = "/" + "d" * (PATH_MAX - 2)
        assert dirname(f"{parent}/file") == parent

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            dirname("/abc/def", max_length=3)


class TestDirnameInplace:

    @pytest.mark.parametrize(
        "path, expected",
        [
            pytest.param(b"", b".", id="empty"),
            pytest.param(b"/", b"/", id="root"),
            pytest.param(b"a", b".", id="no-slash"),
            pytest.param(b"/a", b"/", id="top-level"),
            pytest.param(b"/a/b/", b"/a", id="nested-trailing"),
            pytest.param(b"a//b", b"a", id="collapse-separators"),
        ],
    )
    def test_rewrites_buffer(self, path, expected):
        buf = bytearray(path)
        assert dirname_inplace(buf) is None
        assert buf == expected

    def test_same_object_is_mutated(self):
        buf = bytearray(b"/mnt/fs/dir/file")
        alias = buf
        dirname_inplace(buf)
        assert alias is buf
        assert alias == bytearray(b"/mnt/fs/dir")

    def test_none_is_noop(self):
        assert dirname_inplace(None) is None

    def test_no_length_limit(self):
        buf = bytearray(b"/" + b"d" * (2 * PATH_MAX) + b"/file")
        dirname_inplace(buf)
        assert len(buf) == 2 * PATH_MAX + 1

    @pytest.mark.parametrize("buf", ["/a/b", b"/a/b", ["/", "a"]])
    def test_rejects_immutable(self, buf):
        with pytest.raises(TypeError, match="bytearray"):
            dirname_inplace(buf)

    def test_matches_dirname(self):
        for path in ("/a/b/c", "x/y", "/", "//a//b//", "rel"):
            buf = bytearray(path.encode())
            dirname_inplace(buf)
            assert buf.decode() == dirname(path)
