"""Unit tests for relative URL computation."""

import pytest

from rdoc2html.utils.paths import gen_relative_url


@pytest.mark.unit
class TestGenRelativeUrl:
    """Tests for gen_relative_url."""

    @pytest.mark.parametrize(
        "path,target,expected",
        [
            ("a/b/c.html", "a/b/d.html", "d.html"),
            ("a/b/c.html", "a/x/d.html", "../x/d.html"),
            ("c.html", "d.html", "d.html"),
            ("index.html", "a/b/d.html", "a/b/d.html"),
            ("a/b/c.html", "d.html", "../../d.html"),
            ("a/b/c.html", "x/y/z/d.html", "../../x/y/z/d.html"),
            ("", "d.html", "d.html"),
        ],
    )
    def test_relative_paths(self, path, target, expected):
        """Test common prefixes are removed and the rest climbs with '..'."""
        assert gen_relative_url(path, target) == expected

    def test_dot_segments_are_ignored(self):
        """Test '.' segments in either path."""
        assert gen_relative_url("./a/c.html", "a/./d.html") == "d.html"

    def test_paths_need_not_exist(self, tmp_path):
        """Test resolution is pure string algebra."""
        missing = tmp_path / "nope" / "c.html"
        assert not missing.exists()
        assert gen_relative_url(missing.as_posix(), (tmp_path / "other" / "d.html").as_posix()) == "../other/d.html"
