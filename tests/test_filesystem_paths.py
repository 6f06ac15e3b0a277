# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for path abbreviation and segment helpers."""

from __future__ import annotations

import pytest

from phpdd.filesystem.paths import has_path_segment, path_extension, truncate_path


def test_path_that_fits_is_returned_unchanged() -> None:
    assert truncate_path("src/a.php", 60) == "src/a.php"
    assert truncate_path("C:\\www\\a.php", 60) == "C:\\www\\a.php"


def test_inner_segments_shrink_right_to_left() -> None:
    result = truncate_path("src/vendor/library/module/File.php", 30)

    assert result == "src/vendor/lib../mo../File.php"
    assert len(result) == 30


def test_backslash_paths_are_normalised_when_shortened() -> None:
    assert truncate_path("dir\\subdirectory\\file.php", 20) == "dir/subdi../file.php"


def test_first_and_last_segments_are_preserved() -> None:
    result = truncate_path("a/bbbbbbbbbb/c.php", 5)

    assert result == "a/b../c.php"
    assert result.startswith("a/")
    assert result.endswith("/c.php")


def test_single_segment_is_never_cut() -> None:
    assert truncate_path("verylongfilename.php", 5) == "verylongfilename.php"


@pytest.mark.parametrize(
    ("path", "width", "expected"),
    [
        ("a/b/c/d", 5, "a/b/c/d"),
        ("a/bb/ccc/dddd/e", 4, "a/bb/ccc/d../e"),
        ("src/x/library/File.php", 15, "src/x/l../File.php"),
        ("project/app/Http/Controllers/Admin/UserController.php", 25, "project/app/H../C../A../UserController.php"),
    ],
)
def test_short_inner_segments_never_grow_the_path(path: str, width: int, expected: str) -> None:
    result = truncate_path(path, width)

    assert result == expected
    assert len(result) <= len(path)


@pytest.mark.parametrize(
    ("path", "width"),
    [
        ("a/bbbbbbbbbb/c.php", 5),
        ("src/vendor/library/module/File.php", 30),
        ("src/vendor/library/module/File.php", 12),
        ("project/app/Http/Controllers/Admin/UserController.php", 25),
        ("a/b/cccc/dd/e.php", 9),
    ],
)
def test_truncation_is_idempotent(path: str, width: int) -> None:
    once = truncate_path(path, width)

    assert truncate_path(once, width) == once


def test_has_path_segment_matches_whole_names_case_insensitively() -> None:
    assert has_path_segment("/srv/app/Vendor/lib.php", ["vendor"])
    assert has_path_segment("C:\\www\\cache\\x.php", ["cache"])
    assert not has_path_segment("/srv/app/vendors/lib.php", ["vendor"])


def test_path_extension_is_lower_cased() -> None:
    assert path_extension("/srv/app/Index.PHTML") == "phtml"
    assert path_extension("/srv/app/README") == ""
