import pytest

from kinder.boilerplate import (
    BOILERPLATE,
    YEAR_PLACEHOLDER,
    BoilerplateError,
    is_supported_file_extension,
    main,
    trim_leading_comment,
    verify_boilerplate,
    verify_file,
)

HEADER_LINES = [line.replace(YEAR_PLACEHOLDER, "2019") for line in BOILERPLATE]

VALID = "\\/*\n" + "\n".join(HEADER_LINES) + "\n\t\t*/"

MISSING_LINES = "\n" + "\n".join(HEADER_LINES[:3]) + "\n"


def _hash_commented(lines):
    return "\n".join(("# " + line) if line else "#" for line in lines)


def test_year_line_alone_is_incomplete():
    with pytest.raises(BoilerplateError, match="missing lines"):
        verify_boilerplate("Copyright 2019 The Kubernetes Authors.")


def test_valid_boilerplate_passes():
    assert verify_boilerplate(VALID) is None


def test_bad_year():
    with pytest.raises(BoilerplateError, match="cannot parse the year"):
        verify_boilerplate("Copyright 1019 The Kubernetes Authors.")


def test_missing_boilerplate():
    with pytest.raises(BoilerplateError, match="missing a boilerplate"):
        verify_boilerplate("package main\n")


def test_wrong_word_count():
    with pytest.raises(BoilerplateError, match="exactly 5 words"):
        verify_boilerplate("Copyright 2019 Someone")


def test_mismatched_line_reports_line_number():
    lines = list(HEADER_LINES)
    lines[3] = "something else"
    with pytest.raises(BoilerplateError, match="boilerplate line 4 does not match"):
        verify_boilerplate("\n".join(lines))


def test_hash_commented_header_passes():
    assert verify_boilerplate(_hash_commented(HEADER_LINES) + "\n\nset -e\n") is None


def test_slash_commented_header_passes():
    text = "\n".join(("// " + line) if line else "//" for line in HEADER_LINES)
    assert verify_boilerplate(text + "\n\npackage main\n") is None


@pytest.mark.parametrize(
    "comment, line, expected",
    [
        ("#", "# test", "test"),
        ("#", "#", ""),
        ("//", "// test", "test"),
        ("//", "test", "test"),
    ],
)
def test_trim_leading_comment(comment, line, expected):
    assert trim_leading_comment(line, comment) == expected


def test_trim_leading_comment_without_space():
    assert trim_leading_comment("#test", "#") == "test"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("main.go", True),
        ("script.py", True),
        ("run.sh", True),
        ("README.md", False),
        ("Makefile", False),
        ("dir.go/file", False),
    ],
)
def test_is_supported_file_extension(path, expected):
    assert is_supported_file_extension(path) is expected


def test_verify_file_valid(tmp_path):
    target = tmp_path / "ok.py"
    target.write_text(_hash_commented(HEADER_LINES) + "\n")
    assert verify_file(str(target)) is True


def test_verify_file_invalid(tmp_path):
    target = tmp_path / "bad.go"
    target.write_text("package main\n")
    with pytest.raises(BoilerplateError):
        verify_file(str(target))


def test_verify_file_skips_unsupported(tmp_path, capsys):
    target = tmp_path / "notes.txt"
    target.write_text("nothing")
    assert verify_file(str(target)) is False
    assert "unsupported file type" in capsys.readouterr().out


def test_verify_file_empty_name():
    with pytest.raises(BoilerplateError, match="empty file name"):
        verify_file("")


def test_verify_file_missing(tmp_path):
    with pytest.raises(OSError):
        verify_file(str(tmp_path / "absent.go"))


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_main_reports_errors(tmp_path, capsys):
    good = tmp_path / "good.sh"
    good.write_text(_hash_commented(HEADER_LINES) + "\n")
    bad = tmp_path / "bad.sh"
    bad.write_text("echo hi\n")
    assert main([str(good)]) == 0
    assert main([str(good), str(bad)]) == 1
    assert "error validating" in capsys.readouterr().out