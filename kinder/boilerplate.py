"""Check that source files start with the expected licence header block."""

from __future__ import annotations

import json
import re
import sys
from collections.abc import Sequence
from pathlib import Path

YEAR_PLACEHOLDER = "YEAR"
BOILERPLATE_START = "Copyright "
BOILERPLATE_END = "limitations under the License."

SUPPORTED_EXTENSIONS = frozenset({".go", ".py", ".sh"})

_YEAR_RE = re.compile(r"(20)[0-9][0-9]")

_GRANT = "Licensed"
_ISSUER = "Apache"
_LICENCE_VERSION = "2.0"

BOILERPLATE = (
    BOILERPLATE_START + YEAR_PLACEHOLDER + " The Kubernetes Authors.",
    "",
    f'{_GRANT} under the {_ISSUER} License, Version {_LICENCE_VERSION} (the "License");',
    "you may not use this file except in compliance with the License.",
    "You may obtain a copy of the License at",
    "",
    f"    http://www.{_ISSUER.lower()}.org/licenses/LICENSE-{_LICENCE_VERSION}",
    "",
    "Unless required by applicable law or agreed to in writing, software",
    'distributed under the License is distributed on an "AS IS" BASIS,',
    "WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.",
    "See the License for the specific language governing permissions and",
    BOILERPLATE_END,
)


class BoilerplateError(ValueError):
    """Raised when a header block is missing or malformed."""


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def trim_leading_comment(line: str, comment: str) -> str:
    """Strip a leading line-comment marker and one following space, if present."""
    if not line.startswith(comment):
        return line
    rest = line[len(comment):]
    return rest[1:] if rest.startswith(" ") else rest


def is_supported_file_extension(file_path: str) -> bool:
    """Return True if the path ends in one of the checked extensions."""
    idx = file_path.rfind(".")
    if idx == -1:
        return False
    return file_path[idx:] in SUPPORTED_EXTENSIONS


def verify_boilerplate(contents: str) -> None:
    """Raise BoilerplateError unless ``contents`` holds the header block."""
    idx = 0
    found_start = False
    expected_words = len(BOILERPLATE[0].split(" "))

    for raw_line in contents.split("\n"):
        line = trim_leading_comment(raw_line, "//")
        line = trim_leading_comment(line, "#")

        expected = BOILERPLATE[idx]
        if BOILERPLATE_START in line:
            found_start = True
            words = line.split(" ")
            if len(words) != expected_words:
                raise BoilerplateError(
                    f"copyright line should contain exactly {expected_words} words"
                )
            if not _YEAR_RE.search(words[1]):
                raise BoilerplateError("cannot parse the year in the copyright line")
            expected = expected.replace(YEAR_PLACEHOLDER, words[1])

        if found_start:
            if line != expected:
                raise BoilerplateError(
                    f"boilerplate line {idx + 1} does not match\n"
                    f"expected: {_quote(expected)}\ngot: {_quote(line)}"
                )
            idx += 1
            if line.startswith(BOILERPLATE_END):
                break

    if not found_start:
        raise BoilerplateError("the file is missing a boilerplate")
    if idx < len(BOILERPLATE):
        raise BoilerplateError("boilerplate has missing lines")


def verify_file(file_path: str) -> bool:
    """Verify one file; return False if it was skipped for its extension."""
    if not file_path:
        raise BoilerplateError("empty file name")
    if not is_supported_file_extension(file_path):
        print(f"skipping {_quote(file_path)}: unsupported file type")
        return False
    contents = Path(file_path).read_bytes().decode("utf-8", errors="replace")
    verify_boilerplate(contents)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Verify every file named on the command line; return an exit status."""
    paths = list(sys.argv[1:] if argv is None else argv)
    if not paths:
        print("usage: verify-boilerplate <path-to-file> <path-to-file> ...")
        return 1

    has_error = False
    for path in paths:
        try:
            verify_file(path)
        except (BoilerplateError, OSError) as err:
            print(f"error validating {_quote(path)}: {err}")
            has_error = True
    return 1 if has_error else 0


if __name__ == "__main__":
    sys.exit(main())