import io
from pathlib import Path

import pytest
import yaml

import figfont
from figfont.header import parse_header_line

ROOT = Path(__file__).resolve().parent.parent


def pytest_collect_file(parent, file_path):
    if file_path.name == "header_cases.yaml":
        return HeaderCaseFile.from_parent(parent, path=file_path)


class HeaderCaseFile(pytest.File):
    def collect(self):
        with open(self.path, encoding="utf-8") as f:
            cases = yaml.safe_load(f)

        for case in cases:
            yield HeaderCaseItem.from_parent(
                self,
                name=case["name"],
                line=case["line"],
                expect=case.get("expect", {}),
                error=case.get("error"),
            )


class HeaderCaseItem(pytest.Item):
    def __init__(self, name, parent, line, expect, error):
        super().__init__(name, parent)
        self.line = line
        self.expect = expect
        self.error = error

    def runtest(self):
        raw = self.line.encode("latin-1")
        if self.error:
            with pytest.raises(getattr(figfont, self.error)):
                parse_header_line(raw)
            return

        header = parse_header_line(raw)
        for field, expected in self.expect.items():
            actual = getattr(header, field)
            if field == "hard_blank":
                actual = actual.decode("latin-1")
            elif field == "layout":
                actual = actual.bits
            elif field == "print_direction":
                actual = actual.value
            assert actual == expected, (
                f"{field}: expected {expected!r}, got {actual!r}"
            )

    def reportinfo(self):
        return self.path, None, self.name

    def repr_failure(self, excinfo):
        return f"{self.line!r}: {excinfo.value}"


@pytest.fixture
def stream():
    """Build a peekable binary stream from bytes."""
    def make(data: bytes):
        return io.BufferedReader(io.BytesIO(data))
    return make


@pytest.fixture(scope="session")
def standard_font_path():
    return ROOT / "figfont" / "fonts" / "standard.flf"
