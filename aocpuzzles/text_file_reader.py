"""Read puzzle input files stored under a puzzle directory."""

from __future__ import annotations

import argparse
from pathlib import Path

DEFAULT_DIRECTORY = Path("puzzles")


class TextFileReader:
    """Load the text of a puzzle file and expose it whole or line by line."""

    def __init__(self, file_name: str, directory: str | Path = DEFAULT_DIRECTORY) -> None:
        self.file_name = file_name
        self.directory = Path(directory)
        self._content: str | None = None

    @property
    def path(self) -> Path:
        return self.directory / self.file_name

    def read_file_text(self) -> str:
        """Read the file into memory and return its text.

        Raises OSError when the file cannot be read.
        """
        print(f"file location: {self.path}")
        self._content = self.path.read_text(encoding="utf-8")
        return self._content

    @property
    def content(self) -> str:
        if self._content is None:
            raise RuntimeError(f"{self.path} has not been read yet")
        return self._content

    def lines(self) -> list[str]:
        """Return the content split into lines, without line terminators."""
        parts = self.content.split("\n")
        if parts[-1] == "":
            parts.pop()
        return [part.removesuffix("\r") for part in parts]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the content of a puzzle file.")
    parser.add_argument("file_name", nargs="?", default="test.txt")
    parser.add_argument("--directory", default=str(DEFAULT_DIRECTORY))
    args = parser.parse_args(argv)

    reader = TextFileReader(args.file_name, args.directory)
    try:
        reader.read_file_text()
    except OSError:
        return 0
    print(reader.content)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())