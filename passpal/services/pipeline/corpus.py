import io
import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from passpal.core.exceptions import CorpusError

logger = logging.getLogger(__name__)


def strip_terminator(line: str) -> str:
    """Remove a single trailing line terminator (\\r\\n, \\n or \\r)."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def text_lines(text: str) -> Iterator[str]:
    """Split an in-memory corpus on \\n only, the same way CorpusReader does."""
    for line in io.StringIO(text, newline="\n"):
        yield strip_terminator(line)


class CorpusReader:
    """
    Streams candidates from a word list, one per line.

    The file is never read in full; lines end at \\n only, so a lone \\r
    stays part of the candidate, and are yielded with their terminator
    stripped. Any failure to open, read or decode the file is raised as a
    CorpusError, which is fatal for the run.
    """

    def __init__(self, path: str | os.PathLike, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    @property
    def size(self) -> int:
        """File size in bytes."""
        try:
            return self.path.stat().st_size
        except OSError as e:
            raise CorpusError(
                f"Cannot access corpus {self.path}: {e.strerror or e}",
                {"path": str(self.path)},
            ) from e

    def check(self) -> None:
        """Fail fast if the corpus is missing or not a regular file."""
        if not self.path.is_file():
            raise CorpusError(
                f"Corpus file not found: {self.path}",
                {"path": str(self.path)},
            )

    def lines(self, progress: Callable[[int], object] | None = None) -> Iterator[str]:
        """
        Yield each line of the corpus without its terminator.

        Args:
            progress: Optional callback receiving the byte length of each
                line as it is read

        Raises:
            CorpusError: If the file cannot be opened, read or decoded
        """
        self.check()
        logger.info("Reading corpus %s (%d bytes)", self.path, self.size)
        try:
            with self.path.open("r", encoding=self.encoding, newline="\n") as handle:
                for line in handle:
                    if progress is not None:
                        progress(len(line.encode(self.encoding)))
                    yield strip_terminator(line)
        except UnicodeDecodeError as e:
            raise CorpusError(
                f"Corpus {self.path} is not valid {self.encoding}: {e.reason}",
                {"path": str(self.path), "encoding": self.encoding, "position": e.start},
            ) from e
        except OSError as e:
            raise CorpusError(
                f"Cannot read corpus {self.path}: {e.strerror or e}",
                {"path": str(self.path)},
            ) from e

    def __iter__(self) -> Iterator[str]:
        return self.lines()
