"""Load fonts from files, plain or wrapped in a ZIP archive."""

import logging
import threading
import zipfile
import zlib
from importlib.resources import files
from pathlib import Path

from .errors import FontIOError, InvalidExtension
from .font import Font, decode, decode_bytes
from .header import MAGIC

logger = logging.getLogger(__name__)

EXTENSION = ".flf"

_standard = None
_standard_lock = threading.Lock()


def is_plain(path: Path) -> bool:
    """Check whether a font file starts with the FIGlet magic."""
    with open(path, "rb") as f:
        return f.read(len(MAGIC)) == MAGIC


def _load_zipped(path: Path, encoding: str) -> Font:
    with zipfile.ZipFile(path) as archive:
        with archive.open(path.name) as entry:
            return decode(entry, encoding)


def load(path, encoding: str = "latin-1") -> Font:
    """
    Load a font file.

    The path must end in .flf. Files not starting with the FIGlet magic are
    read as ZIP archives holding a single entry named like the file itself.
    """
    path = Path(path)
    if path.suffix != EXTENSION:
        raise InvalidExtension(f"font file must have the {EXTENSION} extension: {path}")

    try:
        if is_plain(path):
            logger.debug("loading plain font %s", path)
            with open(path, "rb") as f:
                return decode(f, encoding)
        logger.debug("loading zipped font %s", path)
        return _load_zipped(path, encoding)
    except zipfile.BadZipFile as exc:
        raise FontIOError(f"{path} is neither a font nor a readable ZIP archive: {exc}") from exc
    except (zlib.error, EOFError) as exc:
        raise FontIOError(f"corrupt ZIP entry in {path}: {exc}") from exc
    except KeyError as exc:
        raise FontIOError(f"ZIP archive {path} has no entry named {path.name}") from exc
    except FontIOError:
        raise
    except OSError as exc:
        raise FontIOError(f"failed to read {path}: {exc}") from exc


def standard() -> Font:
    """The bundled standard font, decoded once on first use."""
    global _standard
    with _standard_lock:
        if _standard is None:
            data = (files(__package__) / "fonts" / "standard.flf").read_bytes()
            _standard = decode_bytes(data)
        return _standard
