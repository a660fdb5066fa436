"""Read IMDF archives from disk.

An IMDF archive is a directory or ``.zip`` file holding one
``<feature_type>.geojson`` file per collection (plus ``manifest.json``
and possibly other members).  Only members named after an IMDF feature
type are read; everything else is logged and skipped.

Reading is the only step that can fail outright: a missing path, an
unreadable zip, or a member that is not valid JSON leaves nothing to
validate, so ``ArchiveReadError`` is raised.
"""

from __future__ import annotations

import json
import logging
import zipfile
from pathlib import Path, PurePosixPath

from imdf_validator.core.constants import ARCHIVE_FILE_SUFFIX, FeatureType
from imdf_validator.core.exceptions import ArchiveReadError

logger = logging.getLogger("imdf_validator.archive.reader")


def read_archive(path: Path | str) -> dict[str, object]:
    """Read every feature collection in an archive directory or zip.

    Args:
        path: Archive directory, or a ``.zip`` file.

    Returns:
        Feature type name → parsed GeoJSON object, sorted by name.

    Raises:
        ArchiveReadError: If *path* does not exist, is not a readable
            zip, or a collection member is not valid JSON.
    """
    path = Path(path)
    if path.is_dir():
        collections = _read_directory(path)
    elif path.is_file():
        collections = _read_zip(path)
    else:
        raise ArchiveReadError(path, "no such file or directory")

    logger.info(
        "Archive read | path=%s | collections=%s",
        path,
        ",".join(collections) or "-",
    )
    return collections


def collection_name(member: str) -> str | None:
    """Return the feature type a member file holds, or ``None`` if it holds none."""
    name = PurePosixPath(member).name
    if not name.endswith(ARCHIVE_FILE_SUFFIX):
        return None
    stem = name[: -len(ARCHIVE_FILE_SUFFIX)]
    feature_type = FeatureType.parse(stem)
    return feature_type.value if feature_type is not None else None


def _read_directory(root: Path) -> dict[str, object]:
    collections: dict[str, object] = {}
    for entry in sorted(root.iterdir()):
        if not entry.is_file():
            continue
        name = collection_name(entry.name)
        if name is None:
            logger.warning("Skipping non-collection archive member | member=%s", entry.name)
            continue
        try:
            content = entry.read_bytes()
        except OSError as exc:
            raise ArchiveReadError(entry, str(exc)) from exc
        collections[name] = _parse_json(entry, content)
    return dict(sorted(collections.items()))


def _read_zip(archive_path: Path) -> dict[str, object]:
    collections: dict[str, object] = {}
    try:
        with zipfile.ZipFile(archive_path) as zf:
            for info in sorted(zf.infolist(), key=lambda i: i.filename):
                if info.is_dir():
                    continue
                name = collection_name(info.filename)
                if name is None:
                    logger.warning(
                        "Skipping non-collection archive member | member=%s", info.filename
                    )
                    continue
                if name in collections:
                    raise ArchiveReadError(
                        archive_path, f"more than one member holds the {name!r} collection"
                    )
                collections[name] = _parse_json(
                    f"{archive_path}!{info.filename}", zf.read(info)
                )
    except zipfile.BadZipFile as exc:
        raise ArchiveReadError(archive_path, f"not a zip archive ({exc})") from exc
    except OSError as exc:
        raise ArchiveReadError(archive_path, str(exc)) from exc
    return dict(sorted(collections.items()))


def _parse_json(source: object, content: bytes) -> object:
    try:
        return json.loads(content.decode("utf-8-sig"))
    except UnicodeDecodeError as exc:
        raise ArchiveReadError(source, f"not UTF-8 text ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise ArchiveReadError(source, f"invalid JSON ({exc})") from exc
