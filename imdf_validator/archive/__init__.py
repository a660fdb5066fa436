"""Archive ingestion: reading archives from disk and indexing their features.

- reader: directory / ``.zip`` → raw GeoJSON collections
- loader: raw collections → ``Archive`` plus loader diagnostics
"""

from imdf_validator.archive.loader import LoadResult, load_archive, load_archive_path
from imdf_validator.archive.reader import collection_name, read_archive

__all__ = [
    "LoadResult",
    "collection_name",
    "load_archive",
    "load_archive_path",
    "read_archive",
]
