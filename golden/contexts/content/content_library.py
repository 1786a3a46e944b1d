"""
YAML-backed content library.

Stands in for the document store the admin console writes to: each content
kind lives in its own YAML file ({library}/{kind}.yaml) holding a list of
stored rows. Every fetch re-reads the file, so callers always match against a
fresh snapshot.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

from golden.contexts.content.content_data_structure import ContentKind, ContentRecord
from golden.contexts.content.exceptions import ContentLibraryError, InvalidContentRecordError
from golden.contexts.content.logger import _log_warning, log_collection_loaded

load_dotenv()
CONTENT_LIBRARY_PATH = os.getenv("CONTENT_LIBRARY_PATH")


def read_rows(path: Path, kind: ContentKind) -> List[Dict[str, Any]]:
    """
    Read raw rows from a collection file.

    The file may hold a list of rows at the root or under a key named after
    the kind (e.g., "phrases:").

    Raises:
        ContentLibraryError: If the file can't be parsed or has the wrong shape
    """
    try:
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    except Exception as e:
        raise ContentLibraryError(f"Could not read {kind.value}", path=path, original_error=e) from e

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get(kind.value, [])
    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise ContentLibraryError(f"Expected a list of {kind.value} rows", path=path)

    return data


class ContentLibrary:
    """
    Directory of content collections.

    Attributes:
        root: Directory holding {kind}.yaml files
        strict: Raise on invalid rows instead of skipping them
    """

    def __init__(self, root: Union[Path, str, None] = None, strict: bool = False):
        """
        Args:
            root: Library directory. Defaults to CONTENT_LIBRARY_PATH from environment
            strict: If True, an invalid row raises InvalidContentRecordError

        Raises:
            ContentLibraryError: If no directory is configured or it doesn't exist
        """
        if root is None:
            if not CONTENT_LIBRARY_PATH:
                raise ContentLibraryError("CONTENT_LIBRARY_PATH is not set and no path was given")
            root = CONTENT_LIBRARY_PATH

        self.root = Path(root)
        self.strict = strict

        if not self.root.is_dir():
            raise ContentLibraryError("Content library directory not found", path=self.root)

    def collection_path(self, kind: Union[ContentKind, str]) -> Path:
        """Path of the YAML file for a content kind."""
        return self.root / f"{ContentKind(kind).value}.yaml"

    def fetch_rows(self, kind: Union[ContentKind, str]) -> List[Dict[str, Any]]:
        """Raw stored rows for a kind (empty if the collection file is absent)."""
        kind = ContentKind(kind)
        path = self.collection_path(kind)
        if not path.exists():
            return []
        return read_rows(path, kind)

    def fetch_all(self, kind: Union[ContentKind, str]) -> List[ContentRecord]:
        """
        Fetch every record of a kind.

        Rows without an id get a positional one ("{kind}-{index}").
        Invalid rows are skipped with a warning unless the library is strict.

        Args:
            kind: Content kind

        Returns:
            Records in file order
        """
        kind = ContentKind(kind)
        rows = self.fetch_rows(kind)

        records: List[ContentRecord] = []
        rejected = 0
        for index, row in enumerate(rows):
            record_id = row.get("id") or f"{kind.value}-{index}"
            try:
                records.append(ContentRecord.from_dict(row, kind=kind, record_id=record_id))
            except InvalidContentRecordError as e:
                if self.strict:
                    raise
                rejected += 1
                _log_warning(f"Skipping row {record_id}: {e.message} ({e.field_name}={e.value!r})")

        log_collection_loaded(kind.value, self.collection_path(kind), len(records), rejected)
        return records

    def fetch_matching(self, kind: Union[ContentKind, str], predicate) -> List[ContentRecord]:
        """Fetch records of a kind that satisfy a predicate."""
        return [record for record in self.fetch_all(kind) if predicate(record)]

    def get(self, kind: Union[ContentKind, str], record_id: str) -> Optional[ContentRecord]:
        """Look up a single record by id."""
        return next((r for r in self.fetch_all(kind) if r.id == record_id), None)
