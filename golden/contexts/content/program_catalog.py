"""
Program catalog for the Content context.

Programs form a hierarchy: a master program (e.g., "push") groups
sub-programs (e.g., "push_beginner"), and content written for a master is
visible to users of every program beneath it.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from golden.contexts.content.content_data_structure import ALL_PROGRAMS
from golden.contexts.content.exceptions import ContentLibraryError

load_dotenv()
PROGRAM_CATALOG_PATH = os.getenv("PROGRAM_CATALOG_PATH")


@dataclass
class ProgramEntry:
    """One program in the catalog."""

    program_id: str
    is_master: bool = False
    parent_program_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ProgramEntry":
        program_id = data.get("programId", data.get("program_id"))
        if not program_id:
            raise ValueError(f"Program entry without programId: {data}")
        return cls(
            program_id=str(program_id),
            is_master=bool(data.get("isMaster", data.get("is_master", False))),
            parent_program_id=data.get("parentProgramId", data.get("parent_program_id")) or None,
        )


class ProgramCatalog:
    """
    Lookup over the live program list.

    Attributes:
        entries: Mapping of program id to ProgramEntry
    """

    def __init__(self, entries: Iterable[ProgramEntry] = ()):
        self.entries: Dict[str, ProgramEntry] = {entry.program_id: entry for entry in entries}

    def __contains__(self, program_id: str) -> bool:
        return program_id in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def ancestors_of(self, program_id: Optional[str]) -> List[str]:
        """
        Walk parent links upward from a program.

        Args:
            program_id: Starting program

        Returns:
            Ancestor ids, nearest first. Stops at unknown programs and cycles.
        """
        ancestors: List[str] = []
        seen = {program_id}
        entry = self.entries.get(program_id)

        while entry is not None and entry.parent_program_id:
            parent = entry.parent_program_id
            if parent in seen:
                break
            ancestors.append(parent)
            seen.add(parent)
            entry = self.entries.get(parent)

        return ancestors

    def is_master_of(self, master_id: str, program_id: Optional[str]) -> bool:
        """
        Check whether master_id's content cascades down to program_id.

        An ancestor counts as master unless the catalog explicitly lists it
        with isMaster false.
        """
        if master_id not in self.ancestors_of(program_id):
            return False
        entry = self.entries.get(master_id)
        return entry is None or entry.is_master

    def is_visible(self, record_program_id: Optional[str], context_program_id: Optional[str]) -> bool:
        """
        Check whether content tagged with record_program_id may be shown to a
        user on context_program_id.
        """
        if not record_program_id or record_program_id == ALL_PROGRAMS:
            return True
        if record_program_id == context_program_id:
            return True
        return self.is_master_of(record_program_id, context_program_id)

    def is_known(self, program_id: str) -> bool:
        return program_id == ALL_PROGRAMS or program_id in self.entries


def load_program_catalog(path: Path = None) -> ProgramCatalog:
    """
    Load the program catalog from YAML.

    The file holds a list of {programId, isMaster, parentProgramId} entries,
    either at the root or under a "programs" key.

    Args:
        path: Path to catalog YAML (defaults to PROGRAM_CATALOG_PATH env variable)

    Returns:
        ProgramCatalog

    Raises:
        ContentLibraryError: If no path is configured or the file can't be read
    """
    if path is None:
        if not PROGRAM_CATALOG_PATH:
            raise ContentLibraryError("PROGRAM_CATALOG_PATH is not set and no path was given")
        path = Path(PROGRAM_CATALOG_PATH)

    path = Path(path)
    if not path.exists():
        raise ContentLibraryError("Program catalog not found", path=path)

    try:
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    except Exception as e:
        raise ContentLibraryError("Could not read program catalog", path=path, original_error=e) from e

    if isinstance(data, dict):
        data = data.get("programs", [])

    try:
        return ProgramCatalog(ProgramEntry.from_dict(item) for item in data or [])
    except (ValueError, AttributeError) as e:
        raise ContentLibraryError("Malformed program catalog", path=path, original_error=e) from e
