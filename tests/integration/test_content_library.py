"""
Integration tests for the YAML content library - reads real files from disk.
"""

import pytest

from golden.contexts.content import (
    ContentKind,
    ContentLibrary,
    ContentLibraryError,
    InvalidContentRecordError,
)

PHRASES_YAML = """\
phrases:
  - id: p1
    phrase: "@name, הפארק מחכה!"
    persona: parent
    location: park
  - id: p2
    text: "@בוא/י נזוז"
    gender: female
    sportType: running
  - id: bad
    text: "persona from outer space"
    persona: astronaut
  - text: "בלי מזהה"
"""


@pytest.fixture
def library_dir(tmp_path):
    (tmp_path / "phrases.yaml").write_text(PHRASES_YAML, encoding="utf-8")
    return tmp_path


@pytest.mark.integration
def test_fetch_all_skips_invalid_rows(library_dir):
    library = ContentLibrary(library_dir)

    records = library.fetch_all(ContentKind.PHRASES)

    assert [r.id for r in records] == ["p1", "p2", "phrases-3"]
    assert records[0].text == "@name, הפארק מחכה!"
    assert records[1].sport_type == "running"


@pytest.mark.integration
def test_strict_library_raises_on_invalid_rows(library_dir):
    library = ContentLibrary(library_dir, strict=True)

    with pytest.raises(InvalidContentRecordError) as exc_info:
        library.fetch_all("phrases")

    assert exc_info.value.record_id == "bad"


@pytest.mark.integration
def test_fetch_rereads_file(library_dir):
    library = ContentLibrary(library_dir)
    assert len(library.fetch_all("phrases")) == 3

    (library_dir / "phrases.yaml").write_text("- id: only\n  text: אחד\n", encoding="utf-8")

    assert [r.id for r in library.fetch_all("phrases")] == ["only"]


@pytest.mark.integration
def test_missing_collection_is_empty(library_dir):
    assert ContentLibrary(library_dir).fetch_all("titles") == []


@pytest.mark.integration
def test_fetch_matching_and_get(library_dir):
    library = ContentLibrary(library_dir)

    parents = library.fetch_matching("phrases", lambda r: r.persona is not None)

    assert [r.id for r in parents] == ["p1"]
    assert library.get("phrases", "p2").gender.value == "female"
    assert library.get("phrases", "nope") is None


@pytest.mark.integration
def test_missing_library_directory(tmp_path):
    with pytest.raises(ContentLibraryError):
        ContentLibrary(tmp_path / "nowhere")


@pytest.mark.integration
def test_malformed_collection(tmp_path):
    (tmp_path / "phrases.yaml").write_text("phrases: just a string\n", encoding="utf-8")

    with pytest.raises(ContentLibraryError, match="Expected a list"):
        ContentLibrary(tmp_path).fetch_all("phrases")
