from pathlib import Path

import pytest

from pangaea_data.records import ContentKind, DatasetRecord, ResolvedSet


@pytest.mark.parametrize(
    "media_type, expected",
    [
        ("text/tab-separated-values;charset=UTF-8", ContentKind.TABULAR),
        ("TEXT/Tab-Separated-Values", ContentKind.TABULAR),
        ("image/png", ContentKind.IMAGE),
        ("application/zip", ContentKind.ARCHIVE),
        ("text/html; charset=utf-8", ContentKind.HTML_GATE),
        ("application/pdf", ContentKind.UNKNOWN),
        ("", ContentKind.UNKNOWN),
        (None, ContentKind.UNKNOWN),
    ],
)
def test_content_kind_from_media_type(media_type, expected):
    assert ContentKind.from_media_type(media_type) is expected


def test_content_kind_extensions():
    assert ContentKind.TABULAR.extension == ".txt"
    assert ContentKind.IMAGE.extension == ".png"
    assert ContentKind.ARCHIVE.extension == ".zip"
    assert ContentKind.HTML_GATE.extension is None
    assert ContentKind.UNKNOWN.extension is None
    assert ContentKind.from_extension(".zip") is ContentKind.ARCHIVE
    assert ContentKind.from_extension("txt") is ContentKind.TABULAR
    assert ContentKind.from_extension(".csv") is ContentKind.UNKNOWN


def test_resolved_set_is_iterable():
    resolved = ResolvedSet(dois=("a", "b"), citation="cite")
    assert list(resolved) == ["a", "b"]
    assert len(resolved) == 2


def test_dataset_record_renders_labeled_block():
    record = DatasetRecord(
        parent_doi="10.1594/PANGAEA.761032",
        doi="10.1594/PANGAEA.761033",
        citation="Doe, A (2011)",
        url="https://doi.org/10.1594/PANGAEA.761033",
        local_path=Path("/tmp/x.txt"),
        data="png; read with PIL.Image.open()",
    )
    text = str(record)
    lines = text.splitlines()
    assert lines[0] == "<Pangaea data> 10.1594/PANGAEA.761033"
    assert "  parent doi: 10.1594/PANGAEA.761032" in lines
    assert "  url:        https://doi.org/10.1594/PANGAEA.761033" in lines
    assert "  citation:   Doe, A (2011)" in lines
    assert "  data:" in lines
    assert lines[-1] == "png; read with PIL.Image.open()"
