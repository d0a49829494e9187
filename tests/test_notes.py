import os

import pytest

from notefind.errors import NoteLoadError
from notefind.notes import UNTITLED, Note, is_note, load_notes, note_name, scan_notes


def test_load_notes_reads_name_and_contents(notes_dir):
    notes = load_notes(notes_dir)
    assert notes == [
        Note(path=notes_dir / "alpha.txt", name="alpha", contents="hello world"),
        Note(path=notes_dir / "beta.txt", name="beta", contents="goodbye"),
    ]


def test_scan_skips_other_extensions(notes_dir):
    (notes_dir / "readme.md").write_text("# not a note", encoding="utf-8")
    (notes_dir / "archive.txt.bak").write_text("old", encoding="utf-8")
    names = [p.name for p in scan_notes(notes_dir)]
    assert names == ["alpha.txt", "beta.txt"]


def test_scan_recurses_in_sorted_order(notes_dir):
    deep = notes_dir / "b" / "c"
    deep.mkdir(parents=True)
    (deep / "deep.txt").write_text("down here", encoding="utf-8")
    (notes_dir / "a").mkdir()
    (notes_dir / "a" / "first.txt").write_text("", encoding="utf-8")

    paths = list(scan_notes(notes_dir))
    assert paths == [
        notes_dir / "alpha.txt",
        notes_dir / "beta.txt",
        notes_dir / "a" / "first.txt",
        notes_dir / "b" / "c" / "deep.txt",
    ]


def test_directory_named_like_a_note_is_not_a_note(notes_dir):
    (notes_dir / "folder.txt").mkdir()
    assert not is_note(notes_dir / "folder.txt")
    assert notes_dir / "folder.txt" not in list(scan_notes(notes_dir))


def test_symlinked_note_is_not_followed(notes_dir, tmp_path):
    outside = tmp_path / "outside.txt"
    outside.write_text("secret", encoding="utf-8")
    (notes_dir / "link.txt").symlink_to(outside)
    (notes_dir / "alias.txt").symlink_to(notes_dir / "alpha.txt")

    assert not is_note(notes_dir / "link.txt")
    assert [n.name for n in load_notes(notes_dir)] == ["alpha", "beta"]


def test_missing_root_yields_no_notes(tmp_path):
    assert load_notes(tmp_path / "missing") == []


def test_undecodable_note_aborts_load(notes_dir):
    (notes_dir / "binary.txt").write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(NoteLoadError, match="binary.txt"):
        load_notes(notes_dir)


@pytest.mark.skipif(os.geteuid() == 0, reason="root can read anything")
def test_unreadable_note_aborts_load(notes_dir):
    locked = notes_dir / "locked.txt"
    locked.write_text("secret", encoding="utf-8")
    locked.chmod(0)
    try:
        with pytest.raises(NoteLoadError, match="locked.txt"):
            load_notes(notes_dir)
    finally:
        locked.chmod(0o644)


def test_note_name_strips_extension(tmp_path):
    assert note_name(tmp_path / "shopping list.txt") == "shopping list"


def test_note_name_placeholder_for_undecodable_stem(tmp_path):
    # os.fsdecode keeps undecodable bytes as lone surrogates
    path = tmp_path / (os.fsdecode(b"caf\xe9") + ".txt")
    assert note_name(path) == UNTITLED
