# tests/test_progress.py
import json
import logging

import pytest

from labsnake.progress import Progress, ProgressFile, record_completion

def test_default_progress():
    p = Progress()
    assert p.completed == () and p.unlocked == (1,)
    assert p.is_unlocked(1) and not p.is_unlocked(2)

def test_record_completion_unlocks_next_and_dedupes():
    p = record_completion(Progress(), 1)
    assert p.completed == (1,) and p.unlocked == (1, 2)
    p = record_completion(p, 1)
    assert p.completed == (1,) and p.unlocked == (1, 2)
    p = record_completion(p, 2)
    assert p.completed == (1, 2) and p.unlocked == (1, 2, 3)

def test_record_completion_does_not_mutate_input():
    base = Progress()
    record_completion(base, 1)
    assert base.completed == () and base.unlocked == (1,)

def test_missing_file_loads_default(tmp_path):
    assert ProgressFile(tmp_path / "nope.json").load() == Progress()

def test_save_then_load(tmp_path):
    store = ProgressFile(tmp_path / "sub" / "progress.json")
    p = record_completion(record_completion(Progress(), 1), 2)
    store.save(p)
    assert json.loads(store.path.read_text()) == {"completed": [1, 2], "unlocked": [1, 2, 3]}
    assert store.load() == p

def test_corrupt_file_falls_back(tmp_path, caplog):
    path = tmp_path / "progress.json"
    path.write_text("{not json")
    with caplog.at_level(logging.WARNING, logger="labsnake.progress"):
        assert ProgressFile(path).load() == Progress()
    assert "unreadable" in caplog.text

def test_wrong_shape_falls_back(tmp_path):
    path = tmp_path / "progress.json"
    for bad in ([1, 2], {"completed": [1]}, {"completed": "1", "unlocked": [1]},
                {"completed": [], "unlocked": ["x"]}):
        path.write_text(json.dumps(bad))
        assert ProgressFile(path).load() == Progress()

def test_level_one_always_unlocked(tmp_path):
    path = tmp_path / "progress.json"
    path.write_text(json.dumps({"completed": [], "unlocked": [4]}))
    p = ProgressFile(path).load()
    assert p.unlocked == (4, 1)
    assert p.is_unlocked(1)

def test_clear(tmp_path):
    store = ProgressFile(tmp_path / "progress.json")
    store.save(record_completion(Progress(), 1))
    store.clear()
    assert not store.path.exists()
    store.clear()  # already gone
    assert store.load() == Progress()

def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    store = ProgressFile(blocker / "progress.json")  # parent is a file
    with caplog.at_level(logging.WARNING, logger="labsnake.progress"):
        store.save(Progress())
    assert "could not save" in caplog.text

def test_progress_is_hashable_and_immutable():
    p = record_completion(Progress(), 1)
    assert hash(p) == hash(Progress(completed=(1,), unlocked=(1, 2)))
    assert {p, Progress(completed=(1,), unlocked=(1, 2))} == {p}
    with pytest.raises(AttributeError):
        p.completed.append(2)
