import datetime
import json
import threading

import pytest

from complexity_cli.core.exceptions import StoreError
from complexity_cli.engine import ComplexityVerdict
from complexity_cli.history.store import AnalysisKey, AnalysisRecord, ResultStore

KEY = AnalysisKey("file:///src/app.js", "render", 4)
LINEAR = ComplexityVerdict("O(n)", "O(1)")
QUADRATIC = ComplexityVerdict("O(n²)", "O(n)")


def test_record_and_get():
    store = ResultStore()
    when = datetime.datetime(2024, 5, 1, 12, 30, tzinfo=datetime.timezone.utc)

    record = store.record(KEY, LINEAR, timestamp=when)

    assert store.get(KEY) == record
    assert record.timestamp == "2024-05-01T12:30:00+00:00"
    assert KEY in store
    assert len(store) == 1
    assert str(KEY) == "file:///src/app.js:render:4"


def test_latest_verdict_wins():
    store = ResultStore()
    store.record(KEY, LINEAR)
    store.record(KEY, QUADRATIC)

    assert len(store) == 1
    assert store.get(KEY).verdict == QUADRATIC


def test_same_name_at_another_line_is_a_separate_entry():
    store = ResultStore()
    store.record(KEY, LINEAR)
    store.record(AnalysisKey(KEY.document, KEY.function, 40), QUADRATIC)

    assert len(store) == 2
    assert store.get(AnalysisKey("file:///src/other.js", "render", 4)) is None


def test_records_filter_and_order():
    store = ResultStore()
    store.record(AnalysisKey("file:///b.js", "z", 1), LINEAR)
    store.record(AnalysisKey("file:///a.js", "late", 9), LINEAR)
    store.record(AnalysisKey("file:///a.js", "early", 2), LINEAR)

    assert [r.key.function for r in store.records()] == ["early", "late", "z"]
    assert [r.key.function for r in store.records("file:///b.js")] == ["z"]


def test_persists_to_json(tmp_path):
    path = tmp_path / "nested" / "results.json"
    ResultStore(path).record(KEY, QUADRATIC)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert "updated_at" in data
    assert data["records"][0]["function"] == "render"
    assert data["records"][0]["time_complexity"] == "O(n²)"

    reloaded = ResultStore(path)
    assert reloaded.get(KEY).verdict == QUADRATIC


def test_corrupt_store(tmp_path):
    path = tmp_path / "results.json"
    path.write_text(json.dumps({"records": {"not": "a list"}}))

    with pytest.raises(StoreError, match="corrupt"):
        ResultStore(path)


def test_malformed_record():
    with pytest.raises(StoreError, match="Malformed"):
        AnalysisRecord.from_dict({"document": "file:///a.js"})


def test_concurrent_writers_keep_whole_records():
    store = ResultStore()

    def write(n):
        for i in range(50):
            store.record(AnalysisKey("file:///a.js", f"f{n}", i), LINEAR)

    threads = [threading.Thread(target=write, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == 200
    assert all(r.verdict == LINEAR for r in store.records())


def test_truncated_store_is_not_overwritten(tmp_path):
    path = tmp_path / "results.json"
    truncated = '{"records": [{"document": "file:///a.js", "function": "f"'
    path.write_text(truncated, encoding="utf-8")

    with pytest.raises(StoreError, match="corrupt"):
        ResultStore(path)

    assert path.read_text(encoding="utf-8") == truncated
