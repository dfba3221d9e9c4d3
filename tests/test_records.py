import datetime

import pytest

from grouping_by import InvalidRecordsError, MissingFieldError, group_by_as_set
from grouping_by.records import Record, field_getter, load_records


def test_records_are_hashable_and_equal_by_contents():
    left = Record({"x": 1, "y": [1, 2], "z": {"a": 1}})
    right = Record({"z": {"a": 1}, "y": [1, 2], "x": 1})
    assert left == right
    assert hash(left) == hash(right)
    assert left["y"] == (1, 2)
    assert isinstance(left["z"], Record)


def test_record_dump_returns_plain_data():
    data = {"x": 1, "y": [1, 2], "z": {"a": [3]}}
    assert Record(data).dump() == data


def test_record_representation():
    assert repr(Record({"x": 1, "y": "a"})) == "Record(x=1, y='a')"


def test_record_equals_plain_mapping():
    assert Record({"x": 1}) == {"x": 1}


def test_duplicate_records_collapse_in_sets():
    records = [Record({"x": 2, "y": 2}), Record({"x": 2, "y": 2}), Record({"x": 1, "y": 2})]
    assert group_by_as_set(records, field_getter("y")) == {
        2: {Record({"x": 2, "y": 2}), Record({"x": 1, "y": 2})}
    }


def test_field_getter_raises_missing_field():
    getter = field_getter("w")
    record = Record({"x": 1})
    with pytest.raises(MissingFieldError) as info:
        getter(record)
    assert info.value.field == "w"
    assert info.value.record is record
    assert "'w'" in str(info.value)


def test_missing_field_is_a_key_error():
    with pytest.raises(KeyError):
        field_getter("w")(Record({}))


def test_load_records(datadir):
    records = load_records(datadir / "points.yml")
    assert records == [
        Record({"x": 1, "y": 2}),
        Record({"x": 1, "y": 3}),
        Record({"x": 2, "y": 2}),
        Record({"x": 2, "y": 2}),
    ]


def test_load_records_from_json(datadir):
    records = load_records(datadir / "sums.json")
    assert [record["x"] for record in records] == [4, 4, 5, 18]


@pytest.mark.parametrize(
    "contents",
    [
        "x: 1\ny: 2\n",
        "- 1\n- 2\n",
        "- x: [1\n",
        "",
    ],
)
def test_load_records_rejects_invalid_contents(tmp_path, contents):
    path = tmp_path / "records.yml"
    path.write_text(contents)
    with pytest.raises(InvalidRecordsError):
        load_records(path)


def test_record_rejects_field_names_colliding_as_text():
    with pytest.raises(InvalidRecordsError, match="collide"):
        Record({1: "number", "1": "text"})


def test_load_records_rejects_colliding_field_names(tmp_path):
    path = tmp_path / "records.yml"
    path.write_text("- {1: a, '1': b}\n")
    with pytest.raises(InvalidRecordsError):
        load_records(path)


def test_load_records_rejects_missing_file(tmp_path):
    with pytest.raises(InvalidRecordsError, match="Unable to read"):
        load_records(tmp_path / "does-not-exist.yml")


def test_load_records_keeps_dates(tmp_path):
    path = tmp_path / "records.yml"
    path.write_text("- {x: 1, when: 2020-01-01}\n")
    assert load_records(path)[0]["when"] == datetime.date(2020, 1, 1)
