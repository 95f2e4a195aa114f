"""Unit tests for the JSON file video store"""
import json
from unittest.mock import patch

import pytest

from core.models import StoreState, Video
from core.store import VideoStore


class TestLoad:
    """Loading falls back to seed data and normalizes the document"""

    def test_missing_file_uses_seed(self, data_file):
        store = VideoStore.open(data_file)
        assert [v.id for v in store.videos] == ["vid1", "vid2", "vid3"]
        assert [c.id for c in store.creators] == ["user1"]
        assert not data_file.exists()

    def test_corrupt_file_uses_seed(self, data_file):
        data_file.write_text("{not json", encoding="utf-8")
        store = VideoStore.open(data_file)
        assert len(store.videos) == 3

    def test_non_object_document_uses_seed(self, data_file):
        data_file.write_text("[1, 2, 3]", encoding="utf-8")
        store = VideoStore.open(data_file)
        assert len(store.videos) == 3

    def test_corrupt_file_kept_as_backup(self, data_file):
        data_file.write_text("{not json", encoding="utf-8")
        store = VideoStore.open(data_file)
        assert store.backup_path.read_text(encoding="utf-8") == "{not json"

    def test_invalid_record_skipped_valid_ones_kept(self, data_file):
        original = {
            "videos": [
                {"id": "keep", "title": "Keep me", "likes": 3},
                {"title": "no id"},
                {"id": "negative", "views": -1},
            ],
            "creators": [{"id": "user1", "username": "educator1"}],
        }
        data_file.write_text(json.dumps(original), encoding="utf-8")

        store = VideoStore.open(data_file)

        assert [v.id for v in store.videos] == ["keep"]
        assert store.find_video("keep").likes == 3
        assert [c.id for c in store.creators] == ["user1"]
        assert json.loads(store.backup_path.read_text(encoding="utf-8")) == original

    def test_skipped_records_survive_next_save(self, data_file):
        original = {"videos": [{"id": "keep"}, {"title": "no id"}], "creators": []}
        data_file.write_text(json.dumps(original), encoding="utf-8")

        store = VideoStore.open(data_file)
        with store.mutation() as state:
            state.videos[0].likes += 1

        assert json.loads(data_file.read_text(encoding="utf-8"))["videos"][0]["likes"] == 1
        assert json.loads(store.backup_path.read_text(encoding="utf-8")) == original

    def test_null_fields_use_defaults(self, data_file):
        document = {
            "videos": [
                {"id": "keep", "title": "Keep me", "description": None, "views": None,
                 "comments": [{"id": "c1", "text": "hi", "username": None}]},
            ],
            "creators": [{"id": "user1", "bio": None, "followers": None}],
        }
        data_file.write_text(json.dumps(document), encoding="utf-8")

        store = VideoStore.open(data_file)

        video = store.find_video("keep")
        assert video.description == ""
        assert video.views == 0
        assert video.comments[0].username == "Anonymous"
        assert store.find_creator("user1").bio == ""
        assert store.find_creator("user1").followers == 0
        assert not store.backup_path.exists()

    def test_clean_file_has_no_backup(self, store, data_file):
        store.save()
        reloaded = VideoStore.open(data_file)
        assert not reloaded.backup_path.exists()

    def test_non_list_collection_uses_seed(self, data_file):
        data_file.write_text(json.dumps({"videos": {"id": "x"}}), encoding="utf-8")
        store = VideoStore.open(data_file)
        assert len(store.videos) == 3
        assert store.backup_path.exists()

    def test_missing_keys_normalized_to_empty(self, data_file):
        data_file.write_text("{}", encoding="utf-8")
        store = VideoStore.open(data_file)
        assert store.videos == []
        assert store.creators == []

    def test_null_keys_normalized_to_empty(self, data_file):
        data_file.write_text(json.dumps({"videos": None, "creators": None}), encoding="utf-8")
        store = VideoStore.open(data_file)
        assert store.videos == []
        assert store.creators == []

    def test_custom_seed_factory(self, data_file):
        store = VideoStore.open(data_file, seed_factory=StoreState)
        assert store.videos == []


class TestSave:
    """Saving rewrites the whole document"""

    def test_round_trip(self, store, data_file):
        assert store.save() is True
        reloaded = VideoStore.open(data_file)
        assert reloaded.state == store.state

        reloaded.save()
        assert VideoStore.open(data_file).state == store.state

    def test_document_layout(self, store, data_file):
        store.save()
        document = json.loads(data_file.read_text(encoding="utf-8"))
        assert set(document) == {"videos", "creators"}
        assert document["videos"][0]["id"] == "vid1"
        assert document["creators"][0]["avatar"] == "👨‍🏫"

    def test_unknown_keys_preserved(self, data_file):
        original = {
            "videos": [{"id": "v1", "title": "T", "legacy_field": 7}],
            "creators": [],
            "courses": [{"id": "course1", "videos": ["v1"]}],
        }
        data_file.write_text(json.dumps(original), encoding="utf-8")

        store = VideoStore.open(data_file)
        store.save()
        document = json.loads(data_file.read_text(encoding="utf-8"))

        assert document["courses"] == original["courses"]
        assert document["videos"][0]["legacy_field"] == 7

    def test_creates_parent_directories(self, tmp_path):
        store = VideoStore.open(tmp_path / "nested" / "dir" / "data.json")
        assert store.save() is True
        assert (tmp_path / "nested" / "dir" / "data.json").exists()

    def test_write_failure_logged_not_raised(self, store, caplog):
        with patch("pathlib.Path.write_text", side_effect=OSError("disk full")):
            assert store.save() is False
        assert "Error saving data file" in caplog.text


class TestMutation:
    """Mutations flush on success and skip the flush on error"""

    def test_mutation_flushes(self, store, data_file):
        with store.mutation() as state:
            state.videos.insert(0, Video(id="new", title="New"))

        document = json.loads(data_file.read_text(encoding="utf-8"))
        assert document["videos"][0]["id"] == "new"

    def test_failed_mutation_not_flushed(self, store, data_file):
        with pytest.raises(RuntimeError):
            with store.mutation():
                raise RuntimeError("boom")
        assert not data_file.exists()

    def test_write_failure_keeps_memory_state(self, store):
        with patch("pathlib.Path.write_text", side_effect=OSError("read-only")):
            with store.mutation() as state:
                state.videos[0].likes += 1
        assert store.find_video("vid1").likes == 46

    def test_lookups(self, store):
        assert store.find_video("vid2").title == "Python List Comprehension"
        assert store.find_video("missing") is None
        assert store.find_creator("user1").username == "educator1"
        assert store.find_creator("missing") is None
