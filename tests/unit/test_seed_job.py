"""Unit tests for the seed data job"""
import json

from jobs.seed_data import main, seed_data_file


class TestSeedDataJob:

    def test_writes_seed_to_missing_file(self, data_file):
        assert seed_data_file(data_file) is True
        document = json.loads(data_file.read_text(encoding="utf-8"))
        assert [v["id"] for v in document["videos"]] == ["vid1", "vid2", "vid3"]
        assert document["creators"][0]["id"] == "user1"

    def test_existing_file_kept_without_force(self, data_file):
        data_file.write_text('{"videos": [], "creators": []}', encoding="utf-8")
        assert seed_data_file(data_file) is False
        assert json.loads(data_file.read_text(encoding="utf-8"))["videos"] == []

    def test_force_overwrites(self, data_file):
        data_file.write_text('{"videos": [], "creators": []}', encoding="utf-8")
        assert seed_data_file(data_file, force=True) is True
        assert len(json.loads(data_file.read_text(encoding="utf-8"))["videos"]) == 3

    def test_dry_run_writes_nothing(self, data_file):
        assert seed_data_file(data_file, dry_run=True) is True
        assert not data_file.exists()

    def test_main_exit_codes(self, data_file):
        assert main(["--data-file", str(data_file)]) == 0
        assert main(["--data-file", str(data_file)]) == 1
        assert main(["--data-file", str(data_file), "--force"]) == 0
