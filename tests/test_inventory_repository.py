"""
Unit tests for InventoryRepository.
"""

import pytest

from school_inventory.domain.models import Electronics, Furniture
from school_inventory.repositories.inventory_repository import DETAILS_HEADER, InventoryRepository

SEED_IDS = ["E001", "E002", "E003", "F001", "F002", "F003"]


class TestSeeding:
    """Tests for the sample catalog."""

    def test_seed_size(self, seeded_repo):
        assert len(seeded_repo) == 6

    @pytest.mark.parametrize("index,expected_id", list(enumerate(SEED_IDS)))
    def test_get_returns_seed_in_order(self, seeded_repo, index, expected_id):
        assert seeded_repo.get(index).asset_id == expected_id

    def test_empty_by_default(self):
        assert len(InventoryRepository()) == 0

    def test_load_sample_data_appends_catalog(self, monitor):
        repo = InventoryRepository([monitor])
        repo.load_sample_data()
        assert [a.asset_id for a in repo] == ["E004"] + SEED_IDS

    def test_each_repository_owns_its_records(self):
        a = InventoryRepository.with_sample_data()
        b = InventoryRepository.with_sample_data()
        a.delete(0)
        assert len(b) == 6


class TestMutations:
    """Tests for add, update and delete."""

    def test_add_then_get_last(self, seeded_repo, monitor):
        seeded_repo.add(monitor)
        assert seeded_repo.get(len(seeded_repo) - 1) == monitor

    def test_add_does_not_check_duplicates(self, seeded_repo):
        seeded_repo.add(Electronics("E001", "Clone", "Lab", 1.0))
        assert len(seeded_repo) == 7
        assert [a.asset_id for a in seeded_repo.all()].count("E001") == 2

    def test_update_replaces_in_place(self, seeded_repo, stool):
        seeded_repo.update(2, stool)
        assert seeded_repo.get(2) == stool
        assert len(seeded_repo) == 6
        assert seeded_repo.get(1).asset_id == "E002"
        assert seeded_repo.get(3).asset_id == "F001"

    @pytest.mark.parametrize("index", [-1, 6, 100])
    def test_update_out_of_range_is_noop(self, seeded_repo, stool, index):
        before = seeded_repo.all()
        seeded_repo.update(index, stool)
        assert seeded_repo.all() == before

    @pytest.mark.parametrize("index", [-1, 6, 42])
    def test_delete_out_of_range_is_noop(self, seeded_repo, index):
        before = seeded_repo.all()
        seeded_repo.delete(index)
        assert seeded_repo.all() == before

    def test_delete_removes_one_and_keeps_order(self, seeded_repo):
        seeded_repo.delete(3)
        assert [a.asset_id for a in seeded_repo.all()] == ["E001", "E002", "E003", "F002", "F003"]


class TestQueries:
    """Tests for get, all, search and id lookup."""

    @pytest.mark.parametrize("index", [-1, 6, 99])
    def test_get_out_of_range_returns_none(self, seeded_repo, index):
        assert seeded_repo.get(index) is None

    def test_all_returns_snapshot(self, seeded_repo, monitor):
        snapshot = seeded_repo.all()
        assert isinstance(snapshot, tuple)
        seeded_repo.add(monitor)
        assert len(snapshot) == 6
        assert len(seeded_repo.all()) == 7

    def test_iteration_follows_repository_order(self, seeded_repo):
        assert [a.asset_id for a in seeded_repo] == SEED_IDS

    def test_search_lab_matches_computer_lab_only(self, seeded_repo):
        results = seeded_repo.search("lab")
        assert len(results) == 1
        assert results[0].location == "Computer Lab"

    def test_search_matches_id_name_and_location(self, seeded_repo):
        assert [a.asset_id for a in seeded_repo.search("f00")] == ["F001", "F002", "F003"]
        assert [a.asset_id for a in seeded_repo.search("PROJ")] == ["E002"]
        assert [a.asset_id for a in seeded_repo.search("classroom a")] == ["E002", "F001"]

    def test_search_does_not_look_at_material(self, seeded_repo):
        assert seeded_repo.search("metal") == []

    def test_search_empty_term_matches_everything(self, seeded_repo):
        assert len(seeded_repo.search("")) == 6

    def test_search_indexed_reports_positions(self, seeded_repo):
        assert [i for i, _ in seeded_repo.search_indexed("library")] == [4, 5]

    def test_asset_id_exists(self, seeded_repo):
        assert seeded_repo.asset_id_exists("E001")
        assert not seeded_repo.asset_id_exists("Z999")

    def test_asset_id_exists_is_case_sensitive(self, seeded_repo):
        assert not seeded_repo.asset_id_exists("e001")


class TestRowFeed:
    """Tests for the row feed and details report."""

    def test_rows(self, seeded_repo):
        rows = seeded_repo.rows()
        assert rows[0] == ("E001", "Laptop", "Electronics", "Computer Lab", "65.0W")
        assert rows[3] == ("F001", "Desk", "Furniture", "Classroom A", "Wood")
        assert len(rows) == 6

    def test_details_report(self, seeded_repo):
        lines = seeded_repo.details_report().splitlines()
        assert lines[0] == DETAILS_HEADER
        assert len(lines) == 7
        assert lines[-1] == "Furniture: Bookshelf (ID: F003) - Location: Library, Material: Metal"

    def test_details_report_empty(self):
        assert InventoryRepository().details_report() == DETAILS_HEADER


class TestScenario:
    """End-to-end repository scenario."""

    def test_add_monitor_to_seeded_catalog(self, seeded_repo):
        monitor = Electronics("E004", "Monitor", "Lab", 30.0)
        seeded_repo.add(monitor)

        assert len(seeded_repo) == 7
        assert seeded_repo.asset_id_exists("E004")
        assert seeded_repo.search("monitor") == [monitor]

    def test_replace_with_other_variant(self, seeded_repo):
        seeded_repo.update(0, Furniture("E001", "Laptop Cart", "Computer Lab", "Steel"))
        assert seeded_repo.get(0).type_name() == "Furniture"
