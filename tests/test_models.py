"""Tests for flavor_switcher.models module."""

from dataclasses import FrozenInstanceError

import pytest

from flavor_switcher.models import (
    Configuration,
    FileRecord,
    FlavorDefinition,
    Mapping,
    MappingKind,
    StateLedger,
    TargetStatus,
    ValidationReport,
)


class TestMappingKind:
    """Tests for MappingKind enum."""

    def test_file_value(self):
        assert MappingKind.FILE.value == "file"

    def test_directory_value(self):
        assert MappingKind.DIRECTORY.value == "directory"


class TestMapping:
    """Tests for Mapping dataclass."""

    def test_defaults(self):
        mapping = Mapping.from_dict({"source": "a.png", "target": "src/a.png"})
        assert mapping.kind == MappingKind.FILE
        assert mapping.required is True
        assert mapping.description is None

    def test_to_dict_uses_file_keys(self):
        mapping = Mapping("styles/", "src/styles/", MappingKind.DIRECTORY, False, "Styles")
        result = mapping.to_dict()
        assert result == {
            "source": "styles/",
            "target": "src/styles/",
            "type": "directory",
            "required": False,
            "description": "Styles",
        }


class TestFlavorDefinition:
    """Tests for FlavorDefinition dataclass."""

    def test_from_dict_defaults_active(self):
        flavor = FlavorDefinition.from_dict("brand-a", {"displayName": "Brand A"})
        assert flavor.id == "brand-a"
        assert flavor.display_name == "Brand A"
        assert flavor.active is True
        assert flavor.description is None

    def test_is_immutable(self):
        flavor = FlavorDefinition("brand-a", "Brand A")
        with pytest.raises(FrozenInstanceError):
            flavor.active = False


class TestConfiguration:
    """Tests for Configuration dataclass."""

    def test_from_dict_applies_defaults(self):
        config = Configuration.from_dict({
            "version": "1.0.0",
            "flavors": {"a": {"displayName": "A"}},
            "mappings": [],
        })
        assert config.project_root == "./"
        assert config.required_structure.files == ()
        assert config.required_structure.directories == ()

    def test_active_flavors(self, sample_config):
        ids = [flavor.id for flavor in sample_config.active_flavors()]
        assert ids == ["brand-a", "brand-b"]

    def test_get_flavor_missing(self, sample_config):
        assert sample_config.get_flavor("nope") is None

    def test_targets_are_distinct_and_ordered(self):
        config = Configuration.from_dict({
            "version": "1.0.0",
            "flavors": {},
            "mappings": [
                {"source": "x", "target": "b"},
                {"source": "y", "target": "a"},
                {"source": "z", "target": "b"},
            ],
        })
        assert config.targets() == ["b", "a"]


class TestFileRecord:
    """Tests for FileRecord dataclass."""

    def test_to_dict_omits_missing_hash(self):
        record = FileRecord(exists=False, kind=MappingKind.DIRECTORY)
        assert record.to_dict() == {"exists": False, "type": "directory"}

    def test_from_dict(self):
        record = FileRecord.from_dict({"hash": "abc", "exists": True, "type": "file"})
        assert record.hash == "abc"
        assert record.exists is True
        assert record.kind == MappingKind.FILE


class TestStateLedger:
    """Tests for StateLedger dataclass."""

    def test_empty_ledger(self):
        ledger = StateLedger()
        assert ledger.current_flavor is None
        assert ledger.original_files == {}
        assert ledger.is_active is False

    def test_to_dict(self, sample_ledger):
        result = sample_ledger.to_dict()
        assert result["currentFlavor"] == "brand-a"
        assert result["originalFiles"]["src/logo.png"] == {
            "exists": True, "type": "file", "hash": "abc123"
        }
        assert result["originalFiles"]["src/styles/flavor/"] == {
            "exists": False, "type": "directory"
        }

    def test_from_dict_null_flavor(self):
        ledger = StateLedger.from_dict({"currentFlavor": None, "originalFiles": {}})
        assert ledger.is_active is False

    def test_clear(self, sample_ledger):
        sample_ledger.clear()
        assert sample_ledger.current_flavor is None
        assert sample_ledger.original_files == {}


class TestTargetStatus:
    """Tests for TargetStatus flags."""

    def test_unchanged(self):
        status = TargetStatus("t", original_hash="a", current_hash="a")
        assert status.modified is False
        assert status.drifted is False

    def test_modified_by_flavor(self):
        status = TargetStatus("t", original_hash="a", current_hash="b", flavor_hash="b")
        assert status.modified is True
        assert status.drifted is False

    def test_drifted_after_edit(self):
        status = TargetStatus("t", original_hash="a", current_hash="c", flavor_hash="b")
        assert status.drifted is True


class TestValidationReport:
    """Tests for ValidationReport."""

    def test_ok_when_clean(self):
        assert ValidationReport(flavors_dir_exists=True).ok is True

    def test_not_ok_without_flavors_dir(self):
        assert ValidationReport(flavors_dir_exists=False).ok is False

    def test_not_ok_with_problems(self):
        report = ValidationReport(flavors_dir_exists=True, problems={"a": ["missing"]})
        assert report.ok is False
