"""Tests for manifest loading and random crate generation."""

import json

import pytest

from truckload.core.models import Crate, Truck
from truckload.runner.dataset import generate_crates
from truckload.runner.manifest import (
    ManifestError,
    load_manifest,
    parse_manifest,
    save_manifest,
)

MANIFEST_YAML = """\
truck: {width: 4, height: 4, length: 4}
crates:
  - {id: 1, width: 4, height: 4, length: 2}
  - {id: 2, width: 2, height: 2, length: 2}
planner:
  support_ratio: 0.8
"""


@pytest.fixture
def manifest_data():
    return {
        "truck": {"width": 4, "height": 4, "length": 4},
        "crates": [
            {"id": 1, "width": 4, "height": 4, "length": 2},
            {"id": 2, "width": 2, "height": 2, "length": 2},
        ],
    }


class TestManifest:
    def test_load_yaml(self, tmp_path):
        path = tmp_path / "load.yaml"
        path.write_text(MANIFEST_YAML)

        manifest = load_manifest(path)

        assert manifest.truck == Truck(4, 4, 4)
        assert manifest.crates == [Crate(1, 4, 4, 2), Crate(2, 2, 2, 2)]
        assert manifest.config.support_ratio == pytest.approx(0.8)

    def test_load_json(self, tmp_path, manifest_data):
        path = tmp_path / "load.json"
        path.write_text(json.dumps(manifest_data))

        manifest = load_manifest(path)

        assert len(manifest.crates) == 2
        assert manifest.config.support_ratio == pytest.approx(0.75)

    def test_save_and_reload(self, tmp_path, manifest_data):
        manifest = parse_manifest(manifest_data)
        path = tmp_path / "out" / "saved.yaml"
        save_manifest(manifest, path)
        assert load_manifest(path) == manifest

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda d: d["truck"].update(width=0),
            lambda d: d["crates"][0].update(height=-1),
            lambda d: d["crates"][1].update(id=1),
            lambda d: d["crates"][0].update(colour="red"),
            lambda d: d.update(planner={"support_ratio": 1.5}),
            lambda d: d.pop("truck"),
        ],
        ids=["zero-truck", "negative-extent", "duplicate-id", "unknown-key",
             "bad-ratio", "missing-truck"],
    )
    def test_invalid_manifest(self, manifest_data, mutate):
        mutate(manifest_data)
        with pytest.raises(ManifestError):
            parse_manifest(manifest_data)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestError):
            load_manifest(tmp_path / "nope.yaml")

    def test_unparsable_file(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("truck: {width: 4\n")
        with pytest.raises(ManifestError):
            load_manifest(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ManifestError):
            load_manifest(path)


class TestGenerateCrates:
    def test_reproducible_with_seed(self):
        assert generate_crates(10, seed=3) == generate_crates(10, seed=3)

    def test_ids_and_extent_range(self):
        crates = generate_crates(50, min_extent=2, max_extent=5, seed=1)
        assert [c.id for c in crates] == list(range(1, 51))
        for c in crates:
            assert all(2 <= e <= 5 for e in c.extents)

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            generate_crates(5, min_extent=3, max_extent=2)
