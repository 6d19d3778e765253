"""End-to-end tests for the truckload-plan command."""

import json

import pytest

from truckload.runner.cli import EXIT_BAD_INPUT, EXIT_OK, EXIT_PLAN_FAILED, PlanRunner, main
from truckload.core.models import Crate, Truck


@pytest.fixture
def manifest_path(tmp_path):
    path = tmp_path / "load.yaml"
    path.write_text(
        "truck: {width: 4, height: 4, length: 4}\n"
        "crates:\n"
        "  - {id: 1, width: 4, height: 4, length: 2}\n"
        "  - {id: 2, width: 2, height: 2, length: 2}\n"
    )
    return path


@pytest.fixture(autouse=True)
def no_telegram(monkeypatch):
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    monkeypatch.delenv("TELEGRAM_CHAT_ID", raising=False)


class TestMain:
    def test_plans_manifest(self, manifest_path, tmp_path, capsys):
        out = tmp_path / "results"
        code = main([str(manifest_path), "--out", str(out), "--verify"])

        assert code == EXIT_OK
        stdout = capsys.readouterr().out
        assert "Step 1: Crate 1 at (0, 0, 0)" in stdout
        assert "Step 2: Crate 2 at (0, 0, 2)" in stdout
        assert "Status: complete" in stdout

        data = json.loads((out / "plan.json").read_text())
        assert data["metrics"]["crates_placed"] == 2
        assert (out / "instructions.csv").exists()

    def test_failed_plan_exit_code(self, tmp_path, capsys):
        path = tmp_path / "too_much.yaml"
        path.write_text(
            "truck: {width: 2, height: 2, length: 2}\n"
            "crates:\n"
            "  - {id: 1, width: 2, height: 2, length: 3}\n"
        )
        assert main([str(path)]) == EXIT_PLAN_FAILED
        stdout = capsys.readouterr().out
        assert "Status: capacity_exceeded" in stdout
        assert "Step 1" not in stdout

    def test_random_crates(self, capsys):
        code = main(["--random", "8", "--seed", "4", "--truck", "8", "8", "8",
                     "--max-extent", "2", "--verify", "--notify"])
        assert code == EXIT_OK
        assert "Crates Placed: 8/8" in capsys.readouterr().out

    def test_support_ratio_override(self, tmp_path):
        path = tmp_path / "overhang.yaml"
        path.write_text(
            "truck: {width: 4, height: 2, length: 2}\n"
            "crates:\n"
            "  - {id: 1, width: 2, height: 1, length: 2}\n"
            "  - {id: 2, width: 4, height: 1, length: 1}\n"
        )
        assert main([str(path)]) == EXIT_PLAN_FAILED
        assert main([str(path), "--support-ratio", "0.5", "--verify"]) == EXIT_OK

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["does-not-exist.yaml"],
            ["--random", "3", "--truck", "0", "2", "2"],
            ["--random", "3", "--support-ratio", "2.0"],
            ["--random", "3", "--max-extent", "0"],
            ["--random", "-1"],
        ],
    )
    def test_bad_input(self, argv):
        assert main(argv) == EXIT_BAD_INPUT


class TestPlanRunner:
    def test_run_without_output_dir(self, tmp_path):
        runner = PlanRunner(Truck(4, 4, 4), [Crate(1, 4, 4, 2), Crate(2, 2, 2, 2)])
        result, metrics = runner.run(verify=True)
        assert result.ok
        assert metrics.crates_placed == 2
        assert list(tmp_path.iterdir()) == []
