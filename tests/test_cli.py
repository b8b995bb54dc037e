"""Tests for the command-line entry point and settings."""

import json

import pytest

from ept_productivity import cli
from ept_productivity.config import Settings
from ept_productivity.export.csv_export import CSV_HEADERS


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EPT_CSV_FILENAME", raising=False)
        settings = Settings(_env_file=None)
        assert settings.csv_filename == "productivity_analysis.csv"
        assert settings.strict_ept is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("EPT_STRICT_EPT", "false")
        monkeypatch.setenv("EPT_REPORT_TITLE", "Latency Audit")
        settings = Settings(_env_file=None)
        assert settings.strict_ept is False
        assert settings.report_title == "Latency Audit"


class TestCalculateCommand:
    def test_default_report(self, capsys):
        assert cli.main(["calculate"]) == 0
        out = capsys.readouterr().out
        assert "Productivity Calculation 1: Service Agent" in out
        assert "True Labor Cost: -$26,156.25" in out

    def test_csv_to_stdout(self, capsys):
        assert cli.main(["calculate", "--format", "csv"]) == 0
        lines = capsys.readouterr().out.strip().split("\n")
        assert lines[0] == ",".join(CSV_HEADERS)
        assert len(lines) == 2

    def test_csv_to_file(self, tmp_path, capsys):
        target = tmp_path / "out.csv"
        code = cli.main(["calculate", "--format", "csv", "--output", str(target)])
        assert code == 0
        assert target.read_text(encoding="utf-8").startswith("Role,")
        assert capsys.readouterr().out == ""

    def test_role_defaults_applied(self, capsys):
        code = cli.main(["calculate", "--role", "Account Executive", "--format", "csv"])
        assert code == 0
        row = capsys.readouterr().out.strip().split("\n")[1]
        # 1484 clicks/day / 200 clicks per task = 7 of 22 tasks
        assert row.startswith("Account Executive,45000,1000,22,7,31.82,")

    def test_zero_quota_exits_2(self, capsys):
        assert cli.main(["calculate", "--tasks", "0"]) == 2
        assert "expected_tasks_per_day" in capsys.readouterr().err

    def test_blank_clicks_exits_2(self, capsys):
        assert cli.main(["calculate", "--clicks", ""]) == 2
        assert "clicks_per_task" in capsys.readouterr().err

    def test_off_grid_ept_rejected(self, monkeypatch, capsys):
        monkeypatch.delenv("EPT_STRICT_EPT", raising=False)
        assert cli.main(["calculate", "--ept", "9.9"]) == 2
        assert "Invalid form values" in capsys.readouterr().err

    def test_off_grid_ept_allowed_when_not_strict(self, monkeypatch, capsys):
        monkeypatch.setenv("EPT_STRICT_EPT", "false")
        assert cli.main(["calculate", "--ept", "9.9"]) == 0


class TestChoicesCommand:
    def test_lists_reference_tables(self, capsys):
        assert cli.main(["choices"]) == 0
        out = capsys.readouterr().out
        assert "Account Executive: 22, 200" in out
        assert "Expert: 0.25" in out
        assert "0.3, 0.4" in out
        assert out.rstrip().endswith("4.0")


class TestOutputOption:
    def test_output_implies_csv(self, tmp_path, capsys):
        target = tmp_path / "report.csv"
        assert cli.main(["calculate", "--output", str(target)]) == 0
        lines = target.read_text(encoding="utf-8").split("\n")
        assert lines[0] == ",".join(CSV_HEADERS)
        assert len(lines) == 2
        assert capsys.readouterr().out == ""

    def test_output_without_path_uses_configured_name(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("EPT_CSV_FILENAME", "latency.csv")
        assert cli.main(["calculate", "--output"]) == 0
        assert (tmp_path / "latency.csv").read_text(encoding="utf-8").startswith("Role,")


class TestFormsFile:
    def _write(self, tmp_path, forms):
        path = tmp_path / "forms.json"
        path.write_text(json.dumps(forms), encoding="utf-8")
        return str(path)

    def test_one_row_per_form_in_order(self, tmp_path, capsys):
        forms = self._write(tmp_path, [
            {"role": "Service Agent"},
            {"role": "Account Executive", "experience_level": "Expert"},
            {"role": "Sales Development Rep", "cost_per_employee": "52000", "ept": 1.2},
        ])
        assert cli.main(["calculate", "--forms", forms, "--format", "csv"]) == 0
        lines = capsys.readouterr().out.strip().split("\n")
        assert len(lines) == 4
        assert [line.split(",")[0] for line in lines[1:]] == [
            "Service Agent",
            "Account Executive",
            "Sales Development Rep",
        ]
        # role defaults: 1484 clicks / 23 per task = 64 of 90 tasks
        assert lines[1].startswith("Service Agent,45000,1000,90,64,71.11,")
        assert lines[3].startswith("Sales Development Rep,52000,1000,120,")

    def test_report_numbers_each_form(self, tmp_path, capsys):
        forms = self._write(tmp_path, [{"role": "Service Agent"}, {"role": "Account Executive"}])
        assert cli.main(["calculate", "--forms", forms]) == 0
        out = capsys.readouterr().out
        assert "Productivity Calculation 1: Service Agent" in out
        assert "Productivity Calculation 2: Account Executive" in out

    def test_invalid_form_names_its_position(self, tmp_path, capsys):
        forms = self._write(tmp_path, [{}, {"clicks_per_task": "0"}])
        assert cli.main(["calculate", "--forms", forms]) == 2
        assert "form 2: clicks_per_task" in capsys.readouterr().err

    def test_combined_with_field_options_rejected(self, tmp_path, capsys):
        forms = self._write(tmp_path, [{}])
        assert cli.main(["calculate", "--forms", forms, "--cost", "1"]) == 2
        assert "cannot be combined" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert cli.main(["calculate", "--forms", str(tmp_path / "nope.json")]) == 2
        assert "Cannot read forms" in capsys.readouterr().err

    @pytest.mark.parametrize("content", ["[]", '{"role": "Service Agent"}', "[1, 2]", "not json"])
    def test_malformed_file(self, tmp_path, capsys, content):
        path = tmp_path / "forms.json"
        path.write_text(content, encoding="utf-8")
        assert cli.main(["calculate", "--forms", str(path)]) == 2
        assert "Cannot read forms" in capsys.readouterr().err
