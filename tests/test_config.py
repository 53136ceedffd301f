"""Unit tests for environment configuration."""

from datetime import date

from weighting.config import WeightingConfig


class TestWeightingConfig:
    def test_defaults(self, monkeypatch):
        for name in ["WEIGHTING_CSV_PATH", "WEIGHTING_OUTPUT_DIR", "LOG_LEVEL", "WEIGHTING_REFERENCE_DATE"]:
            monkeypatch.delenv(name, raising=False)

        config = WeightingConfig.from_env()
        assert config.csv_path == "data/goodreads_library_export.csv"
        assert config.output_dir == "weighting_data"
        assert config.log_level == "INFO"
        assert config.reference_date is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WEIGHTING_CSV_PATH", "/tmp/export.csv")
        monkeypatch.setenv("WEIGHTING_OUTPUT_DIR", "/tmp/out")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("WEIGHTING_REFERENCE_DATE", "2025-10-01")

        config = WeightingConfig.from_env()
        assert config.csv_path == "/tmp/export.csv"
        assert config.output_dir == "/tmp/out"
        assert config.log_level == "DEBUG"
        assert config.reference_date == date(2025, 10, 1)
