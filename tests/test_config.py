"""
Tests for configuration loading, overrides and validation.
"""

import io

import pytest
import yaml
from rich.console import Console

from sumdetector.config import (
    ConfigManager,
    DetectorConfig,
    create_default_config_file,
    get_config,
)
from sumdetector.engine.errors import ConfigurationError


def quiet_console():
    return Console(file=io.StringIO(), width=120)


class TestDetectorConfig:
    """Test the configuration dataclass."""

    def test_defaults(self):
        config = DetectorConfig()
        assert config.default_algorithm == "time-efficient"
        assert config.memory_probe == "psutil"
        assert config.max_input_size is None
        assert config.normalize_input is False
        assert config.output_format == "text"
        assert config.log_level == "WARNING"
        assert config.benchmark_sizes == [10, 20, 40, 80]
        assert config.benchmark_seed == 42
        assert config.validate() == []

    def test_from_dict(self):
        config = DetectorConfig.from_dict({"default_algorithm": "memory-efficient", "max_input_size": 50})
        assert config.default_algorithm == "memory-efficient"
        assert config.max_input_size == 50

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigurationError, match="Unknown configuration keys: colour"):
            DetectorConfig.from_dict({"colour": "red"})

    def test_to_dict_round_trip(self):
        config = DetectorConfig(memory_probe="none", benchmark_sizes=[5])
        assert DetectorConfig.from_dict(config.to_dict()) == config

    def test_validate_reports_each_problem(self):
        config = DetectorConfig(
            default_algorithm="quantum",
            memory_probe="heap",
            max_input_size=0,
            output_format="xml",
            log_level="LOUD",
            benchmark_sizes=[],
            benchmark_value_range=-1,
        )
        problems = config.validate()
        assert len(problems) == 7
        assert any("default_algorithm" in p and "quantum" in p for p in problems)
        assert any("memory_probe" in p for p in problems)
        assert any("max_input_size" in p for p in problems)

    def test_log_level_is_case_insensitive(self):
        assert DetectorConfig(log_level="debug").validate() == []

    @pytest.mark.parametrize("data,field_name", [
        ({"max_input_size": "abc"}, "max_input_size"),
        ({"log_level": 10}, "log_level"),
        ({"benchmark_sizes": "10,20"}, "benchmark_sizes"),
        ({"benchmark_sizes": [10, "x"]}, "benchmark_sizes"),
        ({"normalize_input": "maybe"}, "normalize_input"),
        ({"benchmark_seed": 1.5}, "benchmark_seed"),
        ({"memory_probe": None}, "memory_probe"),
        ({"log_file": 3}, "log_file"),
    ])
    def test_wrong_types_are_reported(self, data, field_name):
        problems = DetectorConfig.from_dict(data).validate()
        assert len(problems) == 1
        assert problems[0].startswith(field_name)


class TestConfigManager:
    """Test loading and saving through the manager."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = ConfigManager(tmp_path / "absent.yml").load()
        assert config == DetectorConfig()

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("default_algorithm: memory-efficient\nbenchmark_sizes: [3, 6]\n")
        config = ConfigManager(path).load()
        assert config.default_algorithm == "memory-efficient"
        assert config.benchmark_sizes == [3, 6]

    def test_default_file_in_working_directory(self, tmp_path):
        (tmp_path / ".sumdetector.yml").write_text("output_format: json\n")
        assert get_config().output_format == "json"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert ConfigManager(path).load() == DetectorConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("default_algorithm: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(path).load()
        assert exc_info.value.source == str(path)

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            ConfigManager(path).load()

    def test_load_is_cached(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.yml")
        assert manager.load() is manager.load()

    def test_reset(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("output_format: json\n")
        manager = ConfigManager(path)
        manager.load()
        assert manager.reset() == DetectorConfig()

    def test_save(self, tmp_path):
        path = tmp_path / "config.yml"
        manager = ConfigManager(path, console=quiet_console())
        assert manager.save(DetectorConfig(max_input_size=10))
        data = yaml.safe_load(path.read_text())
        assert data["max_input_size"] == 10
        assert data["default_algorithm"] == "time-efficient"

    def test_save_failure(self, tmp_path):
        manager = ConfigManager(tmp_path / "missing" / "config.yml", console=quiet_console())
        assert manager.save(DetectorConfig()) is False

    def test_create_default_config_file(self, tmp_path):
        path = tmp_path / "config.yml"
        assert create_default_config_file(path)
        assert ConfigManager(path).load() == DetectorConfig()

    def test_display(self, tmp_path):
        console = quiet_console()
        ConfigManager(tmp_path / "config.yml").display(DetectorConfig(), console=console)
        output = console.file.getvalue()
        assert "Sum Detector Configuration" in output
        assert "default_algorithm" in output


class TestEnvironmentOverrides:
    """Test SUMDETECTOR_* variables."""

    def test_string_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SUMDETECTOR_ALGORITHM", "memory-efficient")
        monkeypatch.setenv("SUMDETECTOR_OUTPUT_FORMAT", "json")
        monkeypatch.setenv("SUMDETECTOR_MEMORY_PROBE", "none")
        monkeypatch.setenv("SUMDETECTOR_LOG_LEVEL", "DEBUG")
        config = ConfigManager(tmp_path / "config.yml").load()
        assert config.default_algorithm == "memory-efficient"
        assert config.output_format == "json"
        assert config.memory_probe == "none"
        assert config.log_level == "DEBUG"

    def test_override_beats_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yml"
        path.write_text("default_algorithm: memory-efficient\n")
        monkeypatch.setenv("SUMDETECTOR_ALGORITHM", "time-efficient")
        assert ConfigManager(path).load().default_algorithm == "time-efficient"

    @pytest.mark.parametrize("raw,expected", [("25", 25), ("none", None), ("", None)])
    def test_max_input_size(self, raw, expected, tmp_path, monkeypatch):
        monkeypatch.setenv("SUMDETECTOR_MAX_INPUT_SIZE", raw)
        assert ConfigManager(tmp_path / "config.yml").load().max_input_size == expected

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("no", False)])
    def test_normalize_input(self, raw, expected, tmp_path, monkeypatch):
        monkeypatch.setenv("SUMDETECTOR_NORMALIZE_INPUT", raw)
        assert ConfigManager(tmp_path / "config.yml").load().normalize_input is expected

    def test_log_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SUMDETECTOR_LOG_FILE", "logs/run.jsonl")
        assert ConfigManager(tmp_path / "config.yml").load().log_file == "logs/run.jsonl"

    def test_invalid_value(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SUMDETECTOR_MAX_INPUT_SIZE", "lots")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(tmp_path / "config.yml").load()
        assert exc_info.value.source == "SUMDETECTOR_MAX_INPUT_SIZE"
