"""
Tests for the shared configuration, logging and math helpers
"""

import json
import math

import pytest

from shared.config import Config, RedrumConfig
from shared.logger import RedrumLogger
from shared.math_utils import chi_squared_test, shannon_entropy
from shared.models import Finding, ScanResult, Severity


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.redrum.default_word == "REDRUM"
        assert config.redrum.normalize_case is True
        assert config.redrum.strict_alphabet is False
        assert config.global_settings.log_level == "INFO"

    def test_load_toml_ignores_unknown_keys(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[global]\nlog_level = "DEBUG"\n\n'
            '[redrum]\ndefault_word = "SHINING"\nstrict_alphabet = true\nunknown = 1\n',
            encoding="utf-8",
        )
        config = Config.load(path)
        assert config.global_settings.log_level == "DEBUG"
        assert config.redrum.default_word == "SHINING"
        assert config.redrum.strict_alphabet is True
        assert config.redrum.top_frequencies == 5

    def test_missing_explicit_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.load(tmp_path / "absent.toml")

    def test_custom_placeholder(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[redrum]\nplaceholder = "*"\n', encoding="utf-8")
        assert Config.load(path).redrum.placeholder == "*"

    @pytest.mark.parametrize("placeholder", ["", "??"])
    def test_placeholder_must_be_one_character(self, tmp_path, placeholder):
        path = tmp_path / "config.toml"
        path.write_text(f'[redrum]\nplaceholder = "{placeholder}"\n', encoding="utf-8")
        with pytest.raises(ValueError, match="single character"):
            Config.load(path)
        with pytest.raises(ValueError):
            RedrumConfig(placeholder=placeholder)


class TestLogger:
    def test_json_file_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "redrum.log"
        log = RedrumLogger("unit", log_file=log_file, json_logs=True, console_output=False)
        with log.operation("frequency"):
            log.info("counted %d characters", 64)
        for handler in log.underlying.handlers:
            handler.close()

        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert entry["message"] == "counted 64 characters"
        assert entry["logger"] == "redrum.unit"
        assert entry["tool_name"] == "unit"
        assert entry["operation"] == "frequency"

    def test_operation_context_restores(self):
        log = RedrumLogger("ctx", console_output=False)
        with log.operation("outer"):
            with log.operation("inner"):
                assert log._operation == "inner"
            assert log._operation == "outer"
        assert log._operation is None

    def test_timed_reports_elapsed(self):
        log = RedrumLogger("timer", console_output=False)
        with log.timed("noop") as timer:
            pass
        assert timer.elapsed >= 0.0


class TestMathUtils:
    def test_shannon_entropy(self):
        assert shannon_entropy("") == 0.0
        assert shannon_entropy("aaaa") == 0.0
        assert shannon_entropy("ab") == pytest.approx(1.0)
        assert shannon_entropy(b"\x00\x01\x02\x03") == pytest.approx(2.0)

    def test_chi_squared_uniform(self):
        chi2, p = chi_squared_test([4, 4, 4, 4], [4, 4, 4, 4])
        assert chi2 == 0.0
        assert p == 1.0

    def test_chi_squared_p_value_matches_closed_form(self):
        # For 2 degrees of freedom the survival function is exp(-x/2).
        chi2, p = chi_squared_test([10, 5, 15], [10, 10, 10])
        assert chi2 == pytest.approx(5.0)
        assert p == pytest.approx(math.exp(-2.5), rel=1e-9)

    def test_chi_squared_rejects_bad_input(self):
        with pytest.raises(ValueError):
            chi_squared_test([1, 2], [1, 2, 3])
        with pytest.raises(ValueError):
            chi_squared_test([1, 2], [0, 3])


class TestScanResult:
    def test_finalize_default_summary(self):
        result = ScanResult(tool_name="redrum", target="")
        result.add_finding(Finding(severity=Severity.LOW, title="t", description="d"))
        result.finalize()
        assert result.summary == "Analysis complete. Findings: 1 (LOW: 1)"
        assert result.duration_seconds is not None

    def test_evidence_is_coerced_to_json(self):
        finding = Finding(severity=Severity.INFO, title="t", description="d", evidence={"a": 1})
        assert finding.evidence == '{"a": 1}'
