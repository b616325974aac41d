"""Tests for result serialization and the analysis helpers."""

import pandas as pd

from simpsonrule import integrate
from simpsonrule.analysis import format_report, steps_to_dataframe


class TestResultSerialization:
    def test_to_dict(self):
        data = integrate(0, 1, 4, "x^2").to_dict()

        assert data["value"] == 0.333333
        assert data["step_size"] == 0.25
        assert data["parameters"] == {"a": 0, "b": 1, "n": 4, "expression": "x^2"}
        assert len(data["steps"]) == 5

    def test_prompt_context(self):
        text = integrate(0, 1, 4, "x^2").to_prompt_context()

        assert "f(x) = x^2" in text
        assert "Result: 0.333333" in text
        assert "| 2 | 0.5 | 0.25 | 2 | 0.5 |" in text

    def test_prompt_context_truncates_long_traces(self):
        text = integrate(0, 1, 40, "x").to_prompt_context(max_steps=10)

        assert "31 more steps omitted" in text


class TestDataFrame:
    def test_columns_and_rows(self):
        result = integrate(0, 1, 4, "x^2")
        df = steps_to_dataframe(result)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["i", "x", "fx", "coefficient", "term"]
        assert len(df) == 5
        assert df["coefficient"].tolist() == [1, 4, 2, 4, 1]
        assert df["term"].sum() == 4.0

    def test_result_method_matches_helper(self):
        result = integrate(0, 2, 2, "x^3")
        pd.testing.assert_frame_equal(result.to_dataframe(), steps_to_dataframe(result))

    def test_integer_dtypes(self):
        df = integrate(0, 1, 2, "x").to_dataframe()
        assert df["i"].dtype == "int64"
        assert df["coefficient"].dtype == "int64"


class TestFormatReport:
    def test_contains_summary_lines(self):
        report = format_report(integrate(0, 1, 4, "x^2"))

        assert "∫[0, 1] f(x) dx ≈ 0.333333" in report
        assert "f(x) = x^2" in report
        assert "Intervals: 4 | Step: h = 0.2500" in report

    def test_one_row_per_step_with_roles(self):
        report = format_report(integrate(0, 1, 4, "x^2"))
        lines = report.splitlines()
        step_lines = [line for line in lines if line.rstrip().endswith(("endpoint", "even", "odd"))]

        assert len(step_lines) == 5
        assert step_lines[0].rstrip().endswith("endpoint")
        assert step_lines[1].rstrip().endswith("odd")
        assert step_lines[2].rstrip().endswith("even")
