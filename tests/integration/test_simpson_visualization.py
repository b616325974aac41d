"""Visual checks of Simpson's rule on the calculator's example functions.

Each case saves a PNG chart, the step trace as CSV and the text report
under test_output/ for manual inspection.
"""

from pathlib import Path

import pytest

from simpsonrule import SimpsonCalculator
from simpsonrule.analysis import format_report


@pytest.mark.parametrize(
    ("expression", "a", "b", "n", "expected"),
    [
        ("x^2", 0.0, 1.0, 4, 1 / 3),
        ("sin(x)", 0.0, 3.141592653589793, 10, 2.0),
        ("exp(-x^2)", -2.0, 2.0, 20, 1.764162781524843),
        ("ln(x)", 1.0, 3.0, 8, 3 * 1.0986122886681098 - 2),
        ("50", 0.0, 2.0, 2, 100.0),
    ],
)
def test_example_function_chart(expression, a, b, n, expected, test_output_dir: Path):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from simpsonrule.analysis import plot_calculation

    outcome = SimpsonCalculator().calculate(a, b, n, expression)
    assert outcome.succeeded, outcome.error
    result = outcome.result
    assert result.value == pytest.approx(expected, abs=1e-3)

    chart = test_output_dir / "simpson.png"
    fig = plot_calculation(result, path=chart)
    plt.close(fig)
    assert chart.exists()
    assert chart.stat().st_size > 0

    result.to_dataframe().to_csv(test_output_dir / "steps.csv", index=False)
    (test_output_dir / "report.txt").write_text(format_report(result), encoding="utf-8")

    assert (test_output_dir / "steps.csv").read_text().startswith("i,x,fx,coefficient,term")


def test_chart_survives_pole_between_nodes(test_output_dir: Path):
    """1/x over [-1, 2] with n=2 never samples x=0, but the dense curve does."""
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from simpsonrule.analysis import plot_calculation

    outcome = SimpsonCalculator().calculate(-1.0, 2.0, 2, "1/x")
    assert outcome.succeeded

    fig = plot_calculation(outcome.result, path=test_output_dir / "pole.png", samples=301)
    plt.close(fig)
    assert (test_output_dir / "pole.png").exists()


def test_chart_leaves_backend_untouched(monkeypatch):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from simpsonrule.analysis import plot_calculation

    selected = []
    monkeypatch.setattr(matplotlib, "use", lambda *args, **kwargs: selected.append(args))

    outcome = SimpsonCalculator().calculate(0.0, 1.0, 4, "x^2")
    fig = plot_calculation(outcome.result)
    plt.close(fig)

    assert selected == []
    assert matplotlib.get_backend().lower() == "agg"
