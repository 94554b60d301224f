"""Chart rendering for trend and forecast reports."""

from pathlib import Path

import matplotlib.pyplot as plt

from team_insights.models.analytics import Forecast, TrendSeries
from team_insights.utils.formatting import format_metric_name

HISTORY_COLOR = "#2D7A3E"
FORECAST_COLOR = "#ef4444"


def plot_trend_forecast(series: TrendSeries, forecast: Forecast, output_dir: Path) -> Path:
    """
    Save a line chart of a metric's history followed by its forecast.

    Args:
        series: Historical trend series
        forecast: Forecast projected from the series
        output_dir: Directory to write the PNG into (created if missing)

    Returns:
        Path of the saved chart
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    history_labels = [p.period for p in series.points]
    history_values = [p.value for p in series.points]
    forecast_labels = [p.period for p in forecast.points]
    n = len(history_labels)
    forecast_x = list(range(n - 1, n + len(forecast_labels)))

    fig, ax = plt.subplots(figsize=(12, 5))
    ax.plot(range(n), history_values, color=HISTORY_COLOR, linewidth=3, marker="o", label="Historical")
    # Forecast line starts from the last historical value
    ax.plot(
        forecast_x,
        [history_values[-1]] + [p.predicted for p in forecast.points],
        color=FORECAST_COLOR,
        linewidth=3,
        linestyle="--",
        marker="o",
        label="Forecast",
    )
    ax.fill_between(
        forecast_x[1:],
        [p.range_min for p in forecast.points],
        [p.range_max for p in forecast.points],
        color=FORECAST_COLOR,
        alpha=0.15,
    )

    title = format_metric_name(series.metric)
    ax.set_xticks(range(n + len(forecast_labels)))
    ax.set_xticklabels(history_labels + forecast_labels)
    ax.set_title(
        f"{title} - {series.trend}, {forecast.reliability} reliability",
        fontsize=14,
        fontweight="bold",
    )
    ax.set_ylabel(title, fontsize=12, fontweight="bold")
    ax.grid(True, alpha=0.3)
    ax.legend()

    plt.tight_layout()
    filename = output_dir / f"trend_{series.metric}.png"
    plt.savefig(filename, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return filename
