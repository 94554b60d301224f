"""Formatting utilities for report output."""


def format_change(change: float) -> str:
    """Format a percent change with an explicit sign (e.g. '+4.2%')."""
    return f"{change:+.1f}%"


def format_metric_name(metric: str) -> str:
    """Turn a metric key like 'pass_accuracy' into 'Pass Accuracy'."""
    return metric.replace("_", " ").title()
