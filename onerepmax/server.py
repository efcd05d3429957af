from __future__ import annotations

import plotly.graph_objects as go
from pydantic import ValidationError
from shiny import Inputs, Outputs, Session, reactive, render, ui
from shinywidgets import render_plotly

from .formulas import FORMULA_NAMES
from .logger import logger
from .models import OneRepMaxRequest
from .tables import comparison_frame, formula_curves, rep_range_frame

_COLORS = {
    "epley": "#0d6efd",
    "brzycki": "#dc3545",
    "lombardi": "#198754",
    "mayhew": "#fd7e14",
    "oconner": "#6f42c1",
    "wathan": "#20c997",
    "landers": "#6c757d",
}


def _normalize_decimal(value) -> float | None:
    """Convert numeric input to float, accepting both comma and period as decimal separator."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).replace(',', '.'))
    except (ValueError, AttributeError):
        return None


def _validation_message(err: ValidationError) -> str:
    first = err.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "input"
    return f"{field}: {first.get('msg', 'invalid value')}"


def _empty_figure(message: str = "No data available"):
    """Create empty Plotly figure with message"""
    fig = go.Figure()
    fig.update_layout(
        template='plotly_white',
        autosize=True,
        margin=dict(l=50, r=50, t=50, b=50),
        annotations=[dict(
            text=message,
            showarrow=False,
            x=0.5, y=0.5,
            xref="paper", yref="paper",
            font=dict(color="#6c757d", size=16)
        )]
    )
    return fig


def server(input: Inputs, output: Outputs, session: Session):

    @reactive.calc
    def parsed():
        """Return (request, error message); exactly one of them is None."""
        try:
            req = OneRepMaxRequest(
                weight=_normalize_decimal(input.weight()),
                reps=_normalize_decimal(input.reps()),
                decimals=input.decimals(),
                formula=input.formula(),
            )
        except ValidationError as e:
            msg = _validation_message(e)
            logger.info(f"Rejected calculator input: {msg}")
            return None, msg
        return req, None

    @reactive.effect
    def _notify_invalid():
        _, msg = parsed()
        if msg:
            ui.notification_show(f"Invalid input - {msg}", type="warning")

    @output
    @render.ui
    def stat_estimate():
        req, msg = parsed()
        if req is None:
            return ui.span("-", style="font-size: 2rem;")
        label = req.formula or "average"
        return ui.div(
            ui.span(f"{req.estimate():.{req.decimals}f}", style="font-size: 2rem;"),
            ui.div(label, class_="text-muted small"),
        )

    @output
    @render.ui
    def stat_spread():
        req, _ = parsed()
        if req is None:
            return ui.span("-", style="font-size: 2rem;")
        values = req.compare().values()
        low, high = min(values), max(values)
        return ui.span(f"{low:.{req.decimals}f} to {high:.{req.decimals}f}", style="font-size: 2rem;")

    @output
    @render.data_frame
    def comparison_table():
        req, _ = parsed()
        if req is None:
            return None
        return render.DataGrid(comparison_frame(req.weight, req.reps, req.decimals))

    @output
    @render.data_frame
    def rep_range_table():
        req, _ = parsed()
        if req is None:
            return None
        df = rep_range_frame(req.weight, range(1, input.max_reps() + 1), req.decimals)
        return render.DataGrid(df.reset_index())

    @output
    @render_plotly
    def plot_curves():
        req, msg = parsed()
        if req is None:
            return _empty_figure(msg or "Enter a weight and reps")

        curves = formula_curves(req.weight, input.max_reps())
        fig = go.Figure()
        for name in FORMULA_NAMES:
            fig.add_trace(go.Scatter(
                x=curves['reps'],
                y=curves[name],
                mode='lines',
                name=name,
                line=dict(color=_COLORS.get(name, '#6c757d'), width=3),
                hovertemplate='<b>%{fullData.name}</b><br>Reps: %{x:.1f}<br>1RM: %{y:.1f}<extra></extra>'
            ))
        fig.add_vline(x=req.reps, line_dash="dash", line_color="#adb5bd")

        fig.update_layout(
            title=dict(text=f"Estimated 1RM for {req.weight:g} across reps", font=dict(size=16, weight='bold')),
            xaxis_title="Reps",
            yaxis_title="Estimated 1RM",
            hovermode='x unified',
            template='plotly_white',
            autosize=True,
            margin=dict(l=50, r=50, t=50, b=50),
            legend=dict(title=dict(text="Formula"), orientation='v', yanchor='top', y=1, xanchor='left', x=1.02)
        )
        return fig
