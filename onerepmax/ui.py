from __future__ import annotations

from typing import Any, cast

from shiny import ui
from shinywidgets import output_widget

from .config import calculator_config
from .formulas import FORMULA_NAMES

_CFG = calculator_config()
_FORMULA_CHOICES = {"average": "Average of all formulas"}
_FORMULA_CHOICES.update({name: name.capitalize() for name in FORMULA_NAMES})

app_ui = ui.page_navbar(
    ui.nav_panel(
        "🧮 Calculator",
        ui.tags.style(
            ".vb-center{ text-align:center; }\n"
            ".vb-center .value-box-title, .vb-center .value-box-value{ text-align:center; width:100%; }\n"
        ),
        ui.layout_sidebar(
            ui.sidebar(
                ui.input_numeric("weight", "Weight lifted", value=_CFG.default_weight, min=0, step=2.5),
                ui.input_numeric("reps", "Reps performed", value=_CFG.default_reps, min=1, max=36, step=1),
                ui.input_select("formula", "Formula", _FORMULA_CHOICES, selected="average"),
                ui.input_numeric("decimals", "Decimal places", value=_CFG.decimals, min=0, max=6, step=1),
                width="260px",
                bg="#f8f9fa"
            ),
            ui.layout_columns(
                ui.value_box(
                    "Estimated 1RM",
                    ui.output_ui("stat_estimate"),
                    showcase=ui.span("🏋️", style="font-size: 3rem;"),
                    theme="primary",
                    class_="vb-center"
                ),
                ui.value_box(
                    "Spread across formulas",
                    ui.output_ui("stat_spread"),
                    showcase=ui.span("📏", style="font-size: 3rem;"),
                    theme="info",
                    class_="vb-center"
                ),
                col_widths=cast(Any, {"lg": [6, 6]}),
            ),
            ui.card(
                ui.card_header(
                    ui.h4("📋 Formula Comparison", class_="mb-0"),
                    class_="bg-primary text-white"
                ),
                ui.output_data_frame("comparison_table"),
            ),
        ),
    ),
    ui.nav_panel(
        "📈 Rep Range",
        ui.card(
            ui.card_header(
                ui.h4("📈 Estimates by Reps", class_="mb-0"),
                class_="bg-primary text-white"
            ),
            ui.layout_sidebar(
                ui.sidebar(
                    ui.input_slider("max_reps", "Max reps", min=2, max=36, value=_CFG.max_reps),
                    width="220px",
                    bg="#f8f9fa"
                ),
                output_widget("plot_curves"),
            ),
        ),
        ui.card(
            ui.card_header(
                ui.h4("🔢 Rep Range Table", class_="mb-0"),
                class_="bg-primary text-white"
            ),
            ui.output_data_frame("rep_range_table"),
        ),
    ),
    title="One Rep Max",
)
