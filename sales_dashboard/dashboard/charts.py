"""Price-range bar chart (Altair -> Vega-Lite)."""

from typing import Any, Dict

import altair as alt
import pandas as pd

from sales_dashboard.domain.entities import PriceHistogram

BAR_COLOR = "rgba(75, 192, 192, 0.6)"
SERIES_LABEL = "Number of Items"


def price_range_chart(histogram: PriceHistogram) -> alt.Chart:
    """Bar chart of item counts per price range, in bucket order."""
    data = pd.DataFrame({"price_range": histogram.labels, "items": histogram.values})

    return (
        alt.Chart(data)
        .mark_bar(color=BAR_COLOR)
        .encode(
            x=alt.X("price_range:N", title="Price Range", sort=histogram.labels),
            y=alt.Y("items:Q", title=SERIES_LABEL, axis=alt.Axis(tickMinStep=1)),
            tooltip=[
                alt.Tooltip("price_range:N", title="Price Range"),
                alt.Tooltip("items:Q", title=SERIES_LABEL),
            ],
        )
        .properties(title="Price Range Bar Chart")
    )


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()
