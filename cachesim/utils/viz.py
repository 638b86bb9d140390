import plotly.express as px
import pandas as pd

def export_set_chart(per_set, path: str):
    if not per_set:
        with open(path, "w") as f:
            f.write("<h1>Cache Sets</h1><p>No data to display.</p>")
        return

    df = pd.DataFrame(per_set)
    df = df.melt(id_vars=["set"], value_vars=["hits", "misses", "evictions"],
                 var_name="outcome", value_name="count")

    fig = px.bar(
        df,
        x="set",
        y="count",
        color="outcome",
        barmode="group",
        title="Cache Simulation: Accesses per Set",
        labels={"set": "Set Index", "count": "Accesses", "outcome": "Outcome"}
    )
    fig.update_layout(
        font=dict(family="Courier New, monospace", size=12),
        legend_title="Outcome"
    )

    fig.write_html(path, include_plotlyjs="cdn", full_html=True)

def export_set_ascii(per_set, width: int = 50):
    if not per_set:
        return "No sets to display."

    max_count = max((row['hits'] + row['misses'] for row in per_set), default=0)
    if max_count == 0:
        return "No accesses recorded."

    scale = width / max_count

    chart = "Cache Accesses per Set (h=hit, m=miss)\n"
    chart += ("-" * (width + 40)) + "\n"
    for row in per_set:
        bar = "h" * int(row['hits'] * scale) + "m" * int(row['misses'] * scale)
        chart += f"{row['set']:>6} |{bar:<{width}}| hits:{row['hits']} misses:{row['misses']} evictions:{row['evictions']}\n"
    chart += ("-" * (width + 40)) + "\n"

    return chart
