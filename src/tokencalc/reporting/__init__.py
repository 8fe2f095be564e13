"""Chart data, Plotly figures and exports."""
