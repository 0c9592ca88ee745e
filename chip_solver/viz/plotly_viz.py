from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Set, Tuple

from ..chips import ColorChip
from ..colors import COLOR_HEX, Color
from ..graph import ChipGraph
from ..solver import SolveResult


def color_positions(graph: ChipGraph) -> Dict[Color, Tuple[float, float]]:
    import networkx as nx

    # Nodes are inserted in enum order, so the layout is stable between runs.
    layout = nx.circular_layout(graph.to_networkx())
    return {color: (float(pos[0]), float(pos[1])) for color, pos in layout.items()}


def build_plotly_figure(
    graph: ChipGraph,
    *,
    result: Optional[SolveResult] = None,
    title: str = "Chip Solver",
):
    import plotly.graph_objects as go

    pos = color_positions(graph)
    chain_chips: Set[ColorChip] = set(result.chain) if result is not None and result.chain else set()

    annotations = []
    for chip in graph.edges():
        (x0, y0), (x1, y1) = pos[chip.start], pos[chip.end]
        on_chain = chip in chain_chips
        annotations.append(
            dict(
                x=x1,
                y=y1,
                ax=x0,
                ay=y0,
                xref="x",
                yref="y",
                axref="x",
                ayref="y",
                showarrow=True,
                arrowhead=3,
                arrowsize=1.2,
                standoff=14,
                startstandoff=14,
                arrowwidth=4 if on_chain else 1,
                arrowcolor=COLOR_HEX[chip.start] if on_chain else "rgba(160,160,160,0.6)",
            )
        )

    # Nodes
    nx_, ny_, ntext, ncolor, nsize = [], [], [], [], []
    endpoints = {result.initial: "initial", result.final: "final"} if result is not None else {}
    for color in graph.colors():
        x, y = pos[color]
        nx_.append(x)
        ny_.append(y)
        label_bits = [f"color={color}", f"out={graph.out_degree(color)}"]
        if color in endpoints:
            label_bits.append(endpoints[color])
        ntext.append("<br>".join(label_bits))
        ncolor.append(COLOR_HEX[color])
        nsize.append(26 if color in endpoints else 18)

    node_trace = go.Scatter(
        x=nx_,
        y=ny_,
        mode="markers+text",
        marker=dict(size=nsize, color=ncolor, line=dict(width=1, color="#333333")),
        text=[c.value for c in graph.colors()],
        textposition="top center",
        hovertext=ntext,
        hoverinfo="text",
        name="colors",
    )
    fig = go.Figure(data=[node_trace])
    fig.update_layout(
        title=title,
        annotations=annotations,
        showlegend=False,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x", scaleratio=1),
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig


def write_plotly_html(
    graph: ChipGraph,
    *,
    out_path: str | Path,
    result: Optional[SolveResult] = None,
    title: str = "Chip Solver",
) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig = build_plotly_figure(graph, result=result, title=title)
    fig.write_html(str(out_path), include_plotlyjs="cdn", full_html=True)
    return out_path
