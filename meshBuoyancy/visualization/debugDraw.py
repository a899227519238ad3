# -- Debug Drawing -- #

'''
Debug primitives emitted by the orchestrator and a Plotly renderer for them.

The orchestrator only calls a DebugDrawer when the matching toggle is on
in the body configuration, and drawing never feeds back into the forces.
PlotlyDebugDrawer collects primitives for one or more steps and turns
them into an interactive 3D figure.
'''

from __future__ import annotations

from typing import Protocol

import numpy as np
import plotly.graph_objects as go

from meshBuoyancy.visualization import theme


class DebugDrawer(Protocol):
    '''Protocol for debug line drawing.'''

    def drawTriangle(self, a: np.ndarray, b: np.ndarray, c: np.ndarray, kind: str) -> None:
        '''Outline a triangle; kind is 'triangle' or 'subtriangle'.'''
        ...

    def drawLine(self, start: np.ndarray, end: np.ndarray, kind: str) -> None:
        '''Draw a segment; kind is 'waterline' or 'force'.'''
        ...


class PlotlyDebugDrawer:
    '''
    Collects debug primitives and renders them with Plotly.

    Examples:
    ---------
    >>> drawer = PlotlyDebugDrawer()
    >>> orchestrator = MeshForceOrchestrator(source, water, body, config, debugDrawer=drawer)
    >>> orchestrator.step()
    >>> drawer.buildFigure().show()
    '''

    def __init__(self) -> None:
        self._segments: dict[str, list[tuple[np.ndarray, np.ndarray]]] = {}

    def drawTriangle(self, a: np.ndarray, b: np.ndarray, c: np.ndarray, kind: str) -> None:
        segments = self._segments.setdefault(kind, [])
        segments.extend([(a, b), (b, c), (c, a)])

    def drawLine(self, start: np.ndarray, end: np.ndarray, kind: str) -> None:
        self._segments.setdefault(kind, []).append((start, end))

    def segmentCount(self, kind: str | None = None) -> int:
        '''Number of collected segments, for one kind or all of them.'''
        if kind is not None:
            return len(self._segments.get(kind, []))
        return sum(len(segments) for segments in self._segments.values())

    def clear(self) -> None:
        self._segments.clear()

    def buildFigure(self, title: str = 'Buoyancy Debug View') -> go.Figure:
        '''
        Render every collected primitive as 3D line traces.

        Returns:
        --------
        go.Figure : One trace per primitive kind
        '''
        fig = go.Figure()

        for kind, segments in self._segments.items():
            if not segments:
                continue

            # Segments joined into one trace, separated by None gaps
            xs: list = []
            ys: list = []
            zs: list = []
            for start, end in segments:
                xs.extend([start[0], end[0], None])
                ys.extend([start[1], end[1], None])
                zs.extend([start[2], end[2], None])

            fig.add_trace(go.Scatter3d(
                x=xs, y=ys, z=zs,
                mode='lines', name=kind,
                line=dict(color=theme.DEBUG_COLORS.get(kind, theme.WHITE), width=4),
            ))

        fig.update_layout(
            title=title,
            template=theme.TEMPLATE,
            scene=dict(aspectmode='data'),
            height=600,
        )

        return fig
