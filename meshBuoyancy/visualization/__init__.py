# -- Visualization Subpackage -- #

'''
Plotly-based debug views of mesh triangles, submerged sub-triangles,
waterlines, and applied forces.
'''

from meshBuoyancy.visualization.debugDraw import DebugDrawer, PlotlyDebugDrawer
