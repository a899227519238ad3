# -- Visualization Theme -- #

'''
Centralized dark-mode theme for the meshBuoyancy Plotly debug views.

Change colors or template here to restyle every plot at once.
'''

# Plotly template
TEMPLATE = 'plotly_dark'

# Primary color palette (Material Design, visible on dark backgrounds)
BLUE = '#42A5F5'
RED = '#EF5350'
GREEN = '#66BB6A'
ORANGE = '#FFA726'
YELLOW = '#FFEE58'
CYAN = '#26C6DA'

# Neutrals
WHITE = '#E0E0E0'

# Debug primitive colors, keyed by primitive kind
DEBUG_COLORS = {
    'triangle': WHITE,
    'subtriangle': YELLOW,
    'waterline': CYAN,
    'force': BLUE,
}
