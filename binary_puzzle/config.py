"""
Central configuration for the binary puzzle solver.

Module-level dictionaries only: callers read them, never mutate them.
"""

# Text representation of a surface
SURFACE_CONFIG = {
    'unknown_char': '-',       # Placeholder for a cell that holds neither 0 nor 1
    'line_separator': ',',     # Default separator used by str(surface)
}

# Solver pipeline
SOLVER_CONFIG = {
    'enable_backtracking': True,   # Fall back to search when the rules reach their fixpoint
}

# Debug overlays
OVERLAY_CONFIG = {
    'cell_size': 32,           # Size of one cell in pixels
    'cell_border': 1,          # Border between cells in pixels
    'font_size': 16,
    'colors': {
        'background': (40, 40, 40),
        'given': (230, 230, 230),        # Cell known before solving
        'ruleset': (120, 200, 120),      # Cell resolved by the rules
        'backtracking': (240, 170, 80),  # Cell resolved by the search
        'unknown': (128, 128, 128),      # Cell still unknown
        'text': (20, 20, 20),
    },
}

# Output paths (one level = one path)
PATHS = {
    'logs': 'logs',
    'overlays': 'overlays',
}
