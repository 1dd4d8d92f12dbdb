"""
Minimal configuration template for gridpath
"""

MINIMAL_CONFIG_TEMPLATE = """# gridpath configuration
# ============================================================================
# Values can reference environment variables: ${VAR}, $VAR or ${VAR:-default}

# Grid size in cells
# ----------------------------------------------------------------------------
grid:
  width: 41
  height: 21

# Search
# ----------------------------------------------------------------------------
search:
  connectivity: 8     # 4 = cardinal moves only, 8 = diagonals allowed
  mode: smooth        # path | smooth | corners

# Maze generation
# ----------------------------------------------------------------------------
maze:
  enabled: true
  seed: ${GRIDPATH_SEED:-42}   # Remove for a different maze on every run

# Endpoints as [x, y]; keep x and y parity equal to start so a maze reaches end
# ----------------------------------------------------------------------------
start: [0, 0]
# end: [40, 20]       # Default: farthest cell on the start's lattice

# Console output
# ----------------------------------------------------------------------------
output:
  show_directions: true
  show_timings: true
  show_explored: false
"""
