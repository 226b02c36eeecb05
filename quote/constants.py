"""Named cost, velocity and material constants for quoting.

All lengths in inches, times in seconds, money in US dollars.
"""

# Costs
COST_PER_AREA = 0.75              # $ per square inch of stock
COST_PER_SECOND = 0.07            # $ per second of machine time

# Cutter velocity
MAX_VELOCITY = 0.5                # in/s along straight edges

# Material
PADDING = 0.1                     # in added to box width and height

# Discretization
DEFAULT_RESOLUTION = 100          # points per arc in the point cloud
