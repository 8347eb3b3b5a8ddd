"""Named physical dimension constants for the default floorplan template.

All values in metres unless noted. Feet converted via * 0.3048.
"""

# Plan
PLAN_WIDTH = 6.09                 # ~20' E-W
PLAN_HEIGHT = 4.26                # ~14' N-S

# Doors
DOOR_SIZE = 3.0 * 0.3048          # 3' main and interior doors
BATHROOM_DOOR_SIZE = 2.5 * 0.3048 # 2'6" bathroom door
DOOR_HEIGHT_FRACTION = 1.0 / 3.0  # interior doors start 1/3 up the shared wall
BEDROOM_DOOR = False              # optional kitchen/bedroom door

# Bathroom (sub-zone of the kitchen footprint)
BATHROOM_WIDTH = 3.5 * 0.3048     # 3'6"
BATHROOM_HEIGHT = 4.0 * 0.3048    # 4'

# Wash-basin alcove (kitchen top-left corner)
WASH_BASIN_WIDTH = 2.5 * 0.3048   # 2'6"
WASH_BASIN_HEIGHT = 2.0 * 0.3048  # 2'

# Icon footprint and Cartesian placement (frame origin = page centre)
ICON_WIDTH = 0.6
ICON_HEIGHT = 0.6
ICON_OFFSET_X = 0.0
ICON_OFFSET_Y = 0.0
ICON_NATIVE_SIZE = 24.0           # px, native width of the icon set

# Drawing styles (points)
WALL_LINE_WIDTH = 1.0
DOOR_LINE_WIDTH = 4.0
WALL_COLOR = "#000000"
DOOR_COLOR = "#ff0000"

# Asset fetch
FETCH_TIMEOUT = 10.0              # seconds
