# locu/constants.py

DEFAULT_XLAB = "x"
DEFAULT_YLAB = "y"
DEFAULT_TITLE = "Lorenz curve"

DEFAULT_BELOW_FILL_COLOR = "gray"
DEFAULT_ABOVE_FILL_COLOR = "tomato"
DEFAULT_ALPHA = 0.7

DEFAULT_POINT_SIZE = 2.0
MIN_POINT_SIZE = 1.0

# Point sizes are given in millimetres (ggplot convention); matplotlib wants
# typographic points.
POINTS_PER_MM = 72.27 / 25.4

MIN_SAMPLE_SIZE = 2
