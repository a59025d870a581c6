import math

### Logging ###
LOGS_FOLDER = 'logs/'

### Platform Geometry Defaults ###
# All lengths in mm, angles in radians
HEX_BASE_RADIUS = 80.0
HEX_BASE_RADIUS_OUTER = 110.0
HEX_PLATFORM_RADIUS = 50.0
HEX_PLATFORM_RADIUS_OUTER = 80.0

CIRCULAR_BASE_RADIUS = 80.0
CIRCULAR_PLATFORM_RADIUS = 50.0

SHAFT_DISTANCE = 20.0
ANCHOR_DISTANCE = 20.0

ROD_LENGTH = 130.0
HORN_LENGTH = 50.0
HORN_DIRECTION = 0

SERVO_RANGE = (-math.pi / 2, math.pi / 2)

# Platform joint order when the platform plate is turned by pi
PLATFORM_TURN_INDEX = (4, 3, 0, 5, 2, 1)

NUM_LEGS = 6

### Trajectory Defaults ###
# Drawing speed in mm per ms (50 mm/s)
DRAWING_SPEED = 0.05
# Side length of the square window a path bounding box is rescaled into (mm)
SCREEN_SIZE = 80.0
# Depth of the pen/laser while drawing and while repositioning
DRAW_DEPTH = 0.0
LIFT_DEPTH = -10.0
# Number of segments a bezier curve is flattened into
BEZIER_STEPS = 100
# Arc length (in path units) covered by one arc waypoint
ARC_STEP_LENGTH = 2.0

### Animation Defaults ###
DEFAULT_ANIMATION = 'wobble'
PATH_SAMPLE_STEPS = 100

# Pointer position that maps to the platform centre for the mouse animation
POINTER_CENTER_X = 512
POINTER_CENTER_Y = 382
POINTER_SCALE = 10.0

# Gamepad axis to translation (mm) and rotation (rad) scaling
GAMEPAD_TRANSLATION = 30.0
GAMEPAD_ROTATION = math.pi / 6
# Button index that switches the sticks to z-rotation
GAMEPAD_L1_BUTTON = 6

### Wall Projection Defaults ###
ROTATION_AXIS_OFFSET = 30.0
WALL_DISTANCE = 1000.0

### Servo Table ###
# Rows kept for playback, about ten minutes at 60 ticks per second
SERVO_TABLE_MAX_ROWS = 36000

### Numerical Tolerances ###
ANGLE_EPSILON = 1e-12
