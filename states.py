# states.py
from enum import Enum

class Axis(Enum):
    X = 1
    Y = 2

class Command(Enum):
    TRANSLATE = '1'
    SCALE = '2'
    ROTATE = '3'
    REFLECT = '4'
    SHEAR = '5'
    RESET = 'r'
    QUIT = 'q'

class AnimState(Enum):
    IDLE = 0
    RUNNING = 1
