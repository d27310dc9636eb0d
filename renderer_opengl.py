# renderer_opengl.py
from OpenGL.GL import *
from OpenGL.GLU import *
from config import BACKGROUND, AXIS_COLOR, POLYGON_COLOR
from pose import to_array

class GLRenderer:
    def __init__(self, w, h):
        self.w = w
        self.h = h
        self._init_gl()

    def _init_gl(self):
        # world units == pixels, origin in the middle of the window
        glViewport(0, 0, self.w, self.h)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluOrtho2D(-self.w / 2.0, self.w / 2.0, -self.h / 2.0, self.h / 2.0)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def clear(self):
        glClearColor(BACKGROUND[0], BACKGROUND[1], BACKGROUND[2], 1.0)
        glClear(GL_COLOR_BUFFER_BIT)

    def draw_axes(self):
        half_w = self.w / 2.0
        half_h = self.h / 2.0
        glColor3f(*AXIS_COLOR)
        glBegin(GL_LINES)
        glVertex2f(-half_w, 0.0)
        glVertex2f(half_w, 0.0)
        glVertex2f(0.0, -half_h)
        glVertex2f(0.0, half_h)
        glEnd()

    def draw_polygon(self, verts):
        """Filled polygon from an (N, 2) float32 array."""
        if len(verts) < 3:
            return
        glColor3f(*POLYGON_COLOR)
        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(2, GL_FLOAT, 0, verts)
        glDrawArrays(GL_POLYGON, 0, len(verts))
        glDisableClientState(GL_VERTEX_ARRAY)

    def draw_frame(self, polygon):
        self.clear()
        self.draw_axes()
        self.draw_polygon(to_array(polygon))
