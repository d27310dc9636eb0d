# main.py
import sys, logging, pygame
from pygame.locals import *

from config import SCREEN_W, SCREEN_H, WINDOW_TITLE, FRAME_DELAY_MS, LOG_LEVEL, LOG_FORMAT
from animation import Animator, handle_command
from commands import print_menu
from pose import PoseStore
from renderer_opengl import GLRenderer
from states import AnimState

def init_pygame():
    pygame.init()
    pygame.display.set_mode((SCREEN_W, SCREEN_H), DOUBLEBUF | OPENGL)
    pygame.display.set_caption(WINDOW_TITLE)

def present(renderer, polygon):
    renderer.draw_frame(polygon)
    pygame.display.flip()

def poll_window():
    """Drain window events. Returns (cancel, quit)."""
    cancel = quit_requested = False
    for ev in pygame.event.get():
        if ev.type == QUIT:
            cancel = quit_requested = True
        elif ev.type == KEYDOWN and ev.key == K_ESCAPE:
            cancel = True
    return cancel, quit_requested

def play(animator, renderer):
    """Render every frame of the running animation. Returns False if the window was closed."""
    for polygon in animator.frames():
        present(renderer, polygon)
        pygame.time.wait(FRAME_DELAY_MS)
        cancel, quit_requested = poll_window()
        if cancel:
            animator.cancel()
            if quit_requested:
                return False
            print("Animation cancelled.")
    return True

def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    init_pygame()
    renderer = GLRenderer(SCREEN_W, SCREEN_H)
    poses = PoseStore()
    animator = Animator(poses)

    running = True
    while running:
        present(renderer, poses.vertices())
        _, quit_requested = poll_window()
        if quit_requested:
            break
        print_menu()
        running = handle_command(animator)
        if running and animator.state == AnimState.RUNNING:
            running = play(animator, renderer)

    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    main()
