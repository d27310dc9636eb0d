# animation.py
import logging
from config import TOTAL_STEPS
from commands import CommandError, read_command
from states import AnimState, Command
from transform2d import TRANSFORM_KINDS, evaluate

log = logging.getLogger(__name__)

class AnimationState:
    def __init__(self, spec, total_steps=TOTAL_STEPS):
        if total_steps <= 0:
            raise ValueError("total_steps must be positive")
        self.spec = spec
        self.step = 0
        self.total_steps = total_steps
        self.cancelled = False

    @property
    def progress(self):
        return min(1.0, self.step / self.total_steps)

    @property
    def done(self):
        return self.cancelled or self.step > self.total_steps

class Animator:
    """Runs one transform at a time over a PoseStore.

    IDLE -> RUNNING on start(spec), back to IDLE once the frame at
    progress 1 has been produced (or on cancel). Every animation yields
    total_steps + 1 frames, both endpoints included.
    """

    def __init__(self, poses, total_steps=TOTAL_STEPS):
        if total_steps <= 0:
            raise ValueError("total_steps must be positive")
        self.poses = poses
        self.total_steps = total_steps
        self.active = None

    @property
    def state(self):
        return AnimState.RUNNING if self.active is not None else AnimState.IDLE

    def start(self, spec):
        if self.active is not None:
            raise RuntimeError("an animation is already running")
        if not isinstance(spec, TRANSFORM_KINDS):
            raise TypeError(f"unsupported transform spec: {spec!r}")
        anim = AnimationState(spec, self.total_steps)
        # snapshot only once the animation is known to be runnable
        self.poses.snapshot_as_base()
        self.active = anim
        log.info("start %s: %s", spec.name, spec)

    def step(self):
        """Evaluate the next frame, store it as the current pose and return it."""
        anim = self.active
        if anim is None:
            raise RuntimeError("no animation running")
        try:
            polygon = evaluate(anim.spec, self.poses.base, anim.progress)
            self.poses.update(polygon)
        except Exception:
            self.active = None
            raise
        log.debug("frame %d/%d progress=%.3f", anim.step, anim.total_steps, anim.progress)
        anim.step += 1
        if anim.done:
            self._finish()
        return polygon

    def frames(self):
        while self.active is not None:
            yield self.step()

    def cancel(self):
        if self.active is None:
            return
        anim = self.active
        anim.cancelled = True
        log.info("cancel %s at step %d/%d", anim.spec.name, anim.step, anim.total_steps)
        self.active = None

    def reset(self):
        if self.active is not None:
            raise RuntimeError("cannot reset while an animation is running")
        self.poses.reset()

    def _finish(self):
        log.info("finish %s", self.active.spec.name)
        self.active = None

def handle_command(animator, read=input, write=print):
    """Read one menu command and act on it. Returns False once the user quits.

    Rejected input is reported and leaves the poses untouched. A transform
    command only starts the animation; the caller plays its frames.
    """
    try:
        command, spec = read_command(read, write)
    except CommandError as e:
        log.warning("rejected input: %s", e)
        write(str(e))
        return True
    except EOFError:
        write("Exiting program.")
        return False

    if command == Command.QUIT:
        write("Exiting program.")
        return False
    if command == Command.RESET:
        write("Action: Resetting triangle to original position.")
        animator.reset()
        return True
    animator.start(spec)
    return True
