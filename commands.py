# commands.py
# Console command parsing. Everything here runs before the animation core is
# touched, so a rejected command never changes the pose.
import logging
import math
from states import Axis, Command
from transform2d import Translate, Scale, Rotate, Reflect, Shear

log = logging.getLogger(__name__)

MENU = "\n".join([
    "",
    "",
    "========= 2D Transformation Menu =========",
    "  1: Translate",
    "  2: Scale",
    "  3: Rotate",
    "  4: Reflect",
    "  5: Shear",
    "  R: Reset to Original Position",
    "  Q: Quit Program",
    "==========================================",
])

# command -> (action label, parameter prompt)
PROMPTS = {
    Command.TRANSLATE: ("Translation", "Enter translation vector (tx ty): "),
    Command.SCALE: ("Scaling", "Enter scaling factors (sx sy): "),
    Command.ROTATE: ("Rotation", "Enter rotation angle in degrees: "),
    Command.REFLECT: ("Reflection", "Reflect about which axis? (1 for X-axis, 2 for Y-axis): "),
    Command.SHEAR: ("Shearing", "Enter x-shear and y-shear factors (shx shy): "),
}

class CommandError(Exception):
    """User input rejected at the console boundary."""

class InvalidCommand(CommandError):
    pass

class InvalidReflectionAxis(InvalidCommand):
    pass

class MalformedParameters(CommandError):
    pass

def print_menu(write=print):
    write(MENU)

def parse_choice(text):
    choice = (text or "").strip().lower()
    try:
        return Command(choice)
    except ValueError:
        raise InvalidCommand(f"Invalid choice {choice!r}. Please try again.") from None

def parse_numbers(text, count):
    """Exactly `count` whitespace separated finite numbers."""
    parts = (text or "").split()
    if len(parts) != count:
        raise MalformedParameters(f"expected {count} number(s), got {len(parts)}")
    values = []
    for p in parts:
        try:
            v = float(p)
        except ValueError:
            raise MalformedParameters(f"not a number: {p!r}") from None
        if not math.isfinite(v):
            raise MalformedParameters(f"not a finite number: {p!r}")
        values.append(v)
    return values

def parse_axis(text):
    parts = (text or "").split()
    if len(parts) != 1:
        raise InvalidReflectionAxis("Reflect needs a single axis: 1 for X-axis, 2 for Y-axis.")
    try:
        return Axis(int(parts[0]))
    except ValueError:
        raise InvalidReflectionAxis(f"Invalid axis {parts[0]!r}: use 1 for X-axis, 2 for Y-axis.") from None

def build_spec(command, text):
    if command == Command.TRANSLATE:
        return Translate(*parse_numbers(text, 2))
    if command == Command.SCALE:
        return Scale(*parse_numbers(text, 2))
    if command == Command.ROTATE:
        return Rotate(*parse_numbers(text, 1))
    if command == Command.REFLECT:
        return Reflect(parse_axis(text))
    if command == Command.SHEAR:
        return Shear(*parse_numbers(text, 2))
    raise InvalidCommand(f"{command.name.lower()} takes no parameters")

def read_command(read=input, write=print):
    """Prompt for a menu choice and its parameters.
    Parameters may follow the choice on the same line ("1 50 0"); otherwise
    they are prompted for. Returns (command, spec); spec is None for reset and quit."""
    line = read("Enter your choice: ") or ""
    parts = line.split(None, 1)
    command = parse_choice(parts[0] if parts else "")
    rest = parts[1] if len(parts) > 1 else ""
    if command not in PROMPTS:
        if rest.strip():
            raise InvalidCommand(f"{command.name.lower()} takes no parameters")
        return command, None
    label, prompt = PROMPTS[command]
    write(f"Action: {label}")
    spec = build_spec(command, rest if rest.strip() else read(prompt))
    log.info("accepted %s", spec)
    return command, spec
