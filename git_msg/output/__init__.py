"""Terminal presentation for git-msg.

Styling is decided per stream: stdout for the suggestion and progress,
stderr for failures. NO_COLOR turns styling off, FORCE_COLOR turns it on
for pipes too.
"""

import itertools
import os
import re
import sys
import threading

SGR = {
    'bold': '1',
    'dim': '2',
    'red': '31',
    'green': '32',
    'yellow': '33',
    'magenta': '35',
    'cyan': '36',
}

TYPE_STYLES = {
    'feat': 'green',
    'fix': 'red',
    'refactor': 'yellow',
    'docs': 'cyan',
    'test': 'magenta',
    'perf': 'green',
    'chore': 'dim',
    'style': 'dim',
}

SUBJECT_PREFIX = re.compile(r'^(\w+)(\([^)]*\))?!?:')


def stream_supports_color(stream) -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    isatty = getattr(stream, 'isatty', None)
    if not (isatty and isatty()):
        return False
    if sys.platform == 'win32':
        return _enable_windows_ansi()
    return True


def _enable_windows_ansi() -> bool:
    try:
        import ctypes
        kernel32 = ctypes.windll.kernel32
        # ENABLE_VIRTUAL_TERMINAL_PROCESSING on the stdout console handle
        return bool(kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7))
    except (AttributeError, OSError):
        return False


def _encodes(stream, text: str) -> bool:
    try:
        text.encode(getattr(stream, 'encoding', None) or 'utf-8')
        return True
    except (UnicodeEncodeError, LookupError):
        return False


def style(text: str, *names: str, stream=None) -> str:
    """Wrap text in the named SGR attributes if `stream` (default stdout) takes color."""
    if not names or not stream_supports_color(stream or sys.stdout):
        return text
    codes = ';'.join(SGR[name] for name in names)
    return f"\033[{codes}m{text}\033[0m"


def dim(text: str) -> str:
    return style(text, 'dim')


def info(text: str) -> str:
    return style(text, 'cyan')


def warning(text: str) -> str:
    return style(text, 'yellow')


def print_success(message: str) -> None:
    mark = '✓' if _encodes(sys.stdout, '✓') else '[OK]'
    print(f"{style(mark, 'green')} {message}")


def print_error(message: str) -> None:
    mark = '✗' if _encodes(sys.stderr, '✗') else '[X]'
    print(style(f"{mark} {message}", 'red', stream=sys.stderr), file=sys.stderr)


def style_subject(subject: str) -> str:
    """Bold the subject line, tinting a known `type(scope):` prefix."""
    match = SUBJECT_PREFIX.match(subject)
    if not match or match.group(1) not in TYPE_STYLES:
        return style(subject, 'bold')
    prefix = match.group(0)
    return style(prefix, 'bold', TYPE_STYLES[match.group(1)]) + style(subject[len(prefix):], 'bold')


def display_message(message: str) -> None:
    """Print a commit message framed by rules as wide as its longest line."""
    subject, *body = message.split('\n')
    rule_char = '─' if _encodes(sys.stdout, '─') else '-'
    rule = dim(rule_char * max(len(line) for line in [subject, *body]))
    print(rule)
    print(style_subject(subject))
    for line in body:
        print(line)
    print(rule)


class Spinner:
    """Progress indicator while a provider call is in flight.

    Only animates on a terminal. Notices printed through `write` land on
    their own line instead of behind a frame.
    """

    FRAMES = '⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏'
    ASCII_FRAMES = '-\\|/'
    INTERVAL = 0.08

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._thread = None

    @property
    def active(self) -> bool:
        return self._thread is not None

    def _clear(self):
        self.stream.write('\r\033[K')

    def _spin(self):
        frames = self.FRAMES if _encodes(self.stream, self.FRAMES) else self.ASCII_FRAMES
        for frame in itertools.cycle(frames):
            if self._stop.is_set():
                break
            with self._lock:
                self._clear()
                self.stream.write(f"{frame} ")
                self.stream.flush()
            self._stop.wait(self.INTERVAL)

    def write(self, text: str) -> None:
        with self._lock:
            if self.active:
                self._clear()
            self.stream.write(text + '\n')
            self.stream.flush()

    def __enter__(self):
        if self.stream.isatty():
            self._stop.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc):
        if not self.active:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        self._clear()
        self.stream.flush()


__all__ = [
    "SGR", "TYPE_STYLES", "stream_supports_color", "style",
    "dim", "info", "warning", "print_success", "print_error",
    "style_subject", "display_message", "Spinner",
]
