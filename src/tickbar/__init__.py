# -*- coding: utf-8 -*-
"""
Tickbar – Stackable progress bars and spinners for the terminal.
Copyright (c) 2025 Igor Iatsenko
Licensed under the MIT License.
"""

import os
import sys
import math
import time
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import (
        Optional,
        List,
        Callable,
        Iterable,
        Iterator,
        Sequence,
        TextIO,
)
import logging

__all__ = [
    'progress',
    'Bar',
    'BarState',
    'Spinner',
    'LineLayout',
    'Line',
    'Stats',
    'Estimate',
    'TimeEstimator',
    'TerminalModeGuard',
    'TerminalWriter',
    'PlainWriter',
    'Widget',
    'DescriptionWidget',
    'PercentageWidget',
    'BarWidget',
    'CounterWidget',
    'TimeWidget',
    'TickbarError',
    'TerminalError',
    'AlreadyRunningError',
]

logger = logging.getLogger('tickbar')


ESC_CLEAR_LINE = '\033[2K'
ESC_HIDE_CURSOR = '\033[?25l'
ESC_SHOW_CURSOR = '\033[?25h'
ESC_CURSOR_UP = '\033[1A'

_IS_WINDOWS = os.name == 'nt'

# Win32 console API
_STD_OUTPUT_HANDLE = -11
_STD_ERROR_HANDLE = -12
_INVALID_HANDLE_VALUE = -1
_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
_DISABLE_NEWLINE_AUTO_RETURN = 0x0008


# ============================================================================
# Errors
# ============================================================================

class TickbarError(Exception):
    """Base class for tickbar errors"""


class TerminalError(TickbarError, RuntimeError):
    """Raised when the terminal mode cannot be queried or changed"""


class AlreadyRunningError(TickbarError, RuntimeError):
    """Raised when starting a spinner that is already running"""


# ============================================================================
# Terminal utilities
# ============================================================================

def _get_console_width() -> Optional[int]:
    """Return the width of the terminal in columns, or None if stdout is not one."""
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, ValueError, OSError):
        # cron, IDEs, CI, redirected or replaced stdout
        return None


def _console_columns() -> int:
    """Usable rendering width: one less than the terminal width, 0 without a terminal"""
    width = _get_console_width()
    if width is None:
        logger.debug('Terminal width unavailable, assuming 1 column')
        width = 1
    return max(0, width - 1)


def _is_terminal(stream: TextIO) -> bool:
    """Check whether a stream is attached to a terminal"""
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def _std_handle_id(stream: TextIO) -> int:
    return _STD_ERROR_HANDLE if stream is sys.stderr else _STD_OUTPUT_HANDLE


def _enable_escape_sequence(stream: TextIO) -> Optional[int]:
    """
    Enable ANSI escape processing for the console behind a stream.

    Only Windows consoles need this. Returns the previous console mode so
    it can be restored later, or None if nothing was changed.

    Raises:
        TerminalError: if the console mode cannot be read or set
    """
    if not _IS_WINDOWS or not _is_terminal(stream):
        return None

    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
    handle = kernel32.GetStdHandle(_std_handle_id(stream))
    if handle == _INVALID_HANDLE_VALUE:
        raise TerminalError('GetStdHandle failed')

    mode = wintypes.DWORD()
    if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        raise TerminalError('GetConsoleMode failed')

    new_mode = mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING | _DISABLE_NEWLINE_AUTO_RETURN
    if not kernel32.SetConsoleMode(handle, new_mode):
        raise TerminalError('SetConsoleMode failed, cannot enable virtual terminal processing')

    logger.debug('Enabled virtual terminal processing (previous mode %#x)', mode.value)
    return mode.value


def _restore_console_mode(stream: TextIO, mode: Optional[int]):
    """Restore a console mode saved by _enable_escape_sequence"""
    if mode is None or not _IS_WINDOWS:
        return

    import ctypes

    kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
    handle = kernel32.GetStdHandle(_std_handle_id(stream))
    if handle == _INVALID_HANDLE_VALUE:
        logger.error('GetStdHandle failed, cannot reset console mode')
        return
    if not kernel32.SetConsoleMode(handle, mode):
        logger.error('SetConsoleMode failed, cannot reset console mode')


def _digit_count(number: int) -> int:
    """Number of decimal digits, 1 for zero"""
    return len(str(abs(int(number))))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class TerminalModeGuard:
    """
    Owns the process-wide terminal state of one stream: cursor visibility
    and, on Windows, the console escape-processing mode.

    acquire() hides the cursor and enables escape processing, release()
    undoes both. Both are idempotent, and the guard is a context manager.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._prior_mode: Optional[int] = None
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    def acquire(self) -> 'TerminalModeGuard':
        if self._held:
            return self

        self._prior_mode = _enable_escape_sequence(self.stream)
        self._held = True
        self.stream.write(ESC_HIDE_CURSOR)
        self.stream.flush()
        return self

    def release(self):
        if not self._held:
            return

        self._held = False
        try:
            self.stream.write(ESC_SHOW_CURSOR)
            self.stream.flush()
        finally:
            _restore_console_mode(self.stream, self._prior_mode)
            self._prior_mode = None

    def __enter__(self):
        return self.acquire()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False


class PlainWriter:
    """Writes text to a stream as-is"""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write(self, text: str):
        self.stream.write(text)

    def clear_line(self):
        pass

    def write_line(self, text: str):
        """Write text in place of whatever the current line shows"""
        self.clear_line()
        self.write(text)

    def flush(self):
        self.stream.flush()


class TerminalWriter(PlainWriter):
    """Writes text to a terminal, erasing the current line when asked"""

    def clear_line(self):
        self.stream.write(ESC_CLEAR_LINE + '\r')


def _make_writer(stream: TextIO, terminal: bool) -> PlainWriter:
    return TerminalWriter(stream) if terminal else PlainWriter(stream)


# ============================================================================
# Time estimation
# ============================================================================

@dataclass
class Estimate:
    """Elapsed seconds, remaining whole seconds and items per second"""
    elapsed: float = 0.0
    remaining: int = 0
    velocity: float = 0.0


class TimeEstimator:
    """Measures elapsed time from the first sample and extrapolates the rest"""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self.clock = clock or time.monotonic
        self.epoch: Optional[float] = None

    def reset(self):
        self.epoch = None

    def sample(self, current: int, total: int) -> Estimate:
        now = self.clock()
        if self.epoch is None:
            self.epoch = now
            return Estimate()

        elapsed = max(0.0, now - self.epoch)
        velocity = current / elapsed if elapsed > 0 else 0.0
        remaining = _round_half_up((total - current) / velocity) if velocity > 0 else 0
        return Estimate(elapsed, remaining, velocity)


# ============================================================================
# Widget System
# ============================================================================

@dataclass
class Stats:
    """Everything a widget needs to render one frame"""
    current: int
    total: int
    digit_width: int
    description: str = ''
    elapsed: float = 0.0
    remaining: int = 0
    velocity: float = 0.0

    @property
    def ratio(self) -> float:
        return self.current / self.total


class Widget(ABC):
    """Base class for the fixed-width fields of a line"""

    @abstractmethod
    def render(self, stats: Stats) -> str:
        """Render the widget"""
        pass

    def width(self, stats: Stats) -> int:
        """Columns the widget takes for these stats"""
        return len(self.render(stats))


class DescriptionWidget(Widget):
    """Description followed by a colon, nothing when empty"""

    def render(self, stats: Stats) -> str:
        if not stats.description:
            return ''
        return f'{stats.description}:'


class PercentageWidget(Widget):
    """Percentage in a 3-wide field"""

    def render(self, stats: Stats) -> str:
        return '{:3d}%'.format(_round_half_up(stats.ratio * 100))


class CounterWidget(Widget):
    """Current/total count, current padded to the width of total"""

    def render(self, stats: Stats) -> str:
        return ' {:>{width}d}/{}'.format(stats.current, stats.total, width=stats.digit_width)


class TimeWidget(Widget):
    """Elapsed and remaining time plus rate: [MM:SS<MM:SS, V.VVit/s]"""

    def render(self, stats: Stats) -> str:
        elapsed = self._format_seconds(int(stats.elapsed))
        remaining = self._format_seconds(stats.remaining)
        return f' [{elapsed}<{remaining}, {stats.velocity:.2f}it/s]'

    @staticmethod
    def _format_seconds(seconds: int) -> str:
        hours, remainder = divmod(seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        if hours > 0:
            return '{:d}:{:02d}:{:02d}'.format(hours, minutes, seconds)
        return '{:02d}:{:02d}'.format(minutes, seconds)


class BarWidget:
    """The filling part of the line, sized by whatever room is left"""

    def __init__(self,
                 char_start_bracket: str = '|',
                 char_end_bracket: str = '|',
                 char_complete: str = '█',
                 char_incomplete: str = ' '):
        for char in (char_start_bracket, char_end_bracket, char_complete, char_incomplete):
            if len(char) != 1:
                raise ValueError("bar glyphs must be single characters")

        self.char_start_bracket = char_start_bracket
        self.char_end_bracket = char_end_bracket
        self.char_complete = char_complete
        self.char_incomplete = char_incomplete

    @property
    def bracket_width(self) -> int:
        return len(self.char_start_bracket) + len(self.char_end_bracket)

    def filled(self, stats: Stats, inner_width: int) -> int:
        """Number of complete glyphs for the given inner width"""
        return min(inner_width, max(0, _round_half_up(stats.ratio * inner_width)))

    def render(self, stats: Stats, inner_width: int) -> str:
        filled = self.filled(stats, inner_width)
        return (self.char_start_bracket +
                self.char_complete * filled +
                self.char_incomplete * (inner_width - filled) +
                self.char_end_bracket)


# ============================================================================
# Line layout
# ============================================================================

@dataclass
class Line:
    """Result of laying out one frame"""
    text: str
    columns: int
    bar_width: int
    show_time: bool
    degraded: bool = False


class LineLayout:
    """
    Lays out one progress line within a column budget.

    The fixed fields (description, percentage, counter and optionally the
    time statistics) get their natural width; the bar takes the rest. When
    nothing is left for the bar, the time statistics are dropped and the bar
    falls back to MIN_BAR_WIDTH, with the budget recomputed to match.
    """

    MIN_BAR_WIDTH = 10

    def __init__(self, bar_widget: Optional[BarWidget] = None):
        self.description_widget = DescriptionWidget()
        self.percentage_widget = PercentageWidget()
        self.bar_widget = bar_widget or BarWidget()
        self.counter_widget = CounterWidget()
        self.time_widget = TimeWidget()

    def base_width(self, stats: Stats) -> int:
        """Width of everything but the bar fill and the time statistics"""
        return (self.description_widget.width(stats) +
                self.percentage_widget.width(stats) +
                self.bar_widget.bracket_width +
                self.counter_widget.width(stats))

    def fixed_width(self, stats: Stats, show_time: bool) -> int:
        width = self.base_width(stats)
        if show_time:
            width += self.time_widget.width(stats)
        return width

    def compose(self, stats: Stats, columns: int, show_time: bool) -> Line:
        fixed_width = self.fixed_width(stats, show_time)
        degraded = False

        if columns > fixed_width:
            bar_width = columns - fixed_width
        else:
            show_time = False
            bar_width = self.MIN_BAR_WIDTH
            columns = bar_width + self.base_width(stats)
            degraded = True

        parts = [
            self.description_widget.render(stats),
            self.percentage_widget.render(stats),
            self.bar_widget.render(stats, bar_width),
            self.counter_widget.render(stats),
        ]
        if show_time:
            parts.append(self.time_widget.render(stats))

        return Line(''.join(parts), columns, bar_width, show_time, degraded)


# ============================================================================
# Progress Bar
# ============================================================================

class BarState(Enum):
    IDLE = 'idle'
    ACTIVE = 'active'
    COMPLETED = 'completed'


class Bar:
    """Single-line progress bar advanced by explicit ticks"""

    def __init__(self,
                 total: int,
                 columns: Optional[int] = None,
                 description: str = '',
                 file: Optional[TextIO] = None,
                 err_file: Optional[TextIO] = None,
                 stack: bool = False,
                 leave: bool = True,
                 time_measurement: bool = True,
                 recalc_cycle: Optional[int] = None,
                 clock: Optional[Callable[[], float]] = None,
                 layout: Optional[LineLayout] = None):
        """
        Create a progress bar.

        Args:
            total: Number of ticks to completion, must be positive
            columns: Width ceiling (defaults to terminal width minus one, 0 disables rendering)
            description: Text shown before the percentage
            file: Primary output stream (default sys.stdout)
            err_file: Stream for warn() (default sys.stderr)
            stack: Render on a new row below the current one, see enable_stack()
            leave: Keep the finished line on screen
            time_measurement: Show elapsed/remaining time and rate
            recalc_cycle: Re-read the terminal width every that many ticks
            clock: Monotonic clock in seconds, for time measurement
            layout: Line layout, to customise the bar glyphs
        """
        # Validation
        if total <= 0:
            raise ValueError("total must be greater than zero")
        if columns is not None and columns < 0:
            raise ValueError("columns must be non-negative")

        self.total = total
        self.columns = _console_columns() if columns is None else columns
        self.digit_width = _digit_count(total)
        self._description = description

        self.file: TextIO = file if file is not None else sys.stdout
        self.err_file: TextIO = err_file if err_file is not None else sys.stderr
        self.stderr_is_tty = _is_terminal(self.err_file)

        self._state = BarState.IDLE
        self._progress: Optional[int] = None
        self._interrupted = False
        self._estimator = TimeEstimator(clock)
        self._layout = layout or LineLayout()

        self._stacked = False
        self._leave = leave
        self._time_measurement = time_measurement
        self._recalc_enabled = False
        self._recalc_cycle = 0

        self._guard = TerminalModeGuard(self.file)
        self._select_writers()

        if stack:
            self.enable_stack()
        if recalc_cycle is not None:
            self.enable_recalc_console_width(recalc_cycle)

    def __enter__(self):
        """Enter context manager"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager, giving the terminal back"""
        self.close()
        return False

    def __del__(self):
        # the stream may already be gone at interpreter shutdown
        if getattr(getattr(self, 'file', None), 'closed', False):
            return
        self.close()

    def __iadd__(self, delta: int) -> 'Bar':
        self.tick(delta)
        return self

    # Read-only state
    @property
    def state(self) -> BarState:
        return self._state

    @property
    def progress(self) -> Optional[int]:
        """Current count, None while idle"""
        return self._progress

    @property
    def interrupted(self) -> bool:
        """Whether something was written over the bar since it became active"""
        return self._interrupted

    @property
    def stacked(self) -> bool:
        return self._stacked

    @property
    def leave(self) -> bool:
        return self._leave

    @property
    def time_measurement_enabled(self) -> bool:
        return self._time_measurement

    @property
    def recalc_width_enabled(self) -> bool:
        return self._recalc_enabled

    @property
    def recalc_cycle(self) -> int:
        return self._recalc_cycle

    @property
    def owns_terminal(self) -> bool:
        """Whether this bar currently holds the cursor and console mode"""
        return self._guard.held

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str):
        self.set_description(value)

    # Configuration
    def set_description(self, description: str):
        """Set the description, assumed to be single-width characters"""
        self._description = description

    def enable_stack(self):
        """
        Render below the current row and move back up on completion, so nested
        bars each keep a row of their own. A stacked bar never touches the
        cursor or console mode: the outermost, non-stacked bar owns those.
        """
        self._stacked = True
        self._leave = False

    def enable_leave(self):
        self._leave = True

    def disable_leave(self):
        self._leave = False

    def enable_time_measurement(self):
        self._time_measurement = True

    def disable_time_measurement(self):
        self._time_measurement = False

    def enable_recalc_console_width(self, cycle: int):
        """Re-read the terminal width whenever progress is a multiple of cycle"""
        if cycle <= 0:
            raise ValueError("cycle must be greater than zero")
        self._recalc_enabled = True
        self._recalc_cycle = cycle

    def disable_recalc_console_width(self):
        self._recalc_enabled = False
        self._recalc_cycle = 0

    # Lifecycle
    def init(self):
        """Draw the empty bar without advancing"""
        self.tick(0)

    def reset(self):
        """Return to idle so the bar can run again"""
        self._progress = None
        self._estimator.reset()
        self._interrupted = False
        self._state = BarState.IDLE

    def close(self):
        """Show the cursor again and restore the console mode, if this bar took them"""
        guard = getattr(self, '_guard', None)
        if guard is not None:
            guard.release()

    def tick(self, delta: int = 1):
        """Advance by delta and redraw"""
        if delta < 0:
            raise ValueError("delta must be non-negative")

        # not connected to a terminal
        if self.columns == 0:
            return

        if self._state is BarState.IDLE and not self._activate():
            return

        current = min(self._progress + delta, self.total)
        self._progress = current

        if self._recalc_enabled and current % self._recalc_cycle == 0:
            self.columns = min(_console_columns(), self.columns)

        if self._time_measurement:
            estimate = self._estimator.sample(current, self.total)
        else:
            estimate = Estimate()

        stats = Stats(current=current,
                      total=self.total,
                      digit_width=self.digit_width,
                      description=self._description,
                      elapsed=estimate.elapsed,
                      remaining=estimate.remaining,
                      velocity=estimate.velocity)
        line = self._layout.compose(stats, self.columns, self._time_measurement)
        if line.degraded:
            self._degrade(line.columns)

        self._out.write(ESC_CLEAR_LINE + '\r' + line.text)

        if current == self.total:
            self._complete()

        self._out.flush()

    def _activate(self) -> bool:
        self.columns = min(_console_columns(), self.columns)
        if self.columns == 0:
            logger.debug('No terminal width available, rendering disabled for %r', self._description)
            self._select_writers()
            return False

        if self._stacked:
            # reserve a new row
            self._out.write('\n')
        else:
            self._guard.acquire()

        self._progress = 0
        self._state = BarState.ACTIVE
        return True

    def _select_writers(self):
        """Erase lines before messages only while the bar renders"""
        self._out = _make_writer(self.file, terminal=self.columns > 0)
        self._err = _make_writer(self.err_file, terminal=self.stderr_is_tty and self.columns > 0)

    def _degrade(self, columns: int):
        if self._time_measurement:
            logger.debug('Not enough room for time statistics in %d columns, disabling them', self.columns)
        self._time_measurement = False
        self.columns = columns

    def _complete(self):
        self._state = BarState.COMPLETED

        if self._leave:
            self._out.write('\r\n')
        else:
            self._out.write(ESC_CLEAR_LINE + '\r')

        if self._stacked and not self._interrupted:
            self._out.write(ESC_CURSOR_UP)

        self.reset()

    # Out-of-band output
    def write(self, msg: str):
        """Write a message to the primary stream, erasing the bar line first"""
        self._out.write_line(str(msg))
        self._out.flush()
        self._interrupted = True

    def warn(self, msg: str):
        """Write a message to the error stream, erasing the bar line first on a terminal"""
        self._err.write_line(str(msg))
        self._err.flush()
        self._interrupted = True


# ============================================================================
# Spinner
# ============================================================================

class Spinner:
    """Single-line spinner animated by a background thread"""

    FRAMES_DOTS = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
    FRAMES_ASCII = ['|', '/', '-', '\\']

    CHAR_SUCCESS = '✔'
    CHAR_FAILURE = '✖'
    CHAR_SUCCESS_ASCII = 'v'
    CHAR_FAILURE_ASCII = 'x'

    def __init__(self,
                 text: str = '',
                 interval: float = 0.2,
                 file: Optional[TextIO] = None,
                 err_file: Optional[TextIO] = None,
                 frames: Optional[Sequence[str]] = None,
                 char_success: Optional[str] = None,
                 char_failure: Optional[str] = None):
        """
        Create a spinner.

        Args:
            text: Text shown after the spinning glyph
            interval: Seconds between frames
            file: Output stream (default sys.stdout)
            err_file: Stream for warn() (default sys.stderr)
            frames: Glyph sequence (braille dots, or ASCII on Windows)
            char_success: Glyph printed by ok() (check mark, or 'v' on Windows)
            char_failure: Glyph printed by err() (cross, or 'x' on Windows)
        """
        if interval <= 0:
            raise ValueError("interval must be positive")

        if frames is None:
            frames = self.FRAMES_ASCII if _IS_WINDOWS else self.FRAMES_DOTS
        if not frames:
            raise ValueError("frames must not be empty")

        if char_success is None:
            char_success = self.CHAR_SUCCESS_ASCII if _IS_WINDOWS else self.CHAR_SUCCESS
        if char_failure is None:
            char_failure = self.CHAR_FAILURE_ASCII if _IS_WINDOWS else self.CHAR_FAILURE

        self.text = text
        self.interval = interval
        self.frames: List[str] = list(frames)
        self.char_success = char_success
        self.char_failure = char_failure

        self.file: TextIO = file if file is not None else sys.stdout
        self.err_file: TextIO = err_file if err_file is not None else sys.stderr

        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._guard = TerminalModeGuard(self.file)
        self._out = _make_writer(self.file, terminal=_is_terminal(self.file))
        self._err = _make_writer(self.err_file, terminal=_is_terminal(self.err_file))

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False

    @property
    def active(self) -> bool:
        return self._thread is not None and not self._stop_event.is_set()

    def start(self):
        """Hide the cursor and start animating"""
        if self._thread is not None:
            raise AlreadyRunningError("spinner is already running")

        self._guard.acquire()
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._spin, name='tickbar-spinner', daemon=True)
        self._thread.start()

    def stop(self):
        """Stop animating and give the terminal back, waiting at most one interval"""
        thread = self._thread
        if thread is not None:
            self._stop_event.set()
            thread.join()
            self._thread = None
        self._guard.release()

    def ok(self):
        """Stop and report success"""
        self._finish(self.char_success, 'SUCCESS')

    def err(self):
        """Stop and report failure"""
        self._finish(self.char_failure, 'FAILURE')

    def _finish(self, glyph: str, status: str):
        self.stop()
        with self._lock:
            self._out.clear_line()
            self._out.write(f'\r{glyph}{self.text} [{status}]\n')
            self._out.flush()

    def write(self, msg: str):
        """Write a message between frames"""
        with self._lock:
            self._out.write_line(str(msg))
            self._out.flush()

    def warn(self, msg: str):
        """Write a message to the error stream between frames"""
        with self._lock:
            self._err.write_line(str(msg))
            self._err.flush()

    def _spin(self):
        index = 0
        try:
            while not self._stop_event.is_set():
                with self._lock:
                    self._out.write(f'\r{self.frames[index]} {self.text}')
                    self._out.flush()
                index = (index + 1) % len(self.frames)
                self._stop_event.wait(self.interval)
        except Exception:
            logger.exception('Spinner animation failed')


# ============================================================================
# Convenience Functions
# ============================================================================

def progress(iterable: Iterable,
             total: Optional[int] = None,
             description: str = '',
             **kwargs) -> Iterator:
    """
    Wrap an iterable to display progress automatically.

    Example:
        for item in progress([1, 2, 3, 4, 5], description="Processing"):
            process(item)

    Args:
        iterable: The iterable to wrap
        total: Total items (taken from len() if omitted)
        description: Progress bar description
        **kwargs: Additional arguments for Bar
    """
    if total is None:
        try:
            total = len(iterable)  # type: ignore[arg-type]
        except TypeError:
            raise ValueError("total is required for iterables without a length") from None

    if total == 0:
        yield from iterable
        return

    with Bar(total, description=description, **kwargs) as bar:
        bar.init()
        for item in iterable:
            yield item
            bar.tick()
