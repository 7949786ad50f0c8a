import ctypes
import io
import logging
from types import SimpleNamespace

import tickbar
from tickbar import PlainWriter, TerminalModeGuard, TerminalWriter, ESC_CLEAR_LINE, ESC_HIDE_CURSOR, ESC_SHOW_CURSOR


class TtyStringIO(io.StringIO):
    def isatty(self):
        return True


def test_guard_pairs_hide_and_show():
    out = io.StringIO()
    guard = TerminalModeGuard(out)
    with guard:
        assert guard.held
        guard.acquire()
    assert not guard.held
    guard.release()
    assert out.getvalue() == ESC_HIDE_CURSOR + ESC_SHOW_CURSOR


def test_guard_restores_console_mode(monkeypatch):
    restored = []
    monkeypatch.setattr(tickbar, '_enable_escape_sequence', lambda stream: 0x3)
    monkeypatch.setattr(tickbar, '_restore_console_mode', lambda stream, mode: restored.append(mode))

    guard = TerminalModeGuard(io.StringIO())
    guard.acquire()
    guard.release()
    guard.release()
    assert restored == [0x3]


def test_writers():
    plain = io.StringIO()
    PlainWriter(plain).write_line('text')
    assert plain.getvalue() == 'text'

    terminal = io.StringIO()
    TerminalWriter(terminal).write_line('text')
    assert terminal.getvalue() == ESC_CLEAR_LINE + '\rtext'


def test_writer_selection():
    assert type(tickbar._make_writer(io.StringIO(), terminal=False)) is PlainWriter
    assert type(tickbar._make_writer(io.StringIO(), terminal=True)) is TerminalWriter


def test_is_terminal():
    assert tickbar._is_terminal(TtyStringIO())
    assert not tickbar._is_terminal(io.StringIO())
    assert not tickbar._is_terminal(object())


def test_console_columns(monkeypatch):
    monkeypatch.setattr(tickbar, '_get_console_width', lambda: 80)
    assert tickbar._console_columns() == 79
    monkeypatch.setattr(tickbar, '_get_console_width', lambda: None)
    assert tickbar._console_columns() == 0


def test_console_width_without_terminal(monkeypatch):
    monkeypatch.setattr(tickbar.sys, 'stdout', io.StringIO())
    assert tickbar._get_console_width() is None


def test_escape_sequence_is_noop_off_windows(monkeypatch):
    monkeypatch.setattr(tickbar, '_IS_WINDOWS', False)
    assert tickbar._enable_escape_sequence(TtyStringIO()) is None


def test_digit_count():
    assert tickbar._digit_count(0) == 1
    assert tickbar._digit_count(9) == 1
    assert tickbar._digit_count(10) == 2
    assert tickbar._digit_count(123456) == 6


def _fake_windll(monkeypatch, handle, set_mode_result):
    kernel32 = SimpleNamespace(
        GetStdHandle=lambda which: handle,
        SetConsoleMode=lambda h, mode: set_mode_result,
    )
    monkeypatch.setattr(tickbar, '_IS_WINDOWS', True)
    monkeypatch.setattr(ctypes, 'windll', SimpleNamespace(kernel32=kernel32), raising=False)


def test_failed_console_mode_restore_is_logged(monkeypatch, caplog):
    _fake_windll(monkeypatch, handle=7, set_mode_result=0)
    with caplog.at_level(logging.ERROR, logger='tickbar'):
        tickbar._restore_console_mode(io.StringIO(), 0x3)
    assert [r.levelname for r in caplog.records] == ['ERROR']
    assert 'SetConsoleMode failed, cannot reset console mode' in caplog.text


def test_invalid_handle_on_restore_is_logged(monkeypatch, caplog):
    _fake_windll(monkeypatch, handle=-1, set_mode_result=1)
    with caplog.at_level(logging.ERROR, logger='tickbar'):
        tickbar._restore_console_mode(io.StringIO(), 0x3)
    assert 'GetStdHandle failed, cannot reset console mode' in caplog.text


def test_successful_restore_logs_nothing(monkeypatch, caplog):
    _fake_windll(monkeypatch, handle=7, set_mode_result=1)
    with caplog.at_level(logging.ERROR, logger='tickbar'):
        tickbar._restore_console_mode(io.StringIO(), 0x3)
    assert caplog.records == []
