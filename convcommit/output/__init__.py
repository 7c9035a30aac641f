"""Terminal Output Formatting Package"""

import os
import re
import sys


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color(stream=sys.stdout) -> bool:
    """NO_COLOR beats FORCE_COLOR; otherwise color only on a terminal."""
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    return getattr(stream, 'isatty', lambda: False)()


def _supports_unicode(stream=sys.stdout) -> bool:
    try:
        '✓✗─'.encode(getattr(stream, 'encoding', None) or 'utf-8')
    except (UnicodeEncodeError, LookupError):
        return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

RULE = '─' if UNICODE_ENABLED else '-'

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning('⚠')} {warning(message)}" if UNICODE_ENABLED else f"[!] {message}", file=sys.stderr)


def print_debug(message: str) -> None:
    """Verbose-only diagnostics."""
    print(dim(f"  {message}"), file=sys.stderr)


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'perf': Colors.GREEN,
    'chore': Colors.DIM,
    'style': Colors.DIM,
    'ci': Colors.CYAN,
    'build': Colors.CYAN,
    'revert': Colors.YELLOW,
}


HEADER_PREFIX_RE = re.compile(r'^(?P<type>\w+)(\([^)]*\))?!?:')


def colorize_commit_type(message: str) -> str:
    """Color the `type(scope)!:` prefix of the header; body and footer are untouched."""
    header, newline, rest = message.partition('\n')
    match = HEADER_PREFIX_RE.match(header)
    color = COMMIT_TYPE_COLORS.get(match.group('type')) if match else None
    if not COLORS_ENABLED or color is None:
        return message
    prefix = match.group(0)
    return _colorize(prefix, Colors.BOLD, color) + header[len(prefix):] + newline + rest


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "RULE",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning", "print_debug",
    "colorize_commit_type", "COMMIT_TYPE_COLORS",
]
