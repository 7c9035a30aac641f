"""CLI Utility Functions"""

import os
import subprocess
import sys
import tempfile

from convcommit.output import print_warning

EDIT_HINT = "# Edit the commit message above. Lines starting with '#' are dropped."


def _strip_comments(text: str) -> str:
    return '\n'.join(line for line in text.splitlines() if not line.startswith('#')).strip()


def edit_message(message: str) -> str | None:
    """Open message in $VISUAL/$EDITOR as a .gitcommit file.

    Returns:
        The edited text without '#' lines, or None if the editor failed or left nothing
    """
    editor = os.environ.get('VISUAL') or os.environ.get('EDITOR') or ('notepad' if sys.platform == 'win32' else 'vi')

    try:
        with tempfile.NamedTemporaryFile(mode='w', prefix='convcommit-', suffix='.gitcommit', delete=False, encoding='utf-8') as tmp:
            tmp.write(f"{message}\n\n{EDIT_HINT}\n")
    except OSError as e:
        print_warning(f"Could not create temp file for editing: {e}")
        return None
    try:
        subprocess.run([editor, tmp.name], check=True)
        with open(tmp.name, encoding='utf-8') as f:
            return _strip_comments(f.read()) or None
    except (subprocess.CalledProcessError, OSError):
        return None
    finally:
        try:
            os.unlink(tmp.name)
        except OSError as e:
            print_warning(f"Could not delete temp file {tmp.name}: {e}")


def is_interactive_mode(args) -> bool:
    """Interactive unless a type or title flag was supplied, or -i forces it."""
    return args.interactive or (not args.type and not args.title)
