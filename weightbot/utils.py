from typing import Callable


def color_text(text, color_code):
    return f"\033[{color_code}m{text}\033[0m"

def debug_text(text):
    return f"{color_text('DEBUG', '31')} {text}"

def console_logger(debug: bool = True, *, colored: bool = False) -> Callable[[str], None]:
    """Build a logger that prints each message line as ``info string <line>``."""

    def log(message: str) -> None:
        if not debug:
            return
        for line in message.splitlines():
            print(debug_text(line) if colored else f"info string {line}")

    return log
