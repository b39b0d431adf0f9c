import noderange.utils.io

_DEBUG_MODE = noderange.utils.io.getenv("NODERANGE_DEBUG", "0") == "1"
_RICH_TRACEBACK = noderange.utils.io.getenv("NODERANGE_RICH_TRACEBACK", "0") == "1"
_LOG_LEVEL = noderange.utils.io.getenv("NODERANGE_LOG_LEVEL", "WARNING").upper()
_SEPARATOR = noderange.utils.io.getenv("NODERANGE_SEPARATOR", " ")


def set_debug_mode(debug_mode: bool):
    global _DEBUG_MODE
    _DEBUG_MODE = debug_mode


def set_rich_traceback(rich_traceback: bool):
    global _RICH_TRACEBACK
    _RICH_TRACEBACK = rich_traceback


def set_log_level(log_level: str):
    global _LOG_LEVEL
    _LOG_LEVEL = log_level.upper()


def get_debug_mode() -> bool:
    return _DEBUG_MODE


def get_rich_traceback() -> bool:
    return _RICH_TRACEBACK


def get_log_level() -> str:
    return _LOG_LEVEL


def get_separator() -> str:
    return _SEPARATOR
