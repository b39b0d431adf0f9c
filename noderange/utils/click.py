import functools
import sys
import traceback

import ipdb
import rich_click
from rich.console import Console
from rich.traceback import Traceback

import noderange.utils.flags
from noderange.errors import NodeRangeError


def excepthook(type, value, tb):
    if issubclass(type, KeyboardInterrupt):
        sys.__excepthook__(type, value, tb)
        return
    if noderange.utils.flags.get_rich_traceback():
        traceback_console = Console(stderr=True)
        traceback_console.print(
            Traceback.from_exception(type, value, tb),
        )
    else:
        traceback.print_exception(type, value, tb)
    if noderange.utils.flags.get_debug_mode():
        ipdb.post_mortem(tb)


def _with_defaults(kwargs: dict) -> dict:
    context_settings = kwargs.get("context_settings", {})
    context_settings.setdefault("show_default", True)
    context_settings.setdefault("help_option_names", ["-h", "--help"])
    kwargs["context_settings"] = context_settings
    return kwargs


def reports_node_errors(f):
    """Turn node list parse failures into a one-line error and exit status 1."""

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except NodeRangeError as e:
            raise rich_click.ClickException(str(e)) from e

    return wrapper


def command(*args, parent=None, **kwargs):
    """Like `rich_click.command`, registered on `parent` when one is given.

    Commands keep their own context settings so they also work when invoked
    on their own (as `r2n` or `n2r`).
    """
    kwargs = _with_defaults(kwargs)

    def decorator(f):
        sys.excepthook = excepthook
        f = reports_node_errors(f)
        if parent is not None:
            return parent.command(*args, **kwargs)(f)
        return rich_click.command(*args, **kwargs)(f)

    return decorator


def group(*args, **kwargs):
    kwargs = _with_defaults(kwargs)

    def decorator(f):
        sys.excepthook = excepthook
        return rich_click.group(*args, **kwargs)(f)

    return decorator


def __getattr__(name):
    return getattr(rich_click, name)
