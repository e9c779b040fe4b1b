'''Rendering of diagnostics on the error stream.'''

import sys

from termcolor import colored

from .interpreter.exceptions import ChaiError, SourceError


def render(error: ChaiError, *, color: bool = False) -> str:
    if not color:
        return str(error)
    head = colored('Error:', 'red', attrs=['bold'])
    if isinstance(error, SourceError):
        where = colored(f'{error.source} {error.position}:', attrs=['bold'])
        return f'{head} {where} {error.message}'
    return f'{head} {error.message}'


def report_error(error: ChaiError, *, file=None) -> None:
    file = file or sys.stderr
    print(render(error, color=file.isatty()), file=file)
