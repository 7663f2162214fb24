"""Printf-style rendering of a MoonState.

Directives::

    %n  newline              %a  age in days (raw number)
    %t  tab                  %P  illuminated percent, two decimals
    %%  literal percent      %e  phase glyph
                             %s  mirrored phase glyph
                             %p  phase name

An unrecognized directive ends the output at that point; everything rendered
before it is returned. A lone '%' at the end of the template does the same.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from moonphase_tools.astro import MoonState
from moonphase_tools.phases import classify

logger = logging.getLogger(__name__)

_DIRECTIVES: dict[str, Callable[[MoonState], str]] = {
    'n': lambda _state: '\n',
    't': lambda _state: '\t',
    '%': lambda _state: '%',
    'a': lambda state: str(state.mage),
    'P': lambda state: f'{state.pphase * 100.0:.2f}',
    'e': lambda state: classify(state.pphase, state.mage).emoji,
    's': lambda state: classify(state.pphase, state.mage).alt_emoji,
    'p': lambda state: classify(state.pphase, state.mage).label,
}


def mprintf(fmt: str, state: MoonState) -> str:
    """Render a template against a MoonState.

    Parameters:
        fmt: Template containing literal text and %-directives.
        state: Moon phase to render.

    Returns:
        Rendered string, truncated at the first unknown directive.
    """
    out: list[str] = []
    i = 0
    n = len(fmt)
    while i < n:
        c = fmt[i]
        if c != '%':
            out.append(c)
            i += 1
            continue
        if i + 1 >= n:
            logger.warning('Template ends with a lone %%; output truncated at position %d', i)
            break
        directive = fmt[i + 1]
        render = _DIRECTIVES.get(directive)
        if render is None:
            # Kept for compatibility with mprintf: unknown directives stop output.
            logger.warning(
                'Unknown directive %%%s at position %d; output truncated', directive, i
            )
            break
        out.append(render(state))
        i += 2
    return ''.join(out)
