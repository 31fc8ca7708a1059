"""Route templates like ``/greetings/:name`` and matching against request paths."""

import re
from dataclasses import dataclass, field
from typing import Callable

_SEGMENT = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


def compile_pattern(template: str) -> re.Pattern:
    """Compile a route template into a full-match regex.

    Each ``:name`` segment becomes a named group matching one non-empty path
    segment. Everything else is matched literally.
    """
    parts = []
    pos = 0
    for m in _SEGMENT.finditer(template):
        parts.append(re.escape(template[pos : m.start()]))
        parts.append(f"(?P<{m.group(1)}>[^/]+)")
        pos = m.end()
    parts.append(re.escape(template[pos:]))
    return re.compile("".join(parts))


@dataclass(frozen=True)
class Route:
    method: str
    pattern: str
    handler: Callable
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "regex", compile_pattern(self.pattern))

    @property
    def param_names(self) -> list[str]:
        return _SEGMENT.findall(self.pattern)

    @property
    def starlette_path(self) -> str:
        """The template in ``{name}`` form, as the HTTP router expects it."""
        return _SEGMENT.sub(r"{\1}", self.pattern)

    def match(self, method: str, path: str) -> dict[str, str] | None:
        """Match an already percent-decoded path. HEAD is served by GET routes."""
        method = method.upper()
        if method == "HEAD" and self.method == "GET":
            method = "GET"
        if method != self.method:
            return None
        m = self.regex.fullmatch(path)
        if not m:
            return None
        return m.groupdict()
