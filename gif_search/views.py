"""Request-to-view mapping for each stage of the app.

Every handler takes a ``ViewRequest`` and returns either a ``ViewResult``
(template name plus the values to substitute) or a plain string, which is sent
as a text body. Handlers are pure: no I/O, no state kept between calls.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import parse_qsl, unquote

from gif_search.routing import Route

logger = logging.getLogger(__name__)

PLAIN_GREETING = "I have set the route in an Express project!"
GIF_URL = "https://media1.tenor.com/images/561c988433b8d71d378c9ccb4b719b6c/tenor.gif?itemid=10058245"


class UnknownSnapshotError(ValueError):
    pass


@dataclass(frozen=True)
class ViewRequest:
    path: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    query_params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "path_params", MappingProxyType(dict(self.path_params)))
        object.__setattr__(self, "query_params", MappingProxyType(dict(self.query_params)))

    def __hash__(self):
        return hash((self.path, frozenset(self.path_params.items()), frozenset(self.query_params.items())))


@dataclass(frozen=True)
class ViewResult:
    view_name: str
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def __hash__(self):
        return hash((self.view_name, frozenset(self.data.items())))


Reply = ViewResult | str


def plain_greeting(request: ViewRequest) -> str:
    return PLAIN_GREETING


def hello_gif(request: ViewRequest) -> ViewResult:
    return ViewResult("hello-gif", {"gifUrl": GIF_URL})


def greetings(request: ViewRequest) -> ViewResult:
    return ViewResult("greetings", {"name": request.path_params["name"]})


def home(request: ViewRequest) -> ViewResult:
    # Query values are only logged, never passed to the template
    logger.info("Query params: %s", dict(request.query_params))
    return ViewResult("home", {})


ROUTES: dict[int, tuple[Route, ...]] = {
    1: (Route("GET", "/", plain_greeting),),
    2: (
        Route("GET", "/", hello_gif),
        Route("GET", "/greetings/:name", greetings),
    ),
    3: (Route("GET", "/", home),),
}


def routes_for(snapshot: int) -> tuple[Route, ...]:
    try:
        return ROUTES[snapshot]
    except KeyError:
        raise UnknownSnapshotError(f"No routes for snapshot {snapshot!r}") from None


def resolve(method: str, url: str, snapshot: int = 3) -> Reply | None:
    """Dispatch ``method url`` against a snapshot's route table.

    The path is percent-decoded once before matching, the same way the HTTP
    router decodes it. Returns the handler's reply, or ``None`` if no route
    matches.
    """
    url, _, _ = url.partition("#")
    raw_path, _, query_string = url.partition("?")
    path = unquote(raw_path)
    query = dict(parse_qsl(query_string, keep_blank_values=True))

    for route in routes_for(snapshot):
        params = route.match(method, path)
        if params is None:
            continue
        return route.handler(ViewRequest(path=path, path_params=params, query_params=query))
    return None
