from pathlib import Path

from fastapi import Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

from gif_search.views import Reply

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def render(request: Request, reply: Reply) -> Response:
    """Turn a handler reply into a response: strings as text, views as HTML."""
    if isinstance(reply, str):
        return PlainTextResponse(reply)
    return templates.TemplateResponse(request, f"{reply.view_name}.html", dict(reply.data))
