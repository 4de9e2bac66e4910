"""Section dispatcher — maps a request path to a section template and context.

``/<section>`` renders the section with the standard layout.
``/schedule/<session_id>`` renders the AMP view of one session, with the AMP
stylesheet inlined. Anything else is not ours: ``resolve`` returns ``None``
and the middleware hands the request to the next handler.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import unquote

from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from devsummit.mount import request_paths, resolve_mount_path
from devsummit.services.amp_css import AmpStylesheet

DEFAULT_LAYOUT = "devsummit"
AMP_LAYOUT = "amp"
AMP_SESSION_TEMPLATE = "_amp-session"
SUB_ROUTE_SECTION = "schedule"


@dataclass
class RenderPlan:
    """A resolved request: which template to render, with what context."""

    template: str
    context: dict


def split_path(path: str) -> tuple[str, str]:
    """Split a route path into ``(section, rest)``.

    >>> split_path("/schedule/keynote")
    ('schedule', 'keynote')
    >>> split_path("/")
    ('index', '')
    """
    trimmed = path[1:] if path.startswith("/") else path
    section, _, rest = trimmed.partition("/")
    return section or "index", rest


class SectionDispatcher:
    def __init__(
        self,
        sections: Iterable[str],
        schedule: dict,
        stylesheet: AmpStylesheet,
        *,
        prod: bool,
        year: int,
        ua: str,
        conversion: int,
        days: list,
    ) -> None:
        self.sections = frozenset(sections)
        self.sessions = schedule.get("sessions", {})
        self.stylesheet = stylesheet
        self.prod = prod
        self.year = year
        self.ua = ua
        self.conversion = conversion
        self.days = days
        self.source_prefix = "res" if prod else "src"

    def base_context(self, base: str) -> dict:
        return {
            "year": self.year,
            "prod": self.prod,
            "base": base,
            "layout": DEFAULT_LAYOUT,
            "ua": self.ua,
            "conversion": self.conversion,
            "source_prefix": self.source_prefix,
            "days": self.days,
        }

    async def resolve(
        self,
        original_path: Optional[str],
        current_path: str,
        host: str = "",
    ) -> Optional[RenderPlan]:
        """Resolve a request, or return ``None`` to defer to the next handler."""
        section, rest = split_path(unquote(current_path))
        if section not in self.sections:
            return None

        base = resolve_mount_path(original_path, current_path)
        context = self.base_context(base)

        if not rest:
            return RenderPlan(section, context)

        if section != SUB_ROUTE_SECTION:
            return None

        # reserved IDs are never served, even if present in the schedule
        session = self.sessions.get(rest)
        if session is None or rest.startswith("_"):
            return None

        css = await self.stylesheet.get()

        scheme = "https://" if self.prod else "http://"
        context.update({
            "layout": AMP_LAYOUT,
            "site_prefix": scheme + host + base,
            "session_id": rest,
            "title": session.get("name") or "",
            "time_label": session.get("time_label") or "",
            "description": session.get("description") or "",
            "payload": session,
            "styles": css,
        })
        return RenderPlan(AMP_SESSION_TEMPLATE, context)


class SectionMiddleware(BaseHTTPMiddleware):
    """Renders dispatched sections; everything else passes through untouched."""

    def __init__(
        self,
        app,
        dispatcher: SectionDispatcher,
        templates: Jinja2Templates,
        policy_header: str,
    ) -> None:
        super().__init__(app)
        self.dispatcher = dispatcher
        self.templates = templates
        self.policy_header = policy_header

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        original_path, current_path = request_paths(request.scope)
        plan = await self.dispatcher.resolve(
            original_path, current_path, request.headers.get("host", ""),
        )
        if plan is None:
            return await call_next(request)

        response = self.templates.TemplateResponse(
            request, f"{plan.template}.html", plan.context,
        )
        response.headers["Feature-Policy"] = self.policy_header
        return response
