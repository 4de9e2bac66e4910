"""FastAPI application factory."""

import logging
from pathlib import Path
from typing import Iterable, Optional

import jinja2
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from devsummit import config
from devsummit.dispatcher import SectionDispatcher, SectionMiddleware
from devsummit.routers import passthrough
from devsummit.registry import list_sections
from devsummit.services.amp_css import AmpStylesheet
from devsummit.services.policy import feature_policy
from devsummit.services.schedule import calendar_days, load_schedule

logger = logging.getLogger(__name__)


def build_templates() -> Jinja2Templates:
    """Sections, layouts and partials share one loader namespace."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader([
            str(config.SECTIONS_DIR),
            str(config.LAYOUTS_DIR),
            str(config.PARTIALS_DIR),
        ]),
        autoescape=True,
    )
    return Jinja2Templates(env=env)


def _mount_static(app: FastAPI, url: str, directory: Path, name: str) -> None:
    if not directory.is_dir():
        logger.warning("Static directory %s not found, %s not served", directory, url)
        return
    app.mount(url, StaticFiles(directory=str(directory)), name=name)
    logger.info("Serving %s from %s", url, directory)


def create_app(
    prod: Optional[bool] = None,
    schedule: Optional[dict] = None,
    sections: Optional[Iterable[str]] = None,
    stylesheet: Optional[AmpStylesheet] = None,
) -> FastAPI:
    """Build the site. Unreadable sections or schedule abort startup."""
    if prod is None:
        prod = config.IS_PROD
    if schedule is None:
        schedule = load_schedule(config.SCHEDULE_PATH)
    if sections is None:
        sections = list_sections(config.SECTIONS_DIR)
    if stylesheet is None:
        stylesheet = AmpStylesheet.from_artifact(
            config.AMP_LESS_ENTRY, config.AMP_CSS_ARTIFACT, prod=prod,
        )

    app = FastAPI(
        title="Chrome Dev Summit",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    dispatcher = SectionDispatcher(
        sections,
        schedule,
        stylesheet,
        prod=prod,
        year=config.SITE_YEAR,
        ua=config.GA_TRACKING_ID,
        conversion=config.ADWORDS_CONVERSION_ID,
        days=calendar_days(schedule),
    )
    app.add_middleware(
        SectionMiddleware,
        dispatcher=dispatcher,
        templates=build_templates(),
        policy_header=feature_policy(prod),
    )

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    app.include_router(passthrough.build_router(dispatcher.source_prefix))

    # Static files
    if prod:
        _mount_static(app, "/res", config.RES_DIR, "res")
    else:
        _mount_static(app, "/static", config.STATIC_DIR, "static")
        _mount_static(app, "/src", config.SRC_DIR, "src")

    return app
