"""Shared Jinja2 environment with display filters."""

import pathlib

from fastapi.templating import Jinja2Templates

from constructpro import formatting
from constructpro.config import settings
from constructpro.landing import content

TEMPLATES_DIR = pathlib.Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

templates.env.filters["budget"] = formatting.format_budget
templates.env.filters["budget_short"] = formatting.format_budget_short
templates.env.filters["date"] = formatting.format_date
templates.env.filters["project_image"] = content.project_image
templates.env.filters["project_year"] = content.project_year
templates.env.globals["project_status_badge"] = formatting.project_status_badge
templates.env.globals["inquiry_status_badge"] = formatting.inquiry_status_badge
templates.env.globals["site_name"] = settings.site_name
