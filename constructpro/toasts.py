"""Toast notifications: success/failure feedback for forms and HTMX actions."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Optional

from fastapi.responses import HTMLResponse


@dataclass(frozen=True)
class Toast:
    title: str
    description: str
    variant: str = "default"  # default | destructive


def _ok(description: str) -> Toast:
    return Toast("Success", description)


def _error(description: str) -> Toast:
    return Toast("Error", description, "destructive")


TOASTS = {
    # Public site
    "inquiry_sent": Toast(
        "Message sent!",
        "Thank you for your inquiry. We'll get back to you within 24 hours.",
    ),
    "inquiry_send_failed": _error("Failed to send message. Please try again."),
    # Projects
    "project_created": _ok("Project created successfully"),
    "project_updated": _ok("Project updated successfully"),
    "project_deleted": _ok("Project deleted successfully"),
    "project_load_failed": _error("Failed to load projects"),
    "project_save_failed": _error("Failed to save project"),
    "project_delete_failed": _error("Failed to delete project"),
    "project_not_found": _error("Project not found"),
    # Testimonials
    "testimonial_created": _ok("Testimonial created successfully"),
    "testimonial_updated": _ok("Testimonial updated successfully"),
    "testimonial_deleted": _ok("Testimonial deleted successfully"),
    "testimonial_activated": _ok("Testimonial activated successfully"),
    "testimonial_deactivated": _ok("Testimonial deactivated successfully"),
    "testimonial_load_failed": _error("Failed to load testimonials"),
    "testimonial_save_failed": _error("Failed to save testimonial"),
    "testimonial_update_failed": _error("Failed to update testimonial"),
    "testimonial_delete_failed": _error("Failed to delete testimonial"),
    "testimonial_not_found": _error("Testimonial not found"),
    # Inquiries
    "inquiry_status_updated": _ok("Inquiry status updated successfully"),
    "inquiry_load_failed": _error("Failed to load contact inquiries"),
    "inquiry_update_failed": _error("Failed to update inquiry status"),
    # Users
    "users_load_failed": _error("Failed to load users"),
    # Forms
    "form_invalid": _error("Please check the highlighted fields"),
}


def get_toast(key: Optional[str]) -> Optional[Toast]:
    """Look up a toast by key; unknown keys render nothing."""
    if not key:
        return None
    return TOASTS.get(key)


def toast_headers(key: str) -> dict:
    """HX-Trigger header that makes the page show a toast."""
    toast = TOASTS[key]
    return {"HX-Trigger": json.dumps({"showToast": asdict(toast)})}


def htmx_toast_response(key: str, content: str = "", swap: bool = True) -> HTMLResponse:
    """HTMX response carrying a toast.

    With ``swap=False`` the target is left untouched, which is what failed
    actions want: the row stays as it was.
    """
    headers = toast_headers(key)
    if not swap:
        headers["HX-Reswap"] = "none"
    return HTMLResponse(content, headers=headers)
