"""Static marketing content for the public site."""

from __future__ import annotations

from typing import Any

NAVIGATION_ITEMS = [
    ("Home", "#home"),
    ("Services", "#services"),
    ("Projects", "#projects"),
    ("About", "#about"),
    ("Contact", "#contact"),
]

SERVICES = [
    {
        "title": "Commercial Construction",
        "description": "Office buildings, retail spaces, and commercial complexes built to the highest standards with modern design and functionality.",
        "features": ["Office Buildings", "Retail Spaces", "Industrial Facilities"],
    },
    {
        "title": "Residential Development",
        "description": "Beautiful homes, villas, and apartment complexes designed for modern living with attention to every detail.",
        "features": ["Luxury Villas", "Apartments", "Custom Homes"],
    },
    {
        "title": "Renovation & Remodeling",
        "description": "Transform existing spaces with our expert renovation services, bringing new life to old structures.",
        "features": ["Home Renovations", "Office Upgrades", "Restoration"],
    },
    {
        "title": "Architectural Design",
        "description": "Innovative architectural solutions that blend functionality with aesthetic appeal for exceptional results.",
        "features": ["3D Modeling", "Interior Design", "Landscape Planning"],
    },
    {
        "title": "Project Management",
        "description": "End-to-end project management ensuring timely delivery, budget adherence, and quality assurance.",
        "features": ["Timeline Management", "Quality Control", "Budget Planning"],
    },
    {
        "title": "Maintenance & Support",
        "description": "Comprehensive maintenance and support services to ensure your property remains in perfect condition.",
        "features": ["Regular Maintenance", "Emergency Repairs", "Warranty Support"],
    },
]

HIGHLIGHTS = [
    ("Experienced Leadership", "Our leadership team brings decades of combined experience in construction, architecture, and project management."),
    ("Sustainable Practices", "We prioritize environmentally responsible construction methods and materials for a sustainable future."),
    ("Advanced Technology", "Utilizing the latest construction technology and digital tools to ensure precision and efficiency."),
]

VALUES = [
    ("Excellence", "We maintain the highest standards of quality in every project we undertake."),
    ("Collaboration", "Working closely with clients to bring their vision to life through teamwork."),
    ("Precision", "Attention to detail and accuracy in every aspect of construction and design."),
    ("Innovation", "Embracing cutting-edge technology and sustainable building practices."),
]

COMPANY_STATS = [
    ("250+", "Completed Projects"),
    ("15+", "Years Experience"),
    ("50+", "Team Members"),
    ("98%", "Client Satisfaction"),
]

CONTACT_DETAILS = [
    {
        "title": "Visit Our Office",
        "subtitle": "Come see our showroom",
        "lines": ["123 Construction Avenue", "Building District, City 12345", "United States"],
    },
    {
        "title": "Call Us",
        "subtitle": "Mon-Fri 8AM-6PM",
        "lines": ["+1 (555) 123-4567", "+1 (555) 987-6543"],
    },
    {
        "title": "Email Us",
        "subtitle": "We'll respond within 24hrs",
        "lines": ["info@constructpro.com", "projects@constructpro.com"],
    },
    {
        "title": "Working Hours",
        "subtitle": "Our availability",
        "lines": [
            "Monday - Friday: 8:00 AM - 6:00 PM",
            "Saturday: 9:00 AM - 4:00 PM",
            "Sunday: Closed",
        ],
    },
]

# Contact form "Project Type" select; values double as service_type
PROJECT_TYPES = [
    ("residential", "Residential Construction"),
    ("commercial", "Commercial Construction"),
    ("villa", "Villa Construction"),
    ("apartment", "Apartment Buildings"),
    ("renovation", "Renovation & Remodeling"),
    ("interior", "Interior Design"),
]

VILLA_IMAGE = "/static/img/project-villa.svg"
APARTMENT_IMAGE = "/static/img/project-apartment.svg"
COMMERCIAL_IMAGE = "/static/img/project-commercial.svg"

FALLBACK_IMAGES = {
    "villa": VILLA_IMAGE,
    "apartment": APARTMENT_IMAGE,
    "commercial": COMMERCIAL_IMAGE,
    "residential": VILLA_IMAGE,
    "renovation": APARTMENT_IMAGE,
}


def project_image(project: Any) -> str:
    """Project's own image, else a stock image for its category."""
    if getattr(project, "image_url", None):
        return project.image_url
    category = (getattr(project, "category", None) or "").lower()
    return FALLBACK_IMAGES.get(category, VILLA_IMAGE)


def project_year(project: Any) -> str:
    """Completion date when known, otherwise the year the project was added."""
    if getattr(project, "completion_date", None):
        return str(project.completion_date)
    created_at = getattr(project, "created_at", None)
    return str(created_at.year) if created_at else ""
