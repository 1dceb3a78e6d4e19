"""Seed database with the admin account and sample portfolio content."""

import asyncio
from datetime import date
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from constructpro.admin.auth import hash_password
from constructpro.config import settings
from constructpro.models.base import Base
from constructpro.models.profile import Profile
from constructpro.models.project import Project
from constructpro.models.testimonial import Testimonial


PROJECTS = [
    {
        "title": "Modern Villa Residence",
        "description": "Luxury 5-bedroom villa with contemporary design and smart home features.",
        "category": "villa",
        "location": "Beverly Hills, CA",
        "status": "completed",
        "budget": Decimal("2500000"),
        "completion_date": date(2024, 3, 15),
    },
    {
        "title": "Urban Apartment Complex",
        "description": "120-unit residential complex with modern amenities and green spaces.",
        "category": "apartment",
        "location": "Downtown Seattle, WA",
        "status": "completed",
        "budget": Decimal("15000000"),
        "completion_date": date(2023, 11, 30),
    },
    {
        "title": "Corporate Headquarters",
        "description": "12-story office building with sustainable design and LEED certification.",
        "category": "commercial",
        "location": "Austin, TX",
        "status": "completed",
        "budget": Decimal("28000000"),
        "completion_date": date(2023, 8, 20),
    },
    {
        "title": "Historic Loft Renovation",
        "description": "Conversion of a 1920s warehouse into open-plan lofts.",
        "category": "renovation",
        "location": "Portland, OR",
        "status": "in_progress",
        "budget": Decimal("4200000"),
    },
]

TESTIMONIALS = [
    {
        "client_name": "Sarah Johnson",
        "project_title": "Modern Villa Residence",
        "rating": 5,
        "testimonial": "ConstructPro delivered our dream home ahead of schedule and within budget.",
    },
    {
        "client_name": "Michael Chen",
        "project_title": "Corporate Headquarters",
        "rating": 5,
        "testimonial": "Professional, reliable, and exceptional quality. Our new office exceeded expectations.",
    },
    {
        "client_name": "Emily Rodriguez",
        "project_title": "Urban Apartment Complex",
        "rating": 4,
        "testimonial": "Great communication throughout the build and a spotless handover.",
    },
]


async def seed():
    """Seed the database with the admin profile and sample content."""
    engine = create_async_engine(settings.database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession)

    async with session_factory() as session:
        # Admin account
        if settings.admin_password:
            email = settings.admin_email.lower()
            existing = await session.execute(
                select(Profile).where(func.lower(Profile.email) == email)
            )
            if existing.scalar_one_or_none() is None:
                session.add(Profile(
                    email=email,
                    full_name="Site Administrator",
                    password_hash=hash_password(settings.admin_password),
                    is_admin=True,
                ))
                print(f"  + Admin: {email}")
            else:
                print(f"  = Admin exists: {email}")
        else:
            print("  ! ADMIN_PASSWORD not set, skipping admin account")

        # Sample content only goes into an empty database
        project_count = await session.scalar(select(func.count()).select_from(Project))
        if not project_count:
            for project_data in PROJECTS:
                session.add(Project(**project_data))
                print(f"  + Project: {project_data['title']}")

        testimonial_count = await session.scalar(select(func.count()).select_from(Testimonial))
        if not testimonial_count:
            for testimonial_data in TESTIMONIALS:
                session.add(Testimonial(**testimonial_data))
                print(f"  + Testimonial: {testimonial_data['client_name']}")

        await session.commit()

    await engine.dispose()
    print("\nSeed completed!")


if __name__ == "__main__":
    asyncio.run(seed())
