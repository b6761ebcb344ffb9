from __future__ import annotations

from ..search.models import CategoryDescriptor

SERVICE_CATEGORIES: tuple[CategoryDescriptor, ...] = (
    CategoryDescriptor(name="Home Services", description="Cleaning, plumbing, electrical & more"),
    CategoryDescriptor(name="Technical Services", description="IT support, networking, repairs"),
    CategoryDescriptor(name="Freelance Digital", description="Design, development, writing"),
    CategoryDescriptor(name="Repair & Maintenance", description="Appliance, auto, furniture repair"),
    CategoryDescriptor(name="Education & Tutoring", description="Academic, language, skill training"),
    CategoryDescriptor(name="Delivery & Logistics", description="Courier, moving, transportation"),
    CategoryDescriptor(name="Health & Personal Care", description="Fitness, wellness, beauty"),
    CategoryDescriptor(name="Business & Consulting", description="Strategy, legal, finance"),
    CategoryDescriptor(name="Event & Media", description="Photography, planning, DJ"),
    CategoryDescriptor(name="AI & Automation", description="AI solutions, chatbots, automation"),
    CategoryDescriptor(name="Security Services", description="Surveillance, guards, cyber security"),
    CategoryDescriptor(name="Express Services", description="Same-day urgent services"),
)


def get_categories() -> list[CategoryDescriptor]:
    return list(SERVICE_CATEGORIES)


def category_names() -> list[str]:
    return [c.name for c in SERVICE_CATEGORIES]
