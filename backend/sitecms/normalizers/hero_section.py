from .hero_slide import normalize_hero_slide

def normalize_hero_section(section, include_slides=False):
    data = {
        "id": section.id,
        "title_en": section.title_en,
        "title_ar": section.title_ar,
        "slug_en": section.slug_en,
        "slug_ar": section.slug_ar,
        "is_active": section.is_active,
        "created_at": section.created_at.isoformat() if section.created_at else None,
        "updated_at": section.updated_at.isoformat() if section.updated_at else None,
    }

    if include_slides:
        data["slides"] = [normalize_hero_slide(s) for s in section.slides]

    return data
