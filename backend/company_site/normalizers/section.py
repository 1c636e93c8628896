from company_site.domain.company import SectionRecord, TemplateRef


def normalize_section(section):
    return {
        "id": section.id,
        "template": {
            "category": section.category,
            "template_name": section.template_name,
            "label": section.label,
        },
        "data": section.data or {},
        "order": section.order,
    }


def to_section_record(section) -> SectionRecord:
    return SectionRecord(
        template=TemplateRef(
            category=section.category,
            template_name=section.template_name,
            label=section.label,
        ),
        data=dict(section.data or {}),
        order=section.order,
        id=section.id,
    )
