def normalize_template(template):
    return {
        "id": template.id,
        "category": template.category,
        "template_name": template.template_name,
    }
