from company_site.extensions import db
from .base import BaseModel


class Template(BaseModel):
    __tablename__ = "templates"

    category = db.Column(db.String(100), nullable=False, index=True)
    template_name = db.Column(db.String(100), nullable=False)

    __table_args__ = (
        db.UniqueConstraint("category", "template_name", name="uq_template_category_name"),
    )
