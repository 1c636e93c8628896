from company_site.extensions import db
from .base import BaseModel


class CompanySection(BaseModel):
    __tablename__ = "company_sections"

    company_id = db.Column(db.String(36), db.ForeignKey("companies.id"), nullable=False, index=True)

    # Template reference; either may be missing, the page skips such sections
    category = db.Column(db.String(100), nullable=True)  # header, footer, ...
    template_name = db.Column(db.String(100), nullable=True)  # header1, footer1
    label = db.Column(db.String(100), nullable=True)  # "header 1"; derived when empty

    data = db.Column(db.JSON, default=dict)
    order = db.Column(db.Integer, default=0)
    position = db.Column(db.Integer, nullable=False, default=0)

    company = db.relationship("Company", back_populates="sections")

    __table_args__ = (
        db.Index("idx_company_section_position", "company_id", "position"),
    )
