from company_site.extensions import db
from .base import BaseModel


class Company(BaseModel):
    __tablename__ = "companies"

    name = db.Column(db.String(255), nullable=True)
    address = db.Column(db.String(512), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    logo = db.Column(db.String(512), nullable=True)  # URL or /assets/ path
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    theme = db.Column(db.JSON, default=dict)  # {"colors": {...}, "fonts": {...}}

    # Stored (insertion) order; display order is decided at render time
    sections = db.relationship(
        "CompanySection",
        back_populates="company",
        order_by="CompanySection.position",
        cascade="all, delete-orphan"
    )
