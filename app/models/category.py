import uuid
from sqlalchemy import UUID, Column, String, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.session import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String, nullable=False)

    products = relationship("Product", back_populates="category")

    __table_args__ = (
        UniqueConstraint("name", name="uq_categories_name"),
    )
