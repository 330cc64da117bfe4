import uuid
from sqlalchemy import UUID, Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from app.db.session import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String, nullable=False, index=True)
    category_id = Column(
        UUID(as_uuid=True),
        ForeignKey("categories.id", name="fk_products_category_id"),
        nullable=False,
        index=True,
    )
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)
    image_url = Column(String, nullable=True)
    supplier_id = Column(
        UUID(as_uuid=True),
        ForeignKey("suppliers.id", name="fk_products_supplier_id"),
        nullable=False,
        index=True,
    )

    category = relationship("Category", back_populates="products")
    supplier = relationship("Supplier", back_populates="products")
