import uuid
from sqlalchemy import UUID, Column, String, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.session import Base

class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)  # NULLs never collide on the unique constraint
    phone = Column(String, nullable=True)

    products = relationship("Product", back_populates="supplier")

    __table_args__ = (
        UniqueConstraint("name", name="uq_suppliers_name"),
        UniqueConstraint("email", name="uq_suppliers_email"),
    )
