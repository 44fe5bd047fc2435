from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class EntityBase(Base):
    """Rows identified by a database-assigned integer id."""
    __abstract__ = True

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
