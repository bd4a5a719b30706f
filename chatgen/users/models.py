# chatgen/users/models.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer
from chatgen.db.base import Base

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    # email normalizado (strip + lower); UNIQUE es el árbitro final de duplicados
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column("password", String(255), nullable=False)
