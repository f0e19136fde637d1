"""SQLAlchemy ORM models for the music group aggregate."""

from datetime import date

from sqlalchemy import BigInteger, Boolean, Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.infrastructure.database.base import Base


class MusicGroupModel(Base):
    """ORM model — maps to the 'music_groups' table."""

    __tablename__ = "music_groups"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    established_year: Mapped[int] = mapped_column(Integer, nullable=False)
    genre: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    seeded: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)

    albums: Mapped[list["AlbumModel"]] = relationship(
        back_populates="music_group",
        cascade="all",
        order_by="AlbumModel.release_year",
    )
    artists: Mapped[list["ArtistModel"]] = relationship(
        back_populates="music_group",
        cascade="all",
        order_by="ArtistModel.last_name",
    )

    def __repr__(self) -> str:
        return f"<MusicGroupModel(id={self.id}, name='{self.name}')>"


class AlbumModel(Base):
    """ORM model — maps to the 'albums' table."""

    __tablename__ = "albums"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    copies_sold: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    seeded: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    music_group_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("music_groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    music_group: Mapped[MusicGroupModel] = relationship(back_populates="albums")

    def __repr__(self) -> str:
        return f"<AlbumModel(id={self.id}, name='{self.name}')>"


class ArtistModel(Base):
    """ORM model — maps to the 'artists' table."""

    __tablename__ = "artists"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(200), nullable=False)
    last_name: Mapped[str] = mapped_column(String(200), nullable=False)
    birth_day: Mapped[date | None] = mapped_column(Date, nullable=True)
    seeded: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    music_group_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("music_groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    music_group: Mapped[MusicGroupModel] = relationship(back_populates="artists")

    def __repr__(self) -> str:
        return f"<ArtistModel(id={self.id}, name='{self.first_name} {self.last_name}')>"
