"""Pydantic DTOs (Data Transfer Objects) for reading music groups."""

from datetime import date

from pydantic import BaseModel, Field

from catalog.domain.entities import MusicGenre, MusicGroupPage


class AlbumResponse(BaseModel):
    id: str
    name: str
    release_year: int
    copies_sold: int
    seeded: bool

    model_config = {"from_attributes": True}


class ArtistResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    birth_day: date | None
    seeded: bool

    model_config = {"from_attributes": True}


class MusicGroupResponse(BaseModel):
    """Schema returned to the client — a group with its albums and artists."""

    id: str
    name: str
    established_year: int
    genre: MusicGenre
    seeded: bool
    albums: list[AlbumResponse] = Field(default_factory=list)
    artists: list[ArtistResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class PaginationResponse(BaseModel):
    page: int
    page_size: int
    page_count: int
    prev_page: int
    next_page: int
    visible_pages: int
    total: int


class MusicGroupPageResponse(BaseModel):
    """One page of the group listing."""

    items: list[MusicGroupResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: MusicGroupPage) -> "MusicGroupPageResponse":
        return cls(
            items=[MusicGroupResponse.model_validate(g, from_attributes=True) for g in page.items],
            pagination=PaginationResponse(
                page=page.page,
                page_size=page.page_size,
                page_count=page.page_count,
                prev_page=page.prev_page,
                next_page=page.next_page,
                visible_pages=page.visible_pages,
                total=page.total,
            ),
        )
