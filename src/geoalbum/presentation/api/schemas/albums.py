"""Album schemas for request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from geoalbum.application.dtos import AlbumDTO


class CoordinateSchema(BaseModel):
    """Latitude/longitude pair. Ranges are checked by the domain."""

    latitude: float
    longitude: float


class AlbumCreateRequest(BaseModel):
    """Request schema for creating an album."""

    coordinate: CoordinateSchema
    image_urls: list[str] = Field(..., description="1 to 10 distinct image URLs")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "coordinate": {"latitude": 35.6762, "longitude": 139.6503},
                "image_urls": [
                    "https://example.com/photos/shibuya.jpg",
                    "https://photos.s3.ap-northeast-1.amazonaws.com/9f8e7d6c",
                ],
            },
        },
    )


class AlbumImageRequest(BaseModel):
    """Request schema for adding or removing one image."""

    image_url: str


class AlbumResponse(BaseModel):
    """Response schema for an album."""

    id: str
    coordinate: CoordinateSchema
    image_urls: list[str]
    owner_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: AlbumDTO) -> "AlbumResponse":
        return cls(
            id=dto.id,
            coordinate=CoordinateSchema(latitude=dto.latitude, longitude=dto.longitude),
            image_urls=list(dto.image_urls),
            owner_id=dto.owner_id,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )
