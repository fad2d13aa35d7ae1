from pydantic import BaseModel, Field, model_validator

from wikinearby.models.nearby import MAX_SEARCH_RADIUS_M, MIN_SEARCH_RADIUS_M, NearbySearchResult


class ExtentSearchRequest(BaseModel):
    xmin: float
    ymin: float
    xmax: float
    ymax: float
    wkid: int = 3857
    limit: int = Field(default=10, ge=1, le=500)

    @model_validator(mode="after")
    def check_ordering(self):
        if self.xmin > self.xmax or self.ymin > self.ymax:
            raise ValueError("extent minimums must not exceed maximums")
        return self


class NearbyItemRead(BaseModel):
    id: int
    title: str
    x: float
    y: float
    wkid: int
    url: str | None = None
    image: str | None = None


class SearchCenterRead(BaseModel):
    latitude: float
    longitude: float


class NearbyListResponse(BaseModel):
    center: SearchCenterRead
    radius_m: int = Field(ge=MIN_SEARCH_RADIUS_M, le=MAX_SEARCH_RADIUS_M)
    items: list[NearbyItemRead]

    @classmethod
    def from_result(cls, result: NearbySearchResult) -> "NearbyListResponse":
        return cls(
            center=SearchCenterRead(
                latitude=result.query.center.latitude,
                longitude=result.query.center.longitude,
            ),
            radius_m=result.query.radius_meters,
            items=[NearbyItemRead(**item.to_dict()) for item in result.items],
        )
