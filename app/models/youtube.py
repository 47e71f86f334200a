from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

# --- Internal Parsing Models (YouTube Data API v3) ---

class PlaylistItemContentDetails(BaseModel):
    video_id: str = Field(alias="videoId")

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

class PlaylistItemResource(BaseModel):
    content_details: PlaylistItemContentDetails = Field(alias="contentDetails")

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

class PlaylistItemsResponse(BaseModel):
    items: List[PlaylistItemResource] = Field(default_factory=list)
    next_page_token: Optional[str] = Field(default=None, alias="nextPageToken")

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

class Thumbnail(BaseModel):
    url: str

    model_config = ConfigDict(extra='ignore')

class PlaylistSnippet(BaseModel):
    title: str = ""
    description: Optional[str] = None
    thumbnails: Dict[str, Thumbnail] = Field(default_factory=dict)

    model_config = ConfigDict(extra='ignore')

class PlaylistResource(BaseModel):
    id: str
    snippet: PlaylistSnippet

    model_config = ConfigDict(extra='ignore')

class PlaylistsResponse(BaseModel):
    items: List[PlaylistResource] = Field(default_factory=list)

    model_config = ConfigDict(extra='ignore')

class VideoContentDetails(BaseModel):
    duration: Optional[str] = None

    model_config = ConfigDict(extra='ignore')

class VideoResource(BaseModel):
    id: str
    content_details: Optional[VideoContentDetails] = Field(default=None, alias="contentDetails")

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    @property
    def duration(self) -> Optional[str]:
        return self.content_details.duration if self.content_details else None

class VideosResponse(BaseModel):
    items: List[VideoResource] = Field(default_factory=list)

    model_config = ConfigDict(extra='ignore')

# --- Core Data Models ---

class PlaylistMetadata(BaseModel):
    id: str
    title: str
    description: str = ""
    thumbnail_url: str = ""

    model_config = ConfigDict(frozen=True)
