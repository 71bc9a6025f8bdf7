from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

class PluginSummary(BaseModel):
    """
    Immutable domain model representing one plugin listed in the store.
    This is the core entity used throughout the application.
    """
    # Enforces immutability: once fetched, a plugin entry is never modified.
    model_config = ConfigDict(frozen=True)

    full_name: str = Field(..., description="Unique identifier of the form owner/name")
    name: str = Field(default="", description="Name of the plugin repository")
    owner: str = Field(default="", description="Login name of the plugin owner")
    description: str = Field(default="", description="Short description of the plugin")
    language: Optional[str] = Field(default=None, description="Primary language tag")
    html_url: str = Field(default="", description="Link to the plugin source repository")
    stargazers_count: int = Field(default=0, ge=0, description="Total number of stargazers")
    forks_count: int = Field(default=0, ge=0, description="Total number of forks")
    updated_at: Optional[datetime] = Field(default=None, description="Timestamp of the last update")


class PageResult(BaseModel):
    """One page of plugins as returned by a single registry request."""
    model_config = ConfigDict(frozen=True)

    items: List[PluginSummary] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)
    has_next_page: bool = False


class LoadingState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class ErrorState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    message: str


class ReadyState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["ready"] = "ready"
    items: List[PluginSummary] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)
    has_next_page: bool = False


ViewState = Annotated[Union[LoadingState, ErrorState, ReadyState], Field(discriminator="status")]


class SearchState(BaseModel):
    """
    Client-local search term and page number.
    The page here indexes the filtered subset of the loaded server page.
    """
    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    current_page: int = Field(default=1, ge=1)


class CopyFeedbackState(BaseModel):
    """Index of the card whose install command was copied most recently, if any."""
    model_config = ConfigDict(frozen=True)

    copied_index: Optional[int] = None
