"""API request/response schemas and the website data model"""

from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Placeholder the backend ships in place of real page scripts
DEFAULT_SCRIPT_JS = "// Add custom JavaScript here if needed"


class GenerationRequest(BaseModel):
    """POST /api/generate-website request"""
    prompt: str = Field(..., description="Free-text description of the business")

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v):
        if not v or not v.strip():
            raise ValueError("prompt must be a non-empty string")
        return v


class Service(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    icon: str


class Testimonial(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    text: str
    # The upstream schema declares a JSON number in [1, 5]; nothing here clamps it.
    rating: Union[int, float]


class WebsiteContent(BaseModel):
    """Structured copy returned by the text model's tool call"""
    model_config = ConfigDict(frozen=True)

    business_name: str
    hero_title: str
    hero_subtitle: str
    about: str
    services: List[Service]
    testimonials: List[Testimonial]
    contact: str
    business_type: str


class ImageSet(BaseModel):
    """Images produced for one site; slots that failed are simply absent"""
    hero: str = ""
    gallery: List[str] = Field(default_factory=list)


class RenderedSite(BaseModel):
    """The three files of a generated site"""
    html: str
    css: str
    js: Optional[str] = None


class GeneratedWebsite(WebsiteContent):
    """Response payload: content fields + images + rendered files"""
    images: ImageSet
    html: str
    css: str
    js: str = DEFAULT_SCRIPT_JS

    @classmethod
    def assemble(cls, content: WebsiteContent, images: ImageSet, site: RenderedSite) -> "GeneratedWebsite":
        return cls(
            **content.model_dump(),
            images=images,
            html=site.html,
            css=site.css,
            js=site.js if site.js is not None else DEFAULT_SCRIPT_JS,
        )

    def files(self) -> RenderedSite:
        return RenderedSite(html=self.html, css=self.css, js=self.js)


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
