# services/voter_type_engine/share.py
# Builds share captions, result page metadata and social card payloads.

from typing import List, Optional
from urllib.parse import urlencode

from pydantic import BaseModel

from .models import ResultType, QuizDataset, QuizMeta, QuizResult
from .result_images import get_result_image

OG_IMAGE_PATH = "/api/v1/og"
SHARE_CARD_WIDTH = 1200
SHARE_CARD_HEIGHT = 630
DEFAULT_ACCENT_COLOR = "#6366f1"


class MetadataImage(BaseModel):
    url: str

class OpenGraphMetadata(BaseModel):
    title: str
    description: str
    images: List[MetadataImage]

class TwitterMetadata(BaseModel):
    card: str = "summary_large_image"
    title: str
    description: str
    images: List[str]

class ResultPageMetadata(BaseModel):
    title: str
    description: str
    open_graph: OpenGraphMetadata
    twitter: TwitterMetadata

class ShareCard(BaseModel):
    result_type: ResultType
    width: int = SHARE_CARD_WIDTH
    height: int = SHARE_CARD_HEIGHT
    hashtag: str
    title_bn: str
    title_en_tag: str
    tagline: str
    accent_color: str
    image_url: str
    image_alt: str


def absolute_url(path: str, site_url: Optional[str] = None) -> str:
    if not site_url:
        return path
    return f"{site_url.rstrip('/')}{path}"


def build_share_caption(result: QuizResult, meta: QuizMeta) -> str:
    """Caption text copied to the clipboard: the result's template followed by the hashtags."""
    return f"{result.share_caption_template} {' '.join(meta.share_hashtags)}"


def og_image_url(result_type: ResultType, site_url: Optional[str] = None) -> str:
    return absolute_url(f"{OG_IMAGE_PATH}?{urlencode({'type': result_type.value})}", site_url)


def build_result_metadata(
    result_type: ResultType,
    dataset: QuizDataset,
    site_url: Optional[str] = None,
) -> ResultPageMetadata:
    """Title, description, Open Graph and Twitter card data for a result page."""
    result = dataset.result_for(result_type)
    image_url = og_image_url(result_type, site_url)

    return ResultPageMetadata(
        title=f"{result.title_bn} — {dataset.meta.title}",
        description=result.roast1,
        open_graph=OpenGraphMetadata(
            title=result.title_bn,
            description=result.roast1,
            images=[MetadataImage(url=image_url)],
        ),
        twitter=TwitterMetadata(
            title=result.title_bn,
            description=result.roast1,
            images=[image_url],
        ),
    )


def build_share_card(
    result_type: ResultType,
    dataset: QuizDataset,
    site_url: Optional[str] = None,
) -> ShareCard:
    """Everything the social preview renderer needs to draw a result card."""
    result = dataset.result_for(result_type)
    image = get_result_image(result_type.value)

    return ShareCard(
        result_type=result_type,
        hashtag=dataset.meta.share_hashtags[0],
        title_bn=result.title_bn,
        title_en_tag=result.title_en_tag,
        tagline=result.roast1,
        accent_color=result.accent_color or DEFAULT_ACCENT_COLOR,
        image_url=absolute_url(image.src, site_url),
        image_alt=image.alt_bn,
    )
