"""Uploads API and image URL resolution"""

import logging
from pathlib import Path
from typing import Optional, Union

from ...config import UPLOAD_URL
from ...services.api_client import ApiClient, unwrap_data
from ...shared.schemas import parse_list
from ..listings.schemas import ListingImage

logger = logging.getLogger(__name__)

MAX_IMAGES_PER_UPLOAD = 10
PLACEHOLDER_IMAGE = "/placeholder.svg?height=400&width=600"


def get_image_url(image_url: Optional[str], upload_url: Optional[str] = None) -> str:
    """Absolute URL for an image path stored on a listing"""
    if not image_url:
        return PLACEHOLDER_IMAGE

    if image_url.startswith("http"):
        return image_url

    base = (upload_url or UPLOAD_URL).rstrip("/")
    if image_url.startswith("/uploads") or image_url.startswith("/api/uploads"):
        return f"{base}{image_url}"

    return f"{base}/uploads/{image_url}"


class UploadsAPI:
    def __init__(self, client: ApiClient):
        self.client = client

    async def upload_images(self, paths: list[Union[str, Path]]) -> list[ListingImage]:
        if len(paths) > MAX_IMAGES_PER_UPLOAD:
            raise ValueError(f"At most {MAX_IMAGES_PER_UPLOAD} images can be uploaded at once")

        files = [("images", (Path(p).name, Path(p).read_bytes())) for p in paths]
        body = await self.client.request("POST", "/uploads/images", files=files)
        data = unwrap_data(body, [])
        # A single upload comes back as one object rather than a list
        if not isinstance(data, list):
            data = [data]
        logger.info(f"📤 Uploaded {len(data)} image(s)")
        return parse_list(ListingImage, data)

    async def delete_image(self, image_url: str) -> None:
        await self.client.delete("/uploads/image", json={"imageUrl": image_url})
