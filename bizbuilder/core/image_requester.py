"""Image requester: hero + gallery images from the multimodal model"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from bizbuilder.core.gateway import GatewayClient
from bizbuilder.core.prompts import (
    GALLERY_PROMPT_TEMPLATES,
    HERO_PROMPT_TEMPLATE,
    IMAGE_MODALITIES,
)
from bizbuilder.models.errors import ApplicationError
from bizbuilder.models.schemas import ImageSet

logger = logging.getLogger(__name__)


class ImagePrompts(BaseModel):
    """One hero prompt and the gallery prompts, in slot order"""
    hero: str
    gallery: List[str]


def build_image_prompts(business_name: str, business_type: str) -> ImagePrompts:
    return ImagePrompts(
        hero=HERO_PROMPT_TEMPLATE.format(business_name=business_name, business_type=business_type),
        gallery=[t.format(business_type=business_type) for t in GALLERY_PROMPT_TEMPLATES],
    )


def _field(obj: Any, name: str) -> Any:
    # Gateway-specific fields arrive as plain dicts on the SDK models
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_image_url(message: Any) -> Optional[str]:
    """Return message.images[0].image_url.url, or None when absent"""
    images = _field(message, "images")
    if not isinstance(images, list) or not images:
        return None
    url = _field(_field(images[0], "image_url"), "url")
    if isinstance(url, str) and url.strip():
        return url.strip()
    return None


class ImageRequester:
    """
    Generates the hero image and the gallery images.

    Calls run concurrently, bounded by ``concurrency`` (1 means strictly
    one after another, hero first). A failed or empty call leaves its
    slot out; it never fails the run.
    """

    def __init__(self, gateway: GatewayClient, model: Optional[str] = None, concurrency: Optional[int] = None):
        self.gateway = gateway
        self.model = model or gateway.config.image_model
        self.concurrency = concurrency or gateway.config.image_concurrency

    def build_request(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "extra_body": {"modalities": IMAGE_MODALITIES},
        }

    async def generate_image(self, prompt: str, slot: str = "image") -> Optional[str]:
        """Request one image. Raises ApplicationError on gateway failure."""
        response = await self.gateway.chat_completion(purpose=f"{slot} image", **self.build_request(prompt))
        if not response.choices:
            return None
        return extract_image_url(response.choices[0].message)

    async def _generate_slot(self, slot: str, prompt: str, semaphore: asyncio.Semaphore) -> Optional[str]:
        async with semaphore:
            logger.info(f"[IMAGES] Generating {slot} image...")
            try:
                url = await self.generate_image(prompt, slot=slot)
            except ApplicationError as e:
                logger.warning(f"[IMAGES] {slot} image skipped | error={e.message}")
                return None
            except Exception as e:
                logger.warning(f"[IMAGES] {slot} image skipped | error_type={type(e).__name__} | error={e}")
                return None
        if url:
            logger.info(f"[IMAGES] {slot} image generated successfully")
        else:
            logger.warning(f"[IMAGES] {slot} image skipped | reason=no image in response")
        return url

    async def request_images(self, business_name: str, business_type: str) -> ImageSet:
        prompts = build_image_prompts(business_name, business_type)
        semaphore = asyncio.Semaphore(self.concurrency)

        slots = [("hero", prompts.hero)] + [
            (f"gallery {i + 1}", prompt) for i, prompt in enumerate(prompts.gallery)
        ]
        results = await asyncio.gather(
            *(self._generate_slot(slot, prompt, semaphore) for slot, prompt in slots)
        )

        images = ImageSet(
            hero=results[0] or "",
            gallery=[url for url in results[1:] if url],
        )
        logger.info(
            f"[IMAGES] Done | hero={'yes' if images.hero else 'no'} | "
            f"gallery={len(images.gallery)}/{len(prompts.gallery)}"
        )
        return images
