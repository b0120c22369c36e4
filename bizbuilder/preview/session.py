"""Preview session: prompt, last generated site and copy flag for one user"""

import logging
from typing import Optional

from bizbuilder.client import EMPTY_PROMPT_MESSAGE, WebsiteGeneratorClient
from bizbuilder.models.errors import PromptValidationError
from bizbuilder.models.schemas import GeneratedWebsite
from bizbuilder.preview.export import build_clipboard_text, build_download_text
from bizbuilder.preview.renderer import EXAMPLE_PROMPTS, PageMessage, PreviewState, render_page

logger = logging.getLogger(__name__)


class PreviewSession:
    """
    Drives the generate / preview / export workflow against a backend.

    State lives only on this object: the current prompt, the last
    generated website and whether the code was just copied.
    """

    def __init__(self, client: WebsiteGeneratorClient):
        self.client = client
        self.state = PreviewState()

    @property
    def website(self) -> Optional[GeneratedWebsite]:
        return self.state.website

    def set_prompt(self, prompt: str) -> None:
        self.state.prompt = prompt

    def use_example(self, index: int) -> str:
        self.state.prompt = EXAMPLE_PROMPTS[index]
        return self.state.prompt

    async def generate(self) -> GeneratedWebsite:
        """Generate from the current prompt; blank prompts never reach the network"""
        if not self.state.prompt.strip():
            self.state.message = PageMessage(level="error", text=EMPTY_PROMPT_MESSAGE)
            raise PromptValidationError(EMPTY_PROMPT_MESSAGE)

        try:
            website = await self.client.generate(self.state.prompt)
        except PromptValidationError:
            raise
        except Exception as e:
            logger.error(f"[PREVIEW] Generation error: {e}")
            self.state.message = PageMessage(level="error", text=str(e) or "Failed to generate website")
            raise

        self.state.website = website
        self.state.copied = False
        self.state.message = PageMessage(level="success", text="Website generated successfully!")
        return website

    def download_text(self) -> Optional[str]:
        if self.state.website is None:
            return None
        return build_download_text(self.state.website.files())

    def copy_text(self) -> Optional[str]:
        if self.state.website is None:
            return None
        self.state.copied = True
        return build_clipboard_text(self.state.website.files())

    def reset_copied(self) -> None:
        self.state.copied = False

    def render(self) -> str:
        return render_page(self.state)
