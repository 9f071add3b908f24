"""Paginated document export from an already-rendered view.

The view itself is rasterized elsewhere (the browser, a headless renderer...);
this module only slices the bitmap into A4 pages and packs them into a PDF.
"""

from __future__ import annotations

import io
import math
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from PIL import Image, UnidentifiedImageError

from ..core.constants import PAGE_DPI, PAGE_HEIGHT_MM, PAGE_MARGIN_MM, PAGE_WIDTH_MM
from ..core.exceptions import ExportError, ExportRenderFailure, ExportTargetNotFound
from ..core.logging import get_logger

logger = get_logger(__name__)

PDF_MIMETYPE = "application/pdf"
MM_PER_INCH = 25.4
MAX_SURFACE_WIDTH = 10_000


class Rasterizer(Protocol):
    def render(self, target: Any) -> Image.Image:
        raise NotImplementedError


class ImageBytesRasterizer:
    """Target is the encoded bitmap (PNG/JPEG) the client produced from its view."""

    def __init__(self, max_width: int = MAX_SURFACE_WIDTH):
        self.max_width = max_width

    def render(self, target: bytes) -> Image.Image:
        # Surfaces may be arbitrarily tall; only the width is capped.
        limit = Image.MAX_IMAGE_PIXELS
        Image.MAX_IMAGE_PIXELS = None
        try:
            image = Image.open(io.BytesIO(target))
            if image.width > self.max_width:
                raise ExportRenderFailure(f"surface is {image.width}px wide, limit is {self.max_width}px")
            image.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise ExportRenderFailure(f"cannot decode surface image: {exc}") from exc
        finally:
            Image.MAX_IMAGE_PIXELS = limit
        return image


@dataclass(frozen=True)
class PageGeometry:
    width_mm: float = PAGE_WIDTH_MM
    height_mm: float = PAGE_HEIGHT_MM
    margin_mm: float = PAGE_MARGIN_MM
    dpi: int = PAGE_DPI

    @property
    def printable_width_mm(self) -> float:
        return self.width_mm - 2 * self.margin_mm

    @property
    def printable_height_mm(self) -> float:
        return self.height_mm - 2 * self.margin_mm

    def to_px(self, mm: float) -> int:
        return int(round(mm / MM_PER_INCH * self.dpi))

    @property
    def page_size_px(self) -> tuple[int, int]:
        return self.to_px(self.width_mm), self.to_px(self.height_mm)

    def source_page_height(self, surface_width: int) -> int:
        """Height of one page expressed in surface pixels."""
        return max(1, int(round(self.printable_height_mm * surface_width / self.printable_width_mm)))


def page_count(surface_height: int, page_height: int) -> int:
    return math.ceil(surface_height / page_height)


def slice_pages(image: Image.Image, geometry: PageGeometry) -> list[Image.Image]:
    width, height = image.size
    if width <= 0 or height <= 0:
        raise ExportRenderFailure("surface is not visible or has no content")

    rgb = image.convert("RGB")
    step = geometry.source_page_height(width)
    page_w, page_h = geometry.page_size_px
    target_w = geometry.to_px(geometry.printable_width_mm)
    offset = geometry.to_px(geometry.margin_mm)

    pages = []
    for i in range(page_count(height, step)):
        top = i * step
        chunk = rgb.crop((0, top, width, min(top + step, height)))
        scaled_h = max(1, int(round(chunk.height * target_w / width)))
        chunk = chunk.resize((target_w, scaled_h), Image.Resampling.LANCZOS)

        page = Image.new("RGB", (page_w, page_h), "white")
        page.paste(chunk, (offset, offset))
        pages.append(page)
    return pages


def pages_to_pdf(pages: list[Image.Image], *, dpi: int = PAGE_DPI) -> bytes:
    if not pages:
        return b""
    output = io.BytesIO()
    pages[0].save(output, format="PDF", save_all=True, append_images=pages[1:], resolution=float(dpi))
    return output.getvalue()


def export_document(
    rasterizer: Rasterizer,
    target: Optional[Any],
    *,
    geometry: Optional[PageGeometry] = None,
) -> bytes:
    """Render `target`, wait for the bitmap, then split it into pages."""
    geometry = geometry or PageGeometry()
    if target is None or (isinstance(target, (bytes, bytearray)) and not target):
        raise ExportTargetNotFound("no renderable surface to export")

    try:
        image = rasterizer.render(target)
    except ExportError:
        raise
    except Exception as exc:
        raise ExportRenderFailure(f"rasterizer failed: {exc}") from exc

    if image is None:
        raise ExportRenderFailure("rasterizer returned no image")

    pages = slice_pages(image, geometry)
    logger.info("document export: %sx%s px -> %s page(s)", image.width, image.height, len(pages))
    return pages_to_pdf(pages, dpi=geometry.dpi)
