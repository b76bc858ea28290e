"""Where: features/thumbnails/usecases/rendering.py
What: Decode an image, centre-crop it to a square, downscale and re-encode as JPEG.
Why: Keep the CPU-bound Pillow work in one synchronous function that can run off the event loop.
"""

from __future__ import annotations

from io import BytesIO

from PIL import Image, ImageOps, UnidentifiedImageError

from ..domain.models import GenerationStage, ThumbnailGenerationError

_BACKGROUND = (255, 255, 255)


def center_square_box(width: int, height: int) -> tuple[int, int, int, int]:
    """Return the ``(left, top, right, bottom)`` box of the centred square crop."""

    side = min(width, height)
    left = (width - side) // 2
    top = (height - side) // 2
    return left, top, left + side, top + side


def _to_rgb(image: Image.Image) -> Image.Image:
    """Flatten transparency onto white; JPEG has no alpha channel."""

    if image.mode == "RGB":
        return image
    if image.mode in {"RGBA", "LA"} or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        background = Image.new("RGB", rgba.size, _BACKGROUND)
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background
    return image.convert("RGB")


def render_thumbnail(data: bytes, *, size: int, quality: int) -> bytes:
    """Return JPEG bytes of a ``size`` x ``size`` centre crop of ``data``.

    Raises:
        ThumbnailGenerationError: When decoding, cropping or encoding fails.
    """

    try:
        with Image.open(BytesIO(data)) as opened:
            opened.load()
            image = ImageOps.exif_transpose(opened)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ThumbnailGenerationError(GenerationStage.DECODE, exc) from exc

    width, height = image.size
    if width <= 0 or height <= 0:
        raise ThumbnailGenerationError(GenerationStage.CROP, f"zero-dimension source {width}x{height}")

    try:
        square = image.crop(center_square_box(width, height))
        thumbnail = _to_rgb(square).resize((size, size), Image.Resampling.LANCZOS)
        buffer = BytesIO()
        thumbnail.save(buffer, format="JPEG", quality=quality, optimize=True)
    except (OSError, ValueError) as exc:
        raise ThumbnailGenerationError(GenerationStage.ENCODE, exc) from exc

    return buffer.getvalue()


__all__ = ["center_square_box", "render_thumbnail"]
