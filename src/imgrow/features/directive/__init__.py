# Path: `src/imgrow/features/directive/__init__.py`
# Summary: Export directive domain and use case symbols.
# Why: Provide a stable import surface for services, the CLI and tests.

from .domain.directive import (
    END_MARKER,
    ConfiguredDirective,
    DirectiveForm,
    LegacyDirective,
    split_directive,
)
from .domain.options import PRESET_VALUES, SizePreset, StyleOptions
from .usecases.blocks import (
    GalleryBlock,
    GalleryBlockNotFoundError,
    find_gallery_blocks,
    get_gallery_block,
    replace_block_source,
)
from .usecases.codec import apply_token, decode, encode, rebuild_directive_body
from .usecases.references import (
    ImageReference,
    ReferenceKind,
    extract_image_syntaxes,
    has_image_syntax,
    parse_references,
    wrap_gallery_block,
)

__all__ = [
    "END_MARKER",
    "ConfiguredDirective",
    "DirectiveForm",
    "LegacyDirective",
    "split_directive",
    "PRESET_VALUES",
    "SizePreset",
    "StyleOptions",
    "GalleryBlock",
    "GalleryBlockNotFoundError",
    "find_gallery_blocks",
    "get_gallery_block",
    "replace_block_source",
    "apply_token",
    "decode",
    "encode",
    "rebuild_directive_body",
    "ImageReference",
    "ReferenceKind",
    "extract_image_syntaxes",
    "has_image_syntax",
    "parse_references",
    "wrap_gallery_block",
]
