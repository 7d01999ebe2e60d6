"""Images rule pack: alt text and logo dimensions."""
from pagelint.packs.images.image_alt import ImageAlt
from pagelint.packs.images.logo_dimensions import LogoDimensions

RULES = [
    ImageAlt(),
    LogoDimensions(),
]
