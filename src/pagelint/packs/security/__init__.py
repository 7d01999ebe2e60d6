"""Security rule pack: link safety and favicon."""
from pagelint.packs.security.safe_external_links import SafeExternalLinks
from pagelint.packs.security.favicon import Favicon

RULES = [
    SafeExternalLinks(),
    Favicon(),
]
