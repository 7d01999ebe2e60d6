"""SEO rule pack: title, description, canonical and robots rules."""
from pagelint.packs.seo.title_present import TitlePresent
from pagelint.packs.seo.title_length import TitleLength
from pagelint.packs.seo.meta_description_present import MetaDescriptionPresent
from pagelint.packs.seo.meta_description_length import MetaDescriptionLength
from pagelint.packs.seo.canonical_link import CanonicalLink
from pagelint.packs.seo.robots_index import RobotsIndex

RULES = [
    TitlePresent(),
    TitleLength(),
    MetaDescriptionPresent(),
    MetaDescriptionLength(),
    CanonicalLink(),
    RobotsIndex(),
]
