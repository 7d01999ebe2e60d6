"""Social rule pack: Open Graph and Twitter card metadata."""
from pagelint.packs.social.open_graph import OpenGraph
from pagelint.packs.social.twitter_card import TwitterCard

RULES = [
    OpenGraph(),
    TwitterCard(),
]
