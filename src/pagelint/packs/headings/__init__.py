"""Headings rule pack: h1 uniqueness and heading outline."""
from pagelint.packs.headings.single_h1 import SingleH1
from pagelint.packs.headings.h2_present import H2Present
from pagelint.packs.headings.heading_order import HeadingOrder

RULES = [
    SingleH1(),
    H2Present(),
    HeadingOrder(),
]
