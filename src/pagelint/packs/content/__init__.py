"""Content rule pack: key sections, calls to action and footer."""
from pagelint.packs.content.required_sections import RequiredSections
from pagelint.packs.content.call_to_action import CallToAction
from pagelint.packs.content.footer_company_name import FooterCompanyName
from pagelint.packs.content.footer_copyright_year import FooterCopyrightYear

RULES = [
    RequiredSections(),
    CallToAction(),
    FooterCompanyName(),
    FooterCopyrightYear(),
]
