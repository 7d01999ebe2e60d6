"""Structure rule pack: doctype and document shell rules."""
from pagelint.packs.structure.document_not_empty import DocumentNotEmpty
from pagelint.packs.structure.doctype import Doctype
from pagelint.packs.structure.html_lang import HtmlLang
from pagelint.packs.structure.meta_charset import MetaCharset
from pagelint.packs.structure.meta_viewport import MetaViewport

RULES = [
    DocumentNotEmpty(),
    Doctype(),
    HtmlLang(),
    MetaCharset(),
    MetaViewport(),
]
