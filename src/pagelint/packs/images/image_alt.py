"""Rule: images without alt text (WCAG 1.1.1)."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity
from pagelint.packs._helpers import describe


class ImageAlt(Rule):
    """Images without an alt attribute.

    ``alt=""`` marks a decorative image and passes; only an absent attribute
    is a failure.
    """

    id = "image-alt"
    description = "Ensures every <img> has an alt attribute"
    severity = Severity.ERROR
    pack = "images"

    def evaluate(self, context: RuleContext) -> RuleResult:
        images = context.document.select("img")
        missing = [
            describe(img, "src", "img", i)
            for i, img in enumerate(images, start=1)
            if img.get("alt") is None
        ]

        if missing:
            return self.failed(
                f"{len(missing)} of {len(images)} image(s) missing alt attribute (WCAG 1.1.1)",
                details=missing,
            )
        return self.passed(f"All {len(images)} image(s) have an alt attribute")
