"""CGT estimate summary report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from cgtcalc.formatting import format_currency
from cgtcalc.models.results import CGTResults

TEMPLATE_DIR = Path(__file__).parent / "templates"


class CGTSummaryGenerator:
    """Generates a human-readable CGT estimate summary report."""

    def __init__(self, currency: str = "AUD") -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))
        self.env.filters["money"] = lambda amount: format_currency(amount, 2, currency)
        self.env.filters["headline"] = lambda amount: format_currency(amount, 0, currency)

    def render(self, results: CGTResults) -> str:
        """Render the CGT summary report."""
        template = self.env.get_template("cgt_summary.txt")
        return template.render(res=results)
